"""Create organizations, media_kits and media_kit_instructions

Revision ID: 0001_initial
Revises: None
Create Date: 2026-10-19 00:00:00.000000
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '0001_initial'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'organizations',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('external_org_id', sa.String(length=255), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=True),
        sa.Column('share_token', sa.String(length=36), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.UniqueConstraint('share_token', name='uq_organizations_share_token'),
    )
    op.create_index('ix_organizations_external_org_id', 'organizations', ['external_org_id'], unique=True)

    op.create_table(
        'media_kits',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('organization_id', sa.String(length=36), sa.ForeignKey('organizations.id'), nullable=True),
        sa.Column('external_org_id', sa.String(length=255), nullable=True),
        sa.Column('title', sa.Text(), nullable=True),
        sa.Column('icon_url', sa.Text(), nullable=True),
        sa.Column('mdx_page_content', sa.Text(), nullable=True),
        sa.Column('jsx_page_content', sa.Text(), nullable=True),
        sa.Column('json_page_content', sa.JSON(), nullable=True),
        sa.Column('notion_page_content', sa.Text(), nullable=True),
        sa.Column('parent_media_kit_id', sa.String(length=36), sa.ForeignKey('media_kits.id'), nullable=True),
        sa.Column('status', sa.String(length=20), nullable=False),
        sa.Column('denial_reason', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
    )
    op.create_index('ix_media_kits_organization_id', 'media_kits', ['organization_id'])
    op.create_index('ix_media_kits_external_org_id', 'media_kits', ['external_org_id'])
    op.create_index('ix_media_kits_status', 'media_kits', ['status'])

    op.create_table(
        'media_kit_instructions',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('media_kit_id', sa.String(length=36),
                  sa.ForeignKey('media_kits.id', ondelete='CASCADE'), nullable=False),
        sa.Column('instruction', sa.Text(), nullable=False),
        sa.Column('instruction_type', sa.String(length=20), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
    )
    op.create_index('ix_media_kit_instructions_media_kit_id', 'media_kit_instructions', ['media_kit_id'])


def downgrade() -> None:
    op.drop_index('ix_media_kit_instructions_media_kit_id', table_name='media_kit_instructions')
    op.drop_table('media_kit_instructions')
    op.drop_index('ix_media_kits_status', table_name='media_kits')
    op.drop_index('ix_media_kits_external_org_id', table_name='media_kits')
    op.drop_index('ix_media_kits_organization_id', table_name='media_kits')
    op.drop_table('media_kits')
    op.drop_index('ix_organizations_external_org_id', table_name='organizations')
    op.drop_table('organizations')
