from ..extensions import db
from .base import TimestampMixin, new_uuid, isoformat

# copied verbatim onto a new revision by copy-on-edit
CONTENT_FIELDS = (
    "title",
    "icon_url",
    "mdx_page_content",
    "jsx_page_content",
    "json_page_content",
    "notion_page_content",
)


class MediaKit(db.Model, TimestampMixin):
    __tablename__ = "media_kits"

    id = db.Column(db.String(36), primary_key=True, default=new_uuid)
    organization_id = db.Column(db.String(36), db.ForeignKey("organizations.id"), index=True)
    # transitional alias of Organization.external_org_id, lookups match either column
    external_org_id = db.Column(db.String(255), index=True)

    title = db.Column(db.Text)
    icon_url = db.Column(db.Text)
    mdx_page_content = db.Column(db.Text)
    jsx_page_content = db.Column(db.Text)
    json_page_content = db.Column(db.JSON)
    notion_page_content = db.Column(db.Text)

    parent_media_kit_id = db.Column(db.String(36), db.ForeignKey("media_kits.id"))
    # drafted/generating/validated/denied/archived
    status = db.Column(db.String(20), nullable=False, index=True)
    denial_reason = db.Column(db.Text)

    organization = db.relationship("Organization", back_populates="media_kits")
    parent = db.relationship("MediaKit", remote_side=[id], foreign_keys=[parent_media_kit_id])
    instructions = db.relationship(
        "MediaKitInstruction",
        back_populates="media_kit",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="MediaKitInstruction.created_at",
    )

    @classmethod
    def for_org(cls, org=None, organization_id=None, external_org_id=None):
        """Filter clause matching kits owned through either organization column."""
        if org is not None:
            organization_id = org.id
            external_org_id = org.external_org_id
        clauses = []
        if organization_id:
            clauses.append(cls.organization_id == organization_id)
        if external_org_id:
            clauses.append(cls.external_org_id == external_org_id)
        if not clauses:
            raise ValueError("organization_id or external_org_id required")
        return db.or_(*clauses)

    def content_copy(self):
        return {field: getattr(self, field) for field in CONTENT_FIELDS}

    def to_dict(self):
        return {
            "id": self.id,
            "orgId": self.external_org_id,
            "organizationId": self.organization_id,
            "title": self.title,
            "iconUrl": self.icon_url,
            "mdxPageContent": self.mdx_page_content,
            "jsxPageContent": self.jsx_page_content,
            "jsonPageContent": self.json_page_content,
            "notionPageContent": self.notion_page_content,
            "parentMediaKitId": self.parent_media_kit_id,
            "status": self.status,
            "denialReason": self.denial_reason,
            "createdAt": isoformat(self.created_at),
            "updatedAt": isoformat(self.updated_at),
        }

    def __repr__(self) -> str:
        return f"<MediaKit id={self.id} status={self.status}>"
