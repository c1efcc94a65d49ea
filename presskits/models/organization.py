from ..extensions import db
from .base import TimestampMixin, new_uuid, isoformat

class Organization(db.Model, TimestampMixin):
    __tablename__ = "organizations"
    id = db.Column(db.String(36), primary_key=True, default=new_uuid)
    # reference from the external identity provider
    external_org_id = db.Column(db.String(255), nullable=False, unique=True, index=True)
    name = db.Column(db.String(255))
    # generated once, never rotated implicitly
    share_token = db.Column(db.String(36), nullable=False, unique=True, default=new_uuid)

    media_kits = db.relationship("MediaKit", back_populates="organization", lazy="dynamic")

    def to_dict(self):
        return {
            "id": self.id,
            "orgId": self.external_org_id,
            "name": self.name,
            "shareToken": self.share_token,
            "createdAt": isoformat(self.created_at),
            "updatedAt": isoformat(self.updated_at),
        }

    def __repr__(self) -> str:
        return f"<Organization id={self.id} org_id={self.external_org_id!r}>"
