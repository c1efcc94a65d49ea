from ..extensions import db
from .base import new_uuid, utcnow, isoformat

class MediaKitInstruction(db.Model):
    __tablename__ = "media_kit_instructions"
    id = db.Column(db.String(36), primary_key=True, default=new_uuid)
    media_kit_id = db.Column(db.String(36), db.ForeignKey("media_kits.id", ondelete="CASCADE"), nullable=False, index=True)
    instruction = db.Column(db.Text, nullable=False)
    # initial/edit
    instruction_type = db.Column(db.String(20), nullable=False)
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow, server_default=db.func.now())

    media_kit = db.relationship("MediaKit", back_populates="instructions")

    def to_dict(self):
        return {
            "id": self.id,
            "mediaKitId": self.media_kit_id,
            "instruction": self.instruction,
            "instructionType": self.instruction_type,
            "createdAt": isoformat(self.created_at),
        }
