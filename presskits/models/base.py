import uuid
from datetime import datetime, timezone

from ..extensions import db


def utcnow():
    # naive UTC, matching what the DateTime columns hand back
    return datetime.now(timezone.utc).replace(tzinfo=None)


def new_uuid():
    return str(uuid.uuid4())


def isoformat(value):
    return value.isoformat() if value is not None else None


class TimestampMixin:
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow, server_default=db.func.now())
    updated_at = db.Column(db.DateTime, nullable=False, default=utcnow, server_default=db.func.now(), onupdate=utcnow)
