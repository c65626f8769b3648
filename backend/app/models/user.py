import enum
import uuid
from datetime import datetime, timezone

from sqlalchemy import JSON, Column, DateTime, Enum, String

from app.db.base import Base


class UserRole(str, enum.Enum):
    SEEKER = "seeker"
    RECRUITER = "recruiter"


def _new_id() -> str:
    return uuid.uuid4().hex


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(Base):
    """Registered account of a job seeker or a recruiter."""

    __tablename__ = "users"

    id = Column(String(32), primary_key=True, default=_new_id)
    fullname = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    phone_number = Column(String, nullable=False)
    hashed_password = Column(String, nullable=False)
    role = Column(Enum(UserRole, values_callable=lambda e: [m.value for m in e]), nullable=False)

    # Profile document, created lazily on first update
    # {"bio": str, "skills": [str], "profile_photo_url": str,
    #  "resume_url": str, "resume_original_filename": str}
    profile = Column(JSON, nullable=True)

    created_at = Column(DateTime(timezone=True), default=_utcnow)
    updated_at = Column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow)
