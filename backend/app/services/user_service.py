"""
User Service.

Registration, login and profile updates. Works on a SQLAlchemy session and a
media uploader handed in by the caller; knows nothing about HTTP.
"""

from dataclasses import dataclass
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.errors import AuthenticationError, ConflictError, NotFoundError, ValidationError
from app.core.logger import get_logger
from app.core.security import (
    create_access_token,
    dummy_verify,
    get_password_hash,
    verify_password,
)
from app.models import User
from app.schemas import LoginRequest, ProfileUpdateRequest, RegisterRequest
from app.services.media_uploader import FileUpload, MediaUploader

logger = get_logger("users")

BAD_CREDENTIALS = "Incorrect email or password."
ROLE_MISMATCH = "Account doesn't exist with current role."
EMAIL_TAKEN = "User already exists with this email"


@dataclass
class LoginResult:
    user: User
    token: str


class UserService:
    def __init__(self, *, db: Session, uploader: MediaUploader):
        self.db = db
        self.uploader = uploader

    # --------- Lookups ----------
    def get_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email).first()

    def get_by_id(self, user_id: str) -> Optional[User]:
        return self.db.get(User, user_id)

    def require_user(self, user_id: str) -> User:
        user = self.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found.")
        return user

    def _commit_unique_email(self) -> None:
        """Commit, turning a lost race on the unique email index into a conflict."""
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.info("Email claimed by a concurrent request")
            raise ConflictError(EMAIL_TAKEN) from e

    # --------- Core operations ----------
    def register(self, req: RegisterRequest, photo: Optional[FileUpload]) -> User:
        """
        Create an account with a profile photo.

        The email is checked before the photo is uploaded so a duplicate
        registration never leaves an orphan file on the media host.
        """
        if photo is None:
            raise ValidationError("No file uploaded")
        if not photo.content:
            raise ValidationError("Failed to process file")

        if self.get_by_email(req.email):
            logger.info("Registration rejected: email already in use")
            raise ConflictError(EMAIL_TAKEN)

        uploaded = self.uploader.upload(photo, resource_type="image")

        user = User(
            fullname=req.fullname,
            email=req.email,
            phone_number=req.phone_number,
            hashed_password=get_password_hash(req.password),
            role=req.role,
            profile={"skills": [], "profile_photo_url": uploaded.url},
        )
        self.db.add(user)
        self._commit_unique_email()
        self.db.refresh(user)

        logger.info(f"Registered {user.role.value} account {user.id}")
        return user

    def login(self, req: LoginRequest) -> LoginResult:
        user = self.get_by_email(req.email)
        if user is None:
            dummy_verify()
            logger.warning("Login failed: bad credentials")
            raise AuthenticationError(BAD_CREDENTIALS)
        if not verify_password(req.password, user.hashed_password):
            logger.warning(f"Login failed: bad credentials for {user.id}")
            raise AuthenticationError(BAD_CREDENTIALS)

        if user.role != req.role:
            logger.warning(f"Login failed: role mismatch for {user.id}")
            raise AuthenticationError(ROLE_MISMATCH)

        token = create_access_token(user.id)
        logger.info(f"Login succeeded for {user.id}")
        return LoginResult(user=user, token=token)

    def update_profile(
        self,
        user: User,
        req: ProfileUpdateRequest,
        resume: Optional[FileUpload] = None,
    ) -> User:
        """
        Apply a partial profile update.

        Only fields set on ``req`` change. The resume is uploaded before any
        field is touched, so a failed upload leaves the user as it was.
        """
        if req.email is not None and req.email != user.email:
            owner = self.get_by_email(req.email)
            if owner is not None and owner.id != user.id:
                raise ConflictError(EMAIL_TAKEN)

        uploaded = None
        if resume is not None and resume.content:
            uploaded = self.uploader.upload(resume, resource_type="auto")

        if req.fullname is not None:
            user.fullname = req.fullname
        if req.email is not None:
            user.email = req.email
        if req.phone_number is not None:
            user.phone_number = req.phone_number

        # Reassign the whole document so SQLAlchemy tracks the JSON change
        profile = dict(user.profile or {})
        if req.bio is not None:
            profile["bio"] = req.bio
        if req.skills is not None:
            profile["skills"] = list(req.skills)
        if uploaded is not None:
            profile["resume_url"] = uploaded.url
            profile["resume_original_filename"] = resume.filename
        user.profile = profile

        self._commit_unique_email()
        self.db.refresh(user)

        logger.info(f"Updated profile of {user.id}")
        return user
