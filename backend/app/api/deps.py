"""
Shared FastAPI dependencies.

Session middleware (cookie -> user id), service wiring and cookie helpers.
"""

from typing import Optional

from fastapi import Cookie, Depends, Request, Response, UploadFile
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.errors import UnauthorizedError
from app.core.security import SESSION_COOKIE_NAME, get_token_subject, session_max_age
from app.db.session import get_db
from app.services import FileUpload, MediaUploader, UserService


def get_media_uploader(request: Request) -> MediaUploader:
    """The uploader built once in the app lifespan."""
    return request.app.state.media_uploader


def get_user_service(
    db: Session = Depends(get_db),
    uploader: MediaUploader = Depends(get_media_uploader),
) -> UserService:
    return UserService(db=db, uploader=uploader)


def get_current_user_id(
    token: Optional[str] = Cookie(default=None, alias=SESSION_COOKIE_NAME),
) -> str:
    """
    Resolve the authenticated user id from the ``token`` cookie.

    Raises UnauthorizedError when the cookie is missing, tampered or expired.
    """
    if not token:
        raise UnauthorizedError("User not authenticated")

    user_id = get_token_subject(token)
    if not user_id:
        raise UnauthorizedError("Invalid token")

    return user_id


def read_upload(file: Optional[UploadFile]) -> Optional[FileUpload]:
    """Read a multipart file into memory; None when nothing was sent."""
    if file is None or not file.filename:
        return None
    return FileUpload(
        filename=file.filename,
        content_type=file.content_type or "application/octet-stream",
        content=file.file.read(),
    )


def set_session_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        SESSION_COOKIE_NAME,
        token,
        max_age=session_max_age(),
        httponly=True,
        samesite="strict",
        secure=settings.COOKIE_SECURE,
    )


def clear_session_cookie(response: Response) -> None:
    response.set_cookie(
        SESSION_COOKIE_NAME,
        "",
        max_age=0,
        httponly=True,
        samesite="strict",
        secure=settings.COOKIE_SECURE,
    )
