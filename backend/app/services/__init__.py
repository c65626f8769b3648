from app.services.media_uploader import (
    CloudinaryUploader,
    FileUpload,
    MediaUploader,
    UploadResult,
)
from app.services.user_service import LoginResult, UserService

__all__ = [
    "CloudinaryUploader",
    "FileUpload",
    "MediaUploader",
    "UploadResult",
    "LoginResult",
    "UserService",
]
