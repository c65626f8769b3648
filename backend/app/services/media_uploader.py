"""
Media Uploader.

Pushes user files (profile photos, resumes) to Cloudinary through the
official SDK and returns the public HTTPS URL.
"""

import base64
from dataclasses import dataclass
from typing import Optional, Protocol

import cloudinary.uploader
from cloudinary.exceptions import Error as CloudinaryError

from app.core.config import settings
from app.core.errors import UploadError
from app.core.logger import get_logger

logger = get_logger("media")


@dataclass(frozen=True)
class FileUpload:
    """A file received from a multipart request, fully read into memory."""

    filename: str
    content_type: str
    content: bytes

    def to_data_uri(self) -> str:
        encoded = base64.b64encode(self.content).decode("ascii")
        return f"data:{self.content_type};base64,{encoded}"


@dataclass(frozen=True)
class UploadResult:
    url: str
    public_id: Optional[str] = None


class MediaUploader(Protocol):
    def upload(self, file: FileUpload, *, resource_type: str = "image") -> UploadResult: ...


class CloudinaryUploader:
    """Uploads to Cloudinary. One instance per process."""

    def __init__(
        self,
        *,
        cloud_name: str,
        api_key: str,
        api_secret: str,
        folder: str = "",
        timeout: float = 30.0,
    ):
        self.cloud_name = cloud_name
        self.api_key = api_key
        self.api_secret = api_secret
        self.folder = folder
        self.timeout = timeout

    @classmethod
    def from_settings(cls) -> "CloudinaryUploader":
        return cls(
            cloud_name=settings.CLOUDINARY_CLOUD_NAME,
            api_key=settings.CLOUDINARY_API_KEY,
            api_secret=settings.CLOUDINARY_API_SECRET,
            folder=settings.CLOUDINARY_FOLDER,
            timeout=settings.UPLOAD_TIMEOUT_SECONDS,
        )

    def upload(self, file: FileUpload, *, resource_type: str = "image") -> UploadResult:
        """
        Upload a file and return its secure URL.

        Args:
            file: The file to upload, sent as a data URI
            resource_type: "image", "raw" or "auto" (lets Cloudinary detect
                documents such as PDF resumes)

        Raises:
            UploadError: on missing credentials, an SDK/API error or a
                response without ``secure_url``
        """
        if not (self.cloud_name and self.api_key and self.api_secret):
            logger.error("Cloudinary credentials are not configured")
            raise UploadError("Media upload is not configured")

        options = {
            "resource_type": resource_type,
            "cloud_name": self.cloud_name,
            "api_key": self.api_key,
            "api_secret": self.api_secret,
            "timeout": self.timeout,
        }
        if self.folder:
            options["folder"] = self.folder

        try:
            response = cloudinary.uploader.upload(file.to_data_uri(), **options)
        except CloudinaryError as e:
            logger.error(f"Cloudinary upload of {file.filename!r} failed: {e}")
            raise UploadError("Failed to upload file to Cloudinary") from e

        secure_url = response.get("secure_url") if isinstance(response, dict) else None
        if not secure_url:
            logger.error(f"Cloudinary response for {file.filename!r} has no secure_url")
            raise UploadError("Failed to upload file to Cloudinary")

        return UploadResult(url=secure_url, public_id=response.get("public_id"))

    def close(self) -> None:
        """The SDK keeps no per-instance connection; nothing to release."""
