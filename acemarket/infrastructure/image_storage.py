"""Cloudinary image storage.

Payloads are base64 data URIs (``data:image/png;base64,...``) as sent by the
client; the Cloudinary uploader accepts them directly.
"""

from typing import Protocol

import cloudinary.exceptions
import cloudinary.uploader
import structlog

from acemarket.config import Settings
from acemarket.core.exceptions import ImageUploadError

logger = structlog.get_logger(__name__)


class ImageStorage(Protocol):
    """Stores an image payload and returns its durable URL."""

    def upload(self, payload: str) -> str:
        ...


class CloudinaryImageStorage:
    """Uploads through the Cloudinary SDK with this instance's credentials."""

    def __init__(
        self,
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
    def from_settings(cls, settings: Settings) -> "CloudinaryImageStorage":
        cloud_name, api_key, api_secret = settings.cloudinary_credentials()
        return cls(
            cloud_name=cloud_name,
            api_key=api_key,
            api_secret=api_secret,
            folder=settings.CLOUDINARY_FOLDER,
            timeout=settings.IMAGE_UPLOAD_TIMEOUT_SECONDS,
        )

    def upload_options(self) -> dict:
        options = {
            "resource_type": "image",
            "cloud_name": self.cloud_name,
            "api_key": self.api_key,
            "api_secret": self.api_secret,
            "timeout": self.timeout,
        }
        if self.folder:
            options["folder"] = self.folder
        return options

    def upload(self, payload: str) -> str:
        if not (self.cloud_name and self.api_key and self.api_secret):
            logger.error("Image upload attempted without Cloudinary credentials")
            raise ImageUploadError("Image storage is not configured")

        try:
            result = cloudinary.uploader.upload(payload, **self.upload_options())
        except cloudinary.exceptions.Error as e:
            logger.error("Cloudinary upload failed", error=str(e))
            raise ImageUploadError() from e

        secure_url = result.get("secure_url")
        if not secure_url:
            logger.error("Cloudinary response missing secure_url", keys=sorted(result))
            raise ImageUploadError()

        logger.info("Image uploaded", public_id=result.get("public_id"))
        return secure_url
