"""
Media Upload Service

Sends uploaded files to Cloudinary and hands back the public HTTPS URL.
Credentials are configured once at startup; the SDK call is blocking, so it
runs on the default thread pool executor.
"""
import asyncio
import io
import logging
from functools import partial
from typing import NamedTuple, Optional

import cloudinary
import cloudinary.uploader

from zumba_api.config import Settings

logger = logging.getLogger(__name__)


class MediaUploadError(Exception):
    """Raised when the media host rejects or fails an upload."""


class UploadResult(NamedTuple):
    url: str
    public_id: str


class MediaUploader:
    """Cloudinary-backed uploader."""

    def __init__(self, cloud_name: str, api_key: str, api_secret: str, folder: str):
        self.folder = folder
        cloudinary.config(
            cloud_name=cloud_name,
            api_key=api_key,
            api_secret=api_secret,
            secure=True,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "MediaUploader":
        return cls(
            cloud_name=settings.cloudinary_cloud_name,
            api_key=settings.cloudinary_api_key,
            api_secret=settings.cloudinary_api_secret,
            folder=settings.cloudinary_folder,
        )

    def _upload_sync(self, data: bytes, folder: str) -> dict:
        return cloudinary.uploader.upload(io.BytesIO(data), folder=folder, resource_type="auto")

    async def upload(self, data: bytes, folder: Optional[str] = None) -> UploadResult:
        """
        Upload a file and return its public URL and Cloudinary public id.

        Args:
            data: Raw file contents
            folder: Logical folder on the media host (defaults to the configured one)

        Raises:
            MediaUploadError: If the upload fails or the response has no URL
        """
        loop = asyncio.get_running_loop()
        try:
            result = await loop.run_in_executor(
                None, partial(self._upload_sync, data, folder or self.folder)
            )
        except Exception as e:
            raise MediaUploadError(f"Cloudinary upload failed: {e}") from e

        url = result.get("secure_url") or result.get("url")
        if not url:
            raise MediaUploadError("Cloudinary response did not include a URL")

        logger.info(f"Uploaded {len(data)} bytes to Cloudinary: {result.get('public_id')}")
        return UploadResult(url=url, public_id=result.get("public_id", ""))
