"""
Tests for the Cloudinary media uploader.
"""
from __future__ import annotations

from unittest.mock import patch

import pytest

from zumba_api.services.media import MediaUploader, MediaUploadError, UploadResult


@pytest.fixture
def uploader():
    return MediaUploader(cloud_name="demo", api_key="key", api_secret="secret", folder="zumba-gallery")


class TestMediaUploader:

    @pytest.mark.asyncio
    async def test_returns_secure_url_and_public_id(self, uploader):
        result = {
            "secure_url": "https://res.cloudinary.com/demo/image/upload/v1/zumba-gallery/abc.jpg",
            "url": "http://res.cloudinary.com/demo/image/upload/v1/zumba-gallery/abc.jpg",
            "public_id": "zumba-gallery/abc",
        }
        with patch("zumba_api.services.media.cloudinary.uploader.upload", return_value=result) as upload:
            uploaded = await uploader.upload(b"image-bytes")

        assert uploaded == UploadResult(url=result["secure_url"], public_id="zumba-gallery/abc")
        stream = upload.call_args.args[0]
        assert stream.read() == b"image-bytes"
        assert upload.call_args.kwargs["folder"] == "zumba-gallery"

    @pytest.mark.asyncio
    async def test_custom_folder(self, uploader):
        with patch(
            "zumba_api.services.media.cloudinary.uploader.upload",
            return_value={"secure_url": "https://x", "public_id": "reviews/x"},
        ) as upload:
            await uploader.upload(b"video", folder="reviews")

        assert upload.call_args.kwargs["folder"] == "reviews"

    @pytest.mark.asyncio
    async def test_sdk_error_is_wrapped(self, uploader):
        with patch(
            "zumba_api.services.media.cloudinary.uploader.upload",
            side_effect=RuntimeError("Invalid api_key"),
        ):
            with pytest.raises(MediaUploadError):
                await uploader.upload(b"image-bytes")

    @pytest.mark.asyncio
    async def test_response_without_url_is_an_error(self, uploader):
        with patch("zumba_api.services.media.cloudinary.uploader.upload", return_value={"public_id": "x"}):
            with pytest.raises(MediaUploadError):
                await uploader.upload(b"image-bytes")
