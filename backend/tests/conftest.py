"""
Shared fixtures for the API tests.

The app runs in-process through httpx's ASGI transport. The document store is
an in-memory Mongo and the media host / mail relay are replaced with fakes via
dependency overrides, so no network access is needed.
"""
from __future__ import annotations

from typing import Optional

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient

from zumba_api.config import Settings
from zumba_api.database import get_db
from zumba_api.dependencies import get_mailer, get_media_uploader
from zumba_api.main import app
from zumba_api.models import ContactInquiry
from zumba_api.services.mailer import ContactMailer
from zumba_api.services.media import MediaUploadError, UploadResult


class FakeMediaUploader:
    """Records uploads and returns predictable Cloudinary-style URLs."""

    def __init__(self):
        self.uploads: list[tuple[bytes, Optional[str]]] = []
        self.fail = False

    async def upload(self, data: bytes, folder: Optional[str] = None) -> UploadResult:
        if self.fail:
            raise MediaUploadError("Cloudinary upload failed: simulated outage")
        self.uploads.append((data, folder))
        n = len(self.uploads)
        return UploadResult(
            url=f"https://res.cloudinary.com/demo/image/upload/v1/zumba-gallery/img{n}.jpg",
            public_id=f"zumba-gallery/img{n}",
        )


class FakeMailer:
    """Stands in for ContactMailer with a configurable outcome."""

    def __init__(self, succeed: bool = True):
        self.succeed = succeed
        self.notified: list[ContactInquiry] = []

    @property
    def enabled(self) -> bool:
        return True

    async def notify_inquiry(self, inquiry: ContactInquiry) -> bool:
        self.notified.append(inquiry)
        return self.succeed


def make_settings(**overrides) -> Settings:
    values = {
        "mongodb_uri": "mongodb://localhost:27017/zumba_test",
        "cloudinary_cloud_name": "demo",
        "cloudinary_api_key": "key",
        "cloudinary_api_secret": "secret",
        "smtp_host": "",
        "contact_to_email": "",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def mongo_db():
    """A fresh in-memory database per test."""
    return AsyncMongoMockClient()["zumba_test"]


@pytest.fixture
def media():
    return FakeMediaUploader()


@pytest.fixture
def mailer():
    """The real mailer with notifications disabled (no relay configured)."""
    return ContactMailer.from_settings(make_settings())


@pytest_asyncio.fixture
async def client(mongo_db, media, mailer):
    app.dependency_overrides[get_db] = lambda: mongo_db
    app.dependency_overrides[get_media_uploader] = lambda: media
    app.dependency_overrides[get_mailer] = lambda: mailer
    try:
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
            yield ac
    finally:
        app.dependency_overrides.clear()
