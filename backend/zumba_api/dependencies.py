"""
Shared FastAPI dependencies.

The store handle and the external adapters are built once in the app
lifespan and kept on ``app.state``; handlers receive them through these
functions so tests can swap them with ``app.dependency_overrides``.
"""
import json
import logging

from fastapi import HTTPException, Request

from zumba_api.database import get_db
from zumba_api.services.mailer import ContactMailer
from zumba_api.services.media import MediaUploader

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def get_media_uploader(request: Request) -> MediaUploader:
    return request.app.state.media


def get_mailer(request: Request) -> ContactMailer:
    return request.app.state.mailer


async def request_payload(request: Request) -> dict:
    """
    Request body as a dict, from JSON or form encoded data.

    A body that is empty or not a JSON object yields an empty dict so that the
    handler reports the missing fields.
    """
    content_type = request.headers.get("content-type", "")
    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        return {key: value for key, value in form.items() if isinstance(value, str)}

    body = await request.body()
    if not body:
        return {}
    try:
        data = json.loads(body)
    except ValueError:
        logger.warning(f"Malformed JSON body on {request.url.path}")
        raise HTTPException(status_code=400, detail="Invalid payload")
    return data if isinstance(data, dict) else {}


__all__ = ["get_db", "get_media_uploader", "get_mailer", "request_payload"]
