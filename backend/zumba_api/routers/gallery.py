"""
Gallery router: image uploads and branch card lists.
"""
import logging
import math
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, Query, UploadFile
from motor.motor_asyncio import AsyncIOMotorDatabase
from pydantic import ValidationError
from pymongo.errors import PyMongoError

from zumba_api.dependencies import get_db, get_media_uploader, request_payload
from zumba_api.models import SLOTS, Card, Image
from zumba_api.schemas import CardsResponse, SaveCardsRequest, SuccessResponse, UploadResponse
from zumba_api.services import gallery
from zumba_api.services.media import MediaUploader, MediaUploadError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["gallery"])


def parse_card_num(value: Optional[str]) -> Optional[int | float]:
    """Parse a card number sent as text. Returns None unless it is a finite number."""
    if value is None or not value.strip():
        return None
    try:
        number = float(value)
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    return int(number) if number.is_integer() else number


@router.post("/upload", response_model=UploadResponse, status_code=201)
async def upload_image(
    image: Optional[UploadFile] = File(None),
    branch: Optional[str] = Form(None),
    card_num: Optional[str] = Form(None, alias="cardNum"),
    slot: Optional[str] = Form(None),
    db: AsyncIOMotorDatabase = Depends(get_db),
    media: MediaUploader = Depends(get_media_uploader),
):
    """Upload a before/after image for a card and record it on the branch gallery."""
    number = parse_card_num(card_num)
    if image is None or not branch or number is None or not slot:
        raise HTTPException(status_code=400, detail="Missing image, branch, cardNum or slot")
    if slot not in SLOTS:
        raise HTTPException(status_code=400, detail="Invalid slot")

    try:
        data = await image.read()
        uploaded = await media.upload(data)
    except MediaUploadError as e:
        logger.error(f"Image upload failed: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Image upload failed")
    finally:
        await image.close()

    try:
        await gallery.replace_image(db, number, slot, uploaded.url)
        await gallery.set_card_image(db, branch, number, slot, uploaded.url)
    except PyMongoError as e:
        # The file is already on the media host at this point
        logger.error(f"Image upload failed after storing {uploaded.public_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Image upload failed")

    return UploadResponse(url=uploaded.url, card_num=number, slot=slot, branch=branch)


@router.get("/images", response_model=list[Image])
async def get_images(
    card_num: Optional[str] = Query(None, alias="cardNum"),
    slot: Optional[str] = Query(None),
    db: AsyncIOMotorDatabase = Depends(get_db),
):
    """List uploaded images, optionally for one card and/or slot, oldest first."""
    number = None
    if card_num:
        number = parse_card_num(card_num)
        if number is None:
            raise HTTPException(status_code=400, detail="Invalid cardNum")

    try:
        return await gallery.find_images(db, number, slot)
    except PyMongoError as e:
        logger.error(f"Failed to load images: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to load images")


@router.post("/save-cards", response_model=SuccessResponse)
async def save_cards(
    payload: dict = Depends(request_payload),
    db: AsyncIOMotorDatabase = Depends(get_db),
):
    """Replace a branch's card list."""
    try:
        request = SaveCardsRequest.model_validate(payload)
    except ValidationError:
        raise HTTPException(status_code=400, detail="Invalid payload")

    try:
        await gallery.save_cards(db, request.branch, request.cards)
    except PyMongoError as e:
        logger.error(f"Failed to save cards: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to save cards")
    return SuccessResponse()


@router.get("/load-cards", response_model=CardsResponse, response_model_exclude_none=True)
async def load_cards(
    branch: Optional[str] = Query(None),
    db: AsyncIOMotorDatabase = Depends(get_db),
):
    """Get a branch's card list (empty when nothing has been saved)."""
    if not branch:
        raise HTTPException(status_code=400, detail="Missing branch")

    try:
        cards: list[Card] = await gallery.load_cards(db, branch)
    except PyMongoError as e:
        logger.error(f"Failed to load cards: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to load cards")
    return CardsResponse(cards=cards)
