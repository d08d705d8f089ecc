"""
Offers router for the homepage's latest offer.
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from motor.motor_asyncio import AsyncIOMotorDatabase
from pydantic import ValidationError
from pymongo.errors import PyMongoError

from zumba_api.dependencies import get_db, request_payload
from zumba_api.schemas import OfferOut, OfferUpdate, SuccessResponse
from zumba_api.services import offers

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/offers", tags=["offers"])


@router.get("/latest", response_model=Optional[OfferOut])
async def get_latest_offer(db: AsyncIOMotorDatabase = Depends(get_db)):
    """Get the current offer, or null when there is none."""
    try:
        offer = await offers.get_latest_offer(db)
    except PyMongoError as e:
        logger.error(f"Failed to load offer: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to load offer")

    if offer is None:
        return None
    return OfferOut.model_validate(offer.model_dump())


@router.post("/latest", response_model=OfferOut)
async def save_latest_offer(
    payload: dict = Depends(request_payload),
    db: AsyncIOMotorDatabase = Depends(get_db),
):
    """Create or replace the current offer."""
    try:
        offer_data = OfferUpdate.model_validate(payload)
    except ValidationError:
        raise HTTPException(status_code=400, detail="Invalid payload")
    if offer_data.is_empty():
        raise HTTPException(status_code=400, detail="Nothing to save")

    try:
        offer = await offers.save_latest_offer(db, offer_data.title, offer_data.details, offer_data.image_url)
    except PyMongoError as e:
        logger.error(f"Failed to save offer: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to save offer")
    return OfferOut.model_validate(offer.model_dump())


@router.delete("/latest", response_model=SuccessResponse)
async def delete_latest_offer(db: AsyncIOMotorDatabase = Depends(get_db)):
    """Remove the current offer. Succeeds whether or not one exists."""
    try:
        await offers.delete_latest_offer(db)
    except PyMongoError as e:
        logger.error(f"Failed to delete offer: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to delete offer")
    return SuccessResponse()
