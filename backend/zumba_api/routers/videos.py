"""
Videos router for testimonial video metadata.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException
from motor.motor_asyncio import AsyncIOMotorDatabase
from pydantic import ValidationError
from pymongo.errors import PyMongoError

from zumba_api.dependencies import get_db, request_payload
from zumba_api.models import VideoReview
from zumba_api.schemas import VideoCreate
from zumba_api.services import videos

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/videos", tags=["videos"])


@router.post("", response_model=VideoReview, status_code=201)
async def create_video(
    payload: dict = Depends(request_payload),
    db: AsyncIOMotorDatabase = Depends(get_db),
):
    """Record a video review that was uploaded to the media host."""
    try:
        video_data = VideoCreate.model_validate(payload)
    except ValidationError:
        raise HTTPException(status_code=400, detail="Missing video URL")

    try:
        return await videos.create_video(db, video_data)
    except PyMongoError as e:
        logger.error(f"Failed to save video: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to save video")


@router.get("", response_model=list[VideoReview])
async def list_videos(db: AsyncIOMotorDatabase = Depends(get_db)):
    """Get all video reviews, newest first."""
    try:
        return await videos.list_videos(db)
    except PyMongoError as e:
        logger.error(f"Failed to load videos: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to load videos")
