"""Video review persistence."""
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import DESCENDING

from zumba_api.models import VideoReview
from zumba_api.schemas.video import VideoCreate


async def create_video(db: AsyncIOMotorDatabase, video_data: VideoCreate) -> VideoReview:
    video = VideoReview(**video_data.model_dump())
    result = await db[VideoReview.collection].insert_one(video.to_document())
    video.id = str(result.inserted_id)
    return video


async def list_videos(db: AsyncIOMotorDatabase) -> list[VideoReview]:
    """All video reviews, most recently uploaded first."""
    cursor = db[VideoReview.collection].find().sort([("uploadedAt", DESCENDING), ("_id", DESCENDING)])
    return [VideoReview.from_document(doc) for doc in await cursor.to_list(length=None)]
