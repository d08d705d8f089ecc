"""Latest offer persistence (a single document under a fixed key)."""
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument

from zumba_api.models import LATEST_OFFER_KEY, Offer
from zumba_api.models.base import utcnow


async def get_latest_offer(db: AsyncIOMotorDatabase) -> Optional[Offer]:
    document = await db[Offer.collection].find_one({"key": LATEST_OFFER_KEY})
    if document is None:
        return None
    return Offer.from_document(document)


async def save_latest_offer(db: AsyncIOMotorDatabase, title: str, details: str, image_url: str) -> Offer:
    """Create or overwrite the offer and refresh its timestamp."""
    offer = Offer(title=title, details=details, image_url=image_url, updated_at=utcnow())
    document = await db[Offer.collection].find_one_and_update(
        {"key": LATEST_OFFER_KEY},
        {"$set": offer.to_document()},
        upsert=True,
        return_document=ReturnDocument.AFTER,
    )
    return Offer.from_document(document)


async def delete_latest_offer(db: AsyncIOMotorDatabase) -> bool:
    """Remove the offer. Returns whether one existed."""
    result = await db[Offer.collection].delete_one({"key": LATEST_OFFER_KEY})
    return result.deleted_count > 0
