"""Contact inquiry persistence."""
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import DESCENDING

from zumba_api.models import ContactInquiry


async def create_inquiry(db: AsyncIOMotorDatabase, name: str, email: str, phone: str, message: str) -> ContactInquiry:
    inquiry = ContactInquiry(name=name, email=email, phone=phone, message=message)
    result = await db[ContactInquiry.collection].insert_one(inquiry.to_document())
    inquiry.id = str(result.inserted_id)
    return inquiry


async def list_inquiries(db: AsyncIOMotorDatabase) -> list[ContactInquiry]:
    """All inquiries, newest first."""
    cursor = db[ContactInquiry.collection].find().sort([("createdAt", DESCENDING), ("_id", DESCENDING)])
    return [ContactInquiry.from_document(doc) for doc in await cursor.to_list(length=None)]
