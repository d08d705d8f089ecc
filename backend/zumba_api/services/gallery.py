"""
Gallery card and image slot persistence.

Card lists are stored one document per branch. Uploaded images are stored
twice: as an ``images`` record for the (card, slot) pair and embedded in the
branch's card list. The two writes are independent, so a failure between
them leaves the copies out of step.
"""
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ASCENDING

from zumba_api.models import Card, CardData, Image, Slot


async def find_images(
    db: AsyncIOMotorDatabase,
    card_num: Optional[int | float] = None,
    slot: Optional[str] = None,
) -> list[Image]:
    """Image records matching the optional filters, oldest first."""
    query = {}
    if card_num is not None:
        query["cardNum"] = card_num
    if slot:
        query["slot"] = slot

    cursor = db[Image.collection].find(query).sort([("createdAt", ASCENDING), ("_id", ASCENDING)])
    return [Image.from_document(doc) for doc in await cursor.to_list(length=None)]


async def replace_image(db: AsyncIOMotorDatabase, card_num: int | float, slot: Slot, url: str) -> Image:
    """Drop earlier images for the pair and record the new one."""
    collection = db[Image.collection]
    await collection.delete_many({"cardNum": card_num, "slot": slot})

    image = Image(url=url, card_num=card_num, slot=slot)
    result = await collection.insert_one(image.to_document())
    image.id = str(result.inserted_id)
    return image


async def set_card_image(
    db: AsyncIOMotorDatabase,
    branch: str,
    card_num: int | float,
    slot: Slot,
    url: str,
) -> CardData:
    """Point a card's before/after image at ``url``, creating the branch set or card if needed."""
    collection = db[CardData.collection]
    document = await collection.find_one({"branch": branch})

    if document is None:
        card_data = CardData(branch=branch)
    else:
        card_data = CardData.from_document(document)

    card_data.get_or_add_card(card_num).set_image(slot, url)

    if document is None:
        result = await collection.insert_one(card_data.to_document())
        card_data.id = str(result.inserted_id)
    else:
        await collection.update_one(
            {"_id": document["_id"]},
            {"$set": {"cards": card_data.cards_document()}},
        )
    return card_data


async def save_cards(db: AsyncIOMotorDatabase, branch: str, cards: list[Card]) -> CardData:
    """Replace the branch's card list wholesale."""
    collection = db[CardData.collection]
    await collection.delete_many({"branch": branch})

    card_data = CardData(branch=branch, cards=cards)
    result = await collection.insert_one(card_data.to_document())
    card_data.id = str(result.inserted_id)
    return card_data


async def load_cards(db: AsyncIOMotorDatabase, branch: str) -> list[Card]:
    """The branch's cards, or an empty list when nothing was saved yet."""
    document = await db[CardData.collection].find_one({"branch": branch})
    if document is None:
        return []
    return CardData.from_document(document).cards
