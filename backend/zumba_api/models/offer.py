from pydantic import Field

from zumba_api.models.base import Document, UtcDatetime, utcnow

LATEST_OFFER_KEY = "latestOffer"


class Offer(Document):
    """The single current promotional offer, stored under a fixed key."""

    collection = "offers"

    key: str = LATEST_OFFER_KEY
    title: str = ""
    details: str = ""
    image_url: str = ""
    updated_at: UtcDatetime = Field(default_factory=utcnow)
