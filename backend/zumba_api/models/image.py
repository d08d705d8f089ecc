from pydantic import Field

from zumba_api.models.base import Document, UtcDatetime, utcnow
from zumba_api.models.card_data import Slot


class Image(Document):
    """
    The most recent upload for one (card, slot) pair.

    Older records for the same pair are deleted when a new image is uploaded.
    """

    collection = "images"

    url: str
    card_num: int | float
    slot: Slot
    created_at: UtcDatetime = Field(default_factory=utcnow)
