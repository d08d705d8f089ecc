from zumba_api.models.base import Document
from zumba_api.models.card_data import Card, CardData, Slot, SLOTS
from zumba_api.models.image import Image
from zumba_api.models.offer import Offer, LATEST_OFFER_KEY
from zumba_api.models.contact_inquiry import ContactInquiry
from zumba_api.models.video_review import VideoReview

__all__ = [
    "Document",
    "Card",
    "CardData",
    "Slot",
    "SLOTS",
    "Image",
    "Offer",
    "LATEST_OFFER_KEY",
    "ContactInquiry",
    "VideoReview",
]
