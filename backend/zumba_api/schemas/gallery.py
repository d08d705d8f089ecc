from pydantic import BaseModel, Field

from zumba_api.models import Card
from zumba_api.models.base import CamelModel


class UploadResponse(CamelModel):
    url: str
    card_num: int | float
    slot: str
    branch: str


class SaveCardsRequest(BaseModel):
    branch: str = Field(..., min_length=1)
    cards: list[Card]


class CardsResponse(BaseModel):
    cards: list[Card] = []


class SuccessResponse(BaseModel):
    success: bool = True
