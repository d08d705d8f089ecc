"""
Before/after gallery cards, stored as one document per branch.
"""
from typing import Literal

from pydantic import Field

from zumba_api.models.base import CamelModel, Document

Slot = Literal["before", "after"]
SLOTS = ("before", "after")


class Card(CamelModel):
    """One success story within a branch gallery, identified by ``card_num``."""

    card_num: int | float
    before_img: str | None = None
    after_img: str | None = None
    details: str | None = None
    name: str | None = None
    before_weight: str | None = None
    after_weight: str | None = None

    def set_image(self, slot: Slot, url: str):
        if slot == "before":
            self.before_img = url
        else:
            self.after_img = url


class CardData(Document):
    """The full card list for a branch. At most one exists per branch."""

    collection = "carddatas"

    branch: str
    cards: list[Card] = Field(default_factory=list)

    def find_card(self, card_num: int | float) -> Card | None:
        for card in self.cards:
            if card.card_num == card_num:
                return card
        return None

    def get_or_add_card(self, card_num: int | float) -> Card:
        card = self.find_card(card_num)
        if card is None:
            card = Card(card_num=card_num)
            self.cards.append(card)
        return card

    def cards_document(self) -> list[dict]:
        return [card.model_dump(by_alias=True, exclude_none=True) for card in self.cards]
