from datetime import datetime

from pydantic import field_validator

from zumba_api.models.base import CamelModel


class OfferUpdate(CamelModel):
    title: str = ""
    details: str = ""
    image_url: str = ""

    @field_validator("title", "details", "image_url", mode="before")
    @classmethod
    def none_as_empty(cls, value):
        return "" if value is None else value

    def is_empty(self) -> bool:
        return not (self.title or self.details or self.image_url)


class OfferOut(CamelModel):
    title: str = ""
    details: str = ""
    image_url: str = ""
    updated_at: datetime
