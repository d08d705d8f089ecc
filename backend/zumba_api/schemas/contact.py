from pydantic import Field, field_validator

from zumba_api.models import ContactInquiry
from zumba_api.models.base import CamelModel


class InquiryCreate(CamelModel):
    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    phone: str = ""
    message: str = Field(..., min_length=1)

    @field_validator("phone", mode="before")
    @classmethod
    def none_as_empty(cls, value):
        return "" if value is None else value


class InquiryOut(ContactInquiry):
    email_sent: bool = False
