from pydantic import Field

from zumba_api.models.base import Document, UtcDatetime, utcnow


class ContactInquiry(Document):
    """A contact form submission. Never modified after it is stored."""

    collection = "contactinquiries"

    name: str
    email: str
    phone: str = ""
    message: str
    created_at: UtcDatetime = Field(default_factory=utcnow)
