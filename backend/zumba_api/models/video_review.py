from pydantic import Field

from zumba_api.models.base import Document, UtcDatetime, utcnow


class VideoReview(Document):
    """Metadata for a video testimonial already hosted on the media host."""

    collection = "videoreviews"

    url: str
    title: str = ""
    file_name: str = ""
    mime_type: str = ""
    public_id: str = ""
    uploaded_at: UtcDatetime = Field(default_factory=utcnow)
