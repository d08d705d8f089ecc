from pydantic import Field, field_validator

from zumba_api.models.base import CamelModel


class VideoCreate(CamelModel):
    url: str = Field(..., min_length=1)
    title: str = ""
    file_name: str = ""
    mime_type: str = ""
    public_id: str = ""

    @field_validator("title", "file_name", "mime_type", "public_id", mode="before")
    @classmethod
    def none_as_empty(cls, value):
        return "" if value is None else value
