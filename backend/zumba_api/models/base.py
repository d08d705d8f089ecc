"""
Shared pieces for documents stored in MongoDB.

Documents keep the camelCase field names the website reads, while the
Python side uses snake_case attributes.
"""
from datetime import datetime, timezone
from typing import Annotated, Any, ClassVar

from bson import ObjectId
from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_camel


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _object_id_to_str(value: Any) -> Any:
    if isinstance(value, ObjectId):
        return str(value)
    return value


def _as_utc(value: datetime) -> datetime:
    # The driver hands back naive datetimes unless the client is tz aware
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


DocumentId = Annotated[str, BeforeValidator(_object_id_to_str)]
UtcDatetime = Annotated[datetime, AfterValidator(_as_utc)]


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
        extra="ignore",
    )


class Document(CamelModel):
    """A record in one of the API's collections."""

    collection: ClassVar[str]

    id: DocumentId | None = Field(default=None, alias="_id")

    def to_document(self) -> dict:
        """Field mapping to write to the store (without ``_id``)."""
        return self.model_dump(by_alias=True, exclude={"id"}, exclude_none=True)

    @classmethod
    def from_document(cls, document: dict):
        return cls.model_validate(document)
