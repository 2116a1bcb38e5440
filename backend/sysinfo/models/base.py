"""
Base model for records kept in the record store.
"""
from datetime import datetime, timezone
from typing import Annotated, Any, ClassVar

from pydantic import AfterValidator, BaseModel


def ensure_utc(value: datetime) -> datetime:
    """MongoDB hands back naive datetimes; they are always UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def utc_now() -> datetime:
    """Current UTC time at the millisecond precision MongoDB stores."""
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


UTCDateTime = Annotated[datetime, AfterValidator(ensure_utc)]


class Record(BaseModel):
    """
    A typed, keyed document in the record store.

    Subclasses name the database and collection they live in and the field
    that identifies them. The identifying field is stored as ``_id``.
    """
    db_name: ClassVar[str]
    collection_name: ClassVar[str]
    primary_key: ClassVar[str]
    singleton: ClassVar[bool] = False

    class Config:
        populate_by_name = True
        use_enum_values = True

    def primary_key_value(self) -> Any:
        return getattr(self, self.primary_key)

    def to_document(self) -> dict[str, Any]:
        """Serialize to a MongoDB document keyed by the primary key."""
        doc = self.model_dump(exclude={self.primary_key})
        doc["_id"] = self.primary_key_value()
        return doc

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "Record":
        """Build a record from a stored MongoDB document."""
        data = {k: v for k, v in doc.items() if not k.startswith("_")}
        data[cls.primary_key] = doc["_id"]
        return cls(**data)
