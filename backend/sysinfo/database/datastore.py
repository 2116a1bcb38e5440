"""
Record store over MongoDB.

A small keyed-entity store: records are pydantic models that declare
their database, collection and identifying field (see
``sysinfo.models.base.Record``). Driver errors are translated into the
store error kinds so services never see pymongo exceptions.
"""
from contextlib import contextmanager
from typing import Any, Iterator, Optional, TypeVar

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection
from pymongo.errors import DuplicateKeyError, PyMongoError

from sysinfo.core.exceptions import RecordNotFound, StoreConflict, StoreUnavailable
from sysinfo.models.base import Record

# Marker stored on singleton records; backed by a unique index
SINGLETON_FIELD = "_singleton"

RecordT = TypeVar("RecordT", bound=Record)


@contextmanager
def _translate_errors() -> Iterator[None]:
    try:
        yield
    except DuplicateKeyError as e:
        raise StoreConflict(str(e)) from e
    except PyMongoError as e:
        raise StoreUnavailable(str(e)) from e


class DataStore:
    """Keyed record store backed by a motor client."""

    def __init__(self, client: AsyncIOMotorClient):
        """Initialize with a MongoDB client."""
        self.client = client

    def _collection(self, record_type: type[Record]) -> AsyncIOMotorCollection:
        return self.client[record_type.db_name][record_type.collection_name]

    def _document(self, record: Record) -> dict[str, Any]:
        doc = record.to_document()
        if record.singleton:
            doc[SINGLETON_FIELD] = True
        return doc

    async def list(
        self,
        record_type: type[RecordT],
        filters: Optional[dict[str, Any]] = None,
    ) -> list[RecordT]:
        """
        List records of a type.

        Args:
            record_type: Record class to list
            filters: Optional MongoDB filter on stored fields

        Returns:
            Records in insertion order

        Raises:
            StoreUnavailable: On driver failure
        """
        with _translate_errors():
            cursor = self._collection(record_type).find(filters or {})
            docs = await cursor.to_list(length=None)
        return [record_type.from_document(doc) for doc in docs]

    async def get(self, record: RecordT) -> RecordT:
        """
        Load a record by the primary key set on ``record``.

        Raises:
            RecordNotFound: If no record has that key
            StoreUnavailable: On driver failure
        """
        with _translate_errors():
            doc = await self._collection(type(record)).find_one(
                {"_id": record.primary_key_value()}
            )
        if doc is None:
            raise RecordNotFound(
                f"{type(record).__name__} {record.primary_key_value()!r} not found"
            )
        return type(record).from_document(doc)

    async def add(self, record: Record) -> None:
        """
        Insert a new record.

        Raises:
            StoreConflict: If the key (or singleton slot) is already taken
            StoreUnavailable: On driver failure
        """
        with _translate_errors():
            await self._collection(type(record)).insert_one(self._document(record))

    async def put(self, record: Record) -> None:
        """
        Upsert a record, replacing whatever is stored under its key.

        Raises:
            StoreConflict: If a singleton record with another key exists
            StoreUnavailable: On driver failure
        """
        with _translate_errors():
            await self._collection(type(record)).replace_one(
                {"_id": record.primary_key_value()},
                self._document(record),
                upsert=True,
            )
