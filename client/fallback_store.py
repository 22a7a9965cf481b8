"""Local copy of the CRUD collections, used when the API is unreachable."""

import logging
import uuid
from datetime import datetime, timezone

from backend.fixtures import DEFAULT_CONTENT
from client.errors import RecordNotFoundError
from client.storage import LocalStorage

logger = logging.getLogger(__name__)

STORAGE_PREFIX = "assetmagnets_"

COLLECTIONS = (
    "services",
    "courses",
    "jobs",
    "contact_messages",
    "contact_info",
    "global_offices",
    "faqs",
)
ORDERED_COLLECTIONS = frozenset({"contact_info", "faqs"})
NEWEST_FIRST_COLLECTIONS = frozenset({"contact_messages"})

RECORD_DEFAULTS = {
    "contact_messages": {"status": "new", "priority": "medium"},
}


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _order_key(record: dict) -> int:
    order = record.get("order")
    return order if isinstance(order, (int, float)) else 0


class FallbackStore:
    """Mirrors each entity collection as a list stored under its own key.

    Collections with an `order` field are kept sorted ascending after every
    write; contact messages are kept newest first.
    """

    def __init__(self, storage: LocalStorage, seed_defaults: bool = False):
        self.storage = storage
        if seed_defaults:
            self.initialize_default_data()

    @staticmethod
    def storage_key(collection: str) -> str:
        if collection not in COLLECTIONS:
            raise ValueError(f"Unknown collection: {collection}")
        return f"{STORAGE_PREFIX}{collection}"

    def initialize_default_data(self) -> list[str]:
        initialized = []
        for collection, defaults in DEFAULT_CONTENT.items():
            if self._read(collection):
                continue
            for record in defaults:
                self.create(collection, dict(record))
            initialized.append(collection)
        if initialized:
            logger.info("Seeded fallback collections: %s", ", ".join(initialized))
        return initialized

    def _read(self, collection: str) -> list[dict]:
        records = self.storage.get_json(self.storage_key(collection), default=[])
        if not isinstance(records, list):
            logger.warning("Resetting corrupted collection %s", collection)
            return []
        return records

    def _write(self, collection: str, records: list[dict]) -> None:
        if collection in ORDERED_COLLECTIONS:
            records.sort(key=_order_key)
        self.storage.set_json(self.storage_key(collection), records)

    def list(self, collection: str) -> list[dict]:
        return self._read(collection)

    def get(self, collection: str, record_id: str) -> dict:
        for record in self._read(collection):
            if record.get("id") == record_id:
                return record
        raise RecordNotFoundError(collection, record_id)

    def create(self, collection: str, fields: dict) -> dict:
        records = self._read(collection)
        now = _now()
        record = {
            **RECORD_DEFAULTS.get(collection, {}),
            **fields,
            "id": str(uuid.uuid4()),
            "created_at": now,
            "updated_at": now,
        }
        if collection in NEWEST_FIRST_COLLECTIONS:
            records.insert(0, record)
        else:
            records.append(record)
        self._write(collection, records)
        return record

    def update(self, collection: str, record_id: str, updates: dict) -> dict:
        records = self._read(collection)
        for index, record in enumerate(records):
            if record.get("id") == record_id:
                updated = {
                    **record,
                    **updates,
                    "id": record_id,
                    "created_at": record.get("created_at"),
                    "updated_at": _now(),
                }
                records[index] = updated
                self._write(collection, records)
                return updated
        raise RecordNotFoundError(collection, record_id)

    def delete(self, collection: str, record_id: str) -> bool:
        records = self._read(collection)
        remaining = [record for record in records if record.get("id") != record_id]
        if len(remaining) == len(records):
            return False
        self._write(collection, remaining)
        return True
