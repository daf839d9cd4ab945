"""In-memory resource collections.

Each collection is an ordered list of plain dict records guarded by its own
lock, so create and delete on the same collection never interleave even when
handlers run on a threadpool.
"""

import logging
import threading
import time
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Mapping, Optional

from showcase.seed import seed_records

logger = logging.getLogger(__name__)

RESOURCE_KINDS = ("banners", "products", "events", "testimonials", "contact-submissions")
CONTENT_KINDS = RESOURCE_KINDS[:4]

Record = Dict[str, Any]


def now_millis() -> int:
    """Wall-clock time in milliseconds, used as the record identifier."""
    return time.time_ns() // 1_000_000


def iso_timestamp() -> str:
    """Current UTC time as ISO-8601 with millisecond precision and a Z suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ResourceCollection:
    def __init__(self, kind: str, seed: Iterable[Record] = ()):
        self.kind = kind
        self._records: List[Record] = [dict(r) for r in seed]
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._records)

    def list(self) -> List[Record]:
        with self._lock:
            return list(self._records)

    def create(self, fields: Any, extra: Optional[Mapping[str, Any]] = None) -> Record:
        """Append a new record and return it.

        The record starts with a timestamp ``id`` followed by ``extra``
        (server-assigned fields); caller ``fields`` are merged after those but
        never replace them.
        """
        if not isinstance(fields, Mapping):
            fields = {}
        with self._lock:
            record: Record = {"id": now_millis()}
            if extra:
                record.update(extra)
            for key, value in fields.items():
                if key not in record:
                    record[key] = value
            self._records.append(record)
        logger.info(f"Created {self.kind} record {record['id']}")
        return record

    def delete_by_id(self, record_id: Optional[int]) -> int:
        """Remove every record whose id equals ``record_id``; return how many went."""
        if record_id is None:
            return 0
        with self._lock:
            kept = [r for r in self._records if not _same_id(r.get("id"), record_id)]
            removed = len(self._records) - len(kept)
            self._records = kept
        if removed:
            logger.info(f"Deleted {removed} {self.kind} record(s) with id {record_id}")
        return removed


def _same_id(value: Any, record_id: int) -> bool:
    # bool is an int subclass; True must not match id 1
    return isinstance(value, int) and not isinstance(value, bool) and value == record_id


class ResourceStore:
    """Owns the five collections for the lifetime of the application."""

    def __init__(self, seed: Optional[Mapping[str, Iterable[Record]]] = None):
        if seed is None:
            seed = seed_records()
        self._collections = {
            kind: ResourceCollection(kind, seed.get(kind, ())) for kind in RESOURCE_KINDS
        }

    def get(self, kind: str) -> ResourceCollection:
        return self._collections[kind]

    def __contains__(self, kind: str) -> bool:
        return kind in self._collections

    @property
    def submissions(self) -> ResourceCollection:
        return self._collections["contact-submissions"]

    def create_submission(self, fields: Any) -> Record:
        return self.submissions.create(fields, extra={"createdAt": iso_timestamp()})
