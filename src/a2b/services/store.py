#!/usr/bin/env python3
"""
Service Record Store

In-memory collection of service records. Views read immutable snapshots and
are told about changes through a ChangeNotifier.
"""

import logging
import uuid
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from ..core.events import SERVICES_UPDATED, ChangeNotifier
from ..core.json_utils import read_json
from ..core.models import FinancialRecord

logger = logging.getLogger(__name__)


def _with_unique_ids(records: Iterable[FinancialRecord]) -> list[FinancialRecord]:
    """
    Give id-less records a generated id and reject duplicates.

    Raises:
        ValueError: If two records share an id
    """
    result = []
    seen: set[str] = set()
    for record in records:
        if not record.id:
            record = record.with_changes(id=uuid.uuid4().hex)
        if record.id in seen:
            raise ValueError(f"Duplicate service id: {record.id}")
        seen.add(record.id)
        result.append(record)
    return result


class ServiceStore:
    """Holds service records and announces every mutation."""

    def __init__(
        self, records: Iterable[FinancialRecord] = (), notifier: ChangeNotifier | None = None
    ) -> None:
        self._records = _with_unique_ids(records)
        self.notifier = notifier or ChangeNotifier()

    @classmethod
    def from_json_file(cls, path: str | Path, notifier: ChangeNotifier | None = None) -> "ServiceStore":
        """
        Load records from a JSON snapshot.

        Accepts either a list of record objects or ``{"services": [...]}``.

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the JSON has the wrong shape, a due date is invalid
                or two services share an id
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Services file not found: {path}")

        data = read_json(path)
        if isinstance(data, dict):
            data = data.get("services")
        if not isinstance(data, list):
            raise ValueError(f"Expected a list of services in {path}")

        records = []
        for index, item in enumerate(data):
            if not isinstance(item, dict):
                raise ValueError(f"Service #{index} in {path} is not an object")
            try:
                records.append(FinancialRecord.from_dict(item))
            except ValueError as e:
                raise ValueError(f"Service #{index} in {path}: {e}") from e

        try:
            records = _with_unique_ids(records)
        except ValueError as e:
            raise ValueError(f"{e} in {path}") from e

        logger.info("Loaded %d services from %s", len(records), path)
        return cls(records, notifier)

    def load_all(self) -> tuple[FinancialRecord, ...]:
        """Snapshot of all records."""
        return tuple(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def get(self, record_id: str) -> FinancialRecord:
        """
        Look up a record by id.

        Raises:
            KeyError: If no record has this id
        """
        for record in self._records:
            if record.id == record_id:
                return record
        raise KeyError(record_id)

    def replace_all(self, records: Iterable[FinancialRecord]) -> None:
        self._records = _with_unique_ids(records)
        self._changed()

    def add(self, record: FinancialRecord) -> FinancialRecord:
        """
        Append a record, generating an id when it has none.

        Raises:
            ValueError: If the id is already taken
        """
        (record,) = _with_unique_ids([record])
        if any(existing.id == record.id for existing in self._records):
            raise ValueError(f"Duplicate service id: {record.id}")
        self._records.append(record)
        self._changed()
        return record

    def update(self, record_id: str, **changes: Any) -> FinancialRecord:
        """
        Replace attributes of one record.

        Returns:
            The updated record

        Raises:
            KeyError: If no record has this id
            ValueError: If the change would give the record an empty or taken id
        """
        new_id = changes.get("id", record_id)
        if new_id != record_id and (not new_id or any(r.id == new_id for r in self._records)):
            raise ValueError(f"Cannot change service id {record_id!r} to {new_id!r}")

        for index, record in enumerate(self._records):
            if record.id == record_id:
                updated = record.with_changes(**changes)
                self._records[index] = updated
                self._changed()
                return updated
        raise KeyError(record_id)

    def _changed(self) -> None:
        logger.debug("Service store changed (%d records)", len(self._records))
        self.notifier.publish(SERVICES_UPDATED)
