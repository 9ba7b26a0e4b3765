# timegap/dataset.py
"""
The single in-memory working dataset and its FastAPI dependency.

State is held as one immutable snapshot (records, criteria, filtered view).
Every read-modify-write of the snapshot happens under one lock, so a filter
request can never write an older file back over a newer upload. Readers take
the snapshot once and see a consistent view. Summaries are recomputed from
the snapshot on demand.
"""

import threading
from typing import NamedTuple, Optional, Sequence

from timegap.models.event_record import EventRecord
from timegap.models.time_gap_summary import TimeGapSummary
from timegap.services.export_encoder import encode_export
from timegap.services.filter_engine import (
    FilterCriteria,
    apply_filters,
    clear_filters,
    distinct_dates,
    distinct_employee_codes,
    distinct_employee_names,
)
from timegap.services.import_service import decode
from timegap.services.tabular_decoder import DecodeError
from timegap.services.time_gap_aggregator import aggregate
from timegap.utils.logger import get_logger

logger = get_logger(__name__)


class Snapshot(NamedTuple):
    records: tuple
    criteria: FilterCriteria
    filtered: tuple
    file_name: Optional[str]


class Dataset:
    def __init__(self):
        self._lock = threading.Lock()
        self._snapshot = Snapshot((), clear_filters(), (), None)

    @property
    def snapshot(self) -> Snapshot:
        """Current state as one consistent tuple."""
        return self._snapshot

    @property
    def records(self) -> Sequence[EventRecord]:
        return self._snapshot.records

    @property
    def filtered(self) -> Sequence[EventRecord]:
        return self._snapshot.filtered

    @property
    def criteria(self) -> FilterCriteria:
        return self._snapshot.criteria

    @property
    def file_name(self) -> Optional[str]:
        return self._snapshot.file_name

    def load(self, records: Sequence[EventRecord], file_name: Optional[str] = None):
        """Replace the whole dataset and clear every filter."""
        records = tuple(records)
        with self._lock:
            self._snapshot = Snapshot(records, clear_filters(), records, file_name)
        logger.info(f"Dataset replaced: {len(records)} records from {file_name or '(unnamed)'}")

    def load_file(self, raw_bytes: bytes, file_name: Optional[str] = None) -> Optional[str]:
        """
        Decode and load an upload. On DecodeError the dataset becomes empty
        and the reason is returned; None means success.
        """
        try:
            records = decode(raw_bytes)
        except DecodeError as e:
            logger.warning(f"Could not decode {file_name or 'upload'}: {e}")
            self.load([], file_name)
            return str(e)
        self.load(records, file_name)
        return None

    def apply_filters(self, criteria: FilterCriteria) -> Sequence[EventRecord]:
        with self._lock:
            snap = self._snapshot
            filtered = tuple(apply_filters(snap.records, criteria))
            self._snapshot = snap._replace(criteria=criteria, filtered=filtered)
        logger.debug(f"Filters {criteria} → {len(filtered)}/{len(snap.records)} records")
        return filtered

    def clear_filters(self) -> Sequence[EventRecord]:
        with self._lock:
            snap = self._snapshot
            self._snapshot = snap._replace(criteria=clear_filters(), filtered=snap.records)
        return snap.records

    def filter_options(self) -> dict:
        records = self._snapshot.records
        return {
            "dates": distinct_dates(records),
            "employee_names": distinct_employee_names(records),
            "employee_codes": distinct_employee_codes(records),
        }

    def summaries(self) -> list[TimeGapSummary]:
        snap = self._snapshot
        return aggregate(snap.filtered, snap.criteria.date)

    def export(self) -> bytes:
        return encode_export(self.summaries())


_dataset = Dataset()


def get_dataset() -> Dataset:
    """FastAPI dependency: the process-wide working dataset."""
    return _dataset
