# timegap/services/import_service.py
"""Raw upload bytes → EventRecord list (sheet reader → decoder → normalizer)."""

from timegap.models.event_record import EventRecord
from timegap.services.record_normalizer import normalize_records
from timegap.services.tabular_decoder import DecodeError, decode_grid
from timegap.utils.sheet_reader import read_first_sheet
from timegap.utils.logger import get_logger

logger = get_logger(__name__)


def decode(raw_bytes: bytes) -> list[EventRecord]:
    """
    Decode a workbook into records. Deterministic: the same bytes always give
    the same records, ids included. Raises DecodeError on any failure.
    """
    if not raw_bytes:
        raise DecodeError("Empty file")

    try:
        grid = read_first_sheet(raw_bytes)
    except ValueError as e:
        raise DecodeError(str(e)) from e

    rows = decode_grid(grid)
    records = normalize_records(rows)
    logger.info(f"Decoded {len(records)} records from {len(grid)} sheet rows")
    return records
