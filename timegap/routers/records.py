# timegap/routers/records.py
"""Raw listing of the currently filtered badge scans."""

from typing import Optional
from fastapi import APIRouter, Depends, Query
from timegap.dataset import Dataset, get_dataset
from timegap.schemas.event_record import EventRecordOut

router = APIRouter()


@router.get("/records", response_model=list[EventRecordOut])
def list_records(limit: Optional[int] = Query(None, ge=1), dataset: Dataset = Depends(get_dataset)):
    """Filtered records in file order, including ones with non-numeric codes."""
    records = dataset.filtered
    return list(records[:limit] if limit else records)
