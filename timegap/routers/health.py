# timegap/routers/health.py
"""
System health check endpoint.
Returns backend status and the size of the working dataset.
"""

from fastapi import APIRouter, Depends
from datetime import datetime
from timegap.dataset import Dataset, get_dataset

router = APIRouter()


@router.get("/health", summary="System health check")
def health_check(dataset: Dataset = Depends(get_dataset)):
    snap = dataset.snapshot
    return {
        "status": "ok",
        "timestamp": datetime.utcnow().isoformat(),
        "file_name": snap.file_name,
        "records": len(snap.records),
        "filtered": len(snap.filtered),
    }
