# timegap/routers/upload.py
"""
Workbook upload endpoint.
POST /upload: decodes the first sheet and replaces the working dataset.
"""

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from timegap.config import settings
from timegap.dataset import Dataset, get_dataset
from timegap.utils.logger import get_logger

router = APIRouter()
logger = get_logger(__name__)


@router.post("/upload", summary="Upload a badge-scan workbook (.xls / .xlsx)")
async def upload_workbook(file: UploadFile = File(...), dataset: Dataset = Depends(get_dataset)):
    """
    Replaces the dataset and clears all filters.
    A workbook without a 'Log Date' header row is not an HTTP error: the
    dataset is emptied and the reason comes back with status "error".
    """
    raw_bytes = await file.read()
    if not raw_bytes:
        raise HTTPException(status_code=400, detail="Empty file")
    if len(raw_bytes) > settings.MAX_UPLOAD_BYTES:
        raise HTTPException(status_code=413, detail=f"File exceeds {settings.MAX_UPLOAD_MB} MB")

    logger.info(f"Upload {file.filename} | {len(raw_bytes)} bytes | {file.content_type}")
    error = dataset.load_file(raw_bytes, file.filename)
    if error:
        return {"status": "error", "detail": error, "records": 0, "fileName": file.filename}
    return {"status": "ok", "records": len(dataset.records), "fileName": file.filename}
