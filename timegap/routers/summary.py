# timegap/routers/summary.py
"""
Time gap summaries for the filtered dataset.
GET /summary:        one row per employee per day.
GET /summary/export: the same rows as an .xlsx download.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import Response
from timegap.config import settings
from timegap.dataset import Dataset, get_dataset
from timegap.schemas.time_gap_summary import TimeGapSummaryOut
from timegap.services.export_encoder import XLSX_MEDIA_TYPE
from timegap.utils.logger import get_logger

router = APIRouter()
logger = get_logger(__name__)


@router.get("/summary", response_model=list[TimeGapSummaryOut])
def get_summary(dataset: Dataset = Depends(get_dataset)):
    return dataset.summaries()


@router.get("/summary/export", summary="Download summaries as .xlsx")
def export_summary(dataset: Dataset = Depends(get_dataset)):
    content = dataset.export()
    logger.info(f"Export {settings.EXPORT_FILE_NAME} | {len(content)} bytes")
    return Response(
        content=content,
        media_type=XLSX_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{settings.EXPORT_FILE_NAME}"'},
    )
