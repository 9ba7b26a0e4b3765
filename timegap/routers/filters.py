# timegap/routers/filters.py
"""Filter choices plus apply / clear of the active criteria."""

from fastapi import APIRouter, Depends
from timegap.dataset import Dataset, get_dataset
from timegap.schemas.filters import FilterCriteriaIn, FilterOptionsOut, FilterStateOut
from timegap.services.filter_engine import FilterCriteria

router = APIRouter()


def _state(dataset: Dataset) -> dict:
    snap = dataset.snapshot
    return {
        "date": snap.criteria.date,
        "employee_name": snap.criteria.employee_name,
        "employee_code": snap.criteria.employee_code,
        "filtered_count": len(snap.filtered),
        "total_count": len(snap.records),
    }


@router.get("/filters/options", response_model=FilterOptionsOut)
def get_filter_options(dataset: Dataset = Depends(get_dataset)):
    """Distinct dates, names and codes across the whole upload, sorted."""
    return dataset.filter_options()


@router.get("/filters", response_model=FilterStateOut)
def get_filters(dataset: Dataset = Depends(get_dataset)):
    return _state(dataset)


@router.post("/filters", response_model=FilterStateOut, summary="Apply filter criteria")
def set_filters(body: FilterCriteriaIn, dataset: Dataset = Depends(get_dataset)):
    dataset.apply_filters(FilterCriteria(
        date=body.date,
        employee_name=body.employee_name,
        employee_code=body.employee_code,
    ))
    return _state(dataset)


@router.delete("/filters", response_model=FilterStateOut, summary="Clear all filters")
def reset_filters(dataset: Dataset = Depends(get_dataset)):
    dataset.clear_filters()
    return _state(dataset)
