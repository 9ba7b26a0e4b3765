from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class TimeGapSummaryOut(BaseModel):
    employee_name: str
    employee_code: str
    first_time: str
    last_time: str
    total_gap: str
    record_count: int
    has_unparsed_timestamps: bool = False

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True
