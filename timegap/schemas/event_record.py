from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class EventRecordOut(BaseModel):
    id: int
    log_date: str
    direction: str
    employee_code: str
    employee_name: str
    company: str
    department: str

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True
