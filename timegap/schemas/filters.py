from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class FilterCriteriaIn(BaseModel):
    date: str = ""
    employee_name: str = ""
    employee_code: str = ""

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True


class FilterStateOut(FilterCriteriaIn):
    filtered_count: int
    total_count: int


class FilterOptionsOut(BaseModel):
    dates: list[str]
    employee_names: list[str]
    employee_codes: list[str]

    class Config:
        alias_generator = to_camel
        populate_by_name = True
