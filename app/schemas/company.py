"""
Company Pydantic schemas
"""

from decimal import Decimal
from typing import List, Optional
from urllib.parse import urlparse

from pydantic import BaseModel, Field, field_validator, model_validator

# INTEGER column range
MAX_EMPLOYEES = 2147483647


def _check_url(value: Optional[str]) -> Optional[str]:
    if value is None:
        return value
    parsed = urlparse(value)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValueError("does not conform to the 'uri' format")
    return value


class CompanyNew(BaseModel):
    """Company creation schema"""
    handle: str = Field(..., min_length=1, max_length=25)
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    num_employees: Optional[int] = Field(None, alias="numEmployees", ge=0, le=MAX_EMPLOYEES)
    logo_url: Optional[str] = Field(None, alias="logoUrl")

    @field_validator("logo_url")
    @classmethod
    def check_logo_url(cls, value):
        return _check_url(value)

    class Config:
        extra = "forbid"
        strict = True


class CompanyUpdate(BaseModel):
    """Company partial update schema; handle cannot be changed"""
    name: str = Field(None, min_length=1)
    description: Optional[str] = None
    num_employees: Optional[int] = Field(None, alias="numEmployees", ge=0, le=MAX_EMPLOYEES)
    logo_url: Optional[str] = Field(None, alias="logoUrl")

    @field_validator("logo_url")
    @classmethod
    def check_logo_url(cls, value):
        return _check_url(value)

    class Config:
        extra = "forbid"
        strict = True


class CompanySearchFilters(BaseModel):
    """Query filters for listing companies"""
    name_like: Optional[str] = Field(None, alias="nameLike", min_length=1)
    min_employees: Optional[int] = Field(None, alias="minEmployees", ge=0, le=MAX_EMPLOYEES)
    max_employees: Optional[int] = Field(None, alias="maxEmployees", ge=0, le=MAX_EMPLOYEES)

    @model_validator(mode="after")
    def check_employee_range(self):
        if (
            self.min_employees is not None
            and self.max_employees is not None
            and self.min_employees > self.max_employees
        ):
            raise ValueError("minEmployees cannot be greater than maxEmployees.")
        return self

    class Config:
        extra = "forbid"
        strict = True


class CompanyResponse(BaseModel):
    """Company response schema"""
    handle: str
    name: str
    description: Optional[str] = None
    num_employees: Optional[int] = Field(None, alias="numEmployees")
    logo_url: Optional[str] = Field(None, alias="logoUrl")

    class Config:
        from_attributes = True
        populate_by_name = True


class JobSummary(BaseModel):
    """Job as listed under its company"""
    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[Decimal] = None

    class Config:
        from_attributes = True


class CompanyWithJobsResponse(CompanyResponse):
    """Company response including its jobs"""
    jobs: List[JobSummary] = []


class CompanyOut(BaseModel):
    company: CompanyResponse


class CompanyDetailOut(BaseModel):
    company: CompanyWithJobsResponse


class CompanyListOut(BaseModel):
    companies: List[CompanyResponse]


class CompanyDeletedOut(BaseModel):
    deleted: str
