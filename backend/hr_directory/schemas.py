"""Pydantic schemas used across the backend API."""
from datetime import date

from pydantic import BaseModel, EmailStr, Field, field_validator

from .models import EmployeeStatus


class EmployeeRef(BaseModel):
    """Minimal reference used for managers and direct reports."""

    id: int
    name: str
    title: str

    class Config:
        from_attributes = True


class EmployeeBase(BaseModel):
    """Shared properties for employee operations."""

    name: str = Field(min_length=1, max_length=200)
    title: str = Field(min_length=1, max_length=200)
    department: str = Field(min_length=1, max_length=120)
    email: EmailStr
    phone: str | None = None
    hire_date: date
    salary: int = Field(ge=0)
    status: EmployeeStatus = EmployeeStatus.ACTIVE
    manager_id: int | None = None

    @field_validator("phone")
    @classmethod
    def blank_phone_is_none(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        return value.strip()


class EmployeeCreate(EmployeeBase):
    """Employee payload for creation."""


class EmployeeUpdate(BaseModel):
    """Partial update; only fields present in the request body are applied."""

    name: str | None = Field(default=None, min_length=1, max_length=200)
    title: str | None = Field(default=None, min_length=1, max_length=200)
    department: str | None = Field(default=None, min_length=1, max_length=120)
    email: EmailStr | None = None
    phone: str | None = None
    hire_date: date | None = None
    salary: int | None = Field(default=None, ge=0)
    status: EmployeeStatus | None = None
    manager_id: int | None = None

    @field_validator("phone")
    @classmethod
    def blank_phone_is_none(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        return value.strip()


class EmployeeRead(EmployeeBase):
    """Employee representation returned by the API."""

    id: int
    email: str
    manager: EmployeeRef | None = None
    reports: list[EmployeeRef] = Field(default_factory=list)

    class Config:
        from_attributes = True


class PnLSummaryRead(BaseModel):
    total_revenue: int
    total_cost: int
    net_profit: int
    roi: float
    years_count: int

    class Config:
        from_attributes = True


class EmployeeWithPnL(EmployeeRead):
    pnl_summary: PnLSummaryRead


class PnLRecordCreate(BaseModel):
    """One year of attributed revenue and cost."""

    year: int = Field(ge=1900, le=2200)
    attributed_revenue: int = Field(ge=0)
    total_cost: int = Field(ge=0)
    notes: str | None = None


class PnLRecordRead(PnLRecordCreate):
    id: int
    employee_id: int
    net_profit: int
    roi: float

    class Config:
        from_attributes = True


class EmployeePnLRead(BaseModel):
    records: list[PnLRecordRead]
    summary: PnLSummaryRead


class OverallPnLRead(BaseModel):
    total_revenue: int
    total_cost: int
    net_profit: int
    roi: float
    total_records: int


class DepartmentPnLRead(BaseModel):
    total_revenue: int
    total_cost: int
    net_profit: int
    roi: float
    employee_count: int

    class Config:
        from_attributes = True


class PerformerEmployee(BaseModel):
    id: int
    name: str
    title: str
    department: str
    salary: int

    class Config:
        from_attributes = True


class TopPerformerRead(BaseModel):
    employee: PerformerEmployee
    total_revenue: int
    total_cost: int
    net_profit: int
    roi: float
    years_count: int


class PnLAnalyticsRead(BaseModel):
    overall: OverallPnLRead
    department_summary: dict[str, DepartmentPnLRead]
    top_performers: list[TopPerformerRead]


class OrgNodeRead(BaseModel):
    id: int
    level: int
    x: float
    y: float
    width: int
    manager_id: int | None = None
    employee: EmployeeRef
    department: str
    status: str


class OrgEdgeRead(BaseModel):
    id: str
    source: int
    target: int

    class Config:
        from_attributes = True


class OrgChartRead(BaseModel):
    nodes: list[OrgNodeRead]
    edges: list[OrgEdgeRead]
    roots: list[int]


class CycleCheckRead(BaseModel):
    employee_id: int
    manager_id: int
    would_create_cycle: bool
