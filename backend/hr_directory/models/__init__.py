"""SQLAlchemy models exposed by the backend."""
from .base import Base
from .employee import Employee, EmployeeStatus
from .pnl import PnLRecord

__all__ = ["Base", "Employee", "EmployeeStatus", "PnLRecord"]
