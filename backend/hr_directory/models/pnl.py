"""Yearly profit/loss attribution per employee."""
from sqlalchemy import ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from ..services.pnl import compute_roi
from .base import Base, TimestampMixin


class PnLRecord(TimestampMixin, Base):
    """Revenue and cost attributed to one employee for one year."""

    __tablename__ = "employee_pnl"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    employee_id: Mapped[int] = mapped_column(
        ForeignKey("employees.id", ondelete="CASCADE"), index=True
    )
    year: Mapped[int] = mapped_column(Integer, index=True)
    attributed_revenue: Mapped[int] = mapped_column(Integer, default=0)
    total_cost: Mapped[int] = mapped_column(Integer, default=0)
    notes: Mapped[str | None] = mapped_column(String(500), nullable=True)

    __table_args__ = (
        UniqueConstraint("employee_id", "year", name="uq_employee_pnl_employee_year"),
    )

    @property
    def net_profit(self) -> int:
        return self.attributed_revenue - self.total_cost

    @property
    def roi(self) -> float:
        return compute_roi(self.attributed_revenue, self.total_cost)
