"""P&L reductions at employee, department and company level."""
from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

DEFAULT_TOP_PERFORMERS = 10


def compute_roi(revenue: int, cost: int) -> float:
    """Return on investment as a percentage; 0.0 when there is no cost."""

    if cost <= 0:
        return 0.0
    return (revenue - cost) / cost * 100


@dataclass
class PnLSummary:
    total_revenue: int = 0
    total_cost: int = 0
    years_count: int = 0

    @property
    def net_profit(self) -> int:
        return self.total_revenue - self.total_cost

    @property
    def roi(self) -> float:
        return compute_roi(self.total_revenue, self.total_cost)

    def add(self, record: Any) -> None:
        self.total_revenue += record.attributed_revenue
        self.total_cost += record.total_cost
        self.years_count += 1


@dataclass
class DepartmentSummary(PnLSummary):
    employee_ids: set[int] = field(default_factory=set)

    @property
    def employee_count(self) -> int:
        return len(self.employee_ids)


@dataclass
class EmployeePerformance:
    employee_id: int
    summary: PnLSummary

    @property
    def roi(self) -> float:
        return self.summary.roi


def summarize(records: Iterable[Any]) -> PnLSummary:
    """Totals over every record given."""

    summary = PnLSummary()
    for record in records:
        summary.add(record)
    return summary


def summarize_by_employee(records: Iterable[Any]) -> dict[int, PnLSummary]:
    """Per-employee totals keyed by id, in order of first appearance."""

    grouped: dict[int, PnLSummary] = {}
    for record in records:
        grouped.setdefault(record.employee_id, PnLSummary()).add(record)
    return grouped


def summarize_by_department(
    records: Iterable[Any],
    department_of: Mapping[int, str],
) -> dict[str, DepartmentSummary]:
    """
    Totals grouped by the department of each record's owner.

    Records whose employee is missing from ``department_of`` are skipped.
    """

    grouped: dict[str, DepartmentSummary] = {}
    for record in records:
        department = department_of.get(record.employee_id)
        if department is None:
            continue
        bucket = grouped.setdefault(department, DepartmentSummary())
        bucket.add(record)
        bucket.employee_ids.add(record.employee_id)
    return grouped


def top_performers(
    records: Sequence[Any],
    limit: int = DEFAULT_TOP_PERFORMERS,
) -> list[EmployeePerformance]:
    """Employees by ROI, highest first; ties keep first-appearance order."""

    performances = [
        EmployeePerformance(employee_id=emp_id, summary=summary)
        for emp_id, summary in summarize_by_employee(records).items()
    ]
    performances.sort(key=lambda perf: perf.roi, reverse=True)
    return performances[:limit]
