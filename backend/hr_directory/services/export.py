"""CSV rendering for the employee export."""
from __future__ import annotations

import csv
import io
from collections.abc import Iterable, Mapping
from typing import Any

EXPORT_COLUMNS = [
    "Name",
    "Title",
    "Department",
    "Email",
    "Phone",
    "Hire Date",
    "Salary",
    "Status",
    "Manager",
]


def export_row(employee: Any, manager_name: str | None) -> list[Any]:
    hire_date = employee.hire_date.isoformat() if employee.hire_date else ""
    return [
        employee.name,
        employee.title,
        employee.department,
        employee.email,
        employee.phone or "",
        hire_date,
        int(employee.salary or 0),
        employee.status,
        manager_name or "",
    ]


def employees_to_csv(
    employees: Iterable[Any],
    manager_names: Mapping[int, str] | None = None,
) -> str:
    """
    Render employees as CSV with a plain header row.

    Text columns are always quoted so values containing commas or quotes
    survive a round trip; salary is written as a bare integer.
    """

    manager_names = manager_names or {}
    buffer = io.StringIO()
    buffer.write(",".join(EXPORT_COLUMNS) + "\n")
    writer = csv.writer(buffer, quoting=csv.QUOTE_NONNUMERIC, lineterminator="\n")
    for employee in employees:
        writer.writerow(export_row(employee, manager_names.get(employee.manager_id)))
    return buffer.getvalue()
