"""Tests for the CSV export."""
import csv
import io
from dataclasses import dataclass
from datetime import date

from hr_directory.services.export import EXPORT_COLUMNS, employees_to_csv


@dataclass
class Row:
    id: int
    name: str
    title: str
    department: str
    email: str
    phone: str | None
    hire_date: date
    salary: int
    status: str
    manager_id: int | None = None


ROWS = [
    Row(1, "Sarah Johnson", "Chief Executive Officer", "Executive", "sarah@company.com",
        "+1-555-0101", date(2020, 1, 15), 250000, "active"),
    Row(2, "Chen, Michael", 'CTO "Tech"', "Engineering", "michael@company.com",
        None, date(2020, 3, 1), 200000, "active", 1),
]


def test_header_comes_first_and_one_row_per_employee():
    content = employees_to_csv(ROWS, {1: "Sarah Johnson"})
    lines = content.splitlines()
    assert lines[0] == ",".join(EXPORT_COLUMNS)
    assert len(lines) == 1 + len(ROWS)


def test_text_fields_are_quoted_and_round_trip():
    content = employees_to_csv(ROWS, {1: "Sarah Johnson"})
    parsed = list(csv.reader(io.StringIO(content)))
    assert parsed[2] == [
        "Chen, Michael",
        'CTO "Tech"',
        "Engineering",
        "michael@company.com",
        "",
        "2020-03-01",
        "200000",
        "active",
        "Sarah Johnson",
    ]
    assert content.splitlines()[1].startswith('"Sarah Johnson","Chief Executive Officer"')
    assert ",250000," in content
