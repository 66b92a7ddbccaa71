"""
Populate the directory with a demo organisation and yearly P&L history.

Usage:
    hr-directory-seed --reset
    python -m hr_directory.seed --seed 42 --until 2025
"""
from __future__ import annotations

import argparse
import asyncio
import random
from dataclasses import dataclass
from datetime import date

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from .config import get_settings
from .database import build_engine, create_schema
from .log import get_logger, setup_logging
from .models import Employee, PnLRecord

log = get_logger(__name__)

COST_OVERHEAD = 1.4


@dataclass
class SeedPerson:
    key: str
    name: str
    title: str
    department: str
    hire_date: date
    salary: int
    manager: str | None = None


DEMO_ORG = [
    SeedPerson("ceo", "Sarah Johnson", "Chief Executive Officer", "Executive", date(2020, 1, 15), 250000),
    SeedPerson("cto", "Michael Chen", "Chief Technology Officer", "Engineering", date(2020, 3, 1), 200000, "ceo"),
    SeedPerson("cfo", "Emily Rodriguez", "Chief Financial Officer", "Finance", date(2020, 2, 15), 180000, "ceo"),
    SeedPerson("hrd", "David Kim", "Director of Human Resources", "Human Resources", date(2020, 4, 1), 120000, "ceo"),
    SeedPerson("em1", "Lisa Wang", "Engineering Manager", "Engineering", date(2021, 1, 15), 140000, "cto"),
    SeedPerson("em2", "James Wilson", "Engineering Manager", "Engineering", date(2021, 2, 1), 135000, "cto"),
    SeedPerson("fm", "Maria Garcia", "Finance Manager", "Finance", date(2021, 3, 1), 95000, "cfo"),
    SeedPerson("dev1", "Alex Thompson", "Senior Software Engineer", "Engineering", date(2021, 6, 1), 110000, "em1"),
    SeedPerson("dev2", "Jessica Lee", "Software Engineer", "Engineering", date(2022, 1, 15), 85000, "em1"),
    SeedPerson("dev3", "Robert Brown", "Senior Software Engineer", "Engineering", date(2021, 8, 1), 105000, "em2"),
    SeedPerson("dev4", "Amanda Davis", "Software Engineer", "Engineering", date(2022, 3, 1), 80000, "em2"),
    SeedPerson("fa", "Kevin Park", "Financial Analyst", "Finance", date(2022, 5, 1), 65000, "fm"),
    SeedPerson("hrs", "Rachel Green", "HR Specialist", "Human Resources", date(2022, 7, 1), 60000, "hrd"),
]


def revenue_profile(title: str) -> tuple[int, float]:
    """Base yearly revenue and growth rate for a role."""

    if "Chief" in title or "CEO" in title:
        return 3_000_000, 0.12
    if "Director" in title or "Manager" in title:
        return 1_000_000, 0.10
    if "Senior" in title:
        return 600_000, 0.08
    return 300_000, 0.15


def build_pnl(employee: Employee, until_year: int, rng: random.Random) -> list[PnLRecord]:
    """One record per year from the hire year to ``until_year`` inclusive."""

    base, growth = revenue_profile(employee.title)
    records = []
    for offset in range(until_year - employee.hire_date.year + 1):
        revenue = base * (1 + growth) ** offset * (0.9 + rng.random() * 0.2)
        records.append(
            PnLRecord(
                employee_id=employee.id,
                year=employee.hire_date.year + offset,
                attributed_revenue=round(revenue),
                total_cost=round(employee.salary * COST_OVERHEAD),
                notes=(
                    f"First year - {employee.title}"
                    if offset == 0
                    else f"Year {offset + 1} - Performance impact"
                ),
            )
        )
    return records


async def seed(
    session: AsyncSession,
    until_year: int | None = None,
    rng_seed: int | None = None,
    reset: bool = False,
) -> dict[str, int]:
    """Insert the demo organisation; returns how many rows were created."""

    until_year = until_year or date.today().year
    rng = random.Random(rng_seed)

    if reset:
        await session.execute(delete(PnLRecord))
        await session.execute(delete(Employee))
        await session.flush()

    created: dict[str, Employee] = {}
    for person in DEMO_ORG:
        employee = Employee(
            name=person.name,
            title=person.title,
            department=person.department,
            email=f"{person.name.lower().replace(' ', '.')}@company.com",
            phone=f"+1-555-01{len(created) + 1:02d}",
            hire_date=person.hire_date,
            salary=person.salary,
            status="active",
            manager_id=created[person.manager].id if person.manager else None,
        )
        session.add(employee)
        await session.flush()
        created[person.key] = employee

    pnl_count = 0
    for employee in created.values():
        records = build_pnl(employee, until_year, rng)
        session.add_all(records)
        pnl_count += len(records)

    await session.commit()
    log.info("seed_complete", employees=len(created), pnl_records=pnl_count)
    return {"employees": len(created), "pnl_records": pnl_count}


async def _run(args: argparse.Namespace) -> None:
    engine = build_engine(args.database_url or get_settings().database_url)
    try:
        await create_schema(engine)
        factory = async_sessionmaker(engine, expire_on_commit=False)
        async with factory() as session:
            await seed(session, until_year=args.until, rng_seed=args.seed, reset=args.reset)
    finally:
        await engine.dispose()


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Seed the HR directory with demo data.")
    parser.add_argument("--database-url", help="defaults to DATABASE_URL")
    parser.add_argument("--until", type=int, help="last P&L year (default: current year)")
    parser.add_argument("--seed", type=int, help="random seed for revenue variance")
    parser.add_argument("--reset", action="store_true", help="delete existing rows first")
    args = parser.parse_args(argv)

    setup_logging(get_settings().log_level)
    asyncio.run(_run(args))


if __name__ == "__main__":
    main()
