"""Reusable FastAPI dependencies."""
from __future__ import annotations

from collections.abc import AsyncGenerator, Sequence
from functools import lru_cache

from fastapi import Depends, HTTPException, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from .config import Settings, get_settings
from .database import get_session
from .models import Employee
from .services.acronyms import load_acronyms


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Dependency that yields an AsyncSession."""
    async for session in get_session():
        yield session


@lru_cache
def _cached_acronyms(path: str | None) -> dict[str, list[str]]:
    return load_acronyms(path)


def get_acronyms(settings: Settings = Depends(get_settings)) -> dict[str, list[str]]:
    """The search acronym dictionary; tests override this dependency."""

    return _cached_acronyms(settings.acronyms_path)


async def get_employee_or_404(
    employee_id: int,
    session: AsyncSession = Depends(get_db_session),
) -> Employee:
    """Resolve the ``employee_id`` path parameter or answer 404."""

    employee = await session.get(Employee, employee_id)
    if employee is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Employee {employee_id} not found",
        )
    return employee


async def load_all_employees(session: AsyncSession) -> Sequence[Employee]:
    """Every employee, ordered by name."""

    result = await session.execute(select(Employee).order_by(Employee.name, Employee.id))
    return list(result.scalars().all())
