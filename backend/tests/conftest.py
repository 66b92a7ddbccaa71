"""Test fixtures for the backend."""
import os
from dataclasses import dataclass

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import async_sessionmaker

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")

from hr_directory.database import build_engine, create_schema  # noqa: E402
from hr_directory.dependencies import get_db_session  # noqa: E402
from hr_directory.main import app  # noqa: E402


@dataclass
class Person:
    """Plain stand-in for an employee row in the pure-logic tests."""

    id: int
    name: str
    title: str
    department: str
    email: str
    manager_id: int | None = None


@pytest.fixture
def staff() -> list[Person]:
    """A small org: CEO -> CTO -> Engineering Manager -> engineers."""

    return [
        Person(1, "Sarah Johnson", "Chief Executive Officer", "Executive", "sarah.johnson@company.com"),
        Person(2, "Michael Chen", "Chief Technology Officer", "Engineering", "michael.chen@company.com", 1),
        Person(3, "Emily Rodriguez", "Chief Financial Officer", "Finance", "emily.rodriguez@company.com", 1),
        Person(4, "David Kim", "Director of Human Resources", "Human Resources", "david.kim@company.com", 1),
        Person(5, "Lisa Wang", "Engineering Manager", "Engineering", "lisa.wang@company.com", 2),
        Person(6, "Alex Thompson", "Senior Software Engineer", "Engineering", "alex.thompson@company.com", 5),
        Person(7, "Jessica Lee", "Software Engineer", "Engineering", "jessica.lee@company.com", 5),
        Person(8, "Kevin Park", "Financial Analyst", "Finance", "kevin.park@company.com", 3),
        Person(9, "Rachel Green", "HR Specialist", "Human Resources", "rachel.green@company.com", 4),
    ]


@pytest_asyncio.fixture
async def session_factory(tmp_path):
    """A fresh SQLite database per test."""

    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'test_backend.db'}")
    await create_schema(engine)
    yield async_sessionmaker(engine, expire_on_commit=False)
    await engine.dispose()


@pytest_asyncio.fixture
async def client(session_factory) -> AsyncClient:
    """Provide an HTTP client for integration tests."""

    async def _session_override():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db_session] = _session_override
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def employee_payload():
    """Build a valid create payload; keyword arguments override fields."""

    def _build(**overrides):
        payload = {
            "name": "Ada Lovelace",
            "title": "Software Engineer",
            "department": "Engineering",
            "email": "ada.lovelace@company.com",
            "phone": "+1-555-0100",
            "hire_date": "2021-06-01",
            "salary": 100000,
            "status": "active",
            "manager_id": None,
        }
        payload.update(overrides)
        return payload

    return _build


@pytest_asyncio.fixture
async def org(client: AsyncClient, employee_payload) -> dict[str, int]:
    """Create CEO -> CTO -> Engineering Manager -> Engineer through the API."""

    ids: dict[str, int] = {}
    rows = [
        ("ceo", "Sarah Johnson", "Chief Executive Officer", "Executive", None),
        ("cto", "Michael Chen", "Chief Technology Officer", "Engineering", "ceo"),
        ("cfo", "Emily Rodriguez", "Chief Financial Officer", "Finance", "ceo"),
        ("em", "Lisa Wang", "Engineering Manager", "Engineering", "cto"),
        ("dev", "Jessica Lee", "Software Engineer", "Engineering", "em"),
    ]
    for key, name, title, department, manager in rows:
        response = await client.post(
            "/employees/",
            json=employee_payload(
                name=name,
                title=title,
                department=department,
                email=f"{key}@company.com",
                manager_id=ids.get(manager) if manager else None,
            ),
        )
        assert response.status_code == 201, response.text
        ids[key] = response.json()["id"]
    return ids
