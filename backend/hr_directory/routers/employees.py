"""Employee directory endpoints."""
from collections.abc import Sequence

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ..dependencies import get_acronyms, get_db_session, get_employee_or_404, load_all_employees
from ..log import get_logger
from ..models import Employee, PnLRecord
from ..schemas import (
    EmployeeCreate,
    EmployeeRead,
    EmployeeRef,
    EmployeeUpdate,
    EmployeeWithPnL,
    PnLSummaryRead,
)
from ..services.export import employees_to_csv
from ..services.hierarchy import HierarchyCycleError, direct_reports, ensure_no_cycle
from ..services.pnl import PnLSummary, summarize_by_employee
from ..services.search import rank

router = APIRouter(prefix="/employees", tags=["employees"])
log = get_logger(__name__)


def to_read(employee: Employee, employees: Sequence[Employee]) -> EmployeeRead:
    """Attach manager and direct-report references from the flat list."""

    by_id = {emp.id: emp for emp in employees}
    manager = by_id.get(employee.manager_id) if employee.manager_id is not None else None
    read = EmployeeRead.model_validate(employee)
    read.manager = EmployeeRef.model_validate(manager) if manager is not None else None
    read.reports = [EmployeeRef.model_validate(r) for r in direct_reports(employee.id, employees)]
    return read


async def _ensure_manager_exists(session: AsyncSession, manager_id: int | None) -> None:
    if manager_id is None:
        return
    if await session.get(Employee, manager_id) is None:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Manager {manager_id} does not exist",
        )


async def _ensure_email_free(
    session: AsyncSession, email: str, exclude_id: int | None = None
) -> None:
    query = select(Employee.id).where(func.lower(Employee.email) == email.lower())
    if exclude_id is not None:
        query = query.where(Employee.id != exclude_id)
    if (await session.execute(query)).first() is not None:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Email already in use")


@router.get("/", response_model=list[EmployeeRead])
async def list_employees(
    search: str | None = None,
    department: str | None = None,
    exact: bool = False,
    session: AsyncSession = Depends(get_db_session),
    acronyms: dict[str, list[str]] = Depends(get_acronyms),
) -> list[EmployeeRead]:
    """
    Return the directory, optionally filtered by department and ranked by a
    free-text search. Without ``search`` the rows come back in name order.
    """

    employees = await load_all_employees(session)
    candidates = employees
    if department and department != "all":
        candidates = [emp for emp in employees if emp.department == department]
    if search:
        candidates = rank(candidates, search, exact=exact, acronyms=acronyms)
    return [to_read(emp, employees) for emp in candidates]


@router.get("/departments", response_model=list[str])
async def list_departments(session: AsyncSession = Depends(get_db_session)) -> list[str]:
    """Distinct departments currently in use."""

    result = await session.execute(
        select(Employee.department).distinct().order_by(Employee.department)
    )
    return list(result.scalars().all())


@router.get("/export")
async def export_employees(session: AsyncSession = Depends(get_db_session)) -> Response:
    """Download every employee as CSV."""

    employees = await load_all_employees(session)
    manager_names = {emp.id: emp.name for emp in employees}
    content = employees_to_csv(employees, manager_names)
    log.info("employees_exported", rows=len(employees))
    return Response(
        content=content,
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="employees.csv"'},
    )


@router.get("/pnl-summary", response_model=list[EmployeeWithPnL])
async def employees_with_pnl(session: AsyncSession = Depends(get_db_session)) -> list[EmployeeWithPnL]:
    """Every employee together with their lifetime P&L summary."""

    employees = await load_all_employees(session)
    records = (
        await session.execute(select(PnLRecord).order_by(PnLRecord.year))
    ).scalars().all()
    summaries = summarize_by_employee(records)

    rows: list[EmployeeWithPnL] = []
    for emp in employees:
        base = to_read(emp, employees)
        summary = summaries.get(emp.id, PnLSummary())
        rows.append(
            EmployeeWithPnL(
                **base.model_dump(),
                pnl_summary=PnLSummaryRead.model_validate(summary),
            )
        )
    return rows


@router.get("/{employee_id}", response_model=EmployeeRead)
async def get_employee(
    employee: Employee = Depends(get_employee_or_404),
    session: AsyncSession = Depends(get_db_session),
) -> EmployeeRead:
    """One employee with their manager and direct reports."""

    return to_read(employee, await load_all_employees(session))


@router.post("/", response_model=EmployeeRead, status_code=status.HTTP_201_CREATED)
async def create_employee(
    payload: EmployeeCreate,
    session: AsyncSession = Depends(get_db_session),
) -> EmployeeRead:
    """Create an employee."""

    await _ensure_email_free(session, payload.email)
    await _ensure_manager_exists(session, payload.manager_id)

    employee = Employee(
        name=payload.name.strip(),
        title=payload.title.strip(),
        department=payload.department.strip(),
        email=payload.email.lower(),
        phone=payload.phone,
        hire_date=payload.hire_date,
        salary=payload.salary,
        status=payload.status.value,
        manager_id=payload.manager_id,
    )
    session.add(employee)
    try:
        await session.commit()
    except IntegrityError as exc:
        await session.rollback()
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Email already in use") from exc
    await session.refresh(employee)
    log.info("employee_created", employee_id=employee.id, manager_id=employee.manager_id)
    return to_read(employee, await load_all_employees(session))


@router.put("/{employee_id}", response_model=EmployeeRead)
async def update_employee(
    payload: EmployeeUpdate,
    employee: Employee = Depends(get_employee_or_404),
    session: AsyncSession = Depends(get_db_session),
) -> EmployeeRead:
    """
    Apply the fields present in the body.

    A manager change is checked against the current hierarchy first and
    rejected with 409 if the employee would end up reporting to themselves.
    """

    changes = payload.model_dump(exclude_unset=True)
    for required in ("name", "title", "department", "email", "hire_date", "salary", "status"):
        if required in changes and changes[required] is None:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail=f"{required} cannot be null",
            )

    if "email" in changes:
        changes["email"] = changes["email"].lower()
        await _ensure_email_free(session, changes["email"], exclude_id=employee.id)

    if "manager_id" in changes:
        manager_id = changes["manager_id"]
        await _ensure_manager_exists(session, manager_id)
        try:
            ensure_no_cycle(employee.id, manager_id, await load_all_employees(session))
        except HierarchyCycleError as exc:
            log.warning(
                "manager_reassignment_rejected",
                employee_id=employee.id,
                manager_id=manager_id,
            )
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc

    if "status" in changes:
        changes["status"] = changes["status"].value
    for field_name, value in changes.items():
        if isinstance(value, str) and field_name != "phone":
            value = value.strip()
        setattr(employee, field_name, value)

    try:
        await session.commit()
    except IntegrityError as exc:
        await session.rollback()
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Email already in use") from exc
    await session.refresh(employee)
    log.info("employee_updated", employee_id=employee.id, fields=sorted(changes))
    return to_read(employee, await load_all_employees(session))


@router.delete("/{employee_id}")
async def delete_employee(
    employee: Employee = Depends(get_employee_or_404),
    session: AsyncSession = Depends(get_db_session),
) -> dict[str, object]:
    """
    Delete an employee and their P&L records.

    Direct reports are kept and lose their manager link.
    """

    employee_id = employee.id
    orphaned = await session.execute(
        update(Employee).where(Employee.manager_id == employee_id).values(manager_id=None)
    )
    await session.execute(delete(PnLRecord).where(PnLRecord.employee_id == employee_id))
    await session.delete(employee)
    await session.commit()
    log.info("employee_deleted", employee_id=employee_id, detached_reports=orphaned.rowcount)
    return {
        "message": "Employee deleted successfully",
        "detached_reports": orphaned.rowcount,
    }
