"""Company-wide P&L analytics."""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..config import Settings, get_settings
from ..dependencies import get_db_session
from ..models import Employee, PnLRecord
from ..schemas import (
    DepartmentPnLRead,
    OverallPnLRead,
    PerformerEmployee,
    PnLAnalyticsRead,
    TopPerformerRead,
)
from ..services.pnl import summarize, summarize_by_department, top_performers

router = APIRouter(prefix="/analytics", tags=["analytics"])


@router.get("/pnl", response_model=PnLAnalyticsRead)
async def pnl_analytics(
    department: str | None = None,
    year_from: int | None = None,
    year_to: int | None = None,
    session: AsyncSession = Depends(get_db_session),
    settings: Settings = Depends(get_settings),
) -> PnLAnalyticsRead:
    """
    Overall totals, per-department totals and the best employees by ROI.

    ``department=all`` is the same as no department filter; the year bounds
    are inclusive.
    """

    if year_from is not None and year_to is not None and year_from > year_to:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="year_from must not be after year_to",
        )

    query = (
        select(PnLRecord, Employee)
        .join(Employee, Employee.id == PnLRecord.employee_id)
        .order_by(PnLRecord.year.desc(), PnLRecord.id)
    )
    if department and department != "all":
        query = query.where(Employee.department == department)
    if year_from is not None:
        query = query.where(PnLRecord.year >= year_from)
    if year_to is not None:
        query = query.where(PnLRecord.year <= year_to)

    rows = (await session.execute(query)).all()
    records = [record for record, _ in rows]
    employees = {employee.id: employee for _, employee in rows}

    overall = summarize(records)
    by_department = summarize_by_department(
        records, {emp_id: emp.department for emp_id, emp in employees.items()}
    )
    performers = top_performers(records, limit=settings.top_performers_limit)

    return PnLAnalyticsRead(
        overall=OverallPnLRead(
            total_revenue=overall.total_revenue,
            total_cost=overall.total_cost,
            net_profit=overall.net_profit,
            roi=overall.roi,
            total_records=len(records),
        ),
        department_summary={
            name: DepartmentPnLRead.model_validate(summary)
            for name, summary in by_department.items()
        },
        top_performers=[
            TopPerformerRead(
                employee=PerformerEmployee.model_validate(employees[perf.employee_id]),
                total_revenue=perf.summary.total_revenue,
                total_cost=perf.summary.total_cost,
                net_profit=perf.summary.net_profit,
                roi=perf.roi,
                years_count=perf.summary.years_count,
            )
            for perf in performers
        ],
    )
