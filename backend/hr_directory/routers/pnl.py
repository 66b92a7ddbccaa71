"""Per-employee P&L records."""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ..dependencies import get_db_session, get_employee_or_404
from ..log import get_logger
from ..models import Employee, PnLRecord
from ..schemas import EmployeePnLRead, PnLRecordCreate, PnLRecordRead, PnLSummaryRead
from ..services.pnl import summarize

router = APIRouter(prefix="/employees", tags=["pnl"])
log = get_logger(__name__)


@router.get("/{employee_id}/pnl", response_model=EmployeePnLRead)
async def get_employee_pnl(
    employee: Employee = Depends(get_employee_or_404),
    session: AsyncSession = Depends(get_db_session),
) -> EmployeePnLRead:
    """Yearly records in ascending year order plus their summary."""

    result = await session.execute(
        select(PnLRecord).where(PnLRecord.employee_id == employee.id).order_by(PnLRecord.year)
    )
    records = list(result.scalars().all())
    return EmployeePnLRead(
        records=[PnLRecordRead.model_validate(record) for record in records],
        summary=PnLSummaryRead.model_validate(summarize(records)),
    )


@router.post(
    "/{employee_id}/pnl",
    response_model=PnLRecordRead,
    status_code=status.HTTP_201_CREATED,
)
async def add_pnl_record(
    payload: PnLRecordCreate,
    employee: Employee = Depends(get_employee_or_404),
    session: AsyncSession = Depends(get_db_session),
) -> PnLRecord:
    """Record one year of revenue and cost; a year can only be recorded once."""

    duplicate = await session.execute(
        select(PnLRecord.id).where(
            PnLRecord.employee_id == employee.id,
            PnLRecord.year == payload.year,
        )
    )
    if duplicate.first() is not None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"P&L for {payload.year} already recorded",
        )

    record = PnLRecord(employee_id=employee.id, **payload.model_dump())
    session.add(record)
    try:
        await session.commit()
    except IntegrityError as exc:
        await session.rollback()
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"P&L for {payload.year} already recorded",
        ) from exc
    await session.refresh(record)
    log.info("pnl_recorded", employee_id=employee.id, year=record.year)
    return record


@router.delete("/{employee_id}/pnl/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_pnl_record(
    record_id: int,
    employee: Employee = Depends(get_employee_or_404),
    session: AsyncSession = Depends(get_db_session),
) -> None:
    record = await session.get(PnLRecord, record_id)
    if record is None or record.employee_id != employee.id:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"P&L record {record_id} not found",
        )
    await session.delete(record)
    await session.commit()
    log.info("pnl_deleted", employee_id=employee.id, record_id=record_id)
