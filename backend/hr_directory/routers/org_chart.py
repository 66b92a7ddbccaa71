"""Org-chart layout and the drag-and-drop reassignment check."""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..dependencies import get_db_session, load_all_employees
from ..schemas import CycleCheckRead, EmployeeRef, OrgChartRead, OrgEdgeRead, OrgNodeRead
from ..services.hierarchy import build_layout, would_create_cycle

router = APIRouter(prefix="/org-chart", tags=["org-chart"])


@router.get("/", response_model=OrgChartRead)
async def org_chart(session: AsyncSession = Depends(get_db_session)) -> OrgChartRead:
    """Positioned nodes and manager edges for the whole organisation."""

    employees = await load_all_employees(session)
    by_id = {emp.id: emp for emp in employees}
    layout = build_layout(employees)
    return OrgChartRead(
        nodes=[
            OrgNodeRead(
                id=node.id,
                level=node.level,
                x=node.x,
                y=node.y,
                width=node.width,
                manager_id=node.manager_id,
                employee=EmployeeRef.model_validate(by_id[node.id]),
                department=by_id[node.id].department,
                status=by_id[node.id].status,
            )
            for node in layout.nodes
        ],
        edges=[OrgEdgeRead.model_validate(edge) for edge in layout.edges],
        roots=layout.roots,
    )


@router.get("/cycle-check", response_model=CycleCheckRead)
async def cycle_check(
    employee_id: int,
    manager_id: int,
    session: AsyncSession = Depends(get_db_session),
) -> CycleCheckRead:
    """Would making ``manager_id`` the manager of ``employee_id`` create a loop?"""

    employees = await load_all_employees(session)
    known = {emp.id for emp in employees}
    for candidate in (employee_id, manager_id):
        if candidate not in known:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Employee {candidate} not found",
            )
    return CycleCheckRead(
        employee_id=employee_id,
        manager_id=manager_id,
        would_create_cycle=would_create_cycle(employee_id, manager_id, employees),
    )
