"""
Org-chart layout and manager reassignment guard.

Everything here works on the flat employee list (anything with ``id`` and
``manager_id``). Reports are derived by filtering on ``manager_id`` each
time; no parent/child object graph is kept.
"""
from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any

from ..log import get_logger

log = get_logger(__name__)

NODE_WIDTH = 260
LEVEL_HEIGHT = 180


class HierarchyCycleError(ValueError):
    """Raised when a manager change would make an employee their own ancestor."""

    def __init__(self, employee_id: int, manager_id: int) -> None:
        super().__init__(
            f"Employee {manager_id} reports to employee {employee_id}; "
            "they cannot become their manager"
            if employee_id != manager_id
            else f"Employee {employee_id} cannot manage themselves"
        )
        self.employee_id = employee_id
        self.manager_id = manager_id


@dataclass
class OrgNode:
    id: int
    level: int
    x: float
    y: float
    width: int
    manager_id: int | None = None


@dataclass
class OrgEdge:
    id: str
    source: int
    target: int


@dataclass
class OrgLayout:
    nodes: list[OrgNode] = field(default_factory=list)
    edges: list[OrgEdge] = field(default_factory=list)
    roots: list[int] = field(default_factory=list)


def _children_index(employees: Iterable[Any]) -> dict[int, list[int]]:
    """manager id -> report ids, in input order."""

    index: dict[int, list[int]] = {}
    for emp in employees:
        if emp.manager_id is not None:
            index.setdefault(emp.manager_id, []).append(emp.id)
    return index


def direct_reports(employee_id: int, employees: Sequence[Any]) -> list[Any]:
    """Employees whose manager is ``employee_id``."""

    return [emp for emp in employees if emp.manager_id == employee_id]


def descendant_ids(employee_id: int, employees: Sequence[Any]) -> set[int]:
    """All transitive reports of ``employee_id`` (not including itself)."""

    children = _children_index(employees)
    found: set[int] = set()
    queue = deque(children.get(employee_id, []))
    while queue:
        current = queue.popleft()
        if current in found or current == employee_id:
            continue
        found.add(current)
        queue.extend(children.get(current, []))
    return found


def would_create_cycle(
    employee_id: int,
    proposed_manager_id: int | None,
    employees: Sequence[Any],
) -> bool:
    """
    True when giving ``employee_id`` the manager ``proposed_manager_id`` breaks
    the forest: the two are the same person, or the proposed manager already
    sits somewhere below the employee.
    """

    if proposed_manager_id is None:
        return False
    if proposed_manager_id == employee_id:
        return True
    return proposed_manager_id in descendant_ids(employee_id, employees)


def ensure_no_cycle(
    employee_id: int,
    proposed_manager_id: int | None,
    employees: Sequence[Any],
) -> None:
    """Raise ``HierarchyCycleError`` if the reassignment would create a cycle."""

    if would_create_cycle(employee_id, proposed_manager_id, employees):
        raise HierarchyCycleError(employee_id, proposed_manager_id)


def build_layout(employees: Sequence[Any]) -> OrgLayout:
    """
    Position every employee for an org chart.

    Roots (no manager, or a manager outside the list) are placed side by
    side. A leaf is one unit wide and an internal node spans the sum of its
    children, so sibling subtrees never overlap; each node is centred above
    its subtree.
    """

    ids = [emp.id for emp in employees]
    known = set(ids)
    manager_of = {emp.id: emp.manager_id for emp in employees}
    children = {
        manager: reports
        for manager, reports in _children_index(employees).items()
        if manager in known
    }

    layout = OrgLayout()
    layout.edges = [
        OrgEdge(id=f"{emp.manager_id}-{emp.id}", source=emp.manager_id, target=emp.id)
        for emp in employees
        if emp.manager_id is not None and emp.manager_id in known
    ]

    widths: dict[int, int] = {}

    def subtree_width(node_id: int, path: set[int]) -> int:
        if node_id in widths:
            return widths[node_id]
        path.add(node_id)
        total = 0
        for child in children.get(node_id, []):
            if child in path:
                continue
            total += subtree_width(child, path)
        path.discard(node_id)
        widths[node_id] = max(total, 1)
        return widths[node_id]

    placed: dict[int, OrgNode] = {}

    def place(root_id: int, offset: int) -> int:
        width = subtree_width(root_id, set())
        queue = deque([(root_id, 0, offset)])
        while queue:
            node_id, level, left = queue.popleft()
            if node_id in placed:
                continue
            node_width = widths[node_id]
            placed[node_id] = OrgNode(
                id=node_id,
                level=level,
                x=(left + node_width / 2) * NODE_WIDTH,
                y=level * LEVEL_HEIGHT,
                width=node_width,
                manager_id=manager_of.get(node_id),
            )
            child_left = left
            for child in children.get(node_id, []):
                if child in placed:
                    continue
                queue.append((child, level + 1, child_left))
                child_left += widths[child]
        layout.roots.append(root_id)
        return width

    offset = 0
    for emp_id in ids:
        manager_id = manager_of[emp_id]
        if manager_id is None or manager_id not in known:
            offset += place(emp_id, offset)

    orphans = [emp_id for emp_id in ids if emp_id not in placed]
    if orphans:
        log.warning("org_chart_cycle_detected", employee_ids=orphans)
        for emp_id in orphans:
            if emp_id not in placed:
                offset += place(emp_id, offset)

    layout.nodes = [placed[emp_id] for emp_id in ids]
    return layout
