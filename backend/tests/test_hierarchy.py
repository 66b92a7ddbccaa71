"""Tests for the org-chart layout and the reassignment cycle guard."""
import random

import pytest

from hr_directory.services.hierarchy import (
    LEVEL_HEIGHT,
    NODE_WIDTH,
    HierarchyCycleError,
    build_layout,
    descendant_ids,
    direct_reports,
    ensure_no_cycle,
    would_create_cycle,
)

from conftest import Person


def chain_to_root(person_id, by_id):
    """Walk up the manager links; fails if a link is revisited."""

    seen = []
    current = by_id[person_id].manager_id
    while current is not None:
        assert current not in seen and current != person_id, f"cycle through {person_id}"
        seen.append(current)
        current = by_id[current].manager_id
    return seen


def test_direct_reports_and_descendants(staff):
    assert [p.id for p in direct_reports(1, staff)] == [2, 3, 4]
    assert descendant_ids(2, staff) == {5, 6, 7}
    assert descendant_ids(7, staff) == set()


@pytest.mark.parametrize(
    ("employee_id", "manager_id", "expected"),
    [
        (2, 6, True),   # CTO under a grandchild
        (1, 7, True),   # CEO under a leaf four levels down
        (5, 5, True),   # self
        (6, 2, False),  # engineer moved up to the CTO
        (5, 3, False),  # manager moved to another branch
        (1, None, False),
    ],
)
def test_would_create_cycle(staff, employee_id, manager_id, expected):
    assert would_create_cycle(employee_id, manager_id, staff) is expected


def test_ensure_no_cycle_raises(staff):
    with pytest.raises(HierarchyCycleError) as excinfo:
        ensure_no_cycle(2, 7, staff)
    assert excinfo.value.employee_id == 2
    assert excinfo.value.manager_id == 7
    ensure_no_cycle(7, 3, staff)


def test_guarded_reassignments_keep_the_forest_acyclic(staff):
    rng = random.Random(7)
    by_id = {p.id: p for p in staff}
    for _ in range(300):
        employee = rng.choice(staff)
        manager_id = rng.choice([None] + [p.id for p in staff])
        if would_create_cycle(employee.id, manager_id, staff):
            continue
        employee.manager_id = manager_id
        for person in staff:
            chain_to_root(person.id, by_id)


def test_layout_levels_and_positions(staff):
    layout = build_layout(staff)
    nodes = {node.id: node for node in layout.nodes}

    assert layout.roots == [1]
    assert [node.id for node in layout.nodes] == [p.id for p in staff]
    assert {nodes[i].level for i in (2, 3, 4)} == {1}
    assert nodes[6].level == 3
    assert nodes[6].y == 3 * LEVEL_HEIGHT

    # leaves are one unit, parents the sum of their children
    assert nodes[5].width == 2
    assert nodes[2].width == 2
    assert nodes[1].width == 4
    assert nodes[1].x == 2 * NODE_WIDTH
    assert nodes[2].x == 1 * NODE_WIDTH
    assert nodes[3].x == 2.5 * NODE_WIDTH


def test_sibling_subtrees_do_not_overlap(staff):
    nodes = {node.id: node for node in build_layout(staff).nodes}
    spans = []
    for child in (2, 3, 4):
        node = nodes[child]
        half = node.width * NODE_WIDTH / 2
        spans.append((node.x - half, node.x + half))
    for (_, right), (left, _) in zip(spans, spans[1:]):
        assert right <= left


def test_edges_follow_manager_links(staff):
    edges = build_layout(staff).edges
    assert len(edges) == 8
    assert edges[0].id == "1-2"
    assert (edges[0].source, edges[0].target) == (1, 2)


def test_forest_places_roots_side_by_side(staff):
    contractor = Person(40, "Omar Haddad", "Consultant", "Operations", "omar@company.com")
    layout = build_layout(staff + [contractor])
    nodes = {node.id: node for node in layout.nodes}
    assert layout.roots == [1, 40]
    assert nodes[40].level == 0
    assert nodes[40].x == 4.5 * NODE_WIDTH


def test_manager_outside_the_list_counts_as_root():
    people = [Person(1, "A", "Engineer", "Engineering", "a@company.com", manager_id=99)]
    layout = build_layout(people)
    assert layout.roots == [1]
    assert layout.edges == []


def test_corrupt_cycle_is_still_laid_out():
    people = [
        Person(1, "A", "Engineer", "Engineering", "a@company.com", manager_id=2),
        Person(2, "B", "Engineer", "Engineering", "b@company.com", manager_id=1),
    ]
    layout = build_layout(people)
    assert {node.id for node in layout.nodes} == {1, 2}
    assert layout.roots == [1]
