"""Integration tests for the org-chart endpoints."""
import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_org_chart_layout(client: AsyncClient, org) -> None:
    response = await client.get("/org-chart/")
    assert response.status_code == 200
    body = response.json()

    assert body["roots"] == [org["ceo"]]
    nodes = {node["id"]: node for node in body["nodes"]}
    assert nodes[org["ceo"]]["level"] == 0
    assert nodes[org["dev"]]["level"] == 3
    assert nodes[org["dev"]]["employee"]["name"] == "Jessica Lee"
    assert nodes[org["ceo"]]["width"] == 2

    edge_ids = {edge["id"] for edge in body["edges"]}
    assert f"{org['em']}-{org['dev']}" in edge_ids
    assert len(edge_ids) == 4


@pytest.mark.asyncio
async def test_cycle_check(client: AsyncClient, org) -> None:
    response = await client.get(
        "/org-chart/cycle-check", params={"employee_id": org["cto"], "manager_id": org["dev"]}
    )
    assert response.status_code == 200
    assert response.json()["would_create_cycle"] is True

    response = await client.get(
        "/org-chart/cycle-check", params={"employee_id": org["dev"], "manager_id": org["cfo"]}
    )
    assert response.json()["would_create_cycle"] is False

    missing = await client.get("/org-chart/cycle-check", params={"employee_id": org["dev"], "manager_id": 999})
    assert missing.status_code == 404
