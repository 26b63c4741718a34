import pytest
from httpx import AsyncClient

from tests.fixtures.json_loader import TestDataLoader


@pytest.mark.asyncio
async def test_list_tasks_in_catalog_order(client: AsyncClient, auth_headers):
    response = await client.get("/tasks", headers=auth_headers("new_hire"))

    assert response.status_code == 200
    assert [t["title"] for t in response.json()] == [
        t["title"] for t in TestDataLoader.tasks_for("acme")
    ]


@pytest.mark.asyncio
async def test_manager_creates_task_at_end_of_catalog(client: AsyncClient, seed, auth_headers):
    response = await client.post(
        "/tasks",
        json={"title": "Set up laptop", "task_type": "form", "required": False},
        headers=auth_headers("manager"),
    )

    assert response.status_code == 201
    data = response.json()
    assert data["order_sequence"] == 3
    assert data["company_id"] == str(seed.company_ids["acme"])
    assert data["created_by"] == str(seed.profile_ids["manager"])

    employee = await client.post(
        "/employees",
        json=TestDataLoader.employee_payload("jane"),
        headers=auth_headers("hr"),
    )
    assert "Set up laptop" in [a["task_title"] for a in employee.json()["assignments"]]


@pytest.mark.asyncio
async def test_employee_cannot_edit_catalog(client: AsyncClient, seed, auth_headers):
    task_id = seed.task_ids["Meet the team"]

    created = await client.post(
        "/tasks", json={"title": "Nope"}, headers=auth_headers("new_hire")
    )
    updated = await client.put(
        f"/tasks/{task_id}", json={"title": "Nope"}, headers=auth_headers("new_hire")
    )
    deleted = await client.delete(f"/tasks/{task_id}", headers=auth_headers("new_hire"))

    assert created.status_code == 403
    assert updated.status_code == 403
    assert deleted.status_code == 403


@pytest.mark.asyncio
async def test_update_task(client: AsyncClient, seed, auth_headers):
    task_id = seed.task_ids["Meet the team"]

    response = await client.put(
        f"/tasks/{task_id}",
        json={"required": True, "description": "Coffee with the team"},
        headers=auth_headers("hr"),
    )

    assert response.status_code == 200
    assert response.json()["required"] is True
    assert response.json()["description"] == "Coffee with the team"
    assert response.json()["title"] == "Meet the team"


@pytest.mark.asyncio
async def test_deleted_task_leaves_default_set(client: AsyncClient, seed, auth_headers):
    """
    Given a task is deleted
    Then it is kept as inactive
    And it is no longer auto-assigned
    But it is listed for hr when inactive tasks are requested
    """
    task_id = seed.task_ids["Meet the team"]

    deleted = await client.delete(f"/tasks/{task_id}", headers=auth_headers("hr"))
    assert deleted.status_code == 200
    assert deleted.json()["is_active"] is False

    again = await client.delete(f"/tasks/{task_id}", headers=auth_headers("hr"))
    assert again.status_code == 200

    active = await client.get("/tasks", headers=auth_headers("hr"))
    assert str(task_id) not in [t["id"] for t in active.json()]

    everything = await client.get(
        "/tasks", params={"include_inactive": "true"}, headers=auth_headers("hr")
    )
    assert str(task_id) in [t["id"] for t in everything.json()]

    hidden = await client.get(
        "/tasks", params={"include_inactive": "true"}, headers=auth_headers("new_hire")
    )
    assert hidden.status_code == 403

    employee = await client.post(
        "/employees",
        json=TestDataLoader.employee_payload("jane"),
        headers=auth_headers("hr"),
    )
    assert len(employee.json()["assignments"]) == 2


@pytest.mark.asyncio
async def test_task_of_other_company_is_not_found(client: AsyncClient, seed, auth_headers):
    response = await client.put(
        f"/tasks/{seed.task_ids['Safety training']}",
        json={"title": "Hijacked"},
        headers=auth_headers("hr"),
    )

    assert response.status_code == 404
