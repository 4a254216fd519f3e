"""Update, get and delete task endpoints."""

from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from support import (
    ADMIN_ID,
    ASSIGNEE_ID,
    MEMBER_ID,
    OTHER_PROJECT_ID,
    OTHER_WORKSPACE_ID,
    OUTSIDER_ID,
    OWNER_ID,
    PROJECT_ID,
    SECOND_PROJECT_ID,
    WORKSPACE_ID,
    add_task,
    at,
)
from taskflow.infrastructure.persistence.models import Task

BASE = f"/api/v1/workspaces/{WORKSPACE_ID}"
TASK_ID = "t-001"
TASK_URL = f"{BASE}/projects/{PROJECT_ID}/tasks/{TASK_ID}"


async def _seed_task(session: AsyncSession) -> None:
    await add_task(
        session,
        task_id=TASK_ID,
        title="Design landing page",
        created_at=at(1),
        assigned_to=ASSIGNEE_ID,
    )


async def test_update_changes_only_sent_fields(
    api_client: AsyncClient, seeded: AsyncSession
) -> None:
    await _seed_task(seeded)
    response = await api_client.put(
        TASK_URL, headers={"userid": MEMBER_ID}, json={"status": "IN_PROGRESS"}
    )
    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Task updated successfully"
    assert data["task"]["status"] == "IN_PROGRESS"
    assert data["task"]["title"] == "Design landing page"
    assert data["task"]["assignedTo"] == ASSIGNEE_ID


async def test_update_can_clear_assignee(
    api_client: AsyncClient, seeded: AsyncSession
) -> None:
    await _seed_task(seeded)
    response = await api_client.put(
        TASK_URL, headers={"userid": ADMIN_ID}, json={"assignedTo": None}
    )
    assert response.status_code == 200
    assert response.json()["task"]["assignedTo"] is None


async def test_update_rejects_null_title(
    api_client: AsyncClient, seeded: AsyncSession
) -> None:
    await _seed_task(seeded)
    response = await api_client.put(
        TASK_URL, headers={"userid": OWNER_ID}, json={"title": None}
    )
    assert response.status_code == 422


async def test_update_task_in_other_project_returns_404(
    api_client: AsyncClient, seeded: AsyncSession
) -> None:
    await _seed_task(seeded)
    response = await api_client.put(
        f"{BASE}/projects/{SECOND_PROJECT_ID}/tasks/{TASK_ID}",
        headers={"userid": OWNER_ID},
        json={"title": "Moved"},
    )
    assert response.status_code == 404
    assert (
        response.json()["message"]
        == "Task not found or does not belong to this project"
    )


async def test_update_by_non_member_is_forbidden(
    api_client: AsyncClient, seeded: AsyncSession
) -> None:
    await _seed_task(seeded)
    response = await api_client.put(
        TASK_URL, headers={"userid": OUTSIDER_ID}, json={"title": "Hijacked"}
    )
    assert response.status_code == 403
    task = await seeded.get(Task, TASK_ID)
    await seeded.refresh(task)
    assert task.title == "Design landing page"


async def test_get_task_is_idempotent(
    api_client: AsyncClient, seeded: AsyncSession
) -> None:
    """Two reads with no writes in between return identical bodies."""
    await _seed_task(seeded)
    first = await api_client.get(TASK_URL, headers={"userid": MEMBER_ID})
    second = await api_client.get(TASK_URL, headers={"userid": MEMBER_ID})
    assert first.status_code == 200
    assert first.json() == second.json()
    assert first.json()["message"] == "Task fetched successfully"
    assert first.json()["task"]["id"] == TASK_ID


async def test_get_unknown_task_returns_404(api_client: AsyncClient) -> None:
    response = await api_client.get(
        f"{BASE}/projects/{PROJECT_ID}/tasks/t-missing", headers={"userid": OWNER_ID}
    )
    assert response.status_code == 404
    assert response.json()["error"] == "RESOURCE_NOT_FOUND"


async def test_get_through_foreign_project_returns_404(
    api_client: AsyncClient, seeded: AsyncSession
) -> None:
    await _seed_task(seeded)
    response = await api_client.get(
        f"{BASE}/projects/{OTHER_PROJECT_ID}/tasks/{TASK_ID}",
        headers={"userid": OWNER_ID},
    )
    assert response.status_code == 404


async def test_delete_task(api_client: AsyncClient, seeded: AsyncSession) -> None:
    await _seed_task(seeded)
    response = await api_client.delete(
        f"{BASE}/tasks/{TASK_ID}", headers={"userid": ADMIN_ID}
    )
    assert response.status_code == 200
    assert response.json() == {"message": "Task deleted successfully"}

    again = await api_client.get(TASK_URL, headers={"userid": ADMIN_ID})
    assert again.status_code == 404


async def test_member_cannot_delete(
    api_client: AsyncClient, seeded: AsyncSession
) -> None:
    """MEMBER lacks DELETE_TASK: 403 with the missing permission, task untouched."""
    await _seed_task(seeded)
    response = await api_client.delete(
        f"{BASE}/tasks/{TASK_ID}", headers={"userid": MEMBER_ID}
    )
    assert response.status_code == 403
    body = response.json()
    assert body["error"] == "PERMISSION_DENIED"
    assert body["details"]["missing_permissions"] == ["DELETE_TASK"]
    assert await seeded.get(Task, TASK_ID) is not None


async def test_delete_task_of_other_workspace_returns_404(
    api_client: AsyncClient, seeded: AsyncSession
) -> None:
    await add_task(
        seeded,
        task_id="t-foreign",
        title="Beta task",
        created_at=at(2),
        workspace_id=OTHER_WORKSPACE_ID,
        project_id=OTHER_PROJECT_ID,
    )
    response = await api_client.delete(
        f"{BASE}/tasks/t-foreign", headers={"userid": OWNER_ID}
    )
    assert response.status_code == 404
    assert (
        response.json()["message"]
        == "Task not found or does not belong to the specified workspace"
    )
    assert await seeded.get(Task, "t-foreign") is not None
