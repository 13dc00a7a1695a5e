import pytest
from httpx import AsyncClient


async def assign_tasks(client, api, auth, users, titles):
    """Owner assigns team tasks to `member`, one notification each"""
    response = await client.post(
        f"{api}/teams", json={"name": "Core"}, headers=auth["owner"]
    )
    team_id = response.json()["data"]["id"]
    await client.post(
        f"{api}/teams/{team_id}/members",
        json={"email": users["member"].email},
        headers=auth["owner"],
    )
    for title in titles:
        await client.post(
            f"{api}/tasks",
            json={"title": title, "team": team_id, "assignedTo": str(users["member"].id)},
            headers=auth["owner"],
        )


def assignments(body):
    return [n for n in body["data"] if n["type"] == "task_assigned"]


@pytest.mark.asyncio
async def test_assignment_creates_notification(
    client: AsyncClient, api, auth, users, publisher
):
    await assign_tasks(client, api, auth, users, ["Ship"])

    response = await client.get(f"{api}/notifications", headers=auth["member"])

    assert response.status_code == 200
    body = response.json()
    (notification,) = assignments(body)
    assert notification["user"] == str(users["member"].id)
    assert notification["read"] is False
    assert notification["relatedTask"] is not None
    assert body["unreadCount"] == body["count"]

    pushed = [
        payload
        for channel, event, payload in publisher.published
        if channel == str(users["member"].id) and payload["type"] == "task_assigned"
    ]
    assert [p["id"] for p in pushed] == [notification["id"]]


@pytest.mark.asyncio
async def test_read_state(client: AsyncClient, api, auth, users):
    await assign_tasks(client, api, auth, users, ["One", "Two"])
    response = await client.get(f"{api}/notifications", headers=auth["member"])
    total = response.json()["count"]
    first = assignments(response.json())[0]

    response = await client.put(
        f"{api}/notifications/{first['id']}/read", headers=auth["member"]
    )
    assert response.status_code == 200
    assert response.json()["data"]["read"] is True
    assert response.json()["data"]["readAt"] is not None

    response = await client.get(f"{api}/notifications/unread/count", headers=auth["member"])
    assert response.json()["data"] == {"count": total - 1}

    response = await client.get(
        f"{api}/notifications", params={"read": "false"}, headers=auth["member"]
    )
    assert first["id"] not in [n["id"] for n in response.json()["data"]]

    response = await client.put(f"{api}/notifications/read-all", headers=auth["member"])
    assert response.json()["data"] == {"affected": total - 1}

    response = await client.get(f"{api}/notifications/unread/count", headers=auth["member"])
    assert response.json()["data"] == {"count": 0}


@pytest.mark.asyncio
async def test_notifications_are_private(client: AsyncClient, api, auth, users):
    await assign_tasks(client, api, auth, users, ["Ship"])
    response = await client.get(f"{api}/notifications", headers=auth["member"])
    notification_id = assignments(response.json())[0]["id"]

    response = await client.put(
        f"{api}/notifications/{notification_id}/read", headers=auth["outsider"]
    )
    assert response.status_code == 404
    assert response.json()["error"] == "NOTIFICATION_NOT_FOUND"

    response = await client.delete(
        f"{api}/notifications/{notification_id}", headers=auth["outsider"]
    )
    assert response.status_code == 404

    response = await client.get(f"{api}/notifications", headers=auth["member"])
    (kept,) = [n for n in response.json()["data"] if n["id"] == notification_id]
    assert kept["read"] is False


@pytest.mark.asyncio
async def test_delete_notifications(client: AsyncClient, api, auth, users):
    await assign_tasks(client, api, auth, users, ["One", "Two"])
    response = await client.get(f"{api}/notifications", headers=auth["member"])
    total = response.json()["count"]
    first = response.json()["data"][0]["id"]

    response = await client.delete(f"{api}/notifications/{first}", headers=auth["member"])
    assert response.status_code == 200
    assert response.json()["message"] == "Notification deleted"

    response = await client.delete(f"{api}/notifications", headers=auth["member"])
    assert response.json()["data"] == {"affected": total - 1}

    response = await client.get(f"{api}/notifications", headers=auth["member"])
    assert response.json()["count"] == 0
    assert response.json()["data"] == []
