"""
Tests for user endpoints
"""
from fastapi import status

from unofit.models import ActivityLog

SEEDED = [
    {"name": "Admin", "role": "ADM", "active": True},
    {"name": "Gerente", "role": "GT", "active": True},
    {"name": "Evaluador", "role": "EV", "active": True},
]


def _strip_ids(users):
    return [{k: v for k, v in u.items() if k != "id"} for u in users]


def test_list_users_ordered_by_id(client):
    response = client.get("/api/users")

    assert response.status_code == status.HTTP_200_OK
    users = response.json()["users"]
    assert _strip_ids(users) == SEEDED
    assert [u["id"] for u in users] == sorted(u["id"] for u in users)


def test_check_users_read_only_for_ev(client, db):
    response = client.post("/api/users/check", json={"role": "EV"})

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["success"] is True
    assert data["canManage"] is False
    assert data["message"] == "Usuarios OK (solo lectura)"
    assert _strip_ids(data["users"]) == SEEDED
    assert db.query(ActivityLog).count() == 0


def test_check_users_gt_cannot_manage(client):
    data = client.post("/api/users/check", json={"role": "GT"}).json()

    assert data["canManage"] is False
    assert len(data["users"]) == 3


def test_check_users_full_access_for_adm(client, db):
    response = client.post("/api/users/check", json={"role": "ADM"})

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["canManage"] is True
    assert data["message"] == "Usuarios OK"
    assert _strip_ids(data["users"]) == SEEDED

    entry = db.query(ActivityLog).one()
    assert entry.action == "users_reviewed"
    assert entry.user_role == "ADM"
    assert entry.details == "full access"


def test_check_users_non_string_role_is_read_only(client, db):
    data = client.post("/api/users/check", json={"role": 1}).json()

    assert data["canManage"] is False
    assert len(data["users"]) == 3
    assert db.query(ActivityLog).count() == 0
