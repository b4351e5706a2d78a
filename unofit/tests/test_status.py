"""
Tests for system status endpoints
"""
import pytest
from fastapi import status

from unofit.models import ActivityLog, SystemState


def test_get_status_returns_default(client):
    response = client.get("/api/status")

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"status": "Sistema estable"}


@pytest.mark.parametrize("role", ["ADM", "GT"])
def test_change_status_allowed_roles(client, db, role):
    response = client.post("/api/status", json={"role": role, "newStatus": "Sistema en mantenimiento"})

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"success": True, "status": "Sistema en mantenimiento"}

    response = client.get("/api/status")
    assert response.json()["status"] == "Sistema en mantenimiento"

    entry = db.query(ActivityLog).one()
    assert entry.action == "status_changed"
    assert entry.user_role == role
    assert entry.details == "Sistema en mantenimiento"


def test_change_status_denied_for_ev(client, db):
    response = client.post("/api/status", json={"role": "EV", "newStatus": "Caído"})

    assert response.status_code == status.HTTP_403_FORBIDDEN
    assert response.json() == {
        "error": "No tienes permiso para cambiar el estado",
        "code": "UNAUTHORIZED",
    }

    assert client.get("/api/status").json()["status"] == "Sistema estable"

    entry = db.query(ActivityLog).one()
    assert entry.action == "status_change_denied"
    assert entry.user_role == "EV"
    assert entry.details == "Caído"


def test_change_status_without_role_is_denied(client, activity_actions):
    response = client.post("/api/status", json={"newStatus": "x"})

    assert response.status_code == status.HTTP_403_FORBIDDEN
    assert activity_actions() == ["status_change_denied"]


def test_status_falls_back_to_default_when_cleared(client):
    """A permitted change without newStatus stores null; reads show the default"""
    response = client.post("/api/status", json={"role": "ADM"})

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"success": True, "status": None}
    assert client.get("/api/status").json()["status"] == "Sistema estable"


@pytest.mark.parametrize("role", [1, True, ["ADM"]])
def test_change_status_non_string_role_is_denied(client, db, role):
    """Roles that are not one of the known tags fail closed, whatever their JSON type"""
    response = client.post("/api/status", json={"role": role, "newStatus": "x"})

    assert response.status_code == status.HTTP_403_FORBIDDEN
    assert response.json()["code"] == "UNAUTHORIZED"
    assert client.get("/api/status").json()["status"] == "Sistema estable"

    entry = db.query(ActivityLog).one()
    assert entry.action == "status_change_denied"
    assert entry.details == "x"


def test_change_status_non_string_value_is_stored_as_text(client):
    response = client.post("/api/status", json={"role": "ADM", "newStatus": 5})

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"success": True, "status": "5"}
    assert client.get("/api/status").json()["status"] == "5"


def test_change_status_recreates_missing_row(client, db):
    db.query(SystemState).delete()
    db.commit()

    response = client.post("/api/status", json={"role": "ADM", "newStatus": "Mantenimiento"})

    assert response.status_code == status.HTTP_200_OK
    assert client.get("/api/status").json()["status"] == "Mantenimiento"
    assert db.query(SystemState).count() == 1


def test_reset_recreates_missing_row(client, db):
    db.query(SystemState).delete()
    db.commit()

    client.post("/api/reset")

    assert db.query(SystemState).one().value == "Sistema estable"
