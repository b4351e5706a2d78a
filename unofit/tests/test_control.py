"""
Tests for control activation
"""
import pytest
from fastapi import status

from unofit.models import ActivityLog


@pytest.mark.parametrize("role", ["ADM", "GT"])
def test_activate_control_allowed(client, db, role):
    response = client.post("/api/control/activate", json={"role": role})

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"success": True, "message": "Control activo"}

    entry = db.query(ActivityLog).one()
    assert entry.action == "control_activated"
    assert entry.user_role == role
    assert entry.details == "success"


@pytest.mark.parametrize("role", ["EV", "guest"])
def test_activate_control_denied_is_logged(client, db, role):
    response = client.post("/api/control/activate", json={"role": role})

    assert response.status_code == status.HTTP_403_FORBIDDEN
    assert response.json()["code"] == "UNAUTHORIZED"
    assert response.json()["error"] == "No tienes permiso para activar el control"

    entry = db.query(ActivityLog).one()
    assert entry.action == "control_activation_denied"
    assert entry.user_role == role
    assert entry.details == "attempted"


@pytest.mark.parametrize("role", [1, 0.5, {"role": "ADM"}])
def test_activate_control_non_string_role_is_denied(client, db, role):
    response = client.post("/api/control/activate", json={"role": role})

    assert response.status_code == status.HTTP_403_FORBIDDEN
    assert response.json()["code"] == "UNAUTHORIZED"

    entry = db.query(ActivityLog).one()
    assert entry.action == "control_activation_denied"
    assert entry.details == "attempted"
