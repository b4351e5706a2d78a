"""
Static role permission table

Roles are fixed tags; each maps to the same four capability flags. The table
is built once at import time and exposed read-only.
"""
import enum
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional


class Role(str, enum.Enum):
    ADM = "ADM"
    GT = "GT"
    EV = "EV"


class Capability(str, enum.Enum):
    MANAGE_USERS = "manage_users"
    VIEW_INCOME = "view_income"
    CHANGE_STATUS = "change_status"
    MANAGE_CONTROL = "manage_control"


@dataclass(frozen=True)
class PermissionSet:
    manage_users: bool = False
    view_income: bool = False
    change_status: bool = False
    manage_control: bool = False

    def allows(self, capability: Capability) -> bool:
        return getattr(self, capability.value) is True


NO_PERMISSIONS = PermissionSet()

ROLE_PERMISSIONS: Mapping[str, PermissionSet] = MappingProxyType({
    Role.ADM.value: PermissionSet(
        manage_users=True,
        view_income=True,
        change_status=True,
        manage_control=True,
    ),
    Role.GT.value: PermissionSet(
        manage_users=False,
        view_income=True,
        change_status=True,
        manage_control=True,
    ),
    Role.EV.value: NO_PERMISSIONS,
})


def get_permissions(role: Optional[str]) -> PermissionSet:
    """
    Get the permission set for a role tag

    Unknown, empty or missing roles get the all-denied set.
    """
    if not isinstance(role, str):
        return NO_PERMISSIONS
    return ROLE_PERMISSIONS.get(role, NO_PERMISSIONS)


def has_permission(role: Optional[str], capability: Capability) -> bool:
    """Check whether a role tag grants a capability (fail-closed)."""
    return get_permissions(role).allows(capability)


@dataclass(frozen=True)
class Principal:
    """The caller as seen by a handler: the role it acts as."""

    role: Optional[str]

    def can(self, capability: Capability) -> bool:
        return has_permission(self.role, capability)
