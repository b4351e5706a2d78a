"""
Database models
"""
from unofit.models.system_state import SystemState, STATUS_KEY
from unofit.models.user import User
from unofit.models.income import IncomeRecord
from unofit.models.activity_log import ActivityLog

__all__ = [
    "SystemState",
    "STATUS_KEY",
    "User",
    "IncomeRecord",
    "ActivityLog",
]
