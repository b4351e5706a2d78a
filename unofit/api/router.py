"""
Main API router
"""
from fastapi import APIRouter

from unofit.api.endpoints import (
    status,
    users,
    control,
    messages,
    income,
    system,
)

api_router = APIRouter()

api_router.include_router(status.router, prefix="/status", tags=["status"])
api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(control.router, prefix="/control", tags=["control"])
api_router.include_router(messages.router, prefix="/messages", tags=["messages"])
api_router.include_router(income.router, prefix="/income", tags=["income"])
api_router.include_router(system.router, tags=["system"])
