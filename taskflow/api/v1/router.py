"""API v1 router aggregation.

Task routes are nested under /workspaces/{workspace_id}; every route resolves
its collaborators through taskflow.api.v1.dependencies.
"""

from fastapi import APIRouter

from taskflow.api.v1.endpoints import health, tasks

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(
    tasks.router, prefix="/workspaces/{workspace_id}", tags=["tasks"]
)
