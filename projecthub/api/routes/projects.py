"""Project API routes (FastAPI).

Provides project creation, lookup, access checks and
paginated search within an organization.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from ..deps import get_project_manager
from ..schemas.project import (
    AccessCheckResponse,
    ErrorResponse,
    ProjectCreate,
    ProjectResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["projects"])

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    409: {"model": ErrorResponse},
    422: {"model": ErrorResponse},
}


# ── Routes ───────────────────────────────────────────────────────────────

@router.post(
    "/projects",
    response_model=ProjectResponse,
    status_code=201,
    responses=_ERROR_RESPONSES,
)
def create_project(
    data: ProjectCreate,
    pm=Depends(get_project_manager),
):
    """Create a new project in an active organization."""
    project = pm.create(data.to_model())
    return ProjectResponse.from_model(project)


@router.get("/projects/{project_id}", response_model=ProjectResponse)
def get_project(
    project_id: str,
    pm=Depends(get_project_manager),
):
    """Get project details by ID."""
    project = pm.get_by_id(project_id)
    if project is None:
        raise HTTPException(status_code=404, detail="Project not found")
    return ProjectResponse.from_model(project)


@router.get("/projects/{project_id}/access/{user_id}", response_model=AccessCheckResponse)
def check_project_access(
    project_id: str,
    user_id: str,
    pm=Depends(get_project_manager),
):
    """Report whether a user holds an active grant on the project."""
    has_access = pm.check_project_user_access(project_id, user_id)
    return AccessCheckResponse(project_id=project_id, user_id=user_id, has_access=has_access)


@router.get("/organizations/{organization_id}/projects", response_model=list[ProjectResponse])
def search_projects(
    organization_id: str,
    page: Optional[int] = Query(None, description="1-based page number"),
    limit: Optional[int] = Query(None, description="Page size, clamped to the configured maximum"),
    sort_by: Optional[str] = Query(None, description="name or created_at"),
    sort_dir: Optional[str] = Query(None, description="asc or desc"),
    pm=Depends(get_project_manager),
):
    """List one page of an organization's projects."""
    projects = pm.search(organization_id, page, limit, sort_by, sort_dir)
    return [ProjectResponse.from_model(p) for p in projects]
