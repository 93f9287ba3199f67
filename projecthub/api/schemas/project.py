"""Project request/response schemas."""

from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, Field

from ...core.db.models import Project


class ProjectCreate(BaseModel):
    """Create project request.

    Field rules (length, allowed characters) are enforced by the service
    so that every problem is reported together.
    """
    name: Optional[str] = Field(None, description="Project name, unique within the organization")
    organization_id: Optional[str] = Field(None, description="Owning organization UUID")
    description: Optional[str] = Field(None, description="Project description")
    project_id: Optional[str] = Field(None, description="Client-supplied project UUID")

    def to_model(self) -> Project:
        project = Project(
            name=self.name,
            organization_id=self.organization_id,
            description=self.description,
        )
        if self.project_id:
            project.project_id = self.project_id
        return project


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes for timezone-aware columns
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class ProjectResponse(BaseModel):
    """Project response model."""
    project_id: str = Field(..., description="Project UUID")
    organization_id: str = Field(..., description="Owning organization UUID")
    name: str = Field(..., description="Project name")
    description: Optional[str] = Field(None, description="Project description")
    created_at: Optional[str] = Field(None, description="Creation timestamp")

    @classmethod
    def from_model(cls, project: Project) -> "ProjectResponse":
        return cls(
            project_id=str(project.project_id),
            organization_id=str(project.organization_id),
            name=project.name,
            description=project.description,
            created_at=_as_utc(project.created_at).isoformat() if project.created_at else None,
        )


class AccessCheckResponse(BaseModel):
    project_id: str
    user_id: str
    has_access: bool


class ErrorBody(BaseModel):
    code: str
    message: str
    details: List[dict] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    error: ErrorBody
