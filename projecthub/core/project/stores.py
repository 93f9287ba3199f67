"""Persistence stores used by ProjectManager.

Each store method opens its own session scope on the DatabaseManager,
so every call is one committed (or rolled back) transaction. Returned
ORM objects are detached but fully loaded.
"""

import logging
from typing import List, Optional, Union
from uuid import UUID

from sqlalchemy import asc, desc

from ..db import DatabaseManager
from ..db.models import Organization, Project, ProjectUser
from .pagination import PageRequest

logger = logging.getLogger(__name__)

IdLike = Union[str, UUID]


def to_uuid(value: Optional[IdLike]) -> Optional[UUID]:
    """Coerce ``value`` to a UUID, or None if it cannot name a row."""
    if value is None:
        return None
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except ValueError:
        return None


class OrganizationStore:
    """Read access to organizations."""

    def __init__(self, db_manager: DatabaseManager):
        self.db = db_manager

    def find_by_id(self, organization_id: IdLike) -> Optional[Organization]:
        org_uuid = to_uuid(organization_id)
        if org_uuid is None:
            return None
        with self.db.get_session() as session:
            return session.query(Organization).filter(
                Organization.organization_id == org_uuid
            ).first()

    def save(self, organization: Organization) -> Organization:
        if organization.organization_id is not None:
            organization.organization_id = to_uuid(organization.organization_id)
        with self.db.get_session() as session:
            session.add(organization)
            session.flush()
            return organization


class ProjectStore:
    """Persistence for projects."""

    def __init__(self, db_manager: DatabaseManager):
        self.db = db_manager

    def find_by_id(self, project_id: IdLike) -> Optional[Project]:
        project_uuid = to_uuid(project_id)
        if project_uuid is None:
            return None
        with self.db.get_session() as session:
            return session.query(Project).filter(
                Project.project_id == project_uuid
            ).first()

    def find_by_name_and_organization(self, name: str, organization_id: IdLike) -> Optional[Project]:
        org_uuid = to_uuid(organization_id)
        if org_uuid is None:
            return None
        with self.db.get_session() as session:
            return session.query(Project).filter(
                Project.name == name,
                Project.organization_id == org_uuid,
            ).first()

    def save(self, project: Project) -> Project:
        """Insert ``project`` and commit.

        Raises:
            sqlalchemy.exc.IntegrityError: If (organization_id, name) or project_id is
                taken, or the organization row is gone
        """
        if project.project_id is not None:
            project.project_id = to_uuid(project.project_id)
        project.organization_id = to_uuid(project.organization_id)
        with self.db.get_session() as session:
            session.add(project)
            session.flush()
            logger.debug(f"Saved project {project.project_id}")
            return project

    def find_page_by_organization(self, organization_id: IdLike, page_request: PageRequest) -> List[Project]:
        org_uuid = to_uuid(organization_id)
        if org_uuid is None:
            return []

        sort_column = getattr(Project, page_request.sort_by)
        order = desc if page_request.descending else asc

        with self.db.get_session() as session:
            return session.query(Project).filter(
                Project.organization_id == org_uuid
            ).order_by(
                order(sort_column), asc(Project.project_id)
            ).offset(page_request.offset).limit(page_request.limit).all()


class ProjectUserStore:
    """Read access to project access grants."""

    def __init__(self, db_manager: DatabaseManager):
        self.db = db_manager

    def find_active_grant(self, project_id: IdLike, user_id: str) -> Optional[ProjectUser]:
        project_uuid = to_uuid(project_id)
        if project_uuid is None:
            return None
        with self.db.get_session() as session:
            return session.query(ProjectUser).filter(
                ProjectUser.project_id == project_uuid,
                ProjectUser.user_id == user_id,
                ProjectUser.active.is_(True),
            ).first()

    def save(self, grant: ProjectUser) -> ProjectUser:
        grant.project_id = to_uuid(grant.project_id)
        with self.db.get_session() as session:
            session.add(grant)
            session.flush()
            return grant
