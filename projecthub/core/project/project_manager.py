"""Project Manager for ProjectHub.

Enforces project creation rules and answers lookup, access-check and
search queries on top of the organization, project and project-user
stores. Successful creations are announced on the event sink.
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy.exc import IntegrityError

from ..db.models import Project
from ..events import EventSink, ProjectCreatedEvent
from ..exceptions import (
    DuplicateName,
    InvalidArgument,
    OrganizationInactive,
    ValidationFailed,
)
from ..utils import log_execution_time
from .pagination import PaginationHelper
from .stores import OrganizationStore, ProjectStore, ProjectUserStore
from .validator import validate_project_data

logger = logging.getLogger(__name__)


def _require(value, message: str) -> None:
    if value is None or (isinstance(value, str) and not value.strip()):
        logger.error(message)
        raise InvalidArgument(message)


class ProjectManager:
    """Service layer for projects."""

    def __init__(
        self,
        organization_store: OrganizationStore,
        project_store: ProjectStore,
        project_user_store: ProjectUserStore,
        event_sink: EventSink,
        pagination_helper: PaginationHelper,
        default_page_size: int,
        max_page_size: int,
    ):
        self.organization_store = organization_store
        self.project_store = project_store
        self.project_user_store = project_user_store
        self.event_sink = event_sink
        self.pagination_helper = pagination_helper
        self.default_page_size = default_page_size
        self.max_page_size = max_page_size
        logger.info("ProjectManager initialized")

    @log_execution_time
    def create(self, project: Optional[Project]) -> Project:
        """Create a new project.

        Raises:
            InvalidArgument: If ``project`` is None
            ValidationFailed: If any field is invalid
            OrganizationInactive: If the organization is missing or inactive
            DuplicateName: If the name is taken within the organization
        """
        _require(project, "Project data can not be null.")

        errors = validate_project_data(project)
        if errors:
            logger.error(f"Could not create project due to invalid data: {[e.field for e in errors]}")
            raise ValidationFailed(errors)

        organization_id = project.organization_id
        project_name = project.name

        organization = self.organization_store.find_by_id(organization_id)
        if organization is None or not organization.is_active:
            logger.error(
                f"Organization is inactive or not found. Could not create project "
                f"{project_name} in org {organization_id}"
            )
            raise OrganizationInactive()

        existing = self.project_store.find_by_name_and_organization(project_name, organization_id)
        if existing is not None:
            logger.error(
                f"Project with name {project_name} already exists in organization "
                f"{organization.name}. Specify another name."
            )
            raise DuplicateName()

        project.created_at = datetime.now(timezone.utc)
        try:
            saved = self.project_store.save(project)
        except IntegrityError as e:
            # Only a concurrent create of the same name is a duplicate
            if self.project_store.find_by_name_and_organization(project_name, organization_id) is None:
                logger.error(f"Could not save project {project_name}: {e.orig}")
                raise
            logger.error(
                f"Project with name {project_name} was created concurrently in organization "
                f"{organization.name}."
            )
            raise DuplicateName()

        self.event_sink.publish(ProjectCreatedEvent(project=saved))
        logger.info(f"Created project {project_name} successfully.")
        return saved

    @log_execution_time
    def get_by_id(self, project_id: Optional[str]) -> Optional[Project]:
        """Return the project, or None if no project has this id."""
        _require(project_id, "Project id can not be null.")
        return self.project_store.find_by_id(project_id)

    @log_execution_time
    def check_project_user_access(self, project_id: Optional[str], user_id: Optional[str]) -> bool:
        _require(project_id, "Project ID can not be null.")
        _require(user_id, "User ID can not be null.")
        logger.info(f"Check if user {user_id} has access to project {project_id}.")

        grant = self.project_user_store.find_active_grant(project_id, user_id)
        return grant is not None

    @log_execution_time
    def search(
        self,
        organization_id: str,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        sort_by: Optional[str] = None,
        sort_dir: Optional[str] = None,
    ) -> List[Project]:
        """List one page of an organization's projects."""
        page = self.pagination_helper.normalize_page(page)
        limit = self.pagination_helper.normalize_limit(limit, self.default_page_size, self.max_page_size)
        page_request = self.pagination_helper.build_page_request(page, limit, sort_by, sort_dir)
        return self.project_store.find_page_by_organization(organization_id, page_request)


def create_project_manager(db_manager, event_sink: EventSink, settings) -> ProjectManager:
    """Wire a ProjectManager with SQLAlchemy stores over ``db_manager``."""
    return ProjectManager(
        organization_store=OrganizationStore(db_manager),
        project_store=ProjectStore(db_manager),
        project_user_store=ProjectUserStore(db_manager),
        event_sink=event_sink,
        pagination_helper=PaginationHelper(),
        default_page_size=settings.project_page_size_default,
        max_page_size=settings.project_page_size_max,
    )
