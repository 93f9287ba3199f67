"""Shared test fixtures for projecthub.

Store and integration tests run against an in-memory SQLite database
that is created fresh for every test.
"""

from types import SimpleNamespace
from unittest.mock import MagicMock
from uuid import uuid4

import pytest

from projecthub.core.db import DatabaseManager, Organization, ProjectUser
from projecthub.core.events import EventBus
from projecthub.core.project import (
    OrganizationStore,
    PaginationHelper,
    ProjectManager,
    ProjectStore,
    ProjectUserStore,
)

DEFAULT_PAGE_SIZE = 5
MAX_PAGE_SIZE = 10


@pytest.fixture()
def db_manager():
    db = DatabaseManager("sqlite://")
    db.create_tables()
    yield db
    db.drop_tables()
    db.dispose()


@pytest.fixture()
def stores(db_manager):
    return SimpleNamespace(
        organizations=OrganizationStore(db_manager),
        projects=ProjectStore(db_manager),
        project_users=ProjectUserStore(db_manager),
    )


@pytest.fixture()
def make_org(stores):
    """Persist an organization and return it."""
    def _make(name="Acme", is_active=True):
        return stores.organizations.save(
            Organization(organization_id=uuid4(), name=name, is_active=is_active)
        )
    return _make


@pytest.fixture()
def grant_access(stores):
    """Persist a project access grant and return it."""
    def _grant(project_id, user_id, active=True):
        return stores.project_users.save(
            ProjectUser(project_id=project_id, user_id=user_id, active=active)
        )
    return _grant


@pytest.fixture()
def event_bus():
    bus = EventBus(max_workers=1)
    yield bus
    bus.shutdown(wait=True)


@pytest.fixture()
def project_manager(stores, event_bus):
    """ProjectManager over real SQLite stores and a real event bus."""
    return ProjectManager(
        organization_store=stores.organizations,
        project_store=stores.projects,
        project_user_store=stores.project_users,
        event_sink=event_bus,
        pagination_helper=PaginationHelper(),
        default_page_size=DEFAULT_PAGE_SIZE,
        max_page_size=MAX_PAGE_SIZE,
    )


@pytest.fixture()
def mock_collaborators():
    """MagicMock stores and sink for pure service-layer tests."""
    return SimpleNamespace(
        organizations=MagicMock(),
        projects=MagicMock(),
        project_users=MagicMock(),
        sink=MagicMock(),
    )


@pytest.fixture()
def mocked_manager(mock_collaborators):
    m = mock_collaborators
    return ProjectManager(
        organization_store=m.organizations,
        project_store=m.projects,
        project_user_store=m.project_users,
        event_sink=m.sink,
        pagination_helper=PaginationHelper(),
        default_page_size=DEFAULT_PAGE_SIZE,
        max_page_size=MAX_PAGE_SIZE,
    )
