"""
Project Management Module

Exports:
- ProjectManager: Project creation, lookup, access checks and search
- OrganizationStore, ProjectStore, ProjectUserStore: SQLAlchemy-backed stores
- PaginationHelper, PageRequest: Page/limit/sort normalization
"""

from .pagination import PageRequest, PaginationHelper
from .project_manager import ProjectManager, create_project_manager
from .stores import OrganizationStore, ProjectStore, ProjectUserStore

__all__ = [
    "ProjectManager",
    "create_project_manager",
    "OrganizationStore",
    "ProjectStore",
    "ProjectUserStore",
    "PaginationHelper",
    "PageRequest",
]
