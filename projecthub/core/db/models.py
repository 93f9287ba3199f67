"""
SQLAlchemy ORM Models for ProjectHub

- Organization: Tenant that owns projects, can be deactivated
- Project: Named unit of work, unique by name within its organization
- ProjectUser: Grants a user access to a specific project
"""

from sqlalchemy import (
    Column, String, Text, TIMESTAMP, ForeignKey, Integer,
    Index, TypeDecorator, Boolean, UniqueConstraint,
)
from sqlalchemy.orm import relationship, declarative_base
from sqlalchemy.dialects.postgresql import UUID as PostgreSQL_UUID
import uuid
from datetime import datetime, timezone

Base = declarative_base()


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


# UUID type that works with both PostgreSQL and SQLite
class UUID(TypeDecorator):
    """Platform-independent UUID type.

    Uses PostgreSQL's UUID type when available, otherwise stores as String(36).
    """
    impl = String
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == 'postgresql':
            return dialect.type_descriptor(PostgreSQL_UUID(as_uuid=True))
        else:
            return dialect.type_descriptor(String(36))

    def process_bind_param(self, value, dialect):
        if value is None:
            return value
        elif dialect.name == 'postgresql':
            return value
        else:
            if isinstance(value, uuid.UUID):
                return str(value)
            else:
                return str(uuid.UUID(value))

    def process_result_value(self, value, dialect):
        if value is None:
            return value
        elif dialect.name == 'postgresql':
            return value
        else:
            if isinstance(value, uuid.UUID):
                return value
            else:
                return uuid.UUID(value)


# =============================================================================
# Organization
# =============================================================================

class Organization(Base):
    """Tenant-like owner of projects."""
    __tablename__ = "organizations"

    organization_id = Column(UUID(), primary_key=True, default=uuid.uuid4)
    name = Column(String(255), nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), default=utcnow, nullable=False)

    # Relationships
    projects = relationship("Project", back_populates="organization", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Organization(organization_id={self.organization_id}, name='{self.name}', active={self.is_active})>"


# =============================================================================
# Project Models
# =============================================================================

class Project(Base):
    """Named unit of work scoped to an organization."""
    __tablename__ = "projects"
    __table_args__ = (
        UniqueConstraint('organization_id', 'name', name='uq_project_org_name'),
        Index('idx_org_projects', 'organization_id', 'created_at'),
    )

    project_id = Column(UUID(), primary_key=True, default=uuid.uuid4)
    organization_id = Column(
        UUID(), ForeignKey("organizations.organization_id", ondelete="CASCADE"), nullable=False
    )
    name = Column(String(255), nullable=False)
    description = Column(Text)
    # Stamped by ProjectManager.create; the column default only covers direct inserts
    created_at = Column(TIMESTAMP(timezone=True), default=utcnow, nullable=False)

    # Relationships
    organization = relationship("Organization", back_populates="projects")
    project_users = relationship("ProjectUser", back_populates="project", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Project(project_id={self.project_id}, name='{self.name}', org={self.organization_id})>"


class ProjectUser(Base):
    """Grants a user access to a specific project.

    Rows are never deleted when access is revoked; ``active`` is cleared instead.
    """
    __tablename__ = "project_users"
    __table_args__ = (
        UniqueConstraint('project_id', 'user_id', name='uq_project_user'),
        Index('idx_project_users_user', 'user_id'),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    project_id = Column(UUID(), ForeignKey("projects.project_id", ondelete="CASCADE"), nullable=False)
    user_id = Column(String(255), nullable=False)   # issued by the external identity provider
    active = Column(Boolean, default=True, nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), default=utcnow, nullable=False)

    # Relationships
    project = relationship("Project", back_populates="project_users")

    def __repr__(self):
        return f"<ProjectUser(project_id={self.project_id}, user_id='{self.user_id}', active={self.active})>"
