"""Field-level validation for new projects."""

import re
from typing import List
from uuid import UUID

from ..constants import (
    PROJECT_DESCRIPTION_MAX_LENGTH,
    PROJECT_NAME_MAX_LENGTH,
    PROJECT_NAME_PATTERN,
)
from ..db.models import Project
from ..exceptions import ValidationError

_NAME_RE = re.compile(PROJECT_NAME_PATTERN)


def _is_uuid(value) -> bool:
    if isinstance(value, UUID):
        return True
    try:
        UUID(str(value))
    except ValueError:
        return False
    return True


def validate_project_data(project: Project) -> List[ValidationError]:
    """Check every field of ``project`` and return all problems found.

    An empty list means the project may be created.
    """
    errors: List[ValidationError] = []

    name = project.name
    if name is None or not str(name).strip():
        errors.append(ValidationError("name", "Project name is required."))
    else:
        if len(name) > PROJECT_NAME_MAX_LENGTH:
            errors.append(ValidationError(
                "name", f"Project name must be at most {PROJECT_NAME_MAX_LENGTH} characters."
            ))
        if not _NAME_RE.fullmatch(name):
            errors.append(ValidationError(
                "name",
                "Project name must start with a letter or digit and contain only "
                "letters, digits, spaces, '_', '.' or '-'.",
            ))

    if project.organization_id is None or not str(project.organization_id).strip():
        errors.append(ValidationError("organization_id", "Organization id is required."))

    if project.project_id is not None and not _is_uuid(project.project_id):
        errors.append(ValidationError("project_id", "Project id must be a UUID."))

    description = project.description
    if description is not None and len(description) > PROJECT_DESCRIPTION_MAX_LENGTH:
        errors.append(ValidationError(
            "description",
            f"Description must be at most {PROJECT_DESCRIPTION_MAX_LENGTH} characters.",
        ))

    return errors
