"""Domain exceptions for ProjectHub.

Every error raised by the service layer derives from ``ProjectHubError``
and carries a stable ``code`` plus the HTTP status the API layer maps
it to.
"""

from dataclasses import dataclass, asdict
from typing import Dict, List, Optional


@dataclass(frozen=True)
class ValidationError:
    """One field-level problem found while validating input."""

    field: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


class ProjectHubError(Exception):
    """Base class for all ProjectHub errors."""

    code = "INTERNAL_ERROR"
    status_code = 500
    default_message = "Internal error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> Dict:
        return {"code": self.code, "message": self.message}


class InvalidArgument(ProjectHubError):
    """A required identifier or object was absent or empty."""

    code = "INVALID_ARGUMENT"
    status_code = 400
    default_message = "Invalid argument"


class ValidationFailed(ProjectHubError):
    """Input failed one or more field-level checks."""

    code = "VALIDATION_ERROR"
    status_code = 422
    default_message = "Validation failed"

    def __init__(self, errors: List[ValidationError], message: Optional[str] = None):
        self.errors = list(errors)
        super().__init__(message)

    def to_dict(self) -> Dict:
        data = super().to_dict()
        data["details"] = [e.to_dict() for e in self.errors]
        return data


class OrganizationInactive(ProjectHubError):
    """Target organization does not exist or is not active."""

    code = "ORGANIZATION_INACTIVE"
    status_code = 400
    default_message = "Organization is inactive or not found"


class DuplicateName(ProjectHubError):
    """A project with the same name already exists in the organization."""

    code = "DUPLICATE_PROJECT_NAME"
    status_code = 409
    default_message = "Project with same name exists in the organization"
