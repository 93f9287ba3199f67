"""Pydantic schemas for API request/response models."""

from .project import (
    AccessCheckResponse,
    ErrorBody,
    ErrorResponse,
    ProjectCreate,
    ProjectResponse,
)

__all__ = [
    'AccessCheckResponse',
    'ErrorBody',
    'ErrorResponse',
    'ProjectCreate',
    'ProjectResponse',
]
