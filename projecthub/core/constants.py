"""Shared constants for ProjectHub.

This module contains constants that are used across multiple modules
to avoid duplication and ensure consistency.
"""

# =============================================================================
# Pagination
# =============================================================================

DEFAULT_PAGE = 1

# Fallbacks when PROJECT_PAGE_SIZE_DEFAULT / PROJECT_PAGE_SIZE_MAX are unset
DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100

# Largest OFFSET a database will bind (signed 64-bit)
MAX_QUERY_OFFSET = 2**63 - 1

SORT_ASC = "asc"
SORT_DESC = "desc"

# Columns a project search may be ordered by
PROJECT_SORT_FIELDS = ("name", "created_at")
DEFAULT_PROJECT_SORT_FIELD = "created_at"
DEFAULT_SORT_DIR = SORT_DESC

# =============================================================================
# Project validation
# =============================================================================

PROJECT_NAME_MAX_LENGTH = 255
PROJECT_DESCRIPTION_MAX_LENGTH = 1000

# Letters, digits, spaces, underscores, dots and hyphens; no leading separator
PROJECT_NAME_PATTERN = r"^[A-Za-z0-9][A-Za-z0-9 _.\-]*$"

# =============================================================================
# Default Organization
# =============================================================================

# Seeded on startup so a fresh install can create projects immediately
DEFAULT_ORGANIZATION_ID = "00000000-0000-0000-0000-000000000001"
DEFAULT_ORGANIZATION_NAME = "Default Organization"
