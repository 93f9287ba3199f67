"""ProjectHub: organization-scoped project management service."""

__version__ = "0.1.0"
