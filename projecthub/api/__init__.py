"""
REST API module for ProjectHub.

Provides FastAPI endpoints for:
- Project creation and lookup
- Project access checks
- Paginated project search per organization
"""
