"""FastAPI dependencies for ProjectHub.

Provides shared services via FastAPI's Depends() injection system.
"""

import logging

from fastapi import HTTPException, Request

logger = logging.getLogger(__name__)


async def get_project_manager(request: Request):
    """Get ProjectManager from app state."""
    pm = request.app.state.project_manager
    if pm is None:
        raise HTTPException(status_code=503, detail="Project service not available")
    return pm
