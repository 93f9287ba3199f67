"""FastAPI application factory for ProjectHub.

Creates and configures the FastAPI app with CORS, the domain
error handler and all route modules registered.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ..core.exceptions import ProjectHubError

logger = logging.getLogger(__name__)


def create_app(
    db_manager,
    project_manager,
    event_bus=None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        db_manager: DatabaseManager instance
        project_manager: ProjectManager instance
        event_bus: EventBus instance (optional), shut down with the app

    Returns:
        Configured FastAPI application
    """
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        if event_bus is not None:
            event_bus.shutdown(wait=True)

    app = FastAPI(
        title="ProjectHub API",
        description="Organization-scoped project management",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:3000",
            "http://localhost:5173",
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Store shared dependencies on app state
    app.state.db_manager = db_manager
    app.state.project_manager = project_manager
    app.state.event_bus = event_bus

    @app.exception_handler(ProjectHubError)
    async def project_hub_error_handler(request: Request, exc: ProjectHubError):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.to_dict()})

    # Register routers
    from .routes.projects import router as projects_router

    app.include_router(projects_router, prefix="/api")

    @app.get("/api/health")
    async def health_check():
        db_ok = db_manager.ping() if db_manager is not None else False
        return {"status": "ok" if db_ok else "degraded", "service": "projecthub", "database": db_ok}

    logger.info("FastAPI app created with all routes registered")
    return app
