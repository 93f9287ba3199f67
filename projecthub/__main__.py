import argparse
import logging
import sys

from .core.constants import DEFAULT_ORGANIZATION_ID, DEFAULT_ORGANIZATION_NAME
from .core.db import DatabaseManager, Organization, get_database_manager, wait_for_db
from .core.events import EventBus, log_project_created
from .core.project import OrganizationStore, create_project_manager
from .setting import get_settings


def setup_logging(log_level: str = "INFO") -> None:
    """Configure application logging."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )
    # Reduce noise from third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.ERROR)
    logging.getLogger("sqlalchemy.pool").setLevel(logging.WARNING)
    logging.getLogger("uvicorn").setLevel(logging.INFO)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("psycopg2").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)


def _seed_default_organization(db_manager: DatabaseManager) -> None:
    """Create the default organization if it does not exist yet."""
    store = OrganizationStore(db_manager)
    if store.find_by_id(DEFAULT_ORGANIZATION_ID) is None:
        store.save(Organization(
            organization_id=DEFAULT_ORGANIZATION_ID,
            name=DEFAULT_ORGANIZATION_NAME,
            is_active=True,
        ))
        logger.info(f"Created default organization: {DEFAULT_ORGANIZATION_NAME}")


def main():
    """Main entry point for ProjectHub."""
    parser = argparse.ArgumentParser(description="ProjectHub - Project Management Service")
    parser.add_argument(
        "--port",
        type=int,
        default=9010,
        help="Port for the API server"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level"
    )
    parser.add_argument(
        "--no-seed",
        action="store_true",
        help="Do not create the default organization"
    )
    args = parser.parse_args()

    setup_logging(args.log_level)
    settings = get_settings()
    logger.info(f"Starting {settings.app_name}")

    db_manager = get_database_manager(settings.database_url, echo=settings.db_echo)
    if not wait_for_db(db_manager):
        sys.exit(1)
    db_manager.create_tables()

    if not args.no_seed:
        try:
            _seed_default_organization(db_manager)
        except Exception as e:
            logger.error(f"Failed to seed default organization: {e}")

    event_bus = EventBus(max_workers=settings.event_bus_workers)
    event_bus.subscribe("project_created", log_project_created)

    project_manager = create_project_manager(db_manager, event_bus, settings)

    # Build FastAPI app
    from .api.app import create_app
    app = create_app(
        db_manager=db_manager,
        project_manager=project_manager,
        event_bus=event_bus,
    )

    # Launch with uvicorn
    import uvicorn

    logger.info(f"Starting FastAPI server on http://0.0.0.0:{args.port}")
    print(f"\n  ProjectHub is running at: http://localhost:{args.port}")
    print(f"  API docs at: http://localhost:{args.port}/docs\n")

    uvicorn.run(
        app,
        host="0.0.0.0",
        port=args.port,
        log_level=args.log_level.lower(),
    )


if __name__ == "__main__":
    main()
