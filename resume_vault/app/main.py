import logging

from fastapi import FastAPI

from resume_vault.app.api.routes.resume import router as resume_router
from resume_vault.app.database.database import get_engine
from resume_vault.app.models import Base

log = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        None

    Returns:
        FastAPI: The configured FastAPI application instance.

    Notes:
        1. Initialize the FastAPI application with the title "Resume Vault API".
        2. Include the resume router.
        3. Define a health check endpoint at "/health" that returns {"status": "ok"}.

    """
    _msg = "Creating FastAPI application"
    log.debug(_msg)

    app = FastAPI(title="Resume Vault API")

    app.include_router(resume_router)

    @app.get("/health")
    async def health_check():
        """Report that the application is up."""
        return {"status": "ok"}

    _msg = "FastAPI application created successfully"
    log.debug(_msg)
    return app


def initialize_database() -> None:
    """Create all tables known to the ORM metadata.

    Args:
        None

    Returns:
        None

    Notes:
        1. Tables that already exist are left untouched.
        2. This function performs database access.

    """
    _msg = "Creating database tables"
    log.debug(_msg)
    Base.metadata.create_all(bind=get_engine())
