"""
Main entrypoint for the Memo API.

This module assembles the FastAPI application, sets up logging,
creates the memo store and includes versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``.  Run it with uvicorn::

    uvicorn memo_api.app.main:app --reload

or through ``run.py`` at the project root.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .api.v1.router import router as v1_router
from .repositories.memo_repository import InMemoryMemoRepository
from .services.memo_service import MemoService


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Each call builds a fresh in‑memory repository, so two applications
    never share memos.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to use instead of the module level ``settings``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file or None, debug=settings.debug)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    # The store lives exactly as long as the application.
    app.state.memo_service = MemoService(InMemoryMemoRepository())

    app.include_router(v1_router, prefix="/api/v1")

    logging.getLogger(__name__).debug("Application %s %s created", settings.project_name, settings.api_version)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
