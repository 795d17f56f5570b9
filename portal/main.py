# portal/main.py

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from portal.api.v1.api import api_router
from portal.core.config import Settings, settings as default_settings
from portal.core.exceptions import PortalError, portal_exception_handler
from portal.core.logging import configure_logging
from portal.db.init_db import init_db
from portal.db.session import Database

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Open the database when the app starts, close it once on shutdown.
    """
    database: Database = app.state.database
    database.connect()
    if app.state.settings.create_tables:
        init_db(database)

    yield

    logger.info("Shutting down %s", app.state.settings.PROJECT_NAME)
    database.close()


def create_application(
    settings: Optional[Settings] = None,
    database: Optional[Database] = None,
) -> FastAPI:
    settings = settings or default_settings
    configure_logging(settings.log_level, settings.debug)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = database or Database(settings.database_url, echo=settings.database_echo)

    # ---------- CORS ----------
    if settings.backend_cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.backend_cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    # ---------- ERRORS ----------
    app.add_exception_handler(PortalError, portal_exception_handler)

    # ---------- ROUTERS ----------
    @app.get("/healthz", tags=["health"])
    def healthz(request: Request):
        return {"status": "ok", "database": request.app.state.database.ping()}

    app.include_router(api_router)

    return app


app = create_application()
