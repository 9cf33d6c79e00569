import os
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from api.routes import router
from services.database import DatabaseService
from utils.env_loader import env_flag, load_environments, resolve_database_config
from utils.logging_config import setup_logging


def create_app(database: Optional[DatabaseService] = None) -> FastAPI:
    """Build the HTTP app.

    With no ``database`` the lifespan opens one from DB_ENGINE/SQLITE_DB_PATH
    at startup and closes it on shutdown. A caller-supplied service is used
    as-is and left for the caller to close.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if database is not None:
            yield
            return
        connection_info, db_engine = resolve_database_config()
        service = DatabaseService()
        service.initialize(connection_info, db_engine)
        app.state.database = service
        try:
            yield
        finally:
            service.close()

    app = FastAPI(
        title="SQL Tools API",
        version="0.1.0",
        description="Statement-gated read, write, schema and export tools over a pluggable database adapter",
        lifespan=lifespan,
    )
    app.state.database = database if database is not None else DatabaseService()
    app.include_router(router)
    return app


load_environments()
setup_logging(level=os.getenv("LOG_LEVEL", "INFO"), json=env_flag("LOG_JSON"))
app = create_app()
