# app/main.py

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from sqlalchemy.engine import Engine

from app.config import CORS_ORIGINS, DATABASE_URL, LOG_LEVEL, PORT
from app.data import ROOT_MESSAGE
from app.db import build_engine, init_db
from app.errors import register_exception_handlers
from app.routers import (
    barberos_routes,
    bloqueos_routes,
    clientes_routes,
    horarios_generales_routes,
    horarios_routes,
    reservas_routes,
)

# Configure logging
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def create_app(engine: Optional[Engine] = None) -> FastAPI:
    """Build the API. Pass an engine to run against an isolated database."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owns_engine = engine is None
        app.state.engine = build_engine(DATABASE_URL) if owns_engine else engine
        init_db(app.state.engine)
        logger.info("Application starting up...")
        yield
        logger.info("Application shutting down...")
        if owns_engine:
            app.state.engine.dispose()

    app = FastAPI(title="Barbería API", version="1.0.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(barberos_routes.router)
    app.include_router(clientes_routes.router)
    app.include_router(bloqueos_routes.router)
    app.include_router(horarios_routes.router)
    app.include_router(horarios_generales_routes.router)
    app.include_router(reservas_routes.router)

    @app.get("/", response_class=PlainTextResponse)
    def root():
        return ROOT_MESSAGE

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    logger.info(f"Servidor corriendo en http://localhost:{PORT}")
    uvicorn.run(app, host="0.0.0.0", port=PORT)
