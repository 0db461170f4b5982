import logging
import sys
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import ValidationError

import nethermod_manager.models  # noqa: F401 — register all models with SQLModel
from nethermod_manager.config import settings
from nethermod_manager.database import create_db_and_tables
from nethermod_manager.routers import api_router
from nethermod_manager.services.conflicts import load_rule_catalog, set_rule_catalog


def _configure_logging() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )
    for name in ("httpx", "httpcore", "uvicorn.access"):
        logging.getLogger(name).setLevel(logging.WARNING)


_configure_logging()
logger = logging.getLogger(__name__)


def _install_rule_catalog() -> None:
    """Swap in the catalog file from settings, keeping the built-in one on failure."""
    path = settings.rule_catalog_path
    if path is None:
        return
    try:
        catalog = load_rule_catalog(path)
    except (OSError, ValidationError):
        logger.exception("Failed to load rule catalog from %s, using built-in rules", path)
        return
    set_rule_catalog(catalog)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    create_db_and_tables()
    _install_rule_catalog()
    logger.info("Application started")
    yield
    logger.info("Shutting down...")
    try:
        from nethermod_manager.database import engine

        engine.dispose()
        logger.info("Database engine disposed")
    except Exception:
        logger.exception("Failed to dispose database engine")
    logger.info("Shutdown complete")


app = FastAPI(
    title="NetherMod Manager",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:1420", "https://tauri.localhost"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


app.include_router(api_router)


@app.get("/")
async def root() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "healthy"}
