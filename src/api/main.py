"""FastAPI application entry point."""

import os
import sys
import logging
import tomllib
from contextlib import asynccontextmanager
from pathlib import Path
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

# Load environment variables from .env file
# Must be called before importing modules that read env vars (table paths, API URLs)
load_dotenv()

# main.py is at <root>/src/api/main.py, src is two levels up
_src_path = Path(__file__).parent.parent
sys.path.insert(0, str(_src_path))

from api.routes import health, lookup, translate
from adapter.lexicon.json_loader import get_lexicon_repository
from utils.logging import setup_structured_logging

setup_structured_logging()

logger = logging.getLogger(__name__)

# Read version from pyproject.toml (single source of truth)
_project_root = _src_path.parent
with open(_project_root / "pyproject.toml", "rb") as f:
    VERSION = tomllib.load(f)["project"]["version"]

SERVICE_NAME = "WordTree Lookup API"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: load the lexicon tables before serving."""
    repository = get_lexicon_repository()
    if repository.is_seed:
        logger.warning(
            "Word-sense table not found, serving the seed table. "
            "Run wordtree-build-tables to build the full tables."
        )
    yield


app = FastAPI(
    title=SERVICE_NAME,
    description="Word lookup across dictionary, synonym, translation and etymology sources",
    version=VERSION,
    lifespan=lifespan,
)

def parse_cors_origins(value: str) -> list[str]:
    """Comma-separated CORS_ORIGINS to a list; "*" or blank means any origin."""
    origins = [origin.strip() for origin in value.split(",") if origin.strip()]
    return origins or ["*"]


cors_origins = parse_cors_origins(os.getenv("CORS_ORIGINS", "*"))
if "*" in cors_origins:
    logger.warning("CORS allows any origin; set CORS_ORIGINS to restrict it")
else:
    logger.info("CORS configured", extra={"origins": cors_origins})

# Anonymous API: no cookies or auth headers
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=False,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)

app.include_router(lookup.router)
app.include_router(translate.router)
app.include_router(health.router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "service": SERVICE_NAME,
        "version": VERSION,
        "status": "running"
    }


if __name__ == "__main__":
    import uvicorn
    port = int(os.getenv("PORT", 8000))
    # Application logs go through structured logging; uvicorn's access log would duplicate them
    uvicorn.run(
        app,
        host="0.0.0.0",
        port=port,
        access_log=False
    )
