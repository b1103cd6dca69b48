"""
FastAPI application — serves the advocate directory.

Run as a script:
    python app/app.py

Or as a module:
    uvicorn app.app:app --reload

Endpoints:
    GET /api/advocates
        returns: {"data": [advocate, ...]}
    POST /api/seed
        inserts the seed list into the database named by DATABASE_URL
        returns: {"advocates": [advocate with id + createdAt, ...]}

Errors are returned as {"error": str, "status": int} with a non-2xx code.

The seed list (data/advocates.json, or ADVOCATES_SEED_FILE) is loaded once
at startup and served read-only; searching happens client-side.

Logs each request and wall-clock response time to stdout and logs/app.log
(rotating, 5 MB max, 3 backups).
"""

import asyncio
import logging
import logging.handlers
import os
import sys
import time
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

# Ensure project root is on sys.path when running as a script (python app/app.py)
sys.path.insert(0, str(Path(__file__).parent.parent))

from directory.store import AdvocateStore, RecordSourceError, load_seed

load_dotenv()

LOG_DIR  = Path(__file__).parent.parent / "logs"
LOG_FILE = LOG_DIR / "app.log"

def _setup_logging() -> None:
    LOG_DIR.mkdir(exist_ok=True)
    fmt = logging.Formatter("%(asctime)s  %(levelname)s  %(message)s")

    stream = logging.StreamHandler(sys.stdout)
    stream.setFormatter(fmt)

    # Rotate at 5 MB, keep 3 backups
    rotating = logging.handlers.RotatingFileHandler(
        LOG_FILE, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8"
    )
    rotating.setFormatter(fmt)

    root = logging.getLogger()
    root.setLevel(logging.INFO)
    root.addHandler(stream)
    root.addHandler(rotating)

_setup_logging()
log = logging.getLogger("api")

Advocate = dict[str, Any]


# ---------------------------------------------------------------------------
# Record source
# ---------------------------------------------------------------------------

_advocates: list[Advocate] | None = None


def _get_advocates() -> list[Advocate]:
    """Return the seed list, loading it on first use."""
    global _advocates
    if _advocates is None:
        _advocates = load_seed()
    return _advocates


# ---------------------------------------------------------------------------
# App + lifespan
# ---------------------------------------------------------------------------

@asynccontextmanager
async def lifespan(_: FastAPI):
    log.info("Loading advocate seed data…")
    try:
        log.info("  %d advocates loaded.", len(_get_advocates()))
    except RecordSourceError as exc:
        # Keep serving; GET /api/advocates reports the problem per request.
        log.error("  Could not load advocates: %s", exc)

    yield  # server runs here


app = FastAPI(title="Solace Advocates", lifespan=lifespan)


@app.exception_handler(StarletteHTTPException)
async def http_error(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        {"error": str(exc.detail), "status": exc.status_code},
        status_code=exc.status_code,
    )


@app.exception_handler(Exception)
async def unhandled_error(_: Request, exc: Exception) -> JSONResponse:
    log.error("Unhandled error: %s", exc, exc_info=exc)
    return JSONResponse(
        {"error": str(exc) or "Internal server error", "status": 500},
        status_code=500,
    )


# ---------------------------------------------------------------------------
# Schema
# ---------------------------------------------------------------------------

class AdvocateRecord(BaseModel):
    id: int | None = None
    firstName: str
    lastName: str
    city: str
    degree: str
    specialties: list[str]
    yearsOfExperience: int
    phoneNumber: int
    createdAt: str | None = None


class AdvocatesResponse(BaseModel):
    data: list[AdvocateRecord]


class SeedResponse(BaseModel):
    advocates: list[AdvocateRecord]


class ErrorResponse(BaseModel):
    error: str
    status: int | None = None
    details: Any = None


ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {500: {"model": ErrorResponse}}


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@app.get(
    "/api/advocates",
    response_model=AdvocatesResponse,
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
)
def list_advocates() -> AdvocatesResponse:
    t0 = time.perf_counter()

    try:
        data = _get_advocates()
    except RecordSourceError as exc:
        log.exception("Error fetching advocates")
        raise HTTPException(status_code=500, detail=str(exc)) from exc

    elapsed = time.perf_counter() - t0
    log.info("advocates  hits=%d  %.3fs", len(data), elapsed)
    return AdvocatesResponse(data=data)


@app.post(
    "/api/seed",
    response_model=SeedResponse,
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
)
def seed_advocates() -> SeedResponse:
    database_url = os.getenv("DATABASE_URL")
    if not database_url:
        log.warning("Seed requested but DATABASE_URL is not set.")
        raise HTTPException(status_code=500, detail="Database not configured")

    log.info("Seeding advocates into %s…", database_url)
    try:
        records = AdvocateStore.from_url(database_url).insert(_get_advocates())
    except RecordSourceError as exc:
        log.exception("Error seeding advocates")
        raise HTTPException(status_code=500, detail=str(exc)) from exc

    log.info("  Inserted %d advocates.", len(records))
    return SeedResponse(advocates=records)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def _launch_server() -> None:
    host = os.getenv("API_HOST", "0.0.0.0")
    port = int(os.getenv("API_PORT", "8000"))

    try:
        asyncio.get_running_loop()
    except RuntimeError:
        uvicorn.run(app, host=host, port=port, reload=False)
        return

    log.warning(
        "Detected an existing asyncio event loop; serving with create_task() instead of asyncio.run()."
    )
    server = uvicorn.Server(uvicorn.Config(app, host=host, port=port, reload=False))
    asyncio.create_task(server.serve())


if __name__ == "__main__":
    log.info("=== Solace Advocates — launching server on http://%s:%s ===",
             os.getenv("API_HOST", "0.0.0.0"), os.getenv("API_PORT", "8000"))
    _launch_server()
