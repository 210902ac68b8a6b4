"""Parking lot management service: FastAPI backend."""
from contextlib import asynccontextmanager
import logging
import os
import subprocess
import sys

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from utils.config import LOG_LEVEL

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

from api.parking_lots import router as parking_lots_router
from api.routes import router
from schemas.envelope import ErrorResponse
from utils.errors import AppError, Conflict

LOG = logging.getLogger(__name__)


def _run_migrations() -> None:
    """Bring the database schema up to date with alembic."""
    backend_dir = os.path.dirname(os.path.abspath(__file__))
    result = subprocess.run(
        [sys.executable, "-m", "alembic", "upgrade", "head"],
        cwd=backend_dir,
        capture_output=True,
        text=True,
    )
    if result.returncode != 0:
        raise RuntimeError(f"Alembic upgrade failed: {result.stderr or result.stdout}")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Run DB migrations before serving requests."""
    _run_migrations()
    LOG.info("Database migrations applied")
    yield


app = FastAPI(
    title="Parking Lot Service",
    description="Parking lot management backend",
    version="0.1.0",
    lifespan=lifespan,
)


def _error_response(status_code: int, code: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(status=code, message=message).model_dump(),
    )


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return _error_response(exc.status_code, exc.code, exc.message)


@app.exception_handler(IntegrityError)
async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    LOG.warning("Constraint violation on %s %s: %s", request.method, request.url.path, exc.orig)
    return _error_response(Conflict.status_code, Conflict.code, "Constraint violation")


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    LOG.exception("Database error on %s %s", request.method, request.url.path)
    return _error_response(500, AppError.code, "Database error")


app.include_router(router)
app.include_router(parking_lots_router)
