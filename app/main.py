from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from sqlalchemy.exc import SQLAlchemyError
import logging
import os

from app.config import settings
from app.database import engine, Base
from app.errors import BackendError
import app.models  # noqa — register all models
from app.routers import health, computers, students, allocations, export

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI):
    # Ensure DB exists and tables are created (for dev mode without alembic)
    if settings.DATABASE_URL.startswith("sqlite:///./data/"):
        os.makedirs("data", exist_ok=True)
    Base.metadata.create_all(bind=engine)
    logger.info("LabSeat spuštěn (%s)", settings.APP_ENV)
    yield


app = FastAPI(
    title="LabSeat",
    description="Přidělování počítačů v učebně studentům",
    version="1.0.0",
    lifespan=lifespan,
)


@app.exception_handler(SQLAlchemyError)
async def store_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    # Reads run outside transaction(); their store failures end up here
    logger.exception("Chyba databáze při %s %s", request.method, request.url.path)
    error = BackendError()
    return JSONResponse(status_code=error.status_code, content={"detail": error.detail})


app.include_router(health.router)
app.include_router(computers.router)
app.include_router(students.router)
app.include_router(allocations.router)
app.include_router(export.router)
