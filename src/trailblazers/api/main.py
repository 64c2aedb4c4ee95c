"""
FastAPI Main Application

TrailBlazers REST API. Tables are created and seed data loaded once, in the
application lifespan, before the first request is served. Neither step is
required for the API to serve: storage faults are logged and startup goes on.
"""
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from config.settings import settings
from src.trailblazers.api.schemas import HealthCheck
from src.trailblazers.db import session as db_session
from src.trailblazers.db.session import close_connections, create_all_tables, get_db
from src.trailblazers.seeding import seed_database
from src.trailblazers.utils.logger import get_logger, setup_logging

logger = get_logger(__name__)

RUNNING_MESSAGE = "TrailBlazers API is running"


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    try:
        create_all_tables()
    except SQLAlchemyError as e:
        # Seeding still runs and records each source as failed
        logger.error(
            "database_tables_create_failed",
            error=str(e),
            error_type=type(e).__name__,
        )
    summary = seed_database()
    if summary is not None:
        logger.info(
            "startup_seeding_summary",
            failed=summary.failed_kinds(),
            **summary.inserted_by_kind(),
        )
    yield
    close_connections()


app = FastAPI(
    title="TrailBlazers API",
    description="Missouri state parks, plants and wildlife",
    version=settings.app_version,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/", response_model=HealthCheck, tags=["health"])
@app.get("/health", response_model=HealthCheck, tags=["health"])
def health_check(db: Session = Depends(get_db)):
    """
    Health check endpoint.

    Returns:
        Health status with database connectivity check
    """
    database_status = db_session.health_check(db)

    return HealthCheck(
        status="healthy" if database_status == "connected" else "degraded",
        message=RUNNING_MESSAGE,
        version=settings.app_version,
        database=database_status,
        timestamp=datetime.now(timezone.utc),
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "src.trailblazers.api.main:app",
        host="0.0.0.0",
        port=8080,
        reload=False,
    )
