import logging
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from contextlib import asynccontextmanager

from app.core.config import settings
from app.core.database import SessionLocal, init_db
from app.core.logging_config import setup_logging
from app.api.endpoints import employees, greeting, health
from app.services.sample_data import seed_sample_employees

# Configure logging
setup_logging(
    settings.LOG_LEVEL,
    json_logs=settings.JSON_LOGS,
    service_name=settings.PROJECT_NAME,
    service_version=settings.VERSION,
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.
    """
    # Startup
    logger.info(f"Starting up {settings.PROJECT_NAME}...")
    logger.info("Initializing database...")
    init_db()
    logger.info("Database initialized successfully")

    if settings.SEED_SAMPLE_DATA:
        db = SessionLocal()
        try:
            seed_sample_employees(db)
        finally:
            db.close()

    yield

    # Shutdown
    logger.info(f"Shutting down {settings.PROJECT_NAME}...")


# Create FastAPI application
app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="CRUD API for managing employee records",
    lifespan=lifespan
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.BACKEND_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def request_validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Report malformed requests (bad path/query parameters or body) as 400.
    """
    logger.warning(f"Rejected {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


# Include routers
app.include_router(employees.router, prefix=settings.API_PREFIX)
app.include_router(greeting.router, prefix=settings.API_PREFIX)
app.include_router(health.router)


@app.get("/", response_class=PlainTextResponse)
async def root() -> str:
    """Root endpoint - reports that the application is running"""
    return f"{settings.PROJECT_NAME} is running!"


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower()
    )
