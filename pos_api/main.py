from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from contextlib import asynccontextmanager
import logging

import uvicorn

from pos_api.config import get_settings
from pos_api.database import engine, Base
from pos_api.api import categories, products, transactions, report, health

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.
    """
    # Startup
    logger.info("Starting up application...")

    if settings.CREATE_TABLES:
        logger.info("Creating database tables...")
        Base.metadata.create_all(bind=engine)
        logger.info("Database tables created successfully")

    yield

    # Shutdown
    logger.info("Shutting down application...")
    engine.dispose()


# Create FastAPI application
app = FastAPI(
    title=settings.APP_NAME,
    description="""
    A point-of-sale backend API with:

    - **Catalog**: CRUD operations for categories and products
    - **Checkout**: Multi-line sales written atomically with stock decrements
    - **Reports**: Daily and date-range revenue with the best-selling product

    ## Checkout atomicity
    A checkout validates every line, decrements stock and records the
    transaction with its detail lines in one database transaction. Product
    rows are locked with `SELECT FOR UPDATE`, so concurrent checkouts of the
    same product cannot oversell.

    All monetary values are integers in the minor currency unit.
    """,
    version=settings.APP_VERSION,
    lifespan=lifespan
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed IDs, invalid JSON bodies and out-of-range fields are bad requests."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(SQLAlchemyError)
async def storage_exception_handler(request: Request, exc: SQLAlchemyError):
    """Storage failures are logged and reported without internal detail."""
    logger.exception(f"Storage failure on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


# Include API routers
app.include_router(health.router, prefix="/api")
app.include_router(categories.router, prefix="/api")
app.include_router(products.router, prefix="/api")
app.include_router(transactions.checkout_router, prefix="/api")
app.include_router(transactions.router, prefix="/api")
app.include_router(report.router, prefix="/api")


@app.get("/", tags=["Root"])
def root():
    """Root endpoint with API information."""
    return {
        "status": "OK",
        "message": "API Running",
        "name": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "docs": "/docs",
        "health": "/api/health"
    }


def run():
    """Serve the application with uvicorn."""
    uvicorn.run("pos_api.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
