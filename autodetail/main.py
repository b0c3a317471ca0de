"""
Main FastAPI application entry point.
"""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from autodetail.auth import cleanup_expired_sessions, seed_default_user
from autodetail.config import get_settings
from autodetail.database import SessionLocal, init_db
from autodetail.errors import register_exception_handlers
from autodetail.logging_config import setup_logging
from autodetail.routers import (
    accessories, appointments, auth, dashboard, inquiries, invoices,
    job_cards, ppf, services, technicians, vehicle_types,
)

settings = get_settings()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan events for the application.
    Handles startup and shutdown events.
    """
    # Startup
    setup_logging(settings.log_level, settings.log_file)
    logger.info("🚀 Starting %s...", settings.app_name)
    await init_db()
    async with SessionLocal() as db:
        await seed_default_user(db)
        await cleanup_expired_sessions(db)
    logger.info("🌐 API available at: %s", settings.api_prefix)

    yield

    # Shutdown
    logger.info("👋 Shutting down %s...", settings.app_name)


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="""
    ## Auto Detailing Shop Manager API

    Job cards, inquiries, invoices and master data for a detailing garage.

    ### Entities:
    * **Masters**: services, PPF products and rolls, accessories, vehicle types, technicians
    * **Job Cards**: service orders with priced line-item snapshots
    * **Inquiries**: sales leads with our price vs. the quoted customer price
    * **Invoices**: billing view of completed job cards
    * **Appointments**: booked visits
    """,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include routers
app.include_router(auth.router, prefix=settings.api_prefix)
app.include_router(dashboard.router, prefix=settings.api_prefix)
app.include_router(services.router, prefix=settings.api_prefix)
app.include_router(ppf.router, prefix=settings.api_prefix)
app.include_router(accessories.router, prefix=settings.api_prefix)
app.include_router(accessories.category_router, prefix=settings.api_prefix)
app.include_router(vehicle_types.router, prefix=settings.api_prefix)
app.include_router(technicians.router, prefix=settings.api_prefix)
app.include_router(appointments.router, prefix=settings.api_prefix)
app.include_router(job_cards.router, prefix=settings.api_prefix)
app.include_router(inquiries.router, prefix=settings.api_prefix)
app.include_router(invoices.router, prefix=settings.api_prefix)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Welcome to the Auto Detailing Shop Manager API",
        "version": settings.app_version,
        "docs": "/docs",
        "redoc": "/redoc",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "version": settings.app_version,
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "autodetail.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
    )
