"""
Dafku Proposal Engine - FastAPI Application Entry Point.

Builds fee proposals for legal-service customers:
- Fee presets and editable fee breakdowns
- Template selection and document rendering
- Draft/sent lifecycle with snapshots and expiry

Run with:
    uvicorn proposal_engine.main:app --reload --port 8000
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from proposal_engine import __version__
from proposal_engine.core.config import get_settings
from proposal_engine.api.proposals import router as proposal_router, test_router


# ===========================================
# Logging Configuration
# ===========================================

def setup_logging():
    """Configure application logging."""
    settings = get_settings()

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if settings.DEBUG else logging.INFO)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(logging.DEBUG if settings.DEBUG else logging.INFO)
    root_logger.addHandler(console_handler)

    # Reduce noise from third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("hpack").setLevel(logging.WARNING)
    logging.getLogger("weasyprint").setLevel(logging.WARNING)
    logging.getLogger("fontTools").setLevel(logging.WARNING)

    return logging.getLogger(__name__)


logger = setup_logging()


# ===========================================
# Application Lifespan
# ===========================================

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """Application lifespan handler for startup/shutdown."""
    settings = get_settings()

    logger.info("=" * 50)
    logger.info("Dafku Proposal Engine Starting Up")
    logger.info("=" * 50)
    logger.info(f"Environment: {'Development' if settings.DEBUG else 'Production'}")
    logger.info(f"Proposal validity: {settings.PROPOSAL_VALIDITY_DAYS} days")
    logger.info(f"Customers table: {settings.CUSTOMERS_TABLE}")

    if not settings.SUPABASE_URL or not settings.SUPABASE_KEY:
        logger.warning("Supabase credentials not configured!")

    logger.info("Startup complete - ready to render proposals")

    yield

    logger.info("Dafku Proposal Engine shutting down...")


# ===========================================
# FastAPI Application
# ===========================================

def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="Dafku Proposal Engine",
        description="""
        Fee proposal assembly for legal-service customers.

        ## Proposals

        - `POST /proposals/presets` - Fee presets for a service set
        - `POST /proposals/preview` - Render unsaved fields
        - `GET /proposals/{customer_id}` - Customer proposal with status
        - `PUT /proposals/{customer_id}/fields` - Save fields
        - `POST /proposals/{customer_id}/send` - Snapshot and send

        ## Testing

        - `GET /test/health` - Health check
        """,
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure appropriately for production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(proposal_router)
    app.include_router(test_router)

    return app


# Create app instance
app = create_app()


# ===========================================
# Root Endpoint
# ===========================================

@app.get("/", tags=["root"])
async def root():
    """Root endpoint with API information."""
    return JSONResponse({
        "service": "Dafku Proposal Engine",
        "version": __version__,
        "status": "running",
        "endpoints": {
            "proposals": {
                "presets": "POST /proposals/presets",
                "preview": "POST /proposals/preview",
                "preview_markdown": "POST /proposals/preview/markdown",
                "get": "GET /proposals/{customer_id}",
                "save_fields": "PUT /proposals/{customer_id}/fields",
                "send": "POST /proposals/{customer_id}/send",
                "markdown": "GET /proposals/{customer_id}/markdown",
                "pdf": "GET /proposals/{customer_id}/pdf"
            },
            "testing": {
                "health": "GET /test/health"
            },
            "docs": "GET /docs"
        }
    })


# ===========================================
# Error Handlers
# ===========================================

@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """Global exception handler for unhandled errors."""
    logger.error(f"Unhandled error: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "message": str(exc) if get_settings().DEBUG else "An error occurred"
        }
    )


# ===========================================
# Main Entry Point
# ===========================================

if __name__ == "__main__":
    import uvicorn

    settings = get_settings()

    uvicorn.run(
        "proposal_engine.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
        log_level="debug" if settings.DEBUG else "info"
    )
