# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Taste Engine API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app import __version__
from app.config import settings
from app.exceptions import (
    TasteEngineException,
    taste_engine_exception_handler,
    validation_exception_handler,
)
from app.routers import (
    brand_references,
    brand_styles,
    deliverable_styles,
    health,
    reference_libraries,
)

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    The Supabase client is created lazily on first use, so startup only
    logs the configuration.
    """
    logger.info(f"Starting Taste Engine API in {settings.ENVIRONMENT} mode")
    logger.info(f"CORS origins: {settings.cors_origins_list}")

    yield

    logger.info("Shutting down Taste Engine API")


# Create FastAPI application
app = FastAPI(
    title="Taste Engine API",
    description="""
## Brand Taste Classification and Reference Matching

Turns brand personality sliders into taste buckets, suggests exemplar
images from the curated brand reference library, names the detected
aesthetic, and reports coverage gaps in the deliverable style library.

### Buckets

| Slider | < 35 | 35-65 | > 65 |
|--------|------|-------|------|
| Tone | serious | balanced | playful |
| Energy | minimal | balanced | bold |

### Quick Start

```bash
# Suggest references for a serious, minimal brand
curl -X POST http://localhost:8000/api/v1/brand-references/match \\
  -H "Content-Type: application/json" \\
  -d '{"signalTone": 10, "signalEnergy": 10, "limit": 6}'

# Curation coverage
curl http://localhost:8000/api/v1/deliverable-styles/coverage
```
""",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Brand References",
            "description": "Match and browse curated brand references",
        },
        {
            "name": "Brand Styles",
            "description": "Classify sliders and name the brand style",
        },
        {
            "name": "Deliverable Styles",
            "description": "Coverage statistics for curators",
        },
        {
            "name": "Reference Libraries",
            "description": "Vocabularies and display labels",
        },
        {
            "name": "Health",
            "description": "API health and readiness checks",
        },
    ],
)


# =============================================================================
# Middleware
# =============================================================================

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(TasteEngineException)
async def handle_taste_engine_exception(request: Request, exc: TasteEngineException):
    """Handle custom Taste Engine exceptions."""
    if exc.status_code >= 500:
        logger.error(f"{exc.code}: {exc.message} {exc.details}")
    return await taste_engine_exception_handler(request, exc)


@app.exception_handler(RequestValidationError)
async def handle_validation_exception(request: Request, exc: RequestValidationError):
    """Handle request validation errors."""
    return await validation_exception_handler(request, exc)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
    )


# =============================================================================
# Routers
# =============================================================================

# Health check endpoints
app.include_router(
    health.router,
    prefix="/api/v1",
    tags=["Health"]
)

# Brand reference matching and browsing
app.include_router(
    brand_references.router,
    prefix="/api/v1/brand-references",
    tags=["Brand References"]
)

# Slider classification and style naming
app.include_router(
    brand_styles.router,
    prefix="/api/v1/brand-styles",
    tags=["Brand Styles"]
)

# Deliverable style coverage
app.include_router(
    deliverable_styles.router,
    prefix="/api/v1/deliverable-styles",
    tags=["Deliverable Styles"]
)

# Vocabularies
app.include_router(
    reference_libraries.router,
    prefix="/api/v1/reference-libraries",
    tags=["Reference Libraries"]
)


# =============================================================================
# Root Endpoint
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint - returns API info.
    """
    return {
        "name": "Taste Engine API",
        "version": __version__,
        "docs": "/docs",
        "health": "/api/v1/health",
    }
