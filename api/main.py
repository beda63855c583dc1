"""
Token Presale API - Main Application.

FastAPI application exposing the presale: status, quotes, purchases,
owner withdrawals and administration.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api import __version__
from api.models import ErrorResponse
from domain.errors import PresaleError

logger = logging.getLogger(__name__)

# Stable error code -> HTTP status
ERROR_STATUS_CODES = {
    "INVALID_AMOUNT": 400,
    "INVALID_ADDRESS": 400,
    "UNAUTHORIZED": 403,
    "TRANSFER_FAILED": 402,
    "EXCEEDS_CAP": 409,
    "PRESALE_ERROR": 409,
    "SALE_HALTED": 423,
    "ISSUANCE_FAILED": 502,
}

# Create FastAPI application
app = FastAPI(
    title="Token Presale API",
    description="REST API for buying presale tokens at a fixed price under a hard cap",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)

# Configure CORS - Allow all origins for development
# TODO: Restrict origins once the frontend domain is fixed
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(PresaleError)
async def presale_error_handler(request: Request, exc: PresaleError):
    status_code = ERROR_STATUS_CODES.get(exc.code, 400)
    logger.info(
        "Presale request failed",
        extra={"path": request.url.path, "error_code": exc.code, "status_code": status_code},
    )
    body = ErrorResponse(error=exc.code, detail=exc.message, status_code=status_code)
    return JSONResponse(status_code=status_code, content=body.model_dump())


@app.get("/health", tags=["Health"])
def health_check():
    """
    Health check endpoint.

    Returns the API status and version.
    """
    return {
        "status": "healthy",
        "version": __version__,
        "service": "token-presale-api"
    }


@app.get("/", tags=["Root"])
def root():
    """
    Root endpoint with API information.
    """
    return {
        "message": "Token Presale API",
        "version": __version__,
        "docs": "/docs",
        "health": "/health"
    }


# Import and include routers
from api.routers import admin, presale, purchases, treasury

app.include_router(presale.router, prefix="/api/v1", tags=["Presale"])
app.include_router(purchases.router, prefix="/api/v1", tags=["Purchases"])
app.include_router(treasury.router, prefix="/api/v1", tags=["Treasury"])
app.include_router(admin.router, prefix="/api/v1", tags=["Admin"])
