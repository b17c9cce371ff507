"""
Betting Tracker - FastAPI Application

Main entry point for the backend API.
This module configures the FastAPI app, middleware, and routes.
"""

import os
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.api.routes import leagues, matches, bets
from src.api.dependencies import get_api_football, get_database_service
from src.application.dtos.dtos import HealthResponseDTO, ErrorResponseDTO
from src.domain.exceptions import (
    BetNotFoundError,
    BetTrackerException,
    BetValidationError,
    DataUnavailableError,
    InvalidBetResultError,
    MatchNotFoundError,
)
from src.utils.time_utils import get_current_time

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


# Log timestamps in the application timezone
class AppTimeFormatter(logging.Formatter):
    def formatTime(self, record, datefmt=None):
        ct = get_current_time()
        if datefmt:
            s = ct.strftime(datefmt)
        else:
            t = ct.strftime("%Y-%m-%d %H:%M:%S")
            s = "%s,%03d" % (t, record.msecs)
        return s

formatter = AppTimeFormatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
handler = logging.StreamHandler()
handler.setFormatter(formatter)
root_logger = logging.getLogger()
root_logger.setLevel(logging.INFO)
root_logger.handlers = [handler]
logger = logging.getLogger(__name__)


# Application metadata
APP_TITLE = "Betting Tracker"
APP_DESCRIPTION = """
**Personal Sports Betting Tracker API**

Browse locally stored leagues and matches, compare the form of two teams,
and record, settle and analyze your bets.

## Features

* **Head-to-Head** - Record, goals, averages and goals-conceded buckets per team
* **Bet Ledger** - Profit/loss from American odds for every bet
* **Performance** - Total wagered, net profit, ROI and win rate
* **Fixture Import** - Daily fixtures from API-Football (optional, requires API key)
"""
APP_VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    from src.scheduler import FixtureImportScheduler

    # Startup
    logger.info(f"Starting {APP_TITLE} v{APP_VERSION}")

    db_service = get_database_service()
    db_service.create_tables()

    api_football = get_api_football()
    if api_football.is_configured:
        logger.info("API-Football configured")
    else:
        logger.warning("API-Football not configured (optional)")

    scheduler = FixtureImportScheduler(db_service, api_football)
    scheduler.start()

    yield

    # Shutdown
    logger.info("Shutting down...")
    scheduler.shutdown()
    db_service.dispose()


# Create FastAPI app
app = FastAPI(
    title=APP_TITLE,
    description=APP_DESCRIPTION,
    version=APP_VERSION,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)


# Configure CORS
base_origins = [
    "http://localhost:3000",
    "http://localhost:5173",
    "http://127.0.0.1:3000",
    "http://127.0.0.1:5173",
]
cors_origins = os.getenv("CORS_ORIGINS", "").split(",")
# Combine and remove empty/duplicates
all_origins = list(set([o for o in base_origins + cors_origins if o]))

app.add_middleware(
    CORSMiddleware,
    allow_origins=all_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Exception handlers
ERROR_STATUS = {
    BetValidationError: (422, "invalid_bet"),
    InvalidBetResultError: (422, "invalid_bet_result"),
    BetNotFoundError: (404, "bet_not_found"),
    MatchNotFoundError: (404, "match_not_found"),
    DataUnavailableError: (503, "data_unavailable"),
}


@app.exception_handler(BetTrackerException)
async def domain_exception_handler(request: Request, exc: BetTrackerException):
    """Map domain errors to HTTP responses."""
    status_code, error = ERROR_STATUS.get(type(exc), (400, "bad_request"))
    if status_code >= 500:
        logger.error(f"{error} on {request.url.path}: {exc}")
    else:
        logger.info(f"{error} on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponseDTO(
            error=error,
            message=str(exc),
            details={"path": str(request.url)},
        ).model_dump(),
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler for unhandled errors."""
    logger.error(f"Unhandled error: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content=ErrorResponseDTO(
            error="internal_server_error",
            message="An unexpected error occurred",
            details={"path": str(request.url)},
        ).model_dump(),
    )


# Health check endpoint
@app.get(
    "/health",
    response_model=HealthResponseDTO,
    tags=["Health"],
    summary="Health check",
    description="Check if the API is running and healthy.",
)
async def health_check() -> HealthResponseDTO:
    """Health check endpoint."""
    return HealthResponseDTO(
        status="healthy",
        version=APP_VERSION,
        timestamp=get_current_time(),
    )


# Root endpoint
@app.get(
    "/",
    tags=["Root"],
    summary="API Information",
    description="Get basic API information and links.",
)
async def root():
    """Root endpoint with API info."""
    return {
        "name": APP_TITLE,
        "version": APP_VERSION,
        "documentation": "/docs",
        "health": "/health",
        "endpoints": {
            "leagues": "/api/v1/leagues",
            "matches": "/api/v1/matches/{match_id}",
            "head_to_head": "/api/v1/matches/{match_id}/head-to-head",
            "bets": "/api/v1/bets",
            "dashboard": "/api/v1/bets/dashboard",
        },
    }


# Include routers
app.include_router(leagues.router, prefix="/api/v1")
app.include_router(matches.router, prefix="/api/v1/matches")
app.include_router(bets.router, prefix="/api/v1")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "src.api.main:app",
        host="0.0.0.0",
        port=int(os.getenv("PORT", "8000")),
        reload=True,
    )
