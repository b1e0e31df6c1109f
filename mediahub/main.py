"""
MediaHub Listing API - FastAPI application for video and comment listings

Read-side API of the media-sharing backend:
- Published video listing with free-text relevance search
- Per-video comment listing
- Owner data denormalized onto every row
- Offset pagination with stable ordering

Architecture:
- Listing engine is pure per request (mediahub.listing)
- Document store is pluggable: PostgreSQL (JSONB) or in-memory (mediahub.stores)
- Optional bearer JWT identifies the requester for ownership flags
"""

import logging
import os
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Any, Dict, List, Optional
from pathlib import Path

# Load environment variables from .env.local (local dev) or .env (production)
from dotenv import load_dotenv

# Load .env.local first (highest priority), then .env as fallback
env_local = Path(__file__).parent.parent / ".env.local"
env_file = Path(__file__).parent.parent / ".env"

if env_local.exists():
    print(f"Loading environment from: {env_local}")
    load_dotenv(env_local, override=True)
elif env_file.exists():
    print(f"Loading environment from: {env_file}")
    load_dotenv(env_file, override=True)
else:
    print("WARNING: No .env.local or .env file found - using system environment variables only")

# Configure logging: console (brief) + file (detailed)
from mediahub.logging_config import setup_logging

log_level = os.getenv("LOG_LEVEL", "INFO").upper()
console_level = getattr(logging, log_level, logging.INFO)
setup_logging(
    log_file="logs/mediahub.log",
    console_level=console_level,
    file_level=logging.DEBUG  # Always DEBUG in file for troubleshooting
)

logger = logging.getLogger(__name__)


from fastapi import FastAPI, HTTPException, Depends, Query, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from .auth import get_current_user_optional
from .listing import InvalidArgument, ListingEngine, Page, UpstreamFailure
from .stores import get_store

# Configuration from environment variables
PORT = int(os.getenv("PORT", "8080"))
MAX_PAGE_LIMIT = int(os.getenv("MAX_PAGE_LIMIT", "100"))

# Version tracking
APP_VERSION = "0.1.0"
APP_START_TIME = datetime.utcnow().isoformat() + "Z"

# Global instances
listing_engine: Optional[ListingEngine] = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize and cleanup resources"""
    global listing_engine

    logger.info("Connecting to document store...")
    store = get_store()
    await store.connect()
    logger.info(f"Document store ready: {type(store).__name__}")

    # Both stores implement DocumentStore and UserLookup
    listing_engine = ListingEngine(store=store, user_lookup=store)
    logger.info("Listing engine initialized")

    yield

    logger.info("Shutting down...")
    await store.disconnect()
    listing_engine = None


# FastAPI app
app = FastAPI(
    title="MediaHub Listing API",
    description="Video and comment listings with relevance search and pagination",
    version=APP_VERSION,
    lifespan=lifespan,
    swagger_ui_parameters={
        "persistAuthorization": True,  # Keep auth token between page refreshes
    },
)

# CORS middleware for frontend integration
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure properly in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_engine() -> ListingEngine:
    """FastAPI dependency: the process-wide listing engine"""
    if listing_engine is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Listing engine not initialized",
        )
    return listing_engine


# Response models
class HealthResponse(BaseModel):
    status: str
    version: str
    started_at: str
    uptime_seconds: float


class ListingPage(BaseModel):
    items: List[Dict[str, Any]]
    totalDocs: int = Field(..., description="Matches after filtering and relevance (before slicing)")
    limit: int
    page: int
    totalPages: int = Field(..., description="ceil(totalDocs / limit); 0 when nothing matched")
    pagingCounter: Optional[int] = Field(None, description="1-based index of the first item on this page")
    hasPrevPage: bool
    hasNextPage: bool
    prevPage: Optional[int] = None
    nextPage: Optional[int] = None


class ListingResponse(BaseModel):
    statusCode: int = 200
    data: ListingPage
    message: str
    success: bool = True


def _envelope(page: Page, message: str) -> ListingResponse:
    return ListingResponse(data=ListingPage(**page.to_dict()), message=message)


# Routes
@app.get("/", response_model=dict)
async def root():
    """Root endpoint"""
    return {
        "service": "MediaHub Listing API",
        "version": APP_VERSION,
        "status": "running",
        "docs": "/docs",
    }


@app.get("/health", response_model=HealthResponse)
async def health():
    """Health check endpoint"""
    start_time = datetime.fromisoformat(APP_START_TIME.rstrip('Z'))
    uptime = (datetime.utcnow() - start_time).total_seconds()

    return HealthResponse(
        status="healthy",
        version=APP_VERSION,
        started_at=APP_START_TIME,
        uptime_seconds=round(uptime, 2),
    )


@app.get("/v1/videos", response_model=ListingResponse)
async def list_videos(
    page: int = Query(1, ge=1, description="1-based page number"),
    limit: int = Query(10, ge=1, le=MAX_PAGE_LIMIT, description="Page size"),
    query: Optional[str] = Query(None, description="Free-text search over titles"),
    sortBy: Optional[str] = Query(None, description="createdAt | updatedAt | title | views | duration"),
    sortType: str = Query("1", description="1 = ascending, -1 = descending"),
    userId: Optional[str] = Query(None, description="Only videos of this owner"),
    requester_id: Optional[str] = Depends(get_current_user_optional),
    engine: ListingEngine = Depends(get_engine),
):
    """
    List published videos

    Example:
        GET /v1/videos?query=quick%20fox&sortBy=views&sortType=-1&page=1&limit=10
    """
    try:
        result = await engine.list_videos(
            page=page,
            limit=limit,
            query=query,
            sort_by=sortBy,
            sort_type=sortType,
            user_id=userId,
            requester_id=requester_id,
        )
        return _envelope(result, "Videos fetched successfully")

    except InvalidArgument as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except UpstreamFailure as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Failed to list videos ({e.operation})",
        )


@app.get("/v1/videos/{video_id}/comments", response_model=ListingResponse)
async def list_video_comments(
    video_id: str,
    page: int = Query(1, ge=1, description="1-based page number"),
    limit: int = Query(10, ge=1, le=MAX_PAGE_LIMIT, description="Page size"),
    query: Optional[str] = Query(None, description="Free-text search over comment content"),
    sortBy: Optional[str] = Query(None, description="createdAt | updatedAt"),
    sortType: str = Query("1", description="1 = ascending, -1 = descending"),
    requester_id: Optional[str] = Depends(get_current_user_optional),
    engine: ListingEngine = Depends(get_engine),
):
    """
    List comments of a video

    Example:
        GET /v1/videos/65f1c0a2b3d4e5f601234567/comments?page=2&limit=20
    """
    try:
        result = await engine.list_comments(
            video_id=video_id,
            page=page,
            limit=limit,
            query=query,
            sort_by=sortBy,
            sort_type=sortType,
            requester_id=requester_id,
        )
        return _envelope(result, "Comments fetched successfully")

    except InvalidArgument as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except UpstreamFailure as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Failed to list comments ({e.operation})",
        )


@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """Global exception handler"""
    logger.exception(f"Unhandled error on {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Internal server error",
        },
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "mediahub.main:app",
        host="0.0.0.0",
        port=PORT,
        reload=True,  # Development only
    )
