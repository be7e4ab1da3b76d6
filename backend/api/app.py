"""FastAPI application."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded

from backend.api.limiter import limiter
from backend.config import settings
from backend.db.base import init_db
from backend.errors import AppError

logger = logging.getLogger(__name__)

ALLOWED_ORIGINS = settings.cors_origins.split(",")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging and initialize database on startup."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        init_db()
    except ValueError:
        logger.warning("DATABASE_URL not configured, skipping table creation")
    yield


app = FastAPI(
    title="MaxJobOffers API",
    description="AI-generated interview, résumé, LinkedIn and financial content for job seekers",
    version="0.1.0",
    lifespan=lifespan,
)

app.state.limiter = limiter


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    """Return the error's status with a message and a machine-readable code."""
    if exc.status_code >= 500:
        logger.error("%s on %s %s: %s", exc.code, request.method, request.url.path, exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, "code": exc.code},
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error", "code": "internal_error"},
    )


@app.exception_handler(RateLimitExceeded)
async def rate_limit_handler(request: Request, exc: RateLimitExceeded):
    """Return 429 with a clear message when rate limit is exceeded."""
    return JSONResponse(
        status_code=429,
        content={"detail": f"Rate limit exceeded: {exc.detail}", "code": "rate_limited"},
    )


app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PATCH", "DELETE"],
    allow_headers=["Content-Type", "Authorization", "X-User-ID"],
)


# Import and include routers
from backend.api.routes import (  # noqa: E402
    applications,
    billing,
    financial,
    guides,
    interviews,
    jobs,
    linkedin,
    resumes,
    users,
)

app.include_router(users.router, prefix="/users", tags=["Users"])
app.include_router(interviews.router, prefix="/interviews", tags=["Interviews"])
app.include_router(guides.router, prefix="/interview-guides", tags=["Interview Guides"])
app.include_router(linkedin.router, prefix="/linkedin", tags=["LinkedIn"])
app.include_router(resumes.router, prefix="/resumes", tags=["Resumes"])
app.include_router(financial.router, prefix="/financial", tags=["Financial"])
app.include_router(jobs.router, prefix="/jobs", tags=["Jobs"])
app.include_router(applications.router, prefix="/applications", tags=["Applications"])
app.include_router(billing.router, prefix="/billing", tags=["Billing"])


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
