"""Jenkins Webhook Receiver - FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from app.config import VERSION, settings
from app.dependencies import verify_api_key
from app.routers import health, jenkins, webhooks

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Webhook receiver {VERSION} started (token window {settings.token_window_ms} ms)")
    yield
    logger.info("Webhook receiver stopped")


app = FastAPI(
    title="Jenkins Webhook Receiver",
    description="Verifies and acknowledges Jenkins build callbacks",
    version=VERSION,
    debug=settings.debug,
    lifespan=lifespan,
)

# Rate limiting
app.state.limiter = webhooks.limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


@app.exception_handler(Exception)
async def unhandled_error(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return PlainTextResponse("Internal server error", status_code=500)


# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers (health and webhooks are public; webhooks carry their own token + checksum)
app.include_router(health.router)
app.include_router(webhooks.router, tags=["webhooks"])
app.include_router(
    jenkins.router, prefix="/jenkins", tags=["jenkins"], dependencies=[Depends(verify_api_key)]
)
