"""Jenkins credential check - confirms the configured API token is accepted."""

import logging

import httpx
from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from app.config import settings
from app.errors import parse_jenkins_error

router = APIRouter()
logger = logging.getLogger(__name__)

# Swapped for httpx.MockTransport in tests
_transport: httpx.AsyncBaseTransport | None = None


class JenkinsStatus(BaseModel):
    success: bool
    message: str | None = None
    error: str | None = None


def _api_url() -> str:
    if not settings.jenkins_url:
        raise HTTPException(503, "Jenkins not configured (JENKINS_URL not set)")
    return f"{settings.jenkins_url.rstrip('/')}/api/json"


async def check_credentials() -> bool:
    """GET <jenkins>/api/json with basic auth; True only on HTTP 200."""
    url = _api_url()
    auth = (settings.jenkins_user, settings.jenkins_api_token)
    try:
        async with httpx.AsyncClient(timeout=settings.jenkins_timeout, transport=_transport) as client:
            resp = await client.get(url, auth=auth)
    except httpx.HTTPError as e:
        logger.warning(f"Jenkins unreachable at {url}: {e}")
        return False

    if resp.status_code != 200:
        logger.warning(f"Jenkins rejected credentials ({resp.status_code}): {parse_jenkins_error(resp.text)}")
        return False
    return True


@router.get("/status", response_model=JenkinsStatus, response_model_exclude_none=True)
async def jenkins_status():
    """Check that the configured Jenkins user and API token are accepted."""
    if await check_credentials():
        return JenkinsStatus(success=True, message="Valid Token")
    return JSONResponse(
        status_code=403,
        content=JenkinsStatus(success=False, error="Invalid Token or Unauthorized").model_dump(exclude_none=True),
    )
