from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel

from app.config import VERSION, settings


router = APIRouter(tags=["health"])

_startup_time = datetime.now(timezone.utc)


class EndpointInfo(BaseModel):
    path: str
    description: str
    provider: str | None = None


class HealthResponse(BaseModel):
    status: str
    version: str
    uptime_seconds: float
    endpoints: list[EndpointInfo]


class IntegrationStatus(BaseModel):
    connected: bool
    status: str
    last_check: str | None = None


class IntegrationsResponse(BaseModel):
    jenkins: IntegrationStatus


ENDPOINTS = [
    EndpointInfo(path="/health", description="Receiver status and API directory"),
    EndpointInfo(path="/health/integrations", description="Integration configuration status"),
    EndpointInfo(path="/jenkins-webhook", description="Build callback ingestion", provider="Jenkins"),
    EndpointInfo(path="/webhook", description="Build callback ingestion (alias)", provider="Jenkins"),
    EndpointInfo(path="/jenkins/status", description="Jenkins credential check", provider="Jenkins"),
]


def _check_jenkins() -> IntegrationStatus:
    if not settings.jenkins_url:
        return IntegrationStatus(connected=False, status="url not configured")
    if not settings.jenkins_user or not settings.jenkins_api_token:
        return IntegrationStatus(connected=False, status="credentials not configured")
    return IntegrationStatus(
        connected=True,
        status="ok",
        last_check=datetime.now(timezone.utc).isoformat(),
    )


@router.get("/health", response_model=HealthResponse)
async def health_check():
    uptime = (datetime.now(timezone.utc) - _startup_time).total_seconds()

    return HealthResponse(
        status="ok",
        version=VERSION,
        uptime_seconds=round(uptime, 2),
        endpoints=ENDPOINTS,
    )


@router.get("/health/integrations", response_model=IntegrationsResponse)
async def get_integrations():
    return IntegrationsResponse(jenkins=_check_jenkins())
