"""Jenkins webhook endpoints - verify, normalize and acknowledge build callbacks."""

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse
from slowapi import Limiter
from slowapi.util import get_remote_address

from app.config import settings
from app.pipeline import RawRequest, run_pipeline

router = APIRouter()

limiter = Limiter(key_func=get_remote_address)


@router.post("/jenkins-webhook", response_class=PlainTextResponse)
@router.post("/webhook", response_class=PlainTextResponse)
@limiter.limit(settings.webhook_rate_limit)
async def receive_webhook(request: Request):
    """Run the verification pipeline on a Jenkins callback.

    200 "Webhook received" on success, 400 with the first failure reason otherwise.
    """
    raw = RawRequest(body=await request.body(), headers=dict(request.headers))
    verdict = run_pipeline(raw, window_ms=settings.token_window_ms)
    return PlainTextResponse(verdict.message, status_code=verdict.status_code)
