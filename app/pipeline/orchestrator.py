"""Sequential webhook verification pipeline.

Parse -> Authorize -> Integrity -> Normalize -> Validate. The first failing step
ends the run with a rejected verdict; no step is retried.
"""

import logging
from dataclasses import dataclass
from enum import Enum

from app.errors import WebhookRejected
from app.pipeline.canonical import CanonicalDocument
from app.pipeline.freshness import DEFAULT_WINDOW_MS, TIMESTAMP_HEADER, verify_freshness
from app.pipeline.integrity import CHECKSUM_HEADER, verify_checksum
from app.pipeline.normalizer import normalize
from app.pipeline.parser import parse_payload
from app.pipeline.request import RawRequest
from app.pipeline.schemas import validate_payload

logger = logging.getLogger(__name__)

ACKNOWLEDGEMENT = "Webhook received"


class PipelineState(str, Enum):
    RECEIVED = "received"
    PARSED = "parsed"
    AUTHORIZED = "authorized"
    INTEGRITY_CHECKED = "integrity_checked"
    NORMALIZED = "normalized"
    VALIDATED = "validated"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


@dataclass(frozen=True)
class Verdict:
    """Outcome of one pipeline run.

    ``reached`` is the last state completed before acceptance or rejection.
    """

    accepted: bool
    reached: PipelineState
    message: str
    status_code: int = 200
    reason: str | None = None
    document: CanonicalDocument | None = None

    @property
    def state(self) -> PipelineState:
        return PipelineState.ACCEPTED if self.accepted else PipelineState.REJECTED

    @classmethod
    def accept(cls, document: CanonicalDocument) -> "Verdict":
        return cls(
            accepted=True,
            reached=PipelineState.VALIDATED,
            message=ACKNOWLEDGEMENT,
            document=document,
        )

    @classmethod
    def reject(cls, reached: PipelineState, error: WebhookRejected) -> "Verdict":
        return cls(
            accepted=False,
            reached=reached,
            message=error.detail,
            status_code=error.status_code,
            reason=error.code,
        )


def run_pipeline(
    request: RawRequest,
    current_ms: int | None = None,
    window_ms: int = DEFAULT_WINDOW_MS,
) -> Verdict:
    """Verify a webhook request and return its verdict.

    Only WebhookRejected is turned into a rejection; any other exception is an
    internal fault and propagates to the HTTP layer.
    """
    state = PipelineState.RECEIVED
    try:
        payload = parse_payload(request.body)
        state = PipelineState.PARSED

        verify_freshness(request.header(TIMESTAMP_HEADER), current_ms, window_ms)
        state = PipelineState.AUTHORIZED

        verify_checksum(request.body_bytes, request.header(CHECKSUM_HEADER))
        state = PipelineState.INTEGRITY_CHECKED

        document = normalize(payload)
        state = PipelineState.NORMALIZED
        logger.debug(f"Normalized webhook document: {document.model_dump(by_alias=True)}")

        validate_payload(payload)
        state = PipelineState.VALIDATED
    except WebhookRejected as e:
        logger.warning(f"Webhook rejected after {state.value}: {e.code} ({e.detail})")
        return Verdict.reject(state, e)

    logger.info(
        f"Webhook accepted: {document.api_json.full_display_name or '<unnamed>'} "
        f"result={document.api_json.result} run_status={document.wfapi_describe.status}"
    )
    return Verdict.accept(document)
