"""
Jenkins webhook verification pipeline

Parse, authorize, integrity-check, normalize and validate inbound webhooks.
"""

from .canonical import CanonicalDocument
from .freshness import ObfuscatedTimestamp, encode_timestamp, verify_freshness
from .integrity import compute_checksum, verify_checksum
from .normalizer import normalize
from .orchestrator import PipelineState, Verdict, run_pipeline
from .parser import parse_payload
from .request import RawRequest
from .schemas import validate_payload

__all__ = [
    "CanonicalDocument",
    "ObfuscatedTimestamp",
    "PipelineState",
    "RawRequest",
    "Verdict",
    "compute_checksum",
    "encode_timestamp",
    "normalize",
    "parse_payload",
    "run_pipeline",
    "validate_payload",
    "verify_checksum",
    "verify_freshness",
]
