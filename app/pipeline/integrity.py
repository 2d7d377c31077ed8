"""SHA-256 body checksum (integrity only, no shared secret)."""

import hashlib
import hmac

from app.errors import ChecksumMismatch

CHECKSUM_HEADER = "X-Payload-Checksum"


def compute_checksum(body: bytes | str) -> str:
    if isinstance(body, str):
        body = body.encode("utf-8")
    return hashlib.sha256(body).hexdigest()


def verify_checksum(body: bytes | str, supplied: str | None) -> None:
    """Raise ChecksumMismatch unless ``supplied`` is the lowercase hex digest of ``body``."""
    if not supplied:
        raise ChecksumMismatch("Missing X-Payload-Checksum header")

    expected = compute_checksum(body)
    if not hmac.compare_digest(expected.encode("ascii"), supplied.encode("utf-8")):
        raise ChecksumMismatch()
