"""Webhook rejection taxonomy and shared error-parsing utilities."""

import json
import re


class WebhookRejected(Exception):
    """A webhook failed verification. Always a client error, never retried."""

    code = "REJECTED"
    status_code = 400

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class MalformedPayload(WebhookRejected):
    code = "MALFORMED_PAYLOAD"

    def __init__(self, detail: str = "Invalid JSON payload"):
        super().__init__(detail)


class MissingToken(WebhookRejected):
    code = "MISSING_TOKEN"

    def __init__(self, detail: str = "Missing X-Encrypted-Timestamp header"):
        super().__init__(detail)


class InvalidToken(WebhookRejected):
    code = "INVALID_TOKEN"

    def __init__(self, detail: str = "Invalid timestamp token"):
        super().__init__(detail)


class TokenExpired(WebhookRejected):
    code = "TOKEN_EXPIRED"

    def __init__(self, detail: str = "Timestamp token expired"):
        super().__init__(detail)


class ChecksumMismatch(WebhookRejected):
    code = "CHECKSUM_MISMATCH"

    def __init__(self, detail: str = "Payload checksum mismatch"):
        super().__init__(detail)


class SchemaViolation(WebhookRejected):
    code = "SCHEMA_VIOLATION"

    def __init__(self, field: str, constraint: str):
        super().__init__(f"Schema violation at {field}: {constraint}")
        self.field = field
        self.constraint = constraint


_HTML_TITLE = re.compile(r"<title>(.*?)</title>", re.IGNORECASE | re.DOTALL)


def parse_jenkins_error(response_text: str) -> str:
    """Extract a readable message from a Jenkins error response.

    Jenkins answers API errors either with JSON ({"message": "..."}) or with an
    HTML error page. Returns the message or page title when found, raw text otherwise.
    """
    try:
        body = json.loads(response_text)
        if isinstance(body, dict) and body.get("message"):
            return str(body["message"])
    except ValueError:
        pass
    match = _HTML_TITLE.search(response_text)
    if match:
        return match.group(1).strip()
    return response_text
