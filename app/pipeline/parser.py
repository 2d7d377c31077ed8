"""Strict JSON decoding of webhook bodies."""

import json
from typing import Any

from app.errors import MalformedPayload


def _reject_constant(name: str):
    # json.loads accepts NaN/Infinity by default; they are not JSON.
    raise ValueError(f"Non-standard JSON constant: {name}")


def parse_payload(body: bytes | str) -> dict[str, Any]:
    """Decode a raw body into a JSON object.

    Surrounding whitespace is ignored. Empty input, invalid UTF-8, syntax
    errors and non-object roots all raise MalformedPayload.
    """
    if isinstance(body, bytes):
        try:
            body = body.decode("utf-8")
        except UnicodeDecodeError:
            raise MalformedPayload()

    text = body.strip()
    if not text:
        raise MalformedPayload()

    try:
        document = json.loads(text, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        raise MalformedPayload()

    if not isinstance(document, dict):
        raise MalformedPayload()
    return document
