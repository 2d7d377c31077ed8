"""Freshness check for the X-Encrypted-Timestamp header.

Despite the header name, the value is not encrypted: it is the decimal
millisecond timestamp with its digits written in reverse order. A request is
authorized while ``now < timestamp + window``. Timestamps in the future pass
regardless of how far ahead they are.
"""

import time
from dataclasses import dataclass

from app.errors import InvalidToken, MissingToken, TokenExpired

TIMESTAMP_HEADER = "X-Encrypted-Timestamp"
DEFAULT_WINDOW_MS = 600_000


def now_ms() -> int:
    return int(time.time() * 1000)


@dataclass(frozen=True)
class ObfuscatedTimestamp:
    """A digit-reversed millisecond timestamp."""

    token: str

    @classmethod
    def encode(cls, timestamp_ms: int) -> "ObfuscatedTimestamp":
        return cls(str(timestamp_ms)[::-1])

    def decode(self) -> int:
        digits = self.token[::-1]
        # str.isdigit() also admits non-ASCII digits such as "²"
        if not digits or not digits.isascii() or not digits.isdigit():
            raise InvalidToken()
        try:
            return int(digits)
        except ValueError:
            # longer than sys.get_int_max_str_digits()
            raise InvalidToken()

    def is_fresh(self, current_ms: int, window_ms: int = DEFAULT_WINDOW_MS) -> bool:
        return current_ms < self.decode() + window_ms


def encode_timestamp(timestamp_ms: int) -> str:
    """Header value a sender attaches for ``timestamp_ms``."""
    return ObfuscatedTimestamp.encode(timestamp_ms).token


def verify_freshness(
    token: str | None,
    current_ms: int | None = None,
    window_ms: int = DEFAULT_WINDOW_MS,
) -> int:
    """Validate a header value and return the recovered timestamp."""
    if not token:
        raise MissingToken()

    stamp = ObfuscatedTimestamp(token)
    if current_ms is None:
        current_ms = now_ms()
    if not stamp.is_fresh(current_ms, window_ms):
        raise TokenExpired()
    return stamp.decode()
