"""Inbound webhook request as handed over by the HTTP layer."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True)
class RawRequest:
    """Unparsed body plus headers. Header lookup is case-insensitive."""

    body: bytes | str
    headers: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        folded = {name.lower(): value for name, value in self.headers.items()}
        object.__setattr__(self, "headers", MappingProxyType(folded))

    def header(self, name: str) -> str | None:
        return self.headers.get(name.lower())

    @property
    def body_bytes(self) -> bytes:
        if isinstance(self.body, bytes):
            return self.body
        return self.body.encode("utf-8")
