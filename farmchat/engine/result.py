from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")

@dataclass(frozen=True)
class Lookup(Generic[T]):
    """Outcome of a best-effort enrichment call.

    ``value`` is always usable. ``fallback`` is True when the upstream call
    failed and ``value`` holds the stage's fixed default; ``reason`` then
    says why.
    """
    value: T
    fallback: bool = False
    reason: Optional[str] = None

    @classmethod
    def ok(cls, value: T) -> "Lookup[T]":
        return cls(value=value)

    @classmethod
    def degraded(cls, value: T, reason: str) -> "Lookup[T]":
        return cls(value=value, fallback=True, reason=reason)
