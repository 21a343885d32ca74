"""GuardResult dataclass: outcome of a single guard evaluation."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["GuardResult"]


@dataclass(frozen=True, slots=True)
class GuardResult:
    """Authorized or denied, with an advisory reason when denied.

    Results are produced per call and never cached.

    Attributes:
        allowed: Whether every predicate passed.
        reason: Why access was denied (``None`` when allowed).
        predicate: Name of the first predicate that denied, if any.
    """

    allowed: bool
    reason: str | None = None
    predicate: str | None = None

    @classmethod
    def allow(cls) -> GuardResult:
        return cls(allowed=True)

    @classmethod
    def deny(cls, reason: str, *, predicate: str | None = None) -> GuardResult:
        return cls(allowed=False, reason=reason, predicate=predicate)

    def __bool__(self) -> bool:
        return self.allowed
