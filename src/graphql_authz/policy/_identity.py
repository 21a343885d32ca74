"""Caller identity resolution from the request context."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from graphql_authz.config._config import AuthzConfig

__all__ = ["Identity", "identity_from_claims", "resolve_identity", "subject_of"]

_MISSING = object()


@dataclass(frozen=True, slots=True)
class Identity:
    """A resolved caller identity with a non-empty subject.

    Attributes:
        subject: The authenticated principal's identifier.
        claims: The raw identity value the subject was read from.
    """

    subject: str
    claims: Any = field(default=None, repr=False, compare=False)


def _read(source: Any, key: str) -> Any:
    if isinstance(source, Mapping):
        return source.get(key, _MISSING)
    return getattr(source, key, _MISSING)


def subject_of(identity: Any, claims: Sequence[str] = ("subject",)) -> str | None:
    """Return the subject of *identity*, or ``None`` if it has no valid one.

    The first claim name that is present decides: when it holds an empty
    or non-string value the identity has no subject, even if a later
    claim would have carried one.

    Example::

        subject_of({"sub": "abc"}, ("subject", "sub"))  # "abc"
        subject_of({"subject": ""}, ("subject", "sub"))  # None
    """
    if identity is None:
        return None
    for claim in claims:
        value = _read(identity, claim)
        if value is _MISSING or value is None:
            continue
        if isinstance(value, str) and value:
            return value
        return None
    return None


def identity_from_claims(raw: Any, config: AuthzConfig) -> Identity | None:
    """Build an :class:`Identity` from a raw identity value, if it has a subject."""
    if isinstance(raw, Identity):
        return raw if raw.subject else None
    subject = subject_of(raw, config.subject_claims)
    if subject is None:
        return None
    return Identity(subject=subject, claims=raw)


def resolve_identity(context: Any, config: AuthzConfig) -> Identity | None:
    """Read the caller identity from a request context.

    Mapping contexts are read by key, any other object by attribute, using
    ``config.identity_key``. An absent context, an absent identity or one
    without a usable subject all resolve to ``None``.

    Example::

        resolve_identity({"user": {"subject": "abc"}}, AuthzConfig())
        # Identity(subject='abc')
    """
    if context is None:
        return None
    raw = _read(context, config.identity_key)
    if raw is _MISSING:
        return None
    return identity_from_claims(raw, config)
