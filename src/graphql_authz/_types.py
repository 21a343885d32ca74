"""Shared protocols and type aliases for graphql-authz."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, Optional, Protocol, Union, runtime_checkable

__all__ = [
    "Arguments",
    "CallerIdentity",
    "DirectiveArguments",
    "IdentityLike",
    "PredicateFn",
    "Resolver",
]


@runtime_checkable
class CallerIdentity(Protocol):
    """Structural type for an authenticated caller.

    Any object with a ``subject`` attribute satisfies this protocol.
    Plain mappings such as ``{"subject": "abc"}`` are accepted as well
    wherever an identity is read; see :data:`IdentityLike`.

    Example::

        @dataclass
        class Principal:
            subject: str
            email: str

        assert isinstance(Principal("abc", "a@example.com"), CallerIdentity)
    """

    @property
    def subject(self) -> str: ...


# An identity as it arrives on the request context: an object, a claims
# mapping, or None when the request is unauthenticated.
IdentityLike = Union[CallerIdentity, Mapping[str, Any], None]

# Coerced field arguments as graphql-core passes them to resolvers.
Arguments = Mapping[str, Any]

# Literal arguments of a directive usage, e.g. {"argumentName": "id"}.
DirectiveArguments = Mapping[str, Any]

# The callable behind a Predicate; receives the resolved identity or None.
PredicateFn = Callable[[Optional[CallerIdentity], Arguments, DirectiveArguments], bool]

# graphql-core resolver signature: resolve(parent, info, **args).
Resolver = Callable[..., Any]
