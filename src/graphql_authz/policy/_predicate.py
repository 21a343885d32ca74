"""Composable predicates backing authorization directives."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from graphql_authz._types import Arguments, CallerIdentity, DirectiveArguments, PredicateFn
from graphql_authz.policy._arguments import MISSING, resolve_argument_path

__all__ = [
    "Predicate",
    "always_allow",
    "always_deny",
    "authenticated",
    "owner",
    "predicate",
]

_EMPTY: Mapping[str, Any] = {}


class Predicate:
    """A composable authorization predicate.

    Wraps a callable ``fn(identity, arguments, directive_args) -> bool``.
    ``identity`` is the resolved caller identity or ``None``;
    ``arguments`` are the field's coerced arguments; ``directive_args``
    are the literal arguments of the directive usage. Only a return value
    of exactly ``True`` grants access. Supports ``&`` (AND) composition,
    which short-circuits on the first denial.

    Example::

        is_staff = Predicate(lambda identity, args, dargs: identity.subject.startswith("staff|"))
        guard = authenticated & is_staff
        guard.evaluate(identity, {}, {})  # bool
    """

    def __init__(self, fn: PredicateFn, *, name: str = "") -> None:
        self._fn = fn
        self._name = name or getattr(fn, "__name__", "<anonymous>")

    def __call__(
        self,
        identity: CallerIdentity | None,
        arguments: Arguments | None = None,
        directive_args: DirectiveArguments | None = None,
    ) -> bool:
        return self.evaluate(identity, arguments, directive_args)

    def evaluate(
        self,
        identity: CallerIdentity | None,
        arguments: Arguments | None = None,
        directive_args: DirectiveArguments | None = None,
    ) -> bool:
        """Return ``True`` only if the wrapped callable returned ``True``."""
        outcome = self._fn(
            identity,
            arguments if arguments is not None else _EMPTY,
            directive_args if directive_args is not None else _EMPTY,
        )
        return outcome is True

    def __and__(self, other: Predicate) -> Predicate:
        def _and(
            identity: CallerIdentity | None,
            arguments: Arguments,
            directive_args: DirectiveArguments,
        ) -> bool:
            return self.evaluate(identity, arguments, directive_args) and other.evaluate(
                identity, arguments, directive_args
            )

        return Predicate(_and, name=f"({self._name} & {other._name})")

    @property
    def name(self) -> str:
        """The human-readable name of this predicate."""
        return self._name

    def __repr__(self) -> str:
        return f"Predicate({self._name!r})"


def predicate(fn: PredicateFn) -> Predicate:
    """Decorator/factory that creates a Predicate from a callable.

    Example::

        @predicate
        def is_staff(identity, arguments, directive_args) -> bool:
            return identity is not None and identity.subject.startswith("staff|")
    """
    return Predicate(fn, name=getattr(fn, "__name__", "<lambda>"))


def _subject(identity: CallerIdentity | None) -> str | None:
    subject = getattr(identity, "subject", None) if identity is not None else None
    if isinstance(subject, str) and subject:
        return subject
    return None


# Built-in predicates


def _authenticated(
    identity: CallerIdentity | None,
    arguments: Arguments,
    directive_args: DirectiveArguments,
) -> bool:
    return _subject(identity) is not None


def _owner(
    identity: CallerIdentity | None,
    arguments: Arguments,
    directive_args: DirectiveArguments,
) -> bool:
    subject = _subject(identity)
    if subject is None:
        return False
    path = directive_args.get("argumentName")
    if not isinstance(path, str) or not path:
        return False
    value = resolve_argument_path(arguments, path)
    if value is MISSING or value is None:
        return False
    return str(value) == subject


def _always_allow(
    identity: CallerIdentity | None,
    arguments: Arguments,
    directive_args: DirectiveArguments,
) -> bool:
    return True


def _always_deny(
    identity: CallerIdentity | None,
    arguments: Arguments,
    directive_args: DirectiveArguments,
) -> bool:
    return False


authenticated: Predicate = Predicate(_authenticated, name="authenticated")
owner: Predicate = Predicate(_owner, name="owner")
always_allow: Predicate = Predicate(_always_allow, name="always_allow")
always_deny: Predicate = Predicate(_always_deny, name="always_deny")
