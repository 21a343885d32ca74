"""@directive decorator: register a predicate as a new authorization directive."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TypeVar

from graphql_authz._types import PredicateFn
from graphql_authz.directives._base import DirectiveArgument, DirectiveDeclaration
from graphql_authz.directives._catalog import DirectiveCatalog, get_default_catalog
from graphql_authz.policy._predicate import Predicate

__all__ = ["directive"]

F = TypeVar("F", bound=PredicateFn)


def directive(
    name: str,
    *,
    arguments: Sequence[DirectiveArgument] = (),
    locations: Sequence[str] = ("FIELD_DEFINITION",),
    catalog: DirectiveCatalog | None = None,
) -> Callable[[F], F]:
    """Decorator that registers a predicate function as directive ``@name``.

    The decorated function receives ``(identity, arguments, directive_args)``
    and returns ``True`` to grant access. Its docstring becomes the
    directive's SDL description. Schemas built afterwards recognize the
    directive without any change to the transformer.

    Args:
        name: Directive name without the ``@``.
        arguments: The directive's argument schema.
        locations: Where the directive may appear.
        catalog: Optional custom catalog. Defaults to the global catalog.

    Returns:
        A decorator that registers the function and returns it unchanged.

    Example::

        @directive("role", arguments=[DirectiveArgument("name", required=True)])
        def has_role(identity, arguments, directive_args) -> bool:
            \"\"\"Caller holds the named role.\"\"\"
            roles = getattr(identity, "claims", {}).get("roles", [])
            return directive_args["name"] in roles
    """

    def decorator(fn: F) -> F:
        target = catalog if catalog is not None else get_default_catalog()
        target.register(
            DirectiveDeclaration(
                name=name,
                predicate=Predicate(fn, name=fn.__name__),
                arguments=tuple(arguments),
                locations=tuple(locations),
                description=(fn.__doc__ or "").strip(),
            )
        )
        return fn

    return decorator
