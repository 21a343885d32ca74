"""DirectiveCatalog: the authorization directives a schema may use."""

from __future__ import annotations

from collections.abc import Iterator

from graphql import GraphQLDirective

from graphql_authz.directives._base import DirectiveArgument, DirectiveDeclaration
from graphql_authz.policy._predicate import authenticated, owner

__all__ = [
    "DirectiveCatalog",
    "OWNER",
    "PRIVATE",
    "create_default_catalog",
    "get_default_catalog",
]

PRIVATE = DirectiveDeclaration(
    name="private",
    predicate=authenticated,
)

OWNER = DirectiveDeclaration(
    name="owner",
    predicate=owner,
    arguments=(DirectiveArgument("argumentName", "String", required=True),),
)


class DirectiveCatalog:
    """Ordered registry of recognized authorization directives.

    Each entry binds a directive name and argument schema to the predicate
    the transformer installs for it. Append-only during startup; read-only
    once a schema has been transformed.

    Example::

        catalog = DirectiveCatalog()
        catalog.register(DirectiveDeclaration(name="staff", predicate=is_staff))
        print(catalog.type_defs())
    """

    def __init__(self, declarations: tuple[DirectiveDeclaration, ...] = ()) -> None:
        self._declarations: dict[str, DirectiveDeclaration] = {}
        for declaration in declarations:
            self.register(declaration)

    def register(self, declaration: DirectiveDeclaration) -> None:
        """Add a directive declaration.

        Args:
            declaration: The declaration to add.

        Raises:
            ValueError: If a directive with the same name is already registered.

        Example::

            catalog.register(DirectiveDeclaration(name="staff", predicate=is_staff))
        """
        if declaration.name in self._declarations:
            raise ValueError(f"Directive @{declaration.name} is already registered")
        self._declarations[declaration.name] = declaration

    def declarations(self) -> tuple[DirectiveDeclaration, ...]:
        """Return all declarations in registration order."""
        return tuple(self._declarations.values())

    def lookup(self, name: str) -> DirectiveDeclaration | None:
        """Return the declaration named *name*, or ``None``."""
        return self._declarations.get(name)

    def names(self) -> tuple[str, ...]:
        return tuple(self._declarations)

    def type_defs(self) -> str:
        """Return the SDL declaring every directive, one per line.

        Merge this into the service's own type definitions before
        compiling the schema.

        Example::

            get_default_catalog().type_defs()
            # directive @private on FIELD_DEFINITION
            # directive @owner(argumentName: String!) on FIELD_DEFINITION
        """
        return "\n".join(d.to_sdl() for d in self._declarations.values()) + "\n"

    def graphql_directives(self) -> tuple[GraphQLDirective, ...]:
        """Return ``GraphQLDirective`` objects for programmatically built schemas."""
        return tuple(d.to_graphql_directive() for d in self._declarations.values())

    def copy(self) -> DirectiveCatalog:
        return DirectiveCatalog(self.declarations())

    def clear(self) -> None:
        """Remove all declarations.

        Primarily useful in test teardown.
        """
        self._declarations.clear()

    def __contains__(self, name: object) -> bool:
        return name in self._declarations

    def __iter__(self) -> Iterator[DirectiveDeclaration]:
        return iter(self.declarations())

    def __len__(self) -> int:
        return len(self._declarations)

    def __repr__(self) -> str:
        return f"DirectiveCatalog({list(self._declarations)!r})"


def create_default_catalog() -> DirectiveCatalog:
    """Return a new catalog holding the built-in ``private`` and ``owner`` directives."""
    return DirectiveCatalog((PRIVATE, OWNER))


# Module-level default catalog (singleton).
_default_catalog = create_default_catalog()


def get_default_catalog() -> DirectiveCatalog:
    """Return the global default (singleton) directive catalog.

    This is the catalog used by ``transform_schema``, ``build_schema`` and
    ``@directive`` when no explicit catalog is provided.
    """
    return _default_catalog
