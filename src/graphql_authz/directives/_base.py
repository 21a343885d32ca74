"""Directive declarations and usages."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from graphql import (
    DirectiveLocation,
    GraphQLArgument,
    GraphQLDirective,
    GraphQLNonNull,
    specified_scalar_types,
)

from graphql_authz.policy._predicate import Predicate

__all__ = ["DirectiveArgument", "DirectiveDeclaration", "DirectiveUsage"]

# Python types accepted for a literal of each built-in scalar.
_LITERAL_KINDS: dict[str, tuple[type, ...]] = {
    "String": (str,),
    "ID": (str,),
    "Int": (int,),
    "Float": (int, float),
    "Boolean": (bool,),
}


@dataclass(frozen=True, slots=True)
class DirectiveArgument:
    """One argument in a directive's argument schema.

    Attributes:
        name: The argument name, e.g. ``"argumentName"``.
        type_name: A built-in scalar name (``"String"``, ``"ID"``, ...).
        required: Whether the argument is non-null in SDL.
        description: Human-readable description.
    """

    name: str
    type_name: str = "String"
    required: bool = False
    description: str = ""

    def __post_init__(self) -> None:
        if self.type_name not in _LITERAL_KINDS:
            raise ValueError(
                f"Directive argument {self.name!r} must use a built-in scalar type, "
                f"got {self.type_name!r}"
            )

    @property
    def sdl_type(self) -> str:
        return f"{self.type_name}!" if self.required else self.type_name

    def accepts(self, value: Any) -> bool:
        """Whether *value* is a valid literal for this argument."""
        if value is None:
            return not self.required
        if self.type_name in ("Int", "Float") and isinstance(value, bool):
            return False
        return isinstance(value, _LITERAL_KINDS[self.type_name])

    def to_graphql_argument(self) -> GraphQLArgument:
        type_ = specified_scalar_types[self.type_name]
        return GraphQLArgument(
            GraphQLNonNull(type_) if self.required else type_,
            description=self.description or None,
        )


@dataclass(frozen=True, slots=True)
class DirectiveDeclaration:
    """A recognized authorization directive and the predicate behind it.

    Attributes:
        name: Directive name without the ``@``.
        predicate: The check installed on fields carrying this directive.
        arguments: The directive's argument schema, in SDL order.
        locations: Where the directive may appear.
        description: Human-readable description (rendered into SDL).
    """

    name: str
    predicate: Predicate
    arguments: tuple[DirectiveArgument, ...] = ()
    locations: tuple[str, ...] = ("FIELD_DEFINITION",)
    description: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "arguments", tuple(self.arguments))
        object.__setattr__(self, "locations", tuple(self.locations))
        for location in self.locations:
            if location not in DirectiveLocation.__members__:
                raise ValueError(f"Unknown directive location {location!r} for @{self.name}")

    def argument(self, name: str) -> DirectiveArgument | None:
        for arg in self.arguments:
            if arg.name == name:
                return arg
        return None

    def to_sdl(self) -> str:
        """Render the declaration as a single SDL line.

        Example::

            declaration.to_sdl()
            # 'directive @owner(argumentName: String!) on FIELD_DEFINITION'
        """
        args = ""
        if self.arguments:
            args = "(" + ", ".join(f"{a.name}: {a.sdl_type}" for a in self.arguments) + ")"
        line = f"directive @{self.name}{args} on {' | '.join(self.locations)}"
        if self.description:
            line = f'"""{self.description}"""\n{line}'
        return line

    def to_graphql_directive(self) -> GraphQLDirective:
        return GraphQLDirective(
            self.name,
            locations=[DirectiveLocation[location] for location in self.locations],
            args={a.name: a.to_graphql_argument() for a in self.arguments},
            description=self.description or None,
        )

    def validate_usage(self, arguments: Mapping[str, Any]) -> list[str]:
        """Return the problems with a usage's *arguments*; empty if valid."""
        problems: list[str] = []
        for name in arguments:
            if self.argument(name) is None:
                problems.append(f"unknown argument {name!r}")
        for arg in self.arguments:
            value = arguments.get(arg.name)
            if value is None and arg.required:
                problems.append(f"missing required argument {arg.name!r}")
            elif not arg.accepts(value):
                problems.append(f"argument {arg.name!r} must be a {arg.type_name}")
        return problems


@dataclass(frozen=True, slots=True)
class DirectiveUsage:
    """A directive as applied to one field, e.g. ``@owner(argumentName: "id")``.

    Attributes:
        name: Directive name without the ``@``.
        arguments: Literal argument values, read-only.
    """

    name: str
    arguments: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "arguments", MappingProxyType(dict(self.arguments)))

    def __str__(self) -> str:
        if not self.arguments:
            return f"@{self.name}"
        args = ", ".join(f"{k}: {json.dumps(v)}" for k, v in self.arguments.items())
        return f"@{self.name}({args})"
