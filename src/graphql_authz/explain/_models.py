"""Data models for explain/dry-run output."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

__all__ = [
    "FieldAccessExplanation",
    "GuardedFieldExplanation",
    "PredicateEvaluation",
    "SchemaExplanation",
]


@dataclass(frozen=True, slots=True)
class GuardedFieldExplanation:
    """One guarded field and what protects it.

    Attributes:
        coordinate: Schema coordinate, e.g. ``"User.email"``.
        directives: The directive usages, rendered as SDL.
        predicates: Names of the bound predicates, in evaluation order.
    """

    coordinate: str
    directives: list[str]
    predicates: list[str]

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable dictionary."""
        return {
            "coordinate": self.coordinate,
            "directives": list(self.directives),
            "predicates": list(self.predicates),
        }


@dataclass(frozen=True, slots=True)
class SchemaExplanation:
    """Every guard installed on a schema.

    Attributes:
        object_field_count: Number of object type fields walked.
        fields: The guarded fields, in type map order.
    """

    object_field_count: int
    fields: list[GuardedFieldExplanation]

    @property
    def guarded_count(self) -> int:
        return len(self.fields)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable dictionary."""
        return {
            "object_field_count": self.object_field_count,
            "guarded_count": self.guarded_count,
            "fields": [f.to_dict() for f in self.fields],
        }

    def __str__(self) -> str:
        """Return a human-readable multi-line summary."""
        lines = [
            f"Authorization guards: {self.guarded_count} of "
            f"{self.object_field_count} object field(s)"
        ]
        for f in self.fields:
            lines.append(f"  {f.coordinate}: {' '.join(f.directives)}")
        return "\n".join(lines)


@dataclass(frozen=True, slots=True)
class PredicateEvaluation:
    """Outcome of one predicate, evaluated on its own.

    Attributes:
        directive: The directive usage, rendered as SDL.
        predicate: The predicate name.
        passed: Whether the predicate granted access.
    """

    directive: str
    predicate: str
    passed: bool

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable dictionary."""
        return {"directive": self.directive, "predicate": self.predicate, "passed": self.passed}


@dataclass(frozen=True, slots=True)
class FieldAccessExplanation:
    """Why a caller can or cannot resolve one field.

    Attributes:
        coordinate: Schema coordinate, e.g. ``"Mutation.updateProfile"``.
        guarded: False if the field carries no authorization directive.
        authenticated: Whether the context carried a usable identity.
        allowed: The overall verdict (all predicates passed).
        predicates: Per-predicate outcomes; every predicate is evaluated.
    """

    coordinate: str
    guarded: bool
    authenticated: bool
    allowed: bool
    predicates: list[PredicateEvaluation]

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable dictionary."""
        return {
            "coordinate": self.coordinate,
            "guarded": self.guarded,
            "authenticated": self.authenticated,
            "allowed": self.allowed,
            "predicates": [p.to_dict() for p in self.predicates],
        }

    def __str__(self) -> str:
        verdict = "ALLOWED" if self.allowed else "DENIED"
        lines = [f"{self.coordinate}: {verdict}"]
        if not self.guarded:
            lines.append("  (no authorization directives)")
        for p in self.predicates:
            mark = "pass" if p.passed else "deny"
            lines.append(f"  [{mark}] {p.directive} via {p.predicate}")
        return "\n".join(lines)
