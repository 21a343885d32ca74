"""Tests for explain/: schema and field access explanations."""

from __future__ import annotations

import json

import pytest
from graphql import GraphQLSchema

from graphql_authz.explain import (
    FieldAccessExplanation,
    SchemaExplanation,
    explain_field_access,
    explain_schema,
)
from tests.conftest import context_for


class TestExplainSchema:
    def test_lists_guarded_fields(self, schema: GraphQLSchema) -> None:
        explanation = explain_schema(schema)
        assert isinstance(explanation, SchemaExplanation)
        assert explanation.guarded_count == 4
        by_coordinate = {f.coordinate: f for f in explanation.fields}
        assert by_coordinate["User.email"].directives == ["@private"]
        assert by_coordinate["Mutation.deleteAccount"].predicates == ["authenticated", "owner"]
        assert by_coordinate["Mutation.updateProfile"].directives == [
            '@owner(argumentName: "id")'
        ]

    def test_counts_object_fields(self, schema: GraphQLSchema) -> None:
        # User: 3, Query: 3, Mutation: 3
        assert explain_schema(schema).object_field_count == 9

    def test_to_dict_is_json_serializable(self, schema: GraphQLSchema) -> None:
        data = explain_schema(schema).to_dict()
        json.dumps(data)
        assert data["guarded_count"] == 4
        assert {"coordinate", "directives", "predicates"} <= set(data["fields"][0])

    def test_str(self, schema: GraphQLSchema) -> None:
        text = str(explain_schema(schema))
        assert text.startswith("Authorization guards: 4 of 9 object field(s)")
        assert "  User.email: @private" in text


class TestExplainFieldAccess:
    def test_allowed(self, schema: GraphQLSchema, calls: list[str]) -> None:
        explanation = explain_field_access(
            schema, "Mutation.updateProfile", context_for("42"), {"id": "42"}
        )
        assert isinstance(explanation, FieldAccessExplanation)
        assert explanation.guarded
        assert explanation.authenticated
        assert explanation.allowed
        assert calls == []

    def test_evaluates_every_predicate(self, schema: GraphQLSchema) -> None:
        explanation = explain_field_access(
            schema, "Mutation.deleteAccount", context_for(None), {"id": "42"}
        )
        assert not explanation.allowed
        assert not explanation.authenticated
        assert [(p.predicate, p.passed) for p in explanation.predicates] == [
            ("authenticated", False),
            ("owner", False),
        ]

    def test_partial_pass(self, schema: GraphQLSchema) -> None:
        explanation = explain_field_access(
            schema, "Mutation.deleteAccount", context_for("7"), {"id": "42"}
        )
        assert [p.passed for p in explanation.predicates] == [True, False]
        assert "[pass] @private via authenticated" in str(explanation)
        assert "DENIED" in str(explanation)

    def test_unguarded_field(self, schema: GraphQLSchema) -> None:
        explanation = explain_field_access(schema, "Query.me", context_for(None))
        assert not explanation.guarded
        assert explanation.allowed
        assert explanation.predicates == []
        assert "(no authorization directives)" in str(explanation)

    def test_missing_arguments_deny(self, schema: GraphQLSchema) -> None:
        explanation = explain_field_access(schema, "Mutation.updateProfile", context_for("42"))
        assert not explanation.allowed

    @pytest.mark.parametrize("coordinate", ["Nope.field", "User.missing", "ProfileInput.ownerId", "User"])
    def test_unknown_coordinate(self, schema: GraphQLSchema, coordinate: str) -> None:
        with pytest.raises(KeyError):
            explain_field_access(schema, coordinate, context_for("42"))

    def test_to_dict(self, schema: GraphQLSchema) -> None:
        data = explain_field_access(
            schema, "User.email", context_for("abc")
        ).to_dict()
        assert data == {
            "coordinate": "User.email",
            "guarded": True,
            "authenticated": True,
            "allowed": True,
            "predicates": [
                {"directive": "@private", "predicate": "authenticated", "passed": True}
            ],
        }
