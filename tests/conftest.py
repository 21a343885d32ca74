"""Shared test fixtures for graphql-authz tests."""

from __future__ import annotations

from typing import Any

import pytest
from graphql import GraphQLResolveInfo, GraphQLSchema

from graphql_authz.config._config import AuthzConfig
from graphql_authz.directives._catalog import create_default_catalog
from graphql_authz.transform._build import build_schema

# ---------------------------------------------------------------------------
# Test schema
# ---------------------------------------------------------------------------

TYPE_DEFS = """
type User {
  id: ID!
  name: String
  email: String @private
}

input ProfileInput {
  ownerId: ID!
  name: String
}

type Query {
  me: User
  user(id: ID!): User
  publicMessage: String
}

type Mutation {
  updateProfile(id: ID!, name: String): User @owner(argumentName: "id")
  updateProfileInput(input: ProfileInput!): User @owner(argumentName: "input.ownerId")
  deleteAccount(id: ID!): Boolean @private @owner(argumentName: "id")
}
"""

USERS: dict[str, dict[str, Any]] = {
    "42": {"id": "42", "name": "Ada", "email": "ada@example.com"},
    "7": {"id": "7", "name": "Grace", "email": "grace@example.com"},
}


def make_resolvers(calls: list[str]) -> dict[str, dict[str, Any]]:
    """Resolvers for ``TYPE_DEFS`` that record each call in *calls*."""

    def _subject(info: GraphQLResolveInfo) -> str | None:
        user = (info.context or {}).get("user")
        return user.get("subject") if isinstance(user, dict) else None

    def me(parent: Any, info: GraphQLResolveInfo) -> dict[str, Any] | None:
        calls.append("Query.me")
        subject = _subject(info)
        return USERS.get(subject) if subject else None

    def user(parent: Any, info: GraphQLResolveInfo, id: str) -> dict[str, Any] | None:
        calls.append("Query.user")
        return USERS.get(id)

    def public_message(parent: Any, info: GraphQLResolveInfo) -> str:
        calls.append("Query.publicMessage")
        return "hello"

    def update_profile(
        parent: Any, info: GraphQLResolveInfo, id: str, name: str | None = None
    ) -> dict[str, Any]:
        calls.append("Mutation.updateProfile")
        return {**USERS[id], "name": name or USERS[id]["name"]}

    def update_profile_input(
        parent: Any, info: GraphQLResolveInfo, input: dict[str, Any]
    ) -> dict[str, Any]:
        calls.append("Mutation.updateProfileInput")
        owner_id = input["ownerId"]
        return {**USERS[owner_id], "name": input.get("name") or USERS[owner_id]["name"]}

    def delete_account(parent: Any, info: GraphQLResolveInfo, id: str) -> bool:
        calls.append("Mutation.deleteAccount")
        return True

    return {
        "Query": {"me": me, "user": user, "publicMessage": public_message},
        "Mutation": {
            "updateProfile": update_profile,
            "updateProfileInput": update_profile_input,
            "deleteAccount": delete_account,
        },
    }


def context_for(subject: str | None) -> dict[str, Any]:
    """Request context as the transport layer builds it."""
    return {"user": {"subject": subject} if subject is not None else None}


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def calls() -> list[str]:
    """Names of the resolvers invoked during a test, in call order."""
    return []


@pytest.fixture()
def schema(calls: list[str]) -> GraphQLSchema:
    """The guarded test schema, built with a fresh catalog and default config."""
    return build_schema(
        TYPE_DEFS,
        make_resolvers(calls),
        catalog=create_default_catalog(),
        config=AuthzConfig(),
    )
