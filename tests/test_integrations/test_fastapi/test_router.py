"""Tests for the FastAPI GraphQL router."""

from __future__ import annotations

import json

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from graphql import GraphQLSchema

from graphql_authz.config._config import AuthzConfig, _reset_global_config, configure
from graphql_authz.directives._catalog import create_default_catalog
from graphql_authz.integrations.fastapi import create_graphql_router
from graphql_authz.transform._build import build_schema
from tests.conftest import TYPE_DEFS, make_resolvers


def _user(subject: str) -> dict[str, str]:
    return {"user": json.dumps({"subject": subject})}


@pytest.fixture()
def client(schema: GraphQLSchema) -> TestClient:
    app = FastAPI()
    app.include_router(create_graphql_router(schema))
    return TestClient(app)


class TestGraphQLEndpoint:
    def test_private_field_with_identity(self, client: TestClient) -> None:
        response = client.post(
            "/graphql",
            json={"query": '{ user(id: "42") { name email } }'},
            headers=_user("abc"),
        )
        assert response.status_code == 200
        assert response.json() == {
            "data": {"user": {"name": "Ada", "email": "ada@example.com"}}
        }

    def test_private_field_without_identity(self, client: TestClient) -> None:
        response = client.post("/graphql", json={"query": '{ user(id: "42") { name email } }'})
        assert response.status_code == 200
        body = response.json()
        assert body["data"] == {"user": {"name": "Ada", "email": None}}
        (error,) = body["errors"]
        assert error["message"] == "Not authorized!"
        assert error["extensions"] == {"code": "NOT_AUTHORIZED"}
        assert error["path"] == ["user", "email"]

    def test_owner_mutation_with_variables(self, client: TestClient) -> None:
        payload = {
            "query": "mutation Update($id: ID!) { updateProfile(id: $id) { id } }",
            "variables": {"id": "42"},
            "operationName": "Update",
        }
        allowed = client.post("/graphql", json=payload, headers=_user("42"))
        denied = client.post("/graphql", json=payload, headers=_user("99"))
        assert allowed.json() == {"data": {"updateProfile": {"id": "42"}}}
        assert denied.json()["data"] == {"updateProfile": None}
        assert denied.json()["errors"][0]["extensions"]["code"] == "NOT_AUTHORIZED"

    def test_custom_path(self, schema: GraphQLSchema) -> None:
        app = FastAPI()
        app.include_router(create_graphql_router(schema, path="/api/gql"))
        response = TestClient(app).post("/api/gql", json={"query": "{ publicMessage }"})
        assert response.json() == {"data": {"publicMessage": "hello"}}

    def test_custom_context_getter(self, schema: GraphQLSchema) -> None:
        def context_getter() -> dict[str, object]:
            return {"user": {"subject": "fixed"}}

        app = FastAPI()
        app.include_router(create_graphql_router(schema, context_getter=context_getter))
        response = TestClient(app).post(
            "/graphql", json={"query": '{ user(id: "7") { email } }'}
        )
        assert response.json() == {"data": {"user": {"email": "grace@example.com"}}}


class TestBadRequests:
    @pytest.mark.parametrize(
        "body",
        [
            pytest.param([], id="not-an-object"),
            pytest.param({}, id="no-query"),
            pytest.param({"query": 1}, id="query-not-string"),
            pytest.param({"query": "{ publicMessage }", "variables": []}, id="bad-variables"),
            pytest.param({"query": "{ publicMessage }", "operationName": 1}, id="bad-op-name"),
        ],
    )
    def test_invalid_body(self, client: TestClient, body: object) -> None:
        response = client.post("/graphql", json=body)
        assert response.status_code == 400
        assert "message" in response.json()["errors"][0]

    def test_invalid_json(self, client: TestClient) -> None:
        response = client.post(
            "/graphql", content=b"{not json", headers={"content-type": "application/json"}
        )
        assert response.status_code == 400

    def test_query_syntax_error_is_a_graphql_error(self, client: TestClient) -> None:
        response = client.post("/graphql", json={"query": "{ publicMessage"})
        assert response.status_code == 200
        body = response.json()
        assert body["data"] is None
        assert body["errors"]


class TestRouterConfig:
    QUERY = {"query": '{ user(id: "42") { email } }'}
    ALLOWED = {"data": {"user": {"email": "ada@example.com"}}}

    def setup_method(self) -> None:
        _reset_global_config()

    def teardown_method(self) -> None:
        _reset_global_config()

    def _client(self, schema: GraphQLSchema, **kwargs: object) -> TestClient:
        app = FastAPI()
        app.include_router(create_graphql_router(schema, **kwargs))  # type: ignore[arg-type]
        return TestClient(app)

    def test_uses_config_the_schema_was_built_with(self) -> None:
        viewer_schema = build_schema(
            TYPE_DEFS,
            make_resolvers([]),
            catalog=create_default_catalog(),
            config=AuthzConfig(identity_key="viewer", identity_header="x-identity"),
        )
        response = self._client(viewer_schema).post(
            "/graphql", json=self.QUERY, headers={"x-identity": json.dumps({"subject": "a"})}
        )
        assert response.json() == self.ALLOWED

    def test_later_configure_does_not_desync(self, schema: GraphQLSchema) -> None:
        client = self._client(schema)
        configure(identity_key="viewer", identity_header="x-identity")
        response = client.post("/graphql", json=self.QUERY, headers=_user("abc"))
        assert response.json() == self.ALLOWED

    def test_explicit_config(self, schema: GraphQLSchema) -> None:
        client = self._client(schema, config=AuthzConfig(identity_header="x-identity"))
        response = client.post(
            "/graphql", json=self.QUERY, headers={"x-identity": json.dumps({"subject": "a"})}
        )
        assert response.json() == self.ALLOWED
        assert client.post("/graphql", json=self.QUERY, headers=_user("a")).json()["errors"]

    def test_global_config_when_nothing_is_guarded(self) -> None:
        plain = build_schema(
            "type Query { hello: String }",
            {"Query": {"hello": lambda parent, info: info.context["viewer"]["subject"]}},
            config=AuthzConfig(),
        )
        configure(identity_key="viewer")
        response = self._client(plain).post(
            "/graphql", json={"query": "{ hello }"}, headers=_user("a")
        )
        assert response.json() == {"data": {"hello": "a"}}
