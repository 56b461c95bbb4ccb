from __future__ import annotations

from typing import cast

import pytest

from frontgen.errors import NoSuccessResponseError, ResolutionError
from frontgen.ir import OperationIR, extract_operations, require_success_responses
from frontgen.openapi import OpenAPIDocument, OperationObject


class TestExtractOperations:
    def test_flattens_paths_in_document_order(self) -> None:
        document = {
            "openapi": "3.0.3",
            "paths": {
                "/b": {
                    "post": {"operationId": "createB", "responses": {"200": {"description": "ok"}}},
                    "get": {"operationId": "getB", "responses": {"200": {"description": "ok"}}},
                },
                "/a": {
                    "get": {"operationId": "getA", "responses": {"200": {"description": "ok"}}},
                },
            },
        }
        operations = extract_operations(cast(OpenAPIDocument, document))
        assert [(op.path, op.method, op.operation_id) for op in operations] == [
            ("/b", "post", "createB"),
            ("/b", "get", "getB"),
            ("/a", "get", "getA"),
        ]

    def test_uses_injected_operation_id(self) -> None:
        calls: list[tuple[str, str]] = []

        def operation_id(path: str, method: str, operation: OperationObject) -> str:
            calls.append((path, method))
            return f"op{len(calls)}"

        document = {
            "openapi": "3.0.3",
            "paths": {"/x": {"get": {"responses": {}}, "put": {"responses": {}}}},
        }
        operations = extract_operations(cast(OpenAPIDocument, document), operation_id)
        assert [op.operation_id for op in operations] == ["op1", "op2"]
        assert calls == [("/x", "get"), ("/x", "put")]

    def test_skips_non_method_keys(self) -> None:
        document = {
            "openapi": "3.0.3",
            "paths": {
                "/x": {
                    "summary": "things",
                    "parameters": [],
                    "get": {"responses": {"200": {"description": "ok"}}},
                }
            },
        }
        operations = extract_operations(cast(OpenAPIDocument, document))
        assert len(operations) == 1
        assert operations[0].operation_id == "getX"

    def test_merges_parameters_and_overrides(self) -> None:
        document = {
            "openapi": "3.0.3",
            "paths": {
                "/items/{id}": {
                    "parameters": [
                        {"name": "id", "in": "path", "required": True},
                        {"name": "q", "in": "query", "required": False},
                    ],
                    "get": {
                        "parameters": [{"name": "q", "in": "query", "required": True}],
                        "responses": {"200": {"description": "ok"}},
                    },
                }
            },
        }
        operation = extract_operations(cast(OpenAPIDocument, document))[0]
        assert [(param.name, param.required) for param in operation.parameters] == [("id", True), ("q", True)]

    def test_missing_required_flag_is_none(self) -> None:
        document = {
            "openapi": "3.0.3",
            "paths": {"/x": {"get": {"parameters": [{"name": "q", "in": "query"}], "responses": {}}}},
        }
        operation = extract_operations(cast(OpenAPIDocument, document))[0]
        assert operation.parameters[0].required is None

    def test_resolves_parameter_refs(self) -> None:
        document = {
            "openapi": "3.0.3",
            "components": {"parameters": {"Limit": {"name": "limit", "in": "query", "schema": {"type": "integer"}}}},
            "paths": {"/x": {"get": {"parameters": [{"$ref": "#/components/parameters/Limit"}], "responses": {}}}},
        }
        operation = extract_operations(cast(OpenAPIDocument, document))[0]
        assert operation.parameters[0].name == "limit"
        assert operation.parameters[0].schema == {"type": "integer"}

    def test_dangling_parameter_ref_raises(self) -> None:
        document = {
            "openapi": "3.0.3",
            "paths": {"/x": {"get": {"parameters": [{"$ref": "#/components/parameters/Nope"}], "responses": {}}}},
        }
        with pytest.raises(ResolutionError):
            extract_operations(cast(OpenAPIDocument, document))

    def test_normalizes_status_keys_to_strings(self) -> None:
        document = {
            "openapi": "3.0.3",
            "paths": {"/x": {"get": {"responses": {200: {"description": "ok"}, 404: {"description": "missing"}}}}},
        }
        operation = extract_operations(cast(OpenAPIDocument, document))[0]
        assert list(operation.responses) == ["200", "404"]
        assert operation.success_statuses == ["200"]

    def test_empty_paths(self, minimal_openapi_document: dict[str, object]) -> None:
        assert extract_operations(cast(OpenAPIDocument, minimal_openapi_document)) == []


class TestRequireSuccessResponses:
    def test_raises_for_operation_without_2xx(self) -> None:
        operations = [
            OperationIR(
                path="/x",
                method="get",
                operation_id="getX",
                parameters=[],
                request_body=None,
                responses={"404": {"description": "missing"}},
            )
        ]
        with pytest.raises(NoSuccessResponseError, match="getX"):
            require_success_responses(operations)
