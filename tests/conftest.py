from __future__ import annotations

import pytest


@pytest.fixture()
def minimal_openapi_document() -> dict[str, object]:
    return {
        "openapi": "3.0.3",
        "info": {"title": "Example", "version": "1.0.0"},
        "paths": {},
    }


@pytest.fixture()
def items_document() -> dict[str, object]:
    return {
        "openapi": "3.0.3",
        "info": {"title": "Items", "version": "1.0.0"},
        "paths": {
            "/items/{id}": {
                "get": {
                    "operationId": "getItem",
                    "parameters": [
                        {"name": "id", "in": "path", "required": True, "schema": {"type": "string"}},
                    ],
                    "responses": {
                        "200": {
                            "description": "ok",
                            "content": {
                                "application/json": {
                                    "schema": {"type": "object", "properties": {"name": {"type": "string"}}},
                                }
                            },
                        }
                    },
                }
            }
        },
    }


@pytest.fixture()
def movies_document() -> dict[str, object]:
    return {
        "openapi": "3.0.3",
        "info": {"title": "Movies", "version": "1.0.0"},
        "components": {
            "schemas": {
                "Movie": {
                    "type": "object",
                    "properties": {
                        "id": {"type": "integer"},
                        "title": {"type": "string"},
                        "tags": {"type": "array", "items": {"type": "string"}},
                    },
                    "required": ["title"],
                },
                "MovieInput": {
                    "type": "object",
                    "properties": {
                        "title": {"type": "string"},
                        "limit": {"type": "integer"},
                    },
                    "required": ["title"],
                },
            }
        },
        "paths": {
            "/movies/": {
                "get": {
                    "operationId": "getMovies",
                    "parameters": [
                        {"name": "limit", "in": "query", "required": False, "schema": {"type": "integer"}},
                    ],
                    "responses": {
                        "200": {
                            "description": "ok",
                            "content": {
                                "application/json": {
                                    "schema": {"type": "array", "items": {"$ref": "#/components/schemas/Movie"}},
                                }
                            },
                        }
                    },
                },
                "post": {
                    "operationId": "createMovie",
                    "requestBody": {
                        "content": {"application/json": {"schema": {"$ref": "#/components/schemas/MovieInput"}}},
                    },
                    "responses": {
                        "200": {
                            "description": "ok",
                            "content": {"application/json": {"schema": {"$ref": "#/components/schemas/Movie"}}},
                        }
                    },
                },
            },
            "/movies/{id}": {
                "delete": {
                    "operationId": "deleteMovie",
                    "parameters": [
                        {"name": "id", "in": "path", "required": True, "schema": {"type": "integer"}},
                    ],
                    "responses": {"204": {"description": "deleted"}},
                },
            },
        },
    }
