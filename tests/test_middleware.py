from __future__ import annotations

import logging
import uuid

import pytest
from fastapi import status
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fastapi.testclient import TestClient


class TestCorrelationIdMiddleware:
    """Test correlation ID middleware functionality."""

    def test_correlation_id_echoed(
        self, test_client: TestClient, headers_with_correlation: dict[str, str]
    ) -> None:
        response = test_client.get("/", headers=headers_with_correlation)
        assert response.status_code == status.HTTP_200_OK
        assert response.headers["X-Request-ID"] == headers_with_correlation["X-Request-ID"]

    def test_correlation_id_generated(self, test_client: TestClient) -> None:
        response = test_client.get("/")
        generated = response.headers["X-Request-ID"]
        assert uuid.UUID(generated).version == 4

    def test_correlation_id_unique_per_request(self, test_client: TestClient) -> None:
        first = test_client.get("/").headers["X-Request-ID"]
        second = test_client.get("/").headers["X-Request-ID"]
        assert first != second

    def test_correlation_id_on_graphql(
        self, post_graphql, headers_with_correlation: dict[str, str]
    ) -> None:
        response = post_graphql("{ books { id } }", headers=headers_with_correlation)
        assert response.headers["X-Request-ID"] == headers_with_correlation["X-Request-ID"]

    def test_correlation_id_in_error_meta(
        self, test_client: TestClient, headers_with_correlation: dict[str, str]
    ) -> None:
        response = test_client.get("/missing", headers=headers_with_correlation)
        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["meta"]["request_id"] == headers_with_correlation["X-Request-ID"]

    def test_request_line_logged(
        self,
        test_client: TestClient,
        headers_with_correlation: dict[str, str],
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        with caplog.at_level(logging.INFO, logger="app.core.middleware_correlation"):
            _ = test_client.get("/", headers=headers_with_correlation)

        records = [r for r in caplog.records if r.name == "app.core.middleware_correlation"]
        assert len(records) == 1
        assert records[0].getMessage().startswith("GET / -> 200 (")
        assert records[0].request_id == headers_with_correlation["X-Request-ID"]

    def test_request_line_logged_for_not_found(
        self, test_client: TestClient, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.INFO, logger="app.core.middleware_correlation"):
            _ = test_client.get("/missing")

        assert "GET /missing -> 404" in caplog.text
