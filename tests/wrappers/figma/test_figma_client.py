"""Tests for the Figma REST API client."""

import json
import os
from unittest.mock import patch

import httpx
import pytest

from wrappers.figma.client import (
    FigmaAPIError,
    FigmaClient,
    FigmaClientConfig,
    FigmaTimeoutError,
    get_figma_client,
)
from wrappers.figma.figma_helpers import find_nodes_by_type
from wrappers.figma.figma_nodes import ComponentNode


@pytest.fixture
def mock_file_response():
    """Trimmed GET /v1/files/:key response."""
    return {
        "name": "Design System",
        "role": "editor",
        "lastModified": "2025-01-15T10:00:00Z",
        "editorType": "figma",
        "thumbnailUrl": "https://example.com/thumb.png",
        "version": "123456",
        "schemaVersion": 0,
        "document": {
            "id": "0:0",
            "name": "Document",
            "type": "DOCUMENT",
            "children": [
                {
                    "id": "0:1",
                    "name": "Page 1",
                    "type": "CANVAS",
                    "children": [
                        {"id": "1:2", "name": "Button", "type": "COMPONENT", "children": []}
                    ],
                }
            ],
        },
        "components": {
            "1:2": {"key": "abc", "name": "Button", "description": "Primary button"}
        },
        "componentSets": {},
        "styles": {},
    }


class RecordingHandler:
    """MockTransport handler that replays queued responses and records requests."""

    def __init__(self, *responses: httpx.Response | Exception):
        self.responses = list(responses)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = self.responses.pop(0) if len(self.responses) > 1 else self.responses[0]
        if isinstance(response, Exception):
            raise response
        return response


def make_client(handler: RecordingHandler, **config) -> FigmaClient:
    return FigmaClient(
        FigmaClientConfig(access_token="figd_test_token", **config),
        transport=httpx.MockTransport(handler),
    )


class TestFigmaClientConfig:
    def test_empty_token_fails_at_construction(self):
        with pytest.raises(ValueError):
            FigmaClient("")

    def test_missing_token_fails_at_construction(self):
        """An unset env var passed straight through must not produce a half-built client."""
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(ValueError, match="access token is required"):
                FigmaClient(os.environ.get("FIGMA_ACCESS_TOKEN"))

    def test_blank_token_fails_at_construction(self):
        with pytest.raises(ValueError):
            FigmaClientConfig(access_token="   ")

    def test_defaults(self):
        config = FigmaClientConfig(access_token="figd_x")
        assert config.base_url == "https://api.figma.com"
        assert config.timeout_ms == 30_000
        assert config.auth_scheme == "token"
        assert config.retry_attempts == 1

    def test_retry_attempts_must_be_positive(self):
        with pytest.raises(ValueError):
            FigmaClientConfig(access_token="figd_x", retry_attempts=0)

    def test_from_env(self):
        env = {
            "FIGMA_ACCESS_TOKEN": "figd_env",
            "FIGMA_API_BASE_URL": "https://figma.internal",
            "FIGMA_TIMEOUT_MS": "5000",
            "FIGMA_AUTH_SCHEME": "oauth",
            "FIGMA_RETRY_ATTEMPTS": "4",
        }
        with patch.dict(os.environ, env, clear=True):
            config = FigmaClientConfig.from_env()

        assert config.access_token == "figd_env"
        assert config.base_url == "https://figma.internal"
        assert config.timeout_ms == 5000
        assert config.auth_scheme == "oauth"
        assert config.retry_attempts == 4

    def test_from_env_without_token(self):
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(ValueError, match="FIGMA_ACCESS_TOKEN"):
                get_figma_client()


class TestFigmaClientRequests:
    @pytest.mark.asyncio
    async def test_get_file_parses_document(self, mock_file_response):
        handler = RecordingHandler(httpx.Response(200, json=mock_file_response))

        async with make_client(handler) as client:
            file = await client.get_file("FILE123", depth=2, ids=["1:2", "3:4"])

        request = handler.requests[0]
        assert request.method == "GET"
        assert request.url.path == "/v1/files/FILE123"
        assert request.url.params["depth"] == "2"
        assert request.url.params["ids"] == "1:2,3:4"
        assert "version" not in request.url.params
        assert request.headers["X-Figma-Token"] == "figd_test_token"

        assert file.name == "Design System"
        assert file.last_modified == "2025-01-15T10:00:00Z"
        assert file.components["1:2"].name == "Button"
        components = find_nodes_by_type(file.document, "COMPONENT")
        assert len(components) == 1
        assert isinstance(components[0], ComponentNode)

    @pytest.mark.asyncio
    async def test_oauth_scheme_sends_bearer_header(self):
        handler = RecordingHandler(
            httpx.Response(200, json={"id": "1", "handle": "designer", "img_url": "x"})
        )

        async with make_client(handler, auth_scheme="oauth") as client:
            user = await client.get_current_user()

        assert handler.requests[0].headers["Authorization"] == "Bearer figd_test_token"
        assert "X-Figma-Token" not in handler.requests[0].headers
        assert user.handle == "designer"

    @pytest.mark.asyncio
    async def test_get_image_encodes_params(self):
        handler = RecordingHandler(
            httpx.Response(200, json={"err": None, "images": {"1:2": "https://s3/1.png", "3:4": None}})
        )

        async with make_client(handler) as client:
            result = await client.get_image(
                "FILE123", ids=["1:2", "3:4"], scale=2, format="png", use_absolute_bounds=True
            )

        params = handler.requests[0].url.params
        assert handler.requests[0].url.path == "/v1/images/FILE123"
        assert params["ids"] == "1:2,3:4"
        assert params["scale"] == "2"
        assert params["format"] == "png"
        assert params["use_absolute_bounds"] == "true"
        assert result.images == {"1:2": "https://s3/1.png", "3:4": None}

    @pytest.mark.asyncio
    async def test_get_image_fills_reads_meta(self):
        handler = RecordingHandler(
            httpx.Response(
                200,
                json={"error": False, "status": 200, "meta": {"images": {"ref1": "https://s3/a"}}},
            )
        )

        async with make_client(handler) as client:
            fills = await client.get_image_fills("FILE123")

        assert handler.requests[0].url.path == "/v1/files/FILE123/images"
        assert fills.images == {"ref1": "https://s3/a"}

    @pytest.mark.asyncio
    async def test_post_comment_sends_json_body(self):
        comment = {
            "id": "99",
            "file_key": "FILE123",
            "user": {"id": "1", "handle": "designer", "img_url": "x"},
            "created_at": "2025-01-15T10:00:00Z",
            "message": "Looks good",
            "client_meta": {"node_id": "1:2", "node_offset": {"x": 0, "y": 0}},
        }
        handler = RecordingHandler(httpx.Response(200, json=comment))

        async with make_client(handler) as client:
            result = await client.post_comment(
                "FILE123", "Looks good", client_meta={"node_id": "1:2", "node_offset": {"x": 0, "y": 0}}
            )

        request = handler.requests[0]
        assert request.method == "POST"
        assert request.url.path == "/v1/files/FILE123/comments"
        assert json.loads(request.content) == {
            "message": "Looks good",
            "client_meta": {"node_id": "1:2", "node_offset": {"x": 0, "y": 0}},
        }
        assert result.id == "99"

    @pytest.mark.asyncio
    async def test_delete_returns_none_on_no_content(self):
        handler = RecordingHandler(httpx.Response(204))

        async with make_client(handler) as client:
            result = await client.delete_comment("FILE123", "99")

        assert result is None
        assert handler.requests[0].method == "DELETE"
        assert handler.requests[0].url.path == "/v1/files/FILE123/comments/99"

    @pytest.mark.asyncio
    async def test_delete_comment_reaction_passes_emoji(self):
        handler = RecordingHandler(httpx.Response(200, json={"status": 200, "error": False}))

        async with make_client(handler) as client:
            await client.delete_comment_reaction("FILE123", "99", ":heart:")

        request = handler.requests[0]
        assert request.url.path == "/v1/files/FILE123/comments/99/reactions"
        assert request.url.params["emoji"] == ":heart:"

    @pytest.mark.asyncio
    async def test_create_dev_resource_wraps_payload(self):
        handler = RecordingHandler(
            httpx.Response(200, json={"links_created": [], "errors": [{"error": "duplicate"}]})
        )

        async with make_client(handler) as client:
            result = await client.create_dev_resource("FILE123", "1:2", "Storybook", "https://sb")

        assert json.loads(handler.requests[0].content) == {
            "dev_resources": [
                {"file_key": "FILE123", "node_id": "1:2", "name": "Storybook", "url": "https://sb"}
            ]
        }
        assert result.errors == [{"error": "duplicate"}]

    @pytest.mark.asyncio
    async def test_iter_team_files(self):
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path == "/v1/teams/T1/projects":
                return httpx.Response(
                    200, json={"name": "Team", "projects": [{"id": "P1", "name": "Web"}]}
                )
            return httpx.Response(
                200,
                json={
                    "name": "Web",
                    "files": [{"key": "F1", "name": "Home", "last_modified": "2025-01-01"}],
                },
            )

        client = FigmaClient("figd_test_token", transport=httpx.MockTransport(handler))
        async with client:
            results = await client.iter_team_files("T1")

        assert [(p.id, f.key) for p, f in results] == [("P1", "F1")]


class TestFigmaClientErrors:
    @pytest.mark.asyncio
    async def test_not_found_carries_status_and_body(self):
        handler = RecordingHandler(httpx.Response(404, json={"status": 404, "err": "Not found"}))

        async with make_client(handler) as client:
            with pytest.raises(FigmaAPIError) as exc_info:
                await client.get_file("MISSING")

        error = exc_info.value
        assert error.status_code == 404
        assert error.body == {"status": 404, "err": "Not found"}
        assert error.message == "Not found"
        assert str(error) == "Not found"

    @pytest.mark.asyncio
    async def test_non_json_error_body(self):
        handler = RecordingHandler(httpx.Response(502, text="Bad Gateway"))

        async with make_client(handler) as client:
            with pytest.raises(FigmaAPIError) as exc_info:
                await client.get_file_meta("FILE123")

        assert exc_info.value.status_code == 502
        assert exc_info.value.body == "Bad Gateway"
        assert exc_info.value.message == "HTTP 502"

    @pytest.mark.asyncio
    async def test_success_with_non_json_body(self):
        handler = RecordingHandler(httpx.Response(200, text="<html>proxy login</html>"))

        async with make_client(handler) as client:
            with pytest.raises(FigmaAPIError) as exc_info:
                await client.get_current_user()

        assert exc_info.value.message == "Invalid JSON response"
        assert exc_info.value.status_code == 200
        assert exc_info.value.body == "<html>proxy login</html>"

    @pytest.mark.asyncio
    async def test_rate_limit_info(self):
        handler = RecordingHandler(
            httpx.Response(
                429,
                json={"status": 429, "err": "Rate limit exceeded"},
                headers={"Retry-After": "30", "X-Figma-Plan-Tier": "pro"},
            )
        )

        async with make_client(handler) as client:
            with pytest.raises(FigmaAPIError) as exc_info:
                await client.get_comments("FILE123")

        info = exc_info.value.rate_limit_info
        assert exc_info.value.status_code == 429
        assert info is not None
        assert info.retry_after == 30
        assert info.plan_tier == "pro"

    @pytest.mark.asyncio
    async def test_timeout(self):
        handler = RecordingHandler(httpx.ReadTimeout("timed out"))

        async with make_client(handler, timeout_ms=50) as client:
            with pytest.raises(FigmaTimeoutError) as exc_info:
                await client.get_file("FILE123")

        assert exc_info.value.status_code is None
        assert "50ms" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_connection_error(self):
        handler = RecordingHandler(httpx.ConnectError("connection refused"))

        async with make_client(handler) as client:
            with pytest.raises(FigmaAPIError) as exc_info:
                await client.get_current_user()

        assert not isinstance(exc_info.value, FigmaTimeoutError)
        assert exc_info.value.status_code is None

    @pytest.mark.asyncio
    async def test_no_retry_by_default(self):
        handler = RecordingHandler(httpx.Response(503, json={"status": 503, "err": "Unavailable"}))

        async with make_client(handler) as client:
            with pytest.raises(FigmaAPIError):
                await client.get_file_meta("FILE123")

        assert len(handler.requests) == 1


class TestFigmaClientRetries:
    @pytest.mark.asyncio
    async def test_retries_server_errors_then_succeeds(self):
        handler = RecordingHandler(
            httpx.Response(503, json={"status": 503, "err": "Unavailable"}),
            httpx.Response(429, json={"status": 429, "err": "Slow down"}),
            httpx.Response(200, json={"file": {"name": "Home", "key": "FILE123"}}),
        )

        async with make_client(handler, retry_attempts=3, retry_base_delay_ms=0) as client:
            meta = await client.get_file_meta("FILE123")

        assert len(handler.requests) == 3
        assert meta.file.name == "Home"

    @pytest.mark.asyncio
    async def test_client_errors_are_not_retried(self):
        handler = RecordingHandler(httpx.Response(404, json={"status": 404, "err": "Not found"}))

        async with make_client(handler, retry_attempts=3, retry_base_delay_ms=0) as client:
            with pytest.raises(FigmaAPIError) as exc_info:
                await client.get_file_meta("FILE123")

        assert exc_info.value.status_code == 404
        assert len(handler.requests) == 1

    @pytest.mark.asyncio
    async def test_exhausted_retries_surface_last_error(self):
        handler = RecordingHandler(
            httpx.Response(500, json={"status": 500, "err": "first"}),
            httpx.Response(500, json={"status": 500, "err": "last"}),
        )

        async with make_client(handler, retry_attempts=2, retry_base_delay_ms=0) as client:
            with pytest.raises(FigmaAPIError, match="last"):
                await client.get_file_meta("FILE123")

        assert len(handler.requests) == 2


class TestFigmaClientHelpers:
    def test_static_url_helpers(self):
        url = FigmaClient.build_file_url("KEY1", "1:2")
        assert FigmaClient.extract_file_key(url) == "KEY1"
        assert FigmaClient.extract_node_id(url) == "1:2"

    @pytest.mark.asyncio
    async def test_close_is_idempotent(self):
        client = make_client(RecordingHandler(httpx.Response(200, json={})))
        await client._get_client()
        await client.close()
        await client.close()
        assert client._client is None
