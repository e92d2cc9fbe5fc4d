"""
Figma REST API client.

Every resource method issues exactly one logical request against the configured API
origin and returns a typed model. Failures surface as FigmaAPIError (or its
FigmaTimeoutError subclass) carrying the HTTP status and the parsed error body.

Requests are not retried unless retries are switched on in the config
(``retry_attempts > 1``), in which case rate limits, 5xx responses and transport
errors are retried with exponential backoff via ``src.utils.retry``. Callers can also
wrap any single call in ``retry_with_backoff`` themselves.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

import httpx
from pydantic import BaseModel, field_validator

from src.utils.config import (
    FIGMA_API_BASE,
    get_figma_access_token,
    get_figma_api_base_url,
    get_figma_auth_scheme,
    get_figma_retry_attempts,
    get_figma_retry_base_delay_ms,
    get_figma_timeout_ms,
)
from src.utils.logging import LogContext, get_logger
from src.utils.retry import retry_with_backoff
from wrappers.figma import figma_helpers
from wrappers.figma.figma_models import (
    ActivityLogsResponse,
    CommentReactionsResponse,
    CommentsResponse,
    ComponentResponse,
    ComponentSetResponse,
    ComponentSetsResponse,
    ComponentsResponse,
    DevResourcesMutationResponse,
    DevResourcesResponse,
    FigmaComment,
    FigmaFileMetadata,
    FigmaProject,
    FigmaUser,
    FileMetaResponse,
    FileNodesResponse,
    FileResponse,
    FileVersionsResponse,
    ImageFillsResponse,
    ImageResponse,
    LocalVariablesResponse,
    ProjectFilesResponse,
    PublishedVariablesResponse,
    StyleResponse,
    StylesResponse,
    TeamProjectsResponse,
    Webhook,
    WebhookRequestsResponse,
    WebhooksResponse,
)

logger = get_logger(__name__)


class FigmaClientConfig(BaseModel, frozen=True):
    """Connection settings for FigmaClient."""

    access_token: str
    base_url: str = FIGMA_API_BASE
    # None disables the timeout
    timeout_ms: int | None = 30_000
    # "token" sends a personal access token in X-Figma-Token, "oauth" sends a Bearer header
    auth_scheme: Literal["token", "oauth"] = "token"
    # Total attempts per request; 1 means no retries
    retry_attempts: int = 1
    retry_base_delay_ms: int = 1000

    @field_validator("access_token")
    @classmethod
    def _require_token(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("A Figma access token is required")
        return value

    @field_validator("retry_attempts")
    @classmethod
    def _require_one_attempt(cls, value: int) -> int:
        if value < 1:
            raise ValueError("retry_attempts must be at least 1")
        return value

    @classmethod
    def from_env(cls) -> FigmaClientConfig:
        """
        Build a config from FIGMA_* environment variables.

        Raises:
            ValueError: If FIGMA_ACCESS_TOKEN is not set
        """
        access_token = get_figma_access_token()
        if not access_token:
            raise ValueError("No Figma access token found, set FIGMA_ACCESS_TOKEN")

        return cls(
            access_token=access_token,
            base_url=get_figma_api_base_url(),
            timeout_ms=get_figma_timeout_ms(),
            auth_scheme=get_figma_auth_scheme(),  # type: ignore[arg-type]
            retry_attempts=get_figma_retry_attempts(),
            retry_base_delay_ms=get_figma_retry_base_delay_ms(),
        )


@dataclass
class FigmaRateLimitInfo:
    """Rate limit information from Figma response headers."""

    retry_after: int | None = None
    plan_tier: str | None = None
    rate_limit_type: str | None = None


class FigmaAPIError(Exception):
    """Exception raised for Figma API errors.

    ``status_code`` is None when the request never got a response (timeouts, connection errors).
    ``body`` is the parsed JSON error body, the raw text if it wasn't JSON, or None.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: Any = None,
        rate_limit_info: FigmaRateLimitInfo | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.body = body
        self.rate_limit_info = rate_limit_info


class FigmaTimeoutError(FigmaAPIError):
    """A single request exceeded the configured timeout."""


def _is_retryable(error: Exception) -> bool:
    if not isinstance(error, FigmaAPIError):
        return False
    # No status means the request never completed
    return error.status_code is None or error.status_code == 429 or error.status_code >= 500


def _encode_params(params: dict[str, Any] | None) -> dict[str, str] | None:
    """Drop unset values, join lists with commas and render bools the way the API expects."""
    if not params:
        return None

    encoded: dict[str, str] = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            encoded[key] = "true" if value else "false"
        elif isinstance(value, list | tuple):
            encoded[key] = ",".join(str(v) for v in value)
        else:
            encoded[key] = str(value)
    return encoded or None


class FigmaClient:
    """
    Figma REST API client.

    Handles authentication, error mapping and optional retries for Figma API requests.
    Use as an async context manager (or call ``close()``) to release the connection pool.
    """

    def __init__(
        self,
        config: FigmaClientConfig | str | None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize the Figma client.

        Args:
            config: Client configuration, or a bare access token to use the defaults
            transport: Optional httpx transport, mainly for tests

        Raises:
            ValueError: If the access token is missing or empty
        """
        if isinstance(config, str):
            config = FigmaClientConfig(access_token=config)
        elif not isinstance(config, FigmaClientConfig):
            raise ValueError("A Figma access token is required")
        self.config = config
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    def _auth_headers(self) -> dict[str, str]:
        if self.config.auth_scheme == "oauth":
            return {"Authorization": f"Bearer {self.config.access_token}"}
        return {"X-Figma-Token": self.config.access_token}

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create an async HTTP client."""
        if self._client is None:
            timeout_ms = self.config.timeout_ms
            self._client = httpx.AsyncClient(
                base_url=self.config.base_url,
                headers=self._auth_headers(),
                timeout=timeout_ms / 1000 if timeout_ms else None,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> FigmaClient:
        """Async context manager entry."""
        return self

    async def __aexit__(
        self, exc_type: type | None, exc_val: Exception | None, exc_tb: object
    ) -> None:
        """Async context manager exit - ensures client is closed."""
        await self.close()

    def _extract_rate_limit_info(self, response: httpx.Response) -> FigmaRateLimitInfo:
        """Extract rate limit information from response headers."""
        retry_after_str = response.headers.get("Retry-After")
        return FigmaRateLimitInfo(
            retry_after=int(retry_after_str) if retry_after_str and retry_after_str.isdigit() else None,
            plan_tier=response.headers.get("X-Figma-Plan-Tier"),
            rate_limit_type=response.headers.get("X-Figma-Rate-Limit-Type"),
        )

    def _build_error(self, response: httpx.Response, endpoint: str) -> FigmaAPIError:
        body: Any
        try:
            body = response.json()
        except ValueError:
            body = response.text or None

        message = None
        if isinstance(body, dict):
            message = body.get("err") or body.get("message")
        message = str(message) if message else f"HTTP {response.status_code}"

        rate_limit_info = None
        if response.status_code == 429:
            rate_limit_info = self._extract_rate_limit_info(response)
            logger.warning(
                "Figma rate limit hit",
                endpoint=endpoint,
                retry_after=rate_limit_info.retry_after,
                plan_tier=rate_limit_info.plan_tier,
                rate_limit_type=rate_limit_info.rate_limit_type,
            )
        else:
            logger.warning(
                "Figma API error",
                endpoint=endpoint,
                status_code=response.status_code,
                error=message,
            )

        return FigmaAPIError(
            message,
            status_code=response.status_code,
            body=body,
            rate_limit_info=rate_limit_info,
        )

    async def _send(
        self,
        method: str,
        endpoint: str,
        params: dict[str, str] | None,
        json_data: Any,
    ) -> Any:
        """Issue a single HTTP request and map the outcome."""
        client = await self._get_client()
        logger.debug("Figma API request", method=method, endpoint=endpoint)

        try:
            response = await client.request(
                method=method,
                url=endpoint,
                params=params,
                json=json_data,
            )
        except httpx.TimeoutException as e:
            logger.error(
                "Figma API timeout",
                endpoint=endpoint,
                timeout_ms=self.config.timeout_ms,
                error=str(e),
            )
            raise FigmaTimeoutError(
                f"Request to {endpoint} timed out after {self.config.timeout_ms}ms"
            ) from e
        except httpx.RequestError as e:
            logger.error("Figma API request error", endpoint=endpoint, error=str(e))
            raise FigmaAPIError(f"Request failed: {e}") from e

        if not response.is_success:
            raise self._build_error(response, endpoint)

        if response.status_code == 204 or not response.content:
            return None

        try:
            return response.json()
        except ValueError as e:
            logger.warning(
                "Figma API returned invalid JSON",
                endpoint=endpoint,
                status_code=response.status_code,
            )
            raise FigmaAPIError(
                "Invalid JSON response", status_code=response.status_code, body=response.text
            ) from e

    async def _request(
        self,
        method: str,
        endpoint: str,
        params: dict[str, Any] | None = None,
        json_data: Any = None,
    ) -> Any:
        """
        Make an HTTP request against the Figma API.

        Args:
            method: HTTP method (GET, POST, etc.)
            endpoint: API endpoint path
            params: Query parameters; None values are dropped, lists are comma-joined
            json_data: JSON body data

        Returns:
            Parsed JSON response, or None for empty responses

        Raises:
            FigmaAPIError: For non-2xx responses and transport failures
            FigmaTimeoutError: When the request exceeds the configured timeout
        """
        query = _encode_params(params)

        if self.config.retry_attempts > 1:
            return await retry_with_backoff(
                lambda: self._send(method, endpoint, query, json_data),
                max_retries=self.config.retry_attempts,
                base_delay_ms=self.config.retry_base_delay_ms,
                should_retry=_is_retryable,
            )
        return await self._send(method, endpoint, query, json_data)

    # User endpoints
    async def get_current_user(self) -> FigmaUser:
        """Get the current authenticated user's information."""
        data = await self._request("GET", "/v1/me")
        return FigmaUser.model_validate(data)

    # File endpoints
    async def get_file(
        self,
        file_key: str,
        version: str | None = None,
        ids: list[str] | None = None,
        depth: int | None = None,
        geometry: str | None = None,
        plugin_data: str | None = None,
        branch_data: bool | None = None,
    ) -> FileResponse:
        """
        Get a file's document structure.

        Args:
            file_key: The file key (from URL)
            version: Specific version ID to retrieve
            ids: Restrict the document to these node ids and their ancestors
            depth: Depth of document tree to return
            geometry: "paths" to include vector data
            plugin_data: Comma separated plugin ids whose data to include
            branch_data: Include branch metadata

        Returns:
            File document structure
        """
        params = {
            "version": version,
            "ids": ids,
            "depth": depth,
            "geometry": geometry,
            "plugin_data": plugin_data,
            "branch_data": branch_data,
        }
        data = await self._request("GET", f"/v1/files/{file_key}", params=params)
        return FileResponse.model_validate(data)

    async def get_file_nodes(
        self,
        file_key: str,
        ids: list[str],
        version: str | None = None,
        depth: int | None = None,
        geometry: str | None = None,
        plugin_data: str | None = None,
    ) -> FileNodesResponse:
        """Get specific nodes (and their subtrees) from a file."""
        params = {
            "ids": ids,
            "version": version,
            "depth": depth,
            "geometry": geometry,
            "plugin_data": plugin_data,
        }
        data = await self._request("GET", f"/v1/files/{file_key}/nodes", params=params)
        return FileNodesResponse.model_validate(data)

    async def get_file_meta(self, file_key: str) -> FileMetaResponse:
        """
        Get file metadata only (faster than full file fetch).

        This is a Tier 3 endpoint with higher rate limits.
        """
        data = await self._request("GET", f"/v1/files/{file_key}/meta")
        return FileMetaResponse.model_validate(data)

    async def get_file_versions(
        self,
        file_key: str,
        page_size: int | None = None,
        before: int | None = None,
        after: int | None = None,
    ) -> FileVersionsResponse:
        """Get version history for a file."""
        params = {"page_size": page_size, "before": before, "after": after}
        data = await self._request("GET", f"/v1/files/{file_key}/versions", params=params)
        return FileVersionsResponse.model_validate(data)

    # Image endpoints
    async def get_image(
        self,
        file_key: str,
        ids: list[str],
        scale: float | None = None,
        format: Literal["jpg", "png", "svg", "pdf"] | None = None,
        version: str | None = None,
        svg_outline_text: bool | None = None,
        svg_include_id: bool | None = None,
        svg_include_node_id: bool | None = None,
        svg_simplify_stroke: bool | None = None,
        contents_only: bool | None = None,
        use_absolute_bounds: bool | None = None,
    ) -> ImageResponse:
        """
        Render nodes from a file as images.

        Returns:
            Image URLs keyed by node id (None where rendering failed)
        """
        params = {
            "ids": ids,
            "scale": scale,
            "format": format,
            "version": version,
            "svg_outline_text": svg_outline_text,
            "svg_include_id": svg_include_id,
            "svg_include_node_id": svg_include_node_id,
            "svg_simplify_stroke": svg_simplify_stroke,
            "contents_only": contents_only,
            "use_absolute_bounds": use_absolute_bounds,
        }
        data = await self._request("GET", f"/v1/images/{file_key}", params=params)
        return ImageResponse.model_validate(data)

    async def get_image_fills(self, file_key: str) -> ImageFillsResponse:
        """Get download URLs for every image fill in a file, keyed by image ref."""
        data = await self._request("GET", f"/v1/files/{file_key}/images")
        return ImageFillsResponse.from_api(data)

    # Comment endpoints
    async def get_comments(self, file_key: str, as_md: bool | None = None) -> CommentsResponse:
        """
        Get all comments on a file.

        Note: Comments are not paginated - all are returned at once.
        """
        data = await self._request(
            "GET", f"/v1/files/{file_key}/comments", params={"as_md": as_md}
        )
        return CommentsResponse.model_validate(data)

    async def post_comment(
        self,
        file_key: str,
        message: str,
        comment_id: str | None = None,
        client_meta: dict[str, Any] | None = None,
    ) -> FigmaComment:
        """
        Post a comment, or a reply when ``comment_id`` names the root comment.

        Args:
            file_key: The file key
            message: Comment text
            comment_id: Root comment to reply to
            client_meta: Position of the comment (canvas point or node offset)
        """
        body: dict[str, Any] = {"message": message}
        if comment_id is not None:
            body["comment_id"] = comment_id
        if client_meta is not None:
            body["client_meta"] = client_meta
        data = await self._request("POST", f"/v1/files/{file_key}/comments", json_data=body)
        return FigmaComment.model_validate(data)

    async def delete_comment(self, file_key: str, comment_id: str) -> None:
        await self._request("DELETE", f"/v1/files/{file_key}/comments/{comment_id}")

    async def get_comment_reactions(
        self, file_key: str, comment_id: str, cursor: str | None = None
    ) -> CommentReactionsResponse:
        data = await self._request(
            "GET",
            f"/v1/files/{file_key}/comments/{comment_id}/reactions",
            params={"cursor": cursor},
        )
        return CommentReactionsResponse.model_validate(data)

    async def post_comment_reaction(self, file_key: str, comment_id: str, emoji: str) -> None:
        """React to a comment with an emoji shortcode (e.g. ":heart:")."""
        await self._request(
            "POST",
            f"/v1/files/{file_key}/comments/{comment_id}/reactions",
            json_data={"emoji": emoji},
        )

    async def delete_comment_reaction(self, file_key: str, comment_id: str, emoji: str) -> None:
        await self._request(
            "DELETE",
            f"/v1/files/{file_key}/comments/{comment_id}/reactions",
            params={"emoji": emoji},
        )

    # Component endpoints
    async def get_component(self, component_key: str) -> ComponentResponse:
        data = await self._request("GET", f"/v1/components/{component_key}")
        return ComponentResponse.model_validate(data)

    async def get_file_components(self, file_key: str) -> ComponentsResponse:
        """Get published components from a library file."""
        data = await self._request("GET", f"/v1/files/{file_key}/components")
        return ComponentsResponse.model_validate(data)

    async def get_team_components(
        self,
        team_id: str,
        page_size: int | None = None,
        after: int | None = None,
        before: int | None = None,
    ) -> ComponentsResponse:
        """Get a page of published components in a team library."""
        params = {"page_size": page_size, "after": after, "before": before}
        data = await self._request("GET", f"/v1/teams/{team_id}/components", params=params)
        return ComponentsResponse.model_validate(data)

    async def get_component_set(self, component_set_key: str) -> ComponentSetResponse:
        data = await self._request("GET", f"/v1/component_sets/{component_set_key}")
        return ComponentSetResponse.model_validate(data)

    async def get_file_component_sets(self, file_key: str) -> ComponentSetsResponse:
        data = await self._request("GET", f"/v1/files/{file_key}/component_sets")
        return ComponentSetsResponse.model_validate(data)

    async def get_team_component_sets(
        self,
        team_id: str,
        page_size: int | None = None,
        after: int | None = None,
        before: int | None = None,
    ) -> ComponentSetsResponse:
        params = {"page_size": page_size, "after": after, "before": before}
        data = await self._request("GET", f"/v1/teams/{team_id}/component_sets", params=params)
        return ComponentSetsResponse.model_validate(data)

    # Style endpoints
    async def get_style(self, style_key: str) -> StyleResponse:
        data = await self._request("GET", f"/v1/styles/{style_key}")
        return StyleResponse.model_validate(data)

    async def get_file_styles(self, file_key: str) -> StylesResponse:
        data = await self._request("GET", f"/v1/files/{file_key}/styles")
        return StylesResponse.model_validate(data)

    async def get_team_styles(
        self,
        team_id: str,
        page_size: int | None = None,
        after: int | None = None,
        before: int | None = None,
    ) -> StylesResponse:
        params = {"page_size": page_size, "after": after, "before": before}
        data = await self._request("GET", f"/v1/teams/{team_id}/styles", params=params)
        return StylesResponse.model_validate(data)

    # Team and project endpoints
    async def get_team_projects(self, team_id: str) -> TeamProjectsResponse:
        """
        Get all projects in a team.

        Note: This endpoint is only available for private OAuth apps.
        """
        data = await self._request("GET", f"/v1/teams/{team_id}/projects")
        return TeamProjectsResponse.model_validate(data)

    async def get_project_files(
        self, project_id: str, branch_data: bool | None = None
    ) -> ProjectFilesResponse:
        """Get all files in a project."""
        data = await self._request(
            "GET", f"/v1/projects/{project_id}/files", params={"branch_data": branch_data}
        )
        return ProjectFilesResponse.model_validate(data)

    # Webhook registration endpoints (v2)
    async def create_webhook(
        self,
        event_type: str,
        team_id: str,
        endpoint: str,
        passcode: str,
        status: Literal["ACTIVE", "PAUSED"] | None = None,
        description: str | None = None,
    ) -> Webhook:
        body = {
            "event_type": event_type,
            "team_id": team_id,
            "endpoint": endpoint,
            "passcode": passcode,
            "status": status,
            "description": description,
        }
        data = await self._request(
            "POST", "/v2/webhooks", json_data={k: v for k, v in body.items() if v is not None}
        )
        return Webhook.model_validate(data)

    async def get_webhook(self, webhook_id: str) -> Webhook:
        data = await self._request("GET", f"/v2/webhooks/{webhook_id}")
        return Webhook.model_validate(data)

    async def get_webhooks(self, team_id: str | None = None) -> WebhooksResponse:
        data = await self._request("GET", "/v2/webhooks", params={"team_id": team_id})
        return WebhooksResponse.model_validate(data)

    async def update_webhook(
        self,
        webhook_id: str,
        event_type: str | None = None,
        endpoint: str | None = None,
        passcode: str | None = None,
        status: Literal["ACTIVE", "PAUSED"] | None = None,
        description: str | None = None,
    ) -> Webhook:
        body = {
            "event_type": event_type,
            "endpoint": endpoint,
            "passcode": passcode,
            "status": status,
            "description": description,
        }
        data = await self._request(
            "PUT",
            f"/v2/webhooks/{webhook_id}",
            json_data={k: v for k, v in body.items() if v is not None},
        )
        return Webhook.model_validate(data)

    async def delete_webhook(self, webhook_id: str) -> None:
        await self._request("DELETE", f"/v2/webhooks/{webhook_id}")

    async def get_webhook_requests(self, webhook_id: str) -> WebhookRequestsResponse:
        """Get the webhook's delivery attempts from the last week (for debugging)."""
        data = await self._request("GET", f"/v2/webhooks/{webhook_id}/requests")
        return WebhookRequestsResponse.model_validate(data)

    # Variable endpoints
    async def get_local_variables(self, file_key: str) -> LocalVariablesResponse:
        data = await self._request("GET", f"/v1/files/{file_key}/variables/local")
        return LocalVariablesResponse.model_validate(data)

    async def get_published_variables(self, file_key: str) -> PublishedVariablesResponse:
        data = await self._request("GET", f"/v1/files/{file_key}/variables/published")
        return PublishedVariablesResponse.model_validate(data)

    # Dev resource endpoints
    async def get_dev_resources(
        self, file_key: str, node_ids: list[str] | None = None
    ) -> DevResourcesResponse:
        data = await self._request(
            "GET", f"/v1/files/{file_key}/dev_resources", params={"node_ids": node_ids}
        )
        return DevResourcesResponse.model_validate(data)

    async def create_dev_resource(
        self, file_key: str, node_id: str, name: str, url: str
    ) -> DevResourcesMutationResponse:
        """Attach a link to a node. Per-item failures come back in ``errors``, not as an exception."""
        body = {"dev_resources": [{"file_key": file_key, "node_id": node_id, "name": name, "url": url}]}
        data = await self._request("POST", "/v1/dev_resources", json_data=body)
        return DevResourcesMutationResponse.model_validate(data)

    async def update_dev_resource(
        self, dev_resource_id: str, name: str | None = None, url: str | None = None
    ) -> DevResourcesMutationResponse:
        resource: dict[str, str] = {"id": dev_resource_id}
        if name is not None:
            resource["name"] = name
        if url is not None:
            resource["url"] = url
        data = await self._request("PUT", "/v1/dev_resources", json_data={"dev_resources": [resource]})
        return DevResourcesMutationResponse.model_validate(data)

    async def delete_dev_resource(self, file_key: str, dev_resource_id: str) -> None:
        await self._request("DELETE", f"/v1/files/{file_key}/dev_resources/{dev_resource_id}")

    # Activity log endpoints
    async def get_activity_logs(
        self,
        events: list[str] | None = None,
        start_time: int | None = None,
        end_time: int | None = None,
        limit: int | None = None,
        order: Literal["asc", "desc"] | None = None,
        cursor: str | None = None,
    ) -> ActivityLogsResponse:
        """Get organization activity log events (requires an org admin OAuth token)."""
        params = {
            "events": events,
            "start_time": start_time,
            "end_time": end_time,
            "limit": limit,
            "order": order,
            "cursor": cursor,
        }
        data = await self._request("GET", "/v1/activity_logs", params=params)
        return ActivityLogsResponse.from_api(data)

    # Iteration helpers
    async def iter_team_files(self, team_id: str) -> list[tuple[FigmaProject, FigmaFileMetadata]]:
        """
        Collect all files in all projects of a team.

        Projects are fetched one after another, never concurrently.

        Returns:
            Tuples of (project, file_metadata)
        """
        results: list[tuple[FigmaProject, FigmaFileMetadata]] = []

        with LogContext(team_id=team_id):
            team_projects = await self.get_team_projects(team_id)
            for project in team_projects.projects:
                project_files = await self.get_project_files(project.id)
                for file in project_files.files:
                    results.append((project, file))

            logger.info(
                "Collected team files",
                project_count=len(team_projects.projects),
                file_count=len(results),
            )

        return results

    # URL helpers
    @staticmethod
    def extract_file_key(url: str) -> str:
        return figma_helpers.extract_file_key(url)

    @staticmethod
    def extract_node_id(url: str) -> str | None:
        return figma_helpers.extract_node_id(url)

    @staticmethod
    def build_file_url(file_key: str, node_id: str | None = None) -> str:
        return figma_helpers.build_file_url(file_key, node_id)


def get_figma_client(transport: httpx.AsyncBaseTransport | None = None) -> FigmaClient:
    """
    Create a FigmaClient from FIGMA_* environment variables.

    Raises:
        ValueError: If no access token is configured
    """
    return FigmaClient(FigmaClientConfig.from_env(), transport=transport)
