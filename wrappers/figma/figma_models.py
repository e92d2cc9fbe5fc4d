"""
Pydantic models for Figma REST API responses.

Field names follow the wire format: most endpoints use snake_case, the file and
variables endpoints use camelCase (exposed here as snake_case via aliases). Unknown
fields are kept so newer API additions are not lost.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from wrappers.figma.figma_nodes import SceneNode


class FigmaModel(BaseModel):
    """Base for API payloads: tolerant of extra fields, populated by name or alias."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)


# =============================================================================
# Users, projects, files
# =============================================================================


class FigmaUser(FigmaModel):
    """Figma user information."""

    id: str
    handle: str
    img_url: str | None = None
    email: str | None = None


class FigmaProject(FigmaModel):
    id: str
    name: str


class FigmaBranch(FigmaModel):
    key: str
    name: str
    thumbnail_url: str | None = None
    last_modified: str | None = None
    link_access: str | None = None


class FigmaFileMetadata(FigmaModel):
    """File entry from the project files endpoint."""

    key: str
    name: str
    thumbnail_url: str | None = None
    last_modified: str
    branches: list[FigmaBranch] = Field(default_factory=list)


class TeamProjectsResponse(FigmaModel):
    name: str | None = None
    projects: list[FigmaProject] = Field(default_factory=list)


class ProjectFilesResponse(FigmaModel):
    name: str | None = None
    files: list[FigmaFileMetadata] = Field(default_factory=list)


class FigmaComponentSummary(FigmaModel):
    """Component entry in a file's ``components`` / ``componentSets`` map."""

    key: str
    name: str
    description: str = ""
    remote: bool | None = None
    component_set_id: str | None = Field(default=None, alias="componentSetId")


class FigmaStyleSummary(FigmaModel):
    key: str
    name: str
    description: str = ""
    remote: bool | None = None
    style_type: str | None = Field(default=None, alias="styleType")


class FileResponse(FigmaModel):
    """Figma file with full document structure."""

    name: str
    role: str | None = None
    last_modified: str = Field(alias="lastModified")
    editor_type: str | None = Field(default=None, alias="editorType")
    thumbnail_url: str | None = Field(default=None, alias="thumbnailUrl")
    version: str
    document: SceneNode
    components: dict[str, FigmaComponentSummary] = Field(default_factory=dict)
    component_sets: dict[str, FigmaComponentSummary] = Field(
        default_factory=dict, alias="componentSets"
    )
    schema_version: int | None = Field(default=None, alias="schemaVersion")
    styles: dict[str, FigmaStyleSummary] = Field(default_factory=dict)
    main_file_key: str | None = Field(default=None, alias="mainFileKey")
    branches: list[FigmaBranch] = Field(default_factory=list)


class FileNodeEntry(FigmaModel):
    document: SceneNode
    components: dict[str, FigmaComponentSummary] = Field(default_factory=dict)
    schema_version: int | None = Field(default=None, alias="schemaVersion")
    styles: dict[str, FigmaStyleSummary] = Field(default_factory=dict)


class FileNodesResponse(FigmaModel):
    name: str
    role: str | None = None
    last_modified: str = Field(alias="lastModified")
    editor_type: str | None = Field(default=None, alias="editorType")
    thumbnail_url: str | None = Field(default=None, alias="thumbnailUrl")
    version: str
    # Requested ids that don't exist map to None
    nodes: dict[str, FileNodeEntry | None] = Field(default_factory=dict)


class FigmaFileMeta(FigmaModel):
    key: str | None = None
    name: str
    thumbnail_url: str | None = None
    last_modified: str | None = None
    created_at: str | None = None
    version: str | None = None
    role: str | None = None
    link_access: str | None = None
    editor_type: str | None = None
    folder: bool | None = None


class FileMetaResponse(FigmaModel):
    file: FigmaFileMeta


class FigmaPagination(FigmaModel):
    before: int | None = None
    after: int | None = None
    prev_page: str | None = None
    next_page: str | None = None


class FigmaVersion(FigmaModel):
    """Figma file version."""

    id: str
    created_at: str
    label: str | None = None
    description: str | None = None
    user: FigmaUser
    thumbnail_url: str | None = None


class FileVersionsResponse(FigmaModel):
    versions: list[FigmaVersion] = Field(default_factory=list)
    pagination: FigmaPagination | None = None


# =============================================================================
# Images
# =============================================================================


class ImageResponse(FigmaModel):
    """Render URLs keyed by node id; a None URL means the node could not be rendered."""

    err: str | None = None
    images: dict[str, str | None] = Field(default_factory=dict)


class ImageFillsResponse(FigmaModel):
    err: str | None = None
    images: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> ImageFillsResponse:
        # The fills endpoint nests the map under meta.images
        meta = data.get("meta") or {}
        return cls(err=data.get("err"), images=meta.get("images", data.get("images", {})))


# =============================================================================
# Comments
# =============================================================================


class FigmaClientMeta(FigmaModel):
    x: float | None = None
    y: float | None = None
    node_id: str | None = None
    node_offset: dict[str, float] | None = None


class FigmaReaction(FigmaModel):
    user: FigmaUser
    emoji: str
    created_at: str


class FigmaComment(FigmaModel):
    """Figma comment on a file."""

    id: str
    uuid: str | None = None
    file_key: str
    parent_id: str | None = None
    user: FigmaUser
    created_at: str
    resolved_at: str | None = None
    message: str
    client_meta: FigmaClientMeta | dict[str, Any] | list[Any] | None = None
    order_id: str | None = None
    reactions: list[FigmaReaction] = Field(default_factory=list)


class CommentsResponse(FigmaModel):
    comments: list[FigmaComment] = Field(default_factory=list)


class CommentReactionsResponse(FigmaModel):
    reactions: list[FigmaReaction] = Field(default_factory=list)
    pagination: FigmaPagination | None = None


# =============================================================================
# Components, component sets, styles
# =============================================================================


class FigmaFrameInfo(FigmaModel):
    page_id: str | None = Field(default=None, alias="pageId")
    page_name: str | None = Field(default=None, alias="pageName")
    node_id: str | None = Field(default=None, alias="nodeId")
    name: str | None = None
    background_color: str | None = Field(default=None, alias="backgroundColor")


class FigmaPublishedMeta(FigmaModel):
    """Published component, component set or style metadata."""

    key: str
    file_key: str
    node_id: str
    name: str
    description: str = ""
    thumbnail_url: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
    containing_frame: FigmaFrameInfo | None = None
    style_type: str | None = None
    sort_position: str | None = None
    user: FigmaUser | None = None


class ComponentResponse(FigmaModel):
    status: int | None = None
    error: bool = False
    meta: FigmaPublishedMeta


class ComponentSetResponse(ComponentResponse):
    pass


class StyleResponse(ComponentResponse):
    pass


class FigmaCursor(FigmaModel):
    before: int | None = None
    after: int | None = None


class ComponentsMeta(FigmaModel):
    components: list[FigmaPublishedMeta] = Field(default_factory=list)
    cursor: FigmaCursor | None = None


class ComponentsResponse(FigmaModel):
    status: int | None = None
    error: bool = False
    meta: ComponentsMeta


class ComponentSetsMeta(FigmaModel):
    component_sets: list[FigmaPublishedMeta] = Field(default_factory=list)
    cursor: FigmaCursor | None = None


class ComponentSetsResponse(FigmaModel):
    status: int | None = None
    error: bool = False
    meta: ComponentSetsMeta


class StylesMeta(FigmaModel):
    styles: list[FigmaPublishedMeta] = Field(default_factory=list)
    cursor: FigmaCursor | None = None


class StylesResponse(FigmaModel):
    status: int | None = None
    error: bool = False
    meta: StylesMeta


# =============================================================================
# Webhooks (registration management only)
# =============================================================================


class Webhook(FigmaModel):
    id: str
    team_id: str | None = None
    event_type: str
    client_id: str | None = None
    endpoint: str
    passcode: str | None = None
    status: str
    description: str | None = None
    protocol_version: str | None = None


class WebhooksResponse(FigmaModel):
    webhooks: list[Webhook] = Field(default_factory=list)


class WebhookRequest(FigmaModel):
    webhook_id: str | None = None
    request_info: dict[str, Any] | None = None
    response_info: dict[str, Any] | None = None
    error_msg: str | None = None


class WebhookRequestsResponse(FigmaModel):
    requests: list[WebhookRequest] = Field(default_factory=list)


# =============================================================================
# Variables
# =============================================================================


class FigmaVariableMode(FigmaModel):
    mode_id: str = Field(alias="modeId")
    name: str


class FigmaVariable(FigmaModel):
    id: str
    name: str
    key: str
    variable_collection_id: str = Field(alias="variableCollectionId")
    resolved_type: str = Field(alias="resolvedType")
    values_by_mode: dict[str, Any] = Field(default_factory=dict, alias="valuesByMode")
    remote: bool | None = None
    description: str | None = None
    hidden_from_publishing: bool | None = Field(default=None, alias="hiddenFromPublishing")
    scopes: list[str] = Field(default_factory=list)


class FigmaVariableCollection(FigmaModel):
    id: str
    name: str
    key: str
    modes: list[FigmaVariableMode] = Field(default_factory=list)
    default_mode_id: str | None = Field(default=None, alias="defaultModeId")
    remote: bool | None = None
    hidden_from_publishing: bool | None = Field(default=None, alias="hiddenFromPublishing")
    variable_ids: list[str] = Field(default_factory=list, alias="variableIds")


class VariablesMeta(FigmaModel):
    variables: dict[str, FigmaVariable] = Field(default_factory=dict)
    variable_collections: dict[str, FigmaVariableCollection] = Field(
        default_factory=dict, alias="variableCollections"
    )


class LocalVariablesResponse(FigmaModel):
    status: int | None = None
    error: bool = False
    meta: VariablesMeta


class PublishedVariablesResponse(LocalVariablesResponse):
    pass


# =============================================================================
# Dev resources
# =============================================================================


class DevResource(FigmaModel):
    id: str
    name: str
    url: str
    file_key: str
    node_id: str


class DevResourcesResponse(FigmaModel):
    dev_resources: list[DevResource] = Field(default_factory=list)


class DevResourcesMutationResponse(FigmaModel):
    """Result of a bulk create/update: what succeeded and per-item errors."""

    links_created: list[DevResource] = Field(default_factory=list)
    links_updated: list[str] = Field(default_factory=list)
    errors: list[dict[str, Any]] = Field(default_factory=list)


# =============================================================================
# Activity logs
# =============================================================================


class ActivityLogEvent(FigmaModel):
    id: str
    timestamp: int | str
    actor: dict[str, Any] | None = None
    action: dict[str, Any] | None = None
    entity: dict[str, Any] | None = None
    context: dict[str, Any] | None = None


class ActivityLogsResponse(FigmaModel):
    events: list[ActivityLogEvent] = Field(default_factory=list)
    cursor: str | None = None
    next_page: bool | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> ActivityLogsResponse:
        # Newer responses wrap the page in "meta"
        return cls.model_validate(data.get("meta", data))
