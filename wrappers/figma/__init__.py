"""Figma wrapper module: REST client, response and scene node models, offline helpers."""

from src.utils.ids import generate_id
from src.utils.retry import retry_with_backoff, sleep
from src.utils.size_formatting import format_bytes
from wrappers.figma.client import (
    FigmaAPIError,
    FigmaClient,
    FigmaClientConfig,
    FigmaRateLimitInfo,
    FigmaTimeoutError,
    get_figma_client,
)
from wrappers.figma.figma_helpers import (
    NodeIndexEntry,
    NodeTreeError,
    build_design_url,
    build_file_url,
    build_node_index,
    calculate_node_depth,
    color_to_hex,
    color_to_rgba,
    extract_file_key,
    extract_node_id,
    find_node_by_id,
    find_nodes,
    find_nodes_by_name,
    find_nodes_by_type,
    flatten_nodes,
    get_absolute_position,
    get_node_size,
    hex_to_color,
    is_component,
    is_frame_like,
    is_instance,
    is_text_node,
    node_id_to_url_format,
    url_format_to_node_id,
    walk_nodes,
)
from wrappers.figma.figma_models import (
    FigmaComment,
    FigmaFileMetadata,
    FigmaProject,
    FigmaUser,
    FigmaVersion,
    FileNodesResponse,
    FileResponse,
    ImageResponse,
)
from wrappers.figma.figma_nodes import (
    BaseNode,
    Color,
    ComponentNode,
    FrameNode,
    GenericNode,
    InstanceNode,
    Position,
    Rectangle,
    SceneNode,
    Size,
    TextNode,
    Vector,
    parse_node,
)

__all__ = [
    # Client
    "FigmaAPIError",
    "FigmaClient",
    "FigmaClientConfig",
    "FigmaRateLimitInfo",
    "FigmaTimeoutError",
    "get_figma_client",
    # Response models
    "FigmaComment",
    "FigmaFileMetadata",
    "FigmaProject",
    "FigmaUser",
    "FigmaVersion",
    "FileNodesResponse",
    "FileResponse",
    "ImageResponse",
    # Scene nodes
    "BaseNode",
    "Color",
    "ComponentNode",
    "FrameNode",
    "GenericNode",
    "InstanceNode",
    "Position",
    "Rectangle",
    "SceneNode",
    "Size",
    "TextNode",
    "Vector",
    "parse_node",
    # Color and URL helpers
    "build_design_url",
    "build_file_url",
    "color_to_hex",
    "color_to_rgba",
    "extract_file_key",
    "extract_node_id",
    "hex_to_color",
    "node_id_to_url_format",
    "url_format_to_node_id",
    # Tree helpers
    "NodeIndexEntry",
    "NodeTreeError",
    "build_node_index",
    "calculate_node_depth",
    "find_node_by_id",
    "find_nodes",
    "find_nodes_by_name",
    "find_nodes_by_type",
    "flatten_nodes",
    "get_absolute_position",
    "get_node_size",
    "is_component",
    "is_frame_like",
    "is_instance",
    "is_text_node",
    "walk_nodes",
    # Misc utilities
    "format_bytes",
    "generate_id",
    "retry_with_backoff",
    "sleep",
]
