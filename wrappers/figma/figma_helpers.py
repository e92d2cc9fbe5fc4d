"""
Offline helpers for Figma data: colors, URLs and node ids, scene tree search and geometry.

Nothing here touches the network. Tree helpers operate on the immutable node models
from `figma_nodes`; parent lookups go through an explicit id -> entry index because
the deserialized tree has no back-references.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any, TypeGuard
from urllib.parse import quote, unquote

from wrappers.figma.figma_nodes import (
    BaseNode,
    Color,
    ComponentNode,
    FrameNode,
    InstanceNode,
    Position,
    Size,
    TextNode,
)

FIGMA_WEB_BASE = "https://www.figma.com"

_HEX_COLOR_RE = re.compile(r"#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})", re.IGNORECASE)
_FILE_KEY_RE = re.compile(r"figma\.com/(?:file|design)/([a-zA-Z0-9]+)")
_NODE_ID_RE = re.compile(r"[?&#]node-id=([^&#]+)")


class NodeTreeError(ValueError):
    """Raised when node data is structurally invalid (missing references, parent cycles)."""


# =============================================================================
# Colors
# =============================================================================


def _to_channel(value: float) -> int:
    return max(0, min(255, round(value * 255)))


def color_to_hex(color: Color) -> str:
    """Convert a Figma color (0-1 channels) to a lowercase ``#rrggbb`` string. Alpha is ignored."""
    return "#" + "".join(f"{_to_channel(c):02x}" for c in (color.r, color.g, color.b))


def color_to_rgba(color: Color) -> str:
    """Convert a Figma color to a CSS ``rgba(R, G, B, A)`` string with alpha left in 0-1."""
    r, g, b = (_to_channel(c) for c in (color.r, color.g, color.b))
    return f"rgba({r}, {g}, {b}, {color.a:g})"


def hex_to_color(hex_color: str) -> Color:
    """Convert ``#RRGGBB`` (or ``RRGGBB``) to a Figma color with alpha 1.

    Raises:
        ValueError: If the string is not a 6-digit hex color
    """
    match = _HEX_COLOR_RE.fullmatch(hex_color)
    if not match:
        raise ValueError(f"Invalid hex color: {hex_color}")
    r, g, b = (int(group, 16) / 255 for group in match.groups())
    return Color(r=r, g=g, b=b, a=1.0)


# =============================================================================
# URLs and node ids
# =============================================================================


def node_id_to_url_format(node_id: str) -> str:
    """Convert a canonical node id ("1:2") to its URL form ("1-2")."""
    return node_id.replace(":", "-")


def url_format_to_node_id(url_node_id: str) -> str:
    """Convert a URL node id ("1-2") back to canonical form ("1:2")."""
    return url_node_id.replace("-", ":")


def extract_file_key(url: str) -> str:
    """
    Extract the file key from a Figma file or design URL.

    Matches URLs like:
        https://www.figma.com/file/ABC123/FileName
        https://www.figma.com/design/ABC123/FileName?node-id=1-2

    Raises:
        ValueError: If the URL is not a Figma file URL
    """
    match = _FILE_KEY_RE.search(url)
    if not match:
        raise ValueError(f"Invalid Figma URL: {url}")
    return match.group(1)


def extract_node_id(url: str) -> str | None:
    """Return the canonical node id from the ``node-id`` query parameter, or None if absent.

    Accepts "1-2", "1:2", the percent-encoded "1%3A2" and instance ids such as "I1-2;3-4".
    """
    match = _NODE_ID_RE.search(url)
    if not match:
        return None
    return url_format_to_node_id(unquote(match.group(1)))


def build_file_url(file_key: str, node_id: str | None = None) -> str:
    """Build a legacy ``/file/`` URL, optionally pointing at a node."""
    url = f"{FIGMA_WEB_BASE}/file/{file_key}"
    if node_id:
        url += f"?node-id={node_id_to_url_format(node_id)}"
    return url


def build_design_url(file_key: str, file_name: str | None = None, node_id: str | None = None) -> str:
    """Build a ``/design/`` URL with an optional percent-encoded file name and node."""
    url = f"{FIGMA_WEB_BASE}/design/{file_key}"
    if file_name:
        url += f"/{quote(file_name, safe='')}"
    if node_id:
        url += f"?node-id={node_id_to_url_format(node_id)}"
    return url


# =============================================================================
# Type guards
# =============================================================================


def is_frame_like(node: BaseNode) -> TypeGuard[FrameNode]:
    """FRAME, GROUP, COMPONENT, COMPONENT_SET or INSTANCE."""
    return isinstance(node, FrameNode)


def is_text_node(node: BaseNode) -> TypeGuard[TextNode]:
    return isinstance(node, TextNode)


def is_component(node: BaseNode) -> TypeGuard[ComponentNode]:
    return isinstance(node, ComponentNode)


def is_instance(node: BaseNode) -> TypeGuard[InstanceNode]:
    return isinstance(node, InstanceNode)


# =============================================================================
# Traversal and search
# =============================================================================


def walk_nodes(root: BaseNode) -> Iterator[BaseNode]:
    """Yield every node in the subtree, root first, in depth-first pre-order."""
    stack: list[BaseNode] = [root]
    while stack:
        node = stack.pop()
        yield node
        # Reversed so the first child is popped next
        stack.extend(reversed(node.children))


def flatten_nodes(root: BaseNode) -> list[BaseNode]:
    return list(walk_nodes(root))


def find_nodes(root: BaseNode, predicate: Callable[[BaseNode], bool]) -> list[BaseNode]:
    return [node for node in walk_nodes(root) if predicate(node)]


def find_nodes_by_type(root: BaseNode, node_type: str) -> list[BaseNode]:
    """Nodes whose ``type`` tag equals ``node_type`` exactly."""
    return find_nodes(root, lambda node: node.type == node_type)


def find_nodes_by_name(root: BaseNode, name: str) -> list[BaseNode]:
    """Nodes whose name matches exactly (case-sensitive)."""
    return find_nodes(root, lambda node: node.name == name)


def find_node_by_id(root: BaseNode, node_id: str) -> BaseNode | None:
    """First node with ``node_id`` in depth-first pre-order, or None."""
    return next((node for node in walk_nodes(root) if node.id == node_id), None)


@dataclass(frozen=True)
class NodeIndexEntry:
    """A node plus the id of its parent (None for the root of the indexed subtree)."""

    node: BaseNode
    parent_id: str | None = None


def build_node_index(root: BaseNode) -> dict[str, NodeIndexEntry]:
    """Index a subtree by node id so parent chains can be walked without back-references.

    When an id appears more than once, the first occurrence in pre-order wins.
    """
    index: dict[str, NodeIndexEntry] = {}
    stack: list[tuple[BaseNode, str | None]] = [(root, None)]
    while stack:
        node, parent_id = stack.pop()
        index.setdefault(node.id, NodeIndexEntry(node=node, parent_id=parent_id))
        stack.extend((child, node.id) for child in reversed(node.children))
    return index


def _parent_id_of(entry: Any) -> str | None:
    if isinstance(entry, Mapping):
        return entry.get("parent_id", entry.get("parentId"))
    return getattr(entry, "parent_id", None)


def _iter_ancestor_ids(node_id: str, nodes_by_id: Mapping[str, Any]) -> Iterator[str]:
    """Yield the ids of ``node_id``'s ancestors, nearest first.

    Raises:
        NodeTreeError: On a missing start node, a dangling parent reference, or a cycle
    """
    if node_id not in nodes_by_id:
        raise NodeTreeError(f"Node {node_id} not found in node index")

    visited = {node_id}
    parent_id = _parent_id_of(nodes_by_id[node_id])
    while parent_id:
        if parent_id in visited:
            raise NodeTreeError(f"Cycle detected in parent chain of node {node_id} at {parent_id}")
        if parent_id not in nodes_by_id:
            raise NodeTreeError(f"Node {node_id} references missing ancestor {parent_id}")
        visited.add(parent_id)
        yield parent_id
        parent_id = _parent_id_of(nodes_by_id[parent_id])


def calculate_node_depth(node_id: str, nodes_by_id: Mapping[str, Any]) -> int:
    """
    Count parent hops from ``node_id`` to a node without a parent.

    Args:
        node_id: Id of the node to measure
        nodes_by_id: Mapping of id to a record carrying a parent id. Records may be
            NodeIndexEntry objects, anything with a ``parent_id`` attribute, or mappings
            with a ``parent_id`` / ``parentId`` key.

    Returns:
        0 for a root, 1 for its children, and so on

    Raises:
        NodeTreeError: If the node or one of its ancestors is missing, or the parent
            chain loops back on itself
    """
    return sum(1 for _ in _iter_ancestor_ids(node_id, nodes_by_id))


# =============================================================================
# Geometry
# =============================================================================


def _translation(node: BaseNode) -> tuple[float, float] | None:
    transform = node.relative_transform
    if not transform or len(transform) < 2 or len(transform[0]) < 3 or len(transform[1]) < 3:
        return None
    return transform[0][2], transform[1][2]


def get_absolute_position(
    node: BaseNode, index: Mapping[str, NodeIndexEntry] | None = None
) -> Position | None:
    """
    Get a node's absolute canvas position.

    Uses ``absoluteBoundingBox`` when the node has one. Otherwise, given an index from
    ``build_node_index``, sums ``relativeTransform`` offsets up the ancestor chain until
    an ancestor with an absolute bounding box (or the root) is reached.

    Returns:
        The position, or None when the node carries no positional data

    Raises:
        NodeTreeError: If the ancestor chain in ``index`` is broken or cyclic
    """
    if node.absolute_bounding_box is not None:
        return Position(x=node.absolute_bounding_box.x, y=node.absolute_bounding_box.y)

    offset = _translation(node)
    if offset is None or index is None or node.id not in index:
        return None

    x, y = offset
    for ancestor_id in _iter_ancestor_ids(node.id, index):
        ancestor = index[ancestor_id].node
        if ancestor.absolute_bounding_box is not None:
            return Position(
                x=ancestor.absolute_bounding_box.x + x, y=ancestor.absolute_bounding_box.y + y
            )
        ancestor_offset = _translation(ancestor)
        if ancestor_offset is not None:
            x += ancestor_offset[0]
            y += ancestor_offset[1]
    return Position(x=x, y=y)


def get_node_size(node: BaseNode) -> Size | None:
    """Width and height from ``absoluteBoundingBox``, falling back to ``size``."""
    if node.absolute_bounding_box is not None:
        return Size(width=node.absolute_bounding_box.width, height=node.absolute_bounding_box.height)
    if node.size is not None:
        return Size(width=node.size.x, height=node.size.y)
    return None
