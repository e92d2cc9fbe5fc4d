"""
Figma scene tree models.

Nodes are immutable snapshots of the document returned by the REST API. The `type`
field is the discriminant of a closed union: frame-like nodes, components, instances,
text, and a generic variant for every other tag (DOCUMENT, CANVAS, VECTOR, ...).
Unknown wire fields are preserved on every variant.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag, TypeAdapter
from pydantic.alias_generators import to_camel


class Color(BaseModel, frozen=True):
    """RGBA color with channels normally in [0, 1]. Out-of-range values are kept as-is."""

    r: float
    g: float
    b: float
    a: float = 1.0


class Rectangle(BaseModel, frozen=True):
    x: float
    y: float
    width: float
    height: float


class Vector(BaseModel, frozen=True):
    x: float
    y: float


class Position(BaseModel, frozen=True):
    """Absolute canvas position of a node."""

    x: float
    y: float


class Size(BaseModel, frozen=True):
    width: float
    height: float


class BaseNode(BaseModel):
    """Fields shared by every scene node."""

    model_config = ConfigDict(
        frozen=True,
        extra="allow",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: str
    type: str
    name: str | None = None
    visible: bool = True
    children: list[SceneNode] = Field(default_factory=list)
    absolute_bounding_box: Rectangle | None = None
    size: Vector | None = None
    # 2x3 affine matrix [[a, c, tx], [b, d, ty]] relative to the parent
    relative_transform: list[list[float]] | None = None


class GenericNode(BaseNode):
    """Any node type without dedicated fields (DOCUMENT, CANVAS, VECTOR, RECTANGLE, ...)."""


class FrameNode(BaseNode):
    """Frame-like container: frames, groups and component sets (and, via subclasses, components and instances)."""

    type: Literal["FRAME", "GROUP", "COMPONENT_SET"]
    fills: list[dict[str, Any]] = Field(default_factory=list)
    strokes: list[dict[str, Any]] = Field(default_factory=list)
    corner_radius: float | None = None
    clips_content: bool | None = None
    layout_mode: str | None = None
    padding_left: float | None = None
    padding_right: float | None = None
    padding_top: float | None = None
    padding_bottom: float | None = None
    item_spacing: float | None = None


class ComponentNode(FrameNode):
    type: Literal["COMPONENT"]  # type: ignore[assignment]
    component_property_definitions: dict[str, Any] = Field(default_factory=dict)


class InstanceNode(FrameNode):
    type: Literal["INSTANCE"]  # type: ignore[assignment]
    component_id: str | None = None
    component_properties: dict[str, Any] = Field(default_factory=dict)


class TextNode(BaseNode):
    type: Literal["TEXT"]
    characters: str = ""
    style: dict[str, Any] | None = None


_VARIANT_BY_TYPE = {
    "FRAME": "frame",
    "GROUP": "frame",
    "COMPONENT_SET": "frame",
    "COMPONENT": "component",
    "INSTANCE": "instance",
    "TEXT": "text",
}


def _node_variant(value: Any) -> str:
    if isinstance(value, Mapping):
        node_type = value.get("type")
    else:
        node_type = getattr(value, "type", None)
    return _VARIANT_BY_TYPE.get(node_type, "generic")  # type: ignore[arg-type]


SceneNode = Annotated[
    Annotated[FrameNode, Tag("frame")]
    | Annotated[ComponentNode, Tag("component")]
    | Annotated[InstanceNode, Tag("instance")]
    | Annotated[TextNode, Tag("text")]
    | Annotated[GenericNode, Tag("generic")],
    Discriminator(_node_variant),
]

for _model in (BaseNode, GenericNode, FrameNode, ComponentNode, InstanceNode, TextNode):
    _model.model_rebuild()

_scene_node_adapter: TypeAdapter[SceneNode] = TypeAdapter(SceneNode)


def parse_node(data: Mapping[str, Any]) -> BaseNode:
    """Validate a raw node mapping (and its whole subtree) into scene node models."""
    return _scene_node_adapter.validate_python(data)
