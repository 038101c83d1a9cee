"""SVG element serialization and shape preparers."""

from svgshapes.svg.primitives import (
    ShapeRegistry,
    ShapeSpec,
    circle,
    get_registry,
    line,
    path,
    polygon,
    rect,
    render_shape,
)
from svgshapes.svg.serializer import check_lengths, element, escape_value

__all__ = [
    "ShapeRegistry",
    "ShapeSpec",
    "check_lengths",
    "circle",
    "element",
    "escape_value",
    "get_registry",
    "line",
    "path",
    "polygon",
    "rect",
    "render_shape",
]
