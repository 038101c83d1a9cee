"""svgshapes: self-closing SVG element builders."""

from svgshapes.errors import AttributeLengthMismatch
from svgshapes.models import SvgElement
from svgshapes.svg import (
    circle,
    element,
    escape_value,
    get_registry,
    line,
    path,
    polygon,
    rect,
    render_shape,
)

__version__ = "0.1.0"

__all__ = [
    "AttributeLengthMismatch",
    "SvgElement",
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
