"""Shape preparers: rect, circle, line, polygon, path.

Every shape is a tag plus a fixed, ordered tuple of well-known attribute
names registered in the shape registry. A preparer copies the caller's extra
pairs into a fresh list, appends the well-known pairs after them and hands
the result to the serializer:

    circle("5", "5", "3", ["fill"], ["red"])
    # -> '<circle fill="red" x="5" y="5" r="3"/>'

Extra pairs always come first and well-known attributes always come last.
The caller's sequences are never modified.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from svgshapes.errors import AttributeLengthMismatch
from svgshapes.svg.serializer import check_lengths, element

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShapeSpec:
    tag: str
    attributes: tuple[str, ...]


class ShapeRegistry:
    """Table of shapes keyed by tag."""

    def __init__(self) -> None:
        self._shapes: dict[str, ShapeSpec] = {}

    def register(self, spec: ShapeSpec) -> None:
        if spec.tag in self._shapes:
            raise ValueError(f"Duplicate shape tag: {spec.tag}")
        self._shapes[spec.tag] = spec
        logger.debug("Registered shape %s (%s)", spec.tag, ", ".join(spec.attributes))

    def get(self, tag: str) -> ShapeSpec:
        return self._shapes[tag]

    def all(self) -> list[ShapeSpec]:
        return sorted(self._shapes.values(), key=lambda s: s.tag)

    def __contains__(self, tag: object) -> bool:
        return tag in self._shapes

    @property
    def count(self) -> int:
        return len(self._shapes)


# Module-level singleton
_registry = ShapeRegistry()

for _spec in (
    ShapeSpec("rect", ("x", "y", "width", "height")),
    ShapeSpec("circle", ("x", "y", "r")),
    ShapeSpec("line", ("x1", "y1", "x2", "y2")),
    ShapeSpec("polygon", ("points",)),
    ShapeSpec("path", ("d",)),
):
    _registry.register(_spec)


def get_registry() -> ShapeRegistry:
    return _registry


def render_shape(
    tag: str,
    geometry: Sequence[str],
    names: Sequence[str] | None = None,
    values: Sequence[str] | None = None,
    *,
    escape: bool = False,
) -> str:
    """Render a registered shape from its geometry values and optional extra pairs.

    ``geometry`` pairs positionally with the shape's well-known attribute
    names, so it must have exactly as many entries.
    """
    spec = _registry.get(tag)
    extra_names = list(names or ())
    extra_values = list(values or ())
    check_lengths(extra_names, extra_values)

    if len(geometry) != len(spec.attributes):
        raise AttributeLengthMismatch(len(spec.attributes), len(geometry))

    all_names = extra_names + list(spec.attributes)
    all_values = extra_values + list(geometry)
    return element(spec.tag, all_names, all_values, escape=escape)


def rect(
    x: str,
    y: str,
    width: str,
    height: str,
    names: Sequence[str] | None = None,
    values: Sequence[str] | None = None,
    *,
    escape: bool = False,
) -> str:
    return render_shape("rect", (x, y, width, height), names, values, escape=escape)


def circle(
    x: str,
    y: str,
    r: str,
    names: Sequence[str] | None = None,
    values: Sequence[str] | None = None,
    *,
    escape: bool = False,
) -> str:
    # x/y, not cx/cy.
    return render_shape("circle", (x, y, r), names, values, escape=escape)


def line(
    x1: str,
    y1: str,
    x2: str,
    y2: str,
    names: Sequence[str] | None = None,
    values: Sequence[str] | None = None,
    *,
    escape: bool = False,
) -> str:
    return render_shape("line", (x1, y1, x2, y2), names, values, escape=escape)


def polygon(
    points: str,
    names: Sequence[str] | None = None,
    values: Sequence[str] | None = None,
    *,
    escape: bool = False,
) -> str:
    """Render a polygon; ``points`` is the whole vertex list, e.g. ``"0,0 10,0 5,10"``."""
    return render_shape("polygon", (points,), names, values, escape=escape)


def path(
    d: str,
    names: Sequence[str] | None = None,
    values: Sequence[str] | None = None,
    *,
    escape: bool = False,
) -> str:
    return render_shape("path", (d,), names, values, escape=escape)
