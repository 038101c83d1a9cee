"""Element data model."""

from __future__ import annotations

from typing import Iterable

from pydantic import BaseModel, Field

from svgshapes.svg.serializer import check_lengths, element


class SvgElement(BaseModel):
    """A tag with parallel attribute name/value lists.

    Lengths are checked when the element is rendered, not when it is built.
    """

    tag: str
    names: list[str] = Field(default_factory=list)
    values: list[str] = Field(default_factory=list)

    @classmethod
    def from_pairs(cls, tag: str, pairs: Iterable[tuple[str, str]]) -> SvgElement:
        names: list[str] = []
        values: list[str] = []
        for name, value in pairs:
            names.append(name)
            values.append(value)
        return cls(tag=tag, names=names, values=values)

    @property
    def pairs(self) -> list[tuple[str, str]]:
        check_lengths(self.names, self.values)
        return list(zip(self.names, self.values))

    def render(self, escape: bool = False) -> str:
        return element(self.tag, self.names, self.values, escape=escape)
