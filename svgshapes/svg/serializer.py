"""Serialize a single self-closing SVG element from parallel attribute sequences.

Values are written verbatim by default. A value containing ``"`` therefore
produces malformed markup unless the caller passes ``escape=True``.
"""

from __future__ import annotations

import logging
from typing import Sequence

from svgshapes.errors import AttributeLengthMismatch

logger = logging.getLogger(__name__)

# Ampersand must be replaced first so later entities are not double-escaped.
_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
)


def check_lengths(names: Sequence[str], values: Sequence[str]) -> None:
    """Raise AttributeLengthMismatch unless names and values have equal length."""
    if len(names) != len(values):
        logger.debug("Refusing to serialize %d names against %d values", len(names), len(values))
        raise AttributeLengthMismatch(len(names), len(values))


def escape_value(value: str) -> str:
    for raw, entity in _ESCAPES:
        value = value.replace(raw, entity)
    return value


def element(
    tag: str,
    names: Sequence[str],
    values: Sequence[str],
    *,
    escape: bool = False,
) -> str:
    """Render ``<tag n1="v1" n2="v2"/>``.

    With no attributes the result is ``<tag />``. The tag and attribute names
    are never validated or escaped.
    """
    check_lengths(names, values)

    if escape:
        values = [escape_value(v) for v in values]

    attr_str = " ".join(f'{name}="{value}"' for name, value in zip(names, values))
    return f"<{tag} {attr_str}/>"
