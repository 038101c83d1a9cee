"""Shared test fixtures."""

from __future__ import annotations

import pytest


# Attribute sets a caller would typically pass as extra pairs
STYLE_NAMES = ["fill", "stroke", "stroke-width"]
STYLE_VALUES = ["none", "currentColor", "2"]

TRIANGLE_POINTS = "0,0 10,0 5,10"
DIAGONAL_PATH = "M0 0 L10 10"


@pytest.fixture
def style_pairs() -> tuple[list[str], list[str]]:
    return list(STYLE_NAMES), list(STYLE_VALUES)


@pytest.fixture
def quoted_value() -> str:
    return 'say "hi"'
