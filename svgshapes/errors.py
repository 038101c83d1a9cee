"""Library error types."""

from __future__ import annotations


class AttributeLengthMismatch(ValueError):
    """Attribute names and values do not pair up one-to-one."""

    def __init__(self, names_count: int, values_count: int) -> None:
        self.names_count = names_count
        self.values_count = values_count
        super().__init__(
            f"Attribute length mismatch: {names_count} names, {values_count} values"
        )
