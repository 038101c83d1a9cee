"""Logging bootstrap for scripts and applications embedding svgshapes."""

from __future__ import annotations

import logging

from dotenv import load_dotenv

from svgshapes.config import Settings

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Configure root logging once. The library itself never calls this on import."""
    load_dotenv()
    if level is None:
        level = Settings().svgshapes_log_level
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )
