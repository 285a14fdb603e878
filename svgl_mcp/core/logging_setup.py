from __future__ import annotations

import logging
import sys

from .config import LOG_LEVEL


def setup_logging(level: str | None = None) -> None:
    # stdout carries MCP frames, so everything goes to stderr
    logging.basicConfig(
        level=(level or LOG_LEVEL or "INFO").upper(),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )
