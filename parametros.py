"""Parametros globales del proyecto."""

from __future__ import annotations

import logging

LOG_LEVEL = logging.INFO
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DISPLAY_DECIMALS = 2
TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S"

logging.basicConfig(
    level=LOG_LEVEL,
    format=LOG_FORMAT,
)
