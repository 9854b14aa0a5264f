"""Pick the first healthy candidate in priority order."""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional

LOGGER = logging.getLogger(__name__)


def select_healthy(candidates: Iterable[str], probe: Callable[[str], bool]) -> Optional[str]:
    """Return the first candidate whose probe succeeds, or None.

    Candidates are probed one at a time in the given order and probing stops
    at the first success.
    """
    LOGGER.info("Finding healthy IP")
    for candidate in candidates:
        if probe(candidate):
            LOGGER.info("Healthy IP found: %s", candidate)
            return candidate

    LOGGER.info("No candidate passed its health check")
    return None


# Copyright (c) Liam Suorsa
