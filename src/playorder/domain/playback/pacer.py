"""Pause between tracks."""

import time
from typing import Callable

from loguru import logger


def pause_between_tracks(
    minutes: int, sleep: Callable[[float], None] = time.sleep
) -> None:
    """Sleep for the configured break; no-op when the break is zero."""
    if minutes <= 0:
        return
    logger.debug(f"Sleeping {minutes * 60}s before next track")
    sleep(minutes * 60)
