"""
External player integration for playorder
Runs one player process per track and waits for it to finish.
"""

import shutil
import subprocess
from typing import NamedTuple, Optional

from loguru import logger

from playorder.core.config import Config


class PlayResult(NamedTuple):
    """Outcome of a single player invocation."""

    success: bool
    returncode: Optional[int] = None
    error: Optional[str] = None


def check_player_available(config: Config) -> bool:
    """Check if the configured player executable is on PATH."""
    return shutil.which(config.player.command[0]) is not None


def build_player_command(config: Config, track_path: str) -> list[str]:
    """Player command line for one track."""
    return [*config.player.command, track_path]


def play_file(track_path: str, config: Config) -> PlayResult:
    """Play one file to completion.

    Blocks until the player exits. The player inherits stdout and stderr,
    so its output streams straight to the operator's terminal. There is no
    timeout: the call lasts as long as the track.

    Never raises for player failures; they are reported in the result.
    """
    cmd = build_player_command(config, track_path)
    logger.debug(f"Running player: {cmd}")

    try:
        completed = subprocess.run(cmd, check=False)
    except FileNotFoundError as e:
        return PlayResult(success=False, error=f"Player not found: {e.filename or cmd[0]}")
    except (subprocess.SubprocessError, OSError) as e:
        return PlayResult(success=False, error=str(e))

    if completed.returncode != 0:
        return PlayResult(
            success=False,
            returncode=completed.returncode,
            error=f"Player exited with status {completed.returncode}",
        )
    return PlayResult(success=True, returncode=0)
