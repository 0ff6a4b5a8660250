"""
Playback state persistence for playorder

Holds the play order, the position of the next track and the mode that
produced the order, and stores them in a small line-oriented text file
inside the scanned directory:

    <position>
    <mode>
    <path 1>
    <path 2>
    ...

Paths are written verbatim with no escaping, so a path containing a newline
cannot be stored. The file is a cache: anything unreadable is rebuilt from a
fresh scan.
"""

import os
import re
from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path

from loguru import logger

from .exceptions import CorruptStateError, StateNotFoundError, StateSaveError

STATE_FILE_NAME = "playorder.txt"

# Undecodable bytes in file names survive a save/load cycle
_ENCODING = "utf-8"
_ERRORS = "surrogateescape"

_INT_PATTERN = re.compile(r"[+-]?\d+")


class PlaybackMode(IntEnum):
    """Ordering mode. The integer value is the on-disk and CLI encoding."""

    SEQUENTIAL = 0
    SHUFFLED = 1


@dataclass
class PlaybackState:
    """Play order, next position and the mode that produced the order.

    ``position`` indexes the next track to play. It may equal
    ``len(order)`` after the last track of a pass, which means the order
    must wrap before anything else is played.
    """

    order: list[str] = field(default_factory=list)
    position: int = 0
    mode: PlaybackMode = PlaybackMode.SEQUENTIAL

    @property
    def is_finished(self) -> bool:
        """True when every track of the current pass has been played."""
        return self.position >= len(self.order)

    @property
    def current_track(self) -> str:
        """Path of the next track to play.

        Raises:
            IndexError: If the pass is finished and the order has not wrapped
        """
        return self.order[self.position]


def get_state_path(directory: Path) -> Path:
    """Location of the state file for a scanned directory."""
    return Path(directory) / STATE_FILE_NAME


def _parse_int(path: Path, line: str, field_name: str) -> int:
    value = line.strip()
    if not _INT_PATTERN.fullmatch(value):
        raise CorruptStateError(
            str(path), f"{field_name} is not an integer: {line!r}"
        )
    return int(value)


def load_state(path: Path) -> PlaybackState:
    """Load a previously saved playback state.

    Args:
        path: State file location

    Returns:
        The stored PlaybackState

    Raises:
        StateNotFoundError: If the file does not exist
        CorruptStateError: If the position or mode line is invalid
        OSError: If the file exists but cannot be read
    """
    path = Path(path)
    try:
        text = path.read_text(encoding=_ENCODING, errors=_ERRORS)
    except FileNotFoundError as e:
        raise StateNotFoundError(f"No state file at {path}") from e

    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    lines = [line[:-1] if line.endswith("\r") else line for line in lines]

    if len(lines) < 2:
        raise CorruptStateError(str(path), "missing position or mode line")

    position = _parse_int(path, lines[0], "position")
    if position < 0:
        raise CorruptStateError(str(path), f"negative position: {position}")

    mode_value = _parse_int(path, lines[1], "mode")
    try:
        mode = PlaybackMode(mode_value)
    except ValueError as e:
        raise CorruptStateError(str(path), f"unknown mode: {mode_value}") from e

    return PlaybackState(order=lines[2:], position=position, mode=mode)


def save_state(path: Path, state: PlaybackState) -> None:
    """Write the playback state to disk.

    The content goes to a temporary sibling first and is moved into place,
    so an interrupted write leaves the previous state file untouched.

    Args:
        path: State file location
        state: State to persist

    Raises:
        StateSaveError: If the file cannot be written
    """
    path = Path(path)
    temp_path = path.with_name(f".{path.name}.tmp")
    lines = [str(state.position), str(int(state.mode)), *state.order]

    try:
        with open(temp_path, "w", encoding=_ENCODING, errors=_ERRORS, newline="\n") as f:
            f.write("".join(f"{line}\n" for line in lines))
        os.replace(temp_path, path)
    except OSError as e:
        if temp_path.exists():
            try:
                temp_path.unlink()
            except OSError:
                logger.debug(f"Could not remove temporary state file {temp_path}")
        raise StateSaveError(f"Error saving playback order to {path}: {e}") from e

    logger.debug(
        f"Saved state: position={state.position} mode={state.mode.name} "
        f"tracks={len(state.order)}"
    )
