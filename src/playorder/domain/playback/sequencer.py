"""
Play order sequencing for playorder

Decides at startup whether the saved state can be resumed, then drives the
endless play/advance/persist loop. The state is saved after every track, so
an interrupted run replays at most the track that was playing.
"""

import random
from pathlib import Path
from typing import Callable, NamedTuple, NoReturn, Optional, Sequence

from loguru import logger

from playorder.core.output import log

from .exceptions import PlaybackStateError, StateNotFoundError, StateSaveError
from .pacer import pause_between_tracks
from .player import PlayResult
from .state import PlaybackMode, PlaybackState, load_state, save_state

PlayFunc = Callable[[str], PlayResult]
PauseFunc = Callable[[int], None]


class TrackOutcome(NamedTuple):
    """Result of one loop iteration."""

    track_path: str
    result: PlayResult
    saved: bool


def shuffle_order(
    order: Sequence[str], rng: Optional[random.Random] = None
) -> list[str]:
    """Return a new random permutation of ``order``.

    Each call seeds its own generator from system entropy unless ``rng`` is
    given, so consecutive passes get independent permutations.
    """
    rng = rng or random.Random()
    shuffled = list(order)
    rng.shuffle(shuffled)
    return shuffled


def _load_reusable_state(
    state_path: Path, file_count: int, mode: PlaybackMode
) -> Optional[PlaybackState]:
    try:
        state = load_state(state_path)
    except StateNotFoundError:
        logger.info(f"No saved playback order at {state_path}")
        return None
    except (PlaybackStateError, OSError) as e:
        log(f"Error reading playback order, a new order will be created: {e}", "warning")
        return None

    if state.mode != mode:
        log("Mode has changed, a new order will be created", "warning")
        return None

    # Only the count is compared, not the file identities
    if len(state.order) != file_count:
        log(
            f"File list has changed ({len(state.order)} -> {file_count} files), "
            "a new order will be created",
            "warning",
        )
        return None

    return state


def reconcile_state(
    files: Sequence[str],
    state_path: Path,
    mode: PlaybackMode,
    rng: Optional[random.Random] = None,
) -> tuple[PlaybackState, bool]:
    """Pick the playback state for this run.

    Reuses the saved state untouched when it loads cleanly, was produced by
    the same mode and holds as many entries as ``files``. Otherwise builds a
    fresh order starting at position 0 and saves it right away.

    Args:
        files: Currently discovered files
        state_path: State file location
        mode: Requested ordering mode
        rng: Random source for the initial shuffle (tests)

    Returns:
        Tuple of (state, resumed)

    Raises:
        ValueError: If ``files`` is empty
        StateSaveError: If a fresh state cannot be saved
    """
    if not files:
        raise ValueError("Cannot build a play order without files")

    state = _load_reusable_state(state_path, len(files), mode)
    if state is not None:
        logger.info(
            f"Resuming saved order at position {state.position} of {len(state.order)}"
        )
        return state, True

    if mode == PlaybackMode.SHUFFLED:
        order = shuffle_order(files, rng)
    else:
        order = list(files)

    state = PlaybackState(order=order, position=0, mode=mode)
    save_state(state_path, state)
    logger.info(f"Created new {mode.name.lower()} order of {len(order)} tracks")
    return state, False


def wrap_if_finished(
    state: PlaybackState, rng: Optional[random.Random] = None
) -> bool:
    """Restart the pass once every track has been played.

    Shuffled orders get a new permutation; sequential orders keep theirs.

    Returns:
        True if the state wrapped
    """
    if not state.is_finished:
        return False

    if state.mode == PlaybackMode.SHUFFLED:
        state.order = shuffle_order(state.order, rng)
    state.position = 0
    logger.info(f"Reached end of order, starting new {state.mode.name.lower()} pass")
    return True


def advance(state: PlaybackState, state_path: Path) -> bool:
    """Move to the next track and persist.

    A failed save is logged and playback continues; the finished track
    will be replayed after a restart.

    Returns:
        True if the new position was saved
    """
    state.position += 1
    try:
        save_state(state_path, state)
    except StateSaveError as e:
        log(str(e), "error")
        return False
    return True


def play_next(
    state: PlaybackState,
    state_path: Path,
    play: PlayFunc,
    break_minutes: int = 0,
    pause: PauseFunc = pause_between_tracks,
    rng: Optional[random.Random] = None,
) -> TrackOutcome:
    """Run one iteration of the playback loop.

    Wraps if needed, plays the current track, advances and saves whatever
    the player reported, then waits out the break.
    """
    wrap_if_finished(state, rng)

    track_path = state.current_track
    log(f"Playing: {track_path}")

    result = play(track_path)
    if not result.success:
        log(f"Error playing file {track_path}: {result.error}", "warning")

    saved = advance(state, state_path)

    if break_minutes > 0:
        log(f"Break for {break_minutes} minute(s)...")
        pause(break_minutes)

    return TrackOutcome(track_path=track_path, result=result, saved=saved)


def run_playback_loop(
    state: PlaybackState,
    state_path: Path,
    play: PlayFunc,
    break_minutes: int = 0,
    pause: PauseFunc = pause_between_tracks,
) -> NoReturn:
    """Play tracks forever. Only process termination stops the loop."""
    while True:
        play_next(state, state_path, play, break_minutes=break_minutes, pause=pause)
