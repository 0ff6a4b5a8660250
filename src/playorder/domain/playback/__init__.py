"""Playback domain - play order state, sequencing and the external player.

This domain handles:
- Persisting the play order and position (state file)
- Resume/regenerate decisions and wraparound
- Running the external player process
- Pausing between tracks
"""

# Exceptions
from .exceptions import (
    CorruptStateError,
    PlaybackStateError,
    StateNotFoundError,
    StateSaveError,
)

# Pacer
from .pacer import pause_between_tracks

# Player integration
from .player import PlayResult, build_player_command, check_player_available, play_file

# Sequencing
from .sequencer import (
    TrackOutcome,
    advance,
    play_next,
    reconcile_state,
    run_playback_loop,
    shuffle_order,
    wrap_if_finished,
)

# State management
from .state import (
    STATE_FILE_NAME,
    PlaybackMode,
    PlaybackState,
    get_state_path,
    load_state,
    save_state,
)

__all__ = [
    # Exceptions
    "CorruptStateError",
    "PlaybackStateError",
    "StateNotFoundError",
    "StateSaveError",
    # Pacer
    "pause_between_tracks",
    # Player
    "PlayResult",
    "build_player_command",
    "check_player_available",
    "play_file",
    # Sequencer
    "TrackOutcome",
    "advance",
    "play_next",
    "reconcile_state",
    "run_playback_loop",
    "shuffle_order",
    "wrap_if_finished",
    # State
    "STATE_FILE_NAME",
    "PlaybackMode",
    "PlaybackState",
    "get_state_path",
    "load_state",
    "save_state",
]
