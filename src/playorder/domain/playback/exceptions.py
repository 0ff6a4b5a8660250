"""Playback state exceptions for error handling."""


class PlaybackStateError(Exception):
    """Base exception for state file operations."""

    pass


class StateNotFoundError(PlaybackStateError):
    """Raised when no state file exists yet."""

    pass


class CorruptStateError(PlaybackStateError):
    """Raised when a state file cannot be parsed."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Corrupt state file {path}: {reason}")


class StateSaveError(PlaybackStateError):
    """Raised when the state file cannot be written."""

    pass
