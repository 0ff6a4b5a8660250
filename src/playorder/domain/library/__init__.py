"""Library domain - discovering playable files on disk."""

from .exceptions import DiscoveryError, NoTracksFoundError
from .scanner import discover_tracks, is_supported_format, resolve_root

__all__ = [
    "DiscoveryError",
    "NoTracksFoundError",
    "discover_tracks",
    "is_supported_format",
    "resolve_root",
]
