"""Domain layer - discovery and playback logic."""
