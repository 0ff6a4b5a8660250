"""Library-specific exceptions for error handling."""


class DiscoveryError(Exception):
    """Base exception for file discovery failures."""

    pass


class NoTracksFoundError(DiscoveryError):
    """Raised when a scan finds no playable files."""

    def __init__(self, directory: str, supported_formats: list[str]):
        self.directory = directory
        self.supported_formats = supported_formats
        formats = ", ".join(supported_formats)
        super().__init__(f"No audio files ({formats}) found in {directory}")
