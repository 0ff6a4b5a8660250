"""playorder - resumable directory playback sequencer."""

__version__ = "0.1.0"
