"""
Configuration management for playorder
"""

import os
import shlex
import sys
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

LOG_LEVELS = ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


def default_player_command() -> List[str]:
    """Pick the player command for the current platform."""
    if sys.platform == "darwin":
        return ["afplay"]
    return ["mpv", "--no-video", "--really-quiet"]


@dataclass
class MusicConfig:
    """Configuration for file discovery."""

    supported_formats: List[str] = field(default_factory=lambda: [".mp3"])
    scan_recursive: bool = True


@dataclass
class PlayerConfig:
    """Configuration for the external player process."""

    command: List[str] = field(default_factory=default_player_command)


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_file: Optional[str] = (
        None  # Custom log file path (default: ~/.local/share/playorder/playorder.log)
    )
    max_file_size_mb: int = 10  # Maximum log file size before rotation
    backup_count: int = 5  # Number of backup files to keep
    console_output: bool = False  # Also output to stderr (for debugging)


@dataclass
class Config:
    """Main configuration object."""

    music: MusicConfig = field(default_factory=MusicConfig)
    player: PlayerConfig = field(default_factory=PlayerConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def get_config_dir() -> Path:
    """Get the configuration directory path."""
    config_home = os.environ.get("XDG_CONFIG_HOME")
    if config_home:
        return Path(config_home) / "playorder"
    return Path.home() / ".config" / "playorder"


def get_config_path() -> Path:
    """Get the main configuration file path.

    Checks for config.toml in the following order:
    1. Current working directory
    2. XDG_CONFIG_HOME/playorder (or ~/.config/playorder)
    """
    local_config = Path.cwd() / "config.toml"
    if local_config.exists():
        return local_config

    return get_config_dir() / "config.toml"


def get_data_dir() -> Path:
    """Get the data directory path."""
    data_home = os.environ.get("XDG_DATA_HOME")
    if data_home:
        return Path(data_home) / "playorder"
    return Path.home() / ".local" / "share" / "playorder"


def parse_player_command(value) -> List[str]:
    """Accept a player command as a shell string or a list of arguments."""
    if isinstance(value, str):
        command = shlex.split(value)
    else:
        command = [str(part) for part in value]
    if not command:
        raise ValueError("Player command must not be empty")
    return command


def validate_log_level(level: str, source: str = "configuration") -> str:
    """Return the upper-cased level, or INFO with a warning if unknown."""
    normalized = str(level).strip().upper()
    if normalized in LOG_LEVELS:
        return normalized
    print(f"Warning: Invalid log level {level!r} in {source}, using INFO.")
    return "INFO"


def _require_type(section: str, key: str, value, expected: type):
    if not isinstance(value, expected):
        raise TypeError(
            f"[{section}] {key} must be a {expected.__name__}, got {type(value).__name__}"
        )
    return value


def _apply_env_overrides(config: Config) -> None:
    player_command = os.environ.get("PLAYORDER_PLAYER", "").strip()
    if player_command:
        config.player.command = parse_player_command(player_command)

    log_level = os.environ.get("PLAYORDER_LOG_LEVEL", "").strip()
    if log_level:
        config.logging.level = validate_log_level(log_level, "PLAYORDER_LOG_LEVEL")


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load configuration from file, falling back to defaults.

    Environment variables override TOML values:
    - PLAYORDER_PLAYER
    - PLAYORDER_LOG_LEVEL
    """
    # Load .env file from config directory if it exists
    from dotenv import load_dotenv

    env_path = get_config_dir() / ".env"
    if env_path.exists():
        load_dotenv(env_path)

    config_path = config_path or get_config_path()
    config = Config()

    if not config_path.exists():
        _apply_env_overrides(config)
        return config

    try:
        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

        if "music" in toml_data:
            music_data = toml_data["music"]
            formats = _require_type(
                "music",
                "supported_formats",
                music_data.get("supported_formats", config.music.supported_formats),
                list,
            )
            for ext in formats:
                _require_type("music", "supported_formats entry", ext, str)
            config.music = MusicConfig(
                supported_formats=[
                    ext.lower() if ext.startswith(".") else f".{ext.lower()}"
                    for ext in formats
                ],
                scan_recursive=_require_type(
                    "music",
                    "scan_recursive",
                    music_data.get("scan_recursive", config.music.scan_recursive),
                    bool,
                ),
            )

        if "player" in toml_data:
            player_data = toml_data["player"]
            config.player = PlayerConfig(
                command=parse_player_command(
                    player_data.get("command", config.player.command)
                ),
            )

        if "logging" in toml_data:
            logging_data = toml_data["logging"]
            log_file = logging_data.get("log_file")
            if log_file:
                log_file = str(Path(log_file).expanduser())
            config.logging = LoggingConfig(
                level=validate_log_level(
                    logging_data.get("level", config.logging.level), str(config_path)
                ),
                log_file=log_file,
                max_file_size_mb=logging_data.get(
                    "max_file_size_mb", config.logging.max_file_size_mb
                ),
                backup_count=logging_data.get(
                    "backup_count", config.logging.backup_count
                ),
                console_output=_require_type(
                    "logging",
                    "console_output",
                    logging_data.get("console_output", config.logging.console_output),
                    bool,
                ),
            )

    except (OSError, tomllib.TOMLDecodeError, ValueError, TypeError, AttributeError) as e:
        print(f"Error loading configuration from {config_path}: {e}")
        print("Using default configuration.")
        config = Config()

    _apply_env_overrides(config)
    return config


def get_log_file_path(config: Config) -> Path:
    """Get the path to the log file."""
    if config.logging.log_file:
        return Path(config.logging.log_file)
    return get_data_dir() / "playorder.log"
