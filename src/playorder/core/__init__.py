"""Core infrastructure layer - no business logic dependencies.

This module provides foundation-level services:
- Configuration management (TOML)
- Logging and operator output (Loguru)
- Console management (Rich)
"""

# Configuration
from .config import (
    LOG_LEVELS,
    Config,
    LoggingConfig,
    MusicConfig,
    PlayerConfig,
    default_player_command,
    get_config_dir,
    get_config_path,
    get_data_dir,
    get_log_file_path,
    load_config,
    parse_player_command,
    validate_log_level,
)

# Console
from .console import get_console, print_error, safe_print

# Output
from .output import log, setup_loguru

__all__ = [
    # Config
    "LOG_LEVELS",
    "Config",
    "LoggingConfig",
    "MusicConfig",
    "PlayerConfig",
    "default_player_command",
    "get_config_dir",
    "get_config_path",
    "get_data_dir",
    "get_log_file_path",
    "load_config",
    "parse_player_command",
    "validate_log_level",
    # Console
    "get_console",
    "print_error",
    "safe_print",
    # Output
    "log",
    "setup_loguru",
]
