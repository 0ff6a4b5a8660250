"""
playorder CLI - Entry point

Scans a directory for audio files and plays them one after another with an
external player, resuming where the previous run stopped.
"""

import argparse
import sys
from typing import Optional

from loguru import logger

from playorder import __version__
from playorder.core.config import (
    LOG_LEVELS,
    Config,
    get_log_file_path,
    load_config,
    parse_player_command,
    validate_log_level,
)
from playorder.core.console import print_error, safe_print
from playorder.core.output import log, setup_loguru
from playorder.domain import library
from playorder.domain import playback

EXIT_FATAL = 1
EXIT_INTERRUPTED = 130


def non_negative_int(value: str) -> int:
    """argparse type for the break duration."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="playorder",
        description="Play every audio file under a directory, resuming across restarts",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    # Single-dash spellings keep older invocations working
    parser.add_argument(
        "--dir", "-dir",
        dest="dir",
        required=True,
        help="Directory containing audio files or subdirectories",
    )
    parser.add_argument(
        "--break", "-break",
        dest="break_minutes",
        type=non_negative_int,
        default=0,
        metavar="MINUTES",
        help="Break between files in minutes (default: 0, no break)",
    )
    parser.add_argument(
        "--shuffle", "-shuffle",
        dest="shuffle",
        type=int,
        choices=[0, 1],
        default=0,
        help="1 to shuffle, 0 for sequential order (default: 0)",
    )
    parser.add_argument(
        "--player",
        help='Player command, e.g. "mpv --no-video" (overrides config)',
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Log level (overrides config)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Also write log records to stderr",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def apply_cli_overrides(config: Config, args: argparse.Namespace) -> Config:
    """Apply command-line overrides on top of the loaded configuration."""
    if args.player:
        config.player.command = parse_player_command(args.player)
    if args.log_level:
        config.logging.level = args.log_level
    if args.verbose:
        config.logging.console_output = True
    return config


def fatal(message: str) -> int:
    """Report a startup failure and return the exit code."""
    logger.error(message)
    print_error(f"Error: {message}")
    return EXIT_FATAL


def run(args: argparse.Namespace, config: Optional[Config] = None) -> int:
    """
    Start the sequencer.

    Only returns on a fatal startup error or an interrupt; otherwise the
    playback loop runs until the process is killed.

    Args:
        args: Parsed command-line arguments
        config: Preloaded configuration (default: load from disk)

    Returns:
        Exit code
    """
    try:
        config = apply_cli_overrides(config or load_config(), args)
    except ValueError as e:
        return fatal(str(e))

    config.logging.level = validate_log_level(config.logging.level)
    log_file = get_log_file_path(config)
    try:
        setup_loguru(
            log_file,
            level=config.logging.level,
            rotation_mb=config.logging.max_file_size_mb,
            retention=config.logging.backup_count,
            console_output=config.logging.console_output,
        )
    except OSError as e:
        return fatal(f"Cannot open log file {log_file}: {e}")

    mode = playback.PlaybackMode(args.shuffle)

    try:
        root = library.resolve_root(args.dir)
        files = library.discover_tracks(
            root, config.music.supported_formats, recursive=config.music.scan_recursive
        )
    except library.DiscoveryError as e:
        return fatal(str(e))

    log(f"Found {len(files)} audio files in {root}")

    if not playback.check_player_available(config):
        log(f"Player '{config.player.command[0]}' not found on PATH", "warning")

    state_path = playback.get_state_path(root)
    try:
        state, resumed = playback.reconcile_state(files, state_path, mode)
    except playback.StateSaveError as e:
        return fatal(str(e))

    if resumed:
        next_index = 0 if state.is_finished else state.position
        log(f"Resuming at track {next_index + 1}/{len(state.order)}")
    else:
        log(f"Starting new {mode.name.lower()} order of {len(state.order)} tracks")

    try:
        playback.run_playback_loop(
            state,
            state_path,
            play=lambda track_path: playback.play_file(track_path, config),
            break_minutes=args.break_minutes,
        )
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        safe_print("\nStopped. Playback will resume from the last saved position.", style="yellow")
        return EXIT_INTERRUPTED


def main(argv: Optional[list[str]] = None) -> None:
    """Main entry point for the playorder command."""
    parser = build_parser()
    args = parser.parse_args(argv)
    sys.exit(run(args))


if __name__ == "__main__":
    main()
