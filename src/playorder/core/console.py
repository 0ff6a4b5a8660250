"""Rich consoles for operator messages.

Progress messages ("Playing: ...", break notices) go to stdout so they
interleave with the player's own output. Fatal startup errors go to stderr.
Markup is disabled on both: track paths often contain square brackets.
"""

from rich.console import Console

_consoles: dict[bool, Console] = {}


def get_console(stderr: bool = False) -> Console:
    """Return the shared stdout console, or the stderr one."""
    if stderr not in _consoles:
        _consoles[stderr] = Console(stderr=stderr, markup=False, highlight=False)
    return _consoles[stderr]


def safe_print(message: str, style: str | None = None) -> None:
    """Print an operator message on stdout, optionally styled."""
    get_console().print(message, style=style)


def print_error(message: str) -> None:
    """Print a fatal error on stderr in bold red."""
    get_console(stderr=True).print(message, style="bold red")
