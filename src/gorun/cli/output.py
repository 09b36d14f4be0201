"""
CLI Output Utilities
"""

from rich.console import Console
from rich.markup import escape

# Resolves sys.stdout at print time, so test runners can capture it
_console = Console(highlight=False, soft_wrap=True)


def get_console() -> Console:
    return _console


def print_error(error: Exception) -> None:
    """Report a failure as a single line on standard output."""
    get_console().print(f"[red]{escape(str(error))}[/red]")
