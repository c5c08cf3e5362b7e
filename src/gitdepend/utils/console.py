"""Console utility functions for formatting and output."""

from typing import Optional, Iterable, Tuple

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.theme import Theme


# Status symbols for consistent iconography
STATUS_SYMBOLS = {
    'success': '✨',
    'running': '🚀',
    'gear': '⚙️',
    'info': '💡',
    'warning': '⚠️',
    'error': '❌',
    'check': '✅',
    'list': '📋',
    'package': '📦',
    'branch': '🌿',
}

BANNER = "=" * 80

_THEME = Theme({
    "info": "cyan",
    "warning": "yellow",
    "error": "bold red",
    "success": "bold green",
    "muted": "dim white",
    "title": "bold cyan",
})

_console = None
_error_console = None


def _get_console() -> Console:
    """Get the shared Rich console, created on first use."""
    global _console
    if _console is None:
        _console = Console(theme=_THEME, highlight=False)
    return _console


def _get_error_console() -> Console:
    """Get the shared Rich console writing to standard error."""
    global _error_console
    if _error_console is None:
        _error_console = Console(theme=_THEME, stderr=True, highlight=False)
    return _error_console


def _rich_echo(message: str, color: str = "white", bold: bool = False, symbol: str = None, err: bool = False):
    """Echo a message with Rich formatting."""
    if symbol and symbol in STATUS_SYMBOLS:
        message = f"{STATUS_SYMBOLS[symbol]} {message}"

    style = f"bold {color}" if bold else color
    console = _get_error_console() if err else _get_console()
    # Git and nuget output may contain square brackets
    console.print(message, style=style, markup=False)


def _rich_success(message: str, symbol: str = None):
    """Display success message with green color and bold styling."""
    _rich_echo(message, color="green", symbol=symbol, bold=True)


def _rich_error(message: str, symbol: str = None):
    """Display error message with red color on standard error."""
    _rich_echo(message, color="red", symbol=symbol, err=True)


def _rich_warning(message: str, symbol: str = None):
    """Display warning message with yellow color."""
    _rich_echo(message, color="yellow", symbol=symbol)


def _rich_info(message: str, symbol: str = None):
    """Display info message with blue color."""
    _rich_echo(message, color="blue", symbol=symbol)


def _rich_banner():
    _rich_echo(BANNER, color="muted")


def _rich_panel(content: str, title: str = None, style: str = "cyan"):
    """Display content in a Rich panel."""
    _get_console().print(Panel(content, title=title, border_style=style))


def _create_table(title: str, columns: Iterable[str], rows: Iterable[Tuple[str, ...]]) -> Table:
    """Create a Rich table with one column per header."""
    table = Table(title=f"{STATUS_SYMBOLS['list']} {title}", show_header=True, header_style="bold cyan")
    for index, column in enumerate(columns):
        table.add_column(column, style="bold white" if index == 0 else "white")

    for row in rows:
        table.add_row(*[str(value) for value in row])

    return table


def _print_table(table: Optional[Table]):
    if table is not None:
        _get_console().print(table)
