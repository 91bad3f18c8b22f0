"""Console utility functions for formatting and output."""

import click
from typing import Any

from colorama import Fore, Style, init
from rich.console import Console
from rich.errors import ConsoleError
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.theme import Theme

init(autoreset=True)


# Status symbols for consistent iconography
STATUS_SYMBOLS = {
    'success': '✨',
    'info': '💡',
    'warning': '⚠️',
    'error': '❌',
    'check': '✅',
    'list': '📋',
    'gear': '⚙️',
    'tag': '🏷️',
}

CUSTOM_THEME = Theme({
    "info": "cyan",
    "warning": "yellow",
    "error": "bold red",
    "success": "bold green",
    "muted": "dim white",
    "title": "bold cyan",
})

_COLORAMA_MAP = {
    'red': Fore.RED,
    'green': Fore.GREEN,
    'yellow': Fore.YELLOW,
    'blue': Fore.BLUE,
    'cyan': Fore.CYAN,
    'white': Fore.WHITE,
    'magenta': Fore.MAGENTA,
    'muted': Fore.WHITE,
}


def _get_console() -> Console:
    """Get a Rich console bound to the current stdout."""
    return Console(theme=CUSTOM_THEME)


def _rich_echo(message: str, color: str = "white", bold: bool = False, symbol: str = None):
    """Echo message with Rich formatting, falling back to colorama."""
    if symbol and symbol in STATUS_SYMBOLS:
        message = f"{STATUS_SYMBOLS[symbol]} {message}"
    
    style_str = f"bold {color}" if bold else color
    try:
        _get_console().print(escape(message), style=style_str, soft_wrap=True)
        return
    except ConsoleError:
        pass
    
    color_code = _COLORAMA_MAP.get(color, Fore.WHITE)
    style_code = Style.BRIGHT if bold else ""
    click.echo(f"{color_code}{style_code}{message}{Style.RESET_ALL}")


def _rich_success(message: str, symbol: str = None):
    """Display success message with green color and bold styling."""
    _rich_echo(message, color="green", symbol=symbol, bold=True)


def _rich_error(message: str, symbol: str = None):
    """Display error message with red color."""
    _rich_echo(message, color="red", symbol=symbol)


def _rich_warning(message: str, symbol: str = None):
    """Display warning message with yellow color."""
    _rich_echo(message, color="yellow", symbol=symbol)


def _rich_info(message: str, symbol: str = None):
    """Display info message with blue color."""
    _rich_echo(message, color="blue", symbol=symbol)


def _rich_panel(content: Any, title: str = None, style: str = "cyan"):
    """Display content in a Rich panel."""
    _get_console().print(Panel(content, title=title, border_style=style))


def _create_settings_table(rows: list, title: str = "Settings") -> Table:
    """Create a Rich table of (key, value, source) rows."""
    table = Table(title=f"{STATUS_SYMBOLS['list']} {title}", show_header=True, header_style="bold cyan")
    table.add_column("Setting", style="bold white")
    table.add_column("Value", style="white")
    table.add_column("Source", style="muted")
    
    for row in rows:
        if isinstance(row, dict):
            table.add_row(row.get('key', ''), escape(str(row.get('value', ''))), row.get('source', ''))
        else:
            key, value, source = (list(row) + ["", "", ""])[:3]
            table.add_row(str(key), escape(str(value)), str(source))
    
    return table
