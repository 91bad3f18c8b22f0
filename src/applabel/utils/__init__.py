"""Utility modules for applabel."""

from .console import (
    _rich_success,
    _rich_error,
    _rich_warning,
    _rich_info,
    _rich_echo,
    _rich_panel,
    _create_settings_table,
    _get_console,
    STATUS_SYMBOLS
)

__all__ = [
    '_rich_success',
    '_rich_error',
    '_rich_warning',
    '_rich_info',
    '_rich_echo',
    '_rich_panel',
    '_create_settings_table',
    '_get_console',
    'STATUS_SYMBOLS'
]
