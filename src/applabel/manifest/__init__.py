"""Manifest placeholder injection."""

from .injector import (
    DEFAULT_PLACEHOLDER,
    InjectionResult,
    InjectionStatus,
    PlaceholderInjector,
    render_placeholders,
)

__all__ = [
    'DEFAULT_PLACEHOLDER',
    'InjectionResult',
    'InjectionStatus',
    'PlaceholderInjector',
    'render_placeholders',
]
