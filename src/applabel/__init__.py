"""applabel: derive an app display label from a constants source file."""

from .version import __version__
from .resolution import (
    DEFAULT_LABEL,
    ExtractedConstants,
    LabelResolution,
    LabelResolver,
    ResolutionStatus,
    extract_constants,
    resolve_label,
)
from .manifest import InjectionResult, PlaceholderInjector, render_placeholders

__all__ = [
    '__version__',
    'DEFAULT_LABEL',
    'ExtractedConstants',
    'LabelResolution',
    'LabelResolver',
    'ResolutionStatus',
    'extract_constants',
    'resolve_label',
    'InjectionResult',
    'PlaceholderInjector',
    'render_placeholders',
]
