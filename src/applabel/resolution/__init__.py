"""Label resolution: extract name and version constants and combine them."""

from .constants import DEFAULT_LABEL, DEFAULT_NAME_SYMBOL, DEFAULT_VERSION_SYMBOL
from .models import ExtractedConstants, LabelResolution, ResolutionStatus
from .resolver import LabelResolver, declaration_pattern, extract_constants, resolve_label

__all__ = [
    'DEFAULT_LABEL',
    'DEFAULT_NAME_SYMBOL',
    'DEFAULT_VERSION_SYMBOL',
    'ExtractedConstants',
    'LabelResolution',
    'ResolutionStatus',
    'LabelResolver',
    'declaration_pattern',
    'extract_constants',
    'resolve_label',
]
