"""Resolve an app label from the name and version constants of a source file."""

import re
from pathlib import Path
from typing import Optional, Tuple, Union

from .constants import (
    DECLARATION_TEMPLATE,
    DEFAULT_LABEL,
    DEFAULT_NAME_SYMBOL,
    DEFAULT_VERSION_SYMBOL,
)
from .models import ExtractedConstants, LabelResolution, ResolutionStatus


def declaration_pattern(symbol: str) -> "re.Pattern[str]":
    """Compile the declaration pattern for a constant symbol.
    
    Args:
        symbol (str): Constant name, matched literally.
    
    Returns:
        re.Pattern: Pattern whose first group captures the quoted value.
    """
    if not symbol:
        raise ValueError("Constant symbol must not be empty")
    return re.compile(DECLARATION_TEMPLATE.format(symbol=re.escape(symbol)))


def _find_values(text: str, name_symbol: str, version_symbol: str) -> Tuple[Optional[str], Optional[str]]:
    name_match = declaration_pattern(name_symbol).search(text)
    version_match = declaration_pattern(version_symbol).search(text)
    return (
        name_match.group(1) if name_match else None,
        version_match.group(1) if version_match else None,
    )


def extract_constants(
    text: str,
    name_symbol: str = DEFAULT_NAME_SYMBOL,
    version_symbol: str = DEFAULT_VERSION_SYMBOL,
) -> Optional[ExtractedConstants]:
    """Extract the name and version constants from source text.
    
    Each declaration is searched independently, so their order in the text
    does not matter. The first match of each wins.
    
    Args:
        text (str): Source text to scan.
        name_symbol (str): Symbol holding the app name.
        version_symbol (str): Symbol holding the app version.
    
    Returns:
        Optional[ExtractedConstants]: Both values, or None if either is absent.
    """
    name, version = _find_values(text, name_symbol, version_symbol)
    if name is None or version is None:
        return None
    return ExtractedConstants(name=name, version=version)


class LabelResolver:
    """Derives the app label from a constants file, defaulting on any failure."""
    
    def __init__(
        self,
        default_label: str = DEFAULT_LABEL,
        name_symbol: str = DEFAULT_NAME_SYMBOL,
        version_symbol: str = DEFAULT_VERSION_SYMBOL,
    ):
        if default_label is None:
            raise ValueError("Default label must not be None")
        # Validate symbols eagerly so misconfiguration surfaces at construction
        declaration_pattern(name_symbol)
        declaration_pattern(version_symbol)
        self.default_label = default_label
        self.name_symbol = name_symbol
        self.version_symbol = version_symbol
    
    def resolve(self, path: Union[str, Path]) -> LabelResolution:
        """Resolve the label for a constants file.
        
        Never raises for file or content problems; the returned status
        records why the default label was used.
        
        Args:
            path (Union[str, Path]): Path to the constants file.
        
        Returns:
            LabelResolution: Resolved label with its status.
        """
        path = Path(path)
        
        if not path.is_file():
            return self._fallback(path, ResolutionStatus.FILE_MISSING)
        
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError):
            return self._fallback(path, ResolutionStatus.UNREADABLE)
        
        name, version = _find_values(text, self.name_symbol, self.version_symbol)
        if name is None and version is None:
            return self._fallback(path, ResolutionStatus.BOTH_MISSING)
        if name is None:
            return self._fallback(path, ResolutionStatus.NAME_MISSING)
        if version is None:
            return self._fallback(path, ResolutionStatus.VERSION_MISSING)
        
        constants = ExtractedConstants(name=name, version=version)
        return LabelResolution(
            label=constants.label,
            status=ResolutionStatus.RESOLVED,
            source_path=path,
            constants=constants,
        )
    
    def resolve_label(self, path: Union[str, Path]) -> str:
        """Resolve and return only the label string."""
        return self.resolve(path).label
    
    def _fallback(self, path: Path, status: ResolutionStatus) -> LabelResolution:
        return LabelResolution(label=self.default_label, status=status, source_path=path)


def resolve_label(path: Union[str, Path], default_label: str = DEFAULT_LABEL) -> str:
    """Resolve a label with the default symbols."""
    return LabelResolver(default_label=default_label).resolve_label(path)
