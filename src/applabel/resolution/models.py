"""Data models for label resolution."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional


class ResolutionStatus(Enum):
    """Outcome of a label resolution."""
    RESOLVED = "resolved"
    FILE_MISSING = "file_missing"
    UNREADABLE = "unreadable"
    NAME_MISSING = "name_missing"
    VERSION_MISSING = "version_missing"
    BOTH_MISSING = "both_missing"
    
    @property
    def description(self) -> str:
        """Human readable reason used in console reports."""
        return _STATUS_DESCRIPTIONS[self]


_STATUS_DESCRIPTIONS = {
    ResolutionStatus.RESOLVED: "label extracted",
    ResolutionStatus.FILE_MISSING: "constants file not found",
    ResolutionStatus.UNREADABLE: "constants file could not be read",
    ResolutionStatus.NAME_MISSING: "name declaration not found",
    ResolutionStatus.VERSION_MISSING: "version declaration not found",
    ResolutionStatus.BOTH_MISSING: "name and version declarations not found",
}


@dataclass(frozen=True)
class ExtractedConstants:
    """Name and version captured from a constants file."""
    name: str
    version: str
    
    @property
    def label(self) -> str:
        return f"{self.name} {self.version}"


@dataclass(frozen=True)
class LabelResolution:
    """Result of resolving a label from a constants file.
    
    `label` always holds a value: either the combined constants or the
    default label the resolver was configured with.
    """
    label: str
    status: ResolutionStatus
    source_path: Path
    constants: Optional[ExtractedConstants] = None
    
    @property
    def used_default(self) -> bool:
        return self.status is not ResolutionStatus.RESOLVED
    
    def __str__(self) -> str:
        return self.label
