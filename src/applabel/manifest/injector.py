"""Manifest placeholder injection for the resolved app label."""
from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Literal, Mapping, Optional, Tuple

DEFAULT_PLACEHOLDER = "appLabel"

InjectionStatus = Literal["UPDATED", "UNCHANGED", "MISSING"]

PLACEHOLDER_REGEX = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_.\-]*)\}")


@dataclass(frozen=True)
class InjectionResult:
    content: str
    status: InjectionStatus
    replacements: int
    output_path: Optional[Path] = None


def render_placeholders(content: str, values: Mapping[str, str]) -> Tuple[str, int]:
    """Substitute `${key}` tokens whose key appears in `values`.

    Unknown tokens are left as-is so other build-time placeholders survive.

    Returns:
        (rendered_content, number_of_substitutions)
    """
    count = 0

    def _sub(match: re.Match) -> str:
        nonlocal count
        key = match.group(1)
        if key not in values:
            return match.group(0)
        count += 1
        return values[key]

    return PLACEHOLDER_REGEX.sub(_sub, content), count


class PlaceholderInjector:
    """Writes a label into the `${placeholder}` tokens of a manifest template."""

    def __init__(self, placeholder: str = DEFAULT_PLACEHOLDER):
        if not PLACEHOLDER_REGEX.fullmatch(f"${{{placeholder}}}"):
            raise ValueError(f"Invalid placeholder name: {placeholder!r}")
        self.placeholder = placeholder

    def inject(self, content: str, label: str) -> InjectionResult:
        """Return template content with the label substituted."""
        rendered, count = render_placeholders(content, {self.placeholder: label})
        status: InjectionStatus = "UPDATED" if count else "MISSING"
        return InjectionResult(content=rendered, status=status, replacements=count)

    def inject_file(self, template_path: Path, label: str, output_path: Optional[Path] = None,
                    dry_run: bool = False) -> InjectionResult:
        """Render a manifest template and write it out.

        Args:
            template_path: Manifest containing `${placeholder}` tokens.
            label: Value to inject.
            output_path: Destination; defaults to rewriting the template in place.
            dry_run: Render without writing.
        Raises:
            FileNotFoundError: If the template does not exist.
        """
        template_path = Path(template_path)
        if not template_path.is_file():
            raise FileNotFoundError(f"Manifest template not found: {template_path}")
        output_path = Path(output_path) if output_path else template_path

        result = self.inject(template_path.read_text(encoding="utf-8"), label)

        existing = None
        if output_path.is_file():
            try:
                existing = output_path.read_text(encoding="utf-8")
            except OSError:
                existing = None

        status = result.status
        if status == "UPDATED" and existing == result.content:
            status = "UNCHANGED"

        # MISSING and UNCHANGED never touch the output file
        if not dry_run and status == "UPDATED":
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(result.content, encoding="utf-8")

        return InjectionResult(
            content=result.content,
            status=status,
            replacements=result.replacements,
            output_path=output_path,
        )
