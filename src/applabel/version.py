"""Version management for applabel."""

import re
import sys
from importlib.metadata import version, PackageNotFoundError
from pathlib import Path

# Build-time version constant (will be injected during build)
__BUILD_VERSION__ = None


def get_version() -> str:
    """
    Get the current version.
    
    First tries the build-time constant, then installed package metadata,
    then falls back to scanning pyproject.toml.
    
    Returns:
        str: Version string
    """
    if __BUILD_VERSION__:
        return __BUILD_VERSION__
    
    try:
        return version("applabel")
    except PackageNotFoundError:
        pass
    
    # Development checkout: read pyproject.toml next to src/
    if getattr(sys, 'frozen', False):
        pyproject_path = Path(sys._MEIPASS) / 'pyproject.toml'
    else:
        pyproject_path = Path(__file__).parent.parent.parent / "pyproject.toml"
    
    if pyproject_path.exists():
        try:
            content = pyproject_path.read_text(encoding='utf-8')
        except OSError:
            return "unknown"
        
        match = re.search(r'^version\s*=\s*["\']([^"\']+)["\']', content, re.MULTILINE)
        if match:
            version_str = match.group(1)
            # PEP 440 patterns: x.y.z or x.y.z{a|b|rc}N
            if re.match(r'^\d+\.\d+\.\d+(a\d+|b\d+|rc\d+)?$', version_str):
                return version_str
    
    return "unknown"


__version__ = get_version()
