"""Configuration management for applabel."""

import os
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Dict, Optional, Union

import yaml

from .resolution.constants import DEFAULT_LABEL, DEFAULT_NAME_SYMBOL, DEFAULT_VERSION_SYMBOL
from .manifest.injector import DEFAULT_PLACEHOLDER


CONFIG_FILENAME = "applabel.yml"
ENV_PREFIX = "APPLABEL_"


class ConfigError(Exception):
    """Raised when applabel.yml exists but cannot be used."""


@dataclass
class LabelSettings:
    """Effective settings for resolving and injecting a label."""
    constants_file: str = "lib/constants.dart"
    name_symbol: str = DEFAULT_NAME_SYMBOL
    version_symbol: str = DEFAULT_VERSION_SYMBOL
    default_label: str = DEFAULT_LABEL
    placeholder: str = DEFAULT_PLACEHOLDER
    project_dir: Path = field(default_factory=Path.cwd)
    sources: Dict[str, str] = field(default_factory=dict)

    def constants_path(self) -> Path:
        """Constants file path, relative paths taken from the project directory."""
        path = Path(self.constants_file).expanduser()
        if not path.is_absolute():
            path = self.project_dir / path
        return path

    def source_of(self, key: str) -> str:
        return self.sources.get(key, "default")


def setting_names():
    """Names of user-configurable settings."""
    return [f.name for f in fields(LabelSettings) if f.name not in ("project_dir", "sources")]


def load_config_file(project_dir: Union[str, Path]) -> Dict[str, str]:
    """Load applabel.yml from a project directory.

    Args:
        project_dir (Union[str, Path]): Directory holding applabel.yml.

    Returns:
        dict: Known settings found in the file (empty if there is no file).

    Raises:
        ConfigError: If the file is not valid YAML, not a mapping, or holds a
            non-string value for a known setting.
    """
    config_path = Path(project_dir) / CONFIG_FILENAME
    if not config_path.is_file():
        return {}

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to read {config_path}: {e}")

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{config_path} must contain a mapping, got {type(data).__name__}")

    known = setting_names()
    settings = {}
    for key, value in data.items():
        if key not in known or value is None or value == "":
            continue
        # Unquoted scalars arrive converted: 2.10 as 2.1, yes as True
        if not isinstance(value, str):
            raise ConfigError(
                f"{config_path}: {key} must be a quoted string, got {type(value).__name__} {value!r}"
            )
        settings[key] = value
    return settings


def load_env_overrides(environ: Optional[Dict[str, str]] = None) -> Dict[str, str]:
    """Collect APPLABEL_* environment overrides.

    Args:
        environ (dict, optional): Environment to read (defaults to os.environ).

    Returns:
        dict: Settings overridden by the environment.
    """
    environ = os.environ if environ is None else environ
    overrides = {}
    for key in setting_names():
        value = environ.get(f"{ENV_PREFIX}{key.upper()}")
        if value:
            overrides[key] = value
    return overrides


def get_settings(project_dir: Union[str, Path] = None, overrides: Optional[Dict[str, Optional[str]]] = None,
                 environ: Optional[Dict[str, str]] = None, use_config_file: bool = True) -> LabelSettings:
    """Build effective settings: defaults, applabel.yml, environment, then overrides.

    Args:
        project_dir (Union[str, Path], optional): Project root (defaults to cwd).
        overrides (dict, optional): Explicit values, e.g. from CLI options. None values are ignored.
        environ (dict, optional): Environment to read (defaults to os.environ).
        use_config_file (bool): Skip applabel.yml when False.

    Returns:
        LabelSettings: Effective settings with the source of each value.

    Raises:
        ConfigError: If applabel.yml is malformed.
    """
    project_dir = Path(project_dir) if project_dir else Path.cwd()
    settings = LabelSettings(project_dir=project_dir)

    layers = [
        (CONFIG_FILENAME, load_config_file(project_dir) if use_config_file else {}),
        ("env", load_env_overrides(environ)),
        ("cli", {k: v for k, v in (overrides or {}).items() if v is not None}),
    ]
    sources = {}
    for source, values in layers:
        if values:
            settings = replace(settings, **values)
            sources.update({key: source for key in values})
    settings.sources = sources
    return settings
