"""
YAML reading for tolerance presets.

Scalars may reference environment variables as `${NAME}`, so a CI job can
loosen or tighten a preset without editing the file. Unset variables expand
to an empty string, which then fails preset validation.
"""

from __future__ import annotations

import os
import re
from pathlib import Path

import yaml
from beartype import beartype
from yaml import MappingNode, ScalarNode
from yaml.loader import SafeLoader

_ENV_REFERENCE = re.compile(r"\$\{([^}^{]+)\}")


class ConfigError(Exception):
    """Raised when a tolerance file cannot be read or holds invalid presets."""

    pass


class EnvVarLoader(SafeLoader):
    """Safe YAML loader expanding `${NAME}` references in scalars."""

    def construct_scalar(self, node: ScalarNode | MappingNode) -> str:
        raw: str = super().construct_scalar(node)
        return _ENV_REFERENCE.sub(lambda match: os.environ.get(match.group(1), ""), raw)


@beartype
def load_from_yaml(path: str | Path) -> dict[str, object]:
    """
    Read a YAML mapping, expanding environment references.

    Raises:
        ConfigError: If the file is missing, is not valid YAML, or its root is
            not a mapping.
    """
    config_path = Path(path)
    if not config_path.is_file():
        raise ConfigError(f"Config file not found: {config_path}")

    text = config_path.read_text(encoding="utf-8")
    try:
        data = yaml.load(text, Loader=EnvVarLoader)
    except yaml.YAMLError as err:
        raise ConfigError(f"YAML parsing error in {config_path}: {err}") from err

    if not isinstance(data, dict):
        raise ConfigError(f"Config root must be a mapping (dict), got {type(data).__name__} in {config_path}.")
    return data
