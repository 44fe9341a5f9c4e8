# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Configuration model for the column name validator.

Configuration sources, lowest precedence first:

1. Defaults (underscore_case naming, ``src/Entity/*.php``)
2. Environment (``DOCTRINE_VALIDATION_CAMEL_CASE``, ``DOCTRINE_VALIDATION_FILES``)
3. YAML file passed with ``--config``
4. Explicit CLI arguments

Example YAML::

    camel_case: false
    files:
      - src/Entity/*.php
      - src/Legacy/**/*.php
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Final

import yaml

from doctrine_validation.enums import EnumNamingScheme
from doctrine_validation.errors import ConfigurationError

__all__: list[str] = [
    "DEFAULT_FILE_PATTERNS",
    "ENV_CAMEL_CASE",
    "ENV_FILES",
    "ModelValidatorConfig",
]

DEFAULT_FILE_PATTERNS: Final[tuple[str, ...]] = ("src/Entity/*.php",)

ENV_CAMEL_CASE: Final[str] = "DOCTRINE_VALIDATION_CAMEL_CASE"
ENV_FILES: Final[str] = "DOCTRINE_VALIDATION_FILES"

_TRUTHY: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})
_FALSY: Final[frozenset[str]] = frozenset({"", "0", "false", "no", "off"})


def _parse_flag(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ConfigurationError(f"Invalid boolean for {name}: {raw!r}", variable=name)


@dataclass(frozen=True)
class ModelValidatorConfig:
    """Settings for one validation run.

    Attributes:
        naming_scheme: Naming convention every column name must follow.
        file_patterns: Glob patterns selecting the entity source files.
        verbosity: Progress detail (0 none, 1 files, 2 classes, 3 properties).
    """

    naming_scheme: EnumNamingScheme = EnumNamingScheme.SNAKE
    file_patterns: tuple[str, ...] = DEFAULT_FILE_PATTERNS
    verbosity: int = 0

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> ModelValidatorConfig:
        """Create config from environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ``.

        Returns:
            ModelValidatorConfig populated from the environment, with
            defaults for anything unset.

        Raises:
            ConfigurationError: If the camel case flag is not a boolean.
        """
        env = os.environ if environ is None else environ
        config = cls()

        raw_flag = env.get(ENV_CAMEL_CASE)
        if raw_flag is not None:
            camel = _parse_flag(ENV_CAMEL_CASE, raw_flag)
            config = replace(config, naming_scheme=_scheme_for(camel))

        raw_files = env.get(ENV_FILES, "")
        patterns = tuple(part for part in raw_files.split(os.pathsep) if part.strip())
        if patterns:
            config = replace(config, file_patterns=patterns)

        return config

    def with_yaml(self, path: str | Path) -> ModelValidatorConfig:
        """Return a copy overridden by the settings in a YAML file.

        Args:
            path: YAML file with optional ``camel_case`` and ``files`` keys.

        Raises:
            ConfigurationError: If the file cannot be read or has invalid content.
        """
        config_path = Path(path)
        try:
            data = yaml.safe_load(config_path.read_text(encoding="utf-8"))
        except OSError as e:
            raise ConfigurationError(
                f"Cannot read config file {config_path}", path=str(config_path)
            ) from e
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in config file {config_path}", path=str(config_path)
            ) from e

        if data is None:
            return self
        if not isinstance(data, dict):
            raise ConfigurationError(
                "Config file must contain a mapping", path=str(config_path)
            )

        unknown = sorted(set(data) - {"camel_case", "files"})
        if unknown:
            raise ConfigurationError(
                f"Unknown config keys: {', '.join(map(str, unknown))}",
                path=str(config_path),
            )

        config = self
        if "camel_case" in data:
            camel = data["camel_case"]
            if not isinstance(camel, bool):
                raise ConfigurationError(
                    "'camel_case' must be a boolean", path=str(config_path)
                )
            config = replace(config, naming_scheme=_scheme_for(camel))
        if "files" in data:
            files = data["files"]
            if isinstance(files, str):
                files = [files]
            if not isinstance(files, list) or not all(
                isinstance(item, str) for item in files
            ):
                raise ConfigurationError(
                    "'files' must be a list of glob patterns", path=str(config_path)
                )
            if files:
                config = replace(config, file_patterns=tuple(files))
        return config

    @classmethod
    def from_yaml(cls, path: str | Path) -> ModelValidatorConfig:
        """Create config from a YAML file on top of the defaults."""
        return cls().with_yaml(path)


def _scheme_for(camel_case: bool) -> EnumNamingScheme:
    return EnumNamingScheme.CAMEL if camel_case else EnumNamingScheme.SNAKE
