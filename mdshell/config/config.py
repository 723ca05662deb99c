# Copyright 2026 Cisco Systems, Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
# SPDX-License-Identifier: Apache-2.0

"""
Configuration class for mdshell.

Values come from the dataclass defaults, optionally overlaid by a YAML
file and then by command-line flags. The environment is never consulted.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any

import yaml

from .constants import MdShellConstants
from ..core.exceptions import ConfigError


def parse_context(value: str | list[str] | None) -> frozenset[str]:
    """
    Build a context tag set from a comma-separated string or a list.

    Empty tags are dropped, so ``""`` gives an empty set.
    """
    if value is None:
        return frozenset()
    if isinstance(value, str):
        value = value.split(MdShellConstants.CONTEXT_SEPARATOR)
    return frozenset(str(tag) for tag in value if tag)


@dataclass(frozen=True)
class Config:
    """
    Run options for command extraction.

    Example YAML file::

        strict_os_release: false
        unquote_os_values: true
        context: [git, sev]
    """

    # os-release handling
    strict_os_release: bool = True
    unquote_os_values: bool = False

    # Output
    strip_prompts: bool = False

    # Default context tags
    context: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> Config:
        """
        Build a config from a mapping of field names to values.

        Raises:
            ConfigError: On unknown keys, non-boolean flags or a malformed context
        """
        known = {f.name for f in fields(cls)}
        unknown = set(raw) - known
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(sorted(map(str, unknown)))}")

        values: dict[str, Any] = {}
        for name, value in raw.items():
            if name == "context":
                if value is not None and not isinstance(value, (str, list)):
                    raise ConfigError(
                        f"Configuration key 'context' must be a list or a comma-separated string, got {value!r}"
                    )
                values[name] = parse_context(value)
            elif isinstance(value, bool):
                values[name] = value
            else:
                raise ConfigError(f"Configuration key {name!r} must be true or false, got {value!r}")
        return cls(**values)

    @classmethod
    def from_file(cls, config_file: str | Path) -> Config:
        """
        Load configuration from a YAML file.

        Args:
            config_file: Path to the YAML file

        Returns:
            Config instance

        Raises:
            ConfigError: If the file cannot be read or parsed
        """
        try:
            with open(config_file, encoding="utf-8") as fh:
                raw = yaml.safe_load(fh) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Failed to load config from {config_file}: {e}") from e

        if not isinstance(raw, dict):
            raise ConfigError(f"Config file {config_file} must contain a mapping")
        return cls.from_dict(raw)

    def merge(self, **overrides: Any) -> Config:
        """Return a copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})
