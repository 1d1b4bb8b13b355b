# Copyright 2025 Softwell S.r.l.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     https://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Configuration of the genro-urlcodec command line.

The codecs themselves are configured only by their arguments. The command
line layers its settings with priority:

    hardcoded defaults < environment variables < command line arguments

Environment variables use the prefix ``GENRO_URLCODEC_``:

    GENRO_URLCODEC_PLUS_AS_SPACE=false
    GENRO_URLCODEC_ALWAYS_ARRAY=1
    GENRO_URLCODEC_ARRAY_LIKE_AS_ARRAY_ALWAYS=no
    GENRO_URLCODEC_TRIM=on
    GENRO_URLCODEC_LOG_LEVEL=DEBUG

Booleans accept ``true/1/yes/on`` and ``false/0/no/off`` (case-insensitive).
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from typing import Any

from genro_toolbox import dictExtract

from .querystring import ParserOptions

__all__ = ["ENV_PREFIX", "ConfigError", "CliConfig", "load_env_config", "parse_bool"]

ENV_PREFIX = "GENRO_URLCODEC_"

DEFAULTS: dict[str, Any] = {"log_level": "WARNING"}

_TRUE = frozenset({"true", "1", "yes", "on"})
_FALSE = frozenset({"false", "0", "no", "off"})
_PARSER_KEYS = frozenset(ParserOptions.__slots__)


class ConfigError(Exception):
    """Configuration error."""


def parse_bool(name: str, value: str | bool) -> bool:
    """
    Convert an environment/CLI value to bool.

    Raises:
        ConfigError: The value is not a recognized boolean word.
    """
    if isinstance(value, bool):
        return value
    lowered = value.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ConfigError(f"Invalid boolean for '{name}': {value!r}")


def load_env_config(environ: Mapping[str, str] | None = None) -> dict[str, Any]:
    """
    Collect ``GENRO_URLCODEC_*`` variables.

    Args:
        environ: Environment mapping (default: ``os.environ``).

    Returns:
        Dict with lower-cased keys, parser options converted to bool.

    Raises:
        ConfigError: Unknown variable name or invalid boolean.
    """
    source = dict(os.environ if environ is None else environ)
    result: dict[str, Any] = {}
    for key, value in dictExtract(source, ENV_PREFIX).items():
        name = key.lower()
        if name in _PARSER_KEYS:
            result[name] = parse_bool(ENV_PREFIX + key, value)
        elif name == "log_level":
            result[name] = value.strip().upper()
        else:
            raise ConfigError(f"Unknown configuration variable: {ENV_PREFIX}{key}")
    return result


class CliConfig:
    """Resolved command line configuration."""

    __slots__ = ("_opts",)

    def __init__(
        self,
        environ: Mapping[str, str] | None = None,
        **cli_opts: Any,
    ) -> None:
        opts = dict(DEFAULTS)
        opts.update(load_env_config(environ))
        opts.update({k: v for k, v in cli_opts.items() if v is not None})
        self._opts = opts

    @property
    def parser_options(self) -> ParserOptions:
        """Query parser options (defaults < env < CLI)."""
        return ParserOptions.resolve({k: v for k, v in self._opts.items() if k in _PARSER_KEYS})

    @property
    def log_level(self) -> int:
        """Numeric logging level."""
        name = str(self._opts["log_level"])
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            raise ConfigError(f"Invalid log level: {name!r}")
        return level

    def __getitem__(self, name: str) -> Any:
        """Bracket access, None for missing keys."""
        return self._opts.get(name)
