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
genro-urlcodec CLI entry point.

Usage:
    genro-urlcodec parse-url "https://user@example.com:8080/p?q=1#f"
    genro-urlcodec build-url '{"hostname": "example.com", "port": 8080}'
    genro-urlcodec parse-query "a=1&a=2&b[]=x" --trim
    genro-urlcodec build-query '{"a": [1, 2], "b": null}'

Parser options can also be set with GENRO_URLCODEC_* environment variables.
"""

from __future__ import annotations

import json
import logging
import sys
from typing import Any

from . import querystring, url
from .config import CliConfig, ConfigError
from .exceptions import DecodeError, InvalidURL

USAGE = """\
Usage: genro-urlcodec <command> <argument> [options]

Commands:
  parse-url URL          Print the components of URL as JSON
  build-url JSON         Build a URL from a JSON object of components
  parse-query TEXT       Print the parsed query string as JSON
  build-query JSON       Build a query string from a JSON object

parse-query options:
  --plus-as-space        Decode "+" as space (default)
  --no-plus-as-space     Keep "+" as "+"
  --always-array         Decode every key as a list
  --no-array-like        Do not force "key[]" keys to lists
  --trim                 Strip keys and values

Options:
  --version, -v          Show version
  --help, -h             Show this help"""

_QUERY_FLAGS: dict[str, tuple[str, bool]] = {
    "--plus-as-space": ("plus_as_space", True),
    "--no-plus-as-space": ("plus_as_space", False),
    "--always-array": ("always_array", True),
    "--no-array-like": ("array_like_as_array_always", False),
    "--trim": ("trim", True),
}


def _split_flags(argv: list[str]) -> tuple[list[str], dict[str, Any]]:
    """Separate positional arguments from parse-query flags."""
    positional: list[str] = []
    flags: dict[str, Any] = {}
    for arg in argv:
        if arg in _QUERY_FLAGS:
            name, value = _QUERY_FLAGS[arg]
            flags[name] = value
        elif arg.startswith("--"):
            raise ConfigError(f"unknown option '{arg}'")
        else:
            positional.append(arg)
    return positional, flags


def _load_json_object(text: str) -> dict[str, Any]:
    data = json.loads(text)
    if not isinstance(data, dict):
        raise ConfigError("argument must be a JSON object")
    return data


def cmd_parse_url(argument: str, config: CliConfig) -> str:
    return json.dumps(url.parse(argument).as_dict(), ensure_ascii=False)


def cmd_build_url(argument: str, config: CliConfig) -> str:
    return url.stringify(_load_json_object(argument))


def cmd_parse_query(argument: str, config: CliConfig) -> str:
    return json.dumps(querystring.parse(argument, config.parser_options), ensure_ascii=False)


def cmd_build_query(argument: str, config: CliConfig) -> str:
    return querystring.stringify(_load_json_object(argument))


COMMANDS = {
    "parse-url": cmd_parse_url,
    "build-url": cmd_build_url,
    "parse-query": cmd_parse_query,
    "build-query": cmd_build_query,
}


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = sys.argv[1:] if argv is None else argv

    if "--version" in args or "-v" in args:
        from . import __version__

        print(f"genro-urlcodec {__version__}")
        return 0

    if "--help" in args or "-h" in args or not args:
        print(USAGE)
        return 0

    subcommand = args[0]
    command = COMMANDS.get(subcommand)
    if command is None:
        print(f"Error: unknown subcommand '{subcommand}'", file=sys.stderr)
        return 1

    try:
        positional, flags = _split_flags(args[1:])
        if flags and subcommand != "parse-query":
            raise ConfigError(f"options are only accepted by parse-query, not {subcommand}")
        if len(positional) != 1:
            raise ConfigError(f"{subcommand} takes exactly one argument")
        config = CliConfig(**flags)
        logging.basicConfig(level=config.log_level, format="%(levelname)s %(name)s: %(message)s")
        print(command(positional[0], config))
    except (InvalidURL, DecodeError, ConfigError, TypeError, json.JSONDecodeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
