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
Query string codec with array-valued keys.

Purpose
=======
Converts between ``key=value&key=value`` text and a dict, in both
directions. Also works for ``application/x-www-form-urlencoded`` bodies.

Unlike ``urllib.parse.parse_qs`` every key maps to a bare string unless it
repeats or the decoding policy asks for a list, and malformed escapes are
errors instead of being kept verbatim.

Parsing Schema::

    "a=1&a=b&tags[]=x&flag&x=k=v"
                  ↓  split on "&", first "=" splits key/value
    [("a","1"), ("a","b"), ("tags[]","x"), ("flag",""), ("x","k=v")]
                  ↓  merge
    {
        "a": ["1", "b"],      # repeated key → list
        "tags[]": ["x"],      # array-like key → list
        "flag": "",           # key only → empty value
        "x": "k=v",           # only the first "=" splits
    }

Parser Options::

    +-----------------------------+---------+-------------------------------+
    | Option                      | Default | Effect                        |
    +-----------------------------+---------+-------------------------------+
    | plus_as_space               | True    | "+" decodes to " "            |
    | always_array                | False   | every key maps to a list      |
    | array_like_as_array_always  | True    | "k[]" keys map to a list      |
    | trim                        | False   | strip decoded keys and values |
    +-----------------------------+---------+-------------------------------+

Definition::

    class ParserOptions:
        __slots__ = (...)
        @classmethod resolve(options=None, **overrides) -> ParserOptions

    def parse(text, options=None, **overrides) -> dict[str, str | list[str]]
    def stringify(query: Mapping[str, Scalar | Sequence[Scalar]]) -> str
    def query_from_scope(scope, options=None, **overrides) -> dict[...]

Example::

    from genro_urlcodec import querystring

    querystring.parse("a+b=c+d")                       # {"a b": "c d"}
    querystring.parse("a+b=c", plus_as_space=False)    # {"a+b": "c"}
    querystring.stringify({"a": [1, 2], "b": "x y"})   # "a=1&a=2&b=x%20y"
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any, Union

from .encoding import Scalar, decode_component, encode_component, stringify_scalar
from .exceptions import DecodeError

__all__ = [
    "ParserOptions",
    "QueryDict",
    "QueryInput",
    "parse",
    "stringify",
    "query_from_scope",
]

logger = logging.getLogger("genro_urlcodec.querystring")

QueryDict = dict[str, Union[str, list[str]]]
QueryInput = Mapping[str, Union[Scalar, Sequence[Scalar]]]


class ParserOptions:
    """
    Decoding policy of ``parse``.

    Attributes:
        plus_as_space: Decode a literal "+" as a space.
        always_array: Map every key to a list.
        array_like_as_array_always: Map keys ending in "[]" to a list even
            when they appear once.
        trim: Strip whitespace around decoded keys and values.

    Example:
        >>> opts = ParserOptions(trim=True)
        >>> opts.plus_as_space, opts.trim
        (True, True)
    """

    __slots__ = ("plus_as_space", "always_array", "array_like_as_array_always", "trim")

    def __init__(
        self,
        plus_as_space: bool = True,
        always_array: bool = False,
        array_like_as_array_always: bool = True,
        trim: bool = False,
    ) -> None:
        self.plus_as_space = plus_as_space
        self.always_array = always_array
        self.array_like_as_array_always = array_like_as_array_always
        self.trim = trim

    @classmethod
    def resolve(
        cls,
        options: ParserOptions | Mapping[str, Any] | None = None,
        **overrides: Any,
    ) -> ParserOptions:
        """
        Build options from an instance or mapping plus keyword overrides.

        Keyword overrides win over ``options``. ``None`` values are ignored,
        so callers can forward optional arguments untouched.

        Raises:
            TypeError: An option name is unknown.
        """
        if options is None and not overrides:
            return cls()
        if isinstance(options, ParserOptions):
            values = options.as_dict()
        else:
            values = dict(options or {})
        values.update(overrides)
        unknown = set(values) - set(cls.__slots__)
        if unknown:
            raise TypeError(f"Unknown parser option(s): {', '.join(sorted(unknown))}")
        return cls(**{k: bool(v) for k, v in values.items() if v is not None})

    def as_dict(self) -> dict[str, bool]:
        """Return the options as a plain dict."""
        return {name: getattr(self, name) for name in self.__slots__}

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ParserOptions):
            return self.as_dict() == other.as_dict()
        return False

    def __repr__(self) -> str:
        fields = ", ".join(f"{k}={v!r}" for k, v in self.as_dict().items())
        return f"ParserOptions({fields})"


def _decode(text: str, trim: bool) -> str:
    try:
        decoded = decode_component(text)
    except DecodeError as exc:
        logger.debug("Query component rejected: %s", exc)
        raise
    return decoded.strip() if trim else decoded


def parse(
    text: str | bytes,
    options: ParserOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> QueryDict:
    """
    Decode a query string into a dict.

    Args:
        text: The query string, without the leading "?". Bytes are decoded
            as Latin-1.
        options: A ``ParserOptions`` or a mapping of option names.
        **overrides: Option values overriding ``options``.

    Returns:
        Dict of decoded key to a string, or a list of strings for repeated
        and array-like keys.

    Raises:
        DecodeError: A key or value holds a malformed percent-escape.
        TypeError: An option name is unknown.

    Example:
        >>> parse("a=1&a=b&a&a=")
        {'a': ['1', 'b', '', '']}
        >>> parse("a%5B%5D=123&b=321")
        {'a[]': ['123'], 'b': '321'}
    """
    opts = ParserOptions.resolve(options, **overrides)
    if isinstance(text, bytes):
        text = text.decode("latin-1")

    # before decoding, so an encoded "%2B" stays a plus
    if opts.plus_as_space:
        text = text.replace("+", "%20")

    result: QueryDict = {}
    for segment in text.split("&"):
        if not segment:
            continue

        raw_key, sep, raw_value = segment.partition("=")
        key = _decode(raw_key, opts.trim)
        value = _decode(raw_value, opts.trim) if sep else ""

        current = result.get(key)
        if current is None:
            if opts.always_array or (key.endswith("[]") and opts.array_like_as_array_always):
                result[key] = [value]
            else:
                result[key] = value
        elif isinstance(current, list):
            current.append(value)
        else:
            result[key] = [current, value]

    return result


def stringify(query: QueryInput) -> str:
    """
    Encode a mapping into a query string.

    List and tuple values emit one pair per element, repeating the key.
    Scalars are converted with ``stringify_scalar``, so ``None`` becomes
    ``"null"`` and ``UNDEFINED`` becomes ``"undefined"``; pairs are never
    omitted.

    Args:
        query: Mapping of key to a scalar or a list/tuple of scalars.

    Returns:
        The encoded query string, without a leading "?". Empty for an empty
        mapping.

    Raises:
        TypeError: A value is not a query scalar.

    Example:
        >>> stringify({"a": ["b", 123, True, None], "c d": 1.5})
        'a=b&a=123&a=true&a=null&c%20d=1.5'
    """
    pairs: list[str] = []
    for key, value in query.items():
        encoded_key = encode_component(key)
        if isinstance(value, (list, tuple)):
            for item in value:
                pairs.append(f"{encoded_key}={encode_component(stringify_scalar(item))}")
        else:
            pairs.append(f"{encoded_key}={encode_component(stringify_scalar(value))}")
    return "&".join(pairs)


def query_from_scope(
    scope: Mapping[str, Any],
    options: ParserOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> QueryDict:
    """
    Parse the query string of an ASGI scope.

    Args:
        scope: ASGI scope mapping, ``scope["query_string"]`` holds bytes.
        options: Parser options, as for ``parse``.
        **overrides: Option values overriding ``options``.

    Returns:
        The parsed dict; empty if the scope has no query string.

    Example:
        >>> query_from_scope({"type": "http", "query_string": b"page=1&tag=a&tag=b"})
        {'page': '1', 'tag': ['a', 'b']}
    """
    return parse(scope.get("query_string", b""), options, **overrides)
