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
Percent-encoding rule sets and scalar stringification.

Purpose
=======
Both codecs share the same encoding discipline. Consumers of the encoded
text (proxy-config URLs, OTP URIs, form posts) compare it byte by byte, so
the rule sets below are fixed and must not drift.

Encoding Rule Sets::

    +-------------------+---------------------------------------------+
    | Function          | Characters left as-is                       |
    +-------------------+---------------------------------------------+
    | encode_component  | A-Z a-z 0-9 - _ . ! ~ * ' ( )               |
    | encode_path       | the above plus ; , / ? : @ & = + $ #        |
    +-------------------+---------------------------------------------+

Everything else is encoded as UTF-8 bytes, ``%XX`` with upper-case hex.
Hostnames are never encoded.

Scalar Stringification::

    "text"      →  "text"
    True/False  →  "true" / "false"
    None        →  "null"
    UNDEFINED   →  "undefined"
    123         →  "123"
    1.0 / 1.1   →  "1" / "1.1"
    nan / inf   →  "NaN" / "Infinity"

Definition::

    UNDEFINED: Final[_Undefined]
    Scalar = str | int | float | bool | None | _Undefined

    def encode_component(text: str) -> str
    def encode_path(text: str) -> str
    def decode_component(text: str) -> str    # raises DecodeError
    def stringify_scalar(value: Scalar) -> str  # raises TypeError

Design Notes
============
- ``decode_component`` is strict: ``urllib.parse.unquote`` silently keeps
  malformed escapes and replaces invalid UTF-8, here both are errors.
- ``UNDEFINED`` is a falsy singleton standing for "value not provided"; it
  is stringified as ``"undefined"`` rather than dropped.
"""

from __future__ import annotations

import math
import re
from decimal import Decimal
from typing import Final, Union
from urllib.parse import quote, unquote_to_bytes

from .exceptions import DecodeError

__all__ = [
    "UNDEFINED",
    "Scalar",
    "encode_component",
    "encode_path",
    "decode_component",
    "stringify_scalar",
]

# quote() always keeps A-Z a-z 0-9 and "-_.~"
COMPONENT_SAFE: Final = "!*'()"
PATH_SAFE: Final = COMPONENT_SAFE + ";,/?:@&=+$#"

_MALFORMED_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


class _Undefined:
    """Marker for a value that was not provided."""

    __slots__ = ()

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED: Final = _Undefined()

Scalar = Union[str, int, float, bool, None, _Undefined]


def encode_component(text: str) -> str:
    """
    Percent-encode a query key/value or URL credential.

    Example:
        >>> encode_component("b c&d")
        'b%20c%26d'
    """
    return quote(text, safe=COMPONENT_SAFE)


def encode_path(text: str) -> str:
    """
    Percent-encode a pathname, keeping path and URL delimiters.

    Example:
        >>> encode_path("/a b/c")
        '/a%20b/c'
    """
    return quote(text, safe=PATH_SAFE)


def decode_component(text: str) -> str:
    """
    Percent-decode a component, failing on malformed input.

    Args:
        text: Encoded text. Characters outside escapes are kept as they are.

    Returns:
        The decoded text.

    Raises:
        DecodeError: ``%`` is not followed by two hex digits, or the decoded
            bytes are not valid UTF-8.
    """
    if "%" not in text:
        return text
    if _MALFORMED_ESCAPE.search(text):
        raise DecodeError("malformed percent-escape", text=text)
    try:
        return unquote_to_bytes(text).decode("utf-8")
    except UnicodeError as exc:
        raise DecodeError("escapes are not valid UTF-8", text=text) from exc


def _format_float(value: float) -> str:
    """Shortest round-trip text of a float, in ECMAScript Number notation."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(value))).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    k = len(digits)
    n = k + int(exponent)

    if k <= n <= 21:
        text = digits + "0" * (n - k)
    elif 0 < n <= 21:
        text = f"{digits[:n]}.{digits[n:]}"
    elif -6 < n <= 0:
        text = "0." + "0" * -n + digits
    else:
        e = n - 1
        mantissa = digits if k == 1 else f"{digits[0]}.{digits[1:]}"
        text = f"{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"
    return sign + text


def stringify_scalar(value: Scalar) -> str:
    """
    Convert a query scalar to its text form.

    Args:
        value: One of str, bool, None, UNDEFINED, int, float.

    Returns:
        The text used on the wire (see module docs for the table).

    Raises:
        TypeError: ``value`` is not a query scalar.

    Example:
        >>> [stringify_scalar(v) for v in (True, None, UNDEFINED, 1.0)]
        ['true', 'null', 'undefined', '1']
    """
    # bool before int: bool is an int subclass
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, _Undefined):
        return "undefined"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_float(value)
    raise TypeError(f"Unsupported query value type: {type(value).__name__}")
