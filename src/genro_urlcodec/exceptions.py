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
Exception classes for genro-urlcodec.

Two failure kinds cover both codecs. Both are raised synchronously and
never carry a partial result: the caller gets either a complete value or
one of these exceptions.

InvalidURL
----------
Raised by ``url.parse`` and ``url.stringify``.

Causes:
    - the text does not match the URL grammar
    - the port is outside ``[0, 65535]``
    - the protocol is not of the form ``word:``
    - the builder produced no segment at all

Attributes:
    detail (str): Human readable reason.
    url (str | None): The offending input text, when there is one.

Example:
    >>> raise InvalidURL("port is invalid", url="ssh://host:70000")

DecodeError
-----------
Raised while percent-decoding query keys/values.

Causes:
    - ``%`` not followed by two hexadecimal digits
    - escapes that do not form valid UTF-8

Attributes:
    detail (str): Human readable reason.
    text (str): The component that failed to decode.

Example:
    >>> raise DecodeError("malformed percent-escape", text="a%zz")

Design Decisions
----------------
- Both inherit from ``ValueError``: they signal bad input, and callers that
  already catch ``ValueError`` keep working.
- No common package base: catch both with
  ``except (InvalidURL, DecodeError)``.
"""

__all__ = ["InvalidURL", "DecodeError"]


class InvalidURL(ValueError):
    """
    The URL text or the URL build options are not valid.

    Attributes:
        detail: Reason of the failure.
        url: The offending URL text, or None when building.

    Example:
        >>> exc = InvalidURL("port is invalid", url="h:99999")
        >>> str(exc)
        'INVALID_URL: port is invalid'
    """

    def __init__(self, detail: str, url: str | None = None) -> None:
        """
        Initialize the exception.

        Args:
            detail: Reason of the failure.
            url: The offending URL text (default: None).
        """
        self.detail = detail
        self.url = url
        super().__init__(f"INVALID_URL: {detail}")

    def __repr__(self) -> str:
        """Return detailed string representation."""
        return f"InvalidURL(detail={self.detail!r}, url={self.url!r})"


class DecodeError(ValueError):
    """
    A percent-encoded component could not be decoded.

    Attributes:
        detail: Reason of the failure.
        text: The component that failed to decode.
    """

    def __init__(self, detail: str, text: str) -> None:
        self.detail = detail
        self.text = text
        super().__init__(f"DECODE_ERROR: {detail} in {text!r}")

    def __repr__(self) -> str:
        return f"DecodeError(detail={self.detail!r}, text={self.text!r})"
