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

"""Tests for percent-encoding helpers and scalar stringification."""

import copy
import pickle

import pytest

from genro_urlcodec.encoding import (
    UNDEFINED,
    decode_component,
    encode_component,
    encode_path,
    stringify_scalar,
)
from genro_urlcodec.exceptions import DecodeError


class TestEncodeComponent:
    """Test encode_component."""

    def test_unreserved_kept(self):
        """Letters, digits and -_.!~*'() are not encoded."""
        text = "AZaz09-_.!~*'()"
        assert encode_component(text) == text

    def test_delimiters_encoded(self):
        """URL delimiters are encoded."""
        assert encode_component(" /?#[]@&=+$,;:%") == "%20%2F%3F%23%5B%5D%40%26%3D%2B%24%2C%3B%3A%25"

    def test_utf8(self):
        """Non-ASCII text is encoded as UTF-8 with upper-case hex."""
        assert encode_component("ü你") == "%C3%BC%E4%BD%A0"


class TestEncodePath:
    """Test encode_path."""

    def test_delimiters_kept(self):
        """Path and URL delimiters are kept."""
        text = "/a;b,c?d:e@f&g=h+i$j#k"
        assert encode_path(text) == text

    def test_unsafe_encoded(self):
        """Spaces, percent signs and non-ASCII are encoded."""
        assert encode_path("/a b/100%/ü") == "/a%20b/100%25/%C3%BC"


class TestDecodeComponent:
    """Test decode_component."""

    def test_plain_text(self):
        """Text without escapes is returned unchanged."""
        assert decode_component("hello+world") == "hello+world"

    def test_escapes(self):
        """Escapes decode as UTF-8, in either hex case."""
        assert decode_component("%e4%BD%a0%20x") == "你 x"

    @pytest.mark.parametrize("text", ["%", "100%", "%2", "%zz", "a%G1"])
    def test_malformed(self, text):
        """A '%' without two hex digits is an error."""
        with pytest.raises(DecodeError) as exc_info:
            decode_component(text)
        assert exc_info.value.text == text

    @pytest.mark.parametrize("text", ["%E4", "%FF", "%C3%28", "%ED%A0%80"])
    def test_invalid_utf8(self, text):
        """Byte sequences that are not UTF-8 are an error."""
        with pytest.raises(DecodeError):
            decode_component(text)


class TestStringifyScalar:
    """Test stringify_scalar."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("text", "text"),
            ("", ""),
            (True, "true"),
            (False, "false"),
            (None, "null"),
            (UNDEFINED, "undefined"),
            (0, "0"),
            (123, "123"),
            (-7, "-7"),
            (1.1, "1.1"),
            (2.0, "2"),
            (100.0, "100"),
            (-2.5, "-2.5"),
            (0.0, "0"),
            (-0.0, "0"),
            (0.000001, "0.000001"),
            (1e-7, "1e-7"),
            (1.5e-10, "1.5e-10"),
            (1.2345678901234568e20, "123456789012345680000"),
            (1e21, "1e+21"),
            (float("nan"), "NaN"),
            (float("inf"), "Infinity"),
            (float("-inf"), "-Infinity"),
        ],
    )
    def test_values(self, value, expected):
        """Each scalar type has a fixed text form."""
        assert stringify_scalar(value) == expected

    @pytest.mark.parametrize("value", [b"bytes", [1], {"a": 1}, object()])
    def test_unsupported(self, value):
        """Other types raise TypeError."""
        with pytest.raises(TypeError):
            stringify_scalar(value)


class TestUndefined:
    """Test the UNDEFINED marker."""

    def test_falsy(self):
        """UNDEFINED is falsy."""
        assert not UNDEFINED

    def test_repr(self):
        """UNDEFINED has a readable repr."""
        assert repr(UNDEFINED) == "UNDEFINED"

    def test_singleton(self):
        """Copies and pickles resolve to the same object."""
        assert type(UNDEFINED)() is UNDEFINED
        assert copy.deepcopy(UNDEFINED) is UNDEFINED
        assert pickle.loads(pickle.dumps(UNDEFINED)) is UNDEFINED
