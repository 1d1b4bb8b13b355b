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

"""genro-urlcodec - URL and query string parsing and building.

Main components:
    url: parse a URL into components, build a URL from components
    querystring: parse and build query strings with array-valued keys

Value types:
    ParsedURL: components returned by url.parse
    URLBuildOptions: components accepted by url.stringify
    ParserOptions: decoding policy of querystring.parse

Usage:
    from genro_urlcodec import querystring, url

    url.parse("https://example.com:8080/path?q=1").port      # 8080
    url.stringify(hostname="example.com", pathname="a b")   # "example.com/a%20b"
    querystring.parse("a=1&a=2")                            # {"a": ["1", "2"]}
    querystring.stringify({"a": [1, 2]})                    # "a=1&a=2"
"""

__version__ = "0.1.0"

from . import querystring, url
from .encoding import UNDEFINED, decode_component, encode_component, encode_path
from .exceptions import DecodeError, InvalidURL
from .querystring import ParserOptions, query_from_scope
from .url import ParsedURL, URLBuildOptions

__all__ = [
    # Codecs
    "querystring",
    "url",
    # Value types
    "ParsedURL",
    "URLBuildOptions",
    "ParserOptions",
    "UNDEFINED",
    # Helpers
    "encode_component",
    "encode_path",
    "decode_component",
    "query_from_scope",
    # Exceptions
    "InvalidURL",
    "DecodeError",
]
