# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""Quick start: round trip a query string and parse proxy/OTP URLs.

Run with::

    python examples/quick_start.py
"""

import json

from genro_urlcodec import querystring, url

data = {
    "a": [1, 2, 3, 4],
    "a[]": [1, 2, 3, 4],
    "b": False,
    "c": "hello",
    "d": "哈哈哈哈",
    "e": "😀😀😀😀",
    "f": None,
}

qs = querystring.stringify(data)
print(qs)
print(querystring.parse(qs))

print(json.dumps(url.parse("vmess://ew0KICAidiI6ICIyIiwNCiAgInBzIjogInRlc3QiDQp9").as_dict(), indent=2))

otp = url.parse("otpauth://totp/Example4TOTP?secret=B4PSUNCFJMQCUEBGEEFSYCTD&algorithm=SHA1&digits=6&period=30")
print(json.dumps(otp.as_dict(), indent=2))
print(querystring.parse(otp.query[1:]))

print(url.stringify(protocol="https:", hostname="example.com", pathname="/search", query_q="genro urlcodec"))
