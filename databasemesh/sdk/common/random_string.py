# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
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

"""Cryptographically random strings, e.g. for generated master passwords."""

import secrets
import string
from loguru import logger
from typing import Union


ALPHANUMERIC = string.ascii_uppercase + string.ascii_lowercase + string.digits


def string_n(n: int) -> str:
    """Return a random string of length ``n`` over ``[A-Za-z0-9]``."""
    return string_custom(n, ALPHANUMERIC)


def string_custom(n: int, chars: Union[str, bytes]) -> str:
    """Return a random string of length ``n`` drawn from ``chars``.

    Random bytes above the largest multiple of ``len(chars)`` are discarded
    so every character is equally likely.

    Args:
        n: Length of the result
        chars: Allowed characters, between 2 and 256 of them

    Returns:
        The random string, or an empty string when ``n`` is 0 or the charset
        size is out of range
    """
    if n <= 0:
        return ''
    if isinstance(chars, bytes):
        chars = chars.decode('latin-1')
    clen = len(chars)
    if clen < 2 or clen > 256:
        logger.warning(f'Charset of {clen} characters is not usable, must hold 2 to 256')
        return ''

    max_byte = 255 - (256 % clen)
    result = []
    while len(result) < n:
        for byte in secrets.token_bytes(n + n // 4):
            if byte > max_byte:
                continue
            result.append(chars[byte % clen])
            if len(result) == n:
                break

    return ''.join(result)
