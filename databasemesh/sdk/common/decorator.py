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

"""Decorators used by the Database Mesh SDK."""

from .utils import get_error_code
from botocore.exceptions import ClientError
from functools import wraps
from inspect import iscoroutinefunction
from loguru import logger
from typing import Any, Callable, Iterable


def tolerate_error_codes(error_codes: Iterable[str], default: Any = None) -> Callable:
    """Decorator turning selected AWS client errors into a default result.

    Any ``ClientError`` whose code is in ``error_codes`` is logged as a warning
    and the wrapped call returns ``default`` (a callable default is invoked to
    build a fresh value). Every other exception propagates unchanged.

    Args:
        error_codes: AWS error codes treated as non-fatal
        default: The value returned when a tolerated error is raised

    Returns:
        Decorator function
    """
    codes = frozenset(error_codes)

    def resolve_default() -> Any:
        return default() if callable(default) else default

    def decorator(func: Callable) -> Callable:
        if iscoroutinefunction(func):

            @wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any):
                try:
                    return await func(*args, **kwargs)
                except ClientError as error:
                    code = get_error_code(error)
                    if code not in codes:
                        raise
                    logger.warning(f'{func.__qualname__} tolerated client error {code}')
                    return resolve_default()

            return async_wrapper

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any):
            try:
                return func(*args, **kwargs)
            except ClientError as error:
                code = get_error_code(error)
                if code not in codes:
                    raise
                logger.warning(f'{func.__qualname__} tolerated client error {code}')
                return resolve_default()

        return wrapper

    return decorator
