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

"""Structured JSON logger built on loguru.

Every ``Logger`` owns its sinks. Entries are routed through the shared loguru
logger with a per-instance id bound in ``extra`` and each sink only accepts
records carrying its own id, so two loggers never see each other's output.
"""

import sys
import uuid
from ..exceptions import InvalidTeeOptionsException, LoggerPanic
from enum import Enum
from loguru import logger
from pydantic import BaseModel, Field
from typing import Any, List


LOGGER_ID_KEY = 'dbmesh_logger_id'

# loguru ships no panic/fatal severities
for _name, _no in (('PANIC', 45), ('FATAL', 50)):
    try:
        logger.level(_name)
    except ValueError:
        logger.level(_name, no=_no)


class LogLevel(str, Enum):
    """Minimum severity accepted by a sink."""

    DEBUG = 'DEBUG'
    INFO = 'INFO'
    WARN = 'WARNING'
    ERROR = 'ERROR'
    PANIC = 'PANIC'
    FATAL = 'FATAL'


class TeeOption(BaseModel):
    """One output of a tee logger."""

    writer: Any = Field(..., description='File-like object, path or callable receiving JSON lines')
    level: LogLevel = Field(LogLevel.INFO, description='Minimum level written to this output')


class Logger:
    """JSON line logger writing to its own set of sinks."""

    def __init__(self, options: List[TeeOption]):
        self._id = uuid.uuid4().hex
        self._logger = logger.bind(**{LOGGER_ID_KEY: self._id})
        self._handler_ids = [
            logger.add(
                option.writer,
                level=LogLevel(option.level).value,
                serialize=True,
                filter=self._owns,
                colorize=False,
            )
            for option in options
        ]

    def _owns(self, record: dict) -> bool:
        return record['extra'].get(LOGGER_ID_KEY) == self._id

    def _log(self, level: LogLevel, msg: str, fields: dict):
        self._logger.bind(**fields).opt(depth=2).log(level.value, msg)

    def debug(self, msg: str, **fields: Any):
        """Write a debug entry."""
        self._log(LogLevel.DEBUG, msg, fields)

    def info(self, msg: str, **fields: Any):
        """Write an info entry."""
        self._log(LogLevel.INFO, msg, fields)

    def warn(self, msg: str, **fields: Any):
        """Write a warning entry."""
        self._log(LogLevel.WARN, msg, fields)

    def error(self, msg: str, **fields: Any):
        """Write an error entry."""
        self._log(LogLevel.ERROR, msg, fields)

    def panic(self, msg: str, **fields: Any):
        """Write a panic entry, then raise ``LoggerPanic``.

        Raises:
            LoggerPanic: Always, carrying the message
        """
        self._log(LogLevel.PANIC, msg, fields)
        raise LoggerPanic(msg)

    def fatal(self, msg: str, **fields: Any):
        """Write a fatal entry, then terminate the process with status 1."""
        self._log(LogLevel.FATAL, msg, fields)
        sys.exit(1)

    def close(self):
        """Detach every sink owned by this logger."""
        for handler_id in self._handler_ids:
            logger.remove(handler_id)
        self._handler_ids = []


def new_logger(level: LogLevel, writer: Any) -> Logger:
    """Build a logger writing JSON lines at or above ``level`` to ``writer``.

    Args:
        level: Minimum severity to write
        writer: File-like object, path or callable used as the sink

    Returns:
        The configured logger
    """
    return Logger([TeeOption(writer=writer, level=level)])


def new_logger_with_tee(options: List[TeeOption]) -> Logger:
    """Build a logger fanning each entry out to several sinks.

    Args:
        options: One option per sink, each with its own minimum level

    Returns:
        The configured logger

    Raises:
        InvalidTeeOptionsException: If no option is given
    """
    if not options:
        raise InvalidTeeOptionsException()
    return Logger(options)
