# Copyright 2026 Firefly Software Solutions Inc.
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
"""StructlogAdapter: renders delay events through structlog on stderr."""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from shelltimers.config.properties.logging import LoggingProperties
from shelltimers.core.config import Config

SCHEDULING_LOGGER = "shelltimers.scheduling"


def _level_number(level: str) -> int:
    number = logging.getLevelName(level.upper())
    if not isinstance(number, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return number


def build_processors(fmt: str) -> list[structlog.types.Processor]:
    """Processor chain for delay events, ending in the *fmt* renderer."""
    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if fmt == "json":
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    elif fmt == "console":
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))
    else:
        raise ValueError(f"Unknown log format: {fmt!r} (expected 'console' or 'json')")
    return processors


class StructlogAdapter:
    """LoggingPort backed by structlog over stdlib logging.

    Stdout is left alone: ``shelltimers tick`` prints its ticks there.
    """

    def __init__(self) -> None:
        self.properties = LoggingProperties()

    def configure(self, config: Config) -> None:
        props = config.bind(LoggingProperties)
        props.format = props.format.lower()
        processors = build_processors(props.format)
        root_level = _level_number(props.level)

        structlog.configure(
            processors=processors,
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        logging.basicConfig(format="%(message)s", stream=sys.stderr, level=root_level, force=True)

        self.properties = props
        self.set_scheduling_level(props.scheduling_level or props.level)

    def get_logger(self, name: str) -> Any:
        return structlog.get_logger(name)

    def set_scheduling_level(self, level: str) -> None:
        """Raise or lower verbosity of the schedule/fire/cancel events only."""
        logging.getLogger(SCHEDULING_LOGGER).setLevel(_level_number(level))
