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
"""shelltimers: delay and interval scheduling on top of the host ``sleep`` command."""

from shelltimers.scheduling.engine import DelayEngine
from shelltimers.timers import (
    clear_shell_interval,
    clear_shell_timeout,
    close_default_engine,
    get_default_engine,
    is_sleep_available,
    set_default_engine,
    set_shell_interval,
    set_shell_timeout,
    shell_sleep,
)

__version__ = "0.1.0"

__all__ = [
    "DelayEngine",
    "__version__",
    "clear_shell_interval",
    "clear_shell_timeout",
    "close_default_engine",
    "get_default_engine",
    "is_sleep_available",
    "set_default_engine",
    "set_shell_interval",
    "set_shell_timeout",
    "shell_sleep",
]
