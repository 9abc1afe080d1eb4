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
"""shelltimers scheduling: delay registry, delay engine, ports and default adapters.

Framework-agnostic types (ports, registry, engine) are exported directly.
Default adapter (subprocess / asyncio) exports are re-exported for convenience.
"""

# Framework-agnostic exports
from shelltimers.scheduling.availability import command_exists
from shelltimers.scheduling.engine import DelayEngine, Handle
from shelltimers.scheduling.ports.outbound import (
    CallbackExecutorPort,
    NativeTimerPort,
    SleepLauncherPort,
    SleepProcess,
)
from shelltimers.scheduling.registry import DelayRegistry, Indirection, NativeTimer, SleepingProcess

# Default adapter re-exports
from shelltimers.scheduling.adapters.asyncio_executor import AsyncIOCallbackExecutor
from shelltimers.scheduling.adapters.asyncio_timers import AsyncIOTimerAdapter, IntervalHandle
from shelltimers.scheduling.adapters.subprocess_sleep import SubprocessSleep, SubprocessSleepLauncher

__all__ = [
    # Framework-agnostic
    "CallbackExecutorPort",
    "DelayEngine",
    "DelayRegistry",
    "Handle",
    "Indirection",
    "NativeTimer",
    "NativeTimerPort",
    "SleepLauncherPort",
    "SleepProcess",
    "SleepingProcess",
    "command_exists",
    # Adapters
    "AsyncIOCallbackExecutor",
    "AsyncIOTimerAdapter",
    "IntervalHandle",
    "SubprocessSleep",
    "SubprocessSleepLauncher",
]
