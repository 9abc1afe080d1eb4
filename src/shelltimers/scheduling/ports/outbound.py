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
"""Outbound ports of the delay engine: process launching, native timers, callback execution."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

# Called once when a sleep process finishes: ``None`` on natural expiry,
# the exception describing the failure otherwise.
ExitCallback = Callable[[BaseException | None], None]


@runtime_checkable
class SleepProcess(Protocol):
    """One in-flight invocation of the blocking sleep command."""

    def kill(self) -> bool:
        """Terminate the process.

        Returns True when termination took effect (the exit callback will
        receive an error), False when the process had already exited.
        """
        ...


@runtime_checkable
class SleepLauncherPort(Protocol):
    """Port for running a command that blocks for a duration."""

    def is_available(self) -> bool:
        """Return whether the blocking command exists on this host."""
        ...

    def launch(self, seconds: float, on_exit: ExitCallback) -> SleepProcess:
        """Start sleeping for *seconds* and report the outcome to *on_exit*."""
        ...

    async def shutdown(self) -> None:
        """Wait for every launched process to be reaped."""
        ...


@runtime_checkable
class NativeTimerPort(Protocol):
    """Port for the host's native once/repeating timer primitives."""

    def set_timeout(self, callback: Callable[[], Any], delay_ms: float) -> Any:
        """Run *callback* once after *delay_ms*. Returns a native handle."""
        ...

    def set_interval(self, callback: Callable[[], Any], delay_ms: float) -> Any:
        """Run *callback* every *delay_ms*. Returns a native handle."""
        ...

    def clear_timeout(self, handle: Any) -> Any:
        """Cancel a handle returned by :meth:`set_timeout`."""
        ...

    def clear_interval(self, handle: Any) -> Any:
        """Cancel a handle returned by :meth:`set_interval`."""
        ...


@runtime_checkable
class CallbackExecutorPort(Protocol):
    """Port for running user callbacks on the event loop."""

    def dispatch(self, callback: Callable[[], Any]) -> None:
        """Invoke *callback*; awaitable results are run as tracked tasks."""
        ...

    async def shutdown(self, wait: bool = True) -> None:
        """Await (or cancel, when *wait* is False) pending callback tasks."""
        ...
