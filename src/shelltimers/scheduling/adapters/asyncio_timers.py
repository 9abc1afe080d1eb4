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
"""Native event-loop timers: the fallback used when no sleep command exists."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import Any


class IntervalHandle:
    """Repeating timer built from chained ``loop.call_later`` calls."""

    def __init__(
        self,
        loop: asyncio.AbstractEventLoop,
        callback: Callable[[], Any],
        seconds: float,
    ) -> None:
        self._loop = loop
        self._callback = callback
        self._seconds = seconds
        self._cancelled = False
        self._timer = loop.call_later(seconds, self._fire)

    def _fire(self) -> None:
        if self._cancelled:
            return
        # Re-arm first so a raising callback does not end the interval.
        self._timer = self._loop.call_later(self._seconds, self._fire)
        self._callback()

    def cancel(self) -> None:
        self._cancelled = True
        self._timer.cancel()

    def cancelled(self) -> bool:
        return self._cancelled


class AsyncIOTimerAdapter:
    """NativeTimerPort backed by the running asyncio event loop.

    Handles are ``asyncio.TimerHandle`` for timeouts and :class:`IntervalHandle`
    for intervals. Negative delays are treated as zero.
    """

    def set_timeout(self, callback: Callable[[], Any], delay_ms: float) -> asyncio.TimerHandle:
        loop = asyncio.get_running_loop()
        return loop.call_later(max(delay_ms, 0) / 1000, callback)

    def set_interval(self, callback: Callable[[], Any], delay_ms: float) -> IntervalHandle:
        loop = asyncio.get_running_loop()
        return IntervalHandle(loop, callback, max(delay_ms, 0) / 1000)

    def clear_timeout(self, handle: asyncio.TimerHandle) -> None:
        handle.cancel()

    def clear_interval(self, handle: IntervalHandle) -> None:
        handle.cancel()
