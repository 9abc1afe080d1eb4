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
"""Tests for the native asyncio timer fallback."""

from __future__ import annotations

import asyncio
import time

import pytest

from shelltimers.scheduling.adapters.asyncio_timers import AsyncIOTimerAdapter, IntervalHandle
from shelltimers.scheduling.ports.outbound import NativeTimerPort


class TestAsyncIOTimerAdapter:
    def test_satisfies_protocol(self) -> None:
        assert isinstance(AsyncIOTimerAdapter(), NativeTimerPort)

    @pytest.mark.asyncio
    async def test_timeout_fires_once_after_delay(self) -> None:
        timers = AsyncIOTimerAdapter()
        fired: list[float] = []
        started = time.monotonic()

        handle = timers.set_timeout(lambda: fired.append(time.monotonic()), 50)
        assert isinstance(handle, asyncio.TimerHandle)

        await asyncio.sleep(0.15)
        assert len(fired) == 1
        assert fired[0] - started >= 0.045

    @pytest.mark.asyncio
    async def test_clear_timeout_prevents_callback(self) -> None:
        timers = AsyncIOTimerAdapter()
        fired: list[int] = []
        handle = timers.set_timeout(lambda: fired.append(1), 30)
        timers.clear_timeout(handle)
        await asyncio.sleep(0.08)
        assert fired == []

    @pytest.mark.asyncio
    async def test_interval_repeats_until_cleared(self) -> None:
        timers = AsyncIOTimerAdapter()
        fired: list[int] = []
        handle = timers.set_interval(lambda: fired.append(1), 20)
        assert isinstance(handle, IntervalHandle)

        await asyncio.sleep(0.15)
        timers.clear_interval(handle)
        count = len(fired)
        assert count >= 3
        assert handle.cancelled()

        await asyncio.sleep(0.06)
        assert len(fired) == count

    @pytest.mark.asyncio
    async def test_interval_survives_raising_callback(self) -> None:
        timers = AsyncIOTimerAdapter()
        fired: list[int] = []

        def flaky() -> None:
            fired.append(1)
            raise RuntimeError("tick failed")

        loop = asyncio.get_running_loop()
        loop.set_exception_handler(lambda _loop, _ctx: None)
        try:
            handle = timers.set_interval(flaky, 10)
            await asyncio.sleep(0.08)
            timers.clear_interval(handle)
        finally:
            loop.set_exception_handler(None)
        assert len(fired) >= 2
