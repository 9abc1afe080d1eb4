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
"""Tests for CallbackExecutor port and the asyncio adapter."""

from __future__ import annotations

import asyncio

import pytest

from shelltimers.scheduling.adapters.asyncio_executor import AsyncIOCallbackExecutor
from shelltimers.scheduling.ports.outbound import CallbackExecutorPort


class TestAsyncIOCallbackExecutor:
    def test_dispatch_runs_sync_callback_inline(self) -> None:
        executor = AsyncIOCallbackExecutor()
        calls: list[str] = []
        executor.dispatch(lambda: calls.append("ran"))
        assert calls == ["ran"]
        assert len(executor._tasks) == 0

    def test_dispatch_propagates_sync_errors(self) -> None:
        executor = AsyncIOCallbackExecutor()

        def boom() -> None:
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            executor.dispatch(boom)

    @pytest.mark.asyncio
    async def test_dispatch_tracks_async_callbacks(self) -> None:
        executor = AsyncIOCallbackExecutor()
        event = asyncio.Event()
        results: list[str] = []

        async def wait_for_event() -> None:
            await event.wait()
            results.append("done")

        executor.dispatch(wait_for_event)
        assert len(executor._tasks) == 1

        event.set()
        await executor.shutdown(wait=True)
        assert results == ["done"]
        assert len(executor._tasks) == 0

    @pytest.mark.asyncio
    async def test_failing_async_callback_is_discarded(self) -> None:
        executor = AsyncIOCallbackExecutor()

        async def boom() -> None:
            raise RuntimeError("boom")

        executor.dispatch(boom)
        await asyncio.sleep(0)
        await asyncio.sleep(0)
        assert len(executor._tasks) == 0

    @pytest.mark.asyncio
    async def test_shutdown_without_wait_cancels_pending(self) -> None:
        executor = AsyncIOCallbackExecutor()
        completed = False

        async def long_running() -> None:
            nonlocal completed
            await asyncio.sleep(10)
            completed = True

        executor.dispatch(long_running)
        await executor.shutdown(wait=False)

        assert not completed
        assert len(executor._tasks) == 0


class TestCallbackExecutorPort:
    def test_asyncio_executor_satisfies_protocol(self) -> None:
        assert isinstance(AsyncIOCallbackExecutor(), CallbackExecutorPort)
