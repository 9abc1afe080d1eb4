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
"""Delay engine: schedules callbacks on sleep processes, falling back to native timers."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import Any

import structlog

from shelltimers.config.properties.delay import DelayProperties
from shelltimers.core.config import Config
from shelltimers.kernel.exceptions import CancellationFailedException
from shelltimers.scheduling.adapters.asyncio_executor import AsyncIOCallbackExecutor
from shelltimers.scheduling.adapters.asyncio_timers import AsyncIOTimerAdapter
from shelltimers.scheduling.adapters.subprocess_sleep import SubprocessSleepLauncher
from shelltimers.scheduling.ports.outbound import (
    CallbackExecutorPort,
    NativeTimerPort,
    SleepLauncherPort,
)
from shelltimers.scheduling.registry import (
    DelayRegistry,
    Indirection,
    NativeTimer,
    SleepingProcess,
    Terminal,
)

logger = structlog.get_logger("shelltimers.scheduling.engine")

# Opaque to callers: an int registry slot, or a native timer handle.
Handle = Any


class DelayEngine:
    """Schedules one-shot and recurring delays and cancels them by handle.

    When the sleep command is available each delay is backed by a ``sleep``
    process and identified by a registry slot; otherwise the native timer
    port is used and its handles are returned as-is.

    Usage::

        engine = DelayEngine()
        handle = engine.schedule_delay(tick, 1000, recurring=True)
        ...
        await engine.cancel_delay(handle)
        await engine.stop()
    """

    def __init__(
        self,
        launcher: SleepLauncherPort | None = None,
        timers: NativeTimerPort | None = None,
        executor: CallbackExecutorPort | None = None,
        properties: DelayProperties | None = None,
    ) -> None:
        self._properties = properties or DelayProperties()
        self._launcher: SleepLauncherPort = launcher or SubprocessSleepLauncher(
            self._properties.command, self._properties.unit_suffix
        )
        self._timers: NativeTimerPort = timers or AsyncIOTimerAdapter()
        self._executor: CallbackExecutorPort = executor or AsyncIOCallbackExecutor()
        self._registry = DelayRegistry()

    @classmethod
    def from_config(cls, config: Config) -> DelayEngine:
        return cls(properties=config.bind(DelayProperties))

    @property
    def registry(self) -> DelayRegistry:
        return self._registry

    @property
    def properties(self) -> DelayProperties:
        return self._properties

    def is_sleep_available(self) -> bool:
        """Return whether delays would currently be backed by a sleep process."""
        return self._properties.prefer_shell and self._launcher.is_available()

    # ------------------------------------------------------------------
    # Scheduling
    # ------------------------------------------------------------------

    def schedule_delay(self, callback: Callable[[], Any], delay_ms: float, recurring: bool = False) -> Handle:
        """Run *callback* after *delay_ms* milliseconds, repeatedly if *recurring*.

        Must be called with a running event loop. Returns a handle accepted
        by :meth:`cancel_delay`.
        """
        value = self._schedule(callback, delay_ms, recurring)
        if isinstance(value, Indirection):
            return value.slot
        return value.handle

    def _schedule(self, callback: Callable[[], Any], delay_ms: float, recurring: bool) -> Indirection | NativeTimer:
        if not self.is_sleep_available():
            logger.debug("shell_delay_fallback", delay_ms=delay_ms, recurring=recurring)
            dispatch = self._dispatcher(callback)
            if recurring:
                return NativeTimer(self._timers.set_interval(dispatch, delay_ms), recurring=True)
            return NativeTimer(self._timers.set_timeout(dispatch, delay_ms), recurring=False)

        slot = self._registry.allocate()

        def on_exit(error: BaseException | None) -> None:
            if error is not None:
                logger.debug("shell_delay_interrupted", slot=slot, error=str(error))
                return
            if recurring:
                # Next process is live before the callback runs.
                self._registry.replace(slot, self._schedule(callback, delay_ms, True))
            else:
                self._registry.abandon(slot)
            self._executor.dispatch(callback)

        process = self._launcher.launch(max(delay_ms, 0) / 1000, on_exit)
        self._registry.replace(slot, SleepingProcess(process))
        logger.debug("shell_delay_scheduled", slot=slot, delay_ms=delay_ms, recurring=recurring)
        return Indirection(slot)

    def _dispatcher(self, callback: Callable[[], Any]) -> Callable[[], None]:
        def dispatch() -> None:
            self._executor.dispatch(callback)

        return dispatch

    # ------------------------------------------------------------------
    # Cancellation
    # ------------------------------------------------------------------

    async def cancel_delay(self, handle: Handle, recurring: bool = False) -> Any:
        """Cancel the delay identified by *handle*.

        For slots: returns True when a pending delay was terminated, False
        when the slot had nothing left to cancel (already fired or cancelled).
        Any other handle goes to the native cancel primitive (``clear_interval``
        when *recurring*, else ``clear_timeout``) and its result is returned.

        Raises:
            CancellationFailedException: termination kept failing for
                ``cancel_max_attempts`` attempts.
        """
        if handle not in self._registry:
            # Spent slot: nothing to cancel. Only meaningful while slots are
            # being dispensed; otherwise the handle belongs to the native port.
            if self.is_sleep_available() and self._registry.issued(handle):
                return False
            if recurring:
                return self._timers.clear_interval(handle)
            return self._timers.clear_timeout(handle)

        attempts = max(self._properties.cancel_max_attempts, 1)
        for attempt in range(1, attempts + 1):
            # Re-read every attempt: a recurrence may have replaced the process.
            terminal = self._registry.resolve(handle)
            if terminal is None:
                return False
            if self._terminate(terminal):
                self._registry.abandon(handle)
                logger.debug("shell_delay_cancelled", slot=handle, attempts=attempt)
                return True
            if attempt < attempts:
                await asyncio.sleep(self._properties.cancel_retry_interval)

        logger.warning("shell_delay_cancel_failed", slot=handle, attempts=attempts)
        raise CancellationFailedException(
            f"Could not cancel delay {handle} after {attempts} attempts",
            code="CANCEL_RETRY_EXHAUSTED",
            context={"handle": handle, "attempts": attempts},
        )

    def _terminate(self, terminal: Terminal) -> bool:
        if isinstance(terminal, SleepingProcess):
            return terminal.process.kill()
        if terminal.recurring:
            self._timers.clear_interval(terminal.handle)
        else:
            self._timers.clear_timeout(terminal.handle)
        return True

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def start(self) -> None:
        """No-op: the engine is ready after construction."""

    async def stop(self, wait: bool = True) -> None:
        """Cancel every outstanding process-backed delay and drain pending work."""
        for slot in self._registry.roots():
            try:
                await self.cancel_delay(slot)
            except CancellationFailedException as exc:
                logger.warning("shell_delay_stop_failed", slot=slot, error=str(exc))
        await self._launcher.shutdown()
        await self._executor.shutdown(wait=wait)
