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
"""Shell timers: setTimeout/setInterval look-alikes backed by the ``sleep`` command.

All functions share a process-wide :class:`DelayEngine`, built on first use
from the packaged defaults, ``SHELLTIMERS_*`` environment variables, and the
file named by ``SHELLTIMERS_CONFIG`` when set. Use :func:`set_default_engine`
to install a differently configured engine.
"""

from __future__ import annotations

import asyncio
import os
from collections.abc import Callable
from typing import Any

from shelltimers.core.config import Config
from shelltimers.scheduling.engine import DelayEngine, Handle

_default_engine: DelayEngine | None = None


def get_default_engine() -> DelayEngine:
    global _default_engine
    if _default_engine is None:
        _default_engine = DelayEngine.from_config(Config.from_file(os.environ.get("SHELLTIMERS_CONFIG")))
    return _default_engine


def set_default_engine(engine: DelayEngine | None) -> None:
    """Replace the shared engine. ``None`` makes the next call build a fresh one."""
    global _default_engine
    _default_engine = engine


async def close_default_engine() -> None:
    """Stop the shared engine, cancelling its outstanding delays, and discard it."""
    global _default_engine
    engine, _default_engine = _default_engine, None
    if engine is not None:
        await engine.stop()


def is_sleep_available() -> bool:
    """Return whether the system sleep utility is available (and enabled)."""
    return get_default_engine().is_sleep_available()


def set_shell_interval(callback: Callable[[], Any], ms: float) -> Handle:
    """Run *callback* every *ms* milliseconds until cleared."""
    return get_default_engine().schedule_delay(callback, ms, recurring=True)


def set_shell_timeout(callback: Callable[[], Any], ms: float) -> Handle:
    """Run *callback* once after *ms* milliseconds."""
    return get_default_engine().schedule_delay(callback, ms, recurring=False)


async def clear_shell_interval(handle: Handle) -> Any:
    """Cancel a delay created by :func:`set_shell_interval`."""
    return await get_default_engine().cancel_delay(handle, recurring=True)


async def clear_shell_timeout(handle: Handle) -> Any:
    """Cancel a delay created by :func:`set_shell_timeout`."""
    return await get_default_engine().cancel_delay(handle, recurring=False)


async def shell_sleep(ms: float) -> None:
    """Suspend the calling task for *ms* milliseconds.

    Cannot be cancelled through a handle; cancelling the awaiting task only
    stops the wait, the underlying delay still runs out.
    """
    future: asyncio.Future[None] = asyncio.get_running_loop().create_future()

    def resolve() -> None:
        if not future.done():
            future.set_result(None)

    set_shell_timeout(resolve, ms)
    await future
