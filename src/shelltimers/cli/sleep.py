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
"""'shelltimers sleep' and 'shelltimers tick': run delays from the command line."""

from __future__ import annotations

import asyncio
import time

import click

from shelltimers.cli.console import console
from shelltimers.timers import (
    clear_shell_interval,
    close_default_engine,
    set_shell_interval,
    shell_sleep,
)


@click.command()
@click.argument("ms", type=click.FloatRange(min=0))
def sleep_command(ms: float) -> None:
    """Sleep for MS milliseconds."""

    async def run() -> float:
        started = time.monotonic()
        try:
            await shell_sleep(ms)
        finally:
            await close_default_engine()
        return time.monotonic() - started

    elapsed = asyncio.run(run())
    console.print(f"[success]slept[/success] {elapsed * 1000:.0f} ms")


@click.command()
@click.argument("ms", type=click.FloatRange(min=0))
@click.option("--count", "-n", type=click.IntRange(min=1), default=3, show_default=True, help="Ticks before stopping.")
def tick_command(ms: float, count: int) -> None:
    """Print a line every MS milliseconds, COUNT times."""

    async def run() -> None:
        done = asyncio.Event()
        started = time.monotonic()
        ticks = 0

        def tick() -> None:
            nonlocal ticks
            if ticks >= count:
                return
            ticks += 1
            console.print(f"tick {ticks} [dim]+{(time.monotonic() - started) * 1000:.0f} ms[/dim]")
            if ticks >= count:
                done.set()

        handle = set_shell_interval(tick, ms)
        try:
            await done.wait()
            await clear_shell_interval(handle)
        finally:
            await close_default_engine()

    asyncio.run(run())
