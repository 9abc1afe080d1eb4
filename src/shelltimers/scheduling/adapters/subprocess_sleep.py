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
"""Subprocess adapter: sleeps by running the host ``sleep`` command."""

from __future__ import annotations

import asyncio
from typing import Any

import structlog

from shelltimers.kernel.exceptions import SleepInterruptedError
from shelltimers.scheduling.availability import command_exists
from shelltimers.scheduling.ports.outbound import ExitCallback

logger = structlog.get_logger("shelltimers.scheduling.subprocess")


def format_seconds(seconds: float) -> str:
    """Render *seconds* as a plain decimal accepted by ``sleep`` (no exponent)."""
    text = f"{max(seconds, 0.0):.6f}".rstrip("0").rstrip(".")
    return text or "0"


class SubprocessSleep:
    """A single ``sleep`` child process and the task that waits for it.

    The exit callback runs on the event loop once the process has been reaped.
    A successful :meth:`kill` always routes the outcome to the error path, even
    when the process spawns after the kill request or exits 0 concurrently.
    """

    def __init__(self, argv: list[str], on_exit: ExitCallback) -> None:
        self._argv = argv
        self._on_exit = on_exit
        self._process: asyncio.subprocess.Process | None = None
        self._killed = False
        self._exited = False
        self.task: asyncio.Task[None] = asyncio.get_running_loop().create_task(self._run())

    @property
    def pid(self) -> int | None:
        return self._process.pid if self._process is not None else None

    @property
    def exited(self) -> bool:
        return self._exited

    async def _run(self) -> None:
        try:
            process = await asyncio.create_subprocess_exec(
                *self._argv,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.DEVNULL,
                stderr=asyncio.subprocess.DEVNULL,
            )
        except OSError as exc:
            self._exited = True
            logger.warning("sleep_spawn_failed", argv=self._argv, error=str(exc))
            self._on_exit(exc)
            return

        self._process = process
        if self._killed:
            process.kill()
        try:
            returncode = await process.wait()
        except asyncio.CancelledError:
            # The waiting task is going away (loop teardown); the child must not outlive it.
            self._exited = True
            if process.returncode is None:
                process.kill()
                await process.wait()
            raise
        self._exited = True

        if self._killed or returncode != 0:
            self._on_exit(SleepInterruptedError(returncode))
        else:
            self._on_exit(None)

    def kill(self) -> bool:
        if self._killed:
            return True
        if self._exited:
            return False
        if self._process is None:
            # Spawn still in flight; _run kills the process as soon as it exists.
            self._killed = True
            return True
        if self._process.returncode is not None:
            return False
        try:
            self._process.kill()
        except ProcessLookupError:
            return False
        self._killed = True
        return True


class SubprocessSleepLauncher:
    """SleepLauncherPort that runs ``<command> <seconds><unit_suffix>``.

    The command is executed directly, without a shell.
    """

    def __init__(self, command: str = "sleep", unit_suffix: str = "s") -> None:
        self._command = command
        self._unit_suffix = unit_suffix
        self._tasks: set[asyncio.Task[Any]] = set()

    @property
    def command(self) -> str:
        return self._command

    def is_available(self) -> bool:
        return command_exists(self._command)

    def build_argv(self, seconds: float) -> list[str]:
        return [self._command, f"{format_seconds(seconds)}{self._unit_suffix}"]

    def launch(self, seconds: float, on_exit: ExitCallback) -> SubprocessSleep:
        process = SubprocessSleep(self.build_argv(seconds), on_exit)
        self._tasks.add(process.task)
        process.task.add_done_callback(self._task_done_callback)
        return process

    def _task_done_callback(self, task: asyncio.Task[Any]) -> None:
        self._tasks.discard(task)
        if not task.cancelled():
            exc = task.exception()
            if exc is not None:
                logger.error("sleep_exit_handler_failed", error=str(exc), exc_info=exc)

    async def shutdown(self) -> None:
        if self._tasks:
            await asyncio.gather(*self._tasks, return_exceptions=True)
        self._tasks.clear()
