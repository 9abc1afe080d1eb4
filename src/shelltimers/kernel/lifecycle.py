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
"""Lifecycle protocol for components that own OS processes or loop tasks.

The engine behind the public timer functions launches one ``sleep`` process
per outstanding delay. Components holding such resources implement this
protocol so their owner can release them deterministically on shutdown.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Lifecycle(Protocol):
    """Standard start/stop contract for resource-owning components."""

    async def start(self) -> None:
        """Prepare the component for use. Must be safe to call more than once."""
        ...

    async def stop(self) -> None:
        """Release every process and task the component still owns.

        Best-effort: individual failures are logged, not raised, so that the
        remaining resources are still released.
        """
        ...
