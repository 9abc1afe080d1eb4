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
"""Delay engine configuration properties."""

from __future__ import annotations

from dataclasses import dataclass

from shelltimers.core.config import config_properties


@config_properties(prefix="shelltimers.delay")
@dataclass
class DelayProperties:
    """Configuration for the delay engine (shelltimers.delay.*).

    ``prefer_shell=False`` routes every delay to native event-loop timers.
    """

    command: str = "sleep"
    unit_suffix: str = "s"
    prefer_shell: bool = True
    cancel_max_attempts: int = 100
    cancel_retry_interval: float = 0.01
