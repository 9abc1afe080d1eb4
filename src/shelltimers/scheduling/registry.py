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
"""Delay registry: maps dispensed integer handles to what currently backs them.

A handle returned for a blocking-process delay is a slot in this registry.
Recurring delays launch a fresh process (in a fresh slot) on every tick, so
the caller's slot is rewritten to point at the newest one. Values are tagged:

- :class:`SleepingProcess`: terminal, a live sleep process to kill.
- :class:`NativeTimer`: terminal, a native timer handle installed when a
  recurrence fell back to native timers.
- :class:`Indirection`: look up another slot instead.

Replacing a slot that some other slot points at rewrites the pointing slot
and drops the replaced one, so a caller-held slot is never more than one
indirection away from its terminal value.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from shelltimers.scheduling.ports.outbound import SleepProcess


@dataclass(frozen=True)
class Indirection:
    slot: int


@dataclass(frozen=True)
class SleepingProcess:
    process: SleepProcess


@dataclass(frozen=True)
class NativeTimer:
    handle: Any
    recurring: bool


RegistryValue = Indirection | SleepingProcess | NativeTimer
Terminal = SleepingProcess | NativeTimer


class DelayRegistry:
    """Slot table owned by a DelayEngine. Slot indices are never reused."""

    def __init__(self) -> None:
        self._slots: dict[int, RegistryValue] = {}
        # target slot -> the slot whose Indirection points at it
        self._referrers: dict[int, int] = {}
        self._allocated = 0

    def __len__(self) -> int:
        return len(self._slots)

    def __contains__(self, slot: object) -> bool:
        return slot in self._slots

    def issued(self, slot: object) -> bool:
        """Return whether *slot* was ever dispensed here, live or not."""
        return isinstance(slot, int) and not isinstance(slot, bool) and 0 <= slot < self._allocated

    def roots(self) -> list[int]:
        """Slots not reachable through an indirection, i.e. the caller-held ones."""
        return [slot for slot in self._slots if slot not in self._referrers]

    def allocate(self, value: RegistryValue | None = None) -> int:
        slot = self._allocated
        self._allocated += 1
        if value is not None:
            self._store(slot, value)
        return slot

    def resolve(self, slot: int) -> Terminal | None:
        """Follow indirections from *slot*; None when nothing is left there."""
        value = self._slots.get(slot)
        while isinstance(value, Indirection):
            value = self._slots.get(value.slot)
        return value

    def replace(self, slot: int, value: RegistryValue) -> None:
        """Install *value* for *slot*, collapsing the chain onto the referring slot."""
        root = self._referrers.pop(slot, None)
        if root is None:
            self._unlink(slot)
            self._store(slot, value)
            return
        self._slots.pop(slot, None)
        self._store(root, value)

    def abandon(self, slot: int) -> None:
        """Forget *slot* and whatever it points at."""
        root = self._referrers.pop(slot, None)
        if root is not None:
            self._slots.pop(root, None)
        self._unlink(slot)
        self._slots.pop(slot, None)

    def _store(self, slot: int, value: RegistryValue) -> None:
        self._slots[slot] = value
        if isinstance(value, Indirection):
            self._referrers[value.slot] = slot

    def _unlink(self, slot: int) -> None:
        # Drop the target this slot currently points at, if any.
        current = self._slots.get(slot)
        if isinstance(current, Indirection):
            self._referrers.pop(current.slot, None)
            self._slots.pop(current.slot, None)
