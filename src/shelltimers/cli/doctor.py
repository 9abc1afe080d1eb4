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
"""'shelltimers doctor': report which timer strategy this host would use."""

from __future__ import annotations

import shutil
import sys

import click

from shelltimers.cli.console import console
from shelltimers.timers import get_default_engine


@click.command()
def doctor_command() -> None:
    """Check for the sleep utility and show the active strategy."""
    engine = get_default_engine()
    props = engine.properties

    console.print("\n[brand]shelltimers doctor[/brand]\n")

    py = sys.version_info
    console.print(f"  [success]✓[/success] Python {py.major}.{py.minor}.{py.micro}")

    location = shutil.which(props.command)
    if location:
        console.print(f"  [success]✓[/success] {props.command} found at {location}")
    else:
        console.print(f"  [warning]![/warning] {props.command} [dim](not found)[/dim]")

    if not props.prefer_shell:
        console.print("  [dim]-[/dim] shell strategy disabled by configuration")

    strategy = "sleep process" if engine.is_sleep_available() else "native event-loop timers"
    console.print(f"\n  [info]Strategy:[/info] {strategy}\n")
