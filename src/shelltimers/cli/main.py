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
"""shelltimers CLI: inspect and exercise sleep-backed timers from the shell."""

from __future__ import annotations

from pathlib import Path

import click

from shelltimers.core.config import Config
from shelltimers.logging.structlog_adapter import StructlogAdapter
from shelltimers.scheduling.engine import DelayEngine
from shelltimers.timers import set_default_engine


@click.group()
@click.version_option(package_name="shelltimers")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="YAML or TOML configuration file.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None) -> None:
    """shelltimers: timers backed by the system sleep utility."""
    config = Config.from_file(config_path)
    StructlogAdapter().configure(config)
    ctx.obj = config
    set_default_engine(DelayEngine.from_config(config))


# Import and register commands
from shelltimers.cli.doctor import doctor_command  # noqa: E402
from shelltimers.cli.sleep import sleep_command, tick_command  # noqa: E402

cli.add_command(doctor_command, name="doctor")
cli.add_command(sleep_command, name="sleep")
cli.add_command(tick_command, name="tick")
