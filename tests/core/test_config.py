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
"""Tests for Config loading, env overrides and dataclass binding."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import pytest

from shelltimers.config.properties.delay import DelayProperties
from shelltimers.core.config import Config, config_properties


class TestConfig:
    def test_get_nested_value(self):
        config = Config({"shelltimers": {"delay": {"command": "gsleep"}}})
        assert config.get("shelltimers.delay.command") == "gsleep"

    def test_get_with_default(self):
        config = Config({})
        assert config.get("missing.key", "default") == "default"

    def test_get_keeps_false_values(self):
        config = Config({"shelltimers": {"delay": {"prefer_shell": False}}})
        assert config.get("shelltimers.delay.prefer_shell", True) is False

    def test_env_var_override(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("SHELLTIMERS_DELAY_COMMAND", "busybox-sleep")
        config = Config({"shelltimers": {"delay": {"command": "sleep"}}})
        assert config.get("shelltimers.delay.command") == "busybox-sleep"

    def test_get_section(self):
        config = Config({"shelltimers": {"delay": {"command": "sleep", "unit_suffix": "s"}}})
        assert config.get_section("shelltimers.delay") == {"command": "sleep", "unit_suffix": "s"}
        assert config.get_section("shelltimers.missing") == {}


class TestConfigFromFile:
    def test_defaults_loaded_without_file(self):
        config = Config.from_file(None)
        assert config.get("shelltimers.delay.command") == "sleep"
        assert config.get("shelltimers.delay.cancel_max_attempts") == 100
        assert len(config.loaded_sources) == 1

    def test_yaml_file_overrides_defaults(self, tmp_path: Path):
        config_file = tmp_path / "timers.yaml"
        config_file.write_text("shelltimers:\n  delay:\n    prefer_shell: false\n")
        config = Config.from_file(config_file)
        assert config.get("shelltimers.delay.prefer_shell") is False
        assert config.get("shelltimers.delay.command") == "sleep"
        assert str(config_file) in config.loaded_sources

    def test_toml_file(self, tmp_path: Path):
        config_file = tmp_path / "timers.toml"
        config_file.write_text('[shelltimers.delay]\ncommand = "gsleep"\n')
        config = Config.from_file(config_file)
        assert config.get("shelltimers.delay.command") == "gsleep"

    def test_missing_file_falls_back_to_defaults(self, tmp_path: Path):
        config = Config.from_file(tmp_path / "absent.yaml")
        assert config.get("shelltimers.delay.unit_suffix") == "s"

    def test_without_defaults(self):
        config = Config.from_file(None, load_defaults=False)
        assert config.to_dict() == {}


class TestConfigBind:
    def test_bind_delay_properties(self):
        config = Config({"shelltimers": {"delay": {"cancel_max_attempts": 5, "cancel_retry_interval": 0.5}}})
        props = config.bind(DelayProperties)
        assert props.cancel_max_attempts == 5
        assert props.cancel_retry_interval == 0.5
        assert props.command == "sleep"

    def test_bind_coerces_env_strings(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("SHELLTIMERS_DELAY_PREFER_SHELL", "false")
        monkeypatch.setenv("SHELLTIMERS_DELAY_CANCEL_MAX_ATTEMPTS", "7")
        monkeypatch.setenv("SHELLTIMERS_DELAY_CANCEL_RETRY_INTERVAL", "0.25")
        props = Config({}).bind(DelayProperties)
        assert props.prefer_shell is False
        assert props.cancel_max_attempts == 7
        assert props.cancel_retry_interval == 0.25

    def test_bind_int_to_float_field(self):
        config = Config({"shelltimers": {"delay": {"cancel_retry_interval": 1}}})
        props = config.bind(DelayProperties)
        assert props.cancel_retry_interval == 1.0
        assert isinstance(props.cancel_retry_interval, float)

    def test_bind_custom_dataclass(self):
        @config_properties(prefix="app.timers")
        @dataclass
        class TimerConfig:
            period: int = 1000

        assert Config({}).bind(TimerConfig).period == 1000
        assert Config({"app": {"timers": {"period": 250}}}).bind(TimerConfig).period == 250

    def test_bind_undecorated_class_raises(self):
        @dataclass
        class Plain:
            value: int = 1

        with pytest.raises(ValueError, match="not decorated"):
            Config({}).bind(Plain)
