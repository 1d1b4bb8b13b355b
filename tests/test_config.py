# Copyright 2025 Softwell S.r.l.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     https://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Tests for command line configuration."""

import logging

import pytest

from genro_urlcodec import ParserOptions
from genro_urlcodec.config import CliConfig, ConfigError, load_env_config, parse_bool


class TestParseBool:
    """Test parse_bool."""

    @pytest.mark.parametrize("value", ["true", "1", "YES", " on "])
    def test_true(self, value):
        """True words are recognized case-insensitively."""
        assert parse_bool("X", value) is True

    @pytest.mark.parametrize("value", ["false", "0", "No", "OFF"])
    def test_false(self, value):
        """False words are recognized case-insensitively."""
        assert parse_bool("X", value) is False

    def test_bool_passthrough(self):
        """Booleans are returned unchanged."""
        assert parse_bool("X", False) is False

    def test_invalid(self):
        """Other words raise ConfigError naming the variable."""
        with pytest.raises(ConfigError, match="GENRO_URLCODEC_TRIM"):
            parse_bool("GENRO_URLCODEC_TRIM", "maybe")


class TestLoadEnvConfig:
    """Test load_env_config."""

    def test_prefixed_variables_only(self):
        """Only GENRO_URLCODEC_* variables are read."""
        environ = {"GENRO_URLCODEC_TRIM": "yes", "PATH": "/bin", "GENRO_ASGI_PORT": "1"}
        assert load_env_config(environ) == {"trim": True}

    def test_all_parser_options(self):
        """Every parser option can be set from the environment."""
        environ = {
            "GENRO_URLCODEC_PLUS_AS_SPACE": "false",
            "GENRO_URLCODEC_ALWAYS_ARRAY": "1",
            "GENRO_URLCODEC_ARRAY_LIKE_AS_ARRAY_ALWAYS": "off",
            "GENRO_URLCODEC_TRIM": "on",
        }
        assert load_env_config(environ) == {
            "plus_as_space": False,
            "always_array": True,
            "array_like_as_array_always": False,
            "trim": True,
        }

    def test_log_level(self):
        """The log level is upper-cased."""
        assert load_env_config({"GENRO_URLCODEC_LOG_LEVEL": "debug"}) == {"log_level": "DEBUG"}

    def test_unknown_variable(self):
        """Unknown prefixed variables raise ConfigError."""
        with pytest.raises(ConfigError, match="GENRO_URLCODEC_COLOR"):
            load_env_config({"GENRO_URLCODEC_COLOR": "1"})

    def test_reads_os_environ(self, monkeypatch):
        """Without an explicit mapping os.environ is read."""
        monkeypatch.setenv("GENRO_URLCODEC_ALWAYS_ARRAY", "true")
        assert load_env_config()["always_array"] is True


class TestCliConfig:
    """Test CliConfig precedence."""

    def test_defaults(self):
        """With no sources the parser defaults apply."""
        config = CliConfig(environ={})
        assert config.parser_options == ParserOptions()
        assert config.log_level == logging.WARNING

    def test_env_over_defaults(self):
        """Environment values override defaults."""
        config = CliConfig(environ={"GENRO_URLCODEC_TRIM": "1", "GENRO_URLCODEC_LOG_LEVEL": "info"})
        assert config.parser_options.trim is True
        assert config.log_level == logging.INFO

    def test_cli_over_env(self):
        """Command line values override the environment."""
        config = CliConfig(environ={"GENRO_URLCODEC_TRIM": "1"}, trim=False)
        assert config.parser_options.trim is False

    def test_none_cli_value_ignored(self):
        """None command line values do not override."""
        config = CliConfig(environ={"GENRO_URLCODEC_TRIM": "1"}, trim=None)
        assert config.parser_options.trim is True

    def test_invalid_log_level(self):
        """Unknown level names raise ConfigError."""
        config = CliConfig(environ={"GENRO_URLCODEC_LOG_LEVEL": "loud"})
        with pytest.raises(ConfigError):
            config.log_level

    def test_bracket_access(self):
        """Missing keys read as None."""
        config = CliConfig(environ={})
        assert config["log_level"] == "WARNING"
        assert config["missing"] is None
