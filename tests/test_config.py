"""Tests for configuration loading and logging setup."""

import logging
from pathlib import Path

import pytest
from rich.logging import RichHandler

from neuro_ai_boost.config import AppConfig, LoggingConfig, configure_logging, load_config


class TestAppConfig:
    """Tests for AppConfig dataclass."""

    def test_default_config(self):
        """Test default configuration values."""
        config = AppConfig()

        assert config.logging.level == "INFO"
        assert config.logging.file is None

    def test_from_yaml_missing_file(self, tmp_path):
        """Test loading from non-existent file returns defaults."""
        config = AppConfig.from_yaml(tmp_path / "nonexistent.yaml")

        assert config.logging.level == "INFO"

    def test_from_yaml_valid_file(self, tmp_path):
        """Test loading from valid YAML file."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("""
logging:
  level: DEBUG
  file: /var/log/nab.log
""")
        config = AppConfig.from_yaml(config_file)

        assert config.logging.level == "DEBUG"
        assert config.logging.file == Path("/var/log/nab.log")

    def test_from_yaml_ignores_unknown_keys(self, tmp_path):
        """Test unknown sections and keys are ignored."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("""
cortex:
  overclock: true
logging:
  colour: purple
""")
        config = AppConfig.from_yaml(config_file)

        assert config.logging.level == "INFO"
        assert not hasattr(config.logging, "colour")

    def test_from_yaml_empty_file(self, tmp_path):
        """Test an empty file gives defaults."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("")

        assert AppConfig.from_yaml(config_file) == AppConfig()

    @pytest.mark.parametrize(
        "content",
        [
            "logging: [level, DEBUG\n",  # unterminated flow sequence
            "42\n",
            "- logging\n- level\n",
            "logging:\n  - level\n  - DEBUG\n",
            "logging: verbose\n",
        ],
        ids=["malformed", "scalar", "top-level-list", "logging-list", "logging-scalar"],
    )
    def test_from_yaml_bad_content_gives_defaults(self, tmp_path, content):
        """Test malformed or wrongly shaped YAML falls back to defaults."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text(content)

        assert AppConfig.from_yaml(config_file) == AppConfig()

    def test_from_yaml_directory_gives_defaults(self, tmp_path):
        """Test a directory path falls back to defaults."""
        assert AppConfig.from_yaml(tmp_path) == AppConfig()

    def test_from_yaml_binary_file_gives_defaults(self, tmp_path):
        """Test an undecodable file falls back to defaults."""
        config_file = tmp_path / "config.yaml"
        config_file.write_bytes(b"\xff\xfe\x00\x81logging")

        assert AppConfig.from_yaml(config_file) == AppConfig()

    @pytest.mark.parametrize("value", ["42", "[a, b]", "''", "{path: x}"])
    def test_from_yaml_invalid_file_value_ignored(self, tmp_path, value):
        """Test a non-path logging.file is dropped while level is kept."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text(f"logging:\n  level: DEBUG\n  file: {value}\n")

        config = AppConfig.from_yaml(config_file)

        assert config.logging.level == "DEBUG"
        assert config.logging.file is None

    def test_from_yaml_non_string_level_ignored(self, tmp_path):
        """Test a non-string level keeps the default."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("logging:\n  level: 10\n")

        assert AppConfig.from_yaml(config_file).logging.level == "INFO"


class TestLoadConfig:
    """Tests for load_config."""

    def test_no_path_returns_defaults(self, tmp_path, monkeypatch):
        """Test no file is searched for without an explicit path."""
        (tmp_path / "config.yaml").write_text("logging:\n  level: DEBUG\n")
        monkeypatch.chdir(tmp_path)

        assert load_config().logging.level == "INFO"

    def test_explicit_path(self, tmp_path):
        """Test an explicit path is loaded."""
        config_file = tmp_path / "nab.yaml"
        config_file.write_text("logging:\n  level: ERROR\n")

        assert load_config(config_file).logging.level == "ERROR"


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_quiet_by_default(self):
        """Test default setup only installs a NullHandler."""
        logger = configure_logging(LoggingConfig())

        assert logger.name == "neuro_ai_boost"
        assert logger.propagate is False
        assert [type(h) for h in logger.handlers] == [logging.NullHandler]
        assert logger.level == logging.INFO

    def test_verbose_adds_rich_handler(self):
        """Test verbose logs at DEBUG through Rich on stderr."""
        logger = configure_logging(LoggingConfig(level="ERROR"), verbose=True)

        assert logger.level == logging.DEBUG
        handlers = [h for h in logger.handlers if isinstance(h, RichHandler)]
        assert len(handlers) == 1
        assert handlers[0].console.stderr

    def test_file_logging(self, tmp_path):
        """Test records are written to the configured file."""
        log_file = tmp_path / "logs" / "nab.log"
        logger = configure_logging(LoggingConfig(level="DEBUG", file=log_file))

        logging.getLogger("neuro_ai_boost.runners.sequential").debug("lattice synchronized")

        assert "lattice synchronized" in log_file.read_text()
        assert logger.level == logging.DEBUG

    def test_reconfigure_replaces_handlers(self, tmp_path):
        """Test calling twice does not stack handlers."""
        configure_logging(LoggingConfig(), verbose=True)
        logger = configure_logging(LoggingConfig(), verbose=True)

        assert len(logger.handlers) == 1

    def test_unknown_level_falls_back_to_info(self):
        """Test an unrecognized level name uses INFO."""
        logger = configure_logging(LoggingConfig(level="LOUD"))

        assert logger.level == logging.INFO

    def test_level_name_of_non_level_attribute(self):
        """Test a logging module attribute that is not a level uses INFO."""
        logger = configure_logging(LoggingConfig(level="basicConfig"))

        assert logger.level == logging.INFO

    def test_unopenable_log_file_skipped(self, tmp_path):
        """Test a log path that cannot be created disables file logging only."""
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")

        logger = configure_logging(LoggingConfig(file=blocker / "nab.log"))

        assert [type(h) for h in logger.handlers] == [logging.NullHandler]
        assert not (blocker / "nab.log").exists()

    def test_unopenable_log_file_keeps_verbose(self, tmp_path):
        """Test verbose console logging survives a bad log path."""
        logger = configure_logging(LoggingConfig(file=tmp_path), verbose=True)

        assert [type(h) for h in logger.handlers] == [RichHandler]
