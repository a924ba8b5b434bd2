"""
Configuration management with YAML loading and logging setup.

A config file can only tune logging. Anything unreadable or of the wrong
shape is logged and replaced by defaults, so the sequence always runs.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import yaml
from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "neuro_ai_boost"

logger = logging.getLogger(__name__)


@dataclass
class LoggingConfig:
    level: str = "INFO"
    file: Path | None = None


@dataclass
class AppConfig:
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_yaml(cls, path: Path) -> "AppConfig":
        """Load configuration from YAML file."""
        if not path.exists():
            logger.warning(f"Config file not found, using defaults: {path}")
            return cls()

        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
            logger.warning(f"Could not read config {path}, using defaults: {e}")
            return cls()

        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data) -> "AppConfig":
        """Create config from parsed YAML, skipping anything malformed."""
        config = cls()

        if data is None:
            return config
        if not isinstance(data, dict):
            logger.warning(f"Config must be a mapping, got {type(data).__name__}; using defaults")
            return config

        section = data.get("logging")
        if section is None:
            return config
        if not isinstance(section, dict):
            logger.warning(f"'logging' must be a mapping, got {type(section).__name__}; using defaults")
            return config

        level = section.get("level")
        if isinstance(level, str):
            config.logging.level = level
        elif level is not None:
            logger.warning(f"Ignoring non-string logging.level: {level!r}")

        log_file = section.get("file")
        if isinstance(log_file, str) and log_file:
            config.logging.file = Path(log_file)
        elif log_file is not None:
            logger.warning(f"Ignoring invalid logging.file: {log_file!r}")

        return config


def load_config(config_path: Path | None = None) -> AppConfig:
    """
    Load configuration.

    Only an explicitly given file is read; there is no search of
    standard locations, so a plain run touches no files.

    Args:
        config_path: Path to config file

    Returns:
        AppConfig (defaults if no path given or the file is unusable)
    """
    if config_path is None:
        return AppConfig()
    return AppConfig.from_yaml(config_path)


def _resolve_level(name: str) -> int:
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(config: LoggingConfig, verbose: bool = False) -> logging.Logger:
    """
    Attach handlers to the package logger.

    File logging is enabled by `logging.file`; console logging goes to
    stderr and only with verbose. Without either, nothing is emitted.
    A log file that cannot be opened is skipped.

    Args:
        config: Logging section of the app config
        verbose: Log at DEBUG to stderr

    Returns:
        The configured package logger
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    package_logger.setLevel(logging.DEBUG if verbose else _resolve_level(config.level))
    # Keep records away from the root logger's last-resort stderr handler
    package_logger.propagate = False

    if verbose:
        package_logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False))

    file_error = None
    if config.file is not None:
        try:
            config.file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(config.file)
        except (OSError, ValueError) as e:
            file_error = e
        else:
            file_handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
            package_logger.addHandler(file_handler)

    if not package_logger.handlers:
        package_logger.addHandler(logging.NullHandler())

    if file_error is not None:
        logger.warning(f"File logging disabled, cannot open {config.file}: {file_error}")

    return package_logger
