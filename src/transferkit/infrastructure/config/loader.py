"""Configuration loading and validation."""

import os
import yaml
from pathlib import Path
from typing import Optional, Dict, Any, Mapping
from dataclasses import dataclass, field, fields

from transferkit.domain.exceptions import ConfigurationError
from transferkit.shared.logging import get_logger

logger = get_logger(__name__)

LAMBDA_TEMP_ROOT = Path("/tmp")
LOCAL_TEMP_ROOT = Path("./output")

_TRUE_VALUES = ("true", "1", "yes", "on")


def resolve_temp_root(environ: Optional[Mapping[str, str]] = None) -> Path:
    """
    Pick the scratch directory for this process.

    Inside a managed function runtime (AWS_LAMBDA_FUNCTION_NAME set) only /tmp
    is writable; everywhere else a local ./output directory is used.
    """
    environ = os.environ if environ is None else environ
    if environ.get("AWS_LAMBDA_FUNCTION_NAME"):
        return LAMBDA_TEMP_ROOT
    return LOCAL_TEMP_ROOT


@dataclass
class TransferSettings:
    """Configuration for file transfers."""

    temp_dir: Path = field(default_factory=resolve_temp_root)

    # HTTP
    http_timeout: float = 600
    chunk_size: int = 8192

    # Upload integrity header (Content-MD5)
    checksum: bool = True

    # Startup
    clear_temp_on_start: bool = True

    log_level: str = "INFO"

    def __post_init__(self):
        """Validate configuration after initialization."""
        self.temp_dir = Path(self.temp_dir)
        self._validate()

    def _validate(self):
        """Validate configuration values."""
        if self.http_timeout <= 0:
            raise ConfigurationError(f"HTTP timeout must be positive, got: {self.http_timeout}")

        if self.chunk_size <= 0:
            raise ConfigurationError(f"Chunk size must be positive, got: {self.chunk_size}")

        if str(self.log_level).upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ConfigurationError(f"Invalid log level: {self.log_level}")


class ConfigLoader:
    """Loads and validates settings from a YAML file and environment variables."""

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize config loader.

        Args:
            config_path: Optional path to YAML config file
        """
        self.config_path = Path(config_path) if config_path else Path("transferkit.yaml")
        self._logger = get_logger(__name__)

    def load(self, overrides: Optional[Dict[str, Any]] = None) -> TransferSettings:
        """
        Load settings from file and environment.

        Environment variables take precedence over the config file, and
        runtime overrides take precedence over both.

        Returns:
            TransferSettings instance

        Raises:
            ConfigurationError: If configuration is invalid
        """
        config_dict = {}

        if self.config_path.exists():
            self._logger.info(f"Loading config from {self.config_path}")
            with open(self.config_path, 'r') as f:
                try:
                    yaml_config = yaml.safe_load(f) or {}
                except yaml.YAMLError as e:
                    raise ConfigurationError(f"Invalid YAML in {self.config_path}: {e}") from e
            if not isinstance(yaml_config, dict):
                raise ConfigurationError(f"Config file must contain a mapping: {self.config_path}")
            config_dict.update(yaml_config)
        else:
            self._logger.debug(f"Config file not found: {self.config_path}")

        config_dict.update(self._load_from_env())

        if overrides:
            for k, v in overrides.items():
                if v is None:
                    continue
                config_dict[k] = v

        valid_fields = {f.name for f in fields(TransferSettings)}
        filtered_config = {k: v for k, v in config_dict.items() if k in valid_fields}

        try:
            return TransferSettings(**filtered_config)
        except TypeError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

    def _load_from_env(self) -> Dict[str, Any]:
        """Load configuration from environment variables."""
        env_config = {}

        if temp_dir := os.getenv("TRANSFERKIT_TEMP_DIR"):
            env_config["temp_dir"] = Path(temp_dir)

        if timeout := os.getenv("TRANSFERKIT_HTTP_TIMEOUT"):
            try:
                env_config["http_timeout"] = float(timeout)
            except ValueError:
                self._logger.warning(f"Invalid TRANSFERKIT_HTTP_TIMEOUT value: {timeout}")

        if checksum := os.getenv("TRANSFERKIT_CHECKSUM"):
            env_config["checksum"] = checksum.lower() in _TRUE_VALUES

        if clear := os.getenv("TRANSFERKIT_CLEAR_TEMP"):
            env_config["clear_temp_on_start"] = clear.lower() in _TRUE_VALUES

        if log_level := os.getenv("TRANSFERKIT_LOG_LEVEL"):
            env_config["log_level"] = log_level.upper()

        return env_config
