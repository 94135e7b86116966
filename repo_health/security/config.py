"""
Server Configuration Module
============================
Centralized configuration for the Repository Health MCP server.

Configuration is resolved once at process start from, in order:
1. Built-in defaults
2. An optional YAML file (``REPO_HEALTH_CONFIG``)
3. Environment variables (a ``.env`` file is honoured via python-dotenv)

Nothing is written back; each process starts from the same sources.

Author: Risk Armor
"""

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv

from .validators import DEFAULT_MAX_PATH_LENGTH

logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class ServerConfig:
    """
    Server configuration container.

    Attributes:
        server_name: Name advertised to MCP clients during initialization
        server_version: Version advertised to MCP clients
        log_level: Root logging level (logs are written to stderr)
        max_path_length: Longest repository_path accepted by the tools
        allowed_base_dir: When set, audited paths must resolve inside it
    """

    server_name: str = "repository-health-mcp"
    server_version: str = "1.0.0"
    log_level: str = "INFO"
    max_path_length: int = DEFAULT_MAX_PATH_LENGTH
    allowed_base_dir: Optional[str] = None

    @classmethod
    def from_environment(cls) -> 'ServerConfig':
        """
        Load configuration from environment variables.

        If ``REPO_HEALTH_CONFIG`` names a YAML file it is loaded first and
        individual variables override its values.

        Returns:
            ServerConfig instance with environment-based settings
        """
        load_dotenv()

        config_file = os.getenv('REPO_HEALTH_CONFIG')
        config = cls.from_file(config_file) if config_file else cls()

        log_level = os.getenv('REPO_HEALTH_LOG_LEVEL')
        if log_level:
            config.log_level = log_level.upper()

        base_dir = os.getenv('REPO_HEALTH_ALLOWED_BASE_DIR')
        if base_dir:
            config.allowed_base_dir = base_dir

        max_length = os.getenv('REPO_HEALTH_MAX_PATH_LENGTH')
        if max_length:
            config.max_path_length = int(max_length)

        return config

    @classmethod
    def from_file(cls, config_path: str) -> 'ServerConfig':
        """
        Load configuration from a YAML file.

        Unknown keys are ignored with a warning.

        Args:
            config_path: Path to configuration file

        Returns:
            ServerConfig instance

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the file does not contain a mapping
        """
        config_path = Path(config_path)

        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, 'r') as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"Configuration file must contain a mapping: {config_path}")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning(f"Ignoring unknown configuration keys: {', '.join(unknown)}")

        logger.info(f"Loaded configuration from {config_path}")
        return cls(**{key: value for key, value in data.items() if key in known})

    def validate(self) -> bool:
        """
        Validate configuration settings.

        Returns:
            True if configuration is valid

        Raises:
            ValueError: If configuration is invalid
        """
        if not isinstance(self.server_name, str) or not self.server_name:
            raise ValueError("Server name must be a non-empty string")

        if not isinstance(self.log_level, str) or self.log_level.upper() not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log level: {self.log_level}")

        # bool is an int subclass
        if not isinstance(self.max_path_length, int) or isinstance(self.max_path_length, bool):
            raise ValueError(f"Maximum path length must be an integer: {self.max_path_length!r}")

        if self.max_path_length < 1:
            raise ValueError("Maximum path length must be at least 1")

        if self.allowed_base_dir and not Path(self.allowed_base_dir).is_dir():
            logger.warning(f"Allowed base directory does not exist: {self.allowed_base_dir}")

        return True

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert configuration to dictionary (for logging).

        Returns:
            Dictionary representation
        """
        return {f.name: getattr(self, f.name) for f in fields(self)}


# Global configuration instance
_config: Optional[ServerConfig] = None


def get_server_config() -> ServerConfig:
    """
    Get the process-wide configuration, loading it on first use.

    Returns:
        ServerConfig instance
    """
    global _config

    if _config is None:
        config = ServerConfig.from_environment()
        config.validate()
        _config = config
        logger.info(f"Server configuration loaded: {_config.to_dict()}")

    return _config


def set_server_config(config: Optional[ServerConfig]) -> None:
    """
    Replace the process-wide configuration.

    Passing ``None`` clears it so the next ``get_server_config`` reloads.

    Args:
        config: ServerConfig instance to use
    """
    global _config

    if config is not None:
        config.validate()

    _config = config
