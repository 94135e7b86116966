"""
Repository Health Security Layer
================================
Configuration and input validation for the Repository Health MCP server.

Author: Risk Armor
"""

from .config import ServerConfig, get_server_config, set_server_config
from .validators import ValidationError, validate_repository_path

__all__ = [
    'ServerConfig',
    'get_server_config',
    'set_server_config',
    'ValidationError',
    'validate_repository_path'
]
