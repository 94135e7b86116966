"""
Input Validation Module
========================
Validation of tool arguments before they reach the auditor.

Only the *shape* of an argument is validated here. Whether the path
exists, is readable or is a directory is never an error: the individual
standards treat all of those as missing evidence.

Author: Risk Armor
"""

import logging
from pathlib import Path
from typing import Any, Optional

logger = logging.getLogger(__name__)

DEFAULT_MAX_PATH_LENGTH = 4096


class ValidationError(Exception):
    """Custom exception for validation failures."""
    pass


# ================================================================================
# REPOSITORY PATH VALIDATION
# ================================================================================

def validate_repository_path(path: Any, base_dir: Optional[str] = None,
                             max_length: int = DEFAULT_MAX_PATH_LENGTH) -> Path:
    """
    Validate a repository path argument.

    Args:
        path: Raw argument value received from the client
        base_dir: Base directory to restrict audits to
        max_length: Maximum accepted path length

    Returns:
        Path object for the (unresolved) repository path

    Raises:
        ValidationError: If the argument is not a usable path string
    """
    if path is None:
        raise ValidationError("repository_path is required")

    if not isinstance(path, str):
        raise ValidationError(
            f"repository_path must be a string, got {type(path).__name__}"
        )

    if not path.strip():
        raise ValidationError("repository_path cannot be empty")

    # Length check
    if len(path) > max_length:
        raise ValidationError("repository_path exceeds maximum length")

    # Check for null bytes
    if '\x00' in path:
        raise ValidationError("Null byte in repository_path")

    path_obj = Path(path)

    # If base_dir is specified, ensure path is within it
    if base_dir:
        base_path = Path(base_dir).resolve()
        try:
            path_obj.resolve().relative_to(base_path)
        except ValueError:
            raise ValidationError(f"Path escapes base directory: {base_dir}")

    logger.debug(f"Validated repository path: {path_obj}")
    return path_obj

