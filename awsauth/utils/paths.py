"""
Locations of the AWS shared credentials and config files.
"""

import os
from pathlib import Path
from typing import Optional, Tuple

CREDENTIALS_FILE_ENV = "AWS_SHARED_CREDENTIALS_FILE"
CONFIG_FILE_ENV = "AWS_CONFIG_FILE"


def get_aws_dir() -> Path:
    """Get the path to the default AWS directory (~/.aws)."""
    return Path.home() / ".aws"


def get_aws_credentials_path(aws_dir: Optional[Path] = None) -> Path:
    """
    Get the path to the AWS credentials file.

    Args:
        aws_dir: Explicit base directory; overrides the environment

    Returns:
        Path: Location of the credentials file
    """
    if aws_dir is not None:
        return Path(aws_dir) / "credentials"

    override = os.environ.get(CREDENTIALS_FILE_ENV)
    if override:
        return Path(override).expanduser()

    return get_aws_dir() / "credentials"


def get_aws_config_path(aws_dir: Optional[Path] = None) -> Path:
    """
    Get the path to the AWS config file.

    Args:
        aws_dir: Explicit base directory; overrides the environment

    Returns:
        Path: Location of the config file
    """
    if aws_dir is not None:
        return Path(aws_dir) / "config"

    override = os.environ.get(CONFIG_FILE_ENV)
    if override:
        return Path(override).expanduser()

    return get_aws_dir() / "config"


def resolve_aws_paths(aws_dir: Optional[Path] = None) -> Tuple[Path, Path]:
    """Return the (credentials, config) paths for the given base directory."""
    return get_aws_credentials_path(aws_dir), get_aws_config_path(aws_dir)
