"""
Utility functions for the command line front end.
"""

from .paths import get_aws_dir, get_aws_credentials_path, get_aws_config_path, resolve_aws_paths
from .prompts import ConsolePrompter

__all__ = [
    'get_aws_dir',
    'get_aws_credentials_path',
    'get_aws_config_path',
    'resolve_aws_paths',
    'ConsolePrompter',
]
