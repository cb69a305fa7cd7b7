"""
AWS Profile Management utilities for managing AWS credentials and profiles
stored in the shared credentials and config files.
"""

from .errors import (
    ProfileError,
    ProfileNotFoundError,
    DefaultProfileProtectedError,
    ValidationError
)
from .ini_format import (
    Profile,
    parse_credentials,
    parse_config,
    render_credentials,
    render_config
)
from .repository import FileKind, ProfileRepository, FileProfileRepository
from .profile_store import ProfileInfo, ProfileStore
from .validation import (
    validate_region,
    validate_required,
    validate_profile_name,
    validate_profile
)
