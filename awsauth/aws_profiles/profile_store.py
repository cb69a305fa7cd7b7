"""
AWS Profile Store

This module implements the profile operations behind the aws-auth CLI:
adding, activating, listing and removing named profiles. Every operation
loads both files fresh from the repository, applies its change in memory
and rewrites the files in full.
"""

import logging
from typing import Callable, List, Optional

from .errors import DefaultProfileProtectedError, ProfileNotFoundError
from .ini_format import DEFAULT_PROFILE, Profile
from .repository import FileKind, ProfileRepository
from .validation import validate_profile_name, validate_region, validate_required

__all__ = [
    'ProfileInfo',
    'ProfileStore',
]

logger = logging.getLogger(__name__)


class ProfileInfo:
    """Contains the listing information of a stored profile."""
    def __init__(self, name: str, region: Optional[str] = None):
        self.name = name
        self.region = region
        self.is_default = (name == DEFAULT_PROFILE)

    def __eq__(self, other) -> bool:
        if not isinstance(other, ProfileInfo):
            return NotImplemented
        return self.name == other.name and self.region == other.region

    def __repr__(self) -> str:
        return f"ProfileInfo(name={self.name!r}, region={self.region!r})"

    def __str__(self) -> str:
        """Return string representation of the profile info."""
        return f"{self.name} (region: {self.region or 'not set'})"


class ProfileStore:
    """
    Manages named profiles across the credentials and config files.
    """

    def __init__(self, repository: ProfileRepository):
        """
        Initialize the store.

        Args:
            repository: Storage for the credentials and config profile sets
        """
        self.repository = repository

    def _load(self):
        return (self.repository.load_set(FileKind.CREDENTIALS),
                self.repository.load_set(FileKind.CONFIG))

    def _save(self, credentials, config) -> None:
        self.repository.save_set(FileKind.CREDENTIALS, credentials)
        self.repository.save_set(FileKind.CONFIG, config)

    def get(self, profile_name: str) -> Profile:
        """
        Get a profile with its region merged in from the config file.

        Raises:
            ProfileNotFoundError: If the profile has no credentials entry
        """
        credentials, config = self._load()
        if profile_name not in credentials:
            raise ProfileNotFoundError(profile_name)

        profile = credentials[profile_name].copy()
        if profile_name in config:
            profile.region = config[profile_name].region
        return profile

    def add(self, profile_name: str, access_key_id: str,
            secret_access_key: str, region: str) -> Profile:
        """
        Add a profile, or overwrite it in place if it already exists.

        Args:
            profile_name: Name of the profile
            access_key_id: AWS access key ID
            secret_access_key: AWS secret access key
            region: Region written to the config file (e.g. us-east-1)

        Returns:
            Profile: The stored profile

        Raises:
            ValidationError: If a field is missing or the region is malformed
        """
        profile_name = validate_profile_name(profile_name)
        profile = Profile(
            access_key_id=validate_required(access_key_id, "Access Key ID"),
            secret_access_key=validate_required(secret_access_key, "Secret Access Key"),
            region=validate_region(region),
        )

        credentials, config = self._load()
        logger.debug("%s profile %s", "Updating" if profile_name in credentials else "Adding", profile_name)

        credentials[profile_name] = Profile(profile.access_key_id, profile.secret_access_key)
        config[profile_name] = Profile(region=profile.region)

        self._save(credentials, config)
        return profile

    def use(self, profile_name: str) -> Profile:
        """
        Make a profile the active one by copying it over the default profile.

        The source profile stays in place and can be selected again later.

        Returns:
            Profile: The activated profile, region included when set

        Raises:
            ProfileNotFoundError: If the profile has no credentials entry
        """
        credentials, config = self._load()
        if profile_name not in credentials:
            raise ProfileNotFoundError(profile_name)

        credentials[DEFAULT_PROFILE] = credentials[profile_name].copy()
        if profile_name in config:
            config[DEFAULT_PROFILE] = config[profile_name].copy()
        else:
            config[DEFAULT_PROFILE] = Profile()

        self._save(credentials, config)
        logger.debug("Default profile now mirrors %s", profile_name)

        active = credentials[profile_name].copy()
        active.region = config[DEFAULT_PROFILE].region
        return active

    def list(self) -> List[ProfileInfo]:
        """
        List the profiles of the credentials file in file order.

        Names that only appear in the config file are not included.

        Returns:
            List of ProfileInfo objects with the region from the config file
        """
        credentials, config = self._load()
        profiles = []
        for name in credentials:
            region = config[name].region if name in config else None
            profiles.append(ProfileInfo(name, region))
        return profiles

    def remove(self, profile_name: str, confirm: Callable[[str], bool]) -> bool:
        """
        Remove a profile from both files.

        Args:
            profile_name: Name of the profile to remove
            confirm: Asked with a yes/no question before anything is deleted

        Returns:
            bool: True if removed, False if the user declined

        Raises:
            DefaultProfileProtectedError: If asked to remove the default profile
            ProfileNotFoundError: If the profile has no credentials entry
        """
        if profile_name == DEFAULT_PROFILE:
            raise DefaultProfileProtectedError()

        credentials, config = self._load()
        if profile_name not in credentials:
            raise ProfileNotFoundError(profile_name)

        if not confirm(f"Are you sure you want to remove profile '{profile_name}'?"):
            logger.debug("Removal of %s declined", profile_name)
            return False

        del credentials[profile_name]
        config.pop(profile_name, None)

        self._save(credentials, config)
        return True

    def current(self) -> List[str]:
        """
        Get the names of the profiles the default profile was copied from.

        Returns:
            Names of non-default profiles whose keys match the default profile
        """
        credentials = self.repository.load_set(FileKind.CREDENTIALS)
        active = credentials.get(DEFAULT_PROFILE)
        if active is None:
            return []

        return [
            name for name, profile in credentials.items()
            if name != DEFAULT_PROFILE
            and profile.access_key_id == active.access_key_id
            and profile.secret_access_key == active.secret_access_key
        ]
