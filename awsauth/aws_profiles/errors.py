"""
Error kinds raised by the profile store.
"""


class ProfileError(Exception):
    """Base class for profile management errors."""


class ProfileNotFoundError(ProfileError):
    """The requested profile is not present in the credentials file."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Profile '{name}' not found.")


class DefaultProfileProtectedError(ProfileError):
    """The default profile cannot be removed."""

    def __init__(self):
        super().__init__("Cannot remove the default profile.")


class ValidationError(ProfileError, ValueError):
    """A profile field failed validation."""
