"""
AWS Shared Files Format

This module reads and writes the two INI-style files used by the AWS CLI:
the credentials file (access key pairs) and the config file (regions).
Only the keys this tool manages are recognized, everything else in the
files is skipped on read.
"""

import re
from dataclasses import dataclass
from typing import Dict, Optional, Pattern

__all__ = [
    'Profile',
    'ProfileSet',
    'parse_credentials',
    'parse_config',
    'render_credentials',
    'render_config',
]

DEFAULT_PROFILE = "default"

_CREDENTIALS_HEADER = re.compile(r"^\[([^\]]+)\]$")
_CONFIG_HEADER = re.compile(r"^\[(?:profile )?([^\]]+)\]$")
_KEY_VALUE = re.compile(r"^([^=]+)=(.*)$")

# File key -> Profile attribute
_CREDENTIALS_KEYS = {
    "aws_access_key_id": "access_key_id",
    "aws_secret_access_key": "secret_access_key",
}
_CONFIG_KEYS = {
    "region": "region",
}


@dataclass
class Profile:
    """Fields of a single profile. Each file only tracks a subset of them."""
    access_key_id: Optional[str] = None
    secret_access_key: Optional[str] = None
    region: Optional[str] = None

    def copy(self) -> "Profile":
        return Profile(self.access_key_id, self.secret_access_key, self.region)


# Insertion order mirrors the order of sections in the file
ProfileSet = Dict[str, Profile]


def _parse(text: Optional[str], header: Pattern, keys: Dict[str, str]) -> ProfileSet:
    profiles: ProfileSet = {}
    if not text:
        return profiles

    current = None
    for line in text.split("\n"):
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        match = header.match(line)
        if match:
            current = match.group(1)
            profiles[current] = Profile()
            continue

        if current is None:
            continue

        match = _KEY_VALUE.match(line)
        if match:
            attr = keys.get(match.group(1).strip())
            if attr:
                setattr(profiles[current], attr, match.group(2).strip())

    return profiles


def parse_credentials(text: Optional[str]) -> ProfileSet:
    """
    Parse the contents of an AWS credentials file.

    Args:
        text: File contents, or None if the file does not exist

    Returns:
        ProfileSet: Profiles in file order with access key fields set
    """
    return _parse(text, _CREDENTIALS_HEADER, _CREDENTIALS_KEYS)


def parse_config(text: Optional[str]) -> ProfileSet:
    """
    Parse the contents of an AWS config file.

    Both ``[profile <name>]`` and ``[<name>]`` headers map to ``<name>``.
    When the same name appears twice the later section wins.

    Args:
        text: File contents, or None if the file does not exist

    Returns:
        ProfileSet: Profiles in file order with the region field set
    """
    return _parse(text, _CONFIG_HEADER, _CONFIG_KEYS)


def render_credentials(profiles: ProfileSet) -> str:
    """Render profiles in the credentials file layout."""
    lines = []
    for name, profile in profiles.items():
        lines.append(f"[{name}]")
        lines.append(f"aws_access_key_id = {profile.access_key_id or ''}")
        lines.append(f"aws_secret_access_key = {profile.secret_access_key or ''}")
        lines.append("")
    return "".join(f"{line}\n" for line in lines)


def render_config(profiles: ProfileSet) -> str:
    """Render profiles in the config file layout."""
    lines = []
    for name, profile in profiles.items():
        if name == DEFAULT_PROFILE:
            lines.append(f"[{DEFAULT_PROFILE}]")
        else:
            lines.append(f"[profile {name}]")
        if profile.region:
            lines.append(f"region = {profile.region}")
        lines.append("")
    return "".join(f"{line}\n" for line in lines)
