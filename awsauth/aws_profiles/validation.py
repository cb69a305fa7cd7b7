"""
Profile field validation and live credential checks.
"""

import logging
import re
from typing import Optional, Tuple

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from .errors import ProfileNotFoundError, ValidationError

__all__ = [
    'REGION_PATTERN',
    'DEFAULT_REGION',
    'validate_required',
    'validate_profile_name',
    'validate_region',
    'validate_profile',
]

logger = logging.getLogger(__name__)

REGION_PATTERN = re.compile(r"^[a-z]{2}-[a-z]+-\d+$")
DEFAULT_REGION = "us-east-1"


def validate_required(value: Optional[str], field: str) -> str:
    """
    Check that a required field is present.

    Args:
        value: Raw value
        field: Human readable field name used in the error message

    Returns:
        str: The value with surrounding whitespace removed

    Raises:
        ValidationError: If the value is missing or blank
    """
    value = (value or "").strip()
    if not value:
        raise ValidationError(f"{field} is required")
    return value


def validate_profile_name(value: Optional[str]) -> str:
    """
    Check that a profile name can be written as a section header.

    A name containing "]" or a line break would not parse back as the same
    section, and its keys would end up in the preceding profile.

    Raises:
        ValidationError: If the name is blank or holds such characters
    """
    value = validate_required(value, "Profile name")
    if any(c in value for c in "]\n\r"):
        raise ValidationError("Profile name cannot contain ']' or line breaks")
    return value


def validate_region(value: Optional[str]) -> str:
    """
    Check that a region looks like an AWS region name (e.g. us-east-1).

    Raises:
        ValidationError: If the value does not match REGION_PATTERN
    """
    value = (value or "").strip()
    if not REGION_PATTERN.match(value):
        raise ValidationError("Please enter a valid AWS region (e.g., us-east-1)")
    return value


def validate_profile(store, profile_name: str) -> Tuple[bool, str]:
    """
    Validate the stored credentials of a profile against AWS STS.

    Args:
        store: ProfileStore to read the profile from
        profile_name: Name of the profile to validate

    Returns:
        Tuple of (success, message)
    """
    try:
        profile = store.get(profile_name)
    except ProfileNotFoundError:
        return False, f"Profile '{profile_name}' not found"

    if not profile.access_key_id or not profile.secret_access_key:
        return False, f"Profile '{profile_name}' has incomplete credentials"

    session = boto3.session.Session(
        aws_access_key_id=profile.access_key_id,
        aws_secret_access_key=profile.secret_access_key,
        region_name=profile.region or DEFAULT_REGION,
    )

    try:
        identity = session.client("sts").get_caller_identity()
    except (ClientError, BotoCoreError) as e:
        logger.debug("STS check failed for %s: %s", profile_name, e)
        return False, f"Credential validation failed: {str(e)}"

    return True, f"Credentials are valid (account: {identity.get('Account')}, arn: {identity.get('Arn')})"
