"""
Profile Repository

Loads and saves profile sets for the two AWS shared files. The store works
against the ProfileRepository interface so the storage can be swapped, the
file-backed implementation is used by the CLI.
"""

import logging
import os
import stat
from enum import Enum
from pathlib import Path
from typing import Optional

from .ini_format import (
    ProfileSet,
    parse_config,
    parse_credentials,
    render_config,
    render_credentials,
)

__all__ = [
    'FileKind',
    'ProfileRepository',
    'FileProfileRepository',
]

logger = logging.getLogger(__name__)


class FileKind(Enum):
    """The two files a profile is spread across."""
    CREDENTIALS = "credentials"
    CONFIG = "config"


_PARSERS = {
    FileKind.CREDENTIALS: parse_credentials,
    FileKind.CONFIG: parse_config,
}
_RENDERERS = {
    FileKind.CREDENTIALS: render_credentials,
    FileKind.CONFIG: render_config,
}


class ProfileRepository:
    """
    Base repository. Subclasses provide raw text access to each file,
    parsing and rendering happens here.
    """

    def read_text(self, kind: FileKind) -> Optional[str]:
        """Return the file contents, or None if the file does not exist."""
        raise NotImplementedError

    def write_text(self, kind: FileKind, text: str) -> None:
        """Replace the file contents."""
        raise NotImplementedError

    def load_set(self, kind: FileKind) -> ProfileSet:
        profiles = _PARSERS[kind](self.read_text(kind))
        logger.debug("Loaded %d profile(s) from %s", len(profiles), kind.value)
        return profiles

    def save_set(self, kind: FileKind, profiles: ProfileSet) -> None:
        self.write_text(kind, _RENDERERS[kind](profiles))
        logger.debug("Saved %d profile(s) to %s", len(profiles), kind.value)


class FileProfileRepository(ProfileRepository):
    """
    Repository backed by the credentials and config files on disk.

    Files are rewritten in full on every save. Missing parent directories
    are created on first write.
    """

    def __init__(self, credentials_path: Path, config_path: Path):
        """
        Initialize the repository.

        Args:
            credentials_path: Path to the AWS credentials file
            config_path: Path to the AWS config file
        """
        self.credentials_path = Path(credentials_path)
        self.config_path = Path(config_path)

    def path_for(self, kind: FileKind) -> Path:
        if kind is FileKind.CREDENTIALS:
            return self.credentials_path
        return self.config_path

    def read_text(self, kind: FileKind) -> Optional[str]:
        path = self.path_for(kind)
        if not path.exists():
            logger.debug("%s does not exist, treating as empty", path)
            return None
        # Undecodable bytes (e.g. a Latin-1 comment) must not make the file unreadable
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            return f.read()

    def write_text(self, kind: FileKind, text: str) -> None:
        path = self.path_for(kind)
        os.makedirs(path.parent, exist_ok=True)

        if kind is not FileKind.CREDENTIALS:
            with open(path, "w", encoding="utf-8") as f:
                f.write(text)
            return

        # Keep access keys readable by the owner only. The mode is set before
        # any content is written; chmod covers files that already existed.
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, stat.S_IRUSR | stat.S_IWUSR)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            os.chmod(path, stat.S_IRUSR | stat.S_IWUSR)
            f.write(text)
