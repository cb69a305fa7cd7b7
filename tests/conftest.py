"""
Shared test fixtures and configuration.
"""

import pytest
import os
import sys

# Add the parent directory to the path so we can import the awsauth package
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from awsauth.aws_profiles import FileKind, ProfileRepository, ProfileStore
from awsauth.utils.prompts import ConsolePrompter


class InMemoryRepository(ProfileRepository):
    """Repository double that keeps file contents in a dict."""

    def __init__(self, credentials=None, config=None):
        self.files = {
            FileKind.CREDENTIALS: credentials,
            FileKind.CONFIG: config,
        }
        self.writes = 0

    def read_text(self, kind):
        return self.files[kind]

    def write_text(self, kind, text):
        self.files[kind] = text
        self.writes += 1

    @property
    def credentials(self):
        return self.files[FileKind.CREDENTIALS]

    @property
    def config(self):
        return self.files[FileKind.CONFIG]


def scripted_prompter(*answers, secrets=()):
    """Build a ConsolePrompter that replays the given answers."""
    text_answers = iter(answers)
    secret_answers = iter(secrets)
    messages = []
    return ConsolePrompter(
        input_func=lambda prompt: next(text_answers),
        secret_func=lambda prompt: next(secret_answers),
        print_func=messages.append,
    ), messages


@pytest.fixture
def repository():
    """Fixture providing an empty in-memory repository."""
    return InMemoryRepository()


@pytest.fixture
def store(repository):
    """Fixture providing a store over the in-memory repository."""
    return ProfileStore(repository)


@pytest.fixture
def aws_dir(tmp_path):
    """Fixture providing a not yet created AWS directory."""
    return tmp_path / "home" / ".aws"


@pytest.fixture
def make_prompter():
    """Fixture returning the scripted_prompter factory."""
    return scripted_prompter
