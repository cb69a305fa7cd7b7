import os
import stat
import pytest
from unittest.mock import patch
from awsauth.aws_profiles import (
    DefaultProfileProtectedError,
    FileKind,
    FileProfileRepository,
    Profile,
    ProfileStore,
)


@pytest.fixture
def file_repository(aws_dir):
    """Fixture providing a repository over a temporary AWS directory."""
    return FileProfileRepository(aws_dir / "credentials", aws_dir / "config")


def test_missing_files_load_empty(file_repository, aws_dir):
    """Test that missing files are treated as empty."""
    assert file_repository.read_text(FileKind.CREDENTIALS) is None
    assert file_repository.load_set(FileKind.CONFIG) == {}
    assert not aws_dir.exists()


def test_save_creates_directory(file_repository, aws_dir):
    """Test that saving creates the directory, parents included."""
    file_repository.save_set(FileKind.CONFIG, {"prod": Profile(region="us-west-2")})

    assert (aws_dir / "config").read_text() == "[profile prod]\nregion = us-west-2\n\n"


def test_credentials_file_permissions(file_repository, aws_dir):
    """Test that the credentials file is readable by the owner only."""
    file_repository.save_set(FileKind.CREDENTIALS, {"prod": Profile("AKIA", "secret")})

    mode = stat.S_IMODE(os.stat(aws_dir / "credentials").st_mode)
    assert mode == stat.S_IRUSR | stat.S_IWUSR


def test_load_existing_files(file_repository, aws_dir):
    """Test reading files written by other tools."""
    aws_dir.mkdir(parents=True)
    (aws_dir / "credentials").write_text(
        "# written by aws configure\n[default]\naws_access_key_id=AKIA\naws_secret_access_key=secret\n"
    )

    assert file_repository.load_set(FileKind.CREDENTIALS) == {"default": Profile("AKIA", "secret")}


def test_store_round_trip_on_disk(file_repository, aws_dir):
    """Test a full add/use cycle against real files."""
    store = ProfileStore(file_repository)
    store.add("dev", "AKIADEV", "secret-dev", "eu-central-1")
    store.use("dev")

    assert (aws_dir / "credentials").read_text() == (
        "[dev]\naws_access_key_id = AKIADEV\naws_secret_access_key = secret-dev\n\n"
        "[default]\naws_access_key_id = AKIADEV\naws_secret_access_key = secret-dev\n\n"
    )
    assert (aws_dir / "config").read_text() == (
        "[profile dev]\nregion = eu-central-1\n\n[default]\nregion = eu-central-1\n\n"
    )


def test_remove_default_leaves_files_byte_identical(file_repository, aws_dir):
    """Test that a refused removal does not touch the files."""
    aws_dir.mkdir(parents=True)
    credentials = "[default]\naws_access_key_id=AKIA\naws_secret_access_key=secret\n# note\n"
    config = "[default]\nregion=us-east-1\noutput=json\n"
    (aws_dir / "credentials").write_text(credentials)
    (aws_dir / "config").write_text(config)

    with pytest.raises(DefaultProfileProtectedError):
        ProfileStore(file_repository).remove("default", lambda question: True)

    assert (aws_dir / "credentials").read_text() == credentials
    assert (aws_dir / "config").read_text() == config


def test_write_failure_propagates(file_repository):
    """Test that I/O errors reach the caller."""
    with patch("awsauth.aws_profiles.repository.os.makedirs", side_effect=PermissionError("denied")):
        with pytest.raises(PermissionError):
            ProfileStore(file_repository).add("dev", "AKIA", "secret", "us-east-1")


def test_path_for(file_repository, aws_dir):
    """Test mapping file kinds to paths."""
    assert file_repository.path_for(FileKind.CREDENTIALS) == aws_dir / "credentials"
    assert file_repository.path_for(FileKind.CONFIG) == aws_dir / "config"


def test_read_tolerates_non_utf8_bytes(file_repository, aws_dir):
    """Test that a Latin-1 comment does not make the file unreadable."""
    aws_dir.mkdir(parents=True)
    (aws_dir / "credentials").write_bytes(
        b"# Jos\xe9's keys\n[prod]\naws_access_key_id = AKIAPROD\naws_secret_access_key = secret-prod\n"
    )

    assert file_repository.load_set(FileKind.CREDENTIALS) == {"prod": Profile("AKIAPROD", "secret-prod")}


def test_credentials_file_created_owner_only(file_repository, aws_dir):
    """Test that the credentials file is opened with mode 0600 before writing."""
    with patch("awsauth.aws_profiles.repository.os.open", wraps=os.open) as mock_open:
        file_repository.save_set(FileKind.CREDENTIALS, {"prod": Profile("AKIA", "secret")})

    mock_open.assert_called_once()
    assert mock_open.call_args[0][2] == stat.S_IRUSR | stat.S_IWUSR


def test_existing_credentials_file_permissions_tightened(file_repository, aws_dir):
    """Test that a world-readable credentials file is restricted on rewrite."""
    aws_dir.mkdir(parents=True)
    path = aws_dir / "credentials"
    path.write_text("[prod]\naws_access_key_id = AKIA\naws_secret_access_key = secret\n")
    os.chmod(path, 0o644)

    file_repository.save_set(FileKind.CREDENTIALS, {"prod": Profile("AKIA", "secret")})

    assert stat.S_IMODE(os.stat(path).st_mode) == stat.S_IRUSR | stat.S_IWUSR
