"""Test the errors module."""

from pathlib import Path

import pytest

from version_sync.errors import ParseError, SchemaError, StorageError, VersionSyncError


@pytest.mark.parametrize("error_cls", [ParseError, SchemaError, StorageError])
def test_errors_share_a_base_class(error_cls: type[VersionSyncError]) -> None:
    """Every error should be catchable as VersionSyncError."""
    assert issubclass(error_cls, VersionSyncError)


def test_storage_error_is_an_os_error() -> None:
    """StorageError should be catchable as IOError."""
    error = StorageError("cannot read file", Path("package.json"))

    assert isinstance(error, IOError)
    assert str(error) == "package.json: cannot read file"


def test_error_message_without_path() -> None:
    error = SchemaError("expected a JSON object")

    assert error.path is None
    assert str(error) == "expected a JSON object"
