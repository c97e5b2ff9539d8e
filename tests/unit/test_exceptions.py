"""Test cases for appres exception classes."""

from pathlib import Path

import pytest

from appres.exceptions import (
    AppResError,
    CodecNotAvailableError,
    ConfigDirNotFoundError,
    InvalidFormatError,
    NoParentDirectoryError,
    ResourceIOError,
)
from appres.formats import Format


class TestHierarchy:
    """All error kinds share one base class."""

    @pytest.mark.parametrize(
        "error",
        [
            ConfigDirNotFoundError(),
            NoParentDirectoryError("/"),
            ResourceIOError("boom"),
            InvalidFormatError("bad", Format.JSON),
            CodecNotAvailableError(Format.YAML),
        ],
    )
    def test_subclass_of_app_res_error(self, error: AppResError) -> None:
        """Test that every error kind derives from AppResError."""
        assert isinstance(error, AppResError)


class TestConfigDirNotFoundError:
    """Test cases for ConfigDirNotFoundError."""

    def test_default_message(self) -> None:
        """Test the default message."""
        assert str(ConfigDirNotFoundError()) == "cannot find config dir"


class TestNoParentDirectoryError:
    """Test cases for NoParentDirectoryError."""

    def test_path_attribute(self) -> None:
        """Test that the offending path is kept as a Path."""
        error = NoParentDirectoryError("/")
        assert error.path == Path("/")
        assert "no parent directory" in str(error)


class TestResourceIOError:
    """Test cases for ResourceIOError."""

    def test_wraps_cause(self) -> None:
        """Test that errno and not_found come from the wrapped error."""
        cause = FileNotFoundError(2, "No such file or directory")
        error = ResourceIOError(str(cause), path="cfg.json", cause=cause)

        assert error.cause is cause
        assert error.path == Path("cfg.json")
        assert error.errno == 2
        assert error.not_found is True

    def test_without_cause(self) -> None:
        """Test defaults when nothing is wrapped."""
        error = ResourceIOError("no executable")

        assert error.path is None
        assert error.errno is None
        assert error.not_found is False

    def test_permission_error_is_not_not_found(self) -> None:
        """Test that only FileNotFoundError counts as not found."""
        error = ResourceIOError("denied", cause=PermissionError(13, "denied"))
        assert error.not_found is False
        assert error.errno == 13


class TestInvalidFormatError:
    """Test cases for InvalidFormatError."""

    def test_attributes(self) -> None:
        """Test diagnostic attributes."""
        error = InvalidFormatError(
            "Expecting value", Format.JSON, line=3, column=7, position=21
        )

        assert str(error) == "Expecting value"
        assert error.format is Format.JSON
        assert (error.line, error.column, error.position) == (3, 7, 21)

    def test_optional_diagnostics(self) -> None:
        """Test that location details default to None."""
        error = InvalidFormatError("not a table", Format.TOML)
        assert error.line is None
        assert error.column is None
        assert error.position is None


class TestCodecNotAvailableError:
    """Test cases for CodecNotAvailableError."""

    def test_message_lists_available_formats(self) -> None:
        """Test that the message names the missing and the available formats."""
        error = CodecNotAvailableError(Format.YAML, [Format.JSON, Format.TOML])

        assert error.format is Format.YAML
        assert error.available == (Format.JSON, Format.TOML)
        assert "YAML" in str(error)
        assert "JSON, TOML" in str(error)

    def test_message_with_no_codecs(self) -> None:
        """Test that an empty registry is reported as none."""
        error = CodecNotAvailableError(Format.JSON)
        assert "available: none" in str(error)
