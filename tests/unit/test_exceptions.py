"""Unit tests for toolbelt exceptions."""

from __future__ import annotations

from pathlib import Path

import pytest

from toolbelt.exceptions import (
    ContractViolation,
    PlatformDirectoryError,
    ToolbeltError,
    assertion_failure,
)


class TestPlatformDirectoryError:
    """Tests for PlatformDirectoryError."""

    def test_message_only(self) -> None:
        """Test error with message only."""
        error = PlatformDirectoryError("No documents directory")
        assert str(error) == "No documents directory"
        assert error.path is None

    def test_with_path(self) -> None:
        """Test the path is included in the message."""
        error = PlatformDirectoryError("Cannot create", path="/nowhere/Documents")
        assert "Cannot create" in str(error)
        assert "/nowhere/Documents" in str(error)
        assert error.path == Path("/nowhere/Documents")

    def test_inheritance(self) -> None:
        """Test it is a ToolbeltError."""
        assert isinstance(PlatformDirectoryError("x"), ToolbeltError)


class TestContractViolation:
    """Tests for ContractViolation."""

    def test_is_assertion_error(self) -> None:
        """Test it can be caught as an AssertionError."""
        error = ContractViolation("misuse")
        assert isinstance(error, AssertionError)
        assert isinstance(error, ToolbeltError)


class TestAssertionFailure:
    """Tests for assertion_failure."""

    @pytest.mark.usefixtures("debug_assertions")
    def test_raises_in_debug(self) -> None:
        """Test debug assertions raise."""
        with pytest.raises(ContractViolation, match="broken"):
            assertion_failure("broken", screen="root")

    @pytest.mark.usefixtures("release_assertions")
    def test_returns_in_release(self) -> None:
        """Test release builds continue."""
        assert assertion_failure("broken") is None
