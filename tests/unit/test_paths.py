"""Tests for toolbelt.paths module."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from toolbelt.exceptions import PlatformDirectoryError
from toolbelt.paths import (
    SystemDirectory,
    cache_path,
    documents_path,
    free_space,
    library_path,
    system_directory,
    url_without_query,
)


class TestUrlWithoutQuery:
    """Tests for stripping query components."""

    def test_strips_query(self) -> None:
        """Test the query is removed."""
        assert url_without_query("https://x/y?a=1") == "https://x/y"

    def test_round_trip_matches_queryless_url(self) -> None:
        """Test stripping matches the URL written without a query."""
        assert url_without_query("https://x/y?a=1&b=2") == url_without_query("https://x/y")

    def test_keeps_fragment(self) -> None:
        """Test other components are preserved."""
        assert (
            url_without_query("https://user@host:8080/p/a?q=1#top")
            == "https://user@host:8080/p/a#top"
        )

    def test_url_without_query_unchanged(self) -> None:
        """Test URLs without a query come back unchanged."""
        assert url_without_query("file:///tmp/a.txt") == "file:///tmp/a.txt"

    def test_undecomposable_url(self) -> None:
        """Test malformed URLs yield None."""
        assert url_without_query("http://[::1/path?x=1") is None


class TestFreeSpace:
    """Tests for free space lookup."""

    def test_existing_path(self, tmp_path: Path) -> None:
        """Test free space of an existing directory is a non-negative int."""
        space = free_space(tmp_path)
        assert isinstance(space, int)
        assert space >= 0

    def test_file_url(self, tmp_path: Path) -> None:
        """Test file:// URLs are accepted."""
        assert free_space(tmp_path.as_uri()) is not None

    def test_percent_encoded_file_url(self, tmp_path: Path) -> None:
        """Test escaped characters in file:// URLs are decoded."""
        spaced = tmp_path / "a b"
        spaced.mkdir()
        url = spaced.as_uri()
        assert "%20" in url
        assert free_space(url) is not None

    def test_missing_path(self, tmp_path: Path) -> None:
        """Test a failing filesystem query yields None."""
        assert free_space(tmp_path / "does" / "not" / "exist") is None


class TestSystemDirectories:
    """Tests for well-known directory resolution."""

    def test_directories_created_on_demand(self, app_home: Path) -> None:
        """Test each directory is created under the app home."""
        assert library_path() == (app_home / "Library").resolve()
        assert documents_path() == (app_home / "Documents").resolve()
        assert cache_path() == (app_home / "Library" / "Caches").resolve()
        assert (app_home / "Library" / "Caches").is_dir()
        assert (app_home / "Documents").is_dir()

    def test_existing_directory_reused(self, tmp_path: Path) -> None:
        """Test resolving twice returns the same path."""
        first = system_directory(SystemDirectory.DOCUMENTS, home=tmp_path)
        (first / "note.txt").write_text("kept")
        second = system_directory(SystemDirectory.DOCUMENTS, home=tmp_path)
        assert first == second
        assert (second / "note.txt").read_text() == "kept"

    def test_failure_is_fatal(self, tmp_path: Path) -> None:
        """Test a directory that cannot be created raises PlatformDirectoryError."""
        blocker = tmp_path / "home"
        blocker.write_text("not a directory")

        with pytest.raises(PlatformDirectoryError) as exc_info:
            system_directory(SystemDirectory.LIBRARY, home=blocker)

        assert exc_info.value.path == (blocker / "Library").resolve()

    def test_permission_error_is_fatal(self, app_home: Path) -> None:
        """Test OS errors are wrapped rather than returned as None."""
        with patch.object(Path, "mkdir", side_effect=PermissionError("denied")):
            with pytest.raises(PlatformDirectoryError, match="denied"):
                cache_path()
