"""Tests for ancestor search value objects."""

import os
from pathlib import Path

import pytest
from pathscout.errors import InvalidOptionError
from pathscout.search.models import FindOptions, SearchRequest
from pathscout.search.predicates import SyncPredicate


class TestSearchRequestBuild:
    """Tests for SearchRequest.build."""

    def test_single_name_becomes_tuple(self, tmp_path: Path) -> None:
        """A single name is sugar for a one-element sequence."""
        request = SearchRequest.build("a.toml", FindOptions(cwd=tmp_path))
        assert request.names == ("a.toml",)

    def test_path_names_accepted(self, tmp_path: Path) -> None:
        """PathLike names are converted to strings."""
        request = SearchRequest.build([Path("a.toml"), "b.toml"], FindOptions(cwd=tmp_path))
        assert request.names == ("a.toml", "b.toml")

    def test_paths_normalized(self, tmp_path: Path) -> None:
        """cwd and stop are made absolute and normalized."""
        request = SearchRequest.build(
            "x",
            FindOptions(cwd=tmp_path / "a" / ".." / "b", stop=tmp_path / "."),
        )
        assert request.start == str(tmp_path / "b")
        assert request.stop == str(tmp_path)

    def test_default_stop_is_filesystem_root(self, tmp_path: Path) -> None:
        """Without stop the boundary is the root of cwd."""
        request = SearchRequest.build("x", FindOptions(cwd=tmp_path))
        assert request.stop == os.path.splitdrive(str(tmp_path))[0] + os.sep

    def test_default_cwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Without cwd the process working directory is used."""
        monkeypatch.chdir(tmp_path)
        request = SearchRequest.build("x", FindOptions())
        assert request.start == os.getcwd()

    def test_predicate_tagged(self, tmp_path: Path) -> None:
        """Plain callables are tagged while building the request."""
        request = SearchRequest.build("x", FindOptions(cwd=tmp_path, test=bool))
        assert isinstance(request.predicate, SyncPredicate)

    def test_empty_name_rejected(self, tmp_path: Path) -> None:
        """Empty strings are not valid names."""
        with pytest.raises(InvalidOptionError, match="cannot be empty"):
            SearchRequest.build(["a", ""], FindOptions(cwd=tmp_path))

    def test_request_is_immutable(self, tmp_path: Path) -> None:
        """SearchRequest is frozen."""
        request = SearchRequest.build("x", FindOptions(cwd=tmp_path))
        with pytest.raises(AttributeError):
            request.start = "/"  # type: ignore[misc]
