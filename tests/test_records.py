"""Tests for record normalization."""

from hubfs.records import (
    normalize_entry,
    normalize_metadata,
    normalize_tree,
    normalize_tree_entry,
)


class TestNormalizeEntry:
    """Test cases for normalize_entry."""

    def test_marks_missing_fields(self):
        """Test that unavailable fields are explicitly False."""
        entry = {"type": "file", "path": "README.md", "sha": "abc", "size": 10}

        result = normalize_entry(entry, "public")

        assert result["contents"] is False
        assert result["stream"] is False
        assert result["timestamp"] is False
        assert result["visibility"] == "public"
        assert result["sha"] == "abc"
        assert result["size"] == 10

    def test_does_not_modify_input(self):
        """Test that the original entry is left untouched."""
        entry = {"type": "file", "path": "README.md"}

        normalize_entry(entry, "private")

        assert entry == {"type": "file", "path": "README.md"}


class TestNormalizeTree:
    """Test cases for tree entry normalization."""

    def test_blob_becomes_file(self):
        """Test blob relabeling."""
        result = normalize_tree_entry({"type": "blob", "path": "a.txt"}, "public")
        assert result["type"] == "file"

    def test_tree_becomes_dir(self):
        """Test tree relabeling."""
        result = normalize_tree_entry({"type": "tree", "path": "src"}, "public")
        assert result["type"] == "dir"

    def test_other_kinds_unchanged(self):
        """Test that submodule entries keep their type."""
        result = normalize_tree_entry({"type": "commit", "path": "vendor/lib"}, "public")
        assert result["type"] == "commit"

    def test_normalize_tree(self):
        """Test normalizing a whole tree."""
        entries = [
            {"type": "tree", "path": "src", "mode": "040000"},
            {"type": "blob", "path": "src/main.py", "mode": "100644", "size": 5},
        ]

        result = normalize_tree(entries, "private")

        assert [e["type"] for e in result] == ["dir", "file"]
        assert all(e["visibility"] == "private" for e in result)
        assert all(e["timestamp"] is False for e in result)


class TestNormalizeMetadata:
    """Test cases for normalize_metadata."""

    def test_directory_listing(self):
        """Test a list result from a directory."""
        info = [
            {"type": "file", "path": "README.md"},
            {"type": "dir", "path": "src"},
        ]

        result = normalize_metadata(info, "public")

        assert len(result) == 2
        assert result[1]["type"] == "dir"
        assert result[0]["contents"] is False

    def test_single_file(self):
        """Test a dict result from a file."""
        result = normalize_metadata({"type": "file", "path": "README.md"}, "public")

        assert len(result) == 1
        assert result[0]["path"] == "README.md"
