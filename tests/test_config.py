"""Tests for Config."""

from hubfs.config import Config


class TestConfig:
    """Test cases for Config class."""

    def test_get_and_default(self):
        """Test get with and without a default."""
        config = Config({"message": "Hello"})

        assert config.get("message") == "Hello"
        assert config.get("missing") is None
        assert config.get("missing", "fallback") == "fallback"

    def test_set_and_has(self):
        """Test set and has."""
        config = Config()
        assert not config.has("message")

        config.set("message", "Hello")
        assert config.has("message")
        assert "message" in config

    def test_fallback(self):
        """Test that the fallback config supplies missing keys."""
        defaults = Config({"message": "Default", "committer": {"name": "a", "email": "b"}})
        config = Config({"message": "Mine"}).with_fallback(defaults)

        assert config.get("message") == "Mine"
        assert config.get("committer") == {"name": "a", "email": "b"}
        assert config.has("committer")
        assert not config.has("author")
