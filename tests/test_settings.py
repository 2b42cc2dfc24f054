"""Tests for Settings."""

import pytest
from hubfs.settings import Settings, ERROR_INVALID_REPOSITORY_NAME

MOCK_REPOSITORY_NAME = "foo/bar"
MOCK_CREDENTIALS = ("mock_type", "mock_user", "mock_password")
MOCK_BRANCH = "mock_branch"
MOCK_REFERENCE = "mock_reference"


@pytest.fixture
def settings():
    return Settings(MOCK_REPOSITORY_NAME, MOCK_CREDENTIALS, MOCK_BRANCH, MOCK_REFERENCE)


class TestSettings:
    """Test cases for Settings."""

    def test_requires_repository(self):
        """Test that a repository must be given."""
        with pytest.raises(TypeError):
            Settings()

    def test_only_repository_needed(self):
        """Test that the repository name alone is enough."""
        settings = Settings(MOCK_REPOSITORY_NAME)
        assert isinstance(settings, Settings)

    def test_contains_given_values(self, settings):
        """Test that given values are exposed."""
        assert settings.repository == MOCK_REPOSITORY_NAME
        assert settings.credentials == MOCK_CREDENTIALS
        assert settings.branch == MOCK_BRANCH
        assert settings.reference == MOCK_REFERENCE

    def test_defaults(self):
        """Test defaults for credentials, branch and reference."""
        settings = Settings(MOCK_REPOSITORY_NAME)

        assert settings.credentials == ()
        assert settings.branch == "master"
        assert settings.reference == "HEAD"

    def test_credentials_list_becomes_tuple(self):
        """Test that credentials are normalized to a tuple."""
        settings = Settings(MOCK_REPOSITORY_NAME, ["token", "abc"])
        assert settings.credentials == ("token", "abc")

    @pytest.mark.parametrize("repository,owner,name", [
        ("foo/bar", "foo", "bar"),
        ("octocat/hello-world", "octocat", "hello-world"),
        ("some.org/repo_name.py", "some.org", "repo_name.py"),
    ])
    def test_owner_and_name(self, repository, owner, name):
        """Test parsing of owner and name."""
        settings = Settings(repository)
        assert settings.owner == owner
        assert settings.name == name

    @pytest.mark.parametrize("name", [
        "",
        None,
        True,
        [],
        "foo",
        "/foo",
        "foo/bar/",
        "/foo/bar/",
        "foo/bar/baz",
        "/foo/bar/baz/",
        "foo/bar/baz/",
        "/foo/bar/baz",
        "foo/bar\n",
        "foo\n/bar",
        "foo/ bar",
    ])
    def test_invalid_repository_names(self, name):
        """Test that invalid repository names are rejected."""
        with pytest.raises(ValueError) as exc_info:
            Settings(name)

        assert str(exc_info.value) == ERROR_INVALID_REPOSITORY_NAME % (repr(name),)
        assert repr(name) in str(exc_info.value)

    @pytest.mark.parametrize("credentials", ["abc", b"abc"])
    def test_credentials_string_rejected(self, credentials):
        """Test that a bare string is not split into characters."""
        with pytest.raises(ValueError) as exc_info:
            Settings(MOCK_REPOSITORY_NAME, credentials)

        assert repr(credentials) in str(exc_info.value)

    def test_immutable(self, settings):
        """Test that settings can not be changed after construction."""
        with pytest.raises(AttributeError):
            settings.branch = "other"


class TestSettingsFromEnv:
    """Test cases for Settings.from_env."""

    def test_from_mapping(self):
        """Test reading all variables."""
        settings = Settings.from_env({
            "HUBFS_REPOSITORY": "foo/bar",
            "HUBFS_BRANCH": "main",
            "HUBFS_REFERENCE": "v1.0",
            "GITHUB_TOKEN": "secret",
        })

        assert settings.repository == "foo/bar"
        assert settings.branch == "main"
        assert settings.reference == "v1.0"
        assert settings.credentials == ("token", "secret")

    def test_defaults(self):
        """Test defaults when only the repository is set."""
        settings = Settings.from_env({"HUBFS_REPOSITORY": "foo/bar"})

        assert settings.branch == "master"
        assert settings.reference == "HEAD"
        assert settings.credentials == ()

    def test_missing_repository(self):
        """Test that a missing repository is rejected."""
        with pytest.raises(ValueError):
            Settings.from_env({})

    def test_reads_os_environ(self, monkeypatch):
        """Test that os.environ is used by default."""
        monkeypatch.setenv("HUBFS_REPOSITORY", "env/repo")
        monkeypatch.delenv("HUBFS_BRANCH", raising=False)
        monkeypatch.delenv("HUBFS_REFERENCE", raising=False)
        monkeypatch.delenv("GITHUB_TOKEN", raising=False)

        settings = Settings.from_env()
        assert settings.repository == "env/repo"
