"""
GitHubClient - Thin client for the GitHub contents, git-data and repository APIs.
"""

import base64
import logging
import os
from typing import Any, Dict, List, Optional, Union

import requests

logger = logging.getLogger(__name__)

AUTH_TOKEN = "token"
AUTH_PASSWORD = "password"


class GitHubClient:
    """
    Client for the GitHub REST API.

    Example:
        >>> client = GitHubClient(token="ghp_xxx")
        >>> client.contents.show("octocat", "hello-world", "README", "HEAD")
    """

    def __init__(
        self,
        token: Optional[str] = None,
        api_url: str = "https://api.github.com",
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize GitHubClient.

        Args:
            token: GitHub personal access token. If None, reads from GITHUB_TOKEN env var.
            api_url: GitHub API URL (for GitHub Enterprise support).
            session: requests session to send requests through.
        """
        self.token = token or os.environ.get("GITHUB_TOKEN")
        self.api_url = api_url.rstrip("/")
        self.session = session if session is not None else requests.Session()

        self.contents = Contents(self)
        self.trees = Trees(self)
        self.repositories = Repositories(self)

        if not self.token:
            logger.warning("GitHub client initialized without token (rate limited, public repositories only)")

    @classmethod
    def from_settings(cls, settings, **kwargs) -> "GitHubClient":
        """
        Create a client and apply the credentials of a Settings object.

        Args:
            settings: Settings instance.
            **kwargs: Passed on to the constructor.

        Returns:
            GitHubClient instance.
        """
        credentials = settings.credentials
        if len(credentials) == 2 and credentials[0] == AUTH_TOKEN:
            kwargs.setdefault("token", credentials[1])

        client = cls(**kwargs)
        if credentials:
            client.authenticate(*settings.credentials)
        return client

    @property
    def headers(self) -> Dict[str, str]:
        """Get headers for GitHub API requests."""
        headers = {
            "Accept": "application/vnd.github.v3+json",
            "X-GitHub-Api-Version": "2022-11-28",
        }
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def authenticate(self, method: str, *args: str) -> None:
        """
        Set credentials for subsequent requests.

        Args:
            method: "token" (args: token) or "password" (args: user, password).
        """
        if method == AUTH_TOKEN and len(args) == 1:
            self.token = args[0]
            self.session.auth = None
        elif method == AUTH_PASSWORD and len(args) == 2:
            self.token = None
            self.session.auth = (args[0], args[1])
        else:
            raise ValueError(f"Unsupported authentication method: {method!r}")
        logger.debug("Authenticated using %s", method)

    def request(self, method: str, endpoint: str, **kwargs) -> requests.Response:
        """Make API request."""
        url = f"{self.api_url}/{endpoint.lstrip('/')}"
        logger.debug("Request: %s %s", method, url)
        response = self.session.request(
            method,
            url,
            headers=self.headers,
            **kwargs,
        )
        logger.debug("Response: %s %s (status=%s)", method, endpoint, response.status_code)
        response.raise_for_status()
        return response


class Contents:
    """Repository contents API (/repos/{owner}/{repo}/contents)."""

    def __init__(self, client: GitHubClient):
        self._client = client

    @staticmethod
    def _endpoint(owner: str, repo: str, path: str) -> str:
        path = path.strip("/")
        endpoint = f"repos/{owner}/{repo}/contents"
        return f"{endpoint}/{path}" if path else endpoint

    def show(
        self, owner: str, repo: str, path: str = "", ref: Optional[str] = None
    ) -> Union[Dict[str, Any], List[Dict[str, Any]]]:
        """
        Get information about a file or directory.

        Returns:
            Dict for a file, list of dicts for a directory.
        """
        params = {"ref": ref} if ref else {}
        response = self._client.request("GET", self._endpoint(owner, repo, path), params=params)
        return response.json()

    def exists(self, owner: str, repo: str, path: str, ref: Optional[str] = None) -> bool:
        """Check if a file or directory exists."""
        try:
            self.show(owner, repo, path, ref)
        except requests.HTTPError as e:
            if e.response is not None and e.response.status_code == 404:
                return False
            raise
        return True

    def download(self, owner: str, repo: str, path: str, ref: Optional[str] = None) -> bytes:
        """
        Download file contents.

        Returns:
            File contents as bytes.
        """
        data = self.show(owner, repo, path, ref)

        if isinstance(data, list) or data.get("type") == "dir":
            raise IsADirectoryError(f"Is a directory: {path}")

        if data.get("content") and data.get("encoding", "base64") == "base64":
            return base64.b64decode(data["content"])

        # Files above 1MB come back without inline content
        download_url = data.get("download_url")
        if not download_url:
            raise ValueError(f"File has no content: {path}")

        logger.debug("Downloading: %s", download_url)
        response = self._client.session.get(download_url, headers=self._client.headers)
        response.raise_for_status()
        return response.content

    def create(
        self,
        owner: str,
        repo: str,
        path: str,
        content: bytes,
        message: str,
        branch: Optional[str] = None,
        committer: Optional[Dict[str, str]] = None,
        author: Optional[Dict[str, str]] = None,
    ) -> Dict[str, Any]:
        """Create a file. Returns the API response (content and commit)."""
        return self._put(owner, repo, path, content, message, None, branch, committer, author)

    def update(
        self,
        owner: str,
        repo: str,
        path: str,
        content: bytes,
        message: str,
        sha: str,
        branch: Optional[str] = None,
        committer: Optional[Dict[str, str]] = None,
        author: Optional[Dict[str, str]] = None,
    ) -> Dict[str, Any]:
        """Update a file. The blob sha of the replaced file is required."""
        return self._put(owner, repo, path, content, message, sha, branch, committer, author)

    def remove(
        self,
        owner: str,
        repo: str,
        path: str,
        message: str,
        sha: str,
        branch: Optional[str] = None,
        committer: Optional[Dict[str, str]] = None,
        author: Optional[Dict[str, str]] = None,
    ) -> Dict[str, Any]:
        """Delete a file. The blob sha of the removed file is required."""
        body = self._body(message, sha, branch, committer, author)
        response = self._client.request("DELETE", self._endpoint(owner, repo, path), json=body)
        return response.json()

    def _put(self, owner, repo, path, content, message, sha, branch, committer, author) -> Dict[str, Any]:
        body = self._body(message, sha, branch, committer, author)
        body["content"] = base64.b64encode(content).decode("ascii")
        response = self._client.request("PUT", self._endpoint(owner, repo, path), json=body)
        return response.json()

    @staticmethod
    def _body(message, sha, branch, committer, author=None) -> Dict[str, Any]:
        body: Dict[str, Any] = {"message": message}
        if sha:
            body["sha"] = sha
        if branch:
            body["branch"] = branch
        # GitHub rejects a partial committer or author
        for key, identity in (("committer", committer), ("author", author)):
            if identity and identity.get("name") and identity.get("email"):
                body[key] = {"name": identity["name"], "email": identity["email"]}
        return body


class Trees:
    """Git data trees API (/repos/{owner}/{repo}/git/trees)."""

    def __init__(self, client: GitHubClient):
        self._client = client

    def show(self, owner: str, repo: str, sha: str, recursive: bool = False) -> Dict[str, Any]:
        """
        Get a tree object.

        Args:
            sha: Tree sha, commit sha or ref name.
            recursive: Include all nested entries.

        Returns:
            Tree dict with "sha", "tree" and "truncated" keys.
        """
        params = {"recursive": 1} if recursive else {}
        response = self._client.request("GET", f"repos/{owner}/{repo}/git/trees/{sha}", params=params)
        return response.json()


class Repositories:
    """Repository API (/repos/{owner}/{repo})."""

    def __init__(self, client: GitHubClient):
        self._client = client

    def show(self, owner: str, repo: str) -> Dict[str, Any]:
        """Get repository information."""
        return self._client.request("GET", f"repos/{owner}/{repo}").json()

    def commits(
        self,
        owner: str,
        repo: str,
        sha: Optional[str] = None,
        path: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """
        List commits, newest first.

        Args:
            sha: Branch or sha to start listing from.
            path: Only commits touching this path.
        """
        params = {}
        if sha:
            params["sha"] = sha
        if path:
            params["path"] = path.strip("/")
        return self._client.request("GET", f"repos/{owner}/{repo}/commits", params=params).json()
