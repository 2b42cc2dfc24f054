"""
GithubAdapter - Filesystem adapter backed by a GitHub repository.
"""

import io
import logging
import mimetypes
from datetime import datetime, timezone
from typing import IO, Any, Dict, List, Optional, Union

from .base import AbstractAdapter, Metadata
from .client import GitHubClient
from .config import Config
from .records import (
    KEY_CONTENTS,
    KEY_PATH,
    KEY_SIZE,
    KEY_STREAM,
    KEY_TIMESTAMP,
    KEY_TYPE,
    TYPE_BLOB,
    TYPE_DIRECTORY,
    TYPE_FILE,
    VISIBILITY_PRIVATE,
    VISIBILITY_PUBLIC,
    normalize_metadata,
    normalize_tree,
)
from .settings import Settings

logger = logging.getLogger(__name__)

DEFAULT_MIMETYPE = "application/octet-stream"


class GithubAdapter(AbstractAdapter):
    """
    Adapter exposing a GitHub repository as a filesystem.

    Reads are pinned to the settings' reference, writes commit to its branch.
    Every call is a live request; only the repository visibility is kept.

    Example:
        >>> settings = Settings("octocat/hello-world")
        >>> adapter = GithubAdapter(GitHubClient.from_settings(settings), settings)
        >>> adapter.read("README")["contents"]
    """

    def __init__(self, client: GitHubClient, settings: Settings):
        """
        Initialize GithubAdapter.

        Args:
            client: GitHub API client.
            settings: Repository settings.
        """
        self.client = client
        self.settings = settings
        self.repository = settings.repository
        self.owner = settings.owner
        self.name = settings.name
        self.branch = settings.branch
        self.reference = settings.reference
        self._visibility: Optional[str] = None

    # -------------------------------------------------------------------------
    # Write operations
    # -------------------------------------------------------------------------

    def write(self, path: str, contents: Union[str, bytes], config: Optional[Config] = None) -> Metadata:
        """
        Write a new file.

        Args:
            path: File path.
            contents: File contents. Strings are encoded as UTF-8.
            config: Commit options ("message", "committer", "author").

        Returns:
            API response with the new "content" and "commit".
        """
        path = self.normalize_path(path)
        config = config or Config()
        logger.info("Creating %s in %s@%s", path, self.repository, self.branch)

        return self.client.contents.create(
            self.owner,
            self.name,
            path,
            self._to_bytes(contents),
            config.get("message", f"Create {path}"),
            self.branch,
            config.get("committer"),
            author=config.get("author"),
        )

    def write_stream(self, path: str, resource: IO, config: Optional[Config] = None) -> Metadata:
        """Write a new file using a stream."""
        return self.write(path, resource.read(), config)

    def update(self, path: str, contents: Union[str, bytes], config: Optional[Config] = None) -> Metadata:
        """
        Update a file.

        Fetches the current blob sha from the branch first: GitHub requires
        the sha of the file being replaced.

        Raises:
            IsADirectoryError: If the path is a directory.
        """
        path = self.normalize_path(path)
        config = config or Config()
        sha = self._get_branch_sha(path)
        logger.info("Updating %s in %s@%s", path, self.repository, self.branch)

        return self.client.contents.update(
            self.owner,
            self.name,
            path,
            self._to_bytes(contents),
            config.get("message", f"Update {path}"),
            sha,
            self.branch,
            config.get("committer"),
            author=config.get("author"),
        )

    def update_stream(self, path: str, resource: IO, config: Optional[Config] = None) -> Metadata:
        """Update a file using a stream."""
        return self.update(path, resource.read(), config)

    def rename(self, path: str, newpath: str) -> bool:
        """Rename a file. Produces two commits (create, then delete)."""
        self.copy(path, newpath)
        return self.delete(path)

    def copy(self, path: str, newpath: str) -> bool:
        """Copy a file."""
        data = self.read(path)
        self.write(newpath, data[KEY_CONTENTS], Config({"message": f"Copy {self.normalize_path(path)}"}))
        return True

    def delete(self, path: str, config: Optional[Config] = None) -> bool:
        """
        Delete a file.

        Raises:
            IsADirectoryError: If the path is a directory.
        """
        path = self.normalize_path(path)
        self._remove(path, self._get_branch_sha(path), config)
        return True

    def delete_dir(self, dirname: str, config: Optional[Config] = None) -> bool:
        """
        Delete a directory by removing every file below it on the branch.

        Returns:
            False for the repository root, or if there was nothing to delete.
        """
        dirname = self.normalize_path(dirname)
        if not dirname:
            logger.warning("Refusing to delete the root of %s", self.repository)
            return False

        prefix = dirname + self.path_separator
        files = [
            entry for entry in self._get_tree(self.branch, recursive=True)
            if entry[KEY_TYPE] == TYPE_BLOB and entry[KEY_PATH].startswith(prefix)
        ]
        if not files:
            return False

        for entry in files:
            self._remove(entry[KEY_PATH], entry["sha"], config)
        return True

    def create_dir(self, dirname: str, config: Optional[Config] = None) -> bool:
        """Git does not track empty directories."""
        logger.debug("create_dir is not supported: %s", dirname)
        return False

    def set_visibility(self, path: str, visibility: str) -> bool:
        """Visibility is a repository setting and can not be set per file."""
        logger.debug("set_visibility is not supported: %s", path)
        return False

    # -------------------------------------------------------------------------
    # Read operations
    # -------------------------------------------------------------------------

    def has(self, path: str) -> bool:
        """Check that a file or directory exists in the repository."""
        return self.client.contents.exists(
            self.owner,
            self.name,
            self.normalize_path(path),
            self.reference,
        )

    def read(self, path: str) -> Metadata:
        """Download a file."""
        path = self.normalize_path(path)
        contents = self.client.contents.download(self.owner, self.name, path, self.reference)
        return {KEY_TYPE: TYPE_FILE, KEY_PATH: path, KEY_CONTENTS: contents}

    def read_stream(self, path: str) -> Metadata:
        """Read a file as a stream."""
        data = self.read(path)
        return {
            KEY_TYPE: TYPE_FILE,
            KEY_PATH: data[KEY_PATH],
            KEY_STREAM: io.BytesIO(data[KEY_CONTENTS]),
        }

    def list_contents(self, directory: str = "", recursive: bool = False) -> List[Metadata]:
        """
        List contents of a directory.

        Args:
            directory: Directory path ("" for the repository root).
            recursive: List the whole subtree from the git tree API.

        Returns:
            List of metadata records.
        """
        directory = self.normalize_path(directory)

        if recursive:
            entries = self._get_tree(self.reference, recursive=True)
            if directory:
                prefix = directory + self.path_separator
                entries = [e for e in entries if e[KEY_PATH].startswith(prefix)]
            return normalize_tree(entries, self.get_visibility(directory))

        metadata = self.get_metadata(directory)
        return normalize_metadata(metadata, self.get_visibility(directory))

    def get_metadata(self, path: str) -> Union[Metadata, List[Metadata]]:
        """
        Get information about a repository file or directory.

        Returns:
            Dict for a file, list of entries for a directory.
        """
        return self.client.contents.show(
            self.owner,
            self.name,
            self.normalize_path(path),
            self.reference,
        )

    def get_size(self, path: str) -> Union[Metadata, bool]:
        """Get the size of a file."""
        metadata = self.get_metadata(path)
        if not isinstance(metadata, dict):
            return False
        return {
            KEY_TYPE: metadata.get(KEY_TYPE),
            KEY_PATH: metadata.get(KEY_PATH),
            KEY_SIZE: metadata.get(KEY_SIZE),
        }

    def get_mimetype(self, path: str) -> Metadata:
        """Get the mimetype of a file, guessed from its name."""
        path = self.normalize_path(path)
        mimetype, _ = mimetypes.guess_type(path)
        return {KEY_PATH: path, "mimetype": mimetype or DEFAULT_MIMETYPE}

    def get_timestamp(self, path: str) -> Union[Metadata, bool]:
        """
        Get the timestamp of a file.

        Uses the committer date of the last commit touching the path.
        """
        path = self.normalize_path(path)
        commits = self.client.repositories.commits(
            self.owner,
            self.name,
            sha=self.branch,
            path=path,
        )
        if not commits:
            return False

        date = commits[0]["commit"]["committer"]["date"]
        return {KEY_PATH: path, KEY_TIMESTAMP: self._parse_timestamp(date)}

    def get_visibility(self, path: Optional[str] = None) -> str:
        """
        Get the visibility of a file.

        This is the repository visibility, fetched once per adapter.
        """
        if self._visibility is None:
            repo = self.client.repositories.show(self.owner, self.name)
            if repo.get(VISIBILITY_PRIVATE) is True:
                self._visibility = VISIBILITY_PRIVATE
            else:
                self._visibility = VISIBILITY_PUBLIC
            logger.debug("Visibility of %s: %s", self.repository, self._visibility)

        return self._visibility

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _get_tree(self, ref: str, recursive: bool) -> List[Dict[str, Any]]:
        info = self.client.trees.show(self.owner, self.name, ref, recursive)
        if info.get("truncated"):
            logger.warning("Tree of %s@%s was truncated by the API", self.repository, ref)
        return info["tree"]

    def _get_branch_sha(self, path: str) -> str:
        """Blob sha of a file on the branch that mutations commit to."""
        metadata = self.client.contents.show(self.owner, self.name, path, self.branch)
        if not isinstance(metadata, dict) or metadata.get(KEY_TYPE) == TYPE_DIRECTORY:
            raise IsADirectoryError(f"Is a directory: {path}")
        return metadata["sha"]

    def _remove(self, path: str, sha: str, config: Optional[Config] = None) -> Dict[str, Any]:
        config = config or Config()
        logger.info("Deleting %s in %s@%s", path, self.repository, self.branch)
        return self.client.contents.remove(
            self.owner,
            self.name,
            path,
            config.get("message", f"Delete {path}"),
            sha,
            self.branch,
            config.get("committer"),
            author=config.get("author"),
        )

    @staticmethod
    def _to_bytes(contents: Union[str, bytes]) -> bytes:
        if isinstance(contents, str):
            return contents.encode("utf-8")
        return contents

    @staticmethod
    def _parse_timestamp(value: str) -> int:
        """Parse an ISO 8601 API date ("2011-04-14T16:00:49Z") to epoch seconds."""
        moment = datetime.strptime(value, "%Y-%m-%dT%H:%M:%SZ").replace(tzinfo=timezone.utc)
        return int(moment.timestamp())
