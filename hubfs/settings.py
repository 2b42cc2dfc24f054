"""
Settings - Validated repository settings for the GitHub adapter.
"""

import os
import re
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Tuple


BRANCH_MASTER = "master"
REFERENCE_HEAD = "HEAD"

ERROR_INVALID_REPOSITORY_NAME = "Given Repository name %s should be in the format of 'vendor/project'"
ERROR_INVALID_CREDENTIALS = "Given credentials %s should be a sequence like ('token', '<token>')"

_REPOSITORY_RE = re.compile(r"[^/\s]+/[^/\s]+")


@dataclass(frozen=True)
class Settings:
    """
    Immutable settings for a single GitHub repository.

    Example:
        >>> settings = Settings("octocat/hello-world", branch="main")
        >>> settings.owner, settings.name
        ('octocat', 'hello-world')
    """
    repository: str
    credentials: Tuple[Any, ...] = ()
    branch: str = BRANCH_MASTER
    reference: str = REFERENCE_HEAD

    def __post_init__(self):
        if not isinstance(self.repository, str) or not _REPOSITORY_RE.fullmatch(self.repository):
            raise ValueError(ERROR_INVALID_REPOSITORY_NAME % (repr(self.repository),))

        if isinstance(self.credentials, (str, bytes)):
            raise ValueError(ERROR_INVALID_CREDENTIALS % (repr(self.credentials),))

        # frozen, so bypass __setattr__ to normalize
        object.__setattr__(self, "credentials", tuple(self.credentials or ()))

    @property
    def owner(self) -> str:
        """Repository owner (user or organization)."""
        return self.repository.split("/")[0]

    @property
    def name(self) -> str:
        """Repository name."""
        return self.repository.split("/")[1]

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from environment variables.

        Reads HUBFS_REPOSITORY, HUBFS_BRANCH, HUBFS_REFERENCE and GITHUB_TOKEN.

        Args:
            environ: Mapping to read from. Defaults to os.environ.

        Returns:
            Settings instance.
        """
        environ = os.environ if environ is None else environ

        token = environ.get("GITHUB_TOKEN")
        credentials = ("token", token) if token else ()

        return cls(
            repository=environ.get("HUBFS_REPOSITORY", ""),
            credentials=credentials,
            branch=environ.get("HUBFS_BRANCH") or BRANCH_MASTER,
            reference=environ.get("HUBFS_REFERENCE") or REFERENCE_HEAD,
        )
