"""
hubfs - Filesystem adapter for GitHub repositories.
"""

from .adapter import GithubAdapter
from .base import AbstractAdapter
from .client import GitHubClient
from .config import Config
from .settings import Settings

__version__ = "0.1.0"
__all__ = [
    "AbstractAdapter",
    "Config",
    "GitHubClient",
    "GithubAdapter",
    "Settings",
]
