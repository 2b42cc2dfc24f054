"""
AbstractAdapter - Filesystem adapter interface.
"""

from abc import ABC, abstractmethod
from typing import IO, Any, Dict, List, Optional, Union

from .config import Config

Metadata = Dict[str, Any]


class AbstractAdapter(ABC):
    """
    Interface every filesystem adapter implements.

    Operations return False when they cannot be carried out, and a
    metadata dict (or True) on success.
    """

    path_separator = "/"

    def normalize_path(self, path: Optional[str]) -> str:
        """Normalize path (remove leading/trailing separators)."""
        return (path or "").strip(self.path_separator)

    @abstractmethod
    def write(self, path: str, contents: Union[str, bytes], config: Config) -> Union[Metadata, bool]:
        """Write a new file."""

    @abstractmethod
    def write_stream(self, path: str, resource: IO, config: Config) -> Union[Metadata, bool]:
        """Write a new file using a stream."""

    @abstractmethod
    def update(self, path: str, contents: Union[str, bytes], config: Config) -> Union[Metadata, bool]:
        """Update a file."""

    @abstractmethod
    def update_stream(self, path: str, resource: IO, config: Config) -> Union[Metadata, bool]:
        """Update a file using a stream."""

    @abstractmethod
    def rename(self, path: str, newpath: str) -> bool:
        """Rename a file."""

    @abstractmethod
    def copy(self, path: str, newpath: str) -> bool:
        """Copy a file."""

    @abstractmethod
    def delete(self, path: str, config: Optional[Config] = None) -> bool:
        """Delete a file."""

    @abstractmethod
    def delete_dir(self, dirname: str, config: Optional[Config] = None) -> bool:
        """Delete a directory."""

    @abstractmethod
    def create_dir(self, dirname: str, config: Config) -> Union[Metadata, bool]:
        """Create a directory."""

    @abstractmethod
    def set_visibility(self, path: str, visibility: str) -> Union[Metadata, bool]:
        """Set the visibility for a file."""

    @abstractmethod
    def has(self, path: str) -> bool:
        """Check whether a file or directory exists."""

    @abstractmethod
    def read(self, path: str) -> Union[Metadata, bool]:
        """Read a file."""

    @abstractmethod
    def read_stream(self, path: str) -> Union[Metadata, bool]:
        """Read a file as a stream."""

    @abstractmethod
    def list_contents(self, directory: str = "", recursive: bool = False) -> List[Metadata]:
        """List contents of a directory."""

    @abstractmethod
    def get_metadata(self, path: str) -> Union[Metadata, List[Metadata], bool]:
        """Get all the metadata of a file or directory."""

    @abstractmethod
    def get_size(self, path: str) -> Union[Metadata, bool]:
        """Get the size of a file."""

    @abstractmethod
    def get_mimetype(self, path: str) -> Union[Metadata, bool]:
        """Get the mimetype of a file."""

    @abstractmethod
    def get_timestamp(self, path: str) -> Union[Metadata, bool]:
        """Get the last modified time of a file."""

    @abstractmethod
    def get_visibility(self, path: str) -> Union[str, bool]:
        """Get the visibility of a file."""
