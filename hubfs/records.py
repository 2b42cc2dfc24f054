"""
Records - Normalize GitHub API entries into adapter metadata records.

Metadata keys:

    type        file or dir
    path        path to the file or dir
    contents    file contents
    stream      readable stream
    visibility  public or private
    timestamp   modified time

Keys the API response can not provide are set to False.
"""

from typing import Any, Dict, Iterable, List, Union

KEY_CONTENTS = "contents"
KEY_PATH = "path"
KEY_SIZE = "size"
KEY_STREAM = "stream"
KEY_TIMESTAMP = "timestamp"
KEY_TYPE = "type"
KEY_VISIBILITY = "visibility"

TYPE_BLOB = "blob"
TYPE_TREE = "tree"
TYPE_FILE = "file"
TYPE_DIRECTORY = "dir"

VISIBILITY_PRIVATE = "private"
VISIBILITY_PUBLIC = "public"

_TREE_TYPES = {
    TYPE_BLOB: TYPE_FILE,
    TYPE_TREE: TYPE_DIRECTORY,
}


def normalize_entry(entry: Dict[str, Any], visibility: str) -> Dict[str, Any]:
    """
    Copy an entry and mark the fields the API does not provide.

    Args:
        entry: Entry from the contents API.
        visibility: Repository visibility.

    Returns:
        New metadata dict.
    """
    result = dict(entry)
    result[KEY_CONTENTS] = False
    result[KEY_STREAM] = False
    result[KEY_TIMESTAMP] = False
    result[KEY_VISIBILITY] = visibility
    return result


def normalize_tree_entry(entry: Dict[str, Any], visibility: str) -> Dict[str, Any]:
    """Normalize a git tree entry, relabeling blob/tree as file/dir."""
    result = normalize_entry(entry, visibility)
    kind = result.get(KEY_TYPE)
    # submodules ("commit") keep their type
    result[KEY_TYPE] = _TREE_TYPES.get(kind, kind)
    return result


def normalize_metadata(
    info: Union[Dict[str, Any], List[Dict[str, Any]]], visibility: str
) -> List[Dict[str, Any]]:
    """
    Normalize the result of a contents "show" call.

    A directory yields a list of entries, a file a single dict.
    """
    if isinstance(info, dict):
        info = [info]
    return [normalize_entry(entry, visibility) for entry in info]


def normalize_tree(entries: Iterable[Dict[str, Any]], visibility: str) -> List[Dict[str, Any]]:
    """Normalize every entry of a git tree."""
    return [normalize_tree_entry(entry, visibility) for entry in entries]
