"""
Config - Option bag passed to adapter write operations.
"""

from typing import Any, Dict, Optional


class Config:
    """
    Per-call options for write, update and stream operations.

    Keys used by the GitHub adapter:
        message: Commit message.
        committer: Dict with "name" and "email".
        author: Dict with "name" and "email".
    """

    def __init__(self, settings: Optional[Dict[str, Any]] = None):
        self._settings: Dict[str, Any] = dict(settings or {})
        self._fallback: Optional["Config"] = None

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a setting.

        Falls back to the fallback config before returning the default.
        """
        if key in self._settings:
            return self._settings[key]
        if self._fallback is not None:
            return self._fallback.get(key, default)
        return default

    def has(self, key: str) -> bool:
        """Check if a setting is present (including the fallback)."""
        if key in self._settings:
            return True
        return self._fallback is not None and self._fallback.has(key)

    def set(self, key: str, value: Any) -> "Config":
        """Set a setting. Returns self for chaining."""
        self._settings[key] = value
        return self

    def with_fallback(self, fallback: "Config") -> "Config":
        """Use another config for keys not set here. Returns self."""
        self._fallback = fallback
        return self

    def __contains__(self, key: str) -> bool:
        return self.has(key)

    def __repr__(self) -> str:
        return f"Config({self._settings!r})"
