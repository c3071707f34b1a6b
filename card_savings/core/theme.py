"""
Dark-mode preference for the embedded calculator.

The host page chooses a mode. "dark" and "light" are forced; "auto" uses the
user's saved toggle and falls back to the system preference. Only auto mode
writes the preference back.
"""

from __future__ import annotations

from typing import Dict, Optional

from typing_extensions import Protocol

from card_savings.config import HostConfig
from card_savings.log import get_logger

DARK_MODE_KEY = "darkMode"


class KeyValueStore(Protocol):
    """Protocol for the string key-value storage that holds the preference."""

    def get(self, key: str) -> Optional[str]:
        """
        Read a stored value.

        Args:
            key: Storage key

        Returns:
            The stored string, or None if nothing was saved
        """
        ...

    def set(self, key: str, value: str) -> None:
        """
        Store a value, replacing any previous one.

        Args:
            key: Storage key
            value: String value to store
        """
        ...


class InMemoryStore:
    """Dict-backed KeyValueStore, one per app instance."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._values: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value


def resolve_dark_mode(
    config: HostConfig,
    store: KeyValueStore,
    system_prefers_dark: bool = False,
) -> bool:
    if config.mode == "dark":
        return True
    if config.mode == "light":
        return False

    saved = store.get(DARK_MODE_KEY)
    if saved is not None:
        return saved == "true"
    return system_prefers_dark


def save_dark_mode(config: HostConfig, store: KeyValueStore, dark: bool) -> bool:
    """Persist the toggle. Returns False when the host forces a mode."""
    if config.mode != "auto":
        return False
    store.set(DARK_MODE_KEY, "true" if dark else "false")
    get_logger(component="theme").info("dark_mode_saved", dark=dark)
    return True


def theme_name(dark: bool) -> str:
    return "dark" if dark else "light"
