"""Exception classes for kbdplus.

The scanner itself has no failure states: malformed delimiter sequences
degrade to literal text. These exceptions only report API misuse.
"""

from __future__ import annotations


class KbdPlusError(Exception):
    """Base exception for all kbdplus errors.

    Subclass this for specific error categories.
    """

    pass


class ConfigError(KbdPlusError, TypeError):
    """Options value of an unsupported type."""

    pass


class PluginError(KbdPlusError):
    """Error in plugin lookup or registration."""

    def __init__(self, plugin_name: str, message: str) -> None:
        """Initialize plugin error.

        Args:
            plugin_name: Name of the failing plugin
            message: Description of the error
        """
        self.plugin_name = plugin_name
        super().__init__(f"Plugin '{plugin_name}': {message}")


class SerializationError(KbdPlusError, ValueError):
    """Serialized node data that cannot be reconstructed.

    Carries the dotted path to the offending node when known, e.g.
    ``children.2.children.0``.
    """

    def __init__(self, message: str, path: str | None = None) -> None:
        self.message = message
        self.path = path
        location = f" at {path}" if path else ""
        super().__init__(f"{message}{location}")
