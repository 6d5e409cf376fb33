"""Plugin system for kbdplus.

A plugin is a named tree transformer. The built-in ``kbd`` plugin turns
``++key++`` inside text leaves into key spans.

Usage:
    >>> from kbdplus.plugins import get_plugin
    >>> plugin = get_plugin("kbd")
    >>> new_root = plugin(root)

    >>> # Plugin options (none are defined yet; unknown keys are ignored)
    >>> plugin = get_plugin("kbd", {"unknown": True})

Thread Safety:
All plugins are stateless apart from their frozen configuration.
Multiple threads can use the same plugin instance concurrently.

"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from kbdplus.errors import PluginError

if TYPE_CHECKING:
    from kbdplus.nodes import Root

__all__ = [
    "BUILTIN_PLUGINS",
    "KbdPlusPlugin",
    "get_plugin",
    "register_plugin",
]


@runtime_checkable
class KbdPlusPlugin(Protocol):
    """Protocol for kbdplus plugins."""

    @property
    def name(self) -> str:
        """Plugin identifier."""
        ...

    def transform(self, root: Root) -> Root:
        """Return a transformed copy of ``root`` (or ``root`` if unchanged)."""
        ...


# Registry of built-in plugins
BUILTIN_PLUGINS: dict[str, type[KbdPlusPlugin]] = {}


def register_plugin(
    name: str,
) -> Callable[[type[KbdPlusPlugin]], type[KbdPlusPlugin]]:
    """Decorator to register a plugin class under ``name``.

    Raises:
        PluginError: If ``name`` is already registered to a different class.

    """

    def decorator(cls: type[KbdPlusPlugin]) -> type[KbdPlusPlugin]:
        existing = BUILTIN_PLUGINS.get(name)
        if existing is not None and existing is not cls:
            raise PluginError(name, f"already registered to {existing.__name__}")
        BUILTIN_PLUGINS[name] = cls
        return cls

    return decorator


def get_plugin(name: str, options: Mapping[str, Any] | None = None) -> KbdPlusPlugin:
    """Get a plugin instance by name.

    Args:
        name: Plugin name (e.g., "kbd")
        options: Options passed to the plugin constructor

    Raises:
        PluginError: If plugin name is not recognized

    """
    if name not in BUILTIN_PLUGINS:
        available = ", ".join(sorted(BUILTIN_PLUGINS.keys()))
        raise PluginError(name, f"unknown plugin. Available: {available}")
    return BUILTIN_PLUGINS[name](options)  # type: ignore[call-arg]


# Import built-in plugins to register them
from kbdplus.plugins.kbd import KbdPlugin, apply_kbd, apply_kbd_many, kbd_plus  # noqa: E402

__all__ += [
    "KbdPlugin",
    "apply_kbd",
    "apply_kbd_many",
    "kbd_plus",
]
