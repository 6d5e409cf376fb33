"""
kbdplus — ``++key++`` keyboard spans for Markdown text trees

Recognizes ``++Ctrl++``-style marker pairs inside inline text and turns each
valid pair into a key span (rendered as ``<kbd>``). Everything else,
including malformed markers and backslash-escaped characters, stays literal.

Quick Start:
    >>> from kbdplus import scan
    >>> scan("Press ++Ctrl++ then ++Alt++")
    [Text(value='Press '), Kbd(...), Text(value=' then '), Kbd(...)]

    >>> # Transform a host tree
    >>> from kbdplus import Element, Root, Text, kbd_plus
    >>> root = Root(children=(Element("paragraph", (Text("++Esc++"),)),))
    >>> kbd_plus()(root)

Installation:
    pip install kbdplus              # zero runtime dependencies
"""

from kbdplus.config import KbdConfig, resolve_config
from kbdplus.errors import ConfigError, KbdPlusError, PluginError, SerializationError
from kbdplus.nodes import KBD_RENDER_HINT, Element, Kbd, Node, Root, Span, Text
from kbdplus.plugins import (
    BUILTIN_PLUGINS,
    KbdPlugin,
    KbdPlusPlugin,
    apply_kbd,
    apply_kbd_many,
    get_plugin,
    kbd_plus,
    register_plugin,
)
from kbdplus.scanner import ESCAPE_CHAR, MARKER, ScanMode, is_identity, scan
from kbdplus.serialization import from_dict, from_json, to_dict, to_json
from kbdplus.text import extract_text, surface
from kbdplus.visitor import BaseVisitor, transform

__version__ = "0.1.0"

__all__ = [
    # Scanning
    "ESCAPE_CHAR",
    "MARKER",
    "ScanMode",
    "is_identity",
    "scan",
    # Nodes
    "KBD_RENDER_HINT",
    "Element",
    "Kbd",
    "Node",
    "Root",
    "Span",
    "Text",
    # Plugins
    "BUILTIN_PLUGINS",
    "KbdPlugin",
    "KbdPlusPlugin",
    "apply_kbd",
    "apply_kbd_many",
    "get_plugin",
    "kbd_plus",
    "register_plugin",
    # Config
    "KbdConfig",
    "resolve_config",
    # Errors
    "ConfigError",
    "KbdPlusError",
    "PluginError",
    "SerializationError",
    # Tree utilities
    "BaseVisitor",
    "extract_text",
    "from_dict",
    "from_json",
    "surface",
    "to_dict",
    "to_json",
    "transform",
    "__version__",
]
