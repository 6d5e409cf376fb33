"""Typed tree nodes for kbdplus.

All nodes are frozen dataclasses with slots, so scan results and transformed
trees can be shared across threads and compared by value.

Node Hierarchy:
Node (base)
├── Root        document root handed to the plugin
├── Element     any other host parent (paragraph, emphasis, link, ...)
├── Text        plain text span / text leaf
└── Kbd         key span produced from ``++key++``

The scanner only ever produces ``Text`` and ``Kbd``. ``Root`` and ``Element``
exist so a host can describe the surrounding document without kbdplus
knowing anything about its block or inline grammar.

"""

from __future__ import annotations

from dataclasses import dataclass

# Tag a downstream HTML projection uses for key spans
KBD_RENDER_HINT = "kbd"


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all tree nodes."""


# =============================================================================
# Spans
# =============================================================================


@dataclass(frozen=True, slots=True)
class Text(Node):
    """Literal text with no further interpretation.

    Wire shape: {"kind": "text", "value": ...}

    """

    value: str


@dataclass(frozen=True, slots=True)
class Kbd(Node):
    """Key span.

    Markdown: ++Ctrl++
    HTML: <kbd>Ctrl</kbd>

    Holds its content as a single ``Text`` child so inline tooling can walk
    into it like any other parent node.

    """

    children: tuple[Node, ...]
    render_hint: str = KBD_RENDER_HINT

    @classmethod
    def of(cls, content: str) -> Kbd:
        """Build the canonical one-child key span for ``content``."""
        return cls(children=(Text(content),))

    @property
    def content(self) -> str:
        return "".join(c.value for c in self.children if isinstance(c, Text))


# =============================================================================
# Host tree
# =============================================================================


@dataclass(frozen=True, slots=True)
class Element(Node):
    """Host parent node opaque to the scanner.

    ``kind`` names the construct ("paragraph", "emphasis", "link", ...).

    """

    kind: str
    children: tuple[Node, ...] = ()


@dataclass(frozen=True, slots=True)
class Root(Node):
    """Document root."""

    children: tuple[Node, ...] = ()


# PEP 695 type aliases
type Span = Text | Kbd
type Parent = Root | Element | Kbd


__all__ = [
    "KBD_RENDER_HINT",
    "Element",
    "Kbd",
    "Node",
    "Parent",
    "Root",
    "Span",
    "Text",
]
