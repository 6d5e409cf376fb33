"""Text extraction and literal surface forms.

Example:
    >>> from kbdplus import scan
    >>> from kbdplus.text import surface
    >>> surface(scan("Press ++Ctrl++"))
    'Press ++Ctrl++'
"""

from collections.abc import Iterable

from kbdplus.nodes import Element, Kbd, Node, Root, Text
from kbdplus.scanner import MARKER


def surface(spans: Iterable[Node]) -> str:
    """Reconstruct the literal source form of scanned spans.

    A key span is written back as marker + content + marker. Consumed escape
    characters are not re-inserted.

    """
    parts: list[str] = []
    for span in spans:
        match span:
            case Text(value=value):
                parts.append(value)
            case Kbd():
                parts.append(f"{MARKER}{span.content}{MARKER}")
            case _:
                parts.append(extract_text(span))
    return "".join(parts)


def extract_text(node: Node) -> str:
    """Extract plain text from any node.

    Key spans contribute their content without markers.

    """
    match node:
        case Text(value=value):
            return value
        case Kbd() | Element() | Root():
            return "".join(extract_text(c) for c in node.children)
        case _:
            return ""


__all__ = [
    "extract_text",
    "surface",
]
