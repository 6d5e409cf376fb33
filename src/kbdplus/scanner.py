"""Delimiter scanner for ``++key++`` spans.

Turns one run of inline text into an ordered list of spans: ``Text`` for
literal content and ``Kbd`` for each matched marker pair.

Rules, applied left to right at each position:

1. Escape: ``\\`` followed by any character appends that character
   verbatim to the active buffer, in either mode. A trailing ``\\`` is
   kept as-is.
2. Marker (``++``):
   - outside a key span, ``++++`` is literal, ``++`` followed by
     whitespace is not an opening marker, anything else opens a span;
   - inside a key span, ``++`` always closes it (no nesting).
3. Anything else is appended to the active buffer.

At end of input an unterminated span degrades to literal text
(marker + content), merged into the preceding ``Text`` span if there is one.

Thread Safety:
    ``scan`` keeps all state in a per-call ``ScanState``. Safe to call from
    any thread.

Complexity: O(n) in the input length.

"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any

from kbdplus.config import KbdConfig
from kbdplus.nodes import Kbd, Span, Text

MARKER = "++"
MARKER_CHAR = "+"
ESCAPE_CHAR = "\\"

_DOUBLE_MARKER = MARKER * 2

# Characters matched by the ECMAScript ``\s`` class: ASCII whitespace, NBSP,
# the Unicode space separators, line/paragraph separators and the BOM
WHITESPACE = frozenset(
    "\t\n\v\f\r "
    + "".join(
        chr(c)
        for c in (0x00A0, 0x1680, 0x2028, 0x2029, 0x202F, 0x205F, 0x3000, 0xFEFF)
    )
    + "".join(chr(c) for c in range(0x2000, 0x200B))
)


class ScanMode(Enum):
    """Scanner states.

    - OUTSIDE: accumulating literal text, looking for an opening marker
    - INSIDE_KEY: accumulating key content, looking for a closing marker

    """

    OUTSIDE = auto()
    INSIDE_KEY = auto()


def is_whitespace(char: str) -> bool:
    """True if ``char`` is a whitespace character.

    Past-the-end lookups pass an empty string, which is not whitespace.
    """
    return char in WHITESPACE


@dataclass(slots=True)
class ScanState:
    """Mutable state of one ``scan`` call.

    The buffer holds literal text while OUTSIDE and key content while
    INSIDE_KEY. ``open_marker`` is only set while INSIDE_KEY.

    """

    mode: ScanMode = ScanMode.OUTSIDE
    parts: list[str] = field(default_factory=list)
    open_marker: str = ""
    spans: list[Span] = field(default_factory=list)

    def append(self, s: str) -> None:
        self.parts.append(s)

    def take_buffer(self) -> str:
        value = "".join(self.parts)
        self.parts.clear()
        return value

    def open_key(self, marker: str) -> None:
        """OUTSIDE -> INSIDE_KEY: flush pending literal text."""
        literal = self.take_buffer()
        if literal:
            self.spans.append(Text(literal))
        self.open_marker = marker
        self.mode = ScanMode.INSIDE_KEY

    def close_key(self) -> None:
        """INSIDE_KEY -> OUTSIDE: emit the key span."""
        self.spans.append(Kbd.of(self.take_buffer()))
        self.open_marker = ""
        self.mode = ScanMode.OUTSIDE

    def finish(self) -> list[Span]:
        """End of input: flush the buffer, degrading an open span to text."""
        if self.mode is ScanMode.INSIDE_KEY:
            literal = self.open_marker + self.take_buffer()
            self.open_marker = ""
            self.mode = ScanMode.OUTSIDE
            if self.spans and isinstance(self.spans[-1], Text):
                self.spans[-1] = Text(self.spans[-1].value + literal)
            else:
                self.spans.append(Text(literal))
        else:
            literal = self.take_buffer()
            if literal:
                self.spans.append(Text(literal))
        return self.spans


def scan(source: str, options: KbdConfig | Mapping[str, Any] | None = None) -> list[Span]:
    """Split ``source`` into literal and key spans.

    Total function: never raises and always terminates.

    Args:
        source: One run of inline text.
        options: Optional configuration. No options are defined yet, so any
            value is accepted and ignored.

    Returns:
        Ordered spans. ``[]`` for empty input, ``[Text(source)]`` when
        ``source`` contains no marker character.

    Example:
        >>> scan("Press ++Ctrl++ then ++Alt++")
        [Text(value='Press '), Kbd(...), Text(value=' then '), Kbd(...)]

    """
    if not source:
        return []
    # No '+' means no marker can exist
    if MARKER_CHAR not in source:
        return [Text(source)]

    state = ScanState()
    n = len(source)
    pos = 0

    while pos < n:
        char = source[pos]

        if char == ESCAPE_CHAR:
            if pos + 1 < n:
                state.append(source[pos + 1])
                pos += 2
            else:
                state.append(char)
                pos += 1
            continue

        if source.startswith(MARKER, pos):
            if state.mode is ScanMode.OUTSIDE:
                if source.startswith(_DOUBLE_MARKER, pos):
                    state.append(_DOUBLE_MARKER)
                    pos += len(_DOUBLE_MARKER)
                elif is_whitespace(source[pos + 2 : pos + 3]):
                    # Not an opening marker; the second '+' is tested again
                    state.append(char)
                    pos += 1
                else:
                    state.open_key(MARKER)
                    pos += len(MARKER)
            else:
                state.close_key()
                pos += len(MARKER)
            continue

        state.append(char)
        pos += 1

    return state.finish()


def is_identity(source: str, spans: list[Span]) -> bool:
    """True if ``spans`` leaves ``source`` unchanged.

    Hosts use this to skip replacing a leaf when scanning found nothing.
    """
    if not spans:
        return not source
    return len(spans) == 1 and isinstance(spans[0], Text) and spans[0].value == source


__all__ = [
    "ESCAPE_CHAR",
    "MARKER",
    "MARKER_CHAR",
    "ScanMode",
    "ScanState",
    "WHITESPACE",
    "is_identity",
    "is_whitespace",
    "scan",
]
