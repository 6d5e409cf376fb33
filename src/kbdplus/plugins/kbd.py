"""Key span plugin for kbdplus.

Adds support for ``++key++`` syntax inside text leaves of a host tree.

Usage:
    >>> transformer = kbd_plus()
    >>> root = Root(children=(Element("paragraph", (Text("Press ++Ctrl++"),)),))
    >>> transformer(root)
    Root(children=(Element(kind='paragraph', children=(Text(value='Press '), Kbd(...))),))

Syntax:
++Ctrl++        → <kbd>Ctrl</kbd>
++Ctrl++++Alt++ → <kbd>Ctrl</kbd><kbd>Alt</kbd>
\\++Ctrl++      → ++Ctrl++ (literal)

Only ``Text`` leaves are scanned. Other inline constructs (emphasis, links,
code) are separate nodes, so markers never pair across them; their own text
children are scanned independently.

Thread Safety:
This plugin is stateless and thread-safe.

"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from concurrent.futures import ThreadPoolExecutor
from typing import Any

from kbdplus.config import KbdConfig, resolve_config
from kbdplus.nodes import Element, Kbd, Node, Root, Text
from kbdplus.plugins import register_plugin
from kbdplus.scanner import is_identity, scan
from kbdplus.utils.logger import get_logger

logger = get_logger(__name__)

type Options = KbdConfig | Mapping[str, Any] | None


def _splice_children(
    children: tuple[Node, ...], config: KbdConfig, counter: list[int]
) -> tuple[Node, ...]:
    """Scan text children in order, splicing spans in place of each leaf.

    Spans produced here are placed in the output only; the walk continues
    with the next original child, so nothing emitted is scanned twice.

    """
    out: list[Node] = []
    changed = False
    for child in children:
        match child:
            case Text(value=value):
                spans = scan(value, config)
                if is_identity(value, spans):
                    out.append(child)
                    continue
                out.extend(spans)
                counter[0] += 1
                changed = True
            case Kbd():
                # Existing key spans are left as they are
                out.append(child)
            case Element() | Root():
                new_child = _apply_node(child, config, counter)
                out.append(new_child)
                changed = changed or new_child is not child
            case _:
                out.append(child)
    return tuple(out) if changed else children


def _apply_node(node: Element | Root, config: KbdConfig, counter: list[int]) -> Element | Root:
    new_children = _splice_children(node.children, config, counter)
    if new_children is node.children:
        return node
    if isinstance(node, Root):
        return Root(children=new_children)
    return Element(kind=node.kind, children=new_children)


def apply_kbd(root: Root, options: Options = None) -> Root:
    """Replace ``++key++`` in every text leaf of ``root`` with key spans.

    The input tree is not modified. If no leaf changed, ``root`` itself is
    returned.

    Args:
        root: Document root.
        options: Optional configuration (unknown keys are ignored).

    Raises:
        ConfigError: If options is neither a mapping nor a KbdConfig.

    """
    config = resolve_config(options)
    counter = [0]
    result = _apply_node(root, config, counter)
    logger.debug("Replaced %d text leaves with key spans", counter[0])
    return result  # type: ignore[return-value]


def apply_kbd_many(
    roots: Iterable[Root],
    options: Options = None,
    *,
    max_workers: int | None = None,
) -> list[Root]:
    """Apply the plugin to independent documents concurrently.

    Results are returned in input order.

    """
    config = resolve_config(options)
    roots = list(roots)
    if len(roots) <= 1:
        return [apply_kbd(r, config) for r in roots]
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        return list(executor.map(lambda r: apply_kbd(r, config), roots))


@register_plugin("kbd")
class KbdPlugin:
    """Plugin adding ``++key++`` support.

    Callable: ``plugin(root)`` is ``plugin.transform(root)``.

    """

    __slots__ = ("_config",)

    def __init__(self, options: Options = None) -> None:
        self._config = resolve_config(options)

    @property
    def name(self) -> str:
        return "kbd"

    @property
    def config(self) -> KbdConfig:
        return self._config

    def transform(self, root: Root) -> Root:
        return apply_kbd(root, self._config)

    def __call__(self, root: Root) -> Root:
        return self.transform(root)


def kbd_plus(options: Options = None) -> KbdPlugin:
    """Create a ready-to-use transformer.

    Example:
        >>> transformer = kbd_plus({})
        >>> new_root = transformer(root)

    """
    return KbdPlugin(options)
