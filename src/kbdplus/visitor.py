"""Tree visitor and transformer for kbdplus.

Example — count key spans:

    class KbdCounter(BaseVisitor[None]):
        def __init__(self) -> None:
            self.count = 0

        def visit_kbd(self, node: Kbd) -> None:
            self.count += 1

    counter = KbdCounter()
    counter.visit(root)

Example — drop empty text leaves:

    def drop_empty(node: Node) -> Node | None:
        if isinstance(node, Text) and not node.value:
            return None
        return node

    new_root = transform(root, drop_empty)

Thread Safety:
    Visitors may accumulate mutable state; create one per thread. The
    transform function is pure.

"""

import dataclasses
from collections.abc import Callable

from kbdplus.nodes import Element, Kbd, Node, Root, Text


class BaseVisitor[T]:
    """Base tree visitor with match-based dispatch.

    Subclass and override ``visit_*`` methods for node types you care about.
    Unhandled node types fall through to ``visit_default``. Children are
    walked automatically after the ``visit_*`` call.

    """

    def visit(self, node: Node) -> T:
        """Dispatch to the appropriate ``visit_*`` method, then walk children."""
        result = self._dispatch(node)
        self._walk_children(node)
        return result

    def visit_default(self, node: Node) -> T:
        """Called for node types without a specific ``visit_*`` method."""
        return None  # type: ignore[return-value]

    def visit_root(self, node: Root) -> T:
        return self.visit_default(node)

    def visit_element(self, node: Element) -> T:
        return self.visit_default(node)

    def visit_text(self, node: Text) -> T:
        return self.visit_default(node)

    def visit_kbd(self, node: Kbd) -> T:
        return self.visit_default(node)

    def _dispatch(self, node: Node) -> T:
        match node:
            case Root():
                return self.visit_root(node)
            case Element():
                return self.visit_element(node)
            case Text():
                return self.visit_text(node)
            case Kbd():
                return self.visit_kbd(node)
            case _:
                return self.visit_default(node)

    def _walk_children(self, node: Node) -> None:
        match node:
            case Root(children=children) | Element(children=children) | Kbd(children=children):
                for child in children:
                    self.visit(child)
            case _:
                pass  # Leaf nodes: no children


def transform(root: Root, fn: Callable[[Node], Node | None]) -> Root:
    """Apply ``fn`` to every node bottom-up, returning a new tree.

    Children are transformed before their parent, so ``fn`` always receives
    nodes whose children are already transformed. Return ``None`` from
    ``fn`` to remove a node. The root cannot be removed.

    Raises:
        TypeError: If ``fn`` does not return a Root for the root node.

    """
    result = _transform_node(root, fn)
    if result is None or not isinstance(result, Root):
        msg = "transform fn must return a Root for the root (cannot remove root)"
        raise TypeError(msg)
    return result


def _transform_node(node: Node, fn: Callable[[Node], Node | None]) -> Node | None:
    return fn(_transform_children(node, fn))


def _transform_children(node: Node, fn: Callable[[Node], Node | None]) -> Node:
    match node:
        case Root(children=children) | Element(children=children) | Kbd(children=children):
            new_children = tuple(
                result for c in children
                if (result := _transform_node(c, fn)) is not None
            )
            if new_children != children:
                return dataclasses.replace(node, children=new_children)
        case _:
            pass

    return node


__all__ = [
    "BaseVisitor",
    "transform",
]
