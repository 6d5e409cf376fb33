"""Wire serialization for kbdplus nodes.

Converts nodes to/from the JSON-compatible shape downstream renderers read:

    {"kind": "text", "value": "Press "}
    {"kind": "kbd", "children": [{"kind": "text", "value": "Ctrl"}],
     "renderHint": "kbd"}

Host parents serialize as ``{"kind": <kind>, "children": [...]}`` and the
root as ``{"kind": "root", "children": [...]}``.

JSON output uses sorted keys so equal trees produce equal strings.

Thread Safety:
    All functions are pure — safe to call from any thread.

"""

import json
from typing import Any

from kbdplus.errors import SerializationError
from kbdplus.nodes import KBD_RENDER_HINT, Element, Kbd, Node, Root, Text

TEXT_KIND = "text"
KBD_KIND = "kbd"
ROOT_KIND = "root"

# Kinds that belong to built-in nodes; an Element using one would not round-trip
RESERVED_KINDS = frozenset({TEXT_KIND, KBD_KIND, ROOT_KIND})


def to_dict(node: Node) -> dict[str, Any]:
    """Convert a node to its wire dict.

    Raises:
        SerializationError: If ``node`` is not a kbdplus node type, or is
            an Element whose kind is reserved for a built-in node.

    """
    match node:
        case Text(value=value):
            return {"kind": TEXT_KIND, "value": value}
        case Kbd(children=children, render_hint=render_hint):
            return {
                "kind": KBD_KIND,
                "children": [to_dict(c) for c in children],
                "renderHint": render_hint,
            }
        case Element(kind=kind, children=children):
            if kind in RESERVED_KINDS:
                raise SerializationError(f"Element kind {kind!r} is reserved")
            return {"kind": kind, "children": [to_dict(c) for c in children]}
        case Root(children=children):
            return {"kind": ROOT_KIND, "children": [to_dict(c) for c in children]}
        case _:
            msg = f"Cannot serialize {type(node).__name__}"
            raise SerializationError(msg)


def from_dict(data: dict[str, Any], *, _path: str = "") -> Node:
    """Reconstruct a node from its wire dict.

    Raises:
        SerializationError: If ``kind`` is missing, a text node has no
            string ``value``, ``children`` is not a list, or a key span's
            ``renderHint`` is not a string.

    """
    if not isinstance(data, dict):
        msg = f"Expected an object, got {type(data).__name__}"
        raise SerializationError(msg, _path or None)

    kind = data.get("kind")
    if not isinstance(kind, str):
        raise SerializationError("Missing 'kind' field in serialized node", _path or None)

    if kind == TEXT_KIND:
        value = data.get("value")
        if not isinstance(value, str):
            raise SerializationError("Text node needs a string 'value'", _path or None)
        return Text(value)

    raw_children = data.get("children", [])
    if not isinstance(raw_children, list):
        raise SerializationError("'children' must be a list", _path or None)
    prefix = f"{_path}." if _path else ""
    children = tuple(
        from_dict(child, _path=f"{prefix}children.{i}")
        for i, child in enumerate(raw_children)
    )

    if kind == KBD_KIND:
        render_hint = data.get("renderHint", KBD_RENDER_HINT)
        if not isinstance(render_hint, str):
            raise SerializationError("Key span needs a string 'renderHint'", _path or None)
        return Kbd(children=children, render_hint=render_hint)
    if kind == ROOT_KIND:
        return Root(children=children)
    return Element(kind=kind, children=children)


def to_json(node: Node, *, indent: int | None = None) -> str:
    """Serialize a node (usually a Root) to a JSON string."""
    return json.dumps(to_dict(node), sort_keys=True, indent=indent, ensure_ascii=False)


def from_json(data: str) -> Node:
    """Deserialize a node from a JSON string.

    Raises:
        SerializationError: If the JSON is invalid or does not describe a node.

    """
    try:
        raw = json.loads(data)
    except json.JSONDecodeError as e:
        raise SerializationError(f"Invalid JSON: {e.msg}") from e
    return from_dict(raw)


__all__ = [
    "RESERVED_KINDS",
    "from_dict",
    "from_json",
    "to_dict",
    "to_json",
]
