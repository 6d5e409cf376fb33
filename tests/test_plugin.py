"""Tests for the kbd plugin: splicing key spans into a host tree."""

import logging

import pytest

from kbdplus import kbd_plus
from kbdplus.config import KbdConfig
from kbdplus.errors import ConfigError, PluginError
from kbdplus.nodes import Element, Kbd, Root, Text
from kbdplus.plugins import (
    BUILTIN_PLUGINS,
    KbdPlugin,
    KbdPlusPlugin,
    apply_kbd,
    apply_kbd_many,
    get_plugin,
    register_plugin,
)


def _root(*blocks) -> Root:  # type: ignore[no-untyped-def]
    return Root(children=tuple(blocks))


def _para(*inlines) -> Element:  # type: ignore[no-untyped-def]
    return Element("paragraph", tuple(inlines))


# =============================================================================
# Splicing
# =============================================================================


class TestApplyKbd:
    """Text leaves are replaced by their scanned spans in place."""

    def test_replaces_leaf(self) -> None:
        root = _root(_para(Text("Press ++Ctrl++ now")))
        result = apply_kbd(root)
        assert result == _root(_para(Text("Press "), Kbd.of("Ctrl"), Text(" now")))

    def test_unchanged_tree_is_same_object(self) -> None:
        root = _root(_para(Text("nothing here"), Text("a + b")))
        assert apply_kbd(root) is root

    def test_input_tree_is_not_modified(self) -> None:
        root = _root(_para(Text("++a++")))
        before = _root(_para(Text("++a++")))
        apply_kbd(root)
        assert root == before

    def test_sibling_order_is_preserved(self) -> None:
        root = _root(
            _para(
                Text("a ++b++"),
                Element("emphasis", (Text("++c++"),)),
                Text("d"),
            )
        )
        assert apply_kbd(root) == _root(
            _para(
                Text("a "),
                Kbd.of("b"),
                Element("emphasis", (Kbd.of("c"),)),
                Text("d"),
            )
        )

    def test_markers_do_not_pair_across_inline_nodes(self) -> None:
        """++**Ctrl**+Alt++ arrives as three leaves and stays literal."""
        root = _root(
            _para(
                Text("++"),
                Element("strong", (Text("Ctrl"),)),
                Text("+Alt++"),
            )
        )
        assert apply_kbd(root) is root

    def test_adjacent_text_leaves_are_scanned_independently(self) -> None:
        root = _root(_para(Text("++a"), Text("b++")))
        assert apply_kbd(root) is root

    def test_spliced_output_is_not_rescanned(self) -> None:
        """Escaped markers produce marker-like literal text that stays literal."""
        root = _root(_para(Text("\\++x++"), Text("++y++")))
        assert apply_kbd(root) == _root(_para(Text("++x++"), Kbd.of("y")))

    def test_existing_key_spans_are_left_alone(self) -> None:
        root = _root(_para(Kbd.of("++a++")))
        assert apply_kbd(root) is root

    def test_nested_blocks(self) -> None:
        root = _root(
            Element("list", (Element("listItem", (_para(Text("Hit ++Esc++")),)),)),
        )
        result = apply_kbd(root)
        item = result.children[0].children[0]  # type: ignore[attr-defined]
        assert item.children[0].children == (Text("Hit "), Kbd.of("Esc"))

    def test_only_changed_branches_are_rebuilt(self) -> None:
        untouched = _para(Text("plain"))
        root = _root(untouched, _para(Text("++k++")))
        result = apply_kbd(root)
        assert result.children[0] is untouched

    def test_empty_root(self) -> None:
        root = _root()
        assert apply_kbd(root) is root

    def test_escape_only_leaf_is_unchanged(self) -> None:
        root = _root(_para(Text("C:\\path")))
        assert apply_kbd(root) is root

    def test_logs_replacement_count(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="kbdplus")
        apply_kbd(_root(_para(Text("++a++")), _para(Text("++b++"), Text("c"))))
        assert "Replaced 2 text leaves" in caplog.text


# =============================================================================
# Options
# =============================================================================


class TestOptions:
    """The options value is accepted and otherwise ignored."""

    def test_default_options(self) -> None:
        root = _root(_para(Text("++Ctrl++")))
        assert kbd_plus()(root) == _root(_para(Kbd.of("Ctrl")))

    def test_empty_options(self) -> None:
        root = _root(_para(Text("++Ctrl++")))
        assert kbd_plus({})(root) == _root(_para(Kbd.of("Ctrl")))

    def test_unknown_options_are_ignored(self) -> None:
        root = _root(_para(Text("++Ctrl++")))
        assert kbd_plus({"unknownOption": True})(root) == _root(_para(Kbd.of("Ctrl")))

    def test_config_instance(self) -> None:
        plugin = kbd_plus(KbdConfig())
        assert plugin.config == KbdConfig()

    def test_invalid_options_type(self) -> None:
        with pytest.raises(ConfigError):
            kbd_plus(42)  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            apply_kbd(_root(), ["not", "a", "mapping"])  # type: ignore[arg-type]


# =============================================================================
# Registry
# =============================================================================


class TestPluginRegistry:
    """Plugins are looked up by name."""

    def test_kbd_is_registered(self) -> None:
        assert BUILTIN_PLUGINS["kbd"] is KbdPlugin

    def test_get_plugin(self) -> None:
        plugin = get_plugin("kbd")
        assert isinstance(plugin, KbdPlugin)
        assert isinstance(plugin, KbdPlusPlugin)
        assert plugin.name == "kbd"

    def test_get_plugin_with_options(self) -> None:
        plugin = get_plugin("kbd", {"whatever": 1})
        assert plugin.transform(_root(_para(Text("++x++")))) == _root(_para(Kbd.of("x")))

    def test_unknown_plugin(self) -> None:
        with pytest.raises(PluginError, match="Available: kbd") as exc_info:
            get_plugin("emoji")
        assert exc_info.value.plugin_name == "emoji"

    def test_register_conflicting_name(self) -> None:
        class Other:
            name = "kbd"

            def __init__(self, options=None) -> None:  # type: ignore[no-untyped-def]
                pass

            def transform(self, root: Root) -> Root:
                return root

        with pytest.raises(PluginError):
            register_plugin("kbd")(Other)  # type: ignore[arg-type]
        assert BUILTIN_PLUGINS["kbd"] is KbdPlugin

    def test_register_new_plugin(self) -> None:
        @register_plugin("noop")
        class NoopPlugin:
            def __init__(self, options=None) -> None:  # type: ignore[no-untyped-def]
                pass

            @property
            def name(self) -> str:
                return "noop"

            def transform(self, root: Root) -> Root:
                return root

        try:
            root = _root(_para(Text("++x++")))
            assert get_plugin("noop").transform(root) is root
        finally:
            BUILTIN_PLUGINS.pop("noop", None)


# =============================================================================
# Concurrency
# =============================================================================


class TestApplyKbdMany:
    """Independent documents can be transformed concurrently."""

    def test_results_keep_input_order(self) -> None:
        roots = [_root(_para(Text(f"doc {i} ++K{i}++"))) for i in range(50)]
        results = apply_kbd_many(roots, max_workers=8)
        assert results == [
            _root(_para(Text(f"doc {i} "), Kbd.of(f"K{i}"))) for i in range(50)
        ]

    def test_single_and_empty(self) -> None:
        assert apply_kbd_many([]) == []
        root = _root(_para(Text("++a++")))
        assert apply_kbd_many([root]) == [apply_kbd(root)]

    def test_accepts_iterables(self) -> None:
        roots = (_root(_para(Text(f"++{i}++"))) for i in range(3))
        assert len(apply_kbd_many(roots, {})) == 3
