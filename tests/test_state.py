"""
Tests for GizmosState: configuration precedence and the group registry.
"""

import unittest

from gizmos.core.config import DEFAULT_CONFIG
from gizmos.core.state import DEFAULT_UI_HOTKEY, GizmosState


class TestResolveConfig(unittest.TestCase):
    def setUp(self):
        self.state = GizmosState()

    def test_no_layers_gives_default(self):
        self.assertEqual(self.state.resolve_config(), DEFAULT_CONFIG)
        self.assertEqual(self.state.resolve_config({}), DEFAULT_CONFIG)

    def test_global_overrides_default(self):
        self.state.set_global_config({"color": (1, 0, 0)})
        resolved = self.state.resolve_config()
        self.assertEqual(resolved.color, (1.0, 0.0, 0.0))
        self.assertEqual(resolved.transparency, DEFAULT_CONFIG.transparency)

    def test_precedence_call_over_group_over_global(self):
        self.state.set_global_config({"color": (1, 0, 0), "always_on_top": False})
        self.state.create_group("g", {"transparency": 0.5, "persistent": True})

        resolved = self.state.resolve_config({"group": "g", "name": "probe", "persistent": False})

        # call layer
        self.assertEqual(resolved.name, "probe")
        self.assertFalse(resolved.persistent)
        # group layer
        self.assertEqual(resolved.transparency, 0.5)
        # global layer, via the group snapshot
        self.assertEqual(resolved.color, (1.0, 0.0, 0.0))
        self.assertFalse(resolved.always_on_top)
        # default layer
        self.assertTrue(resolved.enabled)
        self.assertEqual(resolved.group, "g")

    def test_unknown_group_skips_layer_but_keeps_name(self):
        self.state.set_global_config({"color": (0, 0, 1)})
        resolved = self.state.resolve_config({"group": "missing"})
        self.assertEqual(resolved.group, "missing")
        self.assertEqual(resolved.color, (0.0, 0.0, 1.0))

    def test_disabled_group_propagates_enabled_false(self):
        self.state.create_group("g", {"enabled": False})
        self.assertFalse(self.state.resolve_config({"group": "g"}).enabled)
        # call layer can still force it on
        self.assertTrue(self.state.resolve_config({"group": "g", "enabled": True}).enabled)

    def test_resolution_is_pure(self):
        self.state.create_group("g", {"color": (0, 1, 0)})
        before = self.state.get_group_config("g")
        self.state.resolve_config({"group": "g", "color": (1, 1, 0)})
        self.assertEqual(self.state.get_group_config("g"), before)


class TestGroups(unittest.TestCase):
    def setUp(self):
        self.state = GizmosState()

    def test_create_group_snapshots_global(self):
        self.state.set_global_config({"color": (1, 0, 0)})
        self.state.create_group("g")
        self.state.set_global_config({"color": (0, 0, 1)})

        self.assertEqual(self.state.get_group_config("g").color, (1.0, 0.0, 0.0))
        self.assertEqual(self.state.resolve_config({"group": "g"}).color, (1.0, 0.0, 0.0))

    def test_set_group_config_overlays_existing(self):
        self.state.create_group("g", {"color": (1, 0, 0)})
        self.state.set_group_config("g", {"transparency": 0.25})
        config = self.state.get_group_config("g")
        self.assertEqual(config.color, (1.0, 0.0, 0.0))
        self.assertEqual(config.transparency, 0.25)

    def test_set_group_config_unknown_is_noop(self):
        self.state.set_group_config("missing", {"enabled": False})
        self.assertFalse(self.state.has_group("missing"))
        self.assertEqual(self.state.list_groups(), [])

    def test_delete_group(self):
        self.state.create_group("g")
        self.state.delete_group("g")
        self.assertIsNone(self.state.get_group("g"))
        # deleting again is a no-op
        self.state.delete_group("g")

    def test_get_group_and_list_order(self):
        self.state.create_group("b")
        self.state.create_group("a", {"name": "x"})
        self.assertEqual(self.state.list_groups(), ["b", "a"])
        group = self.state.get_group("a")
        self.assertEqual(group.name, "a")
        self.assertEqual(group.config.name, "x")

    def test_is_group_enabled(self):
        self.assertFalse(self.state.is_group_enabled("missing"))
        self.state.create_group("g")
        self.assertTrue(self.state.is_group_enabled("g"))
        self.state.set_group_config("g", {"enabled": False})
        self.assertFalse(self.state.is_group_enabled("g"))


class TestFlags(unittest.TestCase):
    def test_defaults(self):
        state = GizmosState()
        self.assertFalse(state.is_master_enabled())
        self.assertFalse(state.is_ui_visible())
        self.assertEqual(state.get_ui_hotkey(), DEFAULT_UI_HOTKEY)

    def test_setters(self):
        state = GizmosState()
        state.set_master_enabled(True)
        state.set_ui_visible(True)
        state.set_ui_hotkey("f3")
        self.assertTrue(state.is_master_enabled())
        self.assertTrue(state.is_ui_visible())
        self.assertEqual(state.get_ui_hotkey(), "F3")

    def test_independent_contexts(self):
        a = GizmosState()
        b = GizmosState()
        a.create_group("g")
        a.set_master_enabled(True)
        self.assertFalse(b.has_group("g"))
        self.assertFalse(b.is_master_enabled())
