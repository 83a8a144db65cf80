"""
Baselines module behavioral tests (most-recent and factory construction).

Conventions
- Test method names follow CamelCase per project convention.
"""
import math
import unittest
from unittest import TestCase

from hourglass import BUILTIN_COLORS, DEFAULT_COLOR, MemoryStore, Rect, WindowSize, WindowState, factory_options
from hourglass.baselines import (
    DEFAULT_WINDOW_BOUNDS,
    baselines,
    default_window_size,
    factory_window_size,
    most_recent_window_size,
)

RECENT = WindowSize(Rect(40, 60, 800, 600), WindowState.MAXIMIZED, WindowState.NORMAL, True)


class TestBaselines(TestCase):
    """Behavioral tests for the dual baseline builder."""

    def setUp(self):
        options = factory_options()._replace(always_on_top=True, color=BUILTIN_COLORS[0])
        self.store = MemoryStore(options, RECENT, notification_area=True)

    def testSameShapeDifferentValues(self):
        recent, factory = baselines(self.store)
        self.assertEqual(recent._fields, factory._fields)
        self.assertNotEqual(recent, factory)

    def testMostRecentBaseline(self):
        recent, _ = baselines(self.store)
        self.assertIs(recent.always_on_top, True)
        self.assertEqual(recent.color, BUILTIN_COLORS[0])
        self.assertIs(recent.full_screen, True)
        self.assertIs(recent.show_in_notification_area, True)
        self.assertEqual(recent.window_bounds, RECENT.restore_bounds)
        self.assertIs(recent.window_state, WindowState.MAXIMIZED)
        self.assertIsNone(recent.title)
        self.assertIsNone(recent.input)

    def testFactoryBaseline(self):
        _, factory = baselines(self.store)
        self.assertIs(factory.always_on_top, False)
        self.assertEqual(factory.color, DEFAULT_COLOR)
        self.assertIs(factory.full_screen, False)
        self.assertIs(factory.show_in_notification_area, False)
        self.assertIs(factory.pop_up_when_expired, True)
        self.assertEqual(factory.window_bounds, Rect(40, 60, 350, 150))
        self.assertIs(factory.window_state, WindowState.NORMAL)

    def testFactoryWindowSizeTakesOnlyPosition(self):
        size = factory_window_size(RECENT)
        self.assertEqual(size.restore_bounds, Rect(40, 60, 350, 150))
        self.assertIs(size.full_screen, False)

    def testMissingGeometryFallsBackToDefault(self):
        store = MemoryStore()
        self.assertEqual(most_recent_window_size(store), default_window_size())
        self.assertTrue(math.isinf(DEFAULT_WINDOW_BOUNDS.x) and math.isinf(DEFAULT_WINDOW_BOUNDS.y))
        _, factory = baselines(store)
        self.assertEqual(factory.window_bounds[2:], (350, 150))

    def testStoreRemembersOptions(self):
        store = MemoryStore()
        options = factory_options()._replace(loop_timer=True, window_size=RECENT)
        store.remember(options)
        self.assertIs(store.most_recent_options().loop_timer, True)
        self.assertEqual(store.most_recent_window_size(), RECENT)


if __name__ == "__main__":
    unittest.main()
