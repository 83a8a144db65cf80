"""
Switches module behavioral tests (registry and duplicate guard).

Conventions
- Test method names follow CamelCase per project convention.
"""
import unittest
from unittest import TestCase

from hourglass import DuplicateSwitchError, Configuration
from hourglass.switches import HELP, SWITCHES, USE_FACTORY_DEFAULTS, DuplicateGuard, Switch, lookup, unrecognized

TABLE = {
    "--title": ("-t",),
    "--always-on-top": ("-a",),
    "--full-screen": ("-f",),
    "--show-in-notification-area": ("-n",),
    "--loop-timer": ("-l",),
    "--pop-up-when-expired": ("-p",),
    "--close-when-expired": ("-e",),
    "--color": ("-c",),
    "--sound": ("-s",),
    "--loop-sound": ("-r",),
    "--window-bounds": ("-b",),
    "--window-state": ("-w",),
    "--use-factory-defaults": ("-d",),
    "--help": ("-h", "-?"),
}


class TestRegistry(TestCase):
    """Behavioral tests for the switch registry."""

    def testEverySwitchAndAlias(self):
        self.assertEqual({switch.canonical: switch.aliases for switch in SWITCHES}, TABLE)
        for canonical, aliases in TABLE.items():
            for name in (canonical, *aliases):
                with self.subTest(name=name):
                    self.assertIs(lookup(name), lookup(canonical))

    def testFieldsExistOnConfiguration(self):
        for switch in SWITCHES:
            if switch.field is not None:
                with self.subTest(switch=switch.canonical):
                    self.assertIn(switch.field, Configuration._fields)
                    self.assertEqual(switch.nargs, 1)

    def testFlags(self):
        self.assertEqual((HELP.nargs, USE_FACTORY_DEFAULTS.nargs), (0, 0))
        self.assertTrue(lookup("--window-bounds").merge)

    def testUnknown(self):
        self.assertIsNone(lookup("--nope"))
        self.assertIsNone(lookup("color"))

    def testUnrecognizedWithoutSuggestion(self):
        fault = unrecognized("--zzzzzzzzzzzz", index=2)
        self.assertEqual(fault.options["suggestions"], [])
        self.assertIn("second position", fault.message)

    def testSwitchValidation(self):
        with self.assertRaises(TypeError):
            Switch()
        with self.assertRaises(ValueError):
            Switch("-q")
        with self.assertRaises(ValueError):
            Switch("--q", "--q")
        with self.assertRaises(TypeError):
            Switch("--q", field="title")


class TestDuplicateGuard(TestCase):
    """Behavioral tests for the duplicate guard."""

    def testCanonicalTracking(self):
        guard = DuplicateGuard()
        color = lookup("-c")
        guard.add(color, "-c")
        self.assertIn(color, guard)
        with self.assertRaises(DuplicateSwitchError) as context:
            guard.add(color, "--color", index=3)
        self.assertIn("third position", context.exception.message)

    def testDistinctSwitches(self):
        guard = DuplicateGuard()
        guard.add(lookup("-a"), "-a")
        guard.add(lookup("-f"), "-f")
        self.assertNotIn(lookup("-c"), guard)


if __name__ == "__main__":
    unittest.main()
