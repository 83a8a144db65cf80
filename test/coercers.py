"""
Coercers module behavioral tests (value fetching, escaping, typed coercion).

Conventions
- Test method names follow CamelCase per project convention.
- Coercers are called directly with a deque of remaining tokens.
"""
import math
import unittest
from collections import deque
from unittest import TestCase

from hourglass import ColorRegistry, SoundRegistry, Rect, WindowState, InvalidValueError, MissingValueError
from hourglass.coercers import (
    getbool,
    getcolor,
    getrect,
    getrequired,
    getsound,
    gettitle,
    getvalue,
    getwindowstate,
    isswitch,
    unescape,
)

CONTEXT = {"index": 1, "colors": ColorRegistry(), "sounds": SoundRegistry()}


class TestFetching(TestCase):
    """Behavioral tests for value fetching and unescaping."""

    def testIsSwitch(self):
        self.assertTrue(isswitch("-a"))
        self.assertTrue(isswitch("--anything"))
        self.assertTrue(isswitch("-"))
        self.assertFalse(isswitch("'-a"))
        self.assertFalse(isswitch("10"))

    def testUnescapeStripsOneApostrophe(self):
        self.assertEqual(unescape("'-5"), "-5")
        self.assertEqual(unescape("''x"), "'x")
        self.assertEqual(unescape("x'"), "x'")

    def testGetValuePopsOnlyNonSwitches(self):
        tokens = deque(["value", "--next"])
        self.assertEqual(getvalue(tokens), "value")
        self.assertIsNone(getvalue(tokens))
        self.assertEqual(list(tokens), ["--next"])

    def testGetValueOnEmptyQueue(self):
        self.assertIsNone(getvalue(deque()))

    def testGetRequiredRaisesMissingValue(self):
        for tokens in (deque(), deque(["-x"])):
            with self.subTest(tokens=tokens):
                with self.assertRaises(MissingValueError) as context:
                    getrequired("--title", tokens, index=4)
                self.assertIn("fourth position", context.exception.message)

    def testCoercerConsumesExactlyOneToken(self):
        tokens = deque(["on", "rest"])
        getbool("-a", tokens, False, **CONTEXT)
        self.assertEqual(list(tokens), ["rest"])


class TestTyped(TestCase):
    """Behavioral tests for each typed coercer."""

    def testTitleIsVerbatim(self):
        self.assertEqual(gettitle("-t", deque(["last"]), None, **CONTEXT), "last")
        self.assertEqual(gettitle("-t", deque(["'-5 minutes"]), None, **CONTEXT), "-5 minutes")

    def testBooleans(self):
        self.assertIs(getbool("-a", deque(["on"]), False, **CONTEXT), True)
        self.assertIs(getbool("-a", deque(["off"]), True, **CONTEXT), False)
        self.assertIs(getbool("-a", deque(["last"]), True, **CONTEXT), True)
        self.assertIs(getbool("-a", deque(["'last"]), False, **CONTEXT), False)
        with self.assertRaises(InvalidValueError):
            getbool("-a", deque(["On"]), False, **CONTEXT)

    def testWindowState(self):
        self.assertIs(getwindowstate("-w", deque(["maximized"]), None, **CONTEXT), WindowState.MAXIMIZED)
        self.assertIs(getwindowstate("-w", deque(["last"]), WindowState.MINIMIZED, **CONTEXT), WindowState.MINIMIZED)
        with self.assertRaises(InvalidValueError):
            getwindowstate("-w", deque(["Normal"]), None, **CONTEXT)

    def testColor(self):
        self.assertEqual(getcolor("-c", deque(["purple"]), None, **CONTEXT).name, "Purple")
        self.assertEqual(getcolor("-c", deque(["rgb(255,0,0)"]), None, **CONTEXT).hex, "#ff0000")
        self.assertEqual(getcolor("-c", deque(["last"]), "previous", **CONTEXT), "previous")
        with self.assertRaises(InvalidValueError):
            getcolor("-c", deque(["default"]), None, **CONTEXT)

    def testColorRegistryTakesPrecedence(self):
        # rich would read "red" as the ANSI color; the registry's Red wins.
        self.assertTrue(getcolor("-c", deque(["red"]), None, **CONTEXT).builtin)

    def testSound(self):
        self.assertEqual(getsound("-s", deque(["Quiet Beep"]), None, **CONTEXT).name, "Quiet beep")
        self.assertIsNone(getsound("-s", deque(["none"]), "previous", **CONTEXT))
        self.assertEqual(getsound("-s", deque(["last"]), "previous", **CONTEXT), "previous")
        with self.assertRaises(InvalidValueError):
            getsound("-s", deque(["gong"]), None, **CONTEXT)

    def testRectAutoBecomesInfinite(self):
        rect = getrect("-b", deque(["10,auto,auto,20"]), None, **CONTEXT)
        self.assertEqual((rect.x, rect.height), (10, 20))
        self.assertTrue(math.isinf(rect.y) and math.isinf(rect.width))

    def testRectLast(self):
        last = Rect(1, 2, 3, 4)
        self.assertIs(getrect("-b", deque(["last"]), last, **CONTEXT), last)

    def testRectInvalid(self):
        with self.assertRaises(InvalidValueError) as context:
            getrect("-b", deque(["1,2"]), None, **CONTEXT)
        self.assertEqual(context.exception.options["value"], "1,2")


if __name__ == "__main__":
    unittest.main()
