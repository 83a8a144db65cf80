"""
Tests for the internal utilities (Unset sentinel, coalesce, rename, ordinal).

Conventions
- Test method names follow CamelCase per project convention.
"""
import copy
import unittest
from unittest import TestCase

from hourglass.utils import Unset, UnsetType, coalesce, ordinal, rename


class UnsetTest(TestCase):
    """Semantic guarantees of the Unset sentinel."""

    def testSingleton(self):
        self.assertIs(UnsetType(), Unset)
        self.assertIs(copy.deepcopy(Unset), Unset)

    def testFalsyAndRepr(self):
        self.assertFalse(Unset)
        self.assertEqual(repr(Unset), "Unset")

    def testUnionInIsinstance(self):
        self.assertTrue(isinstance(Unset, str | Unset))
        self.assertTrue(isinstance("x", str | Unset))
        self.assertFalse(isinstance(1, str | Unset))

    def testFinal(self):
        with self.assertRaises(TypeError):
            type("Sub", (UnsetType,), {})

    def testCoalesce(self):
        self.assertEqual(coalesce(Unset, "fallback"), "fallback")
        self.assertIsNone(coalesce(None, "fallback"))
        self.assertEqual(coalesce(0, 1), 0)


class HelpersTest(TestCase):
    """Behavioral tests for rename() and ordinal()."""

    def testRenameForms(self):
        @rename("renamed")
        def original():
            pass

        self.assertEqual((original.__name__, original.__qualname__), ("renamed", "renamed"))
        with self.assertRaises(TypeError):
            rename()

    def testOrdinal(self):
        for number, label in ((1, "first"), (10, "tenth"), (11, "11th"), (12, "12th"), (21, "21st"),
                              (22, "22nd"), (23, "23rd"), (111, "111th"), (102, "102nd")):
            with self.subTest(number=number):
                self.assertEqual(ordinal(number), label)


if __name__ == "__main__":
    unittest.main()
