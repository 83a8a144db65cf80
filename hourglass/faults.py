"""
Hourglass argument faults and rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for every command-line
  parse failure. Codes are grouped by domain to keep copy consistent and make
  logs/searches predictable.
- ParseError: base type that carries message + options and knows how to render
  itself in a friendly, lowercased, and actionable way.
- One subclass per failure kind (malformed prompt, unrecognized switch, missing
  value, duplicate switch, invalid value, invalid timer input).
- report(): print a fault to stderr with rich (respecting fancy/colorful).
- getdoc(): optional description lookup for a code from the host application.

Integration
- The dispatch loop raises these faults; parse() catches ParseError and hands
  the fault back inside a Failed outcome. They never cross the parse() boundary
  as exceptions.
- Callers decide how to surface a fault: report() it, show usage, or both.
"""
import copy
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from .utils import Unset

console = Console(stderr=True)


class FaultCode(IntEnum):
    """
    canonical fault codes used by the argument parser (stable identifiers).

    grouping (by high-level domain)
    - prompt (2110x)
      • MALFORMED_PROMPT
    - switches (2111x)
      • UNRECOGNIZED_SWITCH, DUPLICATE_SWITCH
    - values (2112x)
      • MISSING_VALUE, INVALID_VALUE
    - positionals (2113x)
      • INVALID_TIMER_INPUT

    normalize() allows host remapping to custom labels while keeping code-stability.
    """
    # --- prompt errors ---
    MALFORMED_PROMPT            = 21101

    # --- switch errors ---
    UNRECOGNIZED_SWITCH         = 21111
    DUPLICATE_SWITCH            = 21112

    # --- value errors ---
    MISSING_VALUE               = 21121
    INVALID_VALUE               = 21122

    # --- positional errors ---
    INVALID_TIMER_INPUT         = 21131

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels. when no mapping
        is present, the numeric value is returned as a string.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


class ParseError(Exception):
    """
    base class of every command-line parse failure.

    options
    - title, code, hint, docs: copy used by the renderer.
    - input, value, index: the offending switch, its value and its 1-based position.
    - prog, fancy, colorful: rendering options (usually merged in by report()).
    """

    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        super().__init__(message)
        self.message = message
        self.options = MappingProxyType(options)

    @property
    def code(self):
        return self.options.get("code")

    def __str__(self):
        return str(self.message)

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self.message == other.message and self.code == other.code

    def __hash__(self):
        return hash((type(self), self.message, self.code))

    def __rich__(self):
        main = __import__("__main__")

        styles = defaultdict(str, {
            # header parts
            "prog-name": "bold #E6E6F0",  # near-white program name
            "code": "bold #00E5FF",  # neon cyan fault code
            "error-title": "bold #FF4DA6",  # friendly pinky title

            # body
            "error-message": "#C8C8D0",  # soft light gray message
            "hint-arrow": "#9CE19C dim",  # gentle green arrow
            "hint": "italic #9CE19C",  # gentle green hint text
        } | getattr(main, "__styles__", {}))

        colorful = self.options.get("colorful", True)
        fancy = self.options.get("fancy", False)

        def styler(style):
            return styles[style] if colorful else ""

        def text(fragment, style=""):
            if not fragment:
                return Text("")
            if not colorful:
                return Text(str(fragment))
            if isinstance(fragment, Text):
                return fragment
            return Text(str(fragment), style)

        prog = text(getattr(main, "__prog__", self.options.get("prog", "hourglass")), styler("prog-name"))

        header = Text.assemble(
            "[ ",
            prog,
            " — ",
            text(self.code.normalize() if self.code else "", styler("code")),
            " | ",
            text(self.options.get("title", "").title(), styler("error-title")),
            " ]"
        )
        message = text(self.message, styler("error-message"))

        if not self.options.get("hint"):
            body = Group(message)
        else:
            hint = Text.assemble(text(" → ", styler("hint-arrow")), text(self.options["hint"], styler("hint")))
            body = Group(message, hint)

        if fancy:
            return Panel(body, title=header, title_align="left")

        return Group(header, body)

    def __replace__(self, *unused, **overrides):
        assert not unused, "unused arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class UnrecognizedSwitchError(ParseError): ...
class MissingValueError(ParseError): ...
class DuplicateSwitchError(ParseError): ...
class InvalidValueError(ParseError): ...
class InvalidTimerInputError(ParseError): ...
class MalformedPromptError(ParseError): ...


def report(fault, /, **options):
    """
    print a fault to stderr with the given rendering options merged in.

    typical options
    - prog, fancy, colorful.
    """
    if not isinstance(fault, ParseError):
        raise TypeError("report() argument must be a parse error")
    console.print(copy.replace(fault, **options))


def getdoc(code, /):
    """
    optional documentation fetch for a fault code.

    the host application may expose a __docs__ mapping in __main__ where keys
    are FaultCode instances and values are short documentation strings.
    when not found, returns None (renderers treat docs as optional).
    """
    if not isinstance(code, FaultCode):
        raise TypeError("getdoc() argument must be a fault-code")
    try:
        return getattr(__import__("__main__"), "__docs__", {})[code]
    except KeyError:
        return None


__all__ = (
    "FaultCode",
    "ParseError",
    "UnrecognizedSwitchError",
    "MissingValueError",
    "DuplicateSwitchError",
    "InvalidValueError",
    "InvalidTimerInputError",
    "MalformedPromptError",
    "report",
    "getdoc",
)
