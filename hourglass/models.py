"""
Hourglass value types consumed and produced by the argument layer.

Overview
- WindowState: enumerated window states ("normal", "maximized", "minimized").
- Rect: window bounds (x, y, width, height). Non-finite components mean
  "unspecified" and are filled from another rectangle with Rect.merge().
- TimerColor: a named color, either built-in (from a registry) or custom
  (parsed from a hex/CSS-like representation via rich's color parser).
- Sound: a named sound from a registry; "no sound" is modelled as None.
- WindowSize: window geometry (restore bounds, state, restore state, full-screen).
- TimerOptions: the persisted subset of timer options.
- Configuration: one fully-populated set of command-line arguments. Two of these
  (most-recent and factory-default baselines) are built and updated in lockstep
  while parsing, and one is returned.

All records are immutable named tuples; updates go through copy.replace().
"""
import math
import re
from collections import namedtuple
from enum import Enum

from rich.color import Color, ColorParseError

RECT_COMPONENT_RE = re.compile(r"Infinity|[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


class WindowState(Enum):
    NORMAL = "normal"
    MAXIMIZED = "maximized"
    MINIMIZED = "minimized"

    def __repr__(self):
        return "%s.%s" % (type(self).__name__, self.name)


class Rect(namedtuple("Rect", ("x", "y", "width", "height"))):
    """
    Window bounds.

    Components may be math.inf, which marks them as "unspecified". merge() fills
    such components from another rectangle; finite components always win.
    """
    __slots__ = ()

    @classmethod
    def parse(cls, source, /):
        """
        Parse "x,y,width,height" (commas and/or whitespace as separators).

        Each component is a plain decimal number (optionally signed, with an
        exponent) or "Infinity". Width and height must not be
        negative; NaN, "inf", "-Infinity" and digit separators are rejected.

        Raises
        - ValueError: when the text does not hold exactly four valid numbers.
        """
        if not isinstance(source, str):
            raise TypeError("Rect.parse() argument must be a string")

        parts = [part for part in re.split(r"[\s,]+", source.strip()) if part]
        if len(parts) != 4:
            raise ValueError("rectangle must have exactly four components, got %d" % len(parts))

        if not all(map(RECT_COMPONENT_RE.fullmatch, parts)):
            raise ValueError("rectangle components must be numbers or Infinity: %r" % source)

        x, y, width, height = values = tuple(map(float, parts))
        if any(text != "Infinity" and not math.isfinite(value) for text, value in zip(parts, values)):
            raise ValueError("rectangle components are out of range: %r" % source)
        if width < 0 or height < 0:
            raise ValueError("rectangle width and height cannot be negative: %r" % source)

        return cls(x, y, width, height)

    def merge(self, other, /):
        """
        Return a copy of this rectangle overridden by every finite component of `other`.
        """
        return type(self)(*(
            theirs if math.isfinite(theirs) else ours for ours, theirs in zip(self, other)
        ))


class TimerColor(namedtuple("TimerColor", ("name", "hex", "builtin"), defaults=(False,))):
    __slots__ = ()

    @classmethod
    def parse(cls, source, /):
        """
        Build a custom color from a representation rich understands
        ("#ff8800", "rgb(255,136,0)", "color(208)", "bright_red", ...).

        Raises
        - ValueError: when the representation cannot be parsed or names the
          terminal's default color (which has no concrete value).
        """
        try:
            color = Color.parse(source)
        except ColorParseError as error:
            raise ValueError(str(error)) from None
        if color.is_default:
            raise ValueError("color %r has no concrete value" % source)
        return cls(source, color.get_truecolor().hex, False)


Sound = namedtuple("Sound", ("name", "builtin", "path"), defaults=(True, None))

WindowSize = namedtuple("WindowSize", ("restore_bounds", "window_state", "restore_window_state", "full_screen"))

TimerOptions = namedtuple("TimerOptions", (
    "title",
    "always_on_top",
    "loop_timer",
    "pop_up_when_expired",
    "close_when_expired",
    "shut_down_when_expired",
    "color",
    "sound",
    "loop_sound",
    "window_size",
), defaults=(None,))


class Configuration(namedtuple("Configuration", (
    "input",
    "title",
    "always_on_top",
    "full_screen",
    "show_in_notification_area",
    "loop_timer",
    "pop_up_when_expired",
    "close_when_expired",
    "shut_down_when_expired",
    "color",
    "sound",
    "loop_sound",
    "window_state",
    "restore_window_state",
    "window_bounds",
))):
    """
    A fully-populated set of command-line arguments.

    `input` holds the parsed timer input (or None when no positional phrase was
    given) and `title` is None until --title sets it.
    """
    __slots__ = ()

    def to_timer_options(self):
        """
        Project the persisted option subset, including the window size.
        """
        return TimerOptions(
            title=self.title,
            always_on_top=self.always_on_top,
            loop_timer=self.loop_timer,
            pop_up_when_expired=self.pop_up_when_expired,
            close_when_expired=self.close_when_expired,
            shut_down_when_expired=self.shut_down_when_expired,
            color=self.color,
            sound=self.sound,
            loop_sound=self.loop_sound,
            window_size=self.to_window_size(),
        )

    def to_window_size(self):
        return WindowSize(
            restore_bounds=self.window_bounds,
            window_state=self.window_state,
            restore_window_state=self.restore_window_state,
            full_screen=self.full_screen,
        )

    def __rich_repr__(self):
        yield from zip(self._fields, self)


__all__ = (
    "WindowState",
    "Rect",
    "TimerColor",
    "Sound",
    "WindowSize",
    "TimerOptions",
    "Configuration",
)
