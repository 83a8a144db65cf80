"""
Default collaborators for the argument layer.

The parser never reaches for process-wide singletons. Instead it receives:
- a color registry:  colors.byname(name) -> TimerColor | None
- a sound registry:  sounds.byname(name) -> Sound | None
- an options store:  store.most_recent_options() -> TimerOptions
                     store.most_recent_window_size() -> WindowSize | None
                     store.show_in_notification_area() -> bool

This module ships in-memory implementations of those interfaces with the
built-in colors and sounds. Hosts with persisted settings inject their own.
"""
from types import MappingProxyType

from .models import *

BUILTIN_COLORS = (
    TimerColor("Black", "#000000", True),
    TimerColor("Red", "#c75050", True),
    TimerColor("Orange", "#ff7f50", True),
    TimerColor("Yellow", "#ffff00", True),
    TimerColor("Green", "#30d730", True),
    TimerColor("Blue", "#3080f0", True),
    TimerColor("Purple", "#9370db", True),
    TimerColor("Gray", "#999999", True),
)

BUILTIN_SOUNDS = (
    Sound("Normal beep"),
    Sound("Loud beep"),
    Sound("Quiet beep"),
)

DEFAULT_COLOR = BUILTIN_COLORS[4]
DEFAULT_SOUND = BUILTIN_SOUNDS[0]


class ColorRegistry:
    """
    Case-insensitive color lookup by name.
    """

    def __init__(self, colors=BUILTIN_COLORS, /):
        self._colors = MappingProxyType({color.name.casefold(): color for color in colors})

    @property
    def colors(self):
        return tuple(self._colors.values())

    def byname(self, name, /):
        return self._colors.get(name.casefold())


class SoundRegistry:
    """
    Case-insensitive sound lookup by name.
    """

    def __init__(self, sounds=BUILTIN_SOUNDS, /):
        self._sounds = MappingProxyType({sound.name.casefold(): sound for sound in sounds})

    @property
    def sounds(self):
        return tuple(self._sounds.values())

    def byname(self, name, /):
        return self._sounds.get(name.casefold())


class MemoryStore:
    """
    In-memory options store.

    Parameters
    - options: TimerOptions | None
      The most recently used options; None means "never used", in which case the
      factory options are reported.
    - window_size: WindowSize | None
      The most recent window geometry, if any window was ever shown.
    - notification_area: bool
      Whether the application shows itself in the notification area.
    """

    def __init__(self, options=None, window_size=None, *, notification_area=False):
        self._options = options
        self._window_size = window_size
        self._notification_area = notification_area

    def most_recent_options(self):
        if self._options is None:
            return factory_options()
        return self._options

    def most_recent_window_size(self):
        return self._window_size

    def show_in_notification_area(self):
        return self._notification_area

    def remember(self, options, /):
        """
        Record the options (and their window size, when present) of the latest timer.
        """
        self._options = options
        if options.window_size is not None:
            self._window_size = options.window_size


def factory_options():
    """
    Hard-coded factory options (no window size attached).
    """
    return TimerOptions(
        title=None,
        always_on_top=False,
        loop_timer=False,
        pop_up_when_expired=True,
        close_when_expired=False,
        shut_down_when_expired=False,
        color=DEFAULT_COLOR,
        sound=DEFAULT_SOUND,
        loop_sound=False,
    )


__all__ = (
    "BUILTIN_COLORS",
    "BUILTIN_SOUNDS",
    "DEFAULT_COLOR",
    "DEFAULT_SOUND",
    "ColorRegistry",
    "SoundRegistry",
    "MemoryStore",
    "factory_options",
)
