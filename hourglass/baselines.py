"""
Dual baseline builder.

Two complete configurations are built before any switch is read:
- most-recent: the most recently used options and window geometry;
- factory: hard-coded defaults, except that the window position is inherited
  from the most recent geometry so a reset window still appears near the last one.

Both share one shape and differ only in their values; the dispatch loop then
applies every switch to both, and one of them is returned.
"""
import math

from .models import *
from .registries import factory_options

DEFAULT_WINDOW_WIDTH = 350
DEFAULT_WINDOW_HEIGHT = 150

DEFAULT_WINDOW_BOUNDS = Rect(math.inf, math.inf, DEFAULT_WINDOW_WIDTH, DEFAULT_WINDOW_HEIGHT)


def default_window_size():
    """
    Geometry used when no window was ever shown: unplaced, default size, normal state.
    """
    return WindowSize(
        restore_bounds=DEFAULT_WINDOW_BOUNDS,
        window_state=WindowState.NORMAL,
        restore_window_state=WindowState.NORMAL,
        full_screen=False,
    )


def most_recent_window_size(store, /):
    return store.most_recent_window_size() or default_window_size()


def factory_window_size(position_from, /):
    """
    Factory geometry: default size and state, position taken from `position_from`.
    """
    return WindowSize(
        restore_bounds=position_from.restore_bounds.merge(DEFAULT_WINDOW_BOUNDS),
        window_state=WindowState.NORMAL,
        restore_window_state=WindowState.NORMAL,
        full_screen=False,
    )


def _configuration(options, window_size, notification_area):
    return Configuration(
        input=None,
        title=None,
        always_on_top=options.always_on_top,
        full_screen=window_size.full_screen,
        show_in_notification_area=notification_area,
        loop_timer=options.loop_timer,
        pop_up_when_expired=options.pop_up_when_expired,
        close_when_expired=options.close_when_expired,
        shut_down_when_expired=options.shut_down_when_expired,
        color=options.color,
        sound=options.sound,
        loop_sound=options.loop_sound,
        window_state=window_size.window_state,
        restore_window_state=window_size.restore_window_state,
        window_bounds=window_size.restore_bounds,
    )


def most_recent_baseline(store, /):
    return _configuration(
        store.most_recent_options(),
        most_recent_window_size(store),
        store.show_in_notification_area(),
    )


def factory_baseline(store, /):
    return _configuration(
        factory_options(),
        factory_window_size(most_recent_window_size(store)),
        False,
    )


def baselines(store, /):
    """
    Return the (most-recent, factory) baseline pair.
    """
    return most_recent_baseline(store), factory_baseline(store)


__all__ = (
    "DEFAULT_WINDOW_BOUNDS",
    "default_window_size",
    "most_recent_window_size",
    "factory_window_size",
    "most_recent_baseline",
    "factory_baseline",
    "baselines",
)
