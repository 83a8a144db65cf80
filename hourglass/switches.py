"""
Switch registry and duplicate guard.

Overview
- Switch: one recognized command-line switch.
  • names: canonical long name first (e.g. "--color"), then its aliases ("-c").
  • field: the Configuration field the switch writes, or None for flags.
  • coerce: the value coercer (see hourglass.coercers), or None for flags (arity 0).
  • merge: when True the coerced value is merged onto the current field value
    (window bounds) instead of replacing it.
  • metavar/descr: value grammar and short help used by the usage renderer.
- SWITCHES: every switch in usage order.
- lookup(token): resolve a canonical name or alias to its Switch (None if unknown).
- DuplicateGuard: remembers the canonical switches consumed in one parse and
  raises DuplicateSwitchError on a repeat, whatever alias was typed.
"""
import difflib
from types import MappingProxyType

from .coercers import *
from .faults import *
from .utils import ordinal


class Switch:
    __slots__ = ("_names", "_field", "_coerce", "_merge", "_metavar", "_descr")

    def __init__(self, *names, field=None, coerce=None, merge=False, metavar=None, descr=None):
        if not names:
            raise TypeError("switch must specify at least one name")
        if not names[0].startswith("--"):
            raise ValueError("switch canonical name must be a long name (--name)")
        if len(set(names)) != len(names):
            raise ValueError("switch names cannot contain duplicates")
        if (field is None) != (coerce is None):
            raise TypeError("switch 'field' and 'coerce' must be given together")
        self._names = names
        self._field = field
        self._coerce = coerce
        self._merge = merge
        self._metavar = metavar
        self._descr = descr

    names = property(lambda self: self._names)
    field = property(lambda self: self._field)
    coerce = property(lambda self: self._coerce)
    merge = property(lambda self: self._merge)
    metavar = property(lambda self: self._metavar)
    descr = property(lambda self: self._descr)

    @property
    def canonical(self):
        return self._names[0]

    @property
    def aliases(self):
        return self._names[1:]

    @property
    def nargs(self):
        return 0 if self._coerce is None else 1

    def __rich_repr__(self):
        yield "names", self._names
        yield "field", self._field
        yield "coerce", getattr(self._coerce, "__name__", None)

    def __repr__(self):
        return "switch(%s)" % ", ".join("%s=%r" % pair for pair in self.__rich_repr__())


HELP = Switch(
    "--help", "-h", "-?",
    descr="show this usage and exit",
)
USE_FACTORY_DEFAULTS = Switch(
    "--use-factory-defaults", "-d",
    descr="start from the factory defaults instead of the most recent options",
)

SWITCHES = (
    Switch("--title", "-t", field="title", coerce=gettitle, metavar="<title>",
           descr="title of the timer"),
    Switch("--always-on-top", "-a", field="always_on_top", coerce=getbool, metavar="on|off|last",
           descr="keep the timer window above other windows"),
    Switch("--full-screen", "-f", field="full_screen", coerce=getbool, metavar="on|off|last",
           descr="show the timer window full screen"),
    Switch("--show-in-notification-area", "-n", field="show_in_notification_area", coerce=getbool,
           metavar="on|off|last", descr="show an icon in the notification area"),
    Switch("--loop-timer", "-l", field="loop_timer", coerce=getbool, metavar="on|off|last",
           descr="restart the timer when it expires"),
    Switch("--pop-up-when-expired", "-p", field="pop_up_when_expired", coerce=getbool, metavar="on|off|last",
           descr="bring the timer window to the front when it expires"),
    Switch("--close-when-expired", "-e", field="close_when_expired", coerce=getbool, metavar="on|off|last",
           descr="close the timer window when it expires"),
    Switch("--color", "-c", field="color", coerce=getcolor, metavar="<color>|last",
           descr="color of the progress bar (a name or a value such as #ff8800)"),
    Switch("--sound", "-s", field="sound", coerce=getsound, metavar="<sound>|none|last",
           descr="sound to play when the timer expires"),
    Switch("--loop-sound", "-r", field="loop_sound", coerce=getbool, metavar="on|off|last",
           descr="repeat the sound until the timer window is closed"),
    Switch("--window-bounds", "-b", field="window_bounds", coerce=getrect, merge=True,
           metavar="x,y,width,height|last", descr="window position and size; any component may be auto"),
    Switch("--window-state", "-w", field="window_state", coerce=getwindowstate,
           metavar="normal|maximized|minimized|last", descr="state of the timer window"),
    USE_FACTORY_DEFAULTS,
    HELP,
)

_registry = MappingProxyType({name: switch for switch in SWITCHES for name in switch.names})


def lookup(token, /):
    """
    Return the switch registered under `token` (canonical name or alias), or None.
    """
    return _registry.get(token)


def unrecognized(token, /, *, index=1):
    """
    Build the UnrecognizedSwitchError for `token`, suggesting near matches.
    """
    suggestions = difflib.get_close_matches(token, _registry.keys(), 5)
    try:
        hint = "did you mean %r? you can also run with --help to see all switches" % suggestions[0]
    except IndexError:
        hint = "run with --help to see all switches; start a value with an apostrophe if it begins with '-'"
    return UnrecognizedSwitchError(
        "unrecognized switch %r at %s position" % (token, ordinal(index)),
        title="unrecognized switch",
        code=FaultCode.UNRECOGNIZED_SWITCH,
        input=token,
        index=index,
        suggestions=suggestions,
        hint=hint,
        docs=getdoc(FaultCode.UNRECOGNIZED_SWITCH),
    )


class DuplicateGuard:
    """
    Tracks the canonical switches consumed during one parse.
    """

    def __init__(self):
        self._seen = set()

    def __contains__(self, switch):
        return switch.canonical in self._seen

    def add(self, switch, input, /, *, index=1):
        """
        Record `switch` (typed as `input`); raise DuplicateSwitchError if it was seen before.
        """
        if switch.canonical in self._seen:
            raise DuplicateSwitchError(
                "switch %r at %s position was already provided" % (input, ordinal(index)),
                title="duplicate switch",
                code=FaultCode.DUPLICATE_SWITCH,
                input=input,
                canonical=switch.canonical,
                index=index,
                hint="keep a single %s; each switch can be specified only once" % switch.canonical,
                docs=getdoc(FaultCode.DUPLICATE_SWITCH),
            )
        self._seen.add(switch.canonical)


__all__ = (
    "Switch",
    "HELP",
    "USE_FACTORY_DEFAULTS",
    "SWITCHES",
    "lookup",
    "unrecognized",
    "DuplicateGuard",
)
