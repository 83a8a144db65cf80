"""
Value coercers: turn the value token of a switch into a typed value.

Contract
- Every coercer is called as coercer(input, tokens, last, /, **context):
  • input: the switch as typed (e.g. "-c"), used in messages.
  • tokens: deque of the remaining tokens; the coercer pops its value from it.
  • last: the current value of the field in the most-recent baseline; returned
    as-is when the value token is the sentinel "last".
  • context: index (1-based position of the switch), colors and sounds
    registries.
- Values are fetched with getrequired(): a missing value, or a next token that
  looks like a switch, raises MissingValueError.
- A value starting with an apostrophe has that apostrophe stripped; this is
  the only escape, and lets values begin with "-".
- Values that cannot be coerced raise InvalidValueError.
"""
import re

from .faults import *
from .models import *
from .utils import ordinal, rename

LAST = "last"

SWITCH_PREFIX = "-"
ESCAPE = "'"


def isswitch(token, /):
    return token.startswith(SWITCH_PREFIX)


def unescape(value, /):
    return value[1:] if value.startswith(ESCAPE) else value


def getvalue(tokens, /):
    """
    Pop and unescape the next token, or return None when there is no value
    to take (queue exhausted or the next token is a switch).
    """
    if tokens and not isswitch(tokens[0]):
        return unescape(tokens.popleft())
    return None


def getrequired(input, tokens, /, *, index=1, **context):
    if (value := getvalue(tokens)) is None:
        raise MissingValueError(
            "missing value for switch %r at %s position" % (input, ordinal(index)),
            title="missing value",
            code=FaultCode.MISSING_VALUE,
            input=input,
            index=index,
            hint="add a value after %s; start it with an apostrophe if it begins with '-' (for example: %s \"'-value\")" % (input, input),
            docs=getdoc(FaultCode.MISSING_VALUE),
        )
    return value


def invalid(input, value, accepts, /, *, index=1, **context):
    """
    Build the InvalidValueError for `value` given to `input`.
    """
    return InvalidValueError(
        "invalid value %r for switch %r at %s position" % (value, input, ordinal(index)),
        title="invalid value",
        code=FaultCode.INVALID_VALUE,
        input=input,
        value=value,
        index=index,
        hint="%s accepts %s" % (input, accepts),
        docs=getdoc(FaultCode.INVALID_VALUE),
    )


@rename("title")
def gettitle(input, tokens, last, /, **context):
    # Titles are free text: "last" is a title like any other.
    return getrequired(input, tokens, **context)


@rename("boolean")
def getbool(input, tokens, last, /, **context):
    match value := getrequired(input, tokens, **context):
        case "on":
            return True
        case "off":
            return False
        case "last":
            return last
        case _:
            raise invalid(input, value, "on, off or last", **context)


@rename("window-state")
def getwindowstate(input, tokens, last, /, **context):
    value = getrequired(input, tokens, **context)
    if value == LAST:
        return last
    try:
        return WindowState(value)
    except ValueError:
        raise invalid(input, value, "normal, maximized, minimized or last", **context) from None


@rename("color")
def getcolor(input, tokens, last, /, *, colors, **context):
    value = getrequired(input, tokens, **context)
    if value == LAST:
        return last
    if (color := colors.byname(value)) is not None:
        return color
    try:
        return TimerColor.parse(value)
    except ValueError:
        raise invalid(input, value, "a color name, a color such as '#ff8800' or last", **context) from None


@rename("sound")
def getsound(input, tokens, last, /, *, sounds, **context):
    match value := getrequired(input, tokens, **context):
        case "none":
            return None
        case "last":
            return last
        case _:
            if (sound := sounds.byname(value)) is None:
                raise invalid(input, value, "a sound name, none or last", **context)
            return sound


@rename("rectangle")
def getrect(input, tokens, last, /, **context):
    """
    Parse "x,y,width,height" where any component may be "auto".

    The result keeps math.inf for every "auto" component; callers merge it
    onto the current bounds, so only the given components change.
    """
    value = getrequired(input, tokens, **context)
    if value == LAST:
        return last
    try:
        return Rect.parse(re.sub(r"\bauto\b", "Infinity", value))
    except ValueError:
        raise invalid(input, value, "x,y,width,height (each number or auto) or last", **context) from None


__all__ = (
    "LAST",
    "isswitch",
    "unescape",
    "getvalue",
    "getrequired",
    "gettitle",
    "getbool",
    "getwindowstate",
    "getcolor",
    "getsound",
    "getrect",
)
