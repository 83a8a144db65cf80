"""
Timer input phrases.

The positional phrase of the command line ("10min", "1h 30m", "until 5pm", ...)
is handed whole to a timer-input parser. The argument layer only relies on the
contract `parser(text) -> TimerInput | None`; this module provides the default
parser used when the host application does not inject its own.

Accepted forms (case-insensitive)
- minutes only: "90"
- clock-style durations: "1:30" (minutes:seconds), "1:02:03" (hours:minutes:seconds)
- unit durations: "10min", "1h 30m", "2 hours and 5 minutes", "1.5h", "45 s"
- times of day: "until 17:30", "at 9", "5pm", "till 6:15 am"
"""
import datetime as dt
import re
from collections import namedtuple

_UNITS = {
    "d": 86400, "day": 86400, "days": 86400,
    "h": 3600, "hr": 3600, "hrs": 3600, "hour": 3600, "hours": 3600,
    "m": 60, "min": 60, "mins": 60, "minute": 60, "minutes": 60,
    "s": 1, "sec": 1, "secs": 1, "second": 1, "seconds": 1,
}

MINUTES_ONLY_RE = re.compile(r"\d{1,13}")
CLOCK_DURATION_RE = re.compile(r"(?:(\d{1,3}):)?(\d{1,3}):(\d{1,2})")
UNIT_RE = re.compile(r"(\d+(?:\.\d+)?)\s*(%s)\b" % "|".join(sorted(_UNITS, key=len, reverse=True)))
SEPARATOR_RE = re.compile(r"(?:\s|,|\band\b)*")
TIME_OF_DAY_RE = re.compile(
    r"(?:(?P<prefix>until|till|at)\s+)?(?P<hour>\d{1,2})(?::(?P<minute>\d{2}))?\s*(?P<meridiem>am|pm)?"
)


def _timedelta(**parts):
    # datetime.timedelta caps at 999999999 days
    try:
        return dt.timedelta(**parts)
    except OverflowError:
        return None


class TimerInput(namedtuple("TimerInput", ("text", "duration", "time"), defaults=(None, None))):
    """
    A parsed timer input: either a `duration` (datetime.timedelta) or a time of
    day (`time`, datetime.time). `text` keeps the phrase as typed.
    """
    __slots__ = ()

    @classmethod
    def from_string(cls, text, /):
        """
        Parse a phrase into a TimerInput, or return None when it is not a timer input.
        """
        if not isinstance(text, str):
            raise TypeError("TimerInput.from_string() argument must be a string")

        phrase = " ".join(text.lower().split())
        if not phrase:
            return None

        for parser in (_minutes_only, _clock_duration, _unit_duration, _time_of_day):
            if (result := parser(phrase)) is not None:
                return cls(text, *result)
        return None


def _minutes_only(phrase):
    if not MINUTES_ONLY_RE.fullmatch(phrase) or (minutes := int(phrase)) <= 0:
        return None
    if (duration := _timedelta(minutes=minutes)) is None:
        return None
    return duration, None


def _clock_duration(phrase):
    if not (match := CLOCK_DURATION_RE.fullmatch(phrase)):
        return None
    hours, minutes, seconds = (int(group or 0) for group in match.groups())
    # with hours present, minutes are a clock field too
    if seconds > 59 or (match[1] is not None and minutes > 59):
        return None
    if not (duration := dt.timedelta(hours=hours, minutes=minutes, seconds=seconds)):
        return None
    return duration, None


def _unit_duration(phrase):
    position = 0
    total = 0.0
    matched = False
    while position < len(phrase):
        position = SEPARATOR_RE.match(phrase, position).end()
        if position >= len(phrase):
            break
        if not (match := UNIT_RE.match(phrase, position)):
            return None
        total += float(match[1]) * _UNITS[match[2]]
        position = match.end()
        matched = True
    if not matched or total <= 0:
        return None
    if (duration := _timedelta(seconds=total)) is None:
        return None
    return duration, None


def _time_of_day(phrase):
    if not (match := TIME_OF_DAY_RE.fullmatch(phrase)):
        return None
    # a bare number is a duration in minutes, not a time of day
    if not match["prefix"] and not match["meridiem"]:
        return None

    hour = int(match["hour"])
    minute = int(match["minute"] or 0)

    if match["meridiem"]:
        if not 1 <= hour <= 12:
            return None
        hour = hour % 12 + (12 if match["meridiem"] == "pm" else 0)

    if hour > 23 or minute > 59:
        return None
    return None, dt.time(hour, minute)


def parse_timer_input(text, /):
    """
    Default timer-input parser: `TimerInput.from_string` as a plain function.
    """
    return TimerInput.from_string(text)


__all__ = (
    "TimerInput",
    "parse_timer_input",
)
