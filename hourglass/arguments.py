r"""
Hourglass command-line arguments: tokens in, one fully-populated configuration out.

Overview
- parse(tokens, ...) -> UsageRequested | Parsed | Failed
  • Help detection: "--help", "-h" or "-?" anywhere in the stream wins over
    everything else (even malformed tokens) and yields UsageRequested.
  • Two baselines are built up front (see hourglass.baselines): one from the
    most recent options, one from the factory defaults.
  • The dispatch loop reads switches front-to-back. Each recognized switch is
    checked against the duplicate guard, its value is coerced (the sentinel
    "last" resolving to the most-recent baseline's current value), and the
    result is applied to both baselines with apply_switch().
  • The first token that is not a switch starts the positional phrase: it and
    every remaining token (switch-shaped or not) are joined with single spaces
    and parsed as a timer input. Nothing after it is read as a switch.
  • "--use-factory-defaults"/"-d" anywhere selects the factory baseline;
    otherwise the most-recent baseline is returned.
- apply_switch(configuration, switch, value) -> configuration
  The single reducer used for both baselines.

Failures
- The first fault aborts the parse; it is returned inside Failed (never raised).
  See hourglass.faults for the fault kinds.

Quick example:
    >>> from hourglass import parse, Parsed
    >>> match parse(["--color", "red", "-a", "on", "10min"]):
    ...     case Parsed(arguments):
    ...         print(arguments.color.name, arguments.always_on_top, arguments.input.duration)
    Red True 0:10:00
"""
import copy
import shlex
import sys
from collections import deque
from collections.abc import Iterable

from .baselines import baselines
from .coercers import isswitch
from .faults import *
from .inputs import parse_timer_input
from .registries import ColorRegistry, SoundRegistry, MemoryStore
from .switches import HELP, USE_FACTORY_DEFAULTS, DuplicateGuard, lookup, unrecognized
from .utils import Unset, coalesce, ordinal


class ParseResult:
    """
    Outcome of one parse: exactly one of UsageRequested, Parsed or Failed.
    """
    __slots__ = ()
    __match_args__ = ()

    def __rich_repr__(self):
        for name in self.__match_args__:
            yield name, getattr(self, name)

    def __repr__(self):
        return "%s(%s)" % (type(self).__name__, ", ".join("%s=%r" % pair for pair in self.__rich_repr__()))

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return all(getattr(self, name) == getattr(other, name) for name in self.__match_args__)

    def __hash__(self):
        return hash((type(self), *(getattr(self, name) for name in self.__match_args__)))


class UsageRequested(ParseResult):
    __slots__ = ()


class Parsed(ParseResult):
    __slots__ = ("_arguments",)
    __match_args__ = ("arguments",)

    def __init__(self, arguments, /):
        self._arguments = arguments

    @property
    def arguments(self):
        return self._arguments


class Failed(ParseResult):
    __slots__ = ("_fault",)
    __match_args__ = ("fault",)

    def __init__(self, fault, /):
        if not isinstance(fault, ParseError):
            raise TypeError("Failed() argument must be a parse error")
        self._fault = fault

    @property
    def fault(self):
        return self._fault

    @property
    def message(self):
        return self._fault.message


def contains_help(tokens, /):
    """
    Return True if any token is a help switch; the whole stream is scanned.
    """
    return any(token in HELP.names for token in tokens)


def apply_switch(configuration, switch, value, /):
    """
    Return `configuration` with `value` written to the switch's field.

    Window bounds are merged: only the finite components of `value` replace the
    current bounds, so "auto" components keep what the configuration holds.
    """
    if switch.field is None:
        raise TypeError("apply_switch() switch %r does not carry a value" % switch.canonical)
    if switch.merge:
        value = getattr(configuration, switch.field).merge(value)
    return copy.replace(configuration, **{switch.field: value})


def _collect(token, tokens, timer_input, /, *, index):
    """
    Join `token` and every remaining token into the positional phrase and parse it.
    """
    phrase = " ".join((token, *tokens))
    tokens.clear()
    if (input := timer_input(phrase)) is None:
        raise InvalidTimerInputError(
            "invalid timer input %r from %s position" % (phrase, ordinal(index)),
            title="invalid timer input",
            code=FaultCode.INVALID_TIMER_INPUT,
            value=phrase,
            index=index,
            hint="use a duration such as 10min or 1h 30m, or a time such as 'until 5pm'; put switches before it",
            docs=getdoc(FaultCode.INVALID_TIMER_INPUT),
        )
    return input


def _parseargs(tokens, /, *, store, colors, sounds, timer_input):
    """
    Run the dispatch loop over `tokens` and return the selected configuration.

    states
    - scanning switches (initial): each token must be a known switch; unknown
      switch-shaped tokens are faults.
    - collecting the positional phrase (terminal): entered on the first
      non-switch token, consumes the rest of the stream, then the loop ends.
    """
    mostrecent, factory = baselines(store)
    guard = DuplicateGuard()
    usefactory = False

    tokens = deque(tokens)
    index = 1
    while tokens:
        token = tokens.popleft()

        if (switch := lookup(token)) is None:
            if isswitch(token):
                raise unrecognized(token, index=index)
            input = _collect(token, tokens, timer_input, index=index)
            mostrecent = copy.replace(mostrecent, input=input)
            factory = copy.replace(factory, input=input)
            break

        guard.add(switch, token, index=index)

        if switch.coerce is None:
            usefactory |= switch is USE_FACTORY_DEFAULTS
            index += 1
            continue

        value = switch.coerce(
            token,
            tokens,
            getattr(mostrecent, switch.field),
            index=index,
            colors=colors,
            sounds=sounds,
        )
        mostrecent = apply_switch(mostrecent, switch, value)
        factory = apply_switch(factory, switch, value)
        index += 1 + switch.nargs

    return factory if usefactory else mostrecent


def _tokenize(prompt):
    if prompt is Unset:
        return sys.argv[1:]
    if isinstance(prompt, str):
        try:
            return shlex.split(prompt)
        except ValueError as error:
            raise MalformedPromptError(
                "malformed prompt %r: %s" % (prompt, str(error).lower()),
                title="malformed prompt",
                code=FaultCode.MALFORMED_PROMPT,
                value=prompt,
                hint="close every quotation and do not end the prompt with a lone backslash",
                docs=getdoc(FaultCode.MALFORMED_PROMPT),
            ) from None
    if isinstance(prompt, Iterable):
        tokens = list(prompt)
        if not all(isinstance(token, str) for token in tokens):
            raise TypeError("parse() argument must be a string or an iterable of strings")
        return tokens
    raise TypeError("parse() argument must be a string or an iterable of strings")


def parse(prompt=Unset, /, *, store=Unset, colors=Unset, sounds=Unset, timer_input=Unset):
    """
    Parse command-line tokens into a parse outcome.

    Parameters
    - prompt:
      • Unset: read tokens from sys.argv[1:].
      • str: shell-like string; split via shlex.split (an unbalanced quote
        yields Failed with a MalformedPromptError).
      • Iterable[str]: pre-tokenized sequence, used verbatim.
    - store: options store providing the most recent options and window size
      (defaults to an empty MemoryStore, i.e. factory options).
    - colors / sounds: registries resolving names (default: built-in registries).
    - timer_input: callable parsing the positional phrase, returning None on
      failure (default: hourglass.inputs.parse_timer_input).

    Returns
    - UsageRequested when a help switch appears anywhere.
    - Parsed(arguments) with the selected configuration.
    - Failed(fault) with the first fault met.

    Raises
    - TypeError: only for a prompt that is not a string or an iterable of strings.
    """
    try:
        tokens = _tokenize(prompt)
    except ParseError as fault:
        return Failed(fault)

    if contains_help(tokens):
        return UsageRequested()

    try:
        arguments = _parseargs(
            tokens,
            store=coalesce(store, MemoryStore()),
            colors=coalesce(colors, ColorRegistry()),
            sounds=coalesce(sounds, SoundRegistry()),
            timer_input=coalesce(timer_input, parse_timer_input),
        )
    except ParseError as fault:
        return Failed(fault)

    return Parsed(arguments)


__all__ = (
    "ParseResult",
    "UsageRequested",
    "Parsed",
    "Failed",
    "contains_help",
    "apply_switch",
    "parse",
)
