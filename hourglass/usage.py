"""
Command-line usage rendering.

render_usage(prog, ...) builds a rich renderable listing every switch (long name,
aliases, value grammar, description) followed by the positional timer input.
show_usage(fault=None, ...) prints it, preceded by the fault when one is given,
to stderr for faults and to stdout otherwise.

Palette keys
- usage-label, program-name, usage-section, group-label, argument-description
- option-name, flag-name, metavar, note
Define a mapping named __styles__ in __main__ to override any palette entry.
"""
from collections import defaultdict

from rich.box import ROUNDED
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .faults import ParseError, report
from .switches import SWITCHES

NOTES = (
    "values that start with '-' must be escaped with a leading apostrophe (for example: --title \"'-5 minutes\")",
    "'last' keeps the value from the most recent timer",
    "switches after the timer input are read as part of the timer input",
)


def render_usage(prog="hourglass", /, *, colorful=True, fancy=False):
    main = __import__("__main__")

    styles = defaultdict(str, {
        "usage-label": "bold #00E6FF",  # CYAN → signature info color
        "program-name": "bold #FF4D94",  # MAGENTA-PINK → brand pop
        "usage-section": "bold #36C5F0",  # SKY-BLUE
        "group-label": "bold #FFFFFF",
        "argument-description": "#9CA3AF",
        "option-name": "bold #00E6FF",
        "flag-name": "bold #22C55E",
        "metavar": "bold #FFD600",
        "note": "#D1D5DB",
    } | getattr(main, "__styles__", {}))

    def styler(style):
        return styles[style] if colorful else ""

    prog = getattr(main, "__prog__", prog)

    head = Text()
    head.append("usage", styler("usage-label")).append(": ")
    head.append(prog, styler("program-name"))
    head.append(" [switches] [timer input]", styler("usage-section"))

    table = Table(box=None, show_header=False, padding=(0, 2, 0, 0))
    table.add_column("names", no_wrap=True)
    table.add_column("value", no_wrap=True)
    table.add_column("description")

    for switch in SWITCHES:
        style = styler("option-name" if switch.nargs else "flag-name")
        names = Text(", ").join(Text(name, style) for name in (*switch.aliases, switch.canonical))
        table.add_row(
            names,
            Text(switch.metavar or "", styler("metavar")),
            Text(switch.descr or "", styler("argument-description")),
        )
    table.add_row(
        Text("<timer input>", styler("metavar")),
        Text(""),
        Text("for example 10min, 1h 30m, 1:30 or until 5pm", styler("argument-description")),
    )

    notes = Group(*(Text.assemble(" • ", (note, styler("note"))) for note in NOTES))

    renders = (head, Text(""), Text("switches", styler("group-label")), table, Text(""), notes)

    if fancy:
        return Panel(Group(*renders[2:]), title=head, title_align="left", box=ROUNDED)
    return Group(*renders)


def show_usage(fault=None, /, *, prog="hourglass", colorful=True, fancy=False):
    """
    Print the usage, preceded by `fault` when given (then to stderr).
    """
    if fault is not None and not isinstance(fault, ParseError):
        raise TypeError("show_usage() argument must be a parse error")
    if fault is not None:
        report(fault, prog=prog, colorful=colorful, fancy=fancy)
    Console(stderr=fault is not None).print(render_usage(prog, colorful=colorful, fancy=fancy))


__all__ = (
    "render_usage",
    "show_usage",
)
