import sys

from rich.pretty import pprint

from hourglass import *

__prog__ = "hourglass"


if __name__ == '__main__':
    match parse():
        case UsageRequested():
            show_usage(prog=__prog__)
        case Failed(fault):
            show_usage(fault, prog=__prog__)
            sys.exit(1)
        case Parsed(arguments):
            pprint(arguments, expand_all=True)
