#!/usr/bin/python3

import argparse
import fileinput
import sys

import structlog

from columnize.errors import ColumnizeError
from columnize.logging import configure_logging
from columnize.process import columnize
from columnize.settings import DEFAULT_DELIMITER, Justification, Settings, Strategy

log = structlog.get_logger(__name__)

EXAMPLES = """examples:
  columnize < sample.txt
  columnize sample.txt
  columnize benchmarks-a.out benchmarks-b.out
  columnize --header 3 --footer 2 testdata/bench.out
"""


def non_negative(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="columnize",
        description="Like `column -t`, but right-justifies numerical fields. Reads input from the "
                    "files given on the command line, or from standard input when none are given.",
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        'files',
        nargs='*',
        metavar='FILE',
        help='Input files, read as one stream ("-" for STDIN)'
    )

    noise = parser.add_mutually_exclusive_group()
    noise.add_argument('-q', '--quiet', action='store_true', help='Do not print errors to stderr')
    noise.add_argument('-v', '--verbose', action='count', default=0, help='Print verbose output to stderr')

    parser.add_argument(
        '-d', '--delimiter',
        default=DEFAULT_DELIMITER,
        help='Output column delimiter (default: two spaces)'
    )
    parser.add_argument(
        '--header',
        type=non_negative,
        default=0,
        metavar='N',
        help='Print the first N lines unchanged and ignore them when formatting columns'
    )
    parser.add_argument('-s', '--skip-header', action='store_true', help='Same as `--header 1`')
    parser.add_argument(
        '--footer',
        type=non_negative,
        default=0,
        metavar='N',
        help='Print the last N lines unchanged and ignore them when formatting columns'
    )

    justify = parser.add_mutually_exclusive_group()
    justify.add_argument('-l', '--left', action='store_true', help='Left-justify all columns')
    justify.add_argument('-r', '--right', action='store_true', help='Right-justify all columns')

    parser.add_argument(
        '--naive',
        action='store_true',
        help='Treat the nth whitespace-separated word of each line as column n instead of '
             'inferring columns from word positions'
    )
    return parser


def settings_from_args(args: argparse.Namespace) -> Settings:
    header_lines = args.header or (1 if args.skip_header else 0)

    justification = Justification.AUTO
    if args.left:
        justification = Justification.LEFT
    elif args.right:
        justification = Justification.RIGHT

    return Settings(
        header_lines=header_lines,
        footer_lines=args.footer,
        delimiter=args.delimiter,
        justification=justification,
        strategy=Strategy.WHITESPACE if args.naive else Strategy.EXTENTS,
    )


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        settings = settings_from_args(args)
        log.info("columnizing", files=args.files or ['-'], settings=settings)
        with fileinput.input(args.files, encoding='utf-8') as lines:
            columnize(lines, sys.stdout, settings)
    except ColumnizeError as err:
        if not args.quiet:
            print(f"columnize: {err}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
