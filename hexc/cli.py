"""
hexc command-line interface.
"""

import argparse
import os
import sys
from typing import Optional

try:
    import argcomplete
    from argcomplete.completers import FilesCompleter
    ARGCOMPLETE_AVAILABLE = True
except ImportError:
    ARGCOMPLETE_AVAILABLE = False

from . import __version__
from .config import ColorConfig, DumpConfig
from .exceptions import HexcError, UsageError
from .formatters import SpanFormatter
from .hex_dump import HexDumper
from .logging_config import LEVEL_NAMES, get_logger, setup_logging
from .source import load_source

logger = get_logger('cli')


class ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting with status 2."""

    def error(self, message):
        raise UsageError(message)


def width_completer(prefix, parsed_args, **kwargs):
    """Suggest common row widths for --width."""
    return [w for w in ('8', '16', '24', '32', '64') if w.startswith(prefix)]


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(prog='hexc', description='A hex dumping utility that supports color')
    filename_arg = parser.add_argument('filenames', nargs='*', metavar='FILE',
                                       help='File to dump')
    parser.add_argument('-d', '--decimal', action='store_true',
                        help='Show all numbers in decimal instead of hex')
    parser.add_argument('-L', '--legend', action='store_true',
                        help='Show the color legend before the dump')
    parser.add_argument('-l', '--limit', type=int, default=0,
                        help='Limit the dump to an arbitrary number of bytes (0 = no limit)')
    parser.add_argument('-s', '--start', type=int, default=0,
                        help='Choose which byte in the file to begin the dump, in decimal')
    parser.add_argument('-t', '--text', action='store_true',
                        help='Show a text listing next to the dump')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Show extra information at the top of the dump')
    width_arg = parser.add_argument('-w', '--width', type=int, default=16,
                                    help='Specify the width of the dump in bytes')
    parser.add_argument('--compat', action='store_true',
                        help='Render full rows like the original hexc (last byte of each row not shown)')

    color_group = parser.add_mutually_exclusive_group()
    color_group.add_argument('--color', action='store_true',
                             help='Force colored output even when stdout is not a terminal')
    color_group.add_argument('--no-color', action='store_true',
                             help='Disable colored output')
    color_config_arg = parser.add_argument('--color-config', type=str,
                                           help='Path to JSON file overriding category colors')

    parser.add_argument('--log-level', default='CRITICAL', choices=LEVEL_NAMES,
                        help='Set logging level (NONE = disable logging)')
    parser.add_argument('--debug-modules', type=str,
                        help='Comma-separated list of modules to debug (e.g., source,hex_dump)')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    if ARGCOMPLETE_AVAILABLE:
        filename_arg.completer = FilesCompleter()
        color_config_arg.completer = FilesCompleter(allowednames=('json',))
        width_arg.completer = width_completer

    return parser


def colors_from_args(args: argparse.Namespace, stream) -> ColorConfig:
    """Resolve the color configuration from --color-config, --color and --no-color."""
    colors = ColorConfig.from_json(args.color_config) if args.color_config else ColorConfig()

    if args.no_color:
        colors.enabled = False
    elif not args.color and not stream.isatty():
        colors.enabled = False
    return colors


def run(args: argparse.Namespace, stdout=None) -> int:
    """Dump the requested file to stdout. Returns the number of lines written."""
    stdout = stdout or sys.stdout

    if len(args.filenames) != 1:
        raise UsageError("Missing filename." if not args.filenames else "Too many filenames.")

    config = DumpConfig(
        start=args.start,
        width=args.width,
        decimal=args.decimal,
        limit=args.limit,
        text=args.text,
        verbose=args.verbose,
        legend=args.legend,
        compat=args.compat,
    )
    formatter = SpanFormatter(colors_from_args(args, stdout))
    source = load_source(args.filenames[0])

    lines = HexDumper(config).render(source)
    written = formatter.write(lines, stdout)
    logger.info(f"Wrote {written} lines for {source.name}")
    return written


def main(argv: Optional[list] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser()

    if ARGCOMPLETE_AVAILABLE:
        argcomplete.autocomplete(parser)

    try:
        args = parser.parse_args(argv)
        debug_modules = [m.strip() for m in (args.debug_modules or '').split(',') if m.strip()]
        setup_logging(args.log_level, debug_modules, use_color=sys.stderr.isatty())
        run(args)
    except BrokenPipeError:
        # Reader went away (e.g. piped into head); keep the exit-time flush quiet
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        return 1
    except HexcError as e:
        use_color = '--no-color' not in argv and sys.stderr.isatty()
        print(SpanFormatter(ColorConfig(enabled=use_color)).format_error(str(e)), file=sys.stderr)
        if isinstance(e, UsageError):
            parser.print_help(sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
