#!/usr/bin/env python3
"""
xkcdpwd CLI
===========
Command-line interface for passphrase generation.

Usage:
    xkcdpwd
    xkcdpwd -n 5 -w 6 -s - --capitalize first
    xkcdpwd --min-length 5 --max-length 8 --info
"""

import argparse
import logging
import sys

from xkcdpwd import __version__
from xkcdpwd.capitalize import modes
from xkcdpwd.entropy import MIN_ENTROPY
from xkcdpwd.languages import get_dictionary, supported_languages
from xkcdpwd.settings import get_setting, load_settings


logger = logging.getLogger(__name__)

# =============================================================================
# Constants
# =============================================================================

SEPARATORS = ["", " ", "-", ".", "_"]

# =============================================================================
# Utilities
# =============================================================================

class Output:
    """Handles CLI output with quiet mode support."""

    def __init__(self, quiet: bool = False, stdout=None, stderr=None):
        self.quiet = quiet
        self.stdout = stdout or sys.stdout
        self.stderr = stderr or sys.stderr

    def print(self, *args, **kwargs):
        if not self.quiet:
            print(*args, file=self.stderr, **kwargs)

    def result(self, line: str):
        print(line, file=self.stdout)

    def error(self, msg: str):
        print(f"Error: {msg}", file=self.stderr)


def allowed_separators() -> list:
    """Separators permitted by the cli.separators setting."""
    return list(get_setting("cli.separators", SEPARATORS))


def check_separator(sep: str) -> bool:
    """Separators are empty or a single space, dash, dot or underscore."""
    return sep in allowed_separators()


def entropy_floor() -> float:
    """Configured entropy floor; never below MIN_ENTROPY."""
    configured = get_setting("entropy.min_bits", MIN_ENTROPY)
    try:
        return max(MIN_ENTROPY, float(configured))
    except (TypeError, ValueError):
        raise ValueError(f"entropy.min_bits must be a number, got {configured!r}")


def setup_logging(verbose: bool = False):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


# =============================================================================
# Commands
# =============================================================================

def cmd_generate(args, out: Output) -> int:
    """Print passphrases."""
    settings = load_settings(args.config).merged(
        words=args.words,
        passphrases=args.passphrases,
        separator=args.separator,
        capitalize=args.capitalize,
        min_length=args.min_length,
        max_length=args.max_length,
        language=args.language,
    )
    logger.debug(f"Settings: {settings}")

    if settings.words < 1:
        out.error(f"number of words must be positive, got {settings.words}")
        return 1
    if settings.passphrases < 1:
        out.error(f"number of passphrases must be positive, got {settings.passphrases}")
        return 1
    if not check_separator(settings.separator):
        out.error(f"invalid separator {settings.separator!r}: "
                  f"use one of {', '.join(repr(s) for s in allowed_separators())}")
        return 1

    d = get_dictionary(settings.language)
    if d is None:
        out.error(f"no dictionary available for language '{settings.language}' "
                  f"(available: {', '.join(supported_languages())})")
        return 1

    d.set_min_word_length(settings.min_length)
    d.set_max_word_length(settings.max_length)
    d.set_capitalize(settings.capitalize)
    if d.capitalize != settings.capitalize:
        logger.debug(f"Unknown capitalization '{settings.capitalize}', using 'none'")

    floor = entropy_floor()

    if args.info and not out.quiet:
        from rich.console import Console
        from xkcdpwd.ui import DictionarySummary, SummaryUI
        summary = DictionarySummary.from_dictionary(
            d, words=settings.words, language=settings.language, floor=floor)
        SummaryUI(Console(file=out.stderr)).show(summary)

    lines = [
        settings.separator.join(d.passphrase(settings.words, floor=floor))
        for _ in range(settings.passphrases)
    ]
    for line in lines:
        out.result(line)
    return 0


# =============================================================================
# Main
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='xkcdpwd',
        description='xkcdpwd - a passphrase generator based on XKCD comic #936',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s
  %(prog)s -n 5 -w 5
  %(prog)s -s - --capitalize first
  %(prog)s --min-length 5 --max-length 8 --info

Defaults come from ~/.config/xkcdpwd/xkcdpwd.conf (YAML) and
XKCDPWD_* environment variables, e.g. XKCDPWD_WORDS=6.
"""
    )

    parser.add_argument('--version', '-V', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--quiet', '-q', action='store_true', help='Suppress non-essential output')
    parser.add_argument('--verbose', '-v', action='store_true', help='Show debug logging')
    parser.add_argument('--config', help='Config file (default: per-user config file)')

    parser.add_argument('-w', '--words', type=int, help='Words per passphrase (default: 4)')
    parser.add_argument('-n', '--passphrases', type=int, help='Number of passphrases (default: 1)')
    parser.add_argument('-s', '--separator', help="Word separator: '', ' ', '-', '.' or '_' (default: ' ')")
    parser.add_argument('-c', '--capitalize', metavar='MODE',
                        help=f"Capitalization: {', '.join(modes())} (default: none)")
    parser.add_argument('-m', '--min-length', type=int, help='Minimum word length, 0 for none')
    parser.add_argument('-M', '--max-length', type=int, help='Maximum word length, 0 for none')
    parser.add_argument('-l', '--language', help='Dictionary language (default: en)')
    parser.add_argument('--info', action='store_true', help='Show dictionary and entropy summary on stderr')
    return parser


def main(argv=None, stdout=None, stderr=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    out = Output(quiet=args.quiet, stdout=stdout, stderr=stderr)

    try:
        return cmd_generate(args, out)
    except KeyboardInterrupt:
        out.print("\nCancelled.")
        return 130
    except (ValueError, RuntimeError) as e:
        out.error(str(e))
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == '__main__':
    sys.exit(main())
