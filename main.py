#!/usr/bin/env python3
"""Humanizer - Entry point"""

import argparse
import io
import logging
import sys

from rich.console import Console

from humanizer import VERSION, Colorizer, LineHumanizer, default_chain, print_summary


def build_colorizer(mode: str) -> Colorizer:
    if mode == 'never':
        return Colorizer.plain()
    if mode == 'always':
        return Colorizer.for_console(Console(file=sys.stdout, force_terminal=True))
    return Colorizer.for_console(Console(file=sys.stdout))


def open_stdin():
    return io.TextIOWrapper(sys.stdin.buffer, encoding='utf-8', errors='ignore')


def main():
    parser = argparse.ArgumentParser(
        description="Humanizer - Rewrite escaped URIs, byte counts, timestamps and user agents in text",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument("files", nargs="*", help="Input files (default: stdin, '-' for stdin)")
    parser.add_argument("--color", choices=['auto', 'always', 'never'], default='auto',
                        help="Colorize rewritten tokens")
    parser.add_argument("--stats", action="store_true", help="Print a rewrite summary to stderr")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--version", action="version", version=f"humanizer v{VERSION}")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    humanizer = LineHumanizer(default_chain(build_colorizer(args.color)))

    try:
        for filepath in args.files or ['-']:
            if filepath == '-':
                humanizer.process_stream(open_stdin(), sys.stdout)
            else:
                humanizer.process_file(filepath, sys.stdout)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.stats:
        print_summary(humanizer.report(), Console(stderr=True))


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        sys.exit(0)
    except BrokenPipeError:
        sys.exit(0)
