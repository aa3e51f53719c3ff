"""
CLI for the demangler.
"""

import argparse
import logging
import sys

from mwcc_demangler.demangler import demangle, demangle_or_raw

parser = argparse.ArgumentParser(
    "mwcc-demangler", description="Demangler for Metrowerks (CodeWarrior) C++ symbols."
)
parser.add_argument(
    "symbol",
    help="Symbols to demangle. If none are given, symbols are read from stdin, one per line.",
    type=str,
    nargs="*",
)
parser.add_argument(
    "--raw-fallback",
    "-r",
    help="Print the symbol unchanged if it does not appear to be mangled",
    action="store_true",
)
parser.add_argument("--verbose", "-v", help="Enable debug logging", action="store_true")


def main(argv=None):
    args = parser.parse_args(argv)  # noqa
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    func = demangle_or_raw if args.raw_fallback else demangle
    symbols = args.symbol or (line.strip() for line in sys.stdin)

    for symbol in symbols:
        if symbol:
            print(func(symbol))


if __name__ == "__main__":
    main()
