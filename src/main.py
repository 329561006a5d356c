#!/usr/bin/env python3
""" Command line entry point for the navigating shell. """
import argparse
import logging

from shell import Shell

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Interactive shell with navigation history, custom commands "
                    "and a local environment overlay"
    )
    parser.add_argument(
        "--log-level",
        metavar="LEVEL",
        default="WARNING",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level written to stderr (default: WARNING)"
    )
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )

    rc = Shell().run()
    raise SystemExit(rc)


if __name__ == "__main__":
    main()
