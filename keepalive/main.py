import sys
import logging

from keepalive.log.setup import setup_logging
from keepalive.local.console import execute_command


def main() -> None:
    """The main entry point for the keepalive command."""
    args = sys.argv[1:]
    verbose = "--verbose" in args
    if verbose:
        args.remove("--verbose")

    setup_logging(logging.DEBUG if verbose else None)

    command = args[0].lower() if args else "run"
    sys.exit(execute_command(command, args[1:]))


if __name__ == "__main__":
    main()
