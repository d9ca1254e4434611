"""CLI entry point for `oa`: argument parsing, logging setup and exit codes."""

import argparse
import logging
import sys

from openapp import __version__
from openapp.container import DependencyContainer
from openapp.entities.Operation import Operation
from openapp.exceptions import BaseAppError, ConfigurationError, UnknownError
from openapp.utils.reporter import ConsoleReporter

PROG = "oa"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="(o)pen (a)pplications -- launch apps from the command line.",
        epilog=(
            "Pass in the names of apps and oa will try to launch each of them. "
            "It succeeds if they all launch successfully. Alternately, you can use oa "
            "to find out where apps are on the filesystem, or to reveal them in a file "
            "browser, instead of launching them."
        ),
    )
    operation = parser.add_mutually_exclusive_group()
    operation.add_argument(
        "-l",
        "--launch",
        dest="operation",
        action="store_const",
        const=Operation.LAUNCH,
        help=argparse.SUPPRESS,
    )
    operation.add_argument(
        "-d",  # 'd' for 'directory'
        "--locate",
        dest="operation",
        action="store_const",
        const=Operation.LOCATE,
        help="Print the filesystem paths to each app.",
    )
    operation.add_argument(
        "-r",
        "--reveal",
        dest="operation",
        action="store_const",
        const=Operation.REVEAL,
        help="Reveal each app in a file browser.",
    )
    parser.set_defaults(operation=Operation.LAUNCH)
    parser.add_argument("-q", "--quiet", action="store_true", help="Suppress all output.")
    parser.add_argument(
        "-c",
        "--config",
        metavar="PATH",
        default=None,
        help="Config file to read (default: $OA_CONFIG or ~/.oarc).",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log debug output to stderr."
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "apps",
        nargs="*",
        metavar="app",
        help="An application. You must provide at least one.",
    )
    return parser


def setup_logging(level: int, verbose: bool = False, quiet: bool = False) -> None:
    """
    Configure the openapp logger: level from --verbose/--quiet or settings,
    one console handler on stderr.
    """
    if quiet:
        level = logging.CRITICAL
    elif verbose:
        level = logging.DEBUG
    root = logging.getLogger("openapp")
    root.setLevel(level)
    # Replace rather than reuse, so repeated runs log to the current stderr
    for handler in list(root.handlers):
        root.removeHandler(handler)
    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(logging.Formatter(f"{PROG}: %(levelname)s [%(name)s] %(message)s"))
    root.addHandler(console)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.apps:
        parser.error("You must specify at least one app.")

    reporter = ConsoleReporter(quiet=args.quiet, prog=PROG)
    container = DependencyContainer(config_path=args.config)

    try:
        setup_logging(container.get_settings().log_level, args.verbose, args.quiet)
        use_case = container.get_open_applications_use_case(reporter)
        use_case.execute(args.apps, args.operation)
    except ConfigurationError as e:
        # Always complain about config file problems.
        reporter.error(e, always=True)
        return e.exit_code
    except BaseAppError as e:
        reporter.error(e)
        return e.exit_code
    except Exception as e:
        reporter.error(e)
        return UnknownError.exit_code

    return 0


if __name__ == "__main__":
    sys.exit(main())
