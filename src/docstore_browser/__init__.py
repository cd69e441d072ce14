# --- file: __init__.py

# --- Import section ---------------------------------------------------------------------------------------------------
import argparse
import logging
import sys

from .defs              import ARGUMENT_EPILOG, ARGUMENT_DESCRIPTION, ARGUMENT_FORMATTER_CLASS, DEFAULT_TIMEOUT
from .log_helper        import NOTICE, setup_logger
from .store_browser     import StoreBrowser
# --- END OF Import section --------------------------------------------------------------------------------------------



# --- Version (managed by setuptools-scm)
try:
    from ._version import version as __version__
except ImportError:
    __version__ = "0.0.0"



def build_arg_parser() -> argparse.ArgumentParser:
    """
    Possible command line arguments:
        * -c/--connect  {connection string}, required
        * --timeout     {seconds to wait for the store}, defaults to 5
        * --log-file    {path}, write a debug log there
        * -v/--verbose  show progress messages before the browser starts
    """

    # --- Define an argument parser for the user's command line args
    arg_parser = argparse.ArgumentParser(prog              = "docstore-browser",
                                         description       = ARGUMENT_DESCRIPTION,
                                         epilog            = ARGUMENT_EPILOG,
                                         formatter_class   = ARGUMENT_FORMATTER_CLASS)

    arg_parser.add_argument("-c", "--connect",
                            required=True,
                            metavar="URI",
                            help="Connection string of the document store")
    arg_parser.add_argument("--timeout",
                            type=float,
                            default=DEFAULT_TIMEOUT,
                            help=f"Seconds to wait for the store (default: {DEFAULT_TIMEOUT:g})")
    arg_parser.add_argument("--log-file",
                            metavar="PATH",
                            help="Write a debug log to PATH")
    arg_parser.add_argument("-v", "--verbose",
                            action="store_true",
                            help="Show progress messages before the browser starts")
    arg_parser.add_argument("--version",
                            action="version",
                            version=f"%(prog)s {__version__}")

    return arg_parser
# --- END OF build_arg_parser() ----------------------------------------------------------------------------------------



# --- Main entry point (used by pyproject.toml [project.scripts])
def main(argv=None) -> None:
    """
    CLI entry point. Exits 0 when the user quits from the top level, 1 when the store can't be reached.
    """

    args = build_arg_parser().parse_args(argv)

    setup_logger(args.log_file, _stream_level = logging.INFO if args.verbose else NOTICE)

    sb: StoreBrowser = StoreBrowser(_uri        = args.connect,
                                    _timeout    = args.timeout)

    sys.exit(sb.run())

__all__ = [
    "__version__",
    "main",
    "StoreBrowser",
]
