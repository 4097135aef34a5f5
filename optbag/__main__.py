"""
OptBag Option Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import json
import logging
import sys
from argparse import REMAINDER, ArgumentParser
from typing import Sequence

from rich.markup import escape

from optbag.config import loader
from optbag.console import console
from optbag.exceptions import OptBagError
from optbag.logger import logger
from optbag.utils import setup_logging
from optbag.version import __version__


def get_root_parser(prog: str | None = "optbag") -> ArgumentParser:
    """
    Construct the ArgumentParser for the `optbag` command.

    Notes:
        ```
        Includes the following arguments:
            DEFINITIONS          : YAML or TOML file with option definitions.
            ARGS                 : Arguments to parse with those definitions.
            -v / --verbose       : Enable debug logging.
            --log-mode           : Console log format (cli or json).
            --show-help          : Print the option help listing instead of parsing.
            --version            : Print the OptBag version.
        ```
    """
    parser = ArgumentParser(
        prog=prog,
        description="OptBag - parse arguments against option definitions from a file.",
        epilog="Everything after DEFINITIONS is handed to the loaded parser unchanged.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help=f"Enable debug logging for {prog}."
    )
    parser.add_argument(
        "--log-mode",
        choices=["cli", "json"],
        default=None,
        help="Console log format. Defaults to OPTBAG_LOG_MODE or auto-detection.",
    )
    parser.add_argument(
        "--show-help",
        action="store_true",
        help="Print the help listing of the loaded options and exit.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("definitions", help="YAML or TOML file with option definitions.")
    parser.add_argument("args", nargs=REMAINDER, help="Arguments to parse.")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    root_parser = get_root_parser()
    cli_args = root_parser.parse_args(argv)

    setup_logging(
        mode=cli_args.log_mode,
        console_log_level=logging.DEBUG if cli_args.verbose else logging.WARNING,
    )

    try:
        option_parser = loader(cli_args.definitions)
        if cli_args.show_help:
            option_parser.render_help()
            return 0
        bag = option_parser.parse(list(cli_args.args))
    except (OptBagError, FileNotFoundError) as error:
        logger.debug("optbag failed: %s", error)
        console.print(
            f"[bold red]❌ Error:[/] {escape(str(error))}", markup=True, highlight=False
        )
        return 1

    console.print_json(json.dumps(bag.as_dict()))
    return 0


if __name__ == "__main__":
    sys.exit(main())
