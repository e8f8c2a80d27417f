"""EEE Helper command-line entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from eee_cli.config import load_settings
from eee_cli.console import Console, EndOfInput
from eee_cli.log_store import FileLogStore
from eee_cli.menu import Calculator
from eee_engine import __version__

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="eee-helper",
        description="Menu-driven electrical engineering calculator.",
    )
    parser.add_argument("--log-file", type=str, help="Calculation log path (env: EEE_LOG_FILE)")
    parser.add_argument("--log-level", type=str, help="Diagnostic logging level (env: EEE_LOG_LEVEL)")
    parser.add_argument("--show-log", action="store_true", help="Print the saved calculation log and exit")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None, console: Optional[Console] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings(log_file=args.log_file, log_level=args.log_level)
    except ValidationError as e:
        parser.error(str(e))

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    console = console or Console()
    calculator = Calculator(console, FileLogStore(settings.log_file))
    logger.info("Calculation log: %s", settings.log_file)

    if args.show_log:
        calculator.show_log()
        return 0

    try:
        calculator.run()
    except EndOfInput:
        console.write("Input error. Exiting.")
        return 1
    except KeyboardInterrupt:
        console.write("")
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
