"""Console entry point for ESDash."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from esdash.app import ESDashApp

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="esdash",
        description="Read-only terminal dashboard for a search cluster",
    )
    parser.add_argument(
        "--url",
        default=None,
        help="Cluster base URL (overrides ES_URL and the settings file)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a YAML settings file",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Write logs to this file (the terminal is used by the UI)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log at DEBUG level",
    )
    return parser


def configure_logging(log_file: Path | None, debug: bool) -> None:
    level = logging.DEBUG if debug else logging.WARNING
    if log_file is None:
        # Nothing may write to the terminal while the UI owns it.
        logging.basicConfig(level=level, handlers=[logging.NullHandler()])
        return
    logging.basicConfig(
        level=level,
        filename=str(log_file),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_file, args.debug)
    logger.debug("Starting ESDash (url=%s, config=%s)", args.url, args.config)
    ESDashApp(es_url=args.url, config_path=args.config).run()


if __name__ == "__main__":
    main()
