from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import structlog

from episodarr.domain.exceptions import ConfigLoadError
from episodarr.infrastructure.config import load_config
from episodarr.infrastructure.logging.setup import configure_logging, stop_logging
from episodarr.interfaces.composition import runtime_scope

log = structlog.get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


def _parse_args(argv: Iterable[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="episodarr",
        description=(
            "Find the next episode of every tracked series and queue it "
            "in the download client."
        ),
    )

    # Stores
    parser.add_argument(
        "-c",
        "--contents",
        default=None,
        help="Path to the contents YAML store (default: ./contents.yaml).",
    )
    parser.add_argument(
        "-r",
        "--crawlers",
        default=None,
        help="Path to the crawlers YAML store (default: ./crawlers.yaml).",
    )
    parser.add_argument(
        "-f",
        "--fetchers",
        default=None,
        help="Path to the fetchers YAML store (default: ./fetchers.yaml).",
    )
    parser.add_argument(
        "-l",
        "--log-file",
        default=None,
        help="Append log lines to this file.",
    )

    # Config wiring flags (no business logic)
    parser.add_argument(
        "--config",
        default=None,
        help="Path to YAML config file.",
    )
    parser.add_argument(
        "--dotenv",
        default=None,
        help="Path to .env file.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override log level.",
    )
    parser.add_argument(
        "--log-format",
        default=None,
        choices=["json", "console"],
        help="Override log format.",
    )

    return parser.parse_args(argv)


def _cli_overrides(args: argparse.Namespace) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    if args.contents:
        overrides["contents_path"] = args.contents
    if args.crawlers:
        overrides["crawlers_path"] = args.crawlers
    if args.fetchers:
        overrides["fetchers_path"] = args.fetchers
    if args.log_file:
        overrides["log_file"] = args.log_file
    if args.log_level:
        overrides["log_level"] = args.log_level
    if args.log_format:
        overrides["log_format"] = args.log_format
    return overrides


def start(argv: Iterable[str] | None = None) -> int:
    """
    Process entrypoint.

    Loads config once, configures logging, then advances every tracked
    content. Returns 0 when the run completed (even if some contents could
    not be advanced or saved) and 1 when the config or a store could not be
    loaded.
    """
    if argv is None:
        argv = sys.argv[1:]

    args = _parse_args(argv)

    try:
        config = load_config(
            config_path=Path(args.config) if args.config else None,
            dotenv_path=Path(args.dotenv) if args.dotenv else None,
            cli_overrides=_cli_overrides(args),
        )
        configure_logging(config)

        with runtime_scope(config) as runtime:
            runtime.use_case.execute(runtime.contents)
    except ConfigLoadError as e:
        log.error("config_load_failed", error=str(e))
        return EXIT_FAILURE
    finally:
        stop_logging()

    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(start())
