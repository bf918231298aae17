"""Command-line entry point: run the review server or ask for a recommendation."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from hamburguer.config import DEFAULT_CONFIG_PATH, ConfigError, load_config
from hamburguer.database import connect
from hamburguer.di import new_item_use_case
from hamburguer.rest import serve


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hamburguer",
        description="Menu recommendations and review awards spoken by Alexa.",
    )
    parser.add_argument(
        "--config",
        default=str(DEFAULT_CONFIG_PATH),
        help="path of the JSON configuration file (default: %(default)s)",
    )
    parser.add_argument("-t", "--toggle", action="store_true", help="unused toggle flag")
    commands = parser.add_subparsers(dest="command", metavar="command")
    commands.add_parser("serve", help="run the review HTTP server")
    commands.add_parser("sync", help="ask the model for an order from the latest menu")
    return parser


def _run_sync(config) -> int:
    engine = connect(config.database_url)
    try:
        message = new_item_use_case(engine, config).get_recommendation()
    except Exception as exc:
        print(exc)
        return 1
    finally:
        engine.dispose()
    if message is None:
        print("the model gave no response", file=sys.stderr)
        return 1
    print(message)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        return 0
    try:
        config = load_config(args.config)
    except ConfigError as exc:
        print(exc, file=sys.stderr)
        return 1
    if args.command == "serve":
        serve(connect(config.database_url), config)
        return 0
    return _run_sync(config)


if __name__ == "__main__":
    raise SystemExit(main())