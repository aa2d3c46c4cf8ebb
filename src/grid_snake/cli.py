"""CLI launcher for headless grid snake sessions."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace

from grid_snake.config import SessionConfig

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="grid-snake",
        description="Grid snake simulation: headless runs and config tools.",
    )
    parser.add_argument(
        "--log-level", type=str, default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- run ---
    run_p = sub.add_parser(
        "run", help="Play one session with random inputs on a simulated clock.",
    )
    run_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file (flags below override it).",
    )
    run_p.add_argument("--seed", type=int, default=None)
    run_p.add_argument("--max-ticks", type=int, default=1_000)
    run_p.add_argument("--board-width", type=float, default=None)
    run_p.add_argument("--board-height", type=float, default=None)
    run_p.add_argument("--cell-radius", type=float, default=None)
    run_p.add_argument("--turn-probability", type=float, default=0.1)
    run_p.add_argument(
        "--json", action="store_true",
        help="Print the final session state as JSON instead of a summary.",
    )

    # --- config ---
    config_p = sub.add_parser("config", help="Print or write the default config.")
    config_p.add_argument(
        "--output", type=str, default=None,
        help="Write the config to this path instead of stdout.",
    )

    return parser


def _run_session(args: argparse.Namespace) -> int:
    from grid_snake.runner import run_headless

    config = (
        SessionConfig.load(args.config)
        if args.config else SessionConfig()
    )

    overrides: dict = {}
    flag_map = {
        "seed": "seed",
        "board_width": "board_width",
        "board_height": "board_height",
        "cell_radius": "cell_radius",
    }
    for cli_name, cfg_name in flag_map.items():
        val = getattr(args, cli_name, None)
        if val is not None:
            overrides[cfg_name] = val
    if overrides:
        config = replace(config, **overrides)

    session, result = run_headless(
        config,
        max_ticks=args.max_ticks,
        turn_probability=args.turn_probability,
        seed=config.seed,
    )
    if args.json:
        print(json.dumps(session.get_state(), indent=2))  # noqa: T201
    else:
        print(result.summary())  # noqa: T201
    return 0


def _run_config(args: argparse.Namespace) -> int:
    config = SessionConfig()
    if args.output:
        config.save(args.output)
    else:
        print(json.dumps(config.to_dict(), indent=2))  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``grid-snake`` CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "run": _run_session,
        "config": _run_config,
    }
    try:
        return handlers[args.command](args)
    except ValueError as exc:
        logger.error("%s", exc)
        return 2


if __name__ == "__main__":
    sys.exit(main())
