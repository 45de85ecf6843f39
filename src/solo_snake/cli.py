"""Command-line entry point for Solo Snake."""

from __future__ import annotations

import argparse
import logging
import sys

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="solo-snake",
        description="Solo Snake headless simulation and configuration tools.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- simulate ---
    sim_p = sub.add_parser(
        "simulate", help="Play random-input games and report scores.",
    )
    sim_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file for the grid size and seed.",
    )
    sim_p.add_argument("--games", type=int, default=10)
    sim_p.add_argument("--grid-width", type=int, default=None)
    sim_p.add_argument("--grid-height", type=int, default=None)
    sim_p.add_argument("--max-ticks", type=int, default=1_000)
    sim_p.add_argument("--turn-prob", type=float, default=0.2)
    sim_p.add_argument("--seed", type=int, default=None)

    # --- init-config ---
    cfg_p = sub.add_parser(
        "init-config", help="Write a default game config file.",
    )
    cfg_p.add_argument("path", help="Destination JSON file.")

    return parser


def _run_simulate(args: argparse.Namespace) -> int:
    from solo_snake.config import GameConfig
    from solo_snake.simulate import simulate_games

    config = GameConfig.load(args.config) if args.config else GameConfig()
    seed = args.seed if args.seed is not None else config.seed

    result = simulate_games(
        num_games=args.games,
        grid_width=args.grid_width or config.grid_width,
        grid_height=args.grid_height or config.grid_height,
        max_ticks=args.max_ticks,
        turn_prob=args.turn_prob,
        seed=seed if seed is not None else 42,
    )
    print(result.summary())  # noqa: T201
    return 0


def _run_init_config(args: argparse.Namespace) -> int:
    from solo_snake.config import GameConfig

    GameConfig().save(args.path)
    print(f"Wrote default config to {args.path}")  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``solo-snake`` CLI."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "simulate": _run_simulate,
        "init-config": _run_init_config,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
