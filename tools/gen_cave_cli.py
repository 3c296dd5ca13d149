"""Command line interface to generate random-march caves for development."""
from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace

from cavegen.debug import render_ascii, tile_counts
from cavegen.gen import CaveGenParams, WalkerParams
from cavegen.systems.cave_generator import generate_cave
from config.config_loader import ConfigLoader, load_generation_params


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate a random-march cave and print it.")
    parser.add_argument("--config", default="settings.yaml", help="YAML file with generation defaults.")
    parser.add_argument("--width", type=int, default=None)
    parser.add_argument("--height", type=int, default=None)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--walkers", type=int, default=None, help="Number of walkers to run.")
    parser.add_argument("--walk-steps", type=int, default=None)
    parser.add_argument("--max-step-length", type=int, default=None)
    parser.add_argument("--backtrack", type=float, default=None, help="Backtrack probability.")
    parser.add_argument("--counts", action="store_true", help="Also print the number of tiles per kind.")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def _override(value, fallback):
    return fallback if value is None else value


def _resolve_params(args: argparse.Namespace) -> CaveGenParams:
    base = load_generation_params(ConfigLoader(args.config))
    walker = WalkerParams(
        walk_steps=_override(args.walk_steps, base.walker.walk_steps),
        max_step_length=_override(args.max_step_length, base.walker.max_step_length),
        backtrack_probability=_override(args.backtrack, base.walker.backtrack_probability),
    )
    return replace(
        base,
        width=_override(args.width, base.width),
        height=_override(args.height, base.height),
        seed=_override(args.seed, base.seed),
        walker_count=_override(args.walkers, base.walker_count),
        walker=walker,
    )


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        params = _resolve_params(args)
    except ValueError as exc:
        parser.error(str(exc))

    grid = generate_cave(params)
    sys.stdout.write(render_ascii(grid) + "\n")
    if args.counts:
        for tile, count in tile_counts(grid).items():
            sys.stdout.write(f"{tile.value}: {count}\n")


if __name__ == "__main__":
    main()
