"""Command line front end for resolving and rolling loadouts."""
from __future__ import annotations

import argparse
import logging
import secrets
import sys
from pathlib import Path
from typing import Sequence

from kitforge.data.errors import DataError
from kitforge.parser.errors import ConfigError
from kitforge.presentation.cli.config import load_config
from kitforge.presentation.cli.render import format_resolved_class, format_result, to_json
from kitforge.services import LoadoutInstantiator, LoadoutService, ResolvedUniverse, load_universe

_MAX_RANDOM_SEED = 2**31 - 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="kitforge", description="Resolve and roll unit loadouts.")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument("--config", type=Path, default=None, help="Path to a CLI config.json")
    parser.add_argument(
        "--definitions", type=Path, default=None, help="Directory holding containers/items/settings JSON"
    )
    commands = parser.add_subparsers(dest="command", required=True)

    resolve = commands.add_parser("resolve", help="Print resolved field tables")
    resolve.add_argument("file", type=Path)
    resolve.add_argument("--class", dest="class_name", default=None, help="Only print this class")
    resolve.add_argument("--json", action="store_true", help="Emit JSON")

    roll = commands.add_parser("roll", help="Instantiate units of a class")
    roll.add_argument("file", type=Path)
    roll.add_argument("class_name")
    roll.add_argument("--seed", type=int, default=None, help="Base seed (random when omitted)")
    roll.add_argument("--count", type=int, default=1)
    roll.add_argument("--workers", type=int, default=None, help="Roll units on a thread pool")
    roll.add_argument("--json", action="store_true", help="Emit JSON")

    check = commands.add_parser("check", help="Parse and resolve a file, report its classes")
    check.add_argument("file", type=Path)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return a process exit status."""
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    config = load_config(args.config)
    definitions = args.definitions or config["definitions_path"]
    as_json = getattr(args, "json", False) or config["output_format"] == "json"

    try:
        universe = load_universe(args.file)
        if args.command == "resolve":
            _print_resolved(universe, args.class_name, as_json)
        elif args.command == "roll":
            _print_rolls(universe, args, definitions, as_json)
        else:
            _print_check(universe)
    except (ConfigError, DataError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


def _print_resolved(universe: ResolvedUniverse, class_name: str | None, as_json: bool) -> None:
    if class_name and class_name not in universe:
        raise ValueError(f"Class '{class_name}' is not defined.")
    classes = [universe.get(class_name)] if class_name else universe.all()
    if as_json:
        print(to_json({resolved.name: resolved.to_dict() for resolved in classes}))
        return
    for resolved in classes:
        print("\n".join(format_resolved_class(resolved)))
        print()


def _print_rolls(universe: ResolvedUniverse, args: argparse.Namespace, definitions, as_json: bool) -> None:
    seed = args.seed if args.seed is not None else secrets.randbelow(_MAX_RANDOM_SEED)
    service = LoadoutService(universe=universe, instantiator=LoadoutInstantiator(base_path=definitions))
    results = service.roll_units(args.class_name, seed, args.count, max_workers=args.workers)
    if as_json:
        payload = [
            {**result.loadout.to_dict(), "warnings": [warning.message for warning in result.warnings]}
            for result in results
        ]
        print(to_json({"base_seed": seed, "units": payload}))
        return
    print(f"Base seed: {seed}")
    for result in results:
        print("\n".join(format_result(result)))
        print()


def _print_check(universe: ResolvedUniverse) -> None:
    print(f"{len(universe)} classes resolved")
    for name in universe.resolution_order:
        print(f"  {' -> '.join(universe.get(name).lineage)}")
