from __future__ import annotations

import argparse
import sys
from pathlib import Path

import polars as pl

from keepaway.core.errors import SpecError
from keepaway.core.schema import AgentSpec
from keepaway.io.config import RunSettings
from keepaway.io.errors import IoError
from keepaway.io.frames import agents_frame, counts_frame, inspections_frame
from keepaway.io.read import read_agents
from keepaway.world.events import Inspection
from keepaway.world.reducers import FloorDivide, ModuloComposite, make_reducer
from keepaway.world.score import monkey_business
from keepaway.world.simulation import Simulation


def _print_frame(df: pl.DataFrame, n: int | None = None) -> None:
    """Print a Polars frame, optionally limited to its first n rows."""
    print(df if n is None else df.head(n))


def _load(input_path: str) -> list[AgentSpec]:
    specs = read_agents(Path(input_path))
    print(f"[INFO] Loaded {len(specs)} agents from {input_path}")
    return specs


def _solve_part(
    part: int, specs: list[AgentSpec], settings: RunSettings, rounds: int | None
) -> list[int]:
    if part == 1:
        n = settings.part_one_rounds if rounds is None else rounds
        reducer = FloorDivide(settings.relief_divisor)
        desc = f"floor_divide({settings.relief_divisor})"
    else:
        n = settings.part_two_rounds if rounds is None else rounds
        reducer = ModuloComposite.for_agents(specs, strategy=settings.modulus_strategy)
        desc = f"modulo({reducer.modulus}, {settings.modulus_strategy})"
    print(f"[INFO] part {part}: {n} rounds, reducer={desc}")
    return Simulation(specs).run(n, reducer)


def _cmd_solve(argv: list[str]) -> int:
    p = argparse.ArgumentParser(
        prog="solve",
        description="Run the simulation and print the product of the two largest inspection counts.",
    )
    p.add_argument("input", type=str, help="Path to roster text.")
    p.add_argument("--part", choices=["1", "2", "both"], default="both", help="Which run to play.")
    p.add_argument("--rounds", type=int, default=None, help="Override the configured round count.")
    p.add_argument("--config", type=str, default=None, help="Explicit TOML config path.")
    p.add_argument(
        "--show-counts", action="store_true", help="Print the per-agent inspection table."
    )
    args = p.parse_args(argv)

    if args.rounds is not None and args.rounds < 0:
        p.error("--rounds must be non-negative")

    settings = RunSettings.load(args.config)
    specs = _load(args.input)
    parts = [1, 2] if args.part == "both" else [int(args.part)]
    for part in parts:
        counts = _solve_part(part, specs, settings, args.rounds)
        if len(counts) < 2:
            print("[WARN] fewer than two agents; business metric is the single count", file=sys.stderr)
        if args.show_counts:
            _print_frame(counts_frame(counts))
        print(f"part {part}: {monkey_business(counts)}")
    return 0


def _cmd_show_agents(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="show-agents", description="Show the parsed roster.")
    p.add_argument("input", type=str, help="Path to roster text.")
    args = p.parse_args(argv)

    _print_frame(agents_frame(_load(args.input)))
    return 0


def _cmd_trace(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="trace", description="Print every inspection of a short run.")
    p.add_argument("input", type=str, help="Path to roster text.")
    p.add_argument("--rounds", type=int, default=1, help="Rounds to trace.")
    p.add_argument(
        "--reducer", choices=["floor", "modulo"], default="floor", help="Worry reducer to apply."
    )
    p.add_argument("--config", type=str, default=None, help="Explicit TOML config path.")
    p.add_argument("--n", type=int, default=None, help="Rows to display.")
    args = p.parse_args(argv)

    if args.rounds < 0:
        p.error("--rounds must be non-negative")
    if args.n is not None and args.n < 0:
        p.error("--n must be non-negative")

    settings = RunSettings.load(args.config)
    specs = _load(args.input)
    reducer = make_reducer(
        args.reducer,
        specs,
        relief_divisor=settings.relief_divisor,
        modulus_strategy=settings.modulus_strategy,
    )

    events: list[Inspection] = []
    Simulation(specs).run(args.rounds, reducer, observer=events.append)
    print(f"[INFO] {len(events)} inspections over {args.rounds} rounds")
    _print_frame(inspections_frame(events), n=args.n)
    return 0


def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="keepaway", description="Item-passing simulation CLI.")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("solve")
    sub.add_parser("show-agents")
    sub.add_parser("trace")
    return p


_COMMANDS = {
    "solve": _cmd_solve,
    "show-agents": _cmd_show_agents,
    "trace": _cmd_trace,
}


def main(argv: list[str] | None = None) -> None:
    argv = list(sys.argv[1:] if argv is None else argv)
    if not argv:
        build_argparser().print_help()
        return
    cmd, rest = argv[0], argv[1:]
    handler = _COMMANDS.get(cmd)
    if handler is None:
        print(f"Unknown command: {cmd}", file=sys.stderr)
        raise SystemExit(2)
    try:
        code = handler(rest)
    except (IoError, SpecError) as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        code = 2
    except FileNotFoundError as e:
        print(f"[ERROR] input not found: {e.filename}", file=sys.stderr)
        code = 2
    raise SystemExit(code)


if __name__ == "__main__":
    main()
