"""
keepaway.lab — Command-line entry points.

## Responsibilities
- Parse arguments, load RunSettings, read rosters, run simulations, print results.
- Map IO/roster errors to ``[ERROR]`` diagnostics and exit status 2.

## Public API
- cli — ``keepaway`` console script (solve, show-agents, trace).

## Import DAG discipline
- Depends on: stdlib, polars, keepaway.core, keepaway.io, keepaway.world.
"""
