"""
Polars tables for rosters, inspection counts, and inspection traces.

Overview
- agents_frame(): one row per AgentSpec (expression, divisor, routing, items).
- counts_frame(): one row per agent with its inspection count and rank.
- inspections_frame(): one row per Inspection event collected from an observer.

Notes
- Frames are built with explicit schemas so empty inputs keep stable dtypes.
- These helpers are read-only views for the CLI; the simulation never consumes them.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import asdict

import polars as pl

from keepaway.core.schema import AgentSpec
from keepaway.world.events import Inspection

__all__ = [
    "AGENTS_SCHEMA",
    "COUNTS_SCHEMA",
    "INSPECTIONS_SCHEMA",
    "agents_frame",
    "counts_frame",
    "inspections_frame",
]

AGENTS_SCHEMA: dict[str, pl.DataType] = {
    "agent_id": pl.Int64,
    "operator": pl.Utf8,
    "operand": pl.Int64,
    "expression": pl.Utf8,
    "divisor": pl.Int64,
    "true_target": pl.Int64,
    "false_target": pl.Int64,
    "initial_items": pl.List(pl.Int64),
}

COUNTS_SCHEMA: dict[str, pl.DataType] = {
    "agent_id": pl.Int64,
    "inspections": pl.Int64,
}

INSPECTIONS_SCHEMA: dict[str, pl.DataType] = {
    "round": pl.Int64,
    "agent": pl.Int64,
    "before": pl.Int64,
    "after": pl.Int64,
    "divisible": pl.Boolean,
    "target": pl.Int64,
}


def agents_frame(specs: Sequence[AgentSpec]) -> pl.DataFrame:
    """
    Tabulate a roster.

    Args:
        specs (Sequence[AgentSpec]): Roster in routing order.

    Returns:
        pl.DataFrame: Columns per AGENTS_SCHEMA; operand is null for ``old``.
    """
    rows = [
        {
            "agent_id": s.id,
            "operator": s.transform.operator.value,
            "operand": s.transform.operand,
            "expression": str(s.transform),
            "divisor": s.divisor,
            "true_target": s.true_target,
            "false_target": s.false_target,
            "initial_items": list(s.initial_items),
        }
        for s in specs
    ]
    return pl.DataFrame(rows, schema=AGENTS_SCHEMA)


def counts_frame(counts: Sequence[int]) -> pl.DataFrame:
    """
    Tabulate inspection counts with a descending rank (1 = busiest).

    Ties are ranked in roster order.

    Examples:
        >>> counts_frame([101, 95, 7, 105])["rank"].to_list()
        [2, 3, 4, 1]
    """
    df = pl.DataFrame(
        {"agent_id": list(range(len(counts))), "inspections": list(counts)},
        schema=COUNTS_SCHEMA,
    )
    return df.with_columns(
        pl.col("inspections").rank(method="ordinal", descending=True).cast(pl.Int64).alias("rank")
    )


def inspections_frame(events: Iterable[Inspection]) -> pl.DataFrame:
    """Tabulate Inspection events in emission order."""
    return pl.DataFrame([asdict(e) for e in events], schema=INSPECTIONS_SCHEMA)
