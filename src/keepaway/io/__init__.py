"""
keepaway.io — Text parsing, run configuration, and Polars reporting tables.

## Responsibilities
- Parse roster text into keepaway.core.schema.AgentSpec records.
- Load RunSettings with env > TOML > defaults precedence.
- Build Polars tables for rosters, counts, and inspection traces.

## Public API
- RunSettings — configuration for the two canonical runs.
- parse_agents / read_agents — roster parser.
- agents_frame / counts_frame / inspections_frame — reporting tables.

## Import DAG discipline
- Depends on stdlib, polars, keepaway.core, and keepaway.world.events (data-only).
- MUST NOT import keepaway.lab.
"""

from __future__ import annotations

from .config import RunSettings
from .frames import agents_frame, counts_frame, inspections_frame
from .read import parse_agents, read_agents

__all__ = [
    "RunSettings",
    "agents_frame",
    "counts_frame",
    "inspections_frame",
    "parse_agents",
    "read_agents",
]
