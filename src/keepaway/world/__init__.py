"""
keepaway.world — Deterministic round/turn loop, agent state, reducers, and scoring.

## Responsibilities
- Build AgentState from AgentSpec and drive rounds in strict roster order.
- Apply an injected WorryReducer after every transform.
- Emit Inspection events to an optional observer.
- Derive the business metric from final inspection counts.

## Public API
- simulation — Simulation class and the run() entry point.
- reducers — WorryReducer protocol, FloorDivide, ModuloComposite, make_reducer.
- state — AgentState.
- events — Inspection event and Observer alias.
- score — top_counts, monkey_business.

## Import DAG discipline
- Depends on: stdlib and keepaway.core.
- Must not import keepaway.io or keepaway.lab.

## Examples
```python
from keepaway.io.read import read_agents  # doctest: +SKIP
from keepaway.world.reducers import ModuloComposite
from keepaway.world.simulation import run
from keepaway.world.score import monkey_business

specs = read_agents("inputs/11.txt")  # doctest: +SKIP
counts = run(specs, 10_000, ModuloComposite.for_agents(specs))  # doctest: +SKIP
monkey_business(counts)  # doctest: +SKIP
```
"""

from __future__ import annotations

from .events import Inspection
from .reducers import FloorDivide, ModuloComposite, WorryReducer, make_reducer
from .score import monkey_business, top_counts
from .simulation import Simulation, run
from .state import AgentState

__all__ = [
    "AgentState",
    "FloorDivide",
    "Inspection",
    "ModuloComposite",
    "Simulation",
    "WorryReducer",
    "make_reducer",
    "monkey_business",
    "run",
    "top_counts",
]
