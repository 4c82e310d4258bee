from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

__all__ = [
    "Inspection",
    "Observer",
]


@dataclass(frozen=True)
class Inspection:
    """One transform-reduce-route step applied to one item.

    Emitted by the simulation loop to an optional observer after the item has been
    appended to its target queue. Observers must not mutate the simulation.

    Args:
        round: Zero-based round index in which the inspection happened.
        agent: Roster index of the inspecting agent.
        before: Worry value popped from the agent's queue.
        after: Worry value after transform and reduction (the value routed).
        divisible: Outcome of ``after % divisor == 0``.
        target: Roster index of the receiving agent.

    Examples:
        >>> Inspection(round=0, agent=0, before=79, after=500, divisible=False, target=3)
        Inspection(round=0, agent=0, before=79, after=500, divisible=False, target=3)
    """

    round: int
    agent: int
    before: int
    after: int
    divisible: bool
    target: int


Observer = Callable[[Inspection], None]
