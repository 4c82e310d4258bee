"""Mutable per-run agent state."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field

from keepaway.core.schema import AgentSpec

__all__ = ["AgentState"]


@dataclass
class AgentState:
    """
    Runtime wrapper around an AgentSpec for one simulation run.

    Attributes:
        spec (AgentSpec): Immutable definition this state was built from.
        queue (deque[int]): Worry values held by the agent, head first. Only the owner's
            turn pops from the head; routed items are appended to the tail.
        inspections (int): Items inspected so far; never decreases.

    Examples:
        >>> from keepaway.core.schema import AgentSpec
        >>> spec = AgentSpec(id=0, transform={"operator": "+", "operand": 3},
        ...                  divisor=17, true_target=1, false_target=1, initial_items=[74])
        >>> AgentState.from_spec(spec)
        AgentState(id=0, queue=[74], inspections=0)
    """

    spec: AgentSpec
    queue: deque[int] = field(default_factory=deque)
    inspections: int = 0

    @classmethod
    def from_spec(cls, spec: AgentSpec) -> AgentState:
        return cls(spec=spec, queue=deque(spec.initial_items))

    def __repr__(self) -> str:
        return f"AgentState(id={self.spec.id}, queue={list(self.queue)}, inspections={self.inspections})"
