"""
Round/turn loop for the item-passing simulation.

Ordering contract
- Within a round, agents take turns in ascending roster order.
- At the start of agent i's turn, the number of items to inspect is fixed to the current
  queue length. Items appended to agent i's queue later in that turn wait for its next
  turn.
- Consequently, an item routed from i to j > i is inspected by j in the same round, and
  an item routed from i to j < i is inspected by j in the next round.

Import DAG discipline
- Depends on stdlib and keepaway.core only; performs no IO.

Examples
--------
>>> from keepaway.core.schema import AgentSpec
>>> from keepaway.world.reducers import FloorDivide
>>> a = AgentSpec(id=0, transform={"operator": "+", "operand": 0}, divisor=1,
...               true_target=1, false_target=1, initial_items=[9])
>>> b = AgentSpec(id=1, transform={"operator": "+", "operand": 0}, divisor=1,
...               true_target=0, false_target=0)
>>> run([a, b], rounds=2, reducer=FloorDivide(1))
[2, 2]
"""

from __future__ import annotations

from collections.abc import Sequence

from keepaway.core.schema import AgentSpec, validate_roster

from .events import Inspection, Observer
from .reducers import WorryReducer
from .state import AgentState

__all__ = [
    "Simulation",
    "run",
]


class Simulation:
    """
    Owns the agent states of one run and is the only component mutating them.

    Args:
        specs (Sequence[AgentSpec]): Roster in routing order.

    Raises:
        SpecError: If the roster violates a precondition (see validate_roster).
    """

    def __init__(self, specs: Sequence[AgentSpec]) -> None:
        validate_roster(specs)
        self.specs: tuple[AgentSpec, ...] = tuple(specs)
        self.states: list[AgentState] = [AgentState.from_spec(s) for s in self.specs]
        self.round_idx = 0

    @property
    def inspection_counts(self) -> list[int]:
        return [s.inspections for s in self.states]

    @property
    def queue_lengths(self) -> list[int]:
        return [len(s.queue) for s in self.states]

    @property
    def items_held(self) -> int:
        return sum(self.queue_lengths)

    def _take_turn(self, i: int, reducer: WorryReducer, observer: Observer | None) -> None:
        state = self.states[i]
        spec = state.spec
        queue = state.queue
        for _ in range(len(queue)):
            before = queue.popleft()
            after = reducer.apply(spec.transform.apply(before))
            state.inspections += 1
            target = spec.route(after)
            self.states[target].queue.append(after)
            if observer is not None:
                observer(
                    Inspection(
                        round=self.round_idx,
                        agent=i,
                        before=before,
                        after=after,
                        divisible=spec.passes(after),
                        target=target,
                    )
                )

    def step(self, reducer: WorryReducer, observer: Observer | None = None) -> None:
        """Advance one round: every agent takes one turn, in roster order."""
        for i in range(len(self.states)):
            self._take_turn(i, reducer, observer)
        self.round_idx += 1

    def run(
        self, rounds: int, reducer: WorryReducer, observer: Observer | None = None
    ) -> list[int]:
        """
        Advance ``rounds`` rounds and return the inspection counts.

        Args:
            rounds (int): Number of rounds to play (>= 0).
            reducer (WorryReducer): Policy applied after each transform.
            observer (Observer | None): Optional callback receiving each Inspection.

        Returns:
            list[int]: Inspection counts indexed like the roster.
        """
        if rounds < 0:
            raise ValueError(f"rounds must be non-negative, got {rounds}")
        for _ in range(rounds):
            self.step(reducer, observer)
        return self.inspection_counts


def run(
    agents: Sequence[AgentSpec],
    rounds: int,
    reducer: WorryReducer,
    observer: Observer | None = None,
) -> list[int]:
    """Run a fresh simulation over ``agents`` and return per-agent inspection counts."""
    return Simulation(agents).run(rounds, reducer, observer)
