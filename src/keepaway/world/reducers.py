"""
Worry-reduction policies applied right after each transform.

Overview
- WorryReducer: protocol with a single ``apply(worry) -> int``.
- FloorDivide: lossy relief, ``worry // constant``. Suited to short runs.
- ModuloComposite: ``worry % modulus`` where modulus is a common multiple of every
  divisor in the roster. Suited to long runs.

Routing invariant
- Downstream code only observes ``worry % divisor == 0``. For any divisor d dividing m,
  ``(x % m) % d == x % d``, so reducing by a common multiple of all divisors leaves
  every routing decision unchanged while keeping values below ``m`` between turns.

Notes
- Python integers do not overflow; reduction bounds arithmetic cost across long runs.
- The lcm strategy gives the smallest valid modulus; "product" matches a plain product
  of divisors and is equally valid.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Literal, Protocol

from keepaway.core.constants import ModulusStrategy
from keepaway.core.schema import AgentSpec, validate_roster

__all__ = [
    "WorryReducer",
    "FloorDivide",
    "ModuloComposite",
    "ModulusStrategy",
    "ReducerKind",
    "make_reducer",
]

ReducerKind = Literal["floor", "modulo"]


class WorryReducer(Protocol):
    def apply(self, worry: int) -> int: ...


@dataclass(frozen=True)
class FloorDivide:
    """
    Floor-division relief.

    Examples:
        >>> FloorDivide(3).apply(1501)
        500
    """

    constant: int = 3

    def __post_init__(self) -> None:
        if self.constant <= 0:
            raise ValueError(f"FloorDivide constant must be positive, got {self.constant}")

    def apply(self, worry: int) -> int:
        return worry // self.constant


@dataclass(frozen=True)
class ModuloComposite:
    """
    Reduction modulo a common multiple of every divisor.

    Attributes:
        modulus (int): Positive common multiple of all divisors in the run.

    Examples:
        >>> ModuloComposite(96577).apply(96577 * 4 + 10)
        10
    """

    modulus: int

    def __post_init__(self) -> None:
        if self.modulus <= 0:
            raise ValueError(f"ModuloComposite modulus must be positive, got {self.modulus}")

    @classmethod
    def for_agents(
        cls, specs: Iterable[AgentSpec], strategy: ModulusStrategy = "lcm"
    ) -> ModuloComposite:
        """
        Build the reducer from a roster's divisors.

        Args:
            specs: Roster whose divisors must all divide the modulus.
            strategy: "lcm" (smallest valid modulus) or "product".

        Raises:
            SpecError: If the roster violates a precondition (see validate_roster).
            ValueError: If the strategy is unknown.

        Examples:
            >>> from keepaway.core.schema import AgentSpec
            >>> def mk(i, d):
            ...     return AgentSpec(id=i, transform={"operator": "+", "operand": 1},
            ...                      divisor=d, true_target=0, false_target=0)
            >>> ModuloComposite.for_agents([mk(0, 4), mk(1, 6)]).modulus
            12
            >>> ModuloComposite.for_agents([mk(0, 4), mk(1, 6)], strategy="product").modulus
            24
        """
        specs = list(specs)
        validate_roster(specs)
        divisors = [s.divisor for s in specs]
        if strategy == "lcm":
            return cls(math.lcm(*divisors))
        if strategy == "product":
            return cls(math.prod(divisors))
        raise ValueError(f"modulus strategy must be 'lcm' or 'product' (got {strategy!r})")

    def apply(self, worry: int) -> int:
        return worry % self.modulus


def make_reducer(
    kind: ReducerKind,
    specs: Iterable[AgentSpec],
    *,
    relief_divisor: int = 3,
    modulus_strategy: ModulusStrategy = "lcm",
) -> WorryReducer:
    """Select a reducer by name for config/CLI surfaces."""
    if kind == "floor":
        return FloorDivide(relief_divisor)
    if kind == "modulo":
        return ModuloComposite.for_agents(specs, strategy=modulus_strategy)
    raise ValueError(f"reducer kind must be 'floor' or 'modulo' (got {kind!r})")
