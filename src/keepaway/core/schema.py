"""
Pydantic v2 models for agent definitions plus roster-level precondition checks.

Responsibilities
- Define the immutable Transform and AgentSpec models supplied by the parser.
- Normalize the operator field via grammar helpers (accepts "+", "*", "add", "multiply").
- Check roster preconditions (divisor > 0, routing targets in range, non-empty roster)
  and report violations as SpecError naming the offending agent.

Style
- Zero-IO (stdlib + pydantic only).
- Models are frozen; runtime state lives in keepaway.world.state.AgentState.

References
- grammar: src/keepaway/core/grammar.py (Operator, expression helpers)
- errors: src/keepaway/core/errors.py (SpecError, GrammarError)
- tests: tests/core/*
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .errors import SpecError
from .grammar import Operator, operator_from_value, parse_expression, render_expression

__all__ = [
    "Transform",
    "AgentSpec",
    "validate_roster",
]


class Transform(BaseModel):
    """
    Arithmetic rule ``new = old <operator> <operand>`` applied on inspection.

    Attributes:
        operator (Operator): ADD or MULTIPLY.
        operand (int | None): Fixed right-hand side, or None to use the old value itself.

    Raises:
        pydantic.ValidationError: If operator is unknown or operand is negative.

    Examples:
        >>> from keepaway.core.schema import Transform
        >>> Transform(operator="*", operand=19).apply(79)
        1501
        >>> Transform(operator="multiply").apply(9)
        81
        >>> str(Transform.parse("old + 6"))
        'old + 6'
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    operator: Operator
    operand: int | None = Field(default=None, ge=0)

    @field_validator("operator", mode="before")
    @classmethod
    def _normalize_operator(cls, v: Any) -> Operator:
        return operator_from_value(v)

    @classmethod
    def parse(cls, text: str) -> Transform:
        """
        Build a Transform from an expression such as ``"old * old"``.

        Raises:
            GrammarError: If the expression is malformed.
        """
        op, operand = parse_expression(text)
        return cls(operator=op, operand=operand)

    def apply(self, worry: int) -> int:
        rhs = worry if self.operand is None else self.operand
        if self.operator is Operator.ADD:
            return worry + rhs
        return worry * rhs

    def __str__(self) -> str:
        return render_expression(self.operator, self.operand)


class AgentSpec(BaseModel):
    """
    Immutable definition of one agent.

    Attributes:
        id (int): Roster position; other agents route to this agent by this index.
        transform (Transform): Rule applied to each inspected worry value.
        divisor (int): Routing test is ``worry % divisor == 0``.
        true_target (int): Agent receiving items that pass the test.
        false_target (int): Agent receiving items that fail the test.
        initial_items (tuple[int, ...]): Starting worry values, head first.

    Notes:
        - divisor and target ranges are roster preconditions checked by validate_roster,
          so the violation can name the agent.
        - A target equal to id is accepted; the item is deferred to that agent's next turn.

    Examples:
        >>> from keepaway.core.schema import AgentSpec
        >>> spec = AgentSpec(
        ...     id=0,
        ...     transform={"operator": "*", "operand": 19},
        ...     divisor=23,
        ...     true_target=2,
        ...     false_target=3,
        ...     initial_items=[79, 98],
        ... )
        >>> spec.route(500), spec.route(46)
        (3, 2)
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: int = Field(ge=0)
    transform: Transform
    divisor: int
    true_target: int
    false_target: int
    initial_items: tuple[int, ...] = ()

    def passes(self, worry: int) -> bool:
        return worry % self.divisor == 0

    def route(self, worry: int) -> int:
        """Return the target agent for a reduced worry value."""
        return self.true_target if self.passes(worry) else self.false_target


def validate_roster(specs: Sequence[AgentSpec]) -> None:
    """
    Check the preconditions the simulation relies on.

    Args:
        specs (Sequence[AgentSpec]): Roster in routing order.

    Raises:
        SpecError: If the roster is empty, a divisor is not positive, or a routing target
            is outside ``range(len(specs))``. The error carries agent_id and field.

    Examples:
        >>> from keepaway.core.schema import AgentSpec, validate_roster
        >>> bad = AgentSpec(id=0, transform={"operator": "+", "operand": 1},
        ...                 divisor=2, true_target=0, false_target=5)
        >>> try:
        ...     validate_roster([bad])
        ... except Exception as e:
        ...     print(e)
        agent 0: false_target 5 out of range for 1 agents
    """
    if not specs:
        raise SpecError("roster must contain at least one agent")
    n = len(specs)
    for spec in specs:
        if spec.divisor <= 0:
            raise SpecError(
                f"divisor must be positive, got {spec.divisor}", agent_id=spec.id, field="divisor"
            )
        for field in ("true_target", "false_target"):
            target = getattr(spec, field)
            if not 0 <= target < n:
                raise SpecError(
                    f"{field} {target} out of range for {n} agents",
                    agent_id=spec.id,
                    field=field,
                )
