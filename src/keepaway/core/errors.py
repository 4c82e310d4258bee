"""
Core exception types raised by grammar parsing and roster validation.

Provides typed exceptions for core-domain failures:
- GrammarError for unknown operator symbols or operand tokens.
- SpecError for roster preconditions (non-positive divisor, out-of-range routing target,
  empty roster). Carries the offending agent id and field name.

Notes:
    - This module uses only the Python standard library and has no side effects.
    - keepaway.world.simulation.Simulation calls keepaway.core.schema.validate_roster, so
      every precondition violation surfaces as SpecError before the first round.

Examples:
    Inspect the offending agent of a roster failure.

    >>> from keepaway.core.errors import SpecError
    >>> err = SpecError("divisor must be positive, got 0", agent_id=3, field="divisor")
    >>> err.agent_id, err.field
    (3, 'divisor')
    >>> str(err)
    'agent 3: divisor must be positive, got 0'
"""

from __future__ import annotations

__all__ = [
    "GrammarError",
    "SpecError",
]


class GrammarError(ValueError):
    """Operator/operand token failure (e.g., unknown symbol in ``new = old % 3``)."""


class SpecError(ValueError):
    """
    Roster precondition failure attributable to the caller or parser.

    Attributes:
        agent_id (int | None): Id of the offending agent, or None for roster-wide failures.
        field (str | None): Name of the offending AgentSpec field, when applicable.
    """

    def __init__(self, message: str, *, agent_id: int | None = None, field: str | None = None):
        self.agent_id = agent_id
        self.field = field
        prefix = f"agent {agent_id}: " if agent_id is not None else ""
        super().__init__(prefix + message)
