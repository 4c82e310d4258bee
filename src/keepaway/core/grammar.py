"""
Canonical transform grammar and helpers.

Defines the binary operators an agent applies to a worry value and the operand tokens
of the ``new = old OP operand`` expression. Includes zero-IO normalization helpers used
by keepaway.core.schema validators and the text parser in keepaway.io.read.

Responsibilities
- Define the Operator enum (serialized values are lower_snake).
- Map between operator symbols ("+", "*") and Operator members.
- Parse and render operand tokens ("old" or a non-negative integer literal).

Design principles
-----------------
1) One naming standard:
   - Enum classes: PascalCase
   - Enum member names: UPPER_SNAKE
   - Enum serialized values: lower_snake ("add", "multiply")
   - Symbols appear only at the text boundary.

2) The left-hand side of every expression is the old value. An operand of ``None``
   means the right-hand side is the old value too (``old * old``, ``old + old``).

Examples
--------
>>> from keepaway.core.grammar import Operator, operator_from_value, parse_expression
>>> operator_from_value("*") is Operator.MULTIPLY
True
>>> operator_from_value("add") is Operator.ADD
True
>>> parse_expression("old * old")
(<Operator.MULTIPLY: 'multiply'>, None)
>>> parse_expression("old + 6")
(<Operator.ADD: 'add'>, 6)
>>> render_expression(Operator.MULTIPLY, 19)
'old * 19'
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Final

from .errors import GrammarError

__all__ = [
    "Operator",
    "OLD",
    "operator_from_value",
    "operator_symbol",
    "parse_operand",
    "render_operand",
    "parse_expression",
    "render_expression",
]

OLD: Final[str] = "old"

_LITERAL_RE = re.compile(r"^\d+$")
_EXPRESSION_RE = re.compile(r"^\s*(\S+)\s+(\S+)\s+(\S+)\s*$")


class Operator(Enum):
    """
    Binary operators available to an agent's transform.

    Serialized values appear in:
      - AgentSpec.transform.operator
      - keepaway.io.frames.agents_frame "operator" column
    """

    ADD = "add"
    MULTIPLY = "multiply"


_SYMBOLS: Final[dict[Operator, str]] = {
    Operator.ADD: "+",
    Operator.MULTIPLY: "*",
}
_BY_SYMBOL: Final[dict[str, Operator]] = {sym: op for op, sym in _SYMBOLS.items()}


def operator_symbol(op: Operator) -> str:
    """
    Get the text symbol for an Operator.

    Args:
      op (Operator): Operator enum.

    Returns:
      str: "+" or "*".
    """
    return _SYMBOLS[op]


def operator_from_value(s: str | Operator) -> Operator:
    """
    Parse an operator from its serialized value or its symbol.

    Args:
      s (str | Operator): "add", "multiply", "+", "*", or an Operator member.

    Returns:
      Operator: Parsed operator.

    Raises:
      GrammarError: If s is neither a known value nor a known symbol.
    """
    if isinstance(s, Operator):
        return s
    token = (s or "").strip()
    if token in _BY_SYMBOL:
        return _BY_SYMBOL[token]
    try:
        return Operator(token.lower())
    except ValueError as exc:
        allowed = sorted([o.value for o in Operator] + list(_BY_SYMBOL))
        raise GrammarError(f"operator must be one of {allowed} (got {s!r})") from exc


def parse_operand(token: str) -> int | None:
    """
    Parse an operand token.

    Args:
      token (str): "old" or a non-negative integer literal.

    Returns:
      int | None: The literal value, or None for "old".

    Raises:
      GrammarError: If token is neither "old" nor a non-negative integer literal.
    """
    t = (token or "").strip()
    if t == OLD:
        return None
    if not _LITERAL_RE.match(t):
        raise GrammarError(f"operand must be 'old' or a non-negative integer (got {token!r})")
    return int(t)


def render_operand(operand: int | None) -> str:
    return OLD if operand is None else str(operand)


def parse_expression(text: str) -> tuple[Operator, int | None]:
    """
    Parse the right-hand side of ``new = <expression>``.

    Args:
      text (str): Expression such as "old * 19" or "old + old".

    Returns:
      tuple[Operator, int | None]: Operator and operand (None means the old value).

    Raises:
      GrammarError: If the expression is not ``old <op> <operand>``.
    """
    m = _EXPRESSION_RE.match(text or "")
    if not m:
        raise GrammarError(f"expression must look like 'old <op> <operand>' (got {text!r})")
    lhs, sym, rhs = m.groups()
    if lhs != OLD:
        raise GrammarError(f"expression must start with {OLD!r} (got {lhs!r})")
    if sym not in _BY_SYMBOL:
        raise GrammarError(f"operator symbol must be one of {sorted(_BY_SYMBOL)} (got {sym!r})")
    return _BY_SYMBOL[sym], parse_operand(rhs)


def render_expression(op: Operator, operand: int | None) -> str:
    return f"{OLD} {operator_symbol(op)} {render_operand(operand)}"
