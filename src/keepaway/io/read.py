"""
Text parser for agent rosters.

Overview
- parse_agents(): turns puzzle text into an ordered list of AgentSpec.
- read_agents(): reads a UTF-8 file and delegates to parse_agents().

Format
- One block per agent, blocks separated by one or more blank lines:

    Monkey 0:
      Starting items: 79, 98
      Operation: new = old * 19
      Test: divisible by 23
        If true: throw to monkey 2
        If false: throw to monkey 3

- Indentation is not significant; CRLF line endings are accepted.
- Block headers must number agents 0..N-1 in order, since routing addresses agents by
  roster position.

Source of truth
- Operator/operand tokens are parsed by keepaway.core.grammar.
- Records are keepaway.core.schema.AgentSpec; roster preconditions (divisor, target range)
  are checked later by the simulation, not here.

Import DAG discipline
- Depends on stdlib and keepaway.core; does not import world or lab.
"""

from __future__ import annotations

import os
import re
from pathlib import Path

from keepaway.core.errors import GrammarError
from keepaway.core.schema import AgentSpec, Transform

from .errors import IoParseError

__all__ = [
    "parse_agents",
    "read_agents",
]

_HEADER_RE = re.compile(r"^Monkey (\d+):$")
_ITEMS_RE = re.compile(r"^Starting items:(.*)$")
_OPERATION_RE = re.compile(r"^Operation: new = (.+)$")
_TEST_RE = re.compile(r"^Test: divisible by (\d+)$")
_TRUE_RE = re.compile(r"^If true: throw to monkey (\d+)$")
_FALSE_RE = re.compile(r"^If false: throw to monkey (\d+)$")

_BLOCK_LINES = 6


def _blocks(text: str) -> list[list[tuple[int, str]]]:
    # Group non-blank lines into blocks, keeping 1-based line numbers.
    blocks: list[list[tuple[int, str]]] = []
    current: list[tuple[int, str]] = []
    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line:
            if current:
                blocks.append(current)
                current = []
            continue
        current.append((lineno, line))
    if current:
        blocks.append(current)
    return blocks


def _match(pattern: re.Pattern[str], entry: tuple[int, str], what: str) -> re.Match[str]:
    lineno, line = entry
    m = pattern.match(line)
    if m is None:
        raise IoParseError(f"expected {what}, got {line!r}", line=lineno)
    return m


def _parse_items(entry: tuple[int, str], raw: str) -> tuple[int, ...]:
    body = raw.strip()
    if not body:
        return ()
    items: list[int] = []
    for tok in body.split(","):
        tok = tok.strip()
        if not (tok.isascii() and tok.isdigit()):
            raise IoParseError(f"starting item must be a non-negative integer, got {tok!r}", line=entry[0])
        items.append(int(tok))
    return tuple(items)


def _parse_block(block: list[tuple[int, str]], position: int) -> AgentSpec:
    if len(block) != _BLOCK_LINES:
        raise IoParseError(
            f"agent block must have {_BLOCK_LINES} lines, got {len(block)}", line=block[0][0]
        )
    header, items, operation, test, if_true, if_false = block

    agent_id = int(_match(_HEADER_RE, header, "'Monkey <n>:'").group(1))
    if agent_id != position:
        raise IoParseError(
            f"agent blocks must be numbered in order; expected {position}, got {agent_id}",
            line=header[0],
        )

    starting = _parse_items(items, _match(_ITEMS_RE, items, "'Starting items: ...'").group(1))
    expr = _match(_OPERATION_RE, operation, "'Operation: new = ...'").group(1)
    try:
        transform = Transform.parse(expr)
    except GrammarError as exc:
        raise IoParseError(str(exc), line=operation[0]) from exc

    return AgentSpec(
        id=agent_id,
        transform=transform,
        divisor=int(_match(_TEST_RE, test, "'Test: divisible by <n>'").group(1)),
        true_target=int(_match(_TRUE_RE, if_true, "'If true: throw to monkey <n>'").group(1)),
        false_target=int(_match(_FALSE_RE, if_false, "'If false: throw to monkey <n>'").group(1)),
        initial_items=starting,
    )


def parse_agents(text: str) -> list[AgentSpec]:
    """
    Parse puzzle text into an ordered roster.

    Args:
        text (str): Agent blocks separated by blank lines.

    Returns:
        list[AgentSpec]: Roster in block order.

    Raises:
        IoParseError: If the text is empty, a block is malformed, or blocks are out of order.

    Examples:
        >>> text = '''Monkey 0:
        ...   Starting items: 79, 98
        ...   Operation: new = old * 19
        ...   Test: divisible by 23
        ...     If true: throw to monkey 2
        ...     If false: throw to monkey 3'''
        >>> [a] = parse_agents(text)
        >>> a.initial_items, str(a.transform), a.divisor
        ((79, 98), 'old * 19', 23)
    """
    blocks = _blocks(text)
    if not blocks:
        raise IoParseError("no agent blocks found")
    return [_parse_block(block, position) for position, block in enumerate(blocks)]


def read_agents(path: str | os.PathLike[str]) -> list[AgentSpec]:
    """Read and parse a roster file (UTF-8)."""
    return parse_agents(Path(path).read_text(encoding="utf-8"))
