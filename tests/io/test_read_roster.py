from pathlib import Path

import pytest

from keepaway.core.grammar import Operator
from keepaway.io.errors import IoParseError
from keepaway.io.read import parse_agents, read_agents

EXAMPLE = Path(__file__).resolve().parents[1] / "fixtures" / "example.txt"


def _block(n: int, items: str = "1, 2", op: str = "old + 1", div: str = "7", t: str = "0", f: str = "0") -> str:
    return (
        f"Monkey {n}:\n"
        f"  Starting items: {items}\n"
        f"  Operation: new = {op}\n"
        f"  Test: divisible by {div}\n"
        f"    If true: throw to monkey {t}\n"
        f"    If false: throw to monkey {f}\n"
    )


def test_read_canonical_example() -> None:
    specs = read_agents(EXAMPLE)
    assert [s.id for s in specs] == [0, 1, 2, 3]
    assert [s.initial_items for s in specs] == [(79, 98), (54, 65, 75, 74), (79, 60, 97), (74,)]
    assert [str(s.transform) for s in specs] == ["old * 19", "old + 6", "old * old", "old + 3"]
    assert [s.divisor for s in specs] == [23, 19, 13, 17]
    assert [(s.true_target, s.false_target) for s in specs] == [(2, 3), (2, 0), (1, 3), (0, 1)]
    assert specs[2].transform.operator is Operator.MULTIPLY
    assert specs[2].transform.operand is None


def test_crlf_and_extra_blank_lines() -> None:
    text = ("\n\n" + _block(0) + "\n\n\n" + _block(1, items="5")).replace("\n", "\r\n")
    specs = parse_agents(text)
    assert len(specs) == 2
    assert specs[1].initial_items == (5,)


def test_empty_starting_items_allowed() -> None:
    [spec] = parse_agents(_block(0, items=""))
    assert spec.initial_items == ()


def test_empty_text_raises() -> None:
    with pytest.raises(IoParseError, match="no agent blocks"):
        parse_agents("\n \n")


def test_out_of_order_blocks_raise() -> None:
    with pytest.raises(IoParseError, match="expected 1, got 2") as exc:
        parse_agents(_block(0) + "\n" + _block(2))
    assert exc.value.line == 8


def test_bad_operation_reports_line() -> None:
    with pytest.raises(IoParseError, match="operator symbol") as exc:
        parse_agents(_block(0, op="old / 2"))
    assert exc.value.line == 3


def test_bad_item_reports_line() -> None:
    with pytest.raises(IoParseError, match="starting item") as exc:
        parse_agents(_block(0, items="1, x"))
    assert exc.value.line == 2


@pytest.mark.parametrize(
    "mutate,match",
    [
        (lambda b: b.replace("Test: divisible by", "Test: multiple of"), "Test: divisible by"),
        (lambda b: b.replace("If false", "Otherwise"), "If false"),
        (lambda b: b.replace("Monkey 0:", "Ape 0:"), "Monkey"),
    ],
)
def test_malformed_lines_raise(mutate, match: str) -> None:
    with pytest.raises(IoParseError, match=match):
        parse_agents(mutate(_block(0)))


def test_short_block_raises() -> None:
    text = "\n".join(_block(0).splitlines()[:5])
    with pytest.raises(IoParseError, match="must have 6 lines"):
        parse_agents(text)


def test_parser_does_not_check_roster_preconditions() -> None:
    # Range/divisor checks belong to the simulation.
    [spec] = parse_agents(_block(0, div="0", t="9"))
    assert spec.divisor == 0
    assert spec.true_target == 9
