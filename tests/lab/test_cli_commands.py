from __future__ import annotations

from pathlib import Path

import pytest

from keepaway.lab import cli

EXAMPLE = Path(__file__).resolve().parents[1] / "fixtures" / "example.txt"


def _run(argv: list[str]) -> int:
    with pytest.raises(SystemExit) as exc:
        cli.main(argv)
    return exc.value.code


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    for key in [
        "KEEPAWAY_PART_ONE_ROUNDS",
        "KEEPAWAY_PART_TWO_ROUNDS",
        "KEEPAWAY_RELIEF_DIVISOR",
        "KEEPAWAY_MODULUS_STRATEGY",
    ]:
        monkeypatch.delenv(key, raising=False)


def test_solve_both_parts(capsys) -> None:
    assert _run(["solve", str(EXAMPLE)]) == 0
    out = capsys.readouterr().out
    assert "[INFO] Loaded 4 agents" in out
    assert "part 1: 10605" in out
    assert "part 2: 2713310158" in out
    assert "modulo(96577, lcm)" in out


def test_solve_part_one_with_counts(capsys) -> None:
    assert _run(["solve", str(EXAMPLE), "--part", "1", "--show-counts"]) == 0
    out = capsys.readouterr().out
    assert "part 1: 10605" in out
    assert "part 2" not in out
    assert "inspections" in out


def test_solve_rounds_override_and_env(capsys, monkeypatch) -> None:
    monkeypatch.setenv("KEEPAWAY_MODULUS_STRATEGY", "product")
    assert _run(["solve", str(EXAMPLE), "--part", "2", "--rounds", "20"]) == 0
    out = capsys.readouterr().out
    # 99 * 103 after 20 rounds without relief
    assert "part 2: 10197" in out
    assert "product" in out


def test_solve_uses_toml_config(tmp_path: Path, capsys) -> None:
    (tmp_path / "keepaway.toml").write_text("[run]\npart_one_rounds = 1\n")
    assert _run(["solve", str(EXAMPLE), "--part", "1", "--show-counts"]) == 0
    out = capsys.readouterr().out
    assert "part 1: 1 rounds" in out
    # Round one counts are 2, 4, 3, 5.
    assert "part 1: 20" in out


def test_show_agents(capsys) -> None:
    assert _run(["show-agents", str(EXAMPLE)]) == 0
    out = capsys.readouterr().out
    assert "old * old" in out
    assert "divisor" in out


def test_trace_prints_inspections(capsys) -> None:
    assert _run(["trace", str(EXAMPLE), "--rounds", "1"]) == 0
    out = capsys.readouterr().out
    assert "[INFO] 14 inspections over 1 rounds" in out


def test_trace_with_modulo_reducer(capsys) -> None:
    assert _run(["trace", str(EXAMPLE), "--reducer", "modulo", "--n", "3"]) == 0
    out = capsys.readouterr().out
    # Round one counts without relief are 2, 4, 3, 6.
    assert "[INFO] 15 inspections over 1 rounds" in out


def test_missing_input_reports_error(tmp_path: Path, capsys) -> None:
    assert _run(["solve", str(tmp_path / "missing.txt")]) == 2
    assert "[ERROR] input not found" in capsys.readouterr().err


def test_invalid_roster_reports_agent(tmp_path: Path, capsys) -> None:
    bad = tmp_path / "bad.txt"
    bad.write_text(EXAMPLE.read_text().replace("throw to monkey 3", "throw to monkey 9", 1))
    assert _run(["solve", str(bad), "--part", "1"]) == 2
    assert "[ERROR] agent 0: false_target 9 out of range" in capsys.readouterr().err


def test_parse_error_reports_line(tmp_path: Path, capsys) -> None:
    bad = tmp_path / "bad.txt"
    bad.write_text(EXAMPLE.read_text().replace("old * 19", "old ^ 19"))
    assert _run(["show-agents", str(bad)]) == 2
    assert "[ERROR] line 3:" in capsys.readouterr().err


def test_unknown_command(capsys) -> None:
    assert _run(["explode"]) == 2
    assert "Unknown command" in capsys.readouterr().err


def test_no_args_prints_help(capsys) -> None:
    cli.main([])
    assert "keepaway" in capsys.readouterr().out


def _zero_divisor_roster(tmp_path: Path) -> Path:
    bad = tmp_path / "zero.txt"
    bad.write_text(EXAMPLE.read_text().replace("divisible by 19", "divisible by 0"))
    return bad


@pytest.mark.parametrize(
    "argv",
    [
        ["solve", "--part", "2"],
        ["solve", "--part", "both"],
        ["trace", "--reducer", "modulo"],
    ],
)
def test_zero_divisor_reports_agent_under_modulo(tmp_path: Path, capsys, argv: list[str]) -> None:
    bad = _zero_divisor_roster(tmp_path)
    assert _run([argv[0], str(bad), *argv[1:]]) == 2
    assert "[ERROR] agent 1: divisor must be positive, got 0" in capsys.readouterr().err


def test_zero_divisor_with_product_strategy(tmp_path: Path, capsys, monkeypatch) -> None:
    monkeypatch.setenv("KEEPAWAY_MODULUS_STRATEGY", "product")
    bad = _zero_divisor_roster(tmp_path)
    assert _run(["solve", str(bad), "--part", "2"]) == 2
    assert "[ERROR] agent 1: divisor" in capsys.readouterr().err


def test_trace_rejects_negative_row_limit(capsys) -> None:
    assert _run(["trace", str(EXAMPLE), "--n", "-1"]) == 2
    assert "--n must be non-negative" in capsys.readouterr().err


def test_single_agent_roster_warns(tmp_path: Path, capsys) -> None:
    solo = tmp_path / "solo.txt"
    solo.write_text(
        "Monkey 0:\n"
        "  Starting items: 5, 7\n"
        "  Operation: new = old + 1\n"
        "  Test: divisible by 2\n"
        "    If true: throw to monkey 0\n"
        "    If false: throw to monkey 0\n"
    )
    assert _run(["solve", str(solo), "--part", "1", "--rounds", "1"]) == 0
    captured = capsys.readouterr()
    assert "[WARN] fewer than two agents" in captured.err
    assert "part 1: 2" in captured.out
