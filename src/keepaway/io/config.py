"""
Configuration for keepaway runs.

Defines RunSettings, a frozen dataclass carrying the round counts and reducer parameters
of the two canonical runs. Defaults are sourced from keepaway.core.constants (the single
source of truth).

Source of truth
- keepaway.core.constants.PART_ONE_ROUNDS, PART_TWO_ROUNDS, RELIEF_DIVISOR, MODULUS_STRATEGY

Precedence
- environment (KEEPAWAY_*) > TOML (keepaway.toml [run], or pyproject.toml
  [tool.keepaway.run]) > defaults.

Import DAG discipline
- Depends only on stdlib, keepaway.core.constants, and keepaway.io.errors.
- Does not import higher layers (world, lab).
"""

from __future__ import annotations

import os
import re
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from keepaway.core.constants import MODULUS_STRATEGY as CORE_MODULUS_STRATEGY
from keepaway.core.constants import PART_ONE_ROUNDS as CORE_PART_ONE_ROUNDS
from keepaway.core.constants import PART_TWO_ROUNDS as CORE_PART_TWO_ROUNDS
from keepaway.core.constants import RELIEF_DIVISOR as CORE_RELIEF_DIVISOR
from keepaway.core.constants import ModulusStrategy

from .errors import IoConfigError

_STRATEGIES = ("lcm", "product")
_INT_RE = re.compile(r"[+-]?\d+")


@dataclass(frozen=True)
class RunSettings:
    """
    Runtime settings for the two canonical runs.

    Attributes:
        part_one_rounds (int): Rounds for the floor-division run (>= 0).
        part_two_rounds (int): Rounds for the composite-modulus run (>= 0).
        relief_divisor (int): FloorDivide constant (>= 1).
        modulus_strategy (Literal["lcm","product"]): How ModuloComposite combines divisors.

    Raises:
        IoConfigError: If a value is out of range.

    Examples:
        >>> RunSettings(part_one_rounds=5)  # doctest: +ELLIPSIS
        RunSettings(part_one_rounds=5, ...)
    """

    part_one_rounds: int = CORE_PART_ONE_ROUNDS
    part_two_rounds: int = CORE_PART_TWO_ROUNDS
    relief_divisor: int = CORE_RELIEF_DIVISOR
    modulus_strategy: ModulusStrategy = CORE_MODULUS_STRATEGY

    def __post_init__(self) -> None:
        if self.part_one_rounds < 0:
            raise IoConfigError(f"part_one_rounds must be >= 0, got {self.part_one_rounds}")
        if self.part_two_rounds < 0:
            raise IoConfigError(f"part_two_rounds must be >= 0, got {self.part_two_rounds}")
        if self.relief_divisor < 1:
            raise IoConfigError(f"relief_divisor must be >= 1, got {self.relief_divisor}")
        if self.modulus_strategy not in _STRATEGIES:
            raise IoConfigError(
                f"modulus_strategy must be one of {list(_STRATEGIES)}, got {self.modulus_strategy!r}"
            )

    # Configuration loaders (env/TOML) with precedence: env > TOML > defaults.

    @classmethod
    def _apply_mapping(cls, base: RunSettings, cfg: dict[str, Any] | None) -> RunSettings:
        """Apply a loose config mapping onto RunSettings, returning a new instance."""
        if not isinstance(cfg, dict):
            return base

        s = base

        def _int(key: str) -> int:
            # TOML floats and booleans are not accepted; env values arrive as strings.
            v = cfg[key]
            if isinstance(v, int) and not isinstance(v, bool):
                return v
            if isinstance(v, str) and _INT_RE.fullmatch(v.strip()):
                return int(v.strip())
            raise IoConfigError(f"{key} must be an integer, got {v!r}")

        for key in ("part_one_rounds", "part_two_rounds", "relief_divisor"):
            if key in cfg:
                s = replace(s, **{key: _int(key)})

        if "modulus_strategy" in cfg:
            strategy = str(cfg["modulus_strategy"]).strip().lower()
            s = replace(s, modulus_strategy=strategy)  # type: ignore[arg-type]

        return s

    @classmethod
    def from_env(cls, base: RunSettings | None = None, prefix: str = "KEEPAWAY_") -> RunSettings:
        """
        Build RunSettings from environment variables. Precedence is env > base (if provided) > defaults.

        Recognized variables:
            - KEEPAWAY_PART_ONE_ROUNDS
            - KEEPAWAY_PART_TWO_ROUNDS
            - KEEPAWAY_RELIEF_DIVISOR
            - KEEPAWAY_MODULUS_STRATEGY ("lcm" | "product")
        """
        s = base or cls()

        mapping: dict[str, Any] = {}
        for key in ("part_one_rounds", "part_two_rounds", "relief_divisor", "modulus_strategy"):
            v = os.getenv(prefix + key.upper())
            if v:
                mapping[key] = v

        return cls._apply_mapping(s, mapping)

    @classmethod
    def from_toml(cls, path: str | os.PathLike[str] | None = None) -> RunSettings:
        """
        Build RunSettings from a TOML file.

        Search order when `path` is None:
            1) ./keepaway.toml (with either a [run] table or direct keys)
            2) ./pyproject.toml under [tool.keepaway.run]

        Returns defaults if no file is present. An explicit `path` that cannot be read or
        parsed raises IoConfigError.
        """
        s = cls()

        cand: list[Path] = []
        if path is not None:
            p = Path(path)
            if not p.exists():
                raise IoConfigError(f"config file not found: {p}")
            cand.append(p)
        else:
            cand.append(Path.cwd() / "keepaway.toml")
            cand.append(Path.cwd() / "pyproject.toml")

        cfg: dict[str, Any] | None = None
        for p in cand:
            if not p.exists():
                continue
            try:
                with p.open("rb") as fh:
                    data = tomllib.load(fh)
            except tomllib.TOMLDecodeError as exc:
                raise IoConfigError(f"invalid TOML in {p}: {exc}") from exc
            if p.name == "pyproject.toml":
                # Expect [tool.keepaway.run]
                cfg = data
                for key in ("tool", "keepaway", "run"):
                    cfg = cfg.get(key) if isinstance(cfg, dict) else None
            elif isinstance(data.get("run"), dict):
                cfg = data["run"]
            else:
                cfg = data
            if cfg:
                break

        return cls._apply_mapping(s, cfg)

    @classmethod
    def load(cls, path: str | os.PathLike[str] | None = None) -> RunSettings:
        """
        Load RunSettings applying precedence: environment > TOML > defaults.

        Args:
            path: Optional explicit TOML path. If None, search defaults (keepaway.toml, pyproject.toml).
        """
        s = cls.from_toml(path)
        s = cls.from_env(base=s)
        return s
