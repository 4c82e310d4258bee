"""
Keepaway run defaults.

Defines the round counts and relief divisor of the two canonical runs. Consumed by
keepaway.io.config (RunSettings defaults) and the CLI. This module is zero-IO and uses
only the Python standard library.

Notes:
    - Part one uses floor-division relief over a short run.
    - Part two uses composite-modulus reduction over a long run.
    - Changing these values changes the canonical answers; override through
      RunSettings instead.
"""

from __future__ import annotations

from typing import Literal

__all__ = [
    "ModulusStrategy",
    "PART_ONE_ROUNDS",
    "PART_TWO_ROUNDS",
    "RELIEF_DIVISOR",
    "MODULUS_STRATEGY",
]

# Rounds simulated for the floor-division run.
PART_ONE_ROUNDS: int = 20

# Rounds simulated for the composite-modulus run.
PART_TWO_ROUNDS: int = 10_000

# Constant applied by FloorDivide after each transform.
RELIEF_DIVISOR: int = 3

# How ModuloComposite combines divisors.
ModulusStrategy = Literal["lcm", "product"]
MODULUS_STRATEGY: ModulusStrategy = "lcm"
