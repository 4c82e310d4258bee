"""
Custom exceptions for the keepaway.io module.

Purpose
- Provide IO-layer specific error types that map cleanly to responsibilities in keepaway.io.
- Keep keepaway.core as the source of truth for grammar/roster errors (see keepaway.core.errors).

Source of truth and boundaries
- keepaway.core.errors.GrammarError and SpecError are raised by core helpers/validators.
- keepaway.io raises Io* errors for text/config concerns:
  - IoParseError: puzzle text does not follow the agent block format.
  - IoConfigError: invalid or unsupported run configuration.

Notes
- These exceptions do not perform any IO and are stdlib-only.
"""

from __future__ import annotations


class IoError(Exception):
    """
    Base class for IO-related errors in keepaway.io.

    Notes:
        Use this as a catch-all for IO-layer failures, distinct from keepaway.core errors.
    """


class IoParseError(IoError):
    """
    Raised when puzzle text cannot be turned into AgentSpec records.

    Attributes:
        line (int | None): 1-based line number of the offending line, when known.
    """

    def __init__(self, message: str, *, line: int | None = None):
        self.line = line
        prefix = f"line {line}: " if line is not None else ""
        super().__init__(prefix + message)


class IoConfigError(IoError):
    """
    Raised when run configuration is invalid or unsupported.

    Examples:
        - Non-positive relief divisor
        - Unknown modulus strategy
    """
