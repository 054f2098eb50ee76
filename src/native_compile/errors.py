# src/native_compile/errors.py
"""Error taxonomy.

Only ConfigurationError is meant to cross the resolution boundary.
Missing configuration and unresolvable expressions are reported as None.
"""

from typing import Any


class NativeCompileError(Exception):
    """Base class for errors raised by native_compile."""


class ConfigurationError(NativeCompileError, ValueError):
    """The requested configuration cannot be satisfied by the toolchain.

    Aborts the goal. ``requirement`` names the unmet capability,
    ``required`` and ``actual`` describe the mismatch.
    """

    def __init__(
        self,
        message: str,
        *,
        requirement: str,
        required: Any = None,
        actual: Any = None,
    ) -> None:
        super().__init__(message)
        self.requirement = requirement
        self.required = required
        self.actual = actual


class ExpressionEvaluationError(NativeCompileError):
    """An expression could not be evaluated (unknown property, bad syntax)."""
