from __future__ import annotations


class RiskEngineError(Exception):
    """Base class for failures raised by the scoring engine and plan generator."""


class MalformedInputError(RiskEngineError, ValueError):
    """A required record field is missing or holds the wrong primitive kind."""


class NumericDomainError(RiskEngineError, ArithmeticError):
    """A computed value left the finite domain (NaN or infinity)."""
