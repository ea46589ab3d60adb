"""Exception types raised by the omega-drift engine."""


class OmegaDriftError(Exception):
    """Base class for all engine errors."""


class DomainError(OmegaDriftError, ValueError):
    """An argument lies outside the domain where the formulas are defined."""


class NumericOverflowError(OmegaDriftError, ArithmeticError):
    """An evaluated quantity came out as NaN or infinite."""


__all__ = ['OmegaDriftError', 'DomainError', 'NumericOverflowError']
