"""
Error types raised by the VAR estimation and impulse response routines.

Every error derives from ValueError, so callers that already guard VAR calls
with ``except ValueError`` keep working, and carries the dimensions or names
needed to diagnose the failure without re-deriving model state.
"""

from typing import Iterable, Optional, Sequence


class VARError(ValueError):
    """Base class for structural data/configuration problems in a VAR call."""


class InsufficientDataError(VARError):
    """Panel too short for the requested maximum lag."""

    def __init__(self, required: int, available: int, max_lag: int):
        self.required = required
        self.available = available
        self.max_lag = max_lag
        super().__init__(
            f'Lag selection up to max_lag={max_lag} needs at least {required} '
            f'observations, but the panel has {available}'
        )


class UnderdeterminedModelError(VARError):
    """Effective sample leaves no residual degrees of freedom."""

    def __init__(self, nobs: int, nparams: int, nlag: int):
        self.nobs = nobs
        self.nparams = nparams
        self.nlag = nlag
        super().__init__(
            f'VAR({nlag}) is underdetermined: effective sample T={nobs} must exceed '
            f'the {nparams} parameters per equation'
        )


class SingularDesignError(VARError):
    """Design matrix is rank deficient (collinear or degenerate regressors)."""

    def __init__(self, columns: Optional[Sequence[str]] = None):
        self.columns = list(columns) if columns else []
        if self.columns:
            detail = 'collinear regressors: ' + ', '.join(self.columns)
        else:
            detail = 'implicated regressors could not be determined'
        super().__init__(f'Design matrix X\'X is not invertible ({detail})')


class UnknownSeriesError(VARError, KeyError):
    """Requested series is not part of the model."""

    def __init__(self, name: str, available: Iterable[str]):
        self.name = name
        self.available = list(available)
        super().__init__(f'Unknown series {name!r}; available series: {self.available}')

    def __str__(self):
        return self.args[0]


class MissingAnchorError(VARError, KeyError):
    """Last observed values do not cover every series of a response."""

    def __init__(self, missing: Iterable[str]):
        self.missing = list(missing)
        super().__init__(f'No last observed value for series: {self.missing}')

    def __str__(self):
        return self.args[0]


class BootstrapError(VARError):
    """No bootstrap draw could be accepted."""

    def __init__(self, accepted: int, attempts: int):
        self.accepted = accepted
        self.attempts = attempts
        super().__init__(
            f'Bootstrap accepted {accepted} draws out of {attempts} attempts; '
            'cannot compute error bands'
        )
