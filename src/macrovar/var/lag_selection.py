"""
Lag order selection by information criteria.

Every candidate VAR(p), p = 1..max_lag, is fitted on the same effective sample
(the last N - max_lag observations) so the criteria compare like with like.
With ld = log det(Sigma), n = 1 + K*p regressors per equation and T the common
sample size:

    AIC = ld + 2/T * K*n
    HQ  = ld + 2 log(log T)/T * K*n
    SC  = ld + log(T)/T * K*n
    FPE = ((T + n) / (T - n))**K * det(Sigma)

See Lütkepohl (2005), pp. 146-150.
"""

from dataclasses import dataclass
from typing import Dict

import numpy as np
import pandas as pd

from ..auxiliary import logdet_symm
from ..errors import InsufficientDataError
from ..utils.data_handling import table_print
from .model import estimate
from .options import CRITERIA, CRITERION_ALIASES
from .panel import Panel


def information_criteria(sigma: np.ndarray, nobs: int, nvar: int, nlag: int) -> Dict[str, float]:
    """Information criteria of a VAR(nlag) from its MLE residual covariance.

    Args:
        sigma: Residual covariance with divisor T (nvar x nvar)
        nobs: Effective sample size T
        nvar: Number of series K
        nlag: Lag order p

    Returns:
        Dictionary with keys 'aic', 'hq', 'sc', 'fpe'
    """
    ld = logdet_symm(np.asarray(sigma))
    ncoeff = 1 + nvar * nlag
    free_params = nvar * ncoeff

    return {
        'aic': ld + (2. / nobs) * free_params,
        'hq': ld + (2. * np.log(np.log(nobs)) / nobs) * free_params,
        'sc': ld + (np.log(nobs) / nobs) * free_params,
        'fpe': ((nobs + ncoeff) / (nobs - ncoeff)) ** nvar * np.exp(ld),
    }


@dataclass(frozen=True, eq=False)
class SelectionResult:
    """Scores of every candidate lag and the lag each criterion recommends."""
    ics: pd.DataFrame
    logdets: pd.Series
    sigmas: Dict[int, np.ndarray]
    nobs: int
    nvar: int
    max_lag: int

    @property
    def selected_orders(self) -> Dict[str, int]:
        # idxmin returns the first minimum, i.e. the smaller lag on ties
        return {crit: int(self.ics[crit].idxmin()) for crit in CRITERIA}

    @property
    def aic(self) -> int:
        return self.selected_orders['aic']

    @property
    def hq(self) -> int:
        return self.selected_orders['hq']

    @property
    def sc(self) -> int:
        return self.selected_orders['sc']

    @property
    def fpe(self) -> int:
        return self.selected_orders['fpe']

    def get(self, criterion: str) -> int:
        """Lag chosen by ``criterion`` ('aic', 'hq'/'hqic', 'sc'/'bic', 'fpe')."""
        key = CRITERION_ALIASES.get(criterion.lower())
        if key is None:
            raise ValueError(f'Unknown criterion {criterion!r}; choose one of {CRITERIA}')
        return self.selected_orders[key]

    def summary(self) -> str:
        marks = {crit: lag - 1 for crit, lag in self.selected_orders.items()}
        title = (f'VAR order selection (* highlights the minimums), '
                 f'T={self.nobs}, K={self.nvar}')
        return table_print(self.ics, title=title, marks=marks)


def select_lag(panel: Panel, max_lag: int) -> SelectionResult:
    """Score VAR(1)..VAR(max_lag) on a common sample and pick a lag per criterion.

    Args:
        panel: Cleaned multivariate time series
        max_lag: Largest candidate lag (>= 1)

    Returns:
        SelectionResult

    Raises:
        InsufficientDataError: if the panel leaves no residual degrees of
            freedom for the largest candidate
    """
    if max_lag < 1:
        raise ValueError(f'max_lag must be >= 1, got {max_lag}')

    nobs, nvar = panel.nobs, panel.nvar
    required = (nvar + 1) * max_lag + 2
    if nobs < required:
        raise InsufficientDataError(required, nobs, max_lag)

    rows = []
    logdets = []
    sigmas = {}
    for p in range(1, max_lag + 1):
        # exclude some periods so the same observations are used for each lag order
        offset = max_lag - p
        result = estimate(panel.values[offset:], p, panel.names, panel.index[offset:])
        sigma = result.sigma.values
        sigmas[p] = sigma
        logdets.append(logdet_symm(sigma))
        rows.append(information_criteria(sigma, result.nobs, nvar, p))

    lags = pd.RangeIndex(1, max_lag + 1, name='lag')
    return SelectionResult(
        ics=pd.DataFrame(rows, index=lags, columns=list(CRITERIA)),
        logdets=pd.Series(logdets, index=lags, name='logdet'),
        sigmas=sigmas,
        nobs=nobs - max_lag,
        nvar=nvar,
        max_lag=max_lag,
    )
