"""
Vector Autoregression (VAR) Model Implementation.

This module estimates a VAR(p) with a constant by multivariate OLS. Each of the
K equations regresses one series on a constant and the last p values of every
series; because the equations share one design matrix they are solved jointly:

    Y = X B + U,    B = (X'X)^-1 X'Y,    Sigma = U'U / T

where T = N - p is the effective sample size.
"""

from dataclasses import dataclass
from functools import cached_property
from typing import Dict, Optional, Sequence, Tuple

import numpy as np
import pandas as pd
from ..auxiliary import ols, tdis_prb
from ..errors import UnderdeterminedModelError, UnknownSeriesError
from ..utils.data_handling import table_print
from ..utils.var import VARUtils
from .panel import Panel


@dataclass(frozen=True, eq=False)
class FittedVAR:
    """Estimated VAR(p) model.

    Attributes:
        names: Series names, in equation order
        nlag: Lag order p
        nobs: Effective number of observations T = N - p
        params: Coefficients ((1 + K*p) x K); rows 'const', 'L1.<name>', ...,
            one column per equation
        sigma: Residual covariance U'U / T (K x K)
        resid: Residuals (T x K), indexed by the effective sample
        fittedvalues: In-sample fitted values X B (T x K)
        xpxi: (X'X)^-1 of the design matrix
        endog: The full sample the model was fitted on (N x K)
    """
    names: Tuple[str, ...]
    nlag: int
    nobs: int
    params: pd.DataFrame
    sigma: pd.DataFrame
    resid: pd.DataFrame
    fittedvalues: pd.DataFrame
    xpxi: np.ndarray
    endog: pd.DataFrame

    @property
    def nvar(self) -> int:
        return len(self.names)

    @property
    def ncoeff(self) -> int:
        """Number of parameters per equation (1 + K*p)."""
        return 1 + self.nvar * self.nlag

    @property
    def df_resid(self) -> int:
        return self.nobs - self.ncoeff

    @property
    def index(self) -> pd.Index:
        return self.resid.index

    def position(self, name: str) -> int:
        try:
            return self.names.index(name)
        except ValueError:
            raise UnknownSeriesError(name, self.names) from None

    @property
    def equations(self) -> Dict[str, pd.Series]:
        """Coefficients of each equation, keyed by the explained series."""
        return {name: self.params[name].copy() for name in self.names}

    @property
    def intercept(self) -> pd.Series:
        return self.params.loc['const'].copy()

    @cached_property
    def coefs(self) -> np.ndarray:
        """Lag matrices A_1..A_p (p x K x K); ``coefs[j-1][r, c]`` is the effect of c at lag j on r."""
        return VARUtils.get_lag_coefs_matrices(self.params)

    @cached_property
    def companion(self) -> np.ndarray:
        return VARUtils.compute_companion_matrix(self.params.values, self.nvar, self.nlag)

    @cached_property
    def max_eig(self) -> float:
        return VARUtils.max_eigenvalue(self.companion)

    @property
    def is_stable(self) -> bool:
        """All companion eigenvalues lie inside the unit circle."""
        return self.max_eig < 1

    @property
    def sigma_u(self) -> pd.DataFrame:
        """Degrees-of-freedom adjusted residual covariance U'U / (T - 1 - K*p)."""
        return self.sigma * self.nobs / self.df_resid

    @cached_property
    def cov_params(self) -> np.ndarray:
        """Covariance of vec(B') = kron((X'X)^-1, sigma_u)."""
        return np.kron(self.xpxi, self.sigma_u.values)

    @property
    def stderr(self) -> pd.DataFrame:
        se = np.sqrt(np.outer(np.diag(self.xpxi), np.diag(self.sigma_u.values)))
        return pd.DataFrame(se, index=self.params.index, columns=self.params.columns)

    @property
    def tvalues(self) -> pd.DataFrame:
        return self.params / self.stderr

    @property
    def pvalues(self) -> pd.DataFrame:
        p = tdis_prb(self.tvalues.values, self.df_resid)
        return pd.DataFrame(p, index=self.params.index, columns=self.params.columns)

    def summary(self) -> str:
        """Text summary: coefficient table per equation and residual covariance."""
        blocks = [
            f'VAR({self.nlag}) estimated by OLS',
            f'Series: {", ".join(self.names)}',
            f'Effective observations: {self.nobs}    Max |eigenvalue|: {self.max_eig:.4f}',
            '',
        ]
        for name in self.names:
            eq = pd.DataFrame({
                'coef': self.params[name],
                'std err': self.stderr[name],
                't': self.tvalues[name],
                'P>|t|': self.pvalues[name],
            })
            blocks.append(table_print(eq, title=f'Equation {name}'))
            blocks.append('')
        blocks.append(table_print(self.sigma, title='Residual covariance (divisor T)', precision=6))
        return '\n'.join(blocks)


def _check_dimensions(nobs: int, nvar: int, nlag: int) -> None:
    if nlag < 1:
        raise ValueError(f'Lag order must be >= 1, got {nlag}')
    nparams = 1 + nvar * nlag
    if nobs - nlag <= nparams:
        raise UnderdeterminedModelError(nobs - nlag, nparams, nlag)


def estimate(data: np.ndarray, nlag: int, names: Sequence[str],
             index: Optional[pd.Index] = None) -> FittedVAR:
    """Estimate a VAR(nlag) on a raw (nobs x nvar) array.

    Shared by :func:`fit`, the lag selector (on trimmed samples) and the
    bootstrap (on artificial samples).
    """
    nobs, nvar = data.shape
    _check_dimensions(nobs, nvar, nlag)
    if index is None:
        index = pd.RangeIndex(nobs)

    Y, X = VARUtils.var_make_xy(data, nlag)
    cols = VARUtils.regressor_names(names, nlag)
    results = ols(Y, X, names=cols)

    T = nobs - nlag
    resid = results['resid']
    sigma = resid.T @ resid / T
    sigma = (sigma + sigma.T) / 2

    names = tuple(names)
    columns = list(names)
    return FittedVAR(
        names=names,
        nlag=nlag,
        nobs=T,
        params=pd.DataFrame(results['beta'], index=cols, columns=columns),
        sigma=pd.DataFrame(sigma, index=columns, columns=columns),
        resid=pd.DataFrame(resid, index=index[nlag:], columns=columns),
        fittedvalues=pd.DataFrame(results['yhat'], index=index[nlag:], columns=columns),
        xpxi=results['xpxi'],
        endog=pd.DataFrame(np.array(data, dtype=float), index=index, columns=columns),
    )


def fit(panel: Panel, p: int) -> FittedVAR:
    """Estimate a VAR(p) with constant on the panel.

    Args:
        panel: Cleaned multivariate time series
        p: Lag order (>= 1)

    Returns:
        FittedVAR

    Raises:
        UnderdeterminedModelError: if T = N - p does not exceed 1 + K*p
        SingularDesignError: if the design matrix is rank deficient
    """
    return estimate(panel.values, p, panel.names, panel.index)
