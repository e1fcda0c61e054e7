"""Auxiliary least-squares routines shared by the estimator and lag selector."""

from typing import Optional, Sequence

import numpy as np
from scipy import linalg, stats

from .errors import SingularDesignError


def ols(y: np.ndarray, x: np.ndarray, add_constant: bool = False,
        names: Optional[Sequence[str]] = None) -> dict:
    """Multivariate least-squares regression through a pivoted QR factorization.

    All columns of ``y`` share the regressors ``x``, so the K equations of a
    VAR are solved in one pass: beta = (X'X)^-1 X'Y without forming the inverse.

    Args:
        y: Dependent variables (nobs x neq); a vector is treated as one equation
        x: Regressors (nobs x nvar)
        add_constant: Whether to prepend a column of ones
        names: Optional regressor names, used to report collinear columns

    Returns:
        Dictionary with regression results:
            - meth: 'ols'
            - beta: bhat (nvar x neq)
            - yhat: fitted values (nobs x neq)
            - resid: residuals (nobs x neq)
            - xpxi: (X'X)^-1 (nvar x nvar)
            - nobs, nvar: dimensions of x

    Raises:
        SingularDesignError: if X'X is not invertible
    """
    y = np.asarray(y, dtype=float)
    x = np.asarray(x, dtype=float)
    if y.ndim == 1:
        y = y.reshape(-1, 1)

    if add_constant:
        x = np.column_stack([np.ones(x.shape[0]), x])
        if names is not None:
            names = ['const'] + list(names)

    nobs, nvar = x.shape
    if nobs != y.shape[0]:
        raise ValueError('x and y must have same # obs in ols')

    # X P = Q R with |diag(R)| non-increasing, so rank deficiency shows up
    # as trailing near-zero pivots
    q, r, piv = linalg.qr(x, mode='economic', pivoting=True)
    diag = np.abs(np.diag(r))
    tol = diag.max(initial=0.0) * max(nobs, nvar) * np.finfo(float).eps
    rank = int(np.sum(diag > tol))
    if rank < nvar:
        dropped = piv[rank:]
        if names is not None:
            raise SingularDesignError([names[i] for i in sorted(dropped)])
        raise SingularDesignError([f'x{i}' for i in sorted(dropped)])

    beta = np.empty((nvar, y.shape[1]))
    beta[piv] = linalg.solve_triangular(r, q.T @ y)

    rinv = linalg.solve_triangular(r, np.eye(nvar))
    xpxi = np.empty((nvar, nvar))
    xpxi[np.ix_(piv, piv)] = rinv @ rinv.T

    yhat = x @ beta
    resid = y - yhat

    return {
        'meth': 'ols',
        'beta': beta,
        'yhat': yhat,
        'resid': resid,
        'xpxi': xpxi,
        'nobs': nobs,
        'nvar': nvar,
    }


def tdis_prb(t: np.ndarray, n: int) -> np.ndarray:
    """Returns the two-tailed probability for t-distribution.

    Args:
        t: t-statistics
        n: Degrees of freedom

    Returns:
        Two-tailed probability
    """
    return 2 * stats.t.sf(np.abs(t), n)


def logdet_symm(m: np.ndarray) -> float:
    """Log determinant of a symmetric positive semi-definite matrix.

    Returns -inf for a singular matrix instead of raising.
    """
    sign, logdet = np.linalg.slogdet(m)
    if sign <= 0:
        return -np.inf
    return float(logdet)
