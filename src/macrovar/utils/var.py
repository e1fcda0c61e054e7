import numpy as np
import pandas as pd
from typing import List, Sequence, Tuple, Union


class VARUtils:
    """Utility functions for VAR models."""

    @staticmethod
    def var_make_xy(data: Union[np.ndarray, pd.DataFrame], lags: int) -> Tuple[np.ndarray, np.ndarray]:
        """Create matrices Y and X for VAR estimation.

        Rows of X are [1, y_{t-1}, y_{t-2}, ..., y_{t-p}] for t = p+1..N.

        Args:
            data: Matrix containing the original data (nobs x nvar)
            lags: Lag order of the VAR

        Returns:
            tuple:
                - Y: VAR dependent variable ((nobs-lags) x nvar)
                - X: VAR independent variable ((nobs-lags) x (1 + nvar*lags))
        """
        if isinstance(data, pd.DataFrame):
            data = data.values

        nobs = len(data)

        Y = data[lags:]

        # Stack from the most distant lag so lag 1 ends up leftmost
        X = np.empty((nobs - lags, 0))
        for jj in range(lags):
            X = np.hstack([data[jj:nobs-lags+jj], X])

        X = np.hstack([np.ones((nobs - lags, 1)), X])
        return Y, X

    @staticmethod
    def regressor_names(var_names: Sequence[str], lags: int) -> List[str]:
        """Column names of the design matrix, e.g. ['const', 'L1.CPI', ...]."""
        cols = ['const']
        for lag in range(1, lags + 1):
            cols.extend(f'L{lag}.{name}' for name in var_names)
        return cols

    @staticmethod
    def compute_companion_matrix(coef: np.ndarray, nvar: int, nlag: int) -> np.ndarray:
        """Compute the companion matrix for the VAR model.

        The companion matrix transforms a VAR(p) into a VAR(1) in a higher dimension.
        For a VAR with n variables and p lags, it creates an (n*p)×(n*p) matrix:

        | A₁ A₂ ... Aₚ₋₁ Aₚ |
        | I  0  ... 0    0  |
        | 0  I  ... 0    0  |
        | ⋮  ⋮  ⋱  ⋮    ⋮  |
        | 0  0  ... I    0  |

        Args:
            coef: Coefficient matrix ((n*p + 1) × n), constant in the first row
            nvar: Number of variables (n)
            nlag: Number of lags (p)

        Returns:
            np.ndarray: Companion matrix ((n*p) × (n*p))
        """
        n_companion = nvar * nlag
        companion = np.zeros((n_companion, n_companion))

        # Remove constant term if present (first row)
        var_coefs = coef[1:].T if coef.shape[0] > nvar * nlag else coef.T

        companion[:nvar, :] = var_coefs

        if nlag > 1:
            idx = np.arange(nvar, n_companion)
            companion[idx[:, None], idx-nvar] = np.eye(nvar * (nlag - 1))

        return companion

    @staticmethod
    def get_lag_coefs_matrices(params: pd.DataFrame) -> np.ndarray:
        """Extract lag coefficient matrices from the VAR parameter DataFrame.

        The result has shape (nlag, nvar, nvar) and
        - rows of each matrix are the response variables (the VAR equations)
        - columns are the predictor variables (the lagged regressors)
        so ``Fp[lag-1][i, j]`` is the effect of variable j lagged by 'lag' periods
        on variable i.

        Args:
            params: Parameter DataFrame ((1 + nvar*nlag) x nvar) with rows
                named 'const', 'L1.<name>', ...

        Returns:
            np.ndarray: Stacked lag coefficient matrices
        """
        nvar = len(params.columns)
        nlag = (len(params.index) - 1) // nvar

        Fp = np.zeros((nlag, nvar, nvar))
        for lag in range(1, nlag + 1):
            lag_index = f'L{lag}.'  # the dot is important, think of L11
            Fp[lag - 1] = params.loc[params.index.str.startswith(lag_index)].values.T
        return Fp

    @staticmethod
    def compute_wold_matrices(Fp: np.ndarray, nsteps: int) -> np.ndarray:
        """Compute Wold moving average representation matrices.

        The Wold representation expresses a VAR model as an infinite MA process:
        y_t = ε_t + Ψ₁ε_{t-1} + Ψ₂ε_{t-2} + ...

        The Ψ matrices follow the recursion
        Ψ₀ = I (identity matrix)
        Ψₛ = ∑ᵢ₌₁ᵖ Ψₛ₋ᵢFᵢ for s > 0, where p is the VAR lag order

        ``PSI[step][i, j]`` is the effect of a unit shock to variable j at time t
        on variable i at time t+step.

        Args:
            Fp: Lag coefficient matrices from get_lag_coefs_matrices (nlag x nvar x nvar)
            nsteps: Number of steps to compute (horizon + 1)

        Returns:
            np.ndarray: PSI matrices (nsteps x nvar x nvar)
        """
        nlag, nvar, _ = Fp.shape

        PSI = np.zeros((nsteps, nvar, nvar))
        PSI[0] = np.eye(nvar)
        for step in range(1, nsteps):
            for lag in range(min(step, nlag)):
                PSI[step] += PSI[step - lag - 1] @ Fp[lag]
        return PSI

    @staticmethod
    def max_eigenvalue(companion: np.ndarray) -> float:
        """Largest eigenvalue modulus of the companion matrix."""
        return float(np.max(np.abs(np.linalg.eigvals(companion))))

