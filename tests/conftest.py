"""Shared fixtures: panels simulated from a known stable VAR(2)."""

import numpy as np
import pandas as pd
import pytest

from macrovar import Panel

VAR_NAMES = ['UNRATE', 'FEDFUNDS', 'CPI']

A1 = np.array([
    [0.60, -0.05, 0.02],
    [-0.30, 0.70, 0.15],
    [-0.10, 0.05, 0.50],
])
A2 = np.array([
    [0.20, 0.02, 0.00],
    [0.05, 0.10, 0.05],
    [0.00, 0.00, 0.20],
])
SIGMA = np.array([
    [0.04, -0.01, 0.00],
    [-0.01, 0.09, 0.01],
    [0.00, 0.01, 0.06],
])
MEAN = np.array([5.5, 3.0, 2.5])


def simulate(nobs: int, seed: int = 0, burn: int = 100) -> pd.DataFrame:
    rng = np.random.default_rng(seed)
    chol = np.linalg.cholesky(SIGMA)
    y = np.zeros((nobs + burn, 3))
    for t in range(2, nobs + burn):
        y[t] = A1 @ y[t - 1] + A2 @ y[t - 2] + chol @ rng.standard_normal(3)
    dates = pd.date_range('1980-01-31', periods=nobs, freq='ME')
    return pd.DataFrame(y[burn:] + MEAN, index=dates, columns=VAR_NAMES)


@pytest.fixture(scope='session')
def macro_frame():
    """500 monthly observations of UNRATE, FEDFUNDS, CPI."""
    return simulate(500, seed=12)


@pytest.fixture(scope='session')
def panel(macro_frame):
    return Panel.from_frame(macro_frame)


@pytest.fixture(scope='session')
def short_panel():
    """120 observations, small enough for quick bootstrap runs."""
    return Panel.from_frame(simulate(120, seed=3))
