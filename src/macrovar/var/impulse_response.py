"""
Compute impulse responses (IRs) for a VAR model.

A unit shock hits one series at h = 0 while the system starts from its
baseline (all lagged responses zero); the fitted lag matrices then propagate
it through the cross-series feedback:

    r_0 = e_s,    r_h = A_1 r_{h-1} + ... + A_p r_{h-p}

Error bands are estimate ± z * stderr, with the standard error computed either
- analytically ('asymptotic'), by the delta method of Lütkepohl (2005, 3.7), or
- by residual bootstrap ('bs' resampling with replacement, 'wild' Rademacher
  sign flips), as the dispersion of the IRs of refitted artificial samples.

The reported standard errors are the running maximum over h >= 1, so bands
never narrow as the horizon grows.
"""

from dataclasses import dataclass
from typing import Dict, Optional

import numpy as np
import pandas as pd
from colorama import Fore, Style
from scipy import stats
from tqdm.auto import tqdm

from ..errors import BootstrapError, SingularDesignError, UnderdeterminedModelError
from ..utils.var import VARUtils
from .model import FittedVAR, estimate
from .options import Options


@dataclass(frozen=True, eq=False)
class ImpulseResponse:
    """Responses of every series to a unit shock in ``shock``.

    ``estimate``, ``lower``, ``upper`` and ``stderr`` are indexed by ``step``
    (h = 0..horizon) with one column per series.
    """
    shock: str
    horizon: int
    method: str
    pctg: float
    cumulative: bool
    estimate: pd.DataFrame
    lower: pd.DataFrame
    upper: pd.DataFrame
    stderr: pd.DataFrame

    @property
    def names(self):
        return list(self.estimate.columns)

    def __getitem__(self, series: str) -> pd.DataFrame:
        """Estimate and bands of one responding series."""
        return pd.DataFrame({
            'lower': self.lower[series],
            'estimate': self.estimate[series],
            'upper': self.upper[series],
        })

    def to_frame(self) -> pd.DataFrame:
        """All bands side by side, columns (band, series)."""
        return pd.concat(
            {'estimate': self.estimate, 'lower': self.lower, 'upper': self.upper},
            axis=1,
        )


def simulate_response(coefs: np.ndarray, shock_idx: int, horizon: int) -> np.ndarray:
    """Propagate a unit impulse through the lag matrices.

    Args:
        coefs: Lag matrices A_1..A_p (p x K x K)
        shock_idx: Position of the shocked series
        horizon: Last step H

    Returns:
        np.ndarray: Responses (H+1 x K)
    """
    nlag, nvar, _ = coefs.shape
    response = np.zeros((horizon + 1, nvar))
    response[0, shock_idx] = 1.0
    for h in range(1, horizon + 1):
        for j in range(1, min(h, nlag) + 1):
            response[h] += coefs[j - 1] @ response[h - j]
    return response


def _irf_g_matrices(model: FittedVAR, horizon: int) -> list:
    """Derivatives G_i = d vec(Phi_i) / d alpha', i = 1..horizon.

    G_i = sum_{m=0}^{i-1} J (A')^{i-1-m} ⊗ Phi_m, with A the companion matrix
    and J = [I_K 0 ... 0] (Lütkepohl 2005, p. 111).
    """
    K = model.nvar
    psi = VARUtils.compute_wold_matrices(model.coefs, horizon + 1)

    apow = []
    power = np.eye(K * model.nlag)
    for _ in range(horizon):
        apow.append(power[:K])
        power = power @ model.companion.T

    G = []
    for i in range(1, horizon + 1):
        G.append(sum(np.kron(apow[i - 1 - m], psi[m]) for m in range(i)))
    return G


def asymptotic_stderr(model: FittedVAR, horizon: int, cumulative: bool = False) -> np.ndarray:
    """Delta-method standard errors of the (cumulative) impulse responses.

    Cov(vec Phi_h) = G_h Σα G_h', Σα = kron((X'X)^-1 without the constant, sigma_u);
    cumulative responses use F_h = G_1 + ... + G_h instead of G_h.

    Returns:
        np.ndarray: stderr (H+1 x K x K); ``[h, r, c]`` is the standard error
        of the response of r to a shock in c at step h
    """
    K = model.nvar
    # drop the intercept block of cov(vec B')
    cov_alpha = model.cov_params[K:, K:]

    stderr = np.zeros((horizon + 1, K, K))
    acc = np.zeros((K * K, K * K * model.nlag))
    for h, Gh in enumerate(_irf_g_matrices(model, horizon), start=1):
        if cumulative:
            acc = acc + Gh
            Gh = acc
        var = np.clip(np.diag(Gh @ cov_alpha @ Gh.T), 0, None)
        # vec stacks columns, so unvec column-major
        stderr[h] = np.sqrt(var).reshape(K, K, order='F')
    return stderr


def widening_envelope(stderr: np.ndarray) -> np.ndarray:
    """Running maximum of the standard errors over h >= 1.

    Reported bands widen or stay flat after impact; step 0 is left as is.
    """
    out = np.array(stderr, dtype=float)
    if len(out) > 1:
        out[1:] = np.maximum.accumulate(out[1:], axis=0)
    return out


def _bootstrap_residuals(resid: np.ndarray, method: str, rng: np.random.Generator) -> np.ndarray:
    nobs = resid.shape[0]
    if method == 'bs':
        # Standard bootstrap: randomly sample residuals with replacement
        idx = rng.integers(0, nobs, nobs)
        return resid[idx]
    elif method == 'wild':
        # Wild bootstrap: multiply residuals by random +1/-1
        rr = 1 - 2 * (rng.random((nobs, 1)) > 0.5)
        return resid * rr
    raise ValueError(f'The method {method} is not available')


def _artificial_sample(model: FittedVAR, u: np.ndarray) -> np.ndarray:
    """Generate data from the fitted equations, seeded with the first nlag observations."""
    nlag = model.nlag
    F = model.params.values
    y = np.zeros(model.endog.shape)
    y[:nlag] = model.endog.values[:nlag]
    for t in range(nlag, len(y)):
        lags = np.hstack([1.0, y[t - nlag:t][::-1].ravel()])
        y[t] = lags @ F + u[t - nlag]
    return y


def bootstrap_stderr(model: FittedVAR, shock_idx: int, horizon: int, options: Options) -> np.ndarray:
    """Bootstrap standard errors of the responses to one shock.

    Returns:
        np.ndarray: stderr (H+1 x K), the across-draw standard deviation
    """
    ndraws = options.ndraws
    rng = np.random.default_rng(options.seed)
    resid = model.resid.values

    if options.verbose:
        print(f"{Fore.CYAN}Starting {options.method} bootstrap with {ndraws} draws for IRF bands...{Style.RESET_ALL}")

    draws = []
    attempts = 0
    max_attempts = ndraws * 5  # Limit attempts to prevent infinite loops
    with tqdm(total=ndraws, desc="Bootstrap Draws", disable=not options.verbose) as pbar:
        while len(draws) < ndraws and attempts < max_attempts:
            attempts += 1
            u = _bootstrap_residuals(resid, options.method, rng)
            y = _artificial_sample(model, u)
            try:
                draw = estimate(y, model.nlag, model.names)
            except (SingularDesignError, UnderdeterminedModelError):
                continue
            # Only accept stable VARs
            if draw.max_eig >= 0.9999:
                continue
            response = simulate_response(draw.coefs, shock_idx, horizon)
            if options.cumulative:
                response = np.cumsum(response, axis=0)
            draws.append(response)
            pbar.update(1)

    if len(draws) < 2:
        raise BootstrapError(len(draws), attempts)
    if options.verbose:
        if len(draws) < ndraws:
            print(f"{Fore.YELLOW}Warning: Only {len(draws)} stable draws were accepted "
                  f"out of {attempts} attempts.{Style.RESET_ALL}")
        else:
            print(f"{Fore.GREEN}Bootstrap finished: {len(draws)} stable draws accepted.{Style.RESET_ALL}")

    return np.std(np.stack(draws), axis=0, ddof=1)


def impulse_response(model: FittedVAR, shocked_series: str, horizon: int = 12,
                     options: Optional[Options] = None) -> ImpulseResponse:
    """Compute the responses of every series to a unit shock in one series.

    Args:
        model: Fitted VAR
        shocked_series: Name of the series receiving the unit impulse at h = 0
        horizon: Last step H (>= 0); responses cover h = 0..H
        options: Band method, confidence level, cumulation, bootstrap settings

    Returns:
        ImpulseResponse

    Raises:
        UnknownSeriesError: if ``shocked_series`` is not a model series
    """
    options = options or Options()
    shock_idx = model.position(shocked_series)
    if horizon < 0:
        raise ValueError(f'horizon must be >= 0, got {horizon}')

    response = simulate_response(model.coefs, shock_idx, horizon)
    if options.cumulative:
        response = np.cumsum(response, axis=0)

    sigma = model.sigma.values
    if sigma[shock_idx, shock_idx] <= np.finfo(float).eps * max(1.0, np.trace(sigma)):
        # deterministic shock, residual variance is zero up to rounding
        stderr = np.zeros_like(response)
    elif options.method == 'asymptotic':
        stderr = asymptotic_stderr(model, horizon, options.cumulative)[:, :, shock_idx]
    else:
        stderr = bootstrap_stderr(model, shock_idx, horizon, options)
    stderr = widening_envelope(stderr)

    z = stats.norm.ppf(1 - (1 - options.pctg / 100) / 2)

    steps = pd.RangeIndex(start=0, stop=horizon + 1, name='step')
    columns = list(model.names)

    def frame(values):
        return pd.DataFrame(values, index=steps, columns=columns)

    return ImpulseResponse(
        shock=shocked_series,
        horizon=horizon,
        method=options.method,
        pctg=options.pctg,
        cumulative=options.cumulative,
        estimate=frame(response),
        lower=frame(response - z * stderr),
        upper=frame(response + z * stderr),
        stderr=frame(stderr),
    )


def impulse_responses(model: FittedVAR, horizon: int = 12,
                      options: Optional[Options] = None) -> Dict[str, ImpulseResponse]:
    """Impulse responses to a unit shock in each series in turn."""
    return {name: impulse_response(model, name, horizon, options) for name in model.names}
