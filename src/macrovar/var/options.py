"""
VAR analysis options.

Call-site configuration shared by the lag selector, the impulse response
engine and the pipeline.
"""

from dataclasses import asdict, dataclass
from typing import Optional

CRITERIA = ('aic', 'hq', 'sc', 'fpe')
CRITERION_ALIASES = {
    'aic': 'aic',
    'hq': 'hq',
    'hqic': 'hq',
    'sc': 'sc',
    'bic': 'sc',
    'fpe': 'fpe',
}
METHODS = ('asymptotic', 'bs', 'wild')


@dataclass
class Options:
    """Optional inputs for VAR analysis."""
    max_lag: int = 12               # largest candidate lag for selection
    criterion: str = 'sc'           # criterion picking the lag ('aic', 'hq', 'sc', 'fpe')
    shock: Optional[str] = None     # shocked series for IRFs (None => first series)
    nsteps: int = 12                # IRF horizon H; responses cover h = 0..H
    method: str = 'asymptotic'      # error bands: 'asymptotic', 'bs' bootstrap, 'wild' bootstrap
    ndraws: int = 1000              # number of bootstrap draws
    pctg: float = 95                # confidence level for bands
    cumulative: bool = False        # accumulate responses over the horizon
    seed: Optional[int] = None      # bootstrap seed
    verbose: bool = False           # progress bar and status lines on the console

    def __post_init__(self):
        if self.max_lag < 1:
            raise ValueError(f'max_lag must be >= 1, got {self.max_lag}')
        if self.criterion.lower() not in CRITERION_ALIASES:
            raise ValueError(f'Unknown criterion {self.criterion!r}; choose one of {CRITERIA}')
        self.criterion = CRITERION_ALIASES[self.criterion.lower()]
        if self.nsteps < 0:
            raise ValueError(f'nsteps must be >= 0, got {self.nsteps}')
        if self.method not in METHODS:
            raise ValueError(f'The method {self.method} is not available; choose one of {METHODS}')
        if self.ndraws < 2:
            raise ValueError(f'ndraws must be >= 2, got {self.ndraws}')
        if not 0 < self.pctg < 100:
            raise ValueError(f'pctg must lie in (0, 100), got {self.pctg}')

    def to_dict(self) -> dict:
        """Convert the options to a dictionary."""
        return asdict(self)
