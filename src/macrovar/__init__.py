"""
macrovar: Vector Autoregression analysis of macroeconomic indicators.
"""

from .errors import (
    BootstrapError,
    InsufficientDataError,
    MissingAnchorError,
    SingularDesignError,
    UnderdeterminedModelError,
    UnknownSeriesError,
    VARError,
)
from .var import (
    FittedVAR,
    ImpulseResponse,
    LeveledResponse,
    Options,
    Panel,
    SelectionResult,
    fit,
    impulse_response,
    impulse_responses,
    information_criteria,
    select_lag,
    to_levels,
)
from .pipeline import PipelineResult, run

__version__ = '0.1.0'
