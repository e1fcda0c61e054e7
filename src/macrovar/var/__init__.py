"""
VAR (Vector Autoregression) module for macroeconomic time series analysis.

This module provides lag order selection, OLS estimation, impulse responses
with confidence bands, and reconstruction of responses into levels.
"""

from .options import Options
from .panel import Panel
from .model import FittedVAR, fit
from .lag_selection import SelectionResult, information_criteria, select_lag
from .impulse_response import ImpulseResponse, impulse_response, impulse_responses
from .levels import LeveledResponse, to_levels

__all__ = [
    'Options', 'Panel', 'FittedVAR', 'fit', 'SelectionResult', 'information_criteria',
    'select_lag', 'ImpulseResponse', 'impulse_response', 'impulse_responses',
    'LeveledResponse', 'to_levels',
]
