"""
Utility modules for the macrovar package.

Design matrix construction, companion form and Wold multipliers for VAR
models, plus plain-text table formatting for summaries.
"""

from .var import VARUtils
from .data_handling import table_print

__all__ = ['VARUtils', 'table_print']
