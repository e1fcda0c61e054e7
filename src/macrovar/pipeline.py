"""
End-to-end VAR analysis: lag selection, estimation, impulse response, levels.

Each stage consumes only the previous stage's output:

    select_lag -> fit -> impulse_response -> to_levels
"""

from dataclasses import dataclass
from typing import Optional

from colorama import Fore, Style

from .var.impulse_response import ImpulseResponse, impulse_response
from .var.lag_selection import SelectionResult, select_lag
from .var.levels import LeveledResponse, to_levels
from .var.model import FittedVAR, fit
from .var.options import Options
from .var.panel import Panel


@dataclass(frozen=True, eq=False)
class PipelineResult:
    selection: SelectionResult
    model: FittedVAR
    response: ImpulseResponse
    levels: LeveledResponse


def run(panel: Panel, options: Optional[Options] = None) -> PipelineResult:
    """Run the full analysis on a panel.

    The lag is the one recommended by ``options.criterion`` (SC by default);
    the shocked series defaults to the first panel series.
    """
    options = options or Options()
    shock = options.shock if options.shock is not None else panel.names[0]

    selection = select_lag(panel, options.max_lag)
    nlag = selection.get(options.criterion)
    if options.verbose:
        print(f"{Fore.CYAN}Selected lag order {nlag} by {options.criterion.upper()}{Style.RESET_ALL}")

    model = fit(panel, nlag)
    response = impulse_response(model, shock, options.nsteps, options)
    levels = to_levels(response, panel.last_observed())

    return PipelineResult(selection=selection, model=model, response=response, levels=levels)
