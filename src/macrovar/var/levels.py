"""Convert relative impulse responses into projected levels."""

from dataclasses import dataclass
from typing import Mapping, Union

import pandas as pd

from ..errors import MissingAnchorError
from .impulse_response import ImpulseResponse


@dataclass(frozen=True, eq=False)
class LeveledResponse:
    """Impulse response bands expressed in the units of the data.

    Step 0 of every band equals ``anchor``, the last observed value.
    """
    shock: str
    anchor: pd.Series
    estimate: pd.DataFrame
    lower: pd.DataFrame
    upper: pd.DataFrame


def to_levels(response: ImpulseResponse,
              last_observed: Union[Mapping[str, float], pd.Series]) -> LeveledResponse:
    """Anchor responses on the last observation of each series.

    Responses are offsets from baseline, not period-over-period changes, so
    level[h] = last_observed + response[h] for h >= 1 and level[0] = last_observed.

    Raises:
        MissingAnchorError: if a responding series has no last observed value
    """
    names = response.names
    missing = [name for name in names if name not in last_observed]
    if missing:
        raise MissingAnchorError(missing)
    anchor = pd.Series({name: float(last_observed[name]) for name in names})

    def leveled(band: pd.DataFrame) -> pd.DataFrame:
        out = band.add(anchor, axis=1)
        out.iloc[0] = anchor.values
        return out

    return LeveledResponse(
        shock=response.shock,
        anchor=anchor,
        estimate=leveled(response.estimate),
        lower=leveled(response.lower),
        upper=leveled(response.upper),
    )
