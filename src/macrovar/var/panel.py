"""
Panel of aligned macroeconomic series.

A Panel is the cleaned, already-aligned multivariate time series handed to the
lag selector and the estimator: one row per period, one uniquely named column
per series, no missing values.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence, Tuple, Union

import numpy as np
import pandas as pd


@dataclass(frozen=True, eq=False)
class Panel:
    """Immutable multivariate time series (nobs x nvar)."""
    values: np.ndarray
    names: Tuple[str, ...]
    index: pd.Index

    def __post_init__(self):
        values = np.array(self.values, dtype=float)
        if values.ndim == 1:
            values = values.reshape(-1, 1)
        values.setflags(write=False)
        object.__setattr__(self, 'values', values)
        object.__setattr__(self, 'names', tuple(str(name) for name in self.names))
        object.__setattr__(self, 'index', pd.Index(self.index))
        self._validate()

    def _validate(self):
        """Validate the panel attributes."""
        nobs, nvar = self.values.shape
        if nvar == 0:
            raise ValueError('Panel needs at least one series')
        if len(self.names) != nvar:
            raise ValueError(f'Got {len(self.names)} series names for {nvar} columns')
        if len(set(self.names)) != nvar:
            dupes = sorted({name for name in self.names if self.names.count(name) > 1})
            raise ValueError(f'Series names must be unique, duplicated: {dupes}')
        if len(self.index) != nobs:
            raise ValueError(f'Index has {len(self.index)} entries for {nobs} observations')
        if not np.isfinite(self.values).all():
            bad = sorted({self.names[j] for j in np.where(~np.isfinite(self.values))[1]})
            raise ValueError(f'Panel contains missing or non-finite values in: {bad}')

    @classmethod
    def from_frame(cls, df: pd.DataFrame) -> 'Panel':
        """Create a Panel from a DataFrame whose columns are the series."""
        try:
            values = df.to_numpy(dtype=float)
        except (TypeError, ValueError) as exc:
            raise ValueError(f'Panel columns must be numeric: {exc}') from exc
        return cls(values=values, names=tuple(df.columns), index=df.index)

    @classmethod
    def from_records(cls,
                     rows: Sequence[Union[Mapping[str, float], Sequence[float]]],
                     names: Optional[Sequence[str]] = None,
                     index: Optional[Sequence[Any]] = None) -> 'Panel':
        """Create a Panel from an ordered list of rows.

        Args:
            rows: Named rows (mappings series -> value) or plain sequences
            names: Series names; required for plain sequences, and fixes the
                column order for mappings (default: keys of the first row)
            index: Optional time labels, one per row

        Returns:
            Panel
        """
        if len(rows) == 0:
            raise ValueError('Panel needs at least one observation')
        if isinstance(rows[0], Mapping):
            names = list(names) if names is not None else list(rows[0].keys())
            for i, row in enumerate(rows):
                if set(row.keys()) != set(names):
                    raise ValueError(f'Row {i} has series {sorted(row.keys())}, expected {sorted(names)}')
            values = [[row[name] for name in names] for row in rows]
        else:
            if names is None:
                raise ValueError('Series names are required for unnamed rows')
            for i, row in enumerate(rows):
                if len(row) != len(names):
                    raise ValueError(f'Row {i} has {len(row)} values, expected {len(names)}')
            values = [list(row) for row in rows]
        index = pd.RangeIndex(len(rows)) if index is None else index
        return cls(values=np.asarray(values, dtype=float), names=tuple(names), index=index)

    @property
    def nobs(self) -> int:
        return self.values.shape[0]

    @property
    def nvar(self) -> int:
        return self.values.shape[1]

    def position(self, name: str) -> int:
        return self.names.index(name)

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(self.values.copy(), index=self.index, columns=list(self.names))

    def last_observed(self) -> pd.Series:
        """Last row of the panel, the anchor for level reconstruction."""
        return pd.Series(self.values[-1].copy(), index=list(self.names), name=self.index[-1])

    def __len__(self):
        return self.nobs
