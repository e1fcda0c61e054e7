import dataclasses

import numpy as np
import pandas as pd
import pytest

from macrovar import Panel


class TestConstruction:
    def test_from_frame_keeps_names_and_index(self, macro_frame):
        panel = Panel.from_frame(macro_frame)
        assert panel.names == ('UNRATE', 'FEDFUNDS', 'CPI')
        assert panel.nobs == 500
        assert panel.nvar == 3
        assert len(panel) == 500
        assert panel.index.equals(macro_frame.index)
        np.testing.assert_array_equal(panel.values, macro_frame.values)

    def test_from_named_records(self):
        rows = [
            {'UNRATE': 5.0, 'FEDFUNDS': 1.0, 'CPI': 2.0},
            {'CPI': 2.1, 'UNRATE': 5.1, 'FEDFUNDS': 1.25},
        ]
        panel = Panel.from_records(rows)
        assert panel.names == ('UNRATE', 'FEDFUNDS', 'CPI')
        np.testing.assert_array_equal(panel.values[1], [5.1, 1.25, 2.1])

    def test_from_records_with_explicit_order(self):
        rows = [{'a': 1.0, 'b': 2.0}, {'a': 3.0, 'b': 4.0}]
        panel = Panel.from_records(rows, names=['b', 'a'], index=['2020-01', '2020-02'])
        assert panel.names == ('b', 'a')
        np.testing.assert_array_equal(panel.values[:, 0], [2.0, 4.0])
        assert list(panel.index) == ['2020-01', '2020-02']

    def test_from_unnamed_records_requires_names(self):
        with pytest.raises(ValueError, match='names are required'):
            Panel.from_records([[1.0, 2.0], [3.0, 4.0]])
        panel = Panel.from_records([[1.0, 2.0], [3.0, 4.0]], names=['x', 'y'])
        assert panel.position('y') == 1


class TestValidation:
    def test_duplicate_names_rejected(self):
        with pytest.raises(ValueError, match='unique'):
            Panel(values=np.ones((3, 2)), names=('x', 'x'), index=pd.RangeIndex(3))

    def test_missing_values_rejected(self):
        df = pd.DataFrame({'x': [1.0, np.nan, 3.0], 'y': [1.0, 2.0, 3.0]})
        with pytest.raises(ValueError, match="missing"):
            Panel.from_frame(df)

    def test_non_numeric_rejected(self):
        df = pd.DataFrame({'x': [1.0, 2.0], 'y': ['a', 'b']})
        with pytest.raises(ValueError):
            Panel.from_frame(df)

    def test_ragged_rows_rejected(self):
        with pytest.raises(ValueError, match='Row 1'):
            Panel.from_records([{'x': 1.0, 'y': 2.0}, {'x': 1.0}])
        with pytest.raises(ValueError, match='Row 1'):
            Panel.from_records([[1.0, 2.0], [1.0]], names=['x', 'y'])


class TestImmutability:
    def test_values_are_read_only(self, panel):
        with pytest.raises(ValueError):
            panel.values[0, 0] = 0.0

    def test_attributes_are_frozen(self, panel):
        with pytest.raises(dataclasses.FrozenInstanceError):
            panel.names = ('a', 'b', 'c')

    def test_to_frame_is_a_copy(self, panel):
        frame = panel.to_frame()
        frame.iloc[0, 0] = -99.0
        assert panel.values[0, 0] != -99.0

    def test_last_observed(self, panel, macro_frame):
        last = panel.last_observed()
        assert list(last.index) == ['UNRATE', 'FEDFUNDS', 'CPI']
        np.testing.assert_array_equal(last.values, macro_frame.iloc[-1].values)
