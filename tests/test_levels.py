import numpy as np
import pandas as pd
import pytest

from macrovar import MissingAnchorError, fit, impulse_response, to_levels


@pytest.fixture(scope='module')
def response(panel):
    return impulse_response(fit(panel, 2), 'UNRATE', 12)


def test_step_zero_is_last_observed(panel, response):
    last = panel.last_observed()
    levels = to_levels(response, last)
    for band in (levels.estimate, levels.lower, levels.upper):
        for series in panel.names:
            assert band[series][0] == last[series]


def test_later_steps_offset_from_anchor(response):
    last = {'UNRATE': 5.0, 'FEDFUNDS': 2.0, 'CPI': 3.0}
    levels = to_levels(response, last)
    for series, value in last.items():
        np.testing.assert_allclose(
            levels.estimate[series].values[1:], value + response.estimate[series].values[1:]
        )
        np.testing.assert_allclose(
            levels.upper[series].values[1:], value + response.upper[series].values[1:]
        )


def test_ordering_preserved(panel, response):
    levels = to_levels(response, panel.last_observed())
    assert (levels.lower <= levels.estimate).all().all()
    assert (levels.estimate <= levels.upper).all().all()


def test_anchor_and_shape(panel, response):
    levels = to_levels(response, panel.last_observed())
    assert levels.shock == 'UNRATE'
    assert list(levels.anchor.index) == ['UNRATE', 'FEDFUNDS', 'CPI']
    assert levels.estimate.shape == response.estimate.shape
    assert levels.estimate.index.equals(response.estimate.index)


def test_extra_anchor_values_ignored(response):
    last = pd.Series({'UNRATE': 5.0, 'FEDFUNDS': 2.0, 'CPI': 3.0, 'GDP': 100.0})
    levels = to_levels(response, last)
    assert list(levels.estimate.columns) == ['UNRATE', 'FEDFUNDS', 'CPI']


def test_missing_anchor(response):
    with pytest.raises(MissingAnchorError) as excinfo:
        to_levels(response, {'UNRATE': 5.0})
    assert excinfo.value.missing == ['FEDFUNDS', 'CPI']


def test_response_left_untouched(panel, response):
    before = response.estimate.copy()
    to_levels(response, panel.last_observed())
    pd.testing.assert_frame_equal(response.estimate, before)
