import pytest

from macrovar import Options


def test_defaults():
    options = Options()
    assert options.max_lag == 12
    assert options.criterion == 'sc'
    assert options.nsteps == 12
    assert options.method == 'asymptotic'
    assert options.pctg == 95
    assert options.shock is None


@pytest.mark.parametrize('alias, expected', [('bic', 'sc'), ('HQIC', 'hq'), ('AIC', 'aic'), ('fpe', 'fpe')])
def test_criterion_aliases(alias, expected):
    assert Options(criterion=alias).criterion == expected


@pytest.mark.parametrize('kwargs', [
    {'max_lag': 0},
    {'criterion': 'lr'},
    {'nsteps': -1},
    {'method': 'sign'},
    {'ndraws': 1},
    {'pctg': 100},
    {'pctg': 0},
])
def test_invalid(kwargs):
    with pytest.raises(ValueError):
        Options(**kwargs)


def test_to_dict():
    d = Options(shock='CPI', seed=3).to_dict()
    assert d['shock'] == 'CPI'
    assert d['seed'] == 3
    assert set(d) == {'max_lag', 'criterion', 'shock', 'nsteps', 'method', 'ndraws',
                      'pctg', 'cumulative', 'seed', 'verbose'}
