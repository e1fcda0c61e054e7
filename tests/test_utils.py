import numpy as np
import pandas as pd
import pytest

from macrovar import SingularDesignError
from macrovar.auxiliary import logdet_symm, ols
from macrovar.utils.data_handling import table_print
from macrovar.utils.var import VARUtils


class TestDesignMatrix:
    def test_layout(self):
        data = np.arange(10.0).reshape(5, 2)
        Y, X = VARUtils.var_make_xy(data, 2)
        np.testing.assert_array_equal(Y, data[2:])
        # [1, y_{t-1}, y_{t-2}]
        np.testing.assert_array_equal(X[0], [1.0, 2.0, 3.0, 0.0, 1.0])
        np.testing.assert_array_equal(X[-1], [1.0, 6.0, 7.0, 4.0, 5.0])

    def test_regressor_names(self):
        assert VARUtils.regressor_names(['a', 'b'], 2) == ['const', 'L1.a', 'L1.b', 'L2.a', 'L2.b']

    def test_lag_matrices_handle_double_digit_lags(self):
        names = ['a']
        index = VARUtils.regressor_names(names, 11)
        params = pd.DataFrame(np.arange(12.0).reshape(12, 1), index=index, columns=names)
        Fp = VARUtils.get_lag_coefs_matrices(params)
        assert Fp.shape == (11, 1, 1)
        assert Fp[0, 0, 0] == 1.0
        assert Fp[10, 0, 0] == 11.0


class TestCompanion:
    def test_blocks(self):
        A1 = np.array([[0.5, 0.1], [0.0, 0.3]])
        A2 = np.array([[0.2, 0.0], [0.1, 0.1]])
        coef = np.vstack([[1.0, 2.0], A1.T, A2.T])
        comp = VARUtils.compute_companion_matrix(coef, 2, 2)
        np.testing.assert_array_equal(comp[:2, :2], A1)
        np.testing.assert_array_equal(comp[:2, 2:], A2)
        np.testing.assert_array_equal(comp[2:, :2], np.eye(2))
        np.testing.assert_array_equal(comp[2:, 2:], np.zeros((2, 2)))

    def test_wold_of_var1_is_matrix_power(self):
        A = np.array([[[0.5, 0.1], [0.2, 0.3]]])
        psi = VARUtils.compute_wold_matrices(A, 5)
        for h in range(5):
            np.testing.assert_allclose(psi[h], np.linalg.matrix_power(A[0], h))


class TestOLS:
    def test_exact_fit(self):
        x = np.linspace(0, 1, 20)
        y = np.column_stack([1 + 2 * x, -3 + 0.5 * x])
        res = ols(y, x, add_constant=True)
        np.testing.assert_allclose(res['beta'], [[1.0, -3.0], [2.0, 0.5]], atol=1e-12)
        np.testing.assert_allclose(res['resid'], 0, atol=1e-12)

    def test_xpxi(self):
        rng = np.random.default_rng(0)
        x = rng.normal(size=(50, 3))
        res = ols(rng.normal(size=50), x)
        np.testing.assert_allclose(res['xpxi'], np.linalg.inv(x.T @ x), rtol=1e-10)

    def test_singular_names_columns(self):
        x = np.random.default_rng(1).normal(size=(30, 2))
        x = np.column_stack([x, x[:, 0]])
        with pytest.raises(SingularDesignError) as excinfo:
            ols(x[:, 1], x, names=['a', 'b', 'a_copy'])
        assert excinfo.value.columns[0] in ('a', 'a_copy')


def test_logdet_symm():
    assert logdet_symm(np.diag([2.0, 3.0])) == pytest.approx(np.log(6.0))
    assert logdet_symm(np.zeros((2, 2))) == -np.inf


def test_table_print_marks():
    df = pd.DataFrame({'aic': [1.5, 1.0], 'sc': [0.5, 2.0]}, index=[1, 2])
    text = table_print(df, title='ICs', marks={'aic': 1, 'sc': 0})
    lines = text.splitlines()
    assert lines[0] == 'ICs'
    assert '1.0000*' in lines[-1]
    assert '0.5000*' in lines[-2]
    assert text.count('*') == 2
