"""Testing for Linear model module."""

import numpy as np
import pytest

from sklearn.base import is_regressor
from sklearn.linear_model import Ridge

from pyrkelm.base import kernel_matrix
from pyrkelm.linear_model import RegularizedRegression
from pyrkelm.exceptions import (ConfigurationError, DimensionMismatchError,
                                NumericalDegeneracyError, UntrainedModelError)


rs = np.random.RandomState(42)
X_tall = rs.uniform(size=(60, 15))
X_wide = rs.uniform(size=(15, 60))
y_tall = rs.uniform(size=(60, 2))
y_wide = rs.uniform(size=(15, 2))


def test_auto_solver_selection() -> None:
    print('\ntest_auto_solver_selection():')
    reg = RegularizedRegression()
    assert is_regressor(reg)
    assert reg.fit(X_tall, y_tall).solver_ == 'primal'
    assert reg.fit(X_wide, y_wide).solver_ == 'dual'
    assert reg.output_weights_.shape == (60, 2)


@pytest.mark.parametrize("X, y", [(X_tall, y_tall), (X_wide, y_wide)])
def test_primal_dual_equivalence(X: np.ndarray, y: np.ndarray) -> None:
    print('\ntest_primal_dual_equivalence():')
    primal = RegularizedRegression(regularization_parameter=100.,
                                   solver='primal').fit(X, y)
    dual = RegularizedRegression(regularization_parameter=100.,
                                 solver='dual').fit(X, y)
    assert primal.solver_ == 'primal'
    assert dual.solver_ == 'dual'
    np.testing.assert_allclose(primal.output_weights_, dual.output_weights_,
                               rtol=1e-6, atol=1e-8)


def test_compare_ridge() -> None:
    print('\ntest_compare_ridge():')
    reg = RegularizedRegression(regularization_parameter=100.)\
        .fit(X_tall, y_tall)
    ridge = Ridge(alpha=.01, fit_intercept=False, solver='cholesky')\
        .fit(X_tall, y_tall)
    np.testing.assert_allclose(reg.coef_, ridge.coef_, rtol=1e-6, atol=1e-10)
    np.testing.assert_allclose(reg.predict(X_tall), ridge.predict(X_tall),
                               rtol=1e-6)


def test_linear_kernel_approaches_least_squares() -> None:
    print('\ntest_linear_kernel_approaches_least_squares():')
    X = rs.uniform(size=(50, 3))
    y = np.matmul(X, np.array([[1.], [-2.], [.5]]))
    omega = kernel_matrix(X, X[rs.randint(0, 50, size=10)], kernel='linear',
                          kernel_param=1.)
    reg = RegularizedRegression(regularization_parameter=1e6).fit(omega, y)
    output_weights, *_ = np.linalg.lstsq(omega, y, rcond=None)
    np.testing.assert_allclose(reg.predict(omega),
                               np.matmul(omega, output_weights), atol=1e-4)
    np.testing.assert_allclose(reg.predict(omega), y, atol=1e-4)


def test_single_output() -> None:
    print('\ntest_single_output():')
    reg = RegularizedRegression().fit(X_tall, y_tall[:, 0])
    assert reg.output_weights_.shape == (15, 1)
    assert reg.coef_.shape == (15, )
    assert reg.predict(X_tall).shape == (60, )


def test_set_output_weights() -> None:
    print('\ntest_set_output_weights():')
    reg = RegularizedRegression().set_output_weights(np.ones(15))
    np.testing.assert_allclose(reg.predict(X_tall), X_tall.sum(axis=1))
    with pytest.raises(DimensionMismatchError):
        reg.predict(X_wide)


def test_not_fitted() -> None:
    print('\ntest_not_fitted():')
    with pytest.raises(UntrainedModelError):
        RegularizedRegression().predict(X_tall)


def test_invalid_params() -> None:
    print('\ntest_invalid_params():')
    for regularization_parameter in [0., -1., np.inf, np.nan, True, '1']:
        with pytest.raises(ConfigurationError):
            RegularizedRegression(
                regularization_parameter=regularization_parameter)\
                .fit(X_tall, y_tall)
    with pytest.raises(ConfigurationError):
        RegularizedRegression(solver='svd').fit(X_tall, y_tall)


def test_dimension_mismatch() -> None:
    print('\ntest_dimension_mismatch():')
    with pytest.raises(DimensionMismatchError):
        RegularizedRegression().fit(X_tall, y_wide)


def test_numerical_degeneracy() -> None:
    print('\ntest_numerical_degeneracy():')
    X = rs.uniform(size=(20, 5))
    X[:, 0] = 0.
    with pytest.raises(NumericalDegeneracyError) as excinfo:
        RegularizedRegression(regularization_parameter=1e300)\
            .fit(X, np.ones(20))
    assert isinstance(excinfo.value, np.linalg.LinAlgError)
    assert excinfo.value.__cause__ is not None
