"""Testing for the preprocessing module."""

import numpy as np
from sklearn.compose import TransformedTargetRegressor
from sklearn.metrics import mean_absolute_error

from pyrkelm.datasets import make_row_sum_regression
from pyrkelm.extreme_learning_machine import RKELMRegressor
from pyrkelm.preprocessing import MinMaxNormalizer, make_normalized_rkelm


def test_min_max_normalizer_range() -> None:
    print('\ntest_min_max_normalizer_range():')
    rs = np.random.RandomState(42)
    X = np.column_stack((rs.uniform(-5., 5., 50), rs.uniform(100., 200., 50)))
    normalizer = MinMaxNormalizer().fit(X)
    X_normalized = normalizer.transform(X)
    np.testing.assert_allclose(X_normalized.min(axis=0), [-1., -1.])
    np.testing.assert_allclose(X_normalized.max(axis=0), [1., 1.])
    np.testing.assert_allclose(normalizer.inverse_transform(X_normalized), X)
    assert normalizer.scale_.shape == (2, )


def test_min_max_normalizer_columns_independent() -> None:
    print('\ntest_min_max_normalizer_columns_independent():')
    X = np.array([[0., 10.], [1., 20.], [2., 30.]])
    X_normalized = MinMaxNormalizer().fit_transform(X)
    np.testing.assert_allclose(X_normalized[:, 0], X_normalized[:, 1])
    np.testing.assert_allclose(X_normalized[:, 0], [-1., 0., 1.])


def test_make_normalized_rkelm() -> None:
    print('\ntest_make_normalized_rkelm():')
    X, y = make_row_sum_regression(n_samples=100, random_state=42)
    X_raw = X * np.array([1., 10., 100., 1000., .1]) + 7.
    y_raw = 50. * y + 3.
    pipeline = make_normalized_rkelm(
        kernel='rbf', kernel_param=[2.], regularization_parameter=100.,
        hidden_layer_size=30, random_state=42)
    pipeline.fit(X_raw, y_raw)
    assert isinstance(pipeline['rkelm'], TransformedTargetRegressor)
    assert isinstance(pipeline['rkelm'].regressor_, RKELMRegressor)
    y_pred = pipeline.predict(X_raw)
    assert y_pred.shape == (100, )
    assert mean_absolute_error(y_raw, y_pred) < 0.2 * np.ptp(y_raw)
    np.testing.assert_array_equal(y_pred, pipeline.predict(X_raw))
