"""Testing for the datasets module."""

import numpy as np
import pandas as pd
import pytest

from pyrkelm.datasets import (SEDIMENT_FEATURE_NAMES, load_sediment_transport,
                              make_row_sum_regression)


def _sediment_frame(n_samples: int = 8) -> pd.DataFrame:
    rs = np.random.RandomState(42)
    frame = pd.DataFrame(rs.uniform(size=(n_samples, 5)),
                         columns=list(SEDIMENT_FEATURE_NAMES))
    frame['Fr'] = rs.uniform(size=n_samples)
    return frame


def test_make_row_sum_regression() -> None:
    print('\ntest_make_row_sum_regression():')
    X, y = make_row_sum_regression(n_samples=100, n_features=5)
    assert X.shape == (100, 5)
    assert y.shape == (100, )
    assert X.min() >= 0. and X.max() <= 1.
    np.testing.assert_allclose(y, X.sum(axis=1))
    X_2, _ = make_row_sum_regression(n_samples=100, n_features=5)
    np.testing.assert_array_equal(X, X_2)


def test_load_sediment_transport_csv(tmp_path) -> None:
    print('\ntest_load_sediment_transport_csv():')
    frame = _sediment_frame()
    filename = tmp_path / 'sediment.csv'
    frame[['Fr'] + list(SEDIMENT_FEATURE_NAMES)].to_csv(filename, index=False)
    dataset = load_sediment_transport(filename)
    assert dataset.feature_names == list(SEDIMENT_FEATURE_NAMES)
    np.testing.assert_allclose(
        dataset.data, frame[list(SEDIMENT_FEATURE_NAMES)].to_numpy())
    np.testing.assert_allclose(dataset.target, frame['Fr'].to_numpy())


def test_load_sediment_transport_without_header(tmp_path) -> None:
    print('\ntest_load_sediment_transport_without_header():')
    frame = _sediment_frame()
    filename = tmp_path / 'sediment.txt'
    frame.drop(columns='Fr').to_csv(filename, sep=' ', header=False,
                                    index=False)
    dataset = load_sediment_transport(filename, header=None)
    assert dataset.data.shape == (8, 5)
    assert dataset.target is None

    filename = tmp_path / 'sediment_with_target.txt'
    frame.to_csv(filename, sep=' ', header=False, index=False)
    dataset = load_sediment_transport(filename, header=None)
    np.testing.assert_allclose(dataset.target, frame['Fr'].to_numpy())


def test_load_sediment_transport_missing_columns(tmp_path) -> None:
    print('\ntest_load_sediment_transport_missing_columns():')
    filename = tmp_path / 'sediment.csv'
    _sediment_frame().drop(columns='Dgr').to_csv(filename, index=False)
    with pytest.raises(ValueError):
        load_sediment_transport(filename)
    filename = tmp_path / 'sediment.txt'
    _sediment_frame().iloc[:, :3].to_csv(filename, sep=' ', header=False,
                                         index=False)
    with pytest.raises(ValueError):
        load_sediment_transport(filename, header=None)
