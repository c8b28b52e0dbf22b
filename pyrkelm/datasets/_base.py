"""The :mod:`pyrkelm.datasets` includes base datasets."""

# Authors: Peter Steiner <peter.steiner@tu-dresden.de>
# License: BSD 3 clause

import os
import logging
from typing import Optional, Tuple, Union

import numpy as np
import pandas as pd
from sklearn.utils import Bunch, check_random_state


logger = logging.getLogger(__name__)

SEDIMENT_FEATURE_NAMES = ('Cv', 'Dgr', 'd/R', 'lambda_s', 'P/B')
"""Input columns of the sediment transport data in their expected order:
volumetric sediment concentration, dimensionless grain size, ratio of
median grain size to hydraulic radius, overall sediment friction factor
and pipe diameter to bed width ratio."""


def make_row_sum_regression(
        n_samples: int = 100, n_features: int = 5, *,
        random_state: Union[int, np.random.RandomState, None] = 42) \
        -> Tuple[np.ndarray, np.ndarray]:
    """
    Generate inputs uniformly distributed in [0, 1] and their row sums.

    Parameters
    ----------
    n_samples : int, default=100
    n_features : int, default=5
    random_state : Union[int, np.random.RandomState, None], default=42

    Returns
    -------
    X : ndarray of shape (n_samples, n_features)
    y : ndarray of shape (n_samples, )
    """
    rs = check_random_state(random_state)
    X = rs.uniform(low=0., high=1., size=(n_samples, n_features))
    return X, np.sum(X, axis=1)


def _read_table(filename: Union[str, os.PathLike],
                header: Optional[Union[int, str]]) -> pd.DataFrame:
    extension = os.path.splitext(str(filename))[1].lower()
    if extension in ('.xls', '.xlsx'):
        return pd.read_excel(filename,
                             header=0 if header == 'infer' else header)
    elif extension == '.csv':
        return pd.read_csv(filename, header=header)
    else:
        return pd.read_csv(filename, header=header, sep=r'\s+')


def load_sediment_transport(filename: Union[str, os.PathLike], *,
                            target_column: str = 'Fr',
                            header: Optional[Union[int, str]] = 'infer') \
        -> Bunch:
    """
    Load a sediment transport table from harddisk.

    Comma separated (.csv), Excel (.xls, .xlsx) and whitespace separated
    tables (any other extension) are supported.

    Parameters
    ----------
    filename : Union[str, os.PathLike]
    target_column : str, default='Fr'
        Name of the target column. The target is optional, e.g. for data that
        should only be predicted.
    header : Optional[Union[int, str]], default='infer'
        Passed to pandas. If None, the table has no header and the columns
        are in the order of SEDIMENT_FEATURE_NAMES, optionally followed by
        the target.

    Returns
    -------
    data : Bunch
        Dictionary-like object with the attributes ``data``, ``target``,
        ``feature_names``, ``target_names`` and ``frame``. ``target`` is None
        if the table has no target column.
    """
    frame = _read_table(filename, header=header)
    if header is None:
        columns = list(SEDIMENT_FEATURE_NAMES)
        if frame.shape[1] == len(columns) + 1:
            columns.append(target_column)
        if frame.shape[1] != len(columns):
            raise ValueError(
                "Expected {0} or {1} columns, got {2}."
                .format(len(SEDIMENT_FEATURE_NAMES),
                        len(SEDIMENT_FEATURE_NAMES) + 1, frame.shape[1]))
        frame.columns = columns

    missing = [name for name in SEDIMENT_FEATURE_NAMES
               if name not in frame.columns]
    if missing:
        raise ValueError("The columns {0} are missing in {1}."
                         .format(missing, filename))

    data = frame.loc[:, list(SEDIMENT_FEATURE_NAMES)].to_numpy(dtype=float)
    target = None
    if target_column in frame.columns:
        target = frame[target_column].to_numpy(dtype=float)
    logger.info("Dataset loaded: %d samples from %s", data.shape[0], filename)
    return Bunch(data=data, target=target,
                 feature_names=list(SEDIMENT_FEATURE_NAMES),
                 target_names=[target_column], frame=frame)
