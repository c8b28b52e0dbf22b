"""The :mod:`base` contains the random initialization of PyRKELM models."""

# Authors: Peter Steiner <peter.steiner@tu-dresden.de>
# License: BSD 3 clause

from typing import Union

import numpy as np

from ..exceptions import ConfigurationError


def _random_support(n_samples: Union[int, np.integer],
                    hidden_layer_size: Union[int, np.integer],
                    random_state: np.random.RandomState,
                    replace: bool = True) -> np.ndarray:
    """
    Return uniformly drawn row indices that form the support set.

    Parameters
    ----------
    n_samples : Union[int, np.integer]
        Number of available training rows.
    hidden_layer_size : Union[int, np.integer]
        Number of support rows to draw.
    random_state : numpy.random.RandomState
        Owned generator. Only its state is advanced.
    replace : bool, default=True
        Draw independently with replacement, i.e. the same row can be
        selected multiple times. If False, the rows are distinct.

    Returns
    -------
    support : ndarray of shape (hidden_layer_size, ) with values in
    [0, n_samples)
    """
    if n_samples <= 0:
        raise ValueError("n_samples must be > 0, got {0}.".format(n_samples))
    if replace:
        return random_state.randint(low=0, high=n_samples,
                                    size=hidden_layer_size)
    if hidden_layer_size > n_samples:
        raise ConfigurationError(
            "hidden_layer_size must be <= n_samples ({0}) when sampling "
            "without replacement, got {1}."
            .format(n_samples, hidden_layer_size))
    return random_state.choice(n_samples, size=hidden_layer_size,
                               replace=False)
