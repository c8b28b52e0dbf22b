"""The :mod:`pyrkelm.util` has utilities for running, testing and analyzing."""

# Author: Peter Steiner <peter.steiner@tu-dresden.de>,
# Michael Schindler <michael.schindler@maschindler.de>
# License: BSD 3 clause

import sys
import time
from typing import Any, Callable, Tuple, Union

import os
import logging
import argparse
import numpy as np
from joblib import dump, load

from sklearn.base import BaseEstimator
from sklearn.exceptions import NotFittedError
from sklearn.utils.validation import check_is_fitted

from ..extreme_learning_machine import RKELMRegressor
from ..exceptions import UntrainedModelError


argument_parser = argparse.ArgumentParser(
    description='Standard input parser for PyRKELM scripts.')
argument_parser.add_argument('-o', '--out', metavar='outdir', nargs='?',
                             help='output directory', dest='out', type=str)
argument_parser.add_argument(dest='params', metavar='params', nargs='*',
                             help='optional parameter for scripts')

# noinspection PyArgumentList
logging.basicConfig(
    level=logging.INFO,
    handlers=[logging.StreamHandler(sys.stdout)]
)


def new_logger(name: str, directory: str = os.getcwd()) -> logging.Logger:
    """Register a new logger for logfiles."""
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    formatter = logging.Formatter(
        fmt='%(asctime)s %(levelname)s %(name)s %(message)s')
    handler = logging.FileHandler(
        os.path.join(directory, '{0}.log'.format(name)))
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    return logger


def timed(func: Callable, *args: Any, **kwargs: Any) -> Tuple[Any, float]:
    """
    Call a function and measure its wall-clock duration.

    Parameters
    ----------
    func : Callable
        e.g. the ``predict`` method of a trained model.
    args : Any
        Positional arguments of ``func``.
    kwargs : Any
        Keyword arguments of ``func``.

    Returns
    -------
    result : Any
        The return value of ``func``.
    duration : float
        Elapsed time in seconds.
    """
    start = time.perf_counter()
    result = func(*args, **kwargs)
    return result, time.perf_counter() - start


def save_model(estimator: BaseEstimator,
               filename: Union[str, os.PathLike]) -> None:
    """
    Persist a trained estimator or pipeline with joblib.

    Parameters
    ----------
    estimator : BaseEstimator
    filename : Union[str, os.PathLike]
    """
    _check_trained(estimator)
    dump(estimator, filename)
    logging.info('Model saved to {0}'.format(filename))


def load_model(filename: Union[str, os.PathLike]) -> BaseEstimator:
    """
    Load a trained estimator or pipeline persisted with ``save_model``.

    Parameters
    ----------
    filename : Union[str, os.PathLike]

    Returns
    -------
    estimator : BaseEstimator
    """
    estimator = load(filename)
    _check_trained(estimator)
    logging.info('Model loaded from {0}'.format(filename))
    return estimator


def export_trained_state(estimator: RKELMRegressor,
                         filename: Union[str, os.PathLike]) -> None:
    """
    Export the trained state of an RKELMRegressor to a .npz file.

    Only numpy arrays are stored, so that inference is possible without the
    training data and without unpickling Python objects.

    Parameters
    ----------
    estimator : RKELMRegressor
    filename : Union[str, os.PathLike]
    """
    _check_trained(estimator)
    arrays = {key: np.asarray(value) for key, value
              in estimator.get_trained_state().items() if value is not None}
    np.savez(filename, **arrays)
    logging.info('Trained state exported to {0}'.format(filename))


def import_trained_state(
        filename: Union[str, os.PathLike]) -> RKELMRegressor:
    """
    Rebuild an RKELMRegressor from a .npz file of ``export_trained_state``.

    Parameters
    ----------
    filename : Union[str, os.PathLike]

    Returns
    -------
    estimator : RKELMRegressor
        Ready for ``predict``.
    """
    with np.load(filename, allow_pickle=False) as npzfile:
        estimator = RKELMRegressor.from_trained_state(
            support_vectors=npzfile['support_vectors'],
            output_weights=npzfile['output_weights'],
            kernel=str(npzfile['kernel']),
            kernel_param=tuple(float(p) for p in npzfile['kernel_param']),
            regularization_parameter=float(
                npzfile['regularization_parameter']),
            support=npzfile['support'] if 'support' in npzfile else None)
    logging.info('Trained state imported from {0}'.format(filename))
    return estimator


def _check_trained(estimator: BaseEstimator) -> None:
    try:
        check_is_fitted(estimator)
    except NotFittedError as e:
        raise UntrainedModelError(
            "{0} is not fitted yet.".format(type(estimator).__name__)) from e
