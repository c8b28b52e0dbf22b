"""The :mod:`pyrkelm.exceptions` module includes all custom errors."""

# Authors: Peter Steiner <peter.steiner@tu-dresden.de>
# License: BSD 3 clause

import numpy as np
from sklearn.exceptions import NotFittedError


class ConfigurationError(ValueError):
    """
    Raised when a hyperparameter of an estimator is invalid.

    This covers unknown kernels, an under-specified ``kernel_param``, a
    non-positive ``regularization_parameter`` or ``hidden_layer_size`` and an
    unknown ``solver``.
    """


class UntrainedModelError(NotFittedError):
    """
    Raised when a model is used for inference before it was fitted.

    Inherits from :class:`sklearn.exceptions.NotFittedError`, hence it can be
    caught like any other scikit-learn fitting error.
    """


class DimensionMismatchError(ValueError):
    """Raised when the shapes of inputs and targets or fitted state differ."""


class NumericalDegeneracyError(np.linalg.LinAlgError):
    """
    Raised when the regularized linear system cannot be solved accurately.

    The underlying linear algebra error or warning is available as
    ``__cause__``.
    """


__all__ = ('ConfigurationError',
           'UntrainedModelError',
           'DimensionMismatchError',
           'NumericalDegeneracyError')
