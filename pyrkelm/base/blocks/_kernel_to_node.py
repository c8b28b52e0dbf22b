"""The :mod:`kernel_to_node` contains the KernelToNode class."""

# Authors: Peter Steiner <peter.steiner@tu-dresden.de>
# License: BSD 3 clause

from __future__ import annotations

import logging
from typing import Optional, Sequence, Union

import numpy as np
from sklearn.base import BaseEstimator, TransformerMixin
from sklearn.utils import check_array, check_random_state

from ...base import _random_support, check_kernel, check_kernel_param
from ...base._kernels import KernelLike, kernel_matrix
from ...exceptions import (ConfigurationError, DimensionMismatchError,
                           UntrainedModelError)


logger = logging.getLogger(__name__)


class KernelToNode(TransformerMixin, BaseEstimator):
    """
    KernelToNode class for Reduced Kernel Extreme Learning Machines.

    Fitting draws a random support set from the training rows. Transforming
    computes the kernel response of every input row to every support row,
    which is the hidden layer state of the RKELM.

    Parameters
    ----------
    hidden_layer_size : int, default=1000
        Number of support rows, equals the number of output features.
    kernel : KernelLike, default='rbf'
        The kernel family.
            - 'rbf', the radial basis function kernel,
            returns exp(-||a - b||^2 / p1)
            - 'linear', the inner product, returns a b^T
            - 'poly', the polynomial kernel, returns (a b^T + p1)^p2
            - 'wavelet', the Morlet-style wavelet kernel,
            returns cos(p3 (sum(a) - sum(b)) / p2) exp(-||a - b||^2 / p1)
    kernel_param : Union[float, Sequence[float]], default=(0.1, )
        Kernel parameters p1, p2, p3.
    replace : bool, default=True
        Draw the support rows with replacement.
    random_state : Union[int, np.random.RandomState, None], default=42
    """

    def __init__(self, *,
                 hidden_layer_size: int = 1000,
                 kernel: KernelLike = 'rbf',
                 kernel_param: Union[float, Sequence[float]] = (0.1, ),
                 replace: bool = True,
                 random_state: Union[int, np.random.RandomState,
                                     None] = 42) -> None:
        """Construct the KernelToNode."""
        self.hidden_layer_size = hidden_layer_size
        self.kernel = kernel
        self.kernel_param = kernel_param
        self.replace = replace
        self.random_state = random_state

    def fit(self, X: np.ndarray, y: None = None) -> KernelToNode:
        """
        Fit the KernelToNode. Draw the support set.

        Parameters
        ----------
        X : ndarray of shape (n_samples, n_features)
        y : None
            ignored

        Returns
        -------
        self : returns a trained KernelToNode.
        """
        self._validate_hyperparameters()
        X = check_array(X, dtype=np.float64)
        support = _random_support(
            n_samples=X.shape[0], hidden_layer_size=self.hidden_layer_size,
            random_state=check_random_state(self.random_state),
            replace=self.replace)
        n_unique = np.unique(support).size
        if n_unique < support.size:
            logger.info("Support set contains %d duplicate rows of %d.",
                        support.size - n_unique, support.size)
        self.support_ = support
        self.support_vectors_ = X[support, :]
        self.n_features_in_ = X.shape[1]
        return self

    def transform(self, X: np.ndarray) -> np.ndarray:
        """
        Compute the kernel matrix between X and the support rows.

        Parameters
        ----------
        X : ndarray of shape (n_samples, n_features)

        Returns
        -------
        y: ndarray of shape (n_samples, hidden_layer_size)
        """
        if not hasattr(self, 'support_vectors_'):
            raise UntrainedModelError(
                "This {0} instance is not fitted yet.".format(
                    type(self).__name__))
        X = check_array(X, dtype=np.float64)
        if X.shape[1] != self.support_vectors_.shape[1]:
            raise DimensionMismatchError(
                "X has {0} features, but {1} was fitted with {2} features."
                .format(X.shape[1], type(self).__name__,
                        self.support_vectors_.shape[1]))
        return kernel_matrix(X, self.support_vectors_, kernel=self.kernel,
                             kernel_param=self.kernel_param)

    def set_support(self, support_vectors: np.ndarray,
                    support: Optional[np.ndarray] = None) -> KernelToNode:
        """
        Use predefined support rows instead of drawing them.

        Parameters
        ----------
        support_vectors : ndarray of shape (hidden_layer_size, n_features)
        support : Optional[ndarray] of shape (hidden_layer_size, )
            Row indices into the original training data, if known.

        Returns
        -------
        self : returns a KernelToNode ready for transformation.
        """
        self._validate_hyperparameters()
        support_vectors = check_array(support_vectors, dtype=np.float64)
        if support_vectors.shape[0] != self.hidden_layer_size:
            raise DimensionMismatchError(
                "Expected {0} support vectors, got {1}."
                .format(self.hidden_layer_size, support_vectors.shape[0]))
        if support is not None:
            support = np.asarray(support, dtype=int)
            if support.shape != (self.hidden_layer_size, ):
                raise DimensionMismatchError(
                    "support must have shape ({0}, ), got {1}."
                    .format(self.hidden_layer_size, support.shape))
        self.support_ = support
        self.support_vectors_ = support_vectors
        self.n_features_in_ = support_vectors.shape[1]
        return self

    def _validate_hyperparameters(self) -> None:
        """Validate the hyperparameters."""
        check_kernel_param(self.kernel_param, check_kernel(self.kernel))
        if isinstance(self.hidden_layer_size, bool) \
                or not isinstance(self.hidden_layer_size, (int, np.integer)) \
                or self.hidden_layer_size <= 0:
            raise ConfigurationError(
                "hidden_layer_size must be a positive integer, got {0}."
                .format(self.hidden_layer_size))
