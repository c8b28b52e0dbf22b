"""The :mod:`extreme_learning_machine` contains the RKELMRegressor."""

# Authors: Peter Steiner <peter.steiner@tu-dresden.de>
# License: BSD 3 clause

from __future__ import annotations

import time
import logging
from typing import Any, Dict, Literal, Optional, Sequence, Union

import numpy as np
from sklearn.base import BaseEstimator, MultiOutputMixin, RegressorMixin
from sklearn.utils import check_array

from ..base import check_kernel
from ..base.blocks import KernelToNode
from ..base._kernels import KernelLike
from ..linear_model import RegularizedRegression
from ..exceptions import (ConfigurationError, DimensionMismatchError,
                          NumericalDegeneracyError, UntrainedModelError)


logger = logging.getLogger(__name__)


class RKELMRegressor(MultiOutputMixin, RegressorMixin, BaseEstimator):
    """
    Reduced Kernel Extreme Learning Machine regressor.

    A random subset of the training rows (the support set) serves as kernel
    centers of a single hidden layer. The output weights are the closed-form
    solution of a regularized least-squares problem on the kernel matrix
    between the training rows and the support rows.

    All hyperparameters are validated at construction, in ``set_params`` and
    in ``fit``.

    Parameters
    ----------
    kernel : KernelLike, default='rbf'
        The kernel family, one of 'rbf', 'linear', 'poly' or 'wavelet', or a
        ``pyrkelm.base.KernelType``.
    kernel_param : Union[float, Sequence[float]], default=(0.1, )
        Up to three positive kernel parameters. 'rbf' and 'linear' need at
        least one, 'poly' two (bias, exponent) and 'wavelet' three
        (bandwidth, dilation, frequency).
    regularization_parameter : float, default=1000.
        Inverse of the L2 penalty of the output weights.
    hidden_layer_size : int, default=1000
        Number of support rows.
    solver : Literal['auto', 'primal', 'dual'], default='auto'
        Closed form of the solution. 'auto' factorizes the smaller matrix.
    replace : bool, default=True
        Draw the support rows with replacement. Duplicate support rows are
        possible then. If False, hidden_layer_size must not exceed the number
        of training samples.
    random_state : Union[int, np.random.RandomState, None], default=42

    Attributes
    ----------
    support_ : ndarray of shape (hidden_layer_size, )
        Indices of the training rows that were drawn as support rows.
    support_vectors_ : ndarray of shape (hidden_layer_size, n_features)
    output_weights_ : ndarray of shape (hidden_layer_size, n_targets)
    solver_ : Literal['primal', 'dual']
    fit_time_ : float
        Duration of the last call to ``fit`` in seconds.
    """

    def __init__(self, *,
                 kernel: KernelLike = 'rbf',
                 kernel_param: Union[float, Sequence[float]] = (0.1, ),
                 regularization_parameter: float = 1000.,
                 hidden_layer_size: int = 1000,
                 solver: Literal['auto', 'primal', 'dual'] = 'auto',
                 replace: bool = True,
                 random_state: Union[int, np.random.RandomState,
                                     None] = 42) -> None:
        """Construct the RKELMRegressor."""
        self.kernel = kernel
        self.kernel_param = kernel_param
        self.regularization_parameter = regularization_parameter
        self.hidden_layer_size = hidden_layer_size
        self.solver = solver
        self.replace = replace
        self.random_state = random_state
        self._validate_hyperparameters()

    @classmethod
    def from_trained_state(
            cls, *, support_vectors: np.ndarray, output_weights: np.ndarray,
            kernel: KernelLike = 'rbf',
            kernel_param: Union[float, Sequence[float]] = (0.1, ),
            regularization_parameter: float = 1000.,
            support: Optional[np.ndarray] = None) -> RKELMRegressor:
        """
        Build a predict-ready RKELMRegressor from a persisted trained state.

        Parameters
        ----------
        support_vectors : ndarray of shape (hidden_layer_size, n_features)
        output_weights : ndarray of shape (hidden_layer_size, ) or
        (hidden_layer_size, n_targets)
        kernel : KernelLike, default='rbf'
        kernel_param : Union[float, Sequence[float]], default=(0.1, )
        regularization_parameter : float, default=1000.
        support : Optional[ndarray] of shape (hidden_layer_size, )
            Indices of the support rows in the training data, if known.

        Returns
        -------
        estimator : RKELMRegressor
        """
        support_vectors = check_array(support_vectors, dtype=np.float64)
        output_weights = np.asarray(output_weights, dtype=np.float64)
        if output_weights.shape[0] != support_vectors.shape[0]:
            raise DimensionMismatchError(
                "output_weights has {0} rows, but there are {1} support "
                "vectors.".format(output_weights.shape[0],
                                  support_vectors.shape[0]))
        estimator = cls(kernel=kernel, kernel_param=kernel_param,
                        regularization_parameter=regularization_parameter,
                        hidden_layer_size=support_vectors.shape[0])
        estimator._kernel_to_node = estimator._make_kernel_to_node()\
            .set_support(support_vectors, support=support)
        estimator._regressor = estimator._make_regressor()\
            .set_output_weights(output_weights)
        estimator.n_features_in_ = support_vectors.shape[1]
        return estimator

    def get_trained_state(self) -> Dict[str, Any]:
        """
        Return everything needed for inference.

        The fitted kernel, kernel parameters and regularization parameter are
        returned, even if the hyperparameters were changed after fitting.

        Returns
        -------
        state : Dict[str, Any]
            Keyword arguments of ``from_trained_state``.
        """
        self._check_is_fitted()
        return {
            'kernel': check_kernel(self._kernel_to_node.kernel).value,
            'kernel_param': tuple(
                float(p) for p in np.atleast_1d(
                    self._kernel_to_node.kernel_param)),
            'regularization_parameter': float(
                self._regressor.regularization_parameter),
            'support_vectors': self._kernel_to_node.support_vectors_,
            # one-dimensional for a single target
            'output_weights': np.transpose(self._regressor.coef_),
            'support': self._kernel_to_node.support_,
        }

    def set_params(self, **params: Any) -> RKELMRegressor:
        """
        Set the parameters of this estimator and validate them.

        If the new parameters are rejected, the previous ones are restored.
        """
        previous_params = self.get_params(deep=False)
        try:
            super().set_params(**params)
            self._validate_hyperparameters()
        except ValueError:
            super().set_params(**previous_params)
            raise
        return self

    def fit(self, X: np.ndarray, y: np.ndarray) -> RKELMRegressor:
        """
        Fit the regressor.

        Either all fitted attributes are replaced, or, if fitting fails, the
        previously fitted state is kept.

        Parameters
        ----------
        X : ndarray of shape (n_samples, n_features)
        y : ndarray of shape (n_samples,) or (n_samples, n_targets)

        Returns
        -------
        self : Returns a trained RKELMRegressor model.
        """
        self._validate_hyperparameters()
        X = check_array(X, dtype=np.float64)
        y = check_array(y, dtype=np.float64, ensure_2d=False)
        if y.ndim > 2 or X.shape[0] != y.shape[0]:
            raise DimensionMismatchError(
                "X and y need the same number of samples, got X: {0} and "
                "y: {1}.".format(X.shape, y.shape))
        if self.hidden_layer_size > X.shape[0]:
            logger.info("hidden_layer_size (%d) exceeds the number of "
                        "samples (%d).", self.hidden_layer_size, X.shape[0])

        start = time.perf_counter()
        kernel_to_node = self._make_kernel_to_node()
        hidden_layer_state = kernel_to_node.fit_transform(X)
        if not np.all(np.isfinite(hidden_layer_state)):
            raise NumericalDegeneracyError(
                "The kernel matrix contains non-finite values. Check "
                "kernel_param {0} for the '{1}' kernel."
                .format(self.kernel_param, self.kernel))
        regressor = self._make_regressor().fit(hidden_layer_state, y)
        fit_time = time.perf_counter() - start

        self._kernel_to_node = kernel_to_node
        self._regressor = regressor
        self.n_features_in_ = X.shape[1]
        self.fit_time_ = fit_time
        logger.debug("Fitted %d support rows on X of shape %s with the %s "
                     "form in %.4f s.", self.hidden_layer_size, X.shape,
                     regressor.solver_, fit_time)
        return self

    def predict(self, X: np.ndarray) -> np.ndarray:
        """
        Predict the targets using the trained RKELMRegressor.

        Parameters
        ----------
        X : ndarray of shape (n_samples, n_features)

        Returns
        -------
        y : ndarray of shape (n_samples,) or (n_samples, n_targets)
            The predicted targets
        """
        self._check_is_fitted()
        X = check_array(X, dtype=np.float64)
        if X.shape[1] != self.n_features_in_:
            raise DimensionMismatchError(
                "X has {0} features, but {1} was fitted with {2} features."
                .format(X.shape[1], type(self).__name__, self.n_features_in_))
        hidden_layer_state = self._kernel_to_node.transform(X)
        if not np.all(np.isfinite(hidden_layer_state)):
            raise NumericalDegeneracyError(
                "The kernel matrix between X and the support vectors contains "
                "non-finite values. Check kernel_param {0} for the '{1}' "
                "kernel.".format(self._kernel_to_node.kernel_param,
                                 self._kernel_to_node.kernel))
        return self._regressor.predict(hidden_layer_state)

    def _make_kernel_to_node(self) -> KernelToNode:
        return KernelToNode(hidden_layer_size=self.hidden_layer_size,
                            kernel=self.kernel, kernel_param=self.kernel_param,
                            replace=self.replace,
                            random_state=self.random_state)

    def _make_regressor(self) -> RegularizedRegression:
        return RegularizedRegression(
            regularization_parameter=self.regularization_parameter,
            solver=self.solver)

    def _validate_hyperparameters(self) -> None:
        """Validate the hyperparameters."""
        self._make_kernel_to_node()._validate_hyperparameters()
        self._make_regressor()._validate_hyperparameters()
        if not isinstance(self.replace, (bool, np.bool_)):
            raise ConfigurationError(
                "replace must be a boolean, got {0}.".format(self.replace))

    def _check_is_fitted(self) -> None:
        if not self.__sklearn_is_fitted__():
            raise UntrainedModelError(
                "This {0} instance is not fitted yet. Call 'fit' with "
                "appropriate arguments before using this estimator."
                .format(type(self).__name__))

    def __sklearn_is_fitted__(self) -> bool:
        """Return True if the estimator holds a trained state."""
        return hasattr(self, '_kernel_to_node') \
            and hasattr(self, '_regressor')

    @property
    def support_(self) -> Optional[np.ndarray]:
        """
        Return the indices of the support rows.

        Returns
        -------
        support : Optional[ndarray] of shape (hidden_layer_size, )
            None if the model was built from a trained state without indices.
        """
        self._check_is_fitted()
        return self._kernel_to_node.support_

    @property
    def support_vectors_(self) -> np.ndarray:
        """
        Return the support rows, the kernel centers.

        Returns
        -------
        support_vectors : ndarray of shape (hidden_layer_size, n_features)
        """
        self._check_is_fitted()
        return self._kernel_to_node.support_vectors_

    @property
    def output_weights_(self) -> np.ndarray:
        """
        Return the output weights.

        Returns
        -------
        output_weights : ndarray of shape (hidden_layer_size, n_targets)
        """
        self._check_is_fitted()
        return self._regressor.output_weights_

    @property
    def solver_(self) -> Optional[str]:
        """
        Return the closed form used in the last fit.

        Returns
        -------
        solver : Optional[Literal['primal', 'dual']]
        """
        self._check_is_fitted()
        return getattr(self._regressor, 'solver_', None)
