"""Regularized least-squares regression with primal and dual solution."""

# Authors: Peter Steiner <peter.steiner@tu-dresden.de>
# License: BSD 3 clause

from __future__ import annotations

import logging
import warnings
from typing import Callable, Dict, Literal, Union

import numpy as np
import scipy.linalg
from scipy.linalg import LinAlgWarning
from sklearn.base import BaseEstimator, RegressorMixin
from sklearn.utils import check_array
from sklearn.utils.extmath import safe_sparse_dot

from ..exceptions import (ConfigurationError, DimensionMismatchError,
                          NumericalDegeneracyError, UntrainedModelError)


logger = logging.getLogger(__name__)


def _solve_positive_definite(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """
    Solve a x = b for a symmetric positive definite matrix a.

    Raises
    ------
    NumericalDegeneracyError
        If a is singular or too ill-conditioned for an accurate solution.
    """
    with warnings.catch_warnings():
        warnings.simplefilter('error', LinAlgWarning)
        try:
            return scipy.linalg.solve(a, b, assume_a='pos')
        except (np.linalg.LinAlgError, LinAlgWarning) as e:
            raise NumericalDegeneracyError(
                "The regularized system of size {0} cannot be solved "
                "accurately. Consider a smaller regularization_parameter. "
                "{1}".format(a.shape, e)) from e


def _solve_primal(X: np.ndarray, y: np.ndarray,
                  regularization_parameter: float) -> np.ndarray:
    """Return (I/C + X^T X)^-1 X^T y, inverting an n_features square matrix."""
    lhs = safe_sparse_dot(X.T, X, dense_output=True)
    lhs[np.diag_indices_from(lhs)] += 1. / regularization_parameter
    return _solve_positive_definite(
        lhs, safe_sparse_dot(X.T, y, dense_output=True))


def _solve_dual(X: np.ndarray, y: np.ndarray,
                regularization_parameter: float) -> np.ndarray:
    """Return X^T (I/C + X X^T)^-1 y, inverting an n_samples square matrix."""
    lhs = safe_sparse_dot(X, X.T, dense_output=True)
    lhs[np.diag_indices_from(lhs)] += 1. / regularization_parameter
    return safe_sparse_dot(X.T, _solve_positive_definite(lhs, y),
                           dense_output=True)


SOLVERS: Dict[str, Callable[[np.ndarray, np.ndarray, float], np.ndarray]] = {
    'primal': _solve_primal,
    'dual': _solve_dual,
}


class RegularizedRegression(RegressorMixin, BaseEstimator):
    """
    Regularized linear regression without intercept.

    The output weights minimize ||X W - y||^2 + ||W||^2 / C, where C is the
    regularization parameter. Two algebraically equivalent closed forms are
    available [#]_:

        - 'primal': W = (I/C + X^T X)^-1 X^T y
        - 'dual': W = X^T (I/C + X X^T)^-1 y

    .. [#] G.-B. Huang et al., ‘Extreme Learning Machine for Regression and
           Multiclass Classification’, IEEE Transactions on Systems, Man, and
           Cybernetics, Part B, vol. 42, no. 2, pp. 513-529, 2012,
           doi: 10.1109/TSMCB.2011.2168604.

    Parameters
    ----------
    regularization_parameter : float, default=1000.
        Inverse of the L2 penalty. Must be positive.
    solver : Literal['auto', 'primal', 'dual'], default='auto'
        'auto' chooses the primal form if n_samples >= n_features and the
        dual form otherwise, so that the smaller matrix is factorized.

    Attributes
    ----------
    output_weights_ : ndarray of shape (n_features, n_targets)
    solver_ : Literal['primal', 'dual']
        The closed form that was used during fit.
    """

    def __init__(self, *,
                 regularization_parameter: float = 1000.,
                 solver: Literal['auto', 'primal', 'dual'] = 'auto') -> None:
        """Construct the RegularizedRegression."""
        self.regularization_parameter = regularization_parameter
        self.solver = solver

    def fit(self, X: np.ndarray, y: np.ndarray) -> RegularizedRegression:
        """
        Fit the regressor.

        Parameters
        ----------
        X : ndarray of shape (n_samples, n_features)
        y : ndarray of shape (n_samples,) or (n_samples, n_targets)

        Returns
        -------
        self
        """
        self._validate_hyperparameters()
        X = check_array(X, dtype=np.float64)
        y = check_array(y, dtype=np.float64, ensure_2d=False)
        if y.ndim > 2 or X.shape[0] != y.shape[0]:
            raise DimensionMismatchError(
                "X and y need the same number of samples, got X: {0} and "
                "y: {1}.".format(X.shape, y.shape))

        solver = self.solver
        if solver == 'auto':
            solver = 'primal' if X.shape[0] >= X.shape[1] else 'dual'
        logger.debug("Solving the %s form for X of shape %s.", solver,
                     X.shape)
        output_weights = SOLVERS[solver](
            X, y.reshape(X.shape[0], -1), self.regularization_parameter)

        self.output_weights_ = output_weights
        self.solver_ = solver
        self.n_features_in_ = X.shape[1]
        self._single_output = y.ndim == 1
        return self

    def predict(self, X: np.ndarray) -> np.ndarray:
        """
        Predict output y according to input X.

        Parameters
        ----------
        X : ndarray of shape (n_samples, n_features)

        Returns
        -------
        y : ndarray of shape (n_samples,) or (n_samples, n_targets)
        """
        if not hasattr(self, 'output_weights_'):
            raise UntrainedModelError(
                "This {0} instance is not fitted yet.".format(
                    type(self).__name__))
        X = check_array(X, dtype=np.float64)
        if X.shape[1] != self.output_weights_.shape[0]:
            raise DimensionMismatchError(
                "X has {0} features, but {1} was fitted with {2} features."
                .format(X.shape[1], type(self).__name__,
                        self.output_weights_.shape[0]))
        y = safe_sparse_dot(X, self.output_weights_, dense_output=True)
        if self._single_output:
            return y.ravel()
        return y

    def set_output_weights(
            self, output_weights: np.ndarray) -> RegularizedRegression:
        """
        Use predefined output weights instead of fitting them.

        Parameters
        ----------
        output_weights : ndarray of shape (n_features, ) or
        (n_features, n_targets)
            One-dimensional weights lead to one-dimensional predictions.

        Returns
        -------
        self
        """
        self._validate_hyperparameters()
        output_weights = check_array(output_weights, dtype=np.float64,
                                     ensure_2d=False)
        if output_weights.ndim > 2:
            raise DimensionMismatchError(
                "output_weights must be one- or two-dimensional, got shape "
                "{0}.".format(output_weights.shape))
        self._single_output = output_weights.ndim == 1
        self.output_weights_ = output_weights.reshape(
            output_weights.shape[0], -1)
        self.n_features_in_ = output_weights.shape[0]
        return self

    def _validate_hyperparameters(self) -> None:
        """Validate the hyperparameters."""
        if isinstance(self.regularization_parameter, bool) \
                or not isinstance(self.regularization_parameter,
                                  (int, float, np.integer, np.floating)) \
                or not np.isfinite(self.regularization_parameter) \
                or self.regularization_parameter <= 0:
            raise ConfigurationError(
                "regularization_parameter must be positive and finite, got "
                "{0}.".format(self.regularization_parameter))
        if self.solver != 'auto' and self.solver not in SOLVERS:
            raise ConfigurationError(
                "The solver '{0}' is not supported. Supported solvers are {1}."
                .format(self.solver, ['auto'] + list(SOLVERS)))

    @property
    def coef_(self) -> Union[np.ndarray, None]:
        """
        Return the output weights. Compatibility to sklearn.linear_model.Ridge.

        Returns
        -------
        coef_ : ndarray of shape (n_features,) or (n_targets, n_features)
        """
        if not hasattr(self, 'output_weights_'):
            return None
        if self._single_output:
            return self.output_weights_.ravel()
        return np.transpose(self.output_weights_)
