"""The :mod:`kernels` contains the kernel functions for PyRKELM."""

# Authors: Peter Steiner <peter.steiner@tu-dresden.de>
# License: BSD 3 clause

from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, Literal, Optional, Sequence, Union

import numpy as np
from sklearn.metrics.pairwise import euclidean_distances
from sklearn.utils import check_array
from sklearn.utils.extmath import safe_sparse_dot

from ..exceptions import ConfigurationError, DimensionMismatchError


class KernelType(str, Enum):
    """
    Kernel families of the Reduced Kernel Extreme Learning Machine.

    Every member knows how many entries of ``kernel_param`` it reads, see
    :attr:`n_params`. Besides the member values, the legacy names of the
    ELM toolbox ('RBF_kernel', 'lin_kernel', 'poly_kernel', 'wav_kernel') are
    accepted when converting a string to a ``KernelType``.
    """

    RBF = 'rbf'
    LINEAR = 'linear'
    POLYNOMIAL = 'poly'
    WAVELET = 'wavelet'

    @property
    def n_params(self) -> int:
        """Minimum number of kernel parameters."""
        return _N_PARAMS[self]

    @classmethod
    def _missing_(cls, value: object) -> Optional[KernelType]:
        if isinstance(value, str):
            key = value.lower()
            key = _KERNEL_ALIASES.get(key, key)
            for member in cls:
                if member.value == key:
                    return member
        return None


_N_PARAMS: Dict[KernelType, int] = {
    KernelType.RBF: 1,
    KernelType.LINEAR: 1,
    KernelType.POLYNOMIAL: 2,
    KernelType.WAVELET: 3,
}

_KERNEL_ALIASES: Dict[str, str] = {
    'rbf_kernel': 'rbf',
    'lin_kernel': 'linear',
    'poly_kernel': 'poly',
    'polynomial': 'poly',
    'wav_kernel': 'wavelet',
}

MAX_KERNEL_PARAMS = 3

KernelLike = Union[KernelType, Literal['rbf', 'linear', 'poly', 'wavelet']]


def check_kernel(kernel: Union[KernelType, str]) -> KernelType:
    """
    Convert ``kernel`` to a :class:`KernelType`.

    Parameters
    ----------
    kernel : Union[KernelType, str]

    Returns
    -------
    kernel : KernelType

    Raises
    ------
    ConfigurationError
        If ``kernel`` does not name a supported kernel.
    """
    try:
        return KernelType(kernel)
    except ValueError:
        raise ConfigurationError(
            "The kernel '{0}' is not supported. Supported kernels are {1}."
            .format(kernel, [member.value for member in KernelType])) from None


def check_kernel_param(kernel_param: Union[float, Sequence[float], np.ndarray],
                       kernel: Union[KernelType, str]) -> np.ndarray:
    """
    Validate the kernel parameters for a given kernel family.

    Parameters
    ----------
    kernel_param : Union[float, Sequence[float], np.ndarray]
        A scalar or a sequence of up to three positive values.
    kernel : Union[KernelType, str]

    Returns
    -------
    kernel_param : ndarray of shape (n_params, )

    Raises
    ------
    ConfigurationError
        If there are too few or too many parameters for ``kernel``, or if any
        parameter is not a positive finite number.
    """
    kernel = check_kernel(kernel)
    try:
        params = np.atleast_1d(np.asarray(kernel_param, dtype=float))
    except (TypeError, ValueError):
        raise ConfigurationError(
            "kernel_param must be a positive real or a sequence of positive "
            "reals, got {0}.".format(kernel_param)) from None
    if params.ndim != 1:
        raise ConfigurationError(
            "kernel_param must be one-dimensional, got shape {0}."
            .format(params.shape))
    if params.size < kernel.n_params or params.size > MAX_KERNEL_PARAMS:
        raise ConfigurationError(
            "The '{0}' kernel requires between {1} and {2} kernel parameters, "
            "got {3}.".format(kernel.value, kernel.n_params,
                              MAX_KERNEL_PARAMS, params.size))
    if not np.all(np.isfinite(params)) or np.any(params <= 0.):
        raise ConfigurationError(
            "kernel_param must be positive and finite, got {0}."
            .format(params))
    return params


def rbf_kernel(A: np.ndarray, B: np.ndarray,
               kernel_param: np.ndarray) -> np.ndarray:
    """
    Compute the radial basis function kernel.

    .. math::
        k(a, b) = \\mathrm{exp}(-\\|a - b\\|^2 / p_1)

    Squared distances are computed as ||a||^2 + ||b||^2 - 2 a b^T.

    Parameters
    ----------
    A : ndarray of shape (n_samples_A, n_features)
    B : ndarray of shape (n_samples_B, n_features)
    kernel_param : ndarray of shape (n_params, )

    Returns
    -------
    K : ndarray of shape (n_samples_A, n_samples_B)
    """
    K = euclidean_distances(A, B, squared=True)
    np.divide(K, -kernel_param[0], out=K)
    np.exp(K, out=K)
    return K


def linear_kernel(A: np.ndarray, B: np.ndarray,
                  kernel_param: np.ndarray) -> np.ndarray:
    """
    Compute the linear kernel, i.e. the plain inner product.

    Parameters
    ----------
    A : ndarray of shape (n_samples_A, n_features)
    B : ndarray of shape (n_samples_B, n_features)
    kernel_param : ndarray of shape (n_params, )
        ignored

    Returns
    -------
    K : ndarray of shape (n_samples_A, n_samples_B)
    """
    return np.asarray(safe_sparse_dot(A, B.T, dense_output=True))


def polynomial_kernel(A: np.ndarray, B: np.ndarray,
                      kernel_param: np.ndarray) -> np.ndarray:
    """
    Compute the polynomial kernel.

    .. math::
        k(a, b) = (a b^T + p_1)^{p_2}

    Parameters
    ----------
    A : ndarray of shape (n_samples_A, n_features)
    B : ndarray of shape (n_samples_B, n_features)
    kernel_param : ndarray of shape (n_params, )
        Bias and exponent.

    Returns
    -------
    K : ndarray of shape (n_samples_A, n_samples_B)
    """
    K = linear_kernel(A, B, kernel_param)
    K += kernel_param[0]
    np.power(K, kernel_param[1], out=K)
    return K


def wavelet_kernel(A: np.ndarray, B: np.ndarray,
                   kernel_param: np.ndarray) -> np.ndarray:
    """
    Compute the Morlet-style wavelet kernel.

    .. math::
        k(a, b) = \\mathrm{cos}(p_3 (\\sum a - \\sum b) / p_2)
                  \\mathrm{exp}(-\\|a - b\\|^2 / p_1)

    Parameters
    ----------
    A : ndarray of shape (n_samples_A, n_features)
    B : ndarray of shape (n_samples_B, n_features)
    kernel_param : ndarray of shape (n_params, )
        Bandwidth, dilation and frequency.

    Returns
    -------
    K : ndarray of shape (n_samples_A, n_samples_B)
    """
    row_sum_differences = np.subtract.outer(np.sum(A, axis=1),
                                            np.sum(B, axis=1))
    return np.cos(kernel_param[2] * row_sum_differences / kernel_param[1]) \
        * rbf_kernel(A, B, kernel_param)


KERNELS: Dict[KernelType, Callable[[np.ndarray, np.ndarray, np.ndarray],
                                   np.ndarray]] = {
    KernelType.RBF: rbf_kernel,
    KernelType.LINEAR: linear_kernel,
    KernelType.POLYNOMIAL: polynomial_kernel,
    KernelType.WAVELET: wavelet_kernel,
}


def kernel_matrix(A: np.ndarray, B: Optional[np.ndarray] = None,
                  kernel: KernelLike = 'rbf',
                  kernel_param: Union[float, Sequence[float],
                                      np.ndarray] = (0.1, )) -> np.ndarray:
    """
    Compute the kernel (Gram) matrix between two sets of rows.

    Parameters
    ----------
    A : ndarray of shape (n_samples_A, n_features)
    B : Optional[ndarray] of shape (n_samples_B, n_features), default=None
        If ``None``, the kernel matrix of ``A`` with itself is computed.
    kernel : KernelLike, default='rbf'
    kernel_param : Union[float, Sequence[float], np.ndarray], default=(0.1, )

    Returns
    -------
    K : ndarray of shape (n_samples_A, n_samples_B)
        ``K[i, j]`` is the kernel response between ``A[i]`` and ``B[j]``.
    """
    kernel = check_kernel(kernel)
    params = check_kernel_param(kernel_param, kernel)
    A = check_array(A, dtype=np.float64)
    if B is None:
        B = A
    else:
        B = check_array(B, dtype=np.float64)
        if A.shape[1] != B.shape[1]:
            raise DimensionMismatchError(
                "Both row sets need the same number of features, got {0} "
                "and {1}.".format(A.shape[1], B.shape[1]))
    return KERNELS[kernel](A, B, params)
