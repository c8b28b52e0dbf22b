"""Testing for the kernel functions."""

import numpy as np
import pytest

from pyrkelm.base import KERNELS, KernelType, check_kernel_param, kernel_matrix
from pyrkelm.exceptions import ConfigurationError, DimensionMismatchError


rs = np.random.RandomState(42)
A = rs.uniform(size=(7, 3))
B = rs.uniform(size=(4, 3))

KERNEL_PARAMS = {
    'rbf': (0.5, ),
    'linear': (1., ),
    'poly': (1., 2.),
    'wavelet': (0.5, 2., 3.),
}


def _naive_kernel(a: np.ndarray, b: np.ndarray, kernel: str,
                  p: tuple) -> float:
    if kernel == 'rbf':
        return np.exp(-np.sum((a - b) ** 2) / p[0])
    elif kernel == 'linear':
        return np.dot(a, b)
    elif kernel == 'poly':
        return (np.dot(a, b) + p[0]) ** p[1]
    else:
        return np.cos(p[2] * (np.sum(a) - np.sum(b)) / p[1]) \
            * np.exp(-np.sum((a - b) ** 2) / p[0])


def test_kernel_type() -> None:
    print('\ntest_kernel_type():')
    assert KernelType('rbf') is KernelType.RBF
    assert KernelType('RBF_kernel') is KernelType.RBF
    assert KernelType('lin_kernel') is KernelType.LINEAR
    assert KernelType('poly_kernel') is KernelType.POLYNOMIAL
    assert KernelType('wav_kernel') is KernelType.WAVELET
    assert [k.n_params for k in KernelType] == [1, 1, 2, 3]
    assert set(KERNELS.keys()) == set(KernelType)
    with pytest.raises(ValueError):
        KernelType('sigmoid')


@pytest.mark.parametrize("kernel", list(KERNEL_PARAMS.keys()))
def test_kernel_matrix_elementwise(kernel: str) -> None:
    print('\ntest_kernel_matrix_elementwise():')
    K = kernel_matrix(A, B, kernel=kernel, kernel_param=KERNEL_PARAMS[kernel])
    assert K.shape == (7, 4)
    K_naive = np.array([[_naive_kernel(a, b, kernel, KERNEL_PARAMS[kernel])
                         for b in B] for a in A])
    np.testing.assert_allclose(K, K_naive, rtol=1e-10, atol=1e-12)


@pytest.mark.parametrize("kernel", list(KERNEL_PARAMS.keys()))
def test_kernel_matrix_symmetric(kernel: str) -> None:
    print('\ntest_kernel_matrix_symmetric():')
    K = kernel_matrix(A, kernel=kernel, kernel_param=KERNEL_PARAMS[kernel])
    assert K.shape == (7, 7)
    np.testing.assert_allclose(K, K.T, rtol=1e-12, atol=1e-12)
    np.testing.assert_allclose(
        K, kernel_matrix(A, A.copy(), kernel=kernel,
                         kernel_param=KERNEL_PARAMS[kernel]),
        rtol=1e-10, atol=1e-12)


def test_rbf_kernel_diagonal() -> None:
    print('\ntest_rbf_kernel_diagonal():')
    K = kernel_matrix(A, kernel='rbf', kernel_param=0.1)
    np.testing.assert_array_equal(np.diag(K), np.ones(7))
    assert np.all(K <= 1.)


def test_wavelet_reduces_to_rbf() -> None:
    print('\ntest_wavelet_reduces_to_rbf():')
    K_wav = kernel_matrix(A, B, kernel='wavelet',
                          kernel_param=(0.5, 1., 1e-12))
    K_rbf = kernel_matrix(A, B, kernel='rbf', kernel_param=(0.5, ))
    np.testing.assert_allclose(K_wav, K_rbf, rtol=1e-10)


def test_check_kernel_param() -> None:
    print('\ntest_check_kernel_param():')
    np.testing.assert_array_equal(check_kernel_param(0.1, 'rbf'), [0.1])
    np.testing.assert_array_equal(
        check_kernel_param([1., 2., 3.], 'wavelet'), [1., 2., 3.])
    with pytest.raises(ConfigurationError):
        check_kernel_param((0.1, ), 'poly')
    with pytest.raises(ConfigurationError):
        check_kernel_param((0.1, 1.), 'wavelet')
    with pytest.raises(ConfigurationError):
        check_kernel_param((0.1, 1., 1., 1.), 'rbf')
    with pytest.raises(ConfigurationError):
        check_kernel_param((-0.1, ), 'rbf')
    with pytest.raises(ConfigurationError):
        check_kernel_param((0., ), 'linear')
    with pytest.raises(ConfigurationError):
        check_kernel_param((np.inf, ), 'rbf')
    with pytest.raises(ConfigurationError):
        check_kernel_param('abc', 'rbf')
    with pytest.raises(ConfigurationError):
        check_kernel_param((0.1, ), 'sigmoid')


def test_kernel_matrix_dimension_mismatch() -> None:
    print('\ntest_kernel_matrix_dimension_mismatch():')
    with pytest.raises(DimensionMismatchError):
        kernel_matrix(A, B[:, :2], kernel='linear', kernel_param=1.)
