"""
The :mod:`pyrkelm.base` base functionalities for PyRKELM.

It contains the kernel functions and simple object-oriented implementations
of the building blocks for Reduced Kernel Extreme Learning Machines [#]_.

References
----------
    .. [#] W. Deng, Q. Zheng and K. Zhang, ‘Reduced Kernel Extreme Learning
    Machine’, Proceedings of the 8th International Conference on Computer
    Recognition Systems CORES 2013, p. 63-69, 2013,
    doi: 10.1007/978-3-319-00969-8_6.
"""

# Authors: Peter Steiner <peter.steiner@tu-dresden.de>
# License: BSD 3 clause

from ._kernels import (KERNELS, KernelType, check_kernel, check_kernel_param,
                       kernel_matrix)
from ._base import _random_support

__all__ = ('KERNELS',
           'KernelType',
           'check_kernel',
           'check_kernel_param',
           'kernel_matrix',
           '_random_support'
           )
