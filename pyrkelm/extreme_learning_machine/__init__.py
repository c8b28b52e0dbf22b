"""
The :mod:`pyrkelm.extreme_learning_machine` implements Reduced Kernel ELMs.

The Reduced Kernel Extreme Learning Machine [#]_ is implemented as a
scikit-learn compatible regressor.

References
----------
    .. [#] W. Deng, Q. Zheng and K. Zhang, ‘Reduced Kernel Extreme Learning
           Machine’, Proceedings of the 8th International Conference on
           Computer Recognition Systems CORES 2013, p. 63-69, 2013,
           doi: 10.1007/978-3-319-00969-8_6.
"""

# Authors: Peter Steiner <peter.steiner@tu-dresden.de>
# License: BSD 3 clause

from ._rkelm import RKELMRegressor

__all__ = ('RKELMRegressor',)
