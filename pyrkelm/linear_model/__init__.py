"""The :mod:`pyrkelm.linear_model` module implements regularized regression."""

# Authors: Peter Steiner <peter.steiner@tu-dresden.de>
# License: BSD 3 clause

from ._regularized_regression import RegularizedRegression

__all__ = ('RegularizedRegression',)
