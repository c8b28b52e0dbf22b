"""The :mod:`pyrkelm.preprocessing` module provides preprocessing utilities."""

# Authors: Peter Steiner <peter.steiner@tu-dresden.de>
# License: BSD 3 clause

from ._normalizer import MinMaxNormalizer, make_normalized_rkelm

__all__ = ('MinMaxNormalizer', 'make_normalized_rkelm')
