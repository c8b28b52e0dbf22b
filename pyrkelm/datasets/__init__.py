"""The :mod:`pyrkelm.datasets` includes toy and sediment transport datasets."""

# Authors: Peter Steiner <peter.steiner@tu-dresden.de>
# License: BSD 3 clause

from ._base import (SEDIMENT_FEATURE_NAMES, load_sediment_transport,
                    make_row_sum_regression)

__all__ = ('SEDIMENT_FEATURE_NAMES',
           'load_sediment_transport',
           'make_row_sum_regression')
