"""The :mod:`pyrkelm` module implements Reduced Kernel ELMs."""

# Authors: Peter Steiner <peter.steiner@tu-dresden.de>,
# License: BSD 3 clause
from ._version import __version__

from . import (base, datasets, exceptions, extreme_learning_machine,
               linear_model, preprocessing, util)


__all__ = ('__version__',
           'base',
           'datasets',
           'exceptions',
           'extreme_learning_machine',
           'linear_model',
           'preprocessing',
           'util')
