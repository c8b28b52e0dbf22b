"""The :mod:`pyrkelm.util` has utilities for running, testing and analyzing."""

# Author: Peter Steiner <peter.steiner@tu-dresden.de> and
# Michael Schindler <michael.schindler@maschindler.de>
# License: BSD 3 clause

from ._util import (
    new_logger, argument_parser, timed, save_model, load_model,
    export_trained_state, import_trained_state)

__all__ = ('new_logger', 'argument_parser', 'timed', 'save_model',
           'load_model', 'export_trained_state', 'import_trained_state')
