"""The :mod:`blocks` contains building blocks for Reduced Kernel ELMs."""

# Authors: Peter Steiner <peter.steiner@tu-dresden.de>
# License: BSD 3 clause

from ._kernel_to_node import KernelToNode


__all__ = ('KernelToNode',)
