"""The :mod:`normalizer` contains the column-wise min-max normalization."""

# Authors: Peter Steiner <peter.steiner@tu-dresden.de>
# License: BSD 3 clause

from typing import Any, Tuple

from sklearn.compose import TransformedTargetRegressor
from sklearn.pipeline import Pipeline
from sklearn.preprocessing import MinMaxScaler

from ..extreme_learning_machine import RKELMRegressor


class MinMaxNormalizer(MinMaxScaler):
    """
    Map every column independently to the range [-1, 1].

    Every column is transformed by its own affine map, whose scale and offset
    are stored in ``scale_`` and ``min_`` and inverted exactly by
    ``inverse_transform``. This is the scaling the RKELM expects for inputs
    and targets.

    Parameters
    ----------
    feature_range : Tuple[float, float], default=(-1, 1)
        Desired range of the transformed data.
    copy : bool, default=True
        Set to False to perform inplace normalization.
    clip : bool, default=False
        Clip transformed values of unseen data to ``feature_range``.
    """

    def __init__(self, feature_range: Tuple[float, float] = (-1, 1), *,
                 copy: bool = True, clip: bool = False) -> None:
        """Construct the MinMaxNormalizer."""
        super().__init__(feature_range=feature_range, copy=copy, clip=clip)


def make_normalized_rkelm(**kwargs: Any) -> Pipeline:
    """
    Construct an RKELMRegressor that works on raw, un-normalized data.

    The inputs are normalized with a MinMaxNormalizer before they reach the
    RKELMRegressor. The targets are normalized with a second
    MinMaxNormalizer for training, and the predictions are mapped back with
    the parameters of that second normalizer.

    Parameters
    ----------
    kwargs : Any
        Keyword arguments of the RKELMRegressor.

    Returns
    -------
    pipeline : Pipeline
        Steps 'normalizer' and 'rkelm'. The RKELMRegressor is available as
        ``pipeline['rkelm'].regressor_`` after fitting.
    """
    return Pipeline([
        ('normalizer', MinMaxNormalizer()),
        ('rkelm', TransformedTargetRegressor(
            regressor=RKELMRegressor(**kwargs),
            transformer=MinMaxNormalizer()))])
