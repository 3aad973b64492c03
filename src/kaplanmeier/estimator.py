r"""
This module provides the KaplanMeier estimator of a survivor function from right-censored data.

Classes:

    - AbstractEstimator: Root of the estimator hierarchy.

    - NonparametricEstimator: Estimators fit directly from observed times without a parametric model.

    - KaplanMeier: The product-limit estimator.

Functions:

    - fit(times, status): Fit a KaplanMeier estimator.

The estimate is

.. math::

    \hat{S}(t) = \prod_{i: t_i \le t} \left( 1 - \frac{d_i}{n_i} \right)

where :math:`d_i` is the number of observed events at time :math:`t_i` and :math:`n_i`
is the number of subjects at risk just before :math:`t_i`.

References:

    Kaplan, E. L., and Meier, P. (1958). *Nonparametric Estimation from Incomplete
    Observations*. Journal of the American Statistical Association, 53(282), 457-481.
    doi:10.2307/2281868

Usage example:

.. code-block:: python

    km = fit([1, 1, 2, 3, 3, 5], [True, False, True, True, True, False])
    km.times     # array([1, 2, 3, 5])
    km.survival  # array([0.83333333, 0.625     , 0.20833333, 0.20833333])
    km.survival_at([0.5, 2.5])  # array([1.   , 0.625])
"""

from typing import Union

import numpy as np

from kaplanmeier.aggregate import aggregate
from kaplanmeier.prepare import prepare
from kaplanmeier.table import SurvivorFunctionTable


class AbstractEstimator:
    """Base class for survival estimators."""

    @classmethod
    def fit(cls, times, status):
        raise NotImplementedError(f"{cls.__name__} does not implement fit()")


class NonparametricEstimator(AbstractEstimator):
    """Base class for estimators computed directly from the observed times, e.g., Kaplan-Meier."""


class KaplanMeier(NonparametricEstimator):
    def __init__(self, table: SurvivorFunctionTable) -> None:
        """
        Wrap a computed survivor-function table. Use :meth:`KaplanMeier.fit` or :func:`fit` to build one from data.

        Parameters:

            table (SurvivorFunctionTable): The step table from :func:`kaplanmeier.aggregate`.
        """

        self._table = table

        return

    @classmethod
    def fit(cls, times: Union[np.ndarray, list, tuple], status: Union[np.ndarray, list, tuple]) -> "KaplanMeier":
        """
        Compute the Kaplan-Meier estimate of the survivor function.

        Parameters:

            times (array-like): Time to event or to censoring for each subject.

            status (array-like): True if the time is an observed event, False if it is right censored.

        Returns:

            KaplanMeier: The fitted estimator. The result does not depend on the order of the input pairs.

        Raises:

            ShapeMismatch: If ``times`` and ``status`` have different lengths.

            EmptyInput: If there are no observations.
        """

        return cls(aggregate(prepare(times, status)))

    @property
    def table(self) -> SurvivorFunctionTable:
        return self._table

    @property
    def times(self) -> np.ndarray:
        return self._table.times

    @property
    def nevents(self) -> np.ndarray:
        return self._table.nevents

    @property
    def ncensor(self) -> np.ndarray:
        return self._table.ncensor

    @property
    def natrisk(self) -> np.ndarray:
        return self._table.natrisk

    @property
    def survival(self) -> np.ndarray:
        return self._table.survival

    def survival_at(self, t: Union[float, np.ndarray, list]) -> Union[float, np.ndarray]:
        """
        Evaluate the step function at the given time(s).

        The estimate is right-continuous: at an observed time it takes the value for that row,
        and before the first observed time it is 1.0.

        Parameters:

            t (float or array-like): Time(s) at which to evaluate the estimate.

        Returns:

            float or np.ndarray: The estimate(s), a float for scalar input.

        Example:

        .. code-block:: python

            km.survival_at(np.linspace(0, 10, 101))  # suitable for plotting with plt.step()
        """

        query = np.asarray(t, dtype=np.float64)
        index = np.searchsorted(self._table.times, query, side="right") - 1
        estimate = np.where(index < 0, 1.0, self._table.survival[np.maximum(index, 0)])

        return float(estimate) if query.ndim == 0 else estimate

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        return f"KaplanMeier(rows={len(self._table)}, natrisk={int(self._table.natrisk[0])})"


def fit(times: Union[np.ndarray, list, tuple], status: Union[np.ndarray, list, tuple]) -> KaplanMeier:
    """Fit a :class:`KaplanMeier` estimator, see :meth:`KaplanMeier.fit`."""
    return KaplanMeier.fit(times, status)
