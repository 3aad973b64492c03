"""Implements the SurvivorFunctionTable class, the immutable step table produced by the product-limit sweep."""

from typing import Iterator
from typing import Tuple

import numpy as np


class SurvivorFunctionTable:
    """
    One row per distinct observed time with the Kaplan-Meier bookkeeping for that time.

    Columns (all NumPy arrays of the same length, read-only):

        - times: distinct times, strictly increasing
        - nevents: observed events at each time
        - ncensor: right-censored observations at each time
        - natrisk: subjects at risk just before each time
        - survival: the product-limit estimate at each time

    Examples
    --------
        >>> from kaplanmeier import fit
        >>> table = fit([1, 1, 2, 3, 3, 5], [True, False, True, True, True, False]).table
        >>> len(table)
        4
        >>> table.natrisk
        array([6, 4, 3, 1])
    """

    def __init__(self, times: np.ndarray, nevents: np.ndarray, ncensor: np.ndarray, natrisk: np.ndarray, survival: np.ndarray) -> None:
        columns = (times, nevents, ncensor, natrisk, survival)
        assert all(column.ndim == 1 for column in columns), "All columns must be one-dimensional"
        assert all(column.shape == times.shape for column in columns), "All columns must have the same length"

        for column in columns:
            column.setflags(write=False)

        self._times = times
        self._nevents = nevents
        self._ncensor = ncensor
        self._natrisk = natrisk
        self._survival = survival

        return

    @property
    def times(self) -> np.ndarray:
        """Distinct observed times, strictly increasing."""
        return self._times

    @property
    def nevents(self) -> np.ndarray:
        """Number of observed events at each time."""
        return self._nevents

    @property
    def ncensor(self) -> np.ndarray:
        """Number of censored observations at each time."""
        return self._ncensor

    @property
    def natrisk(self) -> np.ndarray:
        """Number of subjects at risk immediately before each time."""
        return self._natrisk

    @property
    def survival(self) -> np.ndarray:
        """Kaplan-Meier estimate of the survivor function at each time."""
        return self._survival

    def __len__(self) -> int:
        return self._times.shape[0]

    def __iter__(self) -> Iterator[Tuple]:
        """Iterate over rows as ``(time, nevents, ncensor, natrisk, survival)`` tuples."""
        return zip(
            self._times.tolist(),
            self._nevents.tolist(),
            self._ncensor.tolist(),
            self._natrisk.tolist(),
            self._survival.tolist(),
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, SurvivorFunctionTable):
            return NotImplemented

        return all(
            np.array_equal(mine, theirs)
            for mine, theirs in zip(
                (self._times, self._nevents, self._ncensor, self._natrisk, self._survival),
                (other._times, other._nevents, other._ncensor, other._natrisk, other._survival),
            )
        )

    __hash__ = None

    def __repr__(self) -> str:
        return (
            f"SurvivorFunctionTable(times={self._times!r}, nevents={self._nevents!r}, "
            f"ncensor={self._ncensor!r}, natrisk={self._natrisk!r}, survival={self._survival!r})"
        )
