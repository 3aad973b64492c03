"""
Put raw (time, event) observations into time order for the product-limit sweep.

Classes:

    - SortedSample: Parallel arrays of observation times and event indicators, sorted by ascending time.

Functions:

    - prepare(times, events): Validate the shapes of the inputs and return a SortedSample.

Usage example:

.. code-block:: python

    sample = prepare([3, 1, 2, 1], [True, False, True, True])
    sample.times   # array([1, 1, 2, 3])
    sample.events  # array([False,  True,  True,  True])
"""

from typing import Union

import numpy as np

from kaplanmeier.errors import EmptyInput
from kaplanmeier.errors import ShapeMismatch


class SortedSample:
    """
    Observation times and event indicators ordered by ascending time.

    Tied times are adjacent but in no particular order among themselves, the
    aggregator consumes each tie group as a whole.
    """

    def __init__(self, times: np.ndarray, events: np.ndarray) -> None:
        assert times.shape == events.shape, f"{times.shape=} != {events.shape=}"
        assert events.dtype == np.bool_, f"{events.dtype=} should be bool"
        self._times = times
        self._events = events

        return

    @property
    def times(self) -> np.ndarray:
        return self._times

    @property
    def events(self) -> np.ndarray:
        return self._events

    def __len__(self) -> int:
        return self._times.shape[0]

    def __repr__(self) -> str:
        return f"SortedSample(times={self._times!r}, events={self._events!r})"


def _as_times(times: np.ndarray) -> np.ndarray:
    # The kernel is compiled for int64 and float64 times only.
    times = times.ravel()
    if np.issubdtype(times.dtype, np.integer) or times.dtype == np.bool_:
        return times.astype(np.int64)

    return times.astype(np.float64)


def prepare(times: Union[np.ndarray, list, tuple], events: Union[np.ndarray, list, tuple]) -> SortedSample:
    """
    Sort observations by time, carrying each event indicator along with its time.

    Parameters:

        times (array-like): Observation times. Integer inputs are carried as int64, everything else as float64.

        events (array-like): True where the time is an observed event, False where it is right censored.

    Returns:

        SortedSample: The observations in ascending time order. The inputs are not modified.

    Raises:

        ShapeMismatch: If ``times`` and ``events`` have different lengths or shapes.

        EmptyInput: If there are no observations.

    Notes:

        Negative or non-finite times are not rejected. They sort like any other value and
        produce meaningless risk-set counts downstream.
    """

    times = np.asarray(times)
    events = np.asarray(events)

    # compare before flattening so (2, 3) times do not pair with (6,) events
    if times.shape != events.shape:
        raise ShapeMismatch(f"times and events must have the same length and shape ({times.shape} != {events.shape})")

    times = _as_times(times)
    events = events.ravel().astype(np.bool_)

    if times.shape[0] == 0:
        raise EmptyInput("At least one observation is required.")

    order = np.argsort(times, kind="stable")

    return SortedSample(times[order], events[order])
