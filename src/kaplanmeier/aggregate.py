"""
The product-limit sweep over a time-sorted sample.

Functions:

    - aggregate(sample: SortedSample): Build the survivor-function table for a sorted sample.

    - _km(times, events, out_times, out_nevents, out_ncensor, out_natrisk, out_survival): Numba kernel for the sweep.

The sweep accumulates the events and censorings tied at one time and emits that
time's row only when the next distinct time is seen, so the factor for time t
uses the number at risk before any removals at t. The last group is flushed
after the loop.
"""

import numba as nb
import numpy as np

from kaplanmeier.errors import EmptyInput
from kaplanmeier.prepare import SortedSample
from kaplanmeier.table import SurvivorFunctionTable


def aggregate(sample: SortedSample) -> SurvivorFunctionTable:
    """
    Compute the Kaplan-Meier step table for a sample already sorted by time.

    Parameters:

        sample (SortedSample): Observations in ascending time order, e.g. from :func:`kaplanmeier.prepare`.

    Returns:

        SurvivorFunctionTable: One row per distinct time, excluding a leading time 0.

    Raises:

        EmptyInput: If the sample has no observations.
    """

    n = len(sample)
    if n == 0:
        raise EmptyInput("At least one observation is required.")

    # one row per distinct time at most
    times = np.empty(n, dtype=sample.times.dtype)
    nevents = np.empty(n, dtype=np.int64)
    ncensor = np.empty(n, dtype=np.int64)
    natrisk = np.empty(n, dtype=np.int64)
    survival = np.empty(n, dtype=np.float64)

    assert sample.times.dtype in (np.int64, np.float64), f"{sample.times.dtype=} should be int64 or float64"
    # the compiled signatures take writeable arrays only
    stimes = sample.times if sample.times.flags.writeable else sample.times.copy()
    sevents = sample.events if sample.events.flags.writeable else sample.events.copy()

    nrows = _km(stimes, sevents, times, nevents, ncensor, natrisk, survival)
    assert 0 < nrows <= n, f"{nrows=} should be in (0, {n}]"

    return SurvivorFunctionTable(
        times[:nrows].copy(),
        nevents[:nrows].copy(),
        ncensor[:nrows].copy(),
        natrisk[:nrows].copy(),
        survival[:nrows].copy(),
    )


@nb.njit(
    [
        nb.int64(nb.int64[:], nb.boolean[:], nb.int64[:], nb.int64[:], nb.int64[:], nb.int64[:], nb.float64[:]),
        nb.int64(nb.float64[:], nb.boolean[:], nb.float64[:], nb.int64[:], nb.int64[:], nb.int64[:], nb.float64[:]),
    ],
    nogil=True,
)
def _km(times, events, out_times, out_nevents, out_ncensor, out_natrisk, out_survival):  # pragma: no cover
    """
    Sweep a sorted, nonempty sample and fill the output arrays.

    Parameters:

        times (np.ndarray): Sorted observation times.

        events (np.ndarray): Event indicators aligned with ``times``.

        out_* (np.ndarray): Output buffers at least as long as ``times``.

    Returns:

        nrows (int): The number of rows written to the output buffers.
    """

    n = times.shape[0]
    d = 0  # events at the held time
    c = 0  # censorings at the held time
    natrisk = n  # at risk just before the held time
    km = 1.0
    nrows = 0
    t_prev = np.zeros_like(times[:1])[0]  # held time starts at 0

    for i in range(n):
        t = times[i]
        if t == t_prev:
            if events[i]:
                d += 1
            else:
                c += 1
            continue

        # new distinct time, emit the held one unless it is time 0
        if t_prev != 0:
            km *= 1.0 - d / natrisk
            out_times[nrows] = t_prev
            out_nevents[nrows] = d
            out_ncensor[nrows] = c
            out_natrisk[nrows] = natrisk
            out_survival[nrows] = km
            nrows += 1

        natrisk -= d + c
        if events[i]:
            d = 1
            c = 0
        else:
            d = 0
            c = 1
        t_prev = t

    # the emission above lags by one group, flush the last one
    km *= 1.0 - d / natrisk
    out_times[nrows] = t_prev
    out_nevents[nrows] = d
    out_ncensor[nrows] = c
    out_natrisk[nrows] = natrisk
    out_survival[nrows] = km
    nrows += 1

    return nrows
