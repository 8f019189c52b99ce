"""Input validation and small numeric helpers.

Time series are captured as read-only ``int64`` arrays and frequency bins as
read-only ``complex64`` views, so that nothing downstream can mutate caller
data.
"""

from collections.abc import Sequence

import numpy as np


def check_time_series(x) -> np.ndarray:
    """Validate and cast input to a read-only 1D int64 array.

    Floats are accepted when every value is integral. Iterators and other
    lazy sources (e.g. a LowPassFilter) are drained first.

    Args:
        x: Sequence of integer samples.

    Returns:
        1D int64 numpy array with the writeable flag cleared.

    Raises:
        ValueError: If input is not 1D, contains NaN/Inf, or has
            non-integral values.
    """
    if not isinstance(x, (np.ndarray, Sequence)) and hasattr(x, "__iter__"):
        x = list(x)
    arr = np.asarray(x)
    if arr.ndim == 0:
        arr = arr.reshape(1)
    elif arr.ndim > 1:
        raise ValueError(f"Expected 1D time series, got {arr.ndim}D array")

    if arr.size == 0:
        arr = np.zeros(0, dtype=np.int64)
    elif np.issubdtype(arr.dtype, np.bool_):
        arr = arr.astype(np.int64)
    elif np.issubdtype(arr.dtype, np.integer):
        arr = arr.astype(np.int64, copy=True)
    elif np.issubdtype(arr.dtype, np.floating):
        if not np.all(np.isfinite(arr)):
            raise ValueError("Time series contains NaN or Inf values")
        if np.any(arr != np.trunc(arr)):
            raise ValueError("Time series must contain integer samples")
        arr = arr.astype(np.int64)
    else:
        raise ValueError(f"Time series must be integer-valued, got dtype {arr.dtype}")

    arr.flags.writeable = False
    return arr


def check_bins(bins) -> np.ndarray:
    """Return a read-only complex64 view of a non-empty bin sequence.

    An existing complex64 array is viewed, not copied, and the caller's
    array keeps its own flags.

    Raises:
        ValueError: If bins is not 1D or is empty.
    """
    arr = np.asarray(bins, dtype=np.complex64)
    if arr.ndim != 1:
        raise ValueError(f"Expected 1D bin sequence, got {arr.ndim}D array")
    if arr.size == 0:
        raise ValueError("Bin sequence must contain at least one bin")
    view = arr.view()
    view.flags.writeable = False
    return view


def norm(values):
    """Magnitude of a complex sample or of each element of a bin sequence.

    Scalars give a Python float, sequences a float32 array.
    """
    arr = np.asarray(values, dtype=np.complex64)
    mags = np.abs(arr)
    if mags.ndim == 0:
        return float(mags)
    return mags


def assert_parseval(time_series, bins, rtol: float = 1e-2) -> None:
    """Assert that bins carry the energy of the time series.

    Checks sum(|X[k]|^2) == N * sum(x[n]^2) within ``rtol``, accumulated in
    float64. The default tolerance absorbs float32 angle rounding on long
    series.

    Raises:
        ValueError: If the lengths differ, a bin is not finite, or the
            energies disagree.
    """
    x = np.asarray(time_series, dtype=np.float64)
    spectrum = np.asarray(bins, dtype=np.complex128)
    if x.shape != spectrum.shape:
        raise ValueError(
            f"Time series and bins differ in shape: {x.shape} vs {spectrum.shape}"
        )
    if not np.all(np.isfinite(spectrum)):
        raise ValueError("Bins contain non-finite values")

    time_energy = len(x) * float(np.sum(x * x))
    freq_energy = float(np.sum(np.abs(spectrum) ** 2))
    if abs(freq_energy - time_energy) > rtol * time_energy:
        raise ValueError(
            f"Bin energy {freq_energy:.6g} does not match N * time energy "
            f"{time_energy:.6g} within rtol {rtol}"
        )
