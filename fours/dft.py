"""Forward discrete Fourier transform.

Direct O(N^2) evaluation of

    X[k] = sum_{n=0}^{N-1} x[n] * exp(-j * 2*pi * k * n / N),   0 <= k < N

in single precision. The result is complex; take :func:`fours.utils.norm`
of the bins for a magnitude spectrum:

    >>> from fours import dft, norm
    >>> bins = dft([-50, 0, 50, 0, -50, 0, 50, 0])
    >>> magnitudes = norm(bins)
"""

import numpy as np

from .debug_mode import is_debug_enabled
from .logging import get_logger
from .utils import assert_parseval, check_time_series

logger = get_logger(__name__)

_TWO_PI = np.float32(2.0 * np.pi)
_J = np.complex64(1j)


def dft(time_series) -> np.ndarray:
    """Compute the DFT of an integer time series.

    Args:
        time_series: 1D sequence of integer samples. May be empty.

    Returns:
        complex64 array of length N. Empty input gives an empty array and a
        single sample ``v`` gives ``[v + 0j]``.

    Raises:
        ValueError: If the input is not a 1D integer sequence, or, in debug
            mode, if the bins break Parseval's relation.
    """
    x = check_time_series(time_series)
    length = len(x)
    bins = np.zeros(length, dtype=np.complex64)
    if length == 0:
        return bins

    samples = x.astype(np.float32)
    n = np.arange(length, dtype=np.float32)
    scale = np.float32(length)

    for k in range(length):
        # Angle evaluated as ((-2pi * k) * n) / N in float32
        arg = -_TWO_PI * np.float32(k) * n / scale
        bins[k] = (samples * np.exp(_J * arg)).sum(dtype=np.complex64)

    if is_debug_enabled():
        logger.debug("dft computed %d bins", length)
        assert_parseval(x, bins)

    return bins
