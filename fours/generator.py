"""Streaming inverse DFT.

:class:`SignalGenerator` turns a fixed set of frequency bins back into time
samples one at a time, cycling forever with period ``len(bins)``.
"""

from typing import Iterator

import numpy as np

from .logging import get_logger
from .utils import check_bins

logger = get_logger(__name__)

_TWO_PI = np.float32(2.0 * np.pi)
_J = np.complex64(1j)


class SignalGenerator:
    """Lazy inverse DFT over a borrowed bin sequence.

    Each call to ``next()`` evaluates

        x[n] = (1/N) * sum_{k=0}^{N-1} X[k] * exp(j * 2*pi * k * n / N)

    at the current cursor ``n`` and then moves the cursor to ``(n + 1) % N``.
    The iterator never stops; pulling ``N + m`` samples repeats the first
    ``m``. To start over, build a new generator.

    Instances hold no lock and must be driven by one consumer.

    Example:
        >>> from fours import dft
        >>> gen = SignalGenerator(dft([1, 2, 3, 4]))
        >>> [round(abs(next(gen))) for _ in range(4)]
        [1, 2, 3, 4]
    """

    def __init__(self, bins):
        """Initialize the generator.

        Args:
            bins: 1D sequence of complex bins with at least one entry. It is
                viewed read-only and never modified.

        Raises:
            ValueError: If bins is empty or not 1D.
        """
        self._bins = check_bins(bins)
        self._index = 0
        self._k = np.arange(len(self._bins), dtype=np.float32)
        self._scale = np.float32(len(self._bins))
        logger.debug("SignalGenerator over %d bins", len(self._bins))

    @property
    def bins(self) -> np.ndarray:
        """Read-only view of the bins."""
        return self._bins

    @property
    def index(self) -> int:
        """Cursor of the sample the next call will produce."""
        return self._index

    def __len__(self) -> int:
        return len(self._bins)

    def __iter__(self) -> "SignalGenerator":
        return self

    def __next__(self) -> np.complex64:
        arg = _TWO_PI * self._k * np.float32(self._index) / self._scale
        total = (self._bins * np.exp(_J * arg)).sum(dtype=np.complex64)
        sample = np.complex64(total / self._scale)
        self._index = (self._index + 1) % len(self._bins)
        return sample

    def next_norm(self) -> float:
        """Magnitude of the next sample."""
        return float(abs(next(self)))

    def norms(self) -> Iterator[float]:
        """Infinite iterator over sample magnitudes, sharing this cursor."""
        while True:
            yield self.next_norm()

    def take(self, count: int) -> np.ndarray:
        """Pull the next ``count`` samples into a complex64 array.

        Raises:
            ValueError: If count is negative.
        """
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        out = np.empty(count, dtype=np.complex64)
        for i in range(count):
            out[i] = next(self)
        return out

    def __repr__(self) -> str:
        return f"SignalGenerator(n_bins={len(self._bins)}, index={self._index})"
