"""Single-pole low-pass filter over integer sample streams.

The filter is the discrete RC smoother

    vout[i] = vout[i-1] + alpha * (vin[i] - vout[i-1]),   vout[-1] = 0

with ``alpha = 1 / (1 + RC)`` and ``RC = 1 / (2*pi*cutoff)``. Outputs are
truncated toward zero so the stream stays integer-valued, and the zero
starting state shows up as a short rise at the start of any non-zero input.
"""

from __future__ import annotations

import math
import operator
from dataclasses import dataclass
from typing import Iterable, Iterator

import numpy as np

from .logging import get_logger

logger = get_logger(__name__)

_TWO_PI = np.float32(2.0 * np.pi)


@dataclass(frozen=True)
class LowPassConfig:
    """
    Parameters of a single-pole low-pass filter.

    Args:
        cutoff: Cutoff frequency. Must be positive and finite. Lower values
            smooth harder.
    """

    cutoff: float

    def __post_init__(self) -> None:
        if not math.isfinite(self.cutoff) or self.cutoff <= 0.0:
            raise ValueError(f"cutoff must be positive and finite, got {self.cutoff}")
        with np.errstate(over="ignore", under="ignore", divide="ignore"):
            rc = self.rc
            alpha = self.alpha
        if not (np.isfinite(rc) and 0.0 < alpha <= 1.0):
            raise ValueError(f"cutoff {self.cutoff} is outside the float32 range")

    @property
    def rc(self) -> np.float32:
        """Time constant RC = 1 / (2*pi*cutoff), in float32."""
        return np.float32(1.0) / (np.float32(self.cutoff) * _TWO_PI)

    @property
    def alpha(self) -> np.float32:
        """Smoothing coefficient in (0, 1]."""
        return np.float32(1.0) / (np.float32(1.0) + self.rc)


class LowPassFilter:
    """Iterator applying a :class:`LowPassConfig` to an integer source.

    Produces exactly one output per input and stops when the source stops.
    """

    def __init__(self, source: Iterable[int], cutoff: float | LowPassConfig):
        """Wrap ``source``.

        Args:
            source: Iterable of integer samples; consumed lazily.
            cutoff: Cutoff frequency or a prepared LowPassConfig.

        Raises:
            ValueError: If the cutoff is not positive and finite.
        """
        config = cutoff if isinstance(cutoff, LowPassConfig) else LowPassConfig(float(cutoff))
        self._config = config
        self._alpha = config.alpha
        self._source = iter(source)
        self._prev = 0
        logger.debug("LowPassFilter cutoff=%s alpha=%s", config.cutoff, self._alpha)

    @property
    def cutoff(self) -> float:
        return self._config.cutoff

    @property
    def alpha(self) -> np.float32:
        return self._alpha

    @property
    def prev(self) -> int:
        """Last emitted sample (0 before the first pull)."""
        return self._prev

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        vin = operator.index(next(self._source))
        vout = int(np.float32(self._prev) + self._alpha * np.float32(vin - self._prev))
        self._prev = vout
        return vout


def apply_low_pass(source: Iterable[int], cutoff: float) -> LowPassFilter:
    """Lazily low-pass filter an integer sample source.

    Args:
        source: Iterable of integer samples.
        cutoff: Cutoff frequency, > 0.

    Returns:
        A LowPassFilter iterator over ``source``.

    Raises:
        ValueError: If cutoff <= 0 or is not finite. Raised here, before any
            sample is pulled.

    Example:
        >>> list(apply_low_pass([100] * 5, cutoff=1.0))
        [86, 98, 99, 99, 99]
    """
    return LowPassFilter(source, cutoff)
