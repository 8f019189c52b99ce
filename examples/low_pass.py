"""Low-pass example: smoothing a composite of two generated signals.

Two signals are synthesized from hand-written frequency bins with
SignalGenerator: a slow tone (a single bin) and a faster band (four adjacent
bins). Their real parts are summed into an integer composite, which is then
run through apply_low_pass. The script prints the raw and filtered samples
side by side.
"""

from __future__ import annotations

import numpy as np

import fours


def make_bins(length: int, amplitudes: dict[int, int]) -> np.ndarray:
    """Build a complex64 bin sequence with the given real amplitudes."""
    bins = np.zeros(length, dtype=np.complex64)
    for k, amplitude in amplitudes.items():
        bins[k] = amplitude
    return bins


def composite_signal(num_samples: int):
    """Yield ``num_samples`` integer samples of the two-tone composite."""
    slow = fours.SignalGenerator(make_bins(37, {1: 1000}))
    fast = fours.SignalGenerator(make_bins(31, {13: 300, 14: 300, 15: 300, 16: 300}))
    for _ in range(num_samples):
        yield int(next(slow).real + next(fast).real)


def main() -> None:
    """Filter the composite and print both traces."""
    num_samples = 74
    cutoff = 0.05

    raw = list(composite_signal(num_samples))
    smoothed = list(fours.apply_low_pass(raw, cutoff))

    print(f"Low-pass cutoff {cutoff} (alpha = {fours.LowPassConfig(cutoff).alpha:.6f})")
    print(" n    raw  filtered")
    for n, (vin, vout) in enumerate(zip(raw, smoothed)):
        print(f"{n:2d} {vin:6d} {vout:9d}")

    raw_swing = max(raw) - min(raw)
    filtered_swing = max(smoothed[num_samples // 2 :]) - min(smoothed[num_samples // 2 :])
    print(f"\nPeak-to-peak raw: {raw_swing}, filtered (settled half): {filtered_swing}")


if __name__ == "__main__":
    main()
