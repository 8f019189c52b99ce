"""fours - a small discrete Fourier transform and filtering toolkit."""

__version__ = "0.1.0"

# Batched (torch) transforms
from .batched import batched_dft, batched_idft, dft_matrix

# Debug mode
from .debug_mode import debug_context, is_debug_enabled, set_debug_enabled

# Forward transform
from .dft import dft

# Streaming inverse transform
from .generator import SignalGenerator

# Logging
from .logging import configure_logging, get_logger, set_log_level

# Low-pass filtering
from .lpf import LowPassConfig, LowPassFilter, apply_low_pass

# Utils
from .utils import assert_parseval, check_bins, check_time_series, norm

__all__ = [
    # Version
    "__version__",
    # Transform
    "dft",
    # Signal generator
    "SignalGenerator",
    # Low-pass filter
    "LowPassConfig",
    "LowPassFilter",
    "apply_low_pass",
    # Batched
    "dft_matrix",
    "batched_dft",
    "batched_idft",
    # Utils
    "check_time_series",
    "check_bins",
    "norm",
    "assert_parseval",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
    # Debug mode
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
