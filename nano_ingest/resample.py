"""
Band-limited sinc resampling via resampy.

The filter is resampy's ``sinc_window``: a windowed sinc tabulated at
2 ** PRECISION points per zero crossing, linearly interpolated between
table entries.
"""
import numpy as np
import resampy
import scipy.signal

from nano_ingest.errors import ResampleFailedError

NUM_ZEROS      = 128   # zero crossings per side, 256 taps in total
PRECISION      = 8     # table oversampled 2 ** 8 = 256 times
ROLLOFF        = 0.95  # relative to the Nyquist frequency of the lower rate
MIN_CHUNK_SIZE = 1024


def blackman_harris2(npoints: int) -> np.ndarray:
    """Squared 4-term Blackman-Harris window of *npoints* samples."""
    return scipy.signal.windows.blackmanharris(npoints) ** 2


def resample(samples, source_rate: int, target_rate: int) -> np.ndarray:
    """Convert mono *samples* from *source_rate* to *target_rate*.

    Equal rates return an unchanged float32 copy. Otherwise the input is
    zero-padded to at least MIN_CHUNK_SIZE samples, resampled in one call, and
    cut back to ``round(len(samples) * target_rate / source_rate)`` samples
    (one fewer when resampy's floor length is shorter).

    Raises:
        ResampleFailedError: non-positive rates, non 1-D input, or a failure
            inside resampy.
    """
    if source_rate <= 0 or target_rate <= 0:
        raise ResampleFailedError(f'Resampling failed: invalid rates {source_rate} -> {target_rate}')
    x = np.asarray(samples)
    if x.ndim != 1:
        raise ResampleFailedError(f'Resampling failed: expected mono samples, got shape {x.shape}')
    if source_rate == target_rate:
        return x.astype(np.float32, copy=True)

    n_in = len(x)
    n_out = int(round(n_in * target_rate / source_rate))
    padded = np.zeros(max(n_in, MIN_CHUNK_SIZE), dtype=np.float64)
    padded[:n_in] = x
    try:
        out = resampy.resample(
            padded, source_rate, target_rate,
            filter='sinc_window',
            num_zeros=NUM_ZEROS,
            precision=PRECISION,
            rolloff=ROLLOFF,
            window=blackman_harris2,
        )
    except (ValueError, TypeError, MemoryError) as exc:
        raise ResampleFailedError(f'Resampling failed: {exc}') from exc
    return out[:n_out].astype(np.float32)
