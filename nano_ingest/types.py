"""Data carried between pipeline stages."""
from dataclasses import dataclass
from enum import Enum

import numpy as np

SAMPLE_RATE = 16000  # Hz, fixed rate of every AudioStream


class SampleEncoding(Enum):
    INT16   = 'PCM_16'
    FLOAT32 = 'FLOAT'


@dataclass
class RawDecodedAudio:
    """Samples straight out of the WAV decoder.

    Attributes:
        samples:     float32, interleaved when ``channels == 2``.
        channels:    1 or 2.
        sample_rate: native rate of the file in Hz.
        encoding:    on-disk sample encoding the values were converted from.
    """
    samples: np.ndarray
    channels: int
    sample_rate: int
    encoding: SampleEncoding


@dataclass
class AudioStream:
    """Canonical output: mono float32 samples at SAMPLE_RATE."""
    samples: np.ndarray
    sample_rate: int = SAMPLE_RATE

    def __post_init__(self):
        self.samples = np.asarray(self.samples, dtype=np.float32)
        if self.sample_rate != SAMPLE_RATE:
            raise ValueError(f'AudioStream sample_rate must be {SAMPLE_RATE}, got {self.sample_rate}')
        if self.samples.ndim != 1:
            raise ValueError(f'AudioStream samples must be 1-D, got shape {self.samples.shape}')

    @property
    def duration(self) -> float:
        return len(self.samples) / self.sample_rate
