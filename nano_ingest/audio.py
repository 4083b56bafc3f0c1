"""Audio loading and conversion utilities for nano_ingest."""
import logging
import os
from typing import Union

import numpy as np

from nano_ingest.formats import resolve_format
from nano_ingest.resample import resample
from nano_ingest.transcoder import FFmpegTranscoder, Transcoder
from nano_ingest.types import SAMPLE_RATE, AudioStream
from nano_ingest.wav import read_wav

_logger = logging.getLogger(__name__)


def to_mono(samples: np.ndarray, channels: int, logger: logging.Logger = None) -> np.ndarray:
    """Average interleaved stereo pairs; mono input is returned as-is.

    A trailing unpaired sample in a stereo buffer is dropped.
    """
    samples = np.asarray(samples, dtype=np.float32)
    if channels == 1:
        return samples
    if channels != 2:
        raise ValueError(f'to_mono expects 1 or 2 channels, got {channels}')
    if len(samples) % 2:
        (logger or _logger).warning(
            'Stereo buffer has odd length %d; dropping the unpaired last sample', len(samples))
    pairs = samples[:len(samples) // 2 * 2].reshape(-1, 2)
    return ((pairs[:, 0] + pairs[:, 1]) / 2).astype(np.float32)


class AudioLoader:
    """Turns any supported audio file into an :class:`AudioStream`.

    Args:
        transcoder: used for every non-WAV container. Defaults to an
                    :class:`FFmpegTranscoder` on ``PATH``.
        logger:     receives progress messages; defaults to this module's logger.
    """

    def __init__(self, transcoder: Transcoder = None, logger: logging.Logger = None):
        self.logger = logger or _logger
        self.transcoder = transcoder or FFmpegTranscoder(logger=self.logger)

    def load(self, path: Union[str, os.PathLike]) -> AudioStream:
        """Resolve, (transcode,) decode, downmix and resample *path*.

        Fails fast: the first IngestError raised by any stage propagates and no
        partial stream is returned. A temporary WAV produced by the transcoder
        is removed before this method returns or raises.
        """
        tag = resolve_format(path)

        if tag.needs_conversion:
            self.transcoder.probe_availability()
            with self.transcoder.convert_to_canonical_wav(path) as wav_path:
                raw = read_wav(wav_path, logger=self.logger)
        else:
            raw = read_wav(path, logger=self.logger)

        samples = to_mono(raw.samples, raw.channels, logger=self.logger)
        if raw.sample_rate != SAMPLE_RATE:
            self.logger.info('Resampling from %d Hz to %d Hz', raw.sample_rate, SAMPLE_RATE)
            samples = resample(samples, raw.sample_rate, SAMPLE_RATE)

        return AudioStream(samples=samples, sample_rate=SAMPLE_RATE)


def load_audio(
    path: Union[str, os.PathLike],
    transcoder: Transcoder = None,
    logger: logging.Logger = None,
) -> AudioStream:
    return AudioLoader(transcoder=transcoder, logger=logger).load(path)
