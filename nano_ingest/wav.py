"""WAV container decoding via soundfile."""
import logging
import os
import struct
from typing import Union

import numpy as np
import soundfile as sf

from nano_ingest.errors import DecodeFailedError
from nano_ingest.types import RawDecodedAudio, SampleEncoding

_logger = logging.getLogger(__name__)

# Deliberately asymmetric: -32768 maps to exactly -1.0, 32767 to just under 1.0.
INT16_SCALE = 32768.0

_WAV_FORMATS = ('WAV', 'WAVEX')
_ENCODINGS = {e.value: e for e in SampleEncoding}
_BYTES_PER_SAMPLE = {SampleEncoding.INT16: 2, SampleEncoding.FLOAT32: 4}
_SIZE_UNKNOWN = (0, 0xFFFFFFFF)  # placeholders left by streaming writers


def declared_data_bytes(path: str):
    """Return the size of the RIFF `data` chunk as written in its header, or None."""
    with open(path, 'rb') as fh:
        header = fh.read(12)
        if len(header) < 12 or header[:4] != b'RIFF' or header[8:12] != b'WAVE':
            return None
        while True:
            chunk = fh.read(8)
            if len(chunk) < 8:
                return None
            chunk_id, size = struct.unpack('<4sI', chunk)
            if chunk_id == b'data':
                return size
            fh.seek(size + (size & 1), os.SEEK_CUR)


def read_wav(path: Union[str, os.PathLike], logger: logging.Logger = None) -> RawDecodedAudio:
    """Decode a RIFF/WAVE file into float32 samples.

    Only 16-bit signed integer and 32-bit float encodings, and only mono or
    stereo files, are accepted. Stereo samples are returned interleaved.

    Raises:
        DecodeFailedError: the file cannot be opened, is not a WAV, uses an
            unsupported encoding or channel count, or fails mid-read.
    """
    path = os.fspath(path)
    try:
        with sf.SoundFile(path) as f:
            if f.format not in _WAV_FORMATS:
                raise DecodeFailedError(f'Failed to load audio: {path} is {f.format}, not WAV')
            encoding = _ENCODINGS.get(f.subtype)
            if encoding is None:
                raise DecodeFailedError(f'Failed to load audio: unsupported sample encoding {f.subtype}')
            if f.channels not in (1, 2):
                raise DecodeFailedError(f'Failed to load audio: {f.channels} channels, expected 1 or 2')
            (logger or _logger).debug('WAV %s: %d Hz, %d ch, %s, %d frames',
                                      path, f.samplerate, f.channels, f.subtype, f.frames)

            if encoding is SampleEncoding.INT16:
                frames = f.read(dtype='int16', always_2d=True)
                samples = frames.reshape(-1).astype(np.float32) / np.float32(INT16_SCALE)
            else:
                frames = f.read(dtype='float32', always_2d=True)
                samples = frames.reshape(-1)

            expected = _expected_frames(path, f.frames, f.channels, encoding)
            if len(frames) < expected:
                raise DecodeFailedError(
                    f'Failed to load audio: {path} is truncated, '
                    f'got {len(frames)} of {expected} frames'
                )
            return RawDecodedAudio(
                samples=samples,
                channels=f.channels,
                sample_rate=f.samplerate,
                encoding=encoding,
            )
    except (RuntimeError, OSError) as exc:  # sf.LibsndfileError is a RuntimeError
        raise DecodeFailedError(f'Failed to load audio: {path}') from exc


def _expected_frames(path: str, frames: int, channels: int, encoding: SampleEncoding) -> int:
    # libsndfile clamps `frames` to the bytes present on disk
    declared = declared_data_bytes(path)
    if declared is None or declared in _SIZE_UNKNOWN:
        return frames
    return max(frames, declared // (channels * _BYTES_PER_SAMPLE[encoding]))
