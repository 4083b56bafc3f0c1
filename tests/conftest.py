import tempfile

import numpy as np
import pytest
import soundfile as sf

from nano_ingest.errors import ConversionFailedError, DecoderUnavailableError
from nano_ingest.transcoder import Transcoder


class FakeTranscoder(Transcoder):
    """In-memory stand-in for ffmpeg.

    mode:
        'ok'      : writes *samples* as a 16 kHz mono PCM_16 WAV
        'garbage' : writes bytes that are not a WAV
        'fail'    : leaves a partial file behind and raises ConversionFailedError
    """

    def __init__(self, available=True, mode='ok', samples=None):
        self.available = available
        self.mode = mode
        self.samples = np.zeros(1600, dtype=np.float32) if samples is None else samples
        self.probed = 0
        self.calls = []

    def probe_availability(self):
        self.probed += 1
        if not self.available:
            raise DecoderUnavailableError()

    def transcode(self, input_path, output_path):
        self.calls.append((input_path, output_path))
        if self.mode == 'ok':
            sf.write(output_path, self.samples, 16000, subtype='PCM_16', format='WAV')
        elif self.mode == 'garbage':
            with open(output_path, 'wb') as f:
                f.write(b'definitely not RIFF')
        else:
            with open(output_path, 'wb') as f:
                f.write(b'RIFF')
            raise ConversionFailedError()


@pytest.fixture
def fake_transcoder():
    return FakeTranscoder


@pytest.fixture
def make_wav(tmp_path):
    """Write a WAV under tmp_path; *frames* is [n] for mono or [n, ch]."""
    def _make(frames, sample_rate=16000, subtype='PCM_16', name='test.wav'):
        path = tmp_path / name
        sf.write(str(path), np.asarray(frames), sample_rate, subtype=subtype, format='WAV')
        return path
    return _make


@pytest.fixture
def scratch_tmpdir(tmp_path, monkeypatch):
    """Redirect tempfile to an empty directory so leftovers can be counted."""
    d = tmp_path / 'scratch'
    d.mkdir()
    monkeypatch.setattr(tempfile, 'tempdir', str(d))
    return d


@pytest.fixture
def sine():
    def _sine(n, freq=440.0, sample_rate=16000, amplitude=0.5):
        t = np.arange(n) / sample_rate
        return (amplitude * np.sin(2 * np.pi * freq * t)).astype(np.float32)
    return _sine
