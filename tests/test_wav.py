import numpy as np
import pytest
import soundfile as sf

from nano_ingest.errors import DecodeFailedError
from nano_ingest.types import SampleEncoding
from nano_ingest.wav import INT16_SCALE, declared_data_bytes, read_wav


def test_read_16bit_mono(make_wav):
    ints = np.array([0, 16384, -16384, 32767, -32768], dtype=np.int16)
    raw = read_wav(make_wav(ints, sample_rate=22050))

    assert raw.channels == 1
    assert raw.sample_rate == 22050
    assert raw.encoding is SampleEncoding.INT16
    assert raw.samples.dtype == np.float32
    np.testing.assert_array_equal(raw.samples, ints.astype(np.float32) / 32768.0)


def test_int16_normalisation_is_asymmetric(make_wav):
    raw = read_wav(make_wav(np.array([-32768, 32767], dtype=np.int16)))
    assert INT16_SCALE == 32768.0
    assert raw.samples[0] == -1.0
    assert raw.samples[1] < 1.0


def test_read_16bit_stereo_is_interleaved(make_wav):
    frames = np.array([[1, -1], [2, -2], [3, -3]], dtype=np.int16)
    raw = read_wav(make_wav(frames))

    assert raw.channels == 2
    assert len(raw.samples) == 6
    np.testing.assert_array_equal(raw.samples * 32768.0, [1, -1, 2, -2, 3, -3])


def test_read_float32_passes_through(make_wav):
    values = np.array([0.25, -0.5, 1.5, -2.0], dtype=np.float32)
    raw = read_wav(make_wav(values, subtype='FLOAT'))

    assert raw.encoding is SampleEncoding.FLOAT32
    np.testing.assert_array_equal(raw.samples, values)


def test_missing_file():
    with pytest.raises(DecodeFailedError):
        read_wav('/nonexistent/file.wav')


def test_not_a_wav(tmp_path):
    path = tmp_path / 'noise.wav'
    path.write_bytes(b'not an audio file at all')
    with pytest.raises(DecodeFailedError):
        read_wav(path)


def test_other_container_rejected(tmp_path):
    path = tmp_path / 'really_flac.wav'
    sf.write(str(path), np.zeros(100, dtype=np.float32), 16000, format='FLAC', subtype='PCM_16')
    with pytest.raises(DecodeFailedError):
        read_wav(path)


@pytest.mark.parametrize('subtype', ['PCM_U8', 'PCM_24', 'PCM_32', 'DOUBLE'])
def test_unsupported_encoding(make_wav, subtype):
    with pytest.raises(DecodeFailedError):
        read_wav(make_wav(np.zeros(100, dtype=np.float32), subtype=subtype))


@pytest.mark.parametrize('channels', [3, 6])
def test_too_many_channels(make_wav, channels):
    with pytest.raises(DecodeFailedError):
        read_wav(make_wav(np.zeros((100, channels), dtype=np.int16)))


def _chop(path, nbytes):
    data = path.read_bytes()
    path.write_bytes(data[:-nbytes])


def test_truncated_16bit_file(make_wav):
    path = make_wav(np.arange(1000, dtype=np.int16))
    _chop(path, 1000)
    with pytest.raises(DecodeFailedError, match='truncated'):
        read_wav(path)


def test_truncated_float_stereo_file(make_wav):
    path = make_wav(np.zeros((400, 2), dtype=np.float32), subtype='FLOAT')
    _chop(path, 800)
    with pytest.raises(DecodeFailedError, match='truncated'):
        read_wav(path)


def test_declared_size_matches_intact_file(make_wav):
    path = make_wav(np.zeros((250, 2), dtype=np.int16))
    assert declared_data_bytes(str(path)) == 250 * 2 * 2
    assert len(read_wav(path).samples) == 500


def test_declared_size_of_non_riff(tmp_path):
    path = tmp_path / 'x.wav'
    path.write_bytes(b'nothing to see')
    assert declared_data_bytes(str(path)) is None
