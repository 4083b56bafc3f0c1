"""nano_ingest — any audio file in, 16 kHz mono float32 samples out."""
from nano_ingest.audio import AudioLoader, load_audio, to_mono
from nano_ingest.errors import (
    ConversionFailedError,
    DecodeFailedError,
    DecoderUnavailableError,
    IngestError,
    ResampleFailedError,
    UnsupportedFormatError,
)
from nano_ingest.formats import ContainerTag, needs_conversion, resolve_format
from nano_ingest.resample import resample
from nano_ingest.transcoder import FFmpegTranscoder, Transcoder
from nano_ingest.types import SAMPLE_RATE, AudioStream, RawDecodedAudio, SampleEncoding
from nano_ingest.wav import read_wav

__version__ = '0.1.0'

__all__ = [
    'AudioLoader', 'AudioStream', 'ContainerTag', 'FFmpegTranscoder', 'RawDecodedAudio',
    'SAMPLE_RATE', 'SampleEncoding', 'Transcoder',
    'load_audio', 'needs_conversion', 'read_wav', 'resample', 'resolve_format', 'to_mono',
    'IngestError', 'UnsupportedFormatError', 'DecoderUnavailableError',
    'ConversionFailedError', 'DecodeFailedError', 'ResampleFailedError',
]
