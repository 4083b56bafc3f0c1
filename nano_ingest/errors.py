"""Exceptions raised by the nano_ingest pipeline."""


class IngestError(Exception):
    """Base class for every failure of an ingestion call."""

    default_message = 'Audio ingestion failed'

    def __init__(self, message: str = None):
        super().__init__(message or self.default_message)


class UnsupportedFormatError(IngestError):
    """The file extension does not map to a known container."""

    default_message = 'Unsupported file type'


class DecoderUnavailableError(IngestError):
    """The external transcoder is missing or cannot be started."""

    default_message = 'FFmpeg not found'


class ConversionFailedError(IngestError):
    """The external transcoder could not be spawned or exited non-zero."""

    default_message = 'Audio conversion failed'


class DecodeFailedError(IngestError):
    """The WAV file is missing, corrupt, or uses an unsupported layout."""

    default_message = 'Failed to load audio'


class ResampleFailedError(IngestError):
    """The sample-rate conversion could not be set up or run."""

    default_message = 'Resampling failed'
