"""External transcoder bridge: turns any container into a canonical 16 kHz mono WAV."""
import abc
import logging
import os
import subprocess
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Union

from nano_ingest.errors import ConversionFailedError, DecoderUnavailableError
from nano_ingest.types import SAMPLE_RATE

_logger = logging.getLogger(__name__)


class Transcoder(abc.ABC):
    """Capability that rewrites an audio file as signed 16-bit LE PCM, 16 kHz, mono WAV.

    Subclasses implement :meth:`probe_availability` and :meth:`transcode`;
    temporary file handling is shared so every implementation gets the same
    cleanup guarantee.
    """

    @abc.abstractmethod
    def probe_availability(self) -> None:
        """Raise DecoderUnavailableError unless the transcoder can be used."""

    @abc.abstractmethod
    def transcode(self, input_path: str, output_path: str) -> None:
        """Write the canonical WAV for *input_path* to *output_path*.

        Raises:
            ConversionFailedError: the conversion could not be run or did not succeed.
        """

    @contextmanager
    def convert_to_canonical_wav(self, input_path: Union[str, os.PathLike]) -> Iterator[Path]:
        """Transcode into a uniquely named temporary ``.wav`` and yield its path.

        The temporary file is removed when the ``with`` block exits, whether the
        conversion itself failed or something downstream raised.
        """
        out = tempfile.NamedTemporaryFile(suffix='.wav', delete=False)
        out.close()
        tmp_path = Path(out.name)
        try:
            self.transcode(os.fspath(input_path), str(tmp_path))
            yield tmp_path
        finally:
            try:
                tmp_path.unlink()
            except FileNotFoundError:
                pass


class FFmpegTranscoder(Transcoder):
    """Shells out to the ``ffmpeg`` executable."""

    def __init__(self, executable: str = 'ffmpeg', logger: logging.Logger = None):
        self.executable = executable
        self.logger = logger or _logger

    def probe_availability(self) -> None:
        try:
            result = subprocess.run(
                [self.executable, '-version'],
                stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL,
            )
        except OSError as exc:
            raise DecoderUnavailableError(f'FFmpeg not found: {self.executable}') from exc
        if result.returncode != 0:
            raise DecoderUnavailableError(
                f'FFmpeg not usable: {self.executable} -version exited with {result.returncode}'
            )

    def command(self, input_path: str, output_path: str) -> List[str]:
        return [
            self.executable,
            '-i', input_path,
            '-acodec', 'pcm_s16le',
            '-ar', str(SAMPLE_RATE),
            '-ac', '1',
            '-y',
            output_path,
        ]

    def transcode(self, input_path: str, output_path: str) -> None:
        self.logger.info('Converting %s to WAV...', input_path)
        try:
            subprocess.check_call(
                self.command(input_path, output_path),
                stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL,
            )
        except subprocess.CalledProcessError as exc:
            raise ConversionFailedError(
                f'Audio conversion failed: ffmpeg exited with {exc.returncode} for {input_path}'
            ) from exc
        except OSError as exc:
            raise ConversionFailedError(f'Audio conversion failed: could not run {self.executable}') from exc
        self.logger.info('Conversion complete')
