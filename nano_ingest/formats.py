"""Container detection from file extensions."""
import os
from enum import Enum
from typing import Union

from nano_ingest.errors import UnsupportedFormatError


class ContainerTag(Enum):
    WAV  = 'wav'
    WEBM = 'webm'
    MP3  = 'mp3'
    M4A  = 'm4a'
    MP4  = 'mp4'
    OGG  = 'ogg'
    FLAC = 'flac'
    AAC  = 'aac'

    @property
    def needs_conversion(self) -> bool:
        """True when the container has to go through the external transcoder first."""
        return self is not ContainerTag.WAV

    @classmethod
    def from_path(cls, path: Union[str, os.PathLike]) -> 'ContainerTag':
        return resolve_format(path)


_EXTENSIONS = {
    'wav':  ContainerTag.WAV,
    'wave': ContainerTag.WAV,
    'webm': ContainerTag.WEBM,
    'mp3':  ContainerTag.MP3,
    'm4a':  ContainerTag.M4A,
    'mp4':  ContainerTag.MP4,
    'ogg':  ContainerTag.OGG,
    'flac': ContainerTag.FLAC,
    'aac':  ContainerTag.AAC,
}


def resolve_format(path: Union[str, os.PathLike]) -> ContainerTag:
    """Map *path* to its container using the text after the last '.', case-insensitively.

    Pure string inspection: the file is never opened.

    Raises:
        UnsupportedFormatError: no extension, or one outside the table.
    """
    path = os.fspath(path)
    _, dot, ext = path.rpartition('.')
    if not dot:
        raise UnsupportedFormatError(f'Unsupported file type: {path!r} has no extension')
    try:
        return _EXTENSIONS[ext.lower()]
    except KeyError:
        raise UnsupportedFormatError(f'Unsupported file type: .{ext}') from None


def needs_conversion(tag: ContainerTag) -> bool:
    return tag.needs_conversion
