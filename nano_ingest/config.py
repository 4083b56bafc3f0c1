"""Runtime configuration for nano_ingest."""
import os
from dataclasses import dataclass

_BOOL_TRUTHY = {'1', 'true', 'yes', 'on'}


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in _BOOL_TRUTHY


@dataclass(frozen=True)
class IngestSettings:
    ffmpeg_binary: str = 'ffmpeg'
    silent: bool = False
    color: bool = True

    @classmethod
    def from_env(cls) -> 'IngestSettings':
        """NANO_INGEST_FFMPEG, NANO_INGEST_SILENT and NO_COLOR (any value disables colour)."""
        return cls(
            ffmpeg_binary=os.getenv('NANO_INGEST_FFMPEG') or 'ffmpeg',
            silent=_env_bool('NANO_INGEST_SILENT'),
            color=os.getenv('NO_COLOR') is None,
        )
