"""CLI entry point for nano_ingest.

Usage:
    python -m nano_ingest audio.m4a
    nano-ingest audio.mp3 --outfile audio16k.wav
"""
import argparse
import sys
from pathlib import Path

import numpy as np
import soundfile as sf

from nano_ingest import __version__
from nano_ingest.audio import AudioLoader
from nano_ingest.config import IngestSettings
from nano_ingest.errors import IngestError
from nano_ingest.log import console_logger, success
from nano_ingest.transcoder import FFmpegTranscoder
from nano_ingest.types import AudioStream


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='nano-ingest',
        description='nano-ingest — decode any audio file into 16 kHz mono float32 PCM',
    )
    parser.add_argument('audio', help='input audio file (wav/mp3/m4a/ogg/flac/…)')
    parser.add_argument('-o', '--outfile',
                        help='write the samples here (.npy array, otherwise float WAV)')
    parser.add_argument('-s', '--silent', action='store_true', help='suppress all log output')
    parser.add_argument('-v', '--verbose', action='count', default=0)
    parser.add_argument('--ffmpeg', help='ffmpeg executable (default: $NANO_INGEST_FFMPEG or ffmpeg)')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser


def save_stream(stream: AudioStream, path: str) -> None:
    if Path(path).suffix.lower() == '.npy':
        np.save(path, stream.samples)
    else:
        sf.write(path, stream.samples, stream.sample_rate, subtype='FLOAT', format='WAV')


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    settings = IngestSettings.from_env()

    logger = console_logger(
        silent=args.silent or settings.silent,
        verbose=args.verbose,
        color=settings.color,
    )
    transcoder = FFmpegTranscoder(args.ffmpeg or settings.ffmpeg_binary, logger=logger)
    loader = AudioLoader(transcoder=transcoder, logger=logger)

    logger.info('Loading audio from %s...', args.audio)
    try:
        stream = loader.load(args.audio)
    except IngestError as exc:
        logger.error('%s', exc)
        return 1

    if args.outfile:
        try:
            save_stream(stream, args.outfile)
        except (OSError, RuntimeError) as exc:  # sf.LibsndfileError is a RuntimeError
            logger.error('Could not write %s: %s', args.outfile, exc)
            return 1
        success(logger, 'Samples saved to %s', args.outfile)
    else:
        print(f'audio_s={stream.duration:.2f}  samples={len(stream.samples)}  sample_rate={stream.sample_rate}')
    success(logger, 'Ingestion complete')
    return 0


if __name__ == '__main__':
    sys.exit(main())
