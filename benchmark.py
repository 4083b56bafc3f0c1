#!/usr/bin/env python3
"""Benchmark nano_ingest on one file: decode + downmix + resample to 16 kHz."""
import argparse
import time

import numpy as np

from nano_ingest import load_audio


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument('audio', help='input audio file')
    parser.add_argument('--runs', type=int, default=5,
                        help='number of timed runs (after one warm-up)')
    args = parser.parse_args()

    # Warm-up (page cache, ffmpeg startup)
    print("Warming up…")
    stream   = load_audio(args.audio)
    duration = stream.duration

    times = []
    for _ in range(args.runs):
        t0 = time.perf_counter()
        load_audio(args.audio)
        times.append(time.perf_counter() - t0)

    dt    = min(times)
    std   = float(np.std(times))
    speed = duration / dt if dt > 0 else float('inf')
    print(f"audio_s={duration:.2f}  time_s={dt:.4f}  std={std:.4f}  speed={speed:.1f}x  samples={len(stream.samples)}")


if __name__ == '__main__':
    main()
