# pydaptivecanceller/apps/noisy_cosine.py
"""
Noisy cosine generator.

Writes ``int16((cos + noise) * amplitude * 32767)`` as raw 16-bit PCM to stdout:

    pydaptive-noisy-cosine -a 0.5 -f 200 -r 24000 -d 1 -v 0.1 > noisy.raw
"""
from __future__ import annotations

import argparse
import sys
from typing import BinaryIO, Optional, Sequence, TextIO

import numpy as np

from pydaptivecanceller._utils.pcm import INT16_MAX, to_int16, write_int16
from pydaptivecanceller._utils.sources import noisy_cosine
from pydaptivecanceller.apps._args import finite_float, positive_float
from pydaptivecanceller.config import SignalConfig


def add_signal_arguments(parser: argparse.ArgumentParser, duration_flag: str = "-d") -> None:
    defaults = SignalConfig()
    parser.add_argument(
        "-a", "--amplitude", type=finite_float, default=defaults.amplitude,
        help="amplitude between 0 and 1; the sign is ignored (default: %(default)s)",
    )
    parser.add_argument(
        "-f", "--frequency", type=finite_float, default=defaults.frequency,
        help="frequency in Hz (default: %(default)s)",
    )
    parser.add_argument(
        "-r", "--sample-rate", type=positive_float, default=defaults.sample_rate,
        help="sample rate in samples/second (default: %(default)s)",
    )
    parser.add_argument(
        duration_flag, "--duration", type=finite_float, default=defaults.duration,
        help="duration in seconds (default: %(default)s)",
    )
    parser.add_argument(
        "-v", "--noise-variance", type=finite_float, default=defaults.noise_variance,
        help="variance of the Gaussian noise (default: %(default)s)",
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed for the noise")


def check_signal_arguments(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    if not args.duration >= 0.0:
        parser.error(f"--duration must be >= 0, got {args.duration}")
    if not args.noise_variance >= 0.0:
        parser.error(f"--noise-variance must be >= 0, got {args.noise_variance}")


def signal_config_from_args(args: argparse.Namespace) -> SignalConfig:
    return SignalConfig(
        amplitude=abs(args.amplitude),
        frequency=args.frequency,
        sample_rate=args.sample_rate,
        duration=args.duration,
        noise_variance=args.noise_variance,
        seed=args.seed,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pydaptive-noisy-cosine",
        description="Write a noisy cosine as raw 16-bit PCM to stdout.",
    )
    add_signal_arguments(parser)
    parser.add_argument("--verbose", action="store_true", help="print a summary to stderr")
    return parser


def run(cfg: SignalConfig, stdout: BinaryIO) -> np.ndarray:
    """Generate the PCM samples, write them and return them."""
    clean, noise = noisy_cosine(cfg)
    samples = to_int16((clean + noise) * INT16_MAX)
    write_int16(stdout, samples)
    stdout.flush()
    return samples


def main(
    argv: Optional[Sequence[str]] = None,
    stdout: Optional[BinaryIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    check_signal_arguments(parser, args)

    cfg = signal_config_from_args(args)
    stdout = sys.stdout.buffer if stdout is None else stdout
    stderr = sys.stderr if stderr is None else stderr

    samples = run(cfg, stdout)

    if args.verbose:
        print(
            f"[noisy-cosine] {samples.size} samples | f={cfg.frequency} Hz "
            f"fs={cfg.sample_rate} | noise variance={cfg.noise_variance}",
            file=stderr,
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
