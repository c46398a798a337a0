# pydaptivecanceller/apps/noise_canceller.py
"""
Stream noise canceller.

Reads raw headerless 16-bit PCM from stdin, removes the noise block by block
and writes 16-bit PCM of the same length to stdout:

    pydaptive-noise-canceller -f 5 -d 5 -b 0.1 < noisy.raw > clean.raw
"""
from __future__ import annotations

import argparse
import sys
from time import perf_counter
from typing import BinaryIO, Optional, Sequence, TextIO

from pydaptivecanceller._utils.pcm import read_int16_blocks, write_int16
from pydaptivecanceller.apps._args import add_canceller_arguments, positive_int
from pydaptivecanceller.config import CancellerConfig
from pydaptivecanceller.lms.nlms_canceller import NlmsNoiseCanceller


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pydaptive-noise-canceller",
        description="Remove noise from a raw 16-bit PCM stream (stdin -> stdout).",
    )
    add_canceller_arguments(parser)
    parser.add_argument(
        "--block-size", type=positive_int, default=CancellerConfig().block_size,
        help="samples per processing block (default: %(default)s)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="print a summary to stderr")
    return parser


def config_from_args(args: argparse.Namespace) -> CancellerConfig:
    return CancellerConfig(
        filter_length=args.filter_length,
        reference_delay=args.reference_delay,
        beta=args.beta,
        history=args.history,
        block_size=args.block_size,
    )


def run(cfg: CancellerConfig, stdin: BinaryIO, stdout: BinaryIO) -> int:
    """Filter the whole stream; returns the number of samples processed."""
    canceller = NlmsNoiseCanceller(
        cfg.filter_length, cfg.reference_delay, cfg.beta, history=cfg.history
    )

    n_samples = 0
    for block in read_int16_blocks(stdin, cfg.block_size):
        write_int16(stdout, canceller.accept_data(block, block.size))
        n_samples += int(block.size)

    stdout.flush()
    return n_samples


def main(
    argv: Optional[Sequence[str]] = None,
    stdin: Optional[BinaryIO] = None,
    stdout: Optional[BinaryIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    args = build_parser().parse_args(argv)
    cfg = config_from_args(args)

    stdin = sys.stdin.buffer if stdin is None else stdin
    stdout = sys.stdout.buffer if stdout is None else stdout
    stderr = sys.stderr if stderr is None else stderr

    tic = perf_counter()
    n_samples = run(cfg, stdin, stdout)

    if args.verbose:
        print(
            f"[noise-canceller] {n_samples} samples | taps={cfg.filter_length} "
            f"delay={cfg.reference_delay} beta={cfg.beta} | "
            f"{(perf_counter() - tic) * 1000:.03f} ms",
            file=stderr,
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
