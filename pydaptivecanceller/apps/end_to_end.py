# pydaptivecanceller/apps/end_to_end.py
"""
End-to-end check of the noise canceller on a floating point noisy cosine.

Four raw 32-bit float files are written for offline inspection:

    original.dat   - clean cosine
    noise.dat      - additive noise
    tainted.dat    - cosine + noise (canceller input)
    processed.dat  - canceller output

    pydaptive-system-test -a 0.5 -f 200 -r 24000 -t 1 -v 0.1 -o 5 -d 5 -b 0.1
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Dict, Optional, Sequence, TextIO

import numpy as np

from pydaptivecanceller._utils.metrics import snr_db
from pydaptivecanceller._utils.pcm import write_float32
from pydaptivecanceller._utils.sources import noisy_cosine
from pydaptivecanceller.apps._args import add_canceller_arguments
from pydaptivecanceller.apps.noisy_cosine import (
    add_signal_arguments,
    check_signal_arguments,
    signal_config_from_args,
)
from pydaptivecanceller.config import CancellerConfig, SignalConfig
from pydaptivecanceller.lms.nlms_canceller import NlmsNoiseCanceller

OUTPUT_FILES = ("original.dat", "noise.dat", "tainted.dat", "processed.dat")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pydaptive-system-test",
        description="Run the noise canceller on a noisy cosine and dump all signals.",
    )
    add_signal_arguments(parser, duration_flag="-t")
    add_canceller_arguments(parser, length_flag="-o")
    parser.add_argument(
        "--output-dir", type=Path, default=Path("."),
        help="directory for the .dat files (default: current directory)",
    )
    parser.add_argument("--verbose", action="store_true", help="print a summary to stderr")
    return parser


def run(
    signal_cfg: SignalConfig,
    canceller_cfg: CancellerConfig,
    output_dir: Path,
) -> Dict[str, np.ndarray]:
    """Generate, process and dump the signals; returns them keyed by file name."""
    clean, noise = noisy_cosine(signal_cfg)
    tainted = clean + noise

    canceller = NlmsNoiseCanceller(
        canceller_cfg.filter_length,
        canceller_cfg.reference_delay,
        canceller_cfg.beta,
        history=canceller_cfg.history,
    )
    processed = canceller.accept_data(tainted)

    signals = dict(zip(OUTPUT_FILES, (clean, noise, tainted, processed)))

    output_dir.mkdir(parents=True, exist_ok=True)
    for name, samples in signals.items():
        with open(output_dir / name, "wb") as fd:
            write_float32(fd, samples)

    return signals


def main(argv: Optional[Sequence[str]] = None, stderr: Optional[TextIO] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    check_signal_arguments(parser, args)

    signal_cfg = signal_config_from_args(args)
    canceller_cfg = CancellerConfig(
        filter_length=args.filter_length,
        reference_delay=args.reference_delay,
        beta=args.beta,
        history=args.history,
    )
    stderr = sys.stderr if stderr is None else stderr

    signals = run(signal_cfg, canceller_cfg, args.output_dir)

    if args.verbose:
        clean = signals["original.dat"]
        delay = canceller_cfg.reference_delay
        # the estimate tracks x[n - D], so compare against the delayed clean signal
        delayed_clean = np.concatenate((np.zeros(delay), clean))[: clean.size]
        print(
            f"[system-test] {clean.size} samples | "
            f"snr_in={snr_db(clean, signals['tainted.dat']):6.2f} dB | "
            f"snr_out={snr_db(delayed_clean, signals['processed.dat']):6.2f} dB | "
            f"files in {args.output_dir}",
            file=stderr,
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
