from __future__ import annotations

import argparse
from pathlib import Path

# Import common first to bootstrap repo imports when running from a checkout.
from experiments.common import read_inputs

from experiments.benchmark import BenchmarkConfig, run_benchmark
from wordcodec.compressors import list_compressors
from wordcodec.utils import setup_logger
from wordcodec.wordlists import list_wordlists


def main() -> None:
    ap = argparse.ArgumentParser(
        description="Benchmark word encodings and save outputs under results/."
    )
    ap.add_argument("--inputs", nargs="+", required=True, help="Files to encode.")
    ap.add_argument("--dicts", nargs="+", default=list(list_wordlists()), help="Dictionaries (key or path).")
    ap.add_argument("--compressors", nargs="+", default=list(list_compressors()), help="Compressors.")
    ap.add_argument("--no-minified", action="store_true", help="Skip the whitespace-collapsed variants.")
    ap.add_argument("--out-dir", default=None)
    args = ap.parse_args()

    setup_logger("experiments")
    cfg = BenchmarkConfig(
        inputs=read_inputs(args.inputs),
        dictionaries=list(args.dicts),
        compressors=list(args.compressors),
        include_minified=not args.no_minified,
        out_dir=Path(args.out_dir) if args.out_dir else None,
    )
    out_dir = run_benchmark(cfg=cfg)
    print(f"Wrote benchmark results to: {out_dir}")


if __name__ == "__main__":
    main()
