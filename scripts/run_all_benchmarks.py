#!/usr/bin/env python3
from __future__ import annotations

import argparse
import subprocess
import sys
from pathlib import Path


COMPRESSORS = ["none", "lzma", "zlib", "gzip"]
DICTIONARIES = ["large", "medium", "small"]


def parse_args() -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Encode one input with every compressor/dictionary pair.")
    ap.add_argument("--input", required=True, help="File to encode.")
    ap.add_argument("--dict-efficiency", action="store_true", help="Log dictionary efficiency for each run.")
    ap.add_argument(
        "--override",
        action="append",
        default=[],
        help="Extra Hydra override (repeatable), e.g. --override encode.log_level=DEBUG",
    )
    return ap.parse_args()


def main() -> None:
    args = parse_args()
    script_path = Path(__file__).resolve().parent / "encode_hydra.py"
    input_path = Path(args.input).resolve()

    for comp in COMPRESSORS:
        for name in DICTIONARIES:
            cmd = [
                sys.executable,
                str(script_path),
                f"dictionary={name}",
                f"encode.compressor={comp}",
                f"encode.input={input_path}",
            ]
            if args.dict_efficiency:
                cmd.append("encode.dict_efficiency=true")
            cmd.extend(args.override)
            print(f"[run] {comp}/{name} -> {' '.join(cmd)}", file=sys.stderr)
            subprocess.check_call(cmd)


if __name__ == "__main__":
    main()
