"""
Command-line interface for wordcodec.

Usage:
    wordcodec encode < file.bin                       # zlib + 1024-word dictionary
    wordcodec encode --compressor lzma --dict small   # other combinations
    wordcodec encode --dict my_words.txt --dict-efficiency
    wordcodec stats --input file.bin                  # compare every combination
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .compressors import list_compressors
from .config import EncoderConfig
from .encoder import WordEncoder
from .errors import WordcodecError
from .stats import iter_matrix
from .utils import setup_logger
from .wordlists import list_wordlists, numeric_words

logger = logging.getLogger(__name__)


def add_encoder_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--dict", dest="dictionary", default=EncoderConfig.dictionary,
                   help=f"Dictionary file or bundled list ({'|'.join(list_wordlists())}).")
    p.add_argument("--compressor", default=EncoderConfig.compressor,
                   help=f"Compressor ({'|'.join(list_compressors())}).")
    p.add_argument("--dict-efficiency", action="store_true", help="Log how much of the dictionary is used.")
    p.add_argument("--config", default=None, help="Optional EncoderConfig JSON file. Overrides flags above.")
    p.add_argument("--log-level", default=EncoderConfig.log_level)


def load_encoder_config(args: argparse.Namespace) -> EncoderConfig:
    if getattr(args, "config", None):
        with open(args.config, "r", encoding="utf-8") as f:
            return EncoderConfig.from_json(f.read())
    return EncoderConfig(
        dictionary=args.dictionary,
        compressor=args.compressor,
        dict_efficiency=bool(args.dict_efficiency),
        log_level=str(args.log_level).upper(),
    )


def read_input(path: Optional[str]) -> bytes:
    if path is None or path == "-":
        return sys.stdin.buffer.read()
    with open(path, "rb") as f:
        return f.read()


def run_encode(args: argparse.Namespace) -> int:
    try:
        cfg = load_encoder_config(args)
    except (OSError, ValueError) as e:
        logger.error("cannot load config: %s", e)
        return 1

    try:
        setup_logger(__package__, cfg.log_level)
    except ValueError:
        logger.error("invalid log level %r", cfg.log_level)
        return 1

    try:
        enc = WordEncoder.from_config(cfg)
    except (OSError, ValueError) as e:
        logger.error("cannot create encoder: %s", e)
        return 1

    ambiguous = numeric_words(enc.words)
    if ambiguous:
        logger.warning("dictionary has %d numeric words; they read like repeat counts", len(ambiguous))
    if cfg.dict_efficiency:
        logger.info("dictionary efficiency: %.2f%%", enc.efficiency() * 100)

    try:
        data = read_input(args.input)
    except OSError as e:
        logger.error("cannot read input: %s", e)
        return 1

    try:
        words = enc.encode(data)
    except Exception as e:
        logger.error("encode failed (%s): %s", cfg.compressor, e)
        return 1

    logger.debug("%d input bytes -> %d tokens", len(data), len(words))
    sys.stdout.write(" ".join(words) + "\n")
    return 0


def run_stats(args: argparse.Namespace) -> int:
    try:
        data = read_input(args.input)
        rows = list(iter_matrix(data, args.dicts, args.compressors))
    except (OSError, WordcodecError, ValueError) as e:
        logger.error("stats failed: %s", e)
        return 1

    print(f"{'compressor':<10} {'dict':<8} {'bytes':>8} {'words':>8} {'chars':>8}")
    for r in rows:
        print(f"{r.compressor:<10} {r.dictionary:<8} {r.compressed_bytes:>8} {r.words:>8} {r.chars:>8}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="wordcodec", description="Encode binary data as dictionary words")
    sub = parser.add_subparsers(dest="cmd", required=True)

    encode_p = sub.add_parser("encode", help="Encode stdin (or --input) to words on stdout")
    encode_p.add_argument("--input", default="-", help="Input file, '-' for stdin")
    add_encoder_args(encode_p)

    stats_p = sub.add_parser("stats", help="Compare word counts across dictionaries and compressors")
    stats_p.add_argument("--input", required=True)
    stats_p.add_argument("--dicts", nargs="+", default=list(list_wordlists()))
    stats_p.add_argument("--compressors", nargs="+", default=list(list_compressors()))

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logger(__package__)
    if args.cmd == "encode":
        return run_encode(args)
    return run_stats(args)


if __name__ == "__main__":
    sys.exit(main())
