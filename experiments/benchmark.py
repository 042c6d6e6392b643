from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

# Import common first to bootstrap repo imports when running from a checkout.
from experiments.common import minify, now_ts, results_root, save_csv, save_json, summarize

from wordcodec.compressors import list_compressors
from wordcodec.stats import EncodeStats, iter_matrix
from wordcodec.wordlists import list_wordlists

logger = logging.getLogger(__name__)

HEADER = [
    "input",
    "compressor",
    "dictionary",
    "input_bytes",
    "compressed_bytes",
    "words",
    "chars",
    "efficiency",
    "seconds",
]


@dataclass
class BenchmarkConfig:
    inputs: Dict[str, bytes]
    dictionaries: List[str] = field(default_factory=lambda: list(list_wordlists()))
    compressors: List[str] = field(default_factory=lambda: list(list_compressors()))
    include_minified: bool = True
    out_dir: Optional[Path] = None


def run_benchmark(*, cfg: BenchmarkConfig) -> Path:
    """Measure every input x compressor x dictionary. Returns the result directory."""

    inputs = dict(cfg.inputs)
    if cfg.include_minified:
        for name, data in cfg.inputs.items():
            inputs[f"{name}_minified"] = minify(data)

    rows: List[List[object]] = []
    by_input: Dict[str, List[EncodeStats]] = {}
    for name, data in inputs.items():
        stats = list(iter_matrix(data, cfg.dictionaries, cfg.compressors))
        by_input[name] = stats
        for s in stats:
            rows.append([
                name,
                s.compressor,
                s.dictionary,
                s.input_bytes,
                s.compressed_bytes,
                s.words,
                s.chars,
                f"{s.efficiency:.4f}",
                f"{s.seconds:.6f}",
            ])
        best = min(stats, key=lambda s: s.chars)
        logger.info("%s: shortest output %s+%s (%d chars)", name, best.compressor, best.dictionary, best.chars)

    out_dir = cfg.out_dir or (results_root() / f"benchmark_{now_ts()}")
    save_csv(rows, out_dir / "benchmark.csv", HEADER)
    save_json(
        {
            "dictionaries": cfg.dictionaries,
            "compressors": cfg.compressors,
            "results": by_input,
            "chars": {k: summarize([float(s.chars) for s in v]) for k, v in by_input.items()},
        },
        out_dir / "benchmark.json",
    )
    return out_dir
