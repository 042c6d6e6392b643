from __future__ import annotations

import json
import sys
import time
from dataclasses import asdict, is_dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Sequence

# -----------------------------------------------------------------------------
# Repo import bootstrap
# -----------------------------------------------------------------------------
# Experiment scripts are runnable straight from a checkout
# (`python experiments/run_all.py`) without an editable install.
_REPO_ROOT = Path(__file__).resolve().parents[1]
if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))


def repo_root() -> Path:
    return Path(__file__).resolve().parents[1]


def results_root() -> Path:
    return repo_root() / "results"


def ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def _jsonable(obj: Any) -> Any:
    if is_dataclass(obj):
        return asdict(obj)
    if isinstance(obj, Path):
        return str(obj)
    if isinstance(obj, bytes):
        return obj.hex()
    return obj


def save_json(payload: Mapping[str, Any], path: Path) -> None:
    ensure_dir(path.parent)
    with path.open("w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2, default=_jsonable, ensure_ascii=False)


def save_csv(rows: Iterable[Sequence[Any]], path: Path, header: Sequence[str]) -> None:
    ensure_dir(path.parent)
    with path.open("w", encoding="utf-8") as f:
        f.write(",".join(header) + "\n")
        for r in rows:
            f.write(",".join(str(x) for x in r) + "\n")


def now_ts() -> str:
    return time.strftime("%Y%m%d_%H%M%S")


def read_inputs(paths: Sequence[str]) -> Dict[str, bytes]:
    """Read benchmark inputs keyed by file stem. Later duplicates win."""
    out: Dict[str, bytes] = {}
    for p in paths:
        path = Path(p)
        if not path.is_file():
            raise FileNotFoundError(f"Benchmark input not found: {path}")
        out[path.stem] = path.read_bytes()
    return out


def minify(data: bytes) -> bytes:
    """Collapse every whitespace run to one space.

    Mirrors the "normal vs minified" pair of benchmark inputs.
    """
    return b" ".join(data.split())


def summarize(values: List[float]) -> Dict[str, float]:
    if not values:
        return {"min": float("nan"), "max": float("nan"), "mean": float("nan")}
    return {"min": min(values), "max": max(values), "mean": sum(values) / len(values)}
