#!/usr/bin/env python3
from __future__ import annotations

import argparse
import sys
from pathlib import Path

import hydra
from hydra.core.hydra_config import HydraConfig
from omegaconf import DictConfig

# Ensure repo root is on sys.path when running as a script.
repo_root = Path(__file__).resolve().parents[1]
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from wordcodec import cli
from wordcodec.utils import setup_logger


def _cfg_to_args(cfg: DictConfig) -> argparse.Namespace:
    dictionary_choice = HydraConfig.get().runtime.choices.get("dictionary")
    if not dictionary_choice:
        raise ValueError("Missing dictionary choice from Hydra overrides.")
    return argparse.Namespace(
        # A custom path in the group config wins over the bundled list of that name.
        dictionary=cfg.dictionary.path or dictionary_choice,
        compressor=cfg.encode.compressor,
        dict_efficiency=cfg.encode.dict_efficiency,
        input=cfg.encode.input,
        log_level=cfg.encode.log_level,
        config=None,
    )


@hydra.main(config_path="../conf", config_name="config", version_base=None)
def main(cfg: DictConfig) -> None:
    setup_logger("wordcodec")
    args = _cfg_to_args(cfg)
    rc = cli.run_encode(args)
    if rc:
        sys.exit(rc)


if __name__ == "__main__":
    main()
