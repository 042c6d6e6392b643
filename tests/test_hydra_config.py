import subprocess
import sys
from pathlib import Path

from hydra import compose, initialize
from hydra.core.hydra_config import HydraConfig

from scripts import encode_hydra


def _args(overrides):
    with initialize(version_base=None, config_path="../conf"):
        cfg = compose(config_name="config", overrides=overrides, return_hydra_config=True)
        HydraConfig.instance().set_config(cfg)
        return encode_hydra._cfg_to_args(cfg)


def test_defaults():
    args = _args([])
    assert args.dictionary == "large"
    assert args.compressor == "zlib"
    assert args.dict_efficiency is False
    assert args.input == "-"
    assert args.config is None


def test_dictionary_group_and_overrides():
    args = _args(["dictionary=small", "encode.compressor=lzma", "encode.dict_efficiency=true"])
    assert args.dictionary == "small"
    assert args.compressor == "lzma"
    assert args.dict_efficiency is True


def test_custom_path_wins(tmp_path):
    p = tmp_path / "words.txt"
    args = _args(["dictionary=medium", f"dictionary.path={p}"])
    assert args.dictionary == str(p)


def test_runs_encode(tmp_path, capsys):
    src = tmp_path / "in.txt"
    src.write_bytes(b"hello world")
    args = _args(["dictionary=small", "encode.compressor=none", f"encode.input={src}"])
    assert encode_hydra.cli.run_encode(args) == 0
    assert capsys.readouterr().out == "capital came care care cat arm chair cat cause care call\n"


def test_script_writes_only_words_to_stdout(tmp_path):
    src = tmp_path / "in.txt"
    src.write_bytes(b"hello world")
    script = Path(__file__).resolve().parents[1] / "scripts" / "encode_hydra.py"
    proc = subprocess.run(
        [
            sys.executable,
            str(script),
            "dictionary=small",
            "encode.compressor=none",
            "encode.dict_efficiency=true",
            f"encode.input={src}",
        ],
        cwd=str(tmp_path),
        capture_output=True,
        check=True,
    )
    assert proc.stdout == b"capital came care care cat arm chair cat cause care call\n"
    assert b"dictionary efficiency: 100.00%" in proc.stderr
    assert sorted(p.name for p in tmp_path.iterdir()) == ["in.txt"]
