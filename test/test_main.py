import os

import matplotlib

matplotlib.use("Agg")

import fuzzycore.config
from fuzzycore.config import DEFAULT_CONFIG_PATH
from main import build_parser, run


def _run(argv):
    return run(build_parser().parse_args(argv))


def test_main_reference_inputs(config_path, tmp_path, capsys):
    assert _run(["--config", config_path, "--log-dir", str(tmp_path)]) == 0
    out = capsys.readouterr().out
    assert "health=45.00 enemies=3.00 -> Decision: Be cautious, assess further!" in out


def test_main_overrides_inputs(config_path, tmp_path, capsys):
    argv = ["--config", config_path, "--log-dir", str(tmp_path), "--health", "85", "--enemies", "1"]
    assert _run(argv) == 0
    assert "Decision: Fight!" in capsys.readouterr().out


def test_main_sweep(config_path, tmp_path, capsys):
    assert _run(["--config", config_path, "--log-dir", str(tmp_path), "--sweep", "3"]) == 0
    lines = [ln for ln in capsys.readouterr().out.splitlines() if "Decision:" in ln]
    assert len(lines) == 3
    assert lines[0].startswith("health=0.00")
    assert lines[-1].startswith("health=100.00")


def test_main_invalid_config(tmp_path, capsys):
    cfg = tmp_path / "bad.toml"
    cfg.write_text(
        "[variables.health]\n"
        "low = [0, 0, 30, 50]\n"
        "medium = [70, 50, 30]\n"
        "high = [50, 70, 100, 100]\n",
        encoding="utf-8",
    )
    assert _run(["--config", str(cfg), "--log-dir", str(tmp_path / "logs")]) == 1


def test_main_missing_config(tmp_path):
    missing = tmp_path / "missing.toml"
    log_dir = tmp_path / "logs"
    assert _run(["--config", str(missing), "--log-dir", str(log_dir)]) == 1
    main_log = (log_dir / "main.log").read_text(encoding="utf-8")
    assert "CRITICAL | main | Cannot load configuration" in main_log


def test_main_malformed_toml(tmp_path):
    cfg = tmp_path / "broken.toml"
    cfg.write_text("[variables.health\nlow = [0, 0", encoding="utf-8")
    assert _run(["--config", str(cfg), "--log-dir", str(tmp_path / "logs")]) == 1


def test_main_default_config_is_packaged(tmp_path, capsys):
    assert os.path.isfile(DEFAULT_CONFIG_PATH)
    assert os.path.dirname(DEFAULT_CONFIG_PATH) == os.path.dirname(fuzzycore.config.__file__)
    assert _run(["--log-dir", str(tmp_path)]) == 0
    assert "Decision: Be cautious, assess further!" in capsys.readouterr().out
