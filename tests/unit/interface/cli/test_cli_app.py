from __future__ import annotations

"""
Unit tests for the CLI Application Controller.

Runs `main(argv)` in-process and inspects exit codes and stdout.
"""

import json
import sys
from pathlib import Path

import pytest

from functorkit.core.tree import codec
from functorkit.core.tree.generator import left_spine
from functorkit.domain.config import CONFIG_ENV_VAR
from functorkit.infra.logging import reset_logging
from functorkit.interface.cli.app import main


@pytest.fixture(autouse=True)
def isolate(monkeypatch):
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    reset_logging()
    yield
    reset_logging()


def test_map_text_output(capsys):
    code = main(["map", "[10, 20]", "--fn", "double"])

    assert code == 0
    assert capsys.readouterr().out.splitlines() == [
        "Branch",
        "├── Leaf(20)",
        "└── Leaf(40)",
    ]


def test_map_json_output_applies_functions_in_order(capsys):
    code = main(["map", "[1, [2, 3]]", "--fn", "increment", "--fn", "double", "--json"])

    payload = json.loads(capsys.readouterr().out)
    assert code == 0
    assert payload["tree"] == [4, [6, 8]]
    assert payload["functions"] == ["increment", "double"]
    assert payload["depth"] == 3
    assert payload["size"] == 5


def test_map_single_leaf(capsys):
    assert main(["map", "100", "--fn", "double", "--json"]) == 0
    assert json.loads(capsys.readouterr().out)["tree"] == 200


def test_map_unknown_function_is_invalid_input(capsys):
    code = main(["map", "[1, 2]", "--fn", "cube"])

    assert code == 2
    assert "Unknown function 'cube'" in capsys.readouterr().err


def test_map_malformed_tree_is_invalid_input(capsys):
    code = main(["map", "[1, 2, 3]", "--fn", "double"])

    assert code == 2
    assert "ERROR" in capsys.readouterr().err


def test_map_function_failure_is_reported(capsys):
    code = main(["map", '["a", 1]', "--fn", "negate"])

    assert code == 1
    assert "ERROR" in capsys.readouterr().err


def test_map_deep_tree_literal(capsys):
    n = sys.getrecursionlimit() * 3
    literal = codec.dumps(left_spine(n))

    code = main(["map", literal, "--fn", "double", "--json"])

    out = capsys.readouterr().out
    assert code == 0
    assert out.startswith('{"tree": ' + "[" * (n - 1) + "0, 2]")
    assert f'"depth": {n}' in out


def test_render_deep_tree_text(capsys):
    n = sys.getrecursionlimit() * 3

    assert main(["render", codec.dumps(left_spine(n))]) == 0
    out = capsys.readouterr().out
    assert out.splitlines()[-1] == f"depth: {n}, size: {2 * n - 1}, leaves: {n}"


def test_render_reports_measurements(capsys):
    assert main(["render", "[1, [2, 3]]"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines()[-1] == "depth: 3, size: 5, leaves: 3"


def test_laws_pass_for_builtin_instances(capsys):
    code = main(["laws", "--samples", "4", "--max-depth", "4", "--seed", "3", "--json"])

    payload = json.loads(capsys.readouterr().out)
    assert code == 0
    assert payload["ok"] is True
    assert payload["seed"] == 3
    names = [r["instance"] for r in payload["reports"]]
    assert names == ["Tree", "list", "tuple", "Option", "dict", "function"]


def test_laws_text_summary(capsys):
    assert main(["laws", "--samples", "2", "--seed", "5"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Seed: 5")
    assert "Tree" in out and "OK" in out


def test_dump_config_uses_file_and_overrides(tmp_path: Path, capsys):
    cfg_file = tmp_path / "cfg.json"
    cfg_file.write_text(json.dumps({"law_samples": 9, "max_depth": 2}), encoding="utf-8")

    code = main(["--config", str(cfg_file), "--dump-config", "laws", "--max-depth", "5"])

    conf = json.loads(capsys.readouterr().out)
    assert code == 0
    assert conf["law_samples"] == 9
    assert conf["max_depth"] == 5


def test_use_defaults_ignores_config_file(tmp_path: Path, capsys):
    cfg_file = tmp_path / "cfg.json"
    cfg_file.write_text(json.dumps({"law_samples": 9}), encoding="utf-8")

    main(["--config", str(cfg_file), "--use-defaults", "--dump-config"])

    assert json.loads(capsys.readouterr().out)["law_samples"] == 25


def test_missing_command_prints_help(capsys):
    assert main([]) == 2
    assert "usage" in capsys.readouterr().err.lower()
