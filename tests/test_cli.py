import json
from pathlib import Path
from types import ModuleType

import pytest

from jenkins_reconfig import __main__ as cli
from jenkins_reconfig import decofy, reconfig
from jenkins_reconfig._version import version


_FLAT = [
    {"key": "accounts_test_region", "value": "us-east-1"},
    {"key": "accounts_test_key", "value": "KEY"},
    {"key": "accounts_test_secret", "value": "SECRET"},
    {"key": "port", "value": "8080"},
]


@pytest.fixture
def flat_config(tmp_path: Path) -> Path:
    path = tmp_path / "config.json"
    _ = path.write_text(json.dumps(_FLAT, indent=4))
    return path


@pytest.fixture
def object_config(tmp_path: Path) -> Path:
    path = tmp_path / "config.json"
    _ = path.write_text('{"port": "8080"}')
    return path


def test_reconfig_prints_nested_json(flat_config: Path, capsys: pytest.CaptureFixture[str]) -> None:
    original = flat_config.read_text()

    assert reconfig.main([str(flat_config)]) == 0

    out = capsys.readouterr().out
    assert json.loads(out) == {
        "accounts": {"test": {"region": "us-east-1", "key": "KEY", "secret": "SECRET"}},
        "port": "8080",
    }
    assert out.startswith('{\n  "accounts": {\n')
    assert flat_config.read_text() == original


def test_reconfig_twice_gives_identical_output(flat_config: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert reconfig.main([str(flat_config)]) == 0
    first = capsys.readouterr().out
    assert reconfig.main([str(flat_config)]) == 0
    assert capsys.readouterr().out == first


def test_decofy_rewrites_file_in_place(flat_config: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert decofy.main([str(flat_config)]) == 0

    assert capsys.readouterr().out == f"Rewriting {flat_config} in Deco format ...\n"
    assert json.loads(flat_config.read_text()) == {
        "filters": {
            "config/config.json": {
                "accounts_test_region": "us-east-1",
                "accounts_test_key": "KEY",
                "accounts_test_secret": "SECRET",
                "port": "8080",
            }
        }
    }


@pytest.mark.parametrize("tool", [reconfig, decofy])
def test_missing_argument_exits_nonzero(tool: ModuleType, capsys: pytest.CaptureFixture[str]) -> None:
    assert tool.main([]) == 1
    assert capsys.readouterr().out == "No config file specified!\n"


@pytest.mark.parametrize("tool", [reconfig, decofy])
def test_non_array_input_is_rejected_without_mutation(
    tool: ModuleType, object_config: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    original = object_config.read_text()

    assert tool.main([str(object_config)]) == 1

    assert capsys.readouterr().out == f"Cannot process config file {object_config}, aborting!\n"
    assert object_config.read_text() == original


@pytest.mark.parametrize("tool", [reconfig, decofy])
def test_malformed_json_is_rejected_without_mutation(
    tool: ModuleType, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    path = tmp_path / "config.json"
    _ = path.write_text("[{")

    assert tool.main([str(path)]) == 1

    assert "aborting!" in capsys.readouterr().out
    assert path.read_text() == "[{"


@pytest.mark.parametrize("tool", [reconfig, decofy])
def test_missing_file_is_reported(tool: ModuleType, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "missing.json"

    assert tool.main([str(path)]) == 1

    assert capsys.readouterr().out == f"Cannot process config file {path}, aborting!\n"
    assert not path.exists()


def test_module_cli_dispatches_subcommands(flat_config: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["reconfig", str(flat_config)]) == 0
    assert json.loads(capsys.readouterr().out)["port"] == "8080"

    assert cli.main(["decofy", str(flat_config)]) == 0
    assert json.loads(flat_config.read_text())["filters"]["config/config.json"]["port"] == "8080"


def test_module_cli_missing_config(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["decofy"]) == 1
    assert capsys.readouterr().out == "No config file specified!\n"


def test_module_cli_version(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        _ = cli.main(["--version"])
    assert excinfo.value.code == 0
    assert capsys.readouterr().out.strip() == version


def test_non_ascii_values_are_written_unescaped(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "config.json"
    _ = path.write_text(json.dumps([{"key": "site_name", "value": "café"}]), encoding="utf-8")

    assert reconfig.main([str(path)]) == 0
    assert '"name": "café"' in capsys.readouterr().out

    assert decofy.main([str(path)]) == 0
    assert '"site_name": "café"' in path.read_text(encoding="utf-8")
