"""End-to-end CLI coverage for the public commands."""

from __future__ import annotations

import json
import os
from pathlib import Path

import lib_cli_exit_tools
from click.testing import CliRunner

from accumulo_client_config import cli
from accumulo_client_config.domain.properties import ClientProperty
from tests.support import create_client_sandbox


def _runner() -> CliRunner:
    return CliRunner()


def _env(tmp_path: Path, *files: Path) -> dict[str, str]:
    sandbox = create_client_sandbox(tmp_path)
    return sandbox.search_path(*files)


def test_cli_search_path_outputs_json(tmp_path: Path) -> None:
    present = tmp_path / "present.conf"
    present.write_text("a=1\n", encoding="utf-8")
    absent = tmp_path / "absent.conf"
    env = {"ACCUMULO_CLIENT_CONF_PATH": os.pathsep.join([str(absent), str(present)])}

    result = _runner().invoke(cli.cli, ["search-path"], env=env)
    assert result.exit_code == 0
    assert json.loads(result.output) == [str(absent), str(present)]

    readable = _runner().invoke(cli.cli, ["search-path", "--readable-only"], env=env)
    assert json.loads(readable.output) == [str(present)]


def test_cli_show_properties_round_trips(tmp_path: Path) -> None:
    first = tmp_path / "first.conf"
    first.write_text("instance.name = first\n", encoding="utf-8")
    second = tmp_path / "second.conf"
    second.write_text("instance.name = second\ninstance.zookeeper.host = zk:2181\n", encoding="utf-8")

    result = _runner().invoke(cli.cli, ["show"], env=_env(tmp_path, first, second))
    assert result.exit_code == 0
    assert result.output == "instance.name = first\ninstance.zookeeper.host = zk:2181\n"


def test_cli_show_json_with_provenance(tmp_path: Path) -> None:
    override = tmp_path / "override.conf"
    override.write_text("instance.id = abc\n", encoding="utf-8")

    result = _runner().invoke(cli.cli, ["show", "--file", str(override), "--format", "json", "--provenance"])
    assert result.exit_code == 0
    payload = json.loads(result.output)
    assert payload["config"] == {"instance.id": "abc"}
    assert payload["provenance"]["instance.id"] == {"source": "file", "path": str(override), "key": "instance.id"}


def test_cli_show_json_plain(tmp_path: Path) -> None:
    override = tmp_path / "override.conf"
    override.write_text("instance.name = plain\n", encoding="utf-8")
    result = _runner().invoke(cli.cli, ["show", "--file", str(override), "--format", "json", "--indent", "2"])
    assert result.exit_code == 0
    assert json.loads(result.output) == {"instance.name": "plain"}


def test_cli_show_missing_override_fails(tmp_path: Path) -> None:
    result = _runner().invoke(cli.cli, ["show", "--file", str(tmp_path / "missing.conf")])
    assert result.exit_code != 0
    assert "missing.conf" in str(result.exception)


def test_cli_get_applies_defaults(tmp_path: Path) -> None:
    override = tmp_path / "override.conf"
    override.write_text("instance.name = demo\n", encoding="utf-8")
    runner = _runner()

    stored = runner.invoke(cli.cli, ["get", "instance.name", "--file", str(override)])
    assert stored.exit_code == 0
    assert stored.output.strip() == "demo"

    default = runner.invoke(cli.cli, ["get", "instance.zookeeper.timeout", "--file", str(override)])
    assert default.output.strip() == "30s"

    unresolved = runner.invoke(cli.cli, ["get", "instance.id", "--file", str(override)])
    assert unresolved.exit_code == 1


def test_cli_properties_lists_catalogue() -> None:
    result = _runner().invoke(cli.cli, ["properties"])
    assert result.exit_code == 0
    catalogue = json.loads(result.output)
    assert [entry["key"] for entry in catalogue] == [prop.key for prop in ClientProperty]
    by_key = {entry["key"]: entry for entry in catalogue}
    assert by_key["instance.name"]["mirrors_server"] is False
    assert by_key["instance.zookeeper.host"] == {
        "name": "INSTANCE_ZK_HOST",
        "key": "instance.zookeeper.host",
        "default": "localhost:2181",
        "type": "host list",
        "description": "Comma separated list of zookeeper servers",
        "mirrors_server": True,
    }


def test_cli_info_runs() -> None:
    result = _runner().invoke(cli.cli, ["info"])
    assert result.exit_code == 0
    assert "accumulo-client-config" in result.output


def test_main_returns_exit_code_for_failures(tmp_path: Path) -> None:
    assert cli.main(["properties"]) == 0
    assert cli.main(["show", "--file", str(tmp_path / "missing.conf")]) != 0


def test_main_restores_traceback_flag() -> None:
    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    assert cli.main(["--traceback", "properties"], restore_traceback=True) == 0
    assert getattr(lib_cli_exit_tools.config, "traceback", False) == previous_traceback
