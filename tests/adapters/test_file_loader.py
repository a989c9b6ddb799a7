from __future__ import annotations

from pathlib import Path

import pytest

from accumulo_client_config.adapters.env.default import SystemEnvironment
from accumulo_client_config.adapters.file_loaders.properties import PropertiesFileLoader
from accumulo_client_config.domain.errors import InvalidFormat, NotFound
from accumulo_client_config.testing import InMemoryEnvironment


def test_loads_file_as_file_source(tmp_path: Path) -> None:
    path = tmp_path / "client.conf"
    path.write_text("# client\ninstance.name=demo\ninstance.zookeeper.host=zk1:2181\n", encoding="utf-8")
    source = PropertiesFileLoader().load(str(path))
    assert dict(source) == {"instance.name": "demo", "instance.zookeeper.host": "zk1:2181"}
    assert source.name == "file"
    assert source.path == str(path)


def test_missing_file_raises_not_found(tmp_path: Path) -> None:
    with pytest.raises(NotFound):
        PropertiesFileLoader().load(str(tmp_path / "missing.conf"))


def test_malformed_file_raises_invalid_format_with_path(tmp_path: Path) -> None:
    path = tmp_path / "client.conf"
    path.write_text("instance.name = \\u00zz\n", encoding="utf-8")
    with pytest.raises(InvalidFormat, match="client.conf"):
        PropertiesFileLoader().load(str(path))


def test_undecodable_file_raises_invalid_format(tmp_path: Path) -> None:
    path = tmp_path / "client.conf"
    path.write_bytes(b"instance.name = \xff\xfe\n")
    with pytest.raises(InvalidFormat):
        PropertiesFileLoader().load(str(path))


def test_custom_encoding(tmp_path: Path) -> None:
    path = tmp_path / "client.conf"
    path.write_bytes("instance.name = caf\u00e9\n".encode("latin-1"))
    source = PropertiesFileLoader(SystemEnvironment(), encoding="latin-1").load(str(path))
    assert source["instance.name"] == "caf\u00e9"


def test_unreadable_file_raises_not_found() -> None:
    env = InMemoryEnvironment(unreadable=["/etc/accumulo/client.conf"])
    with pytest.raises(NotFound, match="cannot be read"):
        PropertiesFileLoader(env).load("/etc/accumulo/client.conf")
