"""Shared sandbox helpers for the test suites.

``create_client_sandbox`` lays out a fake home directory, ``ACCUMULO_CONF_DIR``
and ``ACCUMULO_HOME`` inside ``tmp_path`` and returns the environment variables
that point the real :class:`SystemEnvironment` at them.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class ClientSandbox:
    root: Path
    home: Path
    conf_dir: Path
    accumulo_home: Path
    env: dict[str, str] = field(default_factory=dict)

    @property
    def user_file(self) -> Path:
        return self.home / ".accumulo" / "config"

    @property
    def conf_dir_file(self) -> Path:
        return self.conf_dir / "client.conf"

    @property
    def accumulo_home_file(self) -> Path:
        return self.accumulo_home / "conf" / "client.conf"

    def write(self, path: Path, content: str) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    def search_path(self, *paths: Path) -> dict[str, str]:
        """Return ``env`` extended with an explicit ``ACCUMULO_CLIENT_CONF_PATH``."""

        return {**self.env, "ACCUMULO_CLIENT_CONF_PATH": os.pathsep.join(str(path) for path in paths)}


def create_client_sandbox(tmp_path: Path, *, use_conf_dir: bool = False, use_accumulo_home: bool = False) -> ClientSandbox:
    home = tmp_path / "home"
    conf_dir = tmp_path / "conf"
    accumulo_home = tmp_path / "accumulo"
    for directory in (home, conf_dir, accumulo_home):
        directory.mkdir(parents=True, exist_ok=True)
    env = {"HOME": str(home)}
    if use_conf_dir:
        env["ACCUMULO_CONF_DIR"] = str(conf_dir)
    if use_accumulo_home:
        env["ACCUMULO_HOME"] = str(accumulo_home)
    return ClientSandbox(root=tmp_path, home=home, conf_dir=conf_dir, accumulo_home=accumulo_home, env=env)
