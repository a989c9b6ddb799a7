"""Test doubles that keep discovery and loading deterministic.

Purpose
    Provide an in-memory :class:`HostEnvironment` so search path behaviour can
    be exercised without touching the real filesystem or ``os.environ``.

Contents
    - ``InMemoryEnvironment``: fixed variables, home directory, separator, and
      a dictionary of file contents (optionally marked unreadable).

System Integration
    Used by the unit and adapter suites and by the doctests in the adapters.
    Any :func:`accumulo_client_config.core` constructor accepts it through the
    ``environment`` keyword.
"""

from __future__ import annotations

from typing import Iterable, Mapping


class InMemoryEnvironment:
    """Host environment backed by dictionaries.

    Examples
    --------
    >>> env = InMemoryEnvironment(files={"/a.conf": "k=v"}, unreadable=["/b.conf"])
    >>> env.is_readable("/a.conf"), env.exists("/b.conf"), env.is_readable("/b.conf")
    (True, True, False)
    """

    def __init__(
        self,
        *,
        environ: Mapping[str, str] | None = None,
        home: str = "/home/client",
        path_separator: str = ":",
        files: Mapping[str, str] | None = None,
        unreadable: Iterable[str] = (),
    ) -> None:
        self.environ = dict(environ or {})
        self.home = home
        self.path_separator = path_separator
        self.files = dict(files or {})
        self.unreadable = set(unreadable)
        self.reads: list[str] = []

    def getenv(self, name: str) -> str | None:
        return self.environ.get(name)

    def home_dir(self) -> str:
        return self.home

    def exists(self, path: str) -> bool:
        return path in self.files or path in self.unreadable

    def is_readable(self, path: str) -> bool:
        return path in self.files and path not in self.unreadable

    def read_text(self, path: str, encoding: str) -> str:
        if path in self.unreadable:
            raise PermissionError(f"Permission denied: {path}")
        if path not in self.files:
            raise FileNotFoundError(path)
        self.reads.append(path)
        return self.files[path]
