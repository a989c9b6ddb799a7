"""Host environment adapter.

Purpose
-------
Implement :class:`accumulo_client_config.application.ports.HostEnvironment`
against the real process: ``os.environ``, the user's home directory, the
platform path separator, and the local filesystem.

Key behaviours
--------------
* Accepts an ``environ`` override so callers can pin variables without
  mutating ``os.environ``.
* Home directory resolution prefers ``HOME`` from the effective environment and
  falls back to :meth:`pathlib.Path.home`.
* Readability checks use :func:`os.access` so permission-denied files are
  skipped by the search path just like missing ones.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping


class SystemEnvironment:
    """Read environment variables and files from the running host."""

    def __init__(
        self,
        *,
        environ: Mapping[str, str] | None = None,
        home: str | None = None,
        path_separator: str | None = None,
    ) -> None:
        """Initialise the adapter.

        Parameters
        ----------
        environ:
            Mapping to read variables from. Defaults to :data:`os.environ`.
        home:
            Explicit home directory; otherwise ``HOME`` or
            :meth:`pathlib.Path.home`.
        path_separator:
            Separator used to split ``ACCUMULO_CLIENT_CONF_PATH``. Defaults to
            :data:`os.pathsep`.
        """

        self._environ = os.environ if environ is None else environ
        self._home = home
        self.path_separator = path_separator or os.pathsep

    def getenv(self, name: str) -> str | None:
        return self._environ.get(name)

    def home_dir(self) -> str:
        if self._home is not None:
            return self._home
        return self._environ.get("HOME") or str(Path.home())

    def exists(self, path: str) -> bool:
        return Path(path).is_file()

    def is_readable(self, path: str) -> bool:
        return Path(path).is_file() and os.access(path, os.R_OK)

    def read_text(self, path: str, encoding: str) -> str:
        return Path(path).read_text(encoding=encoding)
