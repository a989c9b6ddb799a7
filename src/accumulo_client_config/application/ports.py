"""Application-layer ports describing adapter responsibilities.

Purpose
-------
Define the structural contracts the composition root relies on so discovery
and loading can be exercised against fixed environments and in-memory files.

Contents
--------
* :class:`HostEnvironment` – environment variables, home directory, path
  separator, and file access.
* :class:`SearchPathResolver` – yields candidate configuration files.
* :class:`SourceLoader` – turns one file into a property source.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..domain.config import PropertySource


@runtime_checkable
class HostEnvironment(Protocol):
    """Everything default construction reads from the host.

    Why
    ----
    Search path discovery depends on process-global state. Routing it through
    one object lets tests substitute fixed variables and files.
    """

    path_separator: str

    def getenv(self, name: str) -> str | None:
        """Return the environment variable *name* or ``None``."""

    def home_dir(self) -> str:
        """Return the current user's home directory."""

    def exists(self, path: str) -> bool:
        """Return ``True`` when *path* names an existing file."""

    def is_readable(self, path: str) -> bool:
        """Return ``True`` when *path* is an existing, readable file."""

    def read_text(self, path: str, encoding: str) -> str:
        """Return the contents of *path*; raise :class:`OSError` on failure."""


@runtime_checkable
class SearchPathResolver(Protocol):
    """Compute the ordered list of candidate configuration files."""

    def candidates(self) -> list[str]:
        """Return candidate paths, highest precedence first."""


@runtime_checkable
class SourceLoader(Protocol):
    """Parse a properties file into a :class:`PropertySource`."""

    def load(self, path: str) -> PropertySource:
        """Read *path*; raise ``NotFound`` or ``InvalidFormat`` on failure."""
