"""Properties file loader.

Purpose
-------
Convert an on-disk properties file into a
:class:`accumulo_client_config.domain.config.PropertySource`. The adapter is a
small wrapper around :func:`parse_properties` so error handling and logging
live in one place.

System Role
-----------
Invoked by :mod:`accumulo_client_config.core` for explicit override files and
for every readable entry on the search path.
"""

from __future__ import annotations

from ...application.ports import HostEnvironment
from ...domain.config import PropertySource
from ...domain.errors import InvalidFormat, NotFound
from ...domain.properties_format import parse_properties
from ...observability import log_debug, log_error
from ..env.default import SystemEnvironment


class PropertiesFileLoader:
    """Load ``key=value`` properties files through a :class:`HostEnvironment`."""

    def __init__(self, environment: HostEnvironment | None = None, *, encoding: str = "utf-8") -> None:
        self.environment = environment or SystemEnvironment()
        self.encoding = encoding

    def load(self, path: str) -> PropertySource:
        """Return the entries of *path* as a file-backed source.

        Raises
        ------
        NotFound
            When *path* does not exist or cannot be read.
        InvalidFormat
            When the content is not valid properties text or not decodable.

        Examples
        --------
        >>> from accumulo_client_config.testing import InMemoryEnvironment
        >>> env = InMemoryEnvironment(files={"/etc/accumulo/client.conf": "instance.name=prod\\n"})
        >>> source = PropertiesFileLoader(env).load("/etc/accumulo/client.conf")
        >>> source["instance.name"], source.name
        ('prod', 'file')
        """

        text = self._read(path)
        try:
            entries = parse_properties(text)
        except InvalidFormat as exc:
            log_error("source_invalid", source="file", path=path, error=str(exc))
            raise InvalidFormat(f"Invalid properties in {path}: {exc}") from exc
        log_debug("source_parsed", source="file", path=path, keys=len(entries))
        return PropertySource(entries, name="file", path=path)

    def _read(self, path: str) -> str:
        if not self.environment.exists(path):
            raise NotFound(f"Configuration file not found: {path}")
        try:
            text = self.environment.read_text(path, self.encoding)
        except UnicodeDecodeError as exc:
            log_error("source_invalid", source="file", path=path, error=str(exc))
            raise InvalidFormat(f"Cannot decode {path} as {self.encoding}: {exc}") from exc
        except OSError as exc:
            raise NotFound(f"Configuration file cannot be read: {path}") from exc
        log_debug("properties_file_read", source="file", path=path, size=len(text))
        return text
