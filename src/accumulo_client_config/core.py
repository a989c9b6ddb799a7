"""Composition root for ``accumulo_client_config``.

Purpose
-------
Provide the entry points that turn the host environment into a
:class:`ClientConfiguration`: search path discovery, explicit override files,
and deserialisation of a transported blob.

Contents
--------
* :class:`SearchPathLoadError` – a readable search path file is malformed.
* :func:`default_search_path` – ordered candidate files.
* :func:`load_from_search_path` – load readable candidates, skip the rest.
* :func:`load_default` – search path, or a single explicit override file.
* :func:`deserialize` – rebuild a configuration from :meth:`serialize` output.

System Role
-----------
This module connects the adapters (host environment, search path resolver,
properties loader) with the domain value object while emitting structured
observability signals. It is the place to adjust what is fatal and what is
skipped.
"""

from __future__ import annotations

from typing import Iterable

from .adapters.env.default import SystemEnvironment
from .adapters.file_loaders.properties import PropertiesFileLoader
from .adapters.path_resolvers.default import DefaultSearchPathResolver
from .application.ports import HostEnvironment
from .domain.config import ClientConfiguration, PropertySource
from .domain.errors import ConfigError, InvalidFormat, NotFound
from .observability import bind_trace_id, log_debug, log_info, make_event


class SearchPathLoadError(ConfigError):
    """Raised when a readable file on the search path cannot be parsed.

    Why
    ----
    A missing file simply is not a source, but a present and malformed one is a
    misconfiguration the caller has to see. The original :class:`InvalidFormat`
    is chained as ``__cause__``.
    """


def default_search_path(environment: HostEnvironment | None = None) -> list[str]:
    """Return the candidate configuration files, highest precedence first.

    Examples
    --------
    >>> from accumulo_client_config.testing import InMemoryEnvironment
    >>> env = InMemoryEnvironment(environ={"ACCUMULO_CONF_DIR": "/conf"}, home="/home/demo")
    >>> default_search_path(env)
    ['/home/demo/.accumulo/config', '/conf/client.conf', '/etc/accumulo/client.conf']
    """

    return DefaultSearchPathResolver(environment).candidates()


def load_from_search_path(
    paths: Iterable[str],
    *,
    environment: HostEnvironment | None = None,
    encoding: str = "utf-8",
) -> ClientConfiguration:
    """Load every readable file in *paths* as a source, preserving order.

    Why
    ----
    The search path lists locations that may or may not be populated on a
    given host. Absent or unreadable entries are skipped; a malformed entry
    aborts the whole call.

    Raises
    ------
    SearchPathLoadError
        When a readable file contains invalid properties text.

    Examples
    --------
    >>> from accumulo_client_config.testing import InMemoryEnvironment
    >>> env = InMemoryEnvironment(files={"/b.conf": "instance.name=b", "/c.conf": "instance.name=c"})
    >>> config = load_from_search_path(["/a.conf", "/b.conf", "/c.conf"], environment=env)
    >>> config.get("instance.name"), [source.path for source in config.sources[1:]]
    ('b', ['/b.conf', '/c.conf'])
    """

    environment = environment or SystemEnvironment()
    loader = PropertiesFileLoader(environment, encoding=encoding)
    bind_trace_id(None)

    sources: list[PropertySource] = []
    for path in paths:
        if not environment.is_readable(path):
            log_debug("source_skipped", **make_event("file", path, {"reason": "missing or unreadable"}))
            continue
        try:
            source = loader.load(path)
        except InvalidFormat as exc:
            raise SearchPathLoadError(f"Error loading client configuration from {path}: {exc}") from exc
        except NotFound as exc:
            log_debug("source_skipped", **make_event("file", path, {"reason": str(exc)}))
            continue
        log_debug("source_loaded", **make_event("file", path, {"keys": len(source)}))
        sources.append(source)

    log_info("configuration_loaded", source="search_path", path=None, total_sources=len(sources))
    return ClientConfiguration.from_sources(sources)


def load_default(
    override_path: str | None = None,
    *,
    environment: HostEnvironment | None = None,
    encoding: str = "utf-8",
) -> ClientConfiguration:
    """Return the client configuration for this host.

    Parameters
    ----------
    override_path:
        When given, the only source is this file and the search path is not
        consulted. When ``None``, :func:`default_search_path` is loaded.
    environment:
        Host environment to read variables and files from. Defaults to
        :class:`SystemEnvironment`.

    Raises
    ------
    NotFound
        When *override_path* does not exist.
    InvalidFormat
        When *override_path* is malformed.
    SearchPathLoadError
        When a search path file is malformed.
    """

    environment = environment or SystemEnvironment()
    if override_path is None:
        return load_from_search_path(default_search_path(environment), environment=environment, encoding=encoding)

    bind_trace_id(None)
    source = PropertiesFileLoader(environment, encoding=encoding).load(override_path)
    log_info("configuration_loaded", **make_event("file", override_path, {"keys": len(source)}))
    return ClientConfiguration(source)


def deserialize(serialized: str) -> ClientConfiguration:
    """Rebuild a configuration from the output of :meth:`ClientConfiguration.serialize`."""

    config = ClientConfiguration.deserialize(serialized)
    log_debug("configuration_deserialized", source="serialized", path=None, keys=len(config))
    return config


__all__ = [
    "ClientConfiguration",
    "SearchPathLoadError",
    "default_search_path",
    "deserialize",
    "load_default",
    "load_from_search_path",
]
