"""Composite client configuration value objects.

Purpose
-------
Present an ordered stack of property sources as one logical key/value view.
The earliest source wins on key collision, registry defaults fill the gaps, and
all in-process writes land in a single overlay that shadows every loaded file.
The module performs no I/O; file discovery and loading live in the adapters and
the composition root (:mod:`accumulo_client_config.core`).

Contents
--------
* :class:`SourceInfo` – provenance record for an effective value.
* :class:`PropertySource` – ordered string mapping with a name and optional
  path.
* :class:`ClientConfiguration` – the composite view, its fluent builder
  surface, and properties serialisation.

System Role
-----------
Every constructor in :mod:`accumulo_client_config.core` returns a
:class:`ClientConfiguration`. Session code then reads it property by property.
"""

from __future__ import annotations

import json
import uuid
from collections.abc import Iterator, Mapping, MutableMapping
from typing import Any, Iterable, TypedDict

from .errors import InvalidArgument, InvalidFormat, require
from .properties import ClientProperty, lookup_by_key
from .properties_format import format_properties, parse_properties


class SourceInfo(TypedDict):
    """Describe which source supplied an effective value.

    Attributes
    ----------
    source:
        Logical source name (``"overlay"``, ``"file"``, ``"serialized"`` or
        ``"memory"``).
    path:
        Filesystem path for file-backed sources, otherwise ``None``.
    key:
        The property key that was resolved.
    """

    source: str
    path: str | None
    key: str


class PropertySource(MutableMapping[str, str]):
    """Insertion-ordered ``str`` → ``str`` mapping with provenance.

    Examples
    --------
    >>> source = PropertySource({"instance.name": "demo"}, name="file", path="/etc/accumulo/client.conf")
    >>> source["instance.name"], source.path
    ('demo', '/etc/accumulo/client.conf')
    """

    __slots__ = ("_entries", "name", "path")

    def __init__(
        self,
        entries: Mapping[str, object] | None = None,
        *,
        name: str = "memory",
        path: str | None = None,
    ) -> None:
        self._entries: dict[str, str] = {str(key): str(value) for key, value in (entries or {}).items()}
        self.name = name
        self.path = path

    def __getitem__(self, key: str) -> str:
        return self._entries[key]

    def __setitem__(self, key: str, value: str) -> None:
        self._entries[key] = value

    def __delitem__(self, key: str) -> None:
        del self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"PropertySource(name={self.name!r}, path={self.path!r}, keys={len(self._entries)})"


PropertyRef = ClientProperty | str


class ClientConfiguration(Mapping[str, str]):
    """Ordered composition of property sources with first-wins precedence.

    Why
    ----
    Client settings come from several files (override, per-user,
    per-installation, system-wide) plus programmatic overrides. Callers need one
    view that answers "what is the value of X" without caring where it lives.

    What
    ----
    Keeps an overlay at index 0 followed by the supplied sources. Reads walk the
    stack top-down and fall back to the registry default; writes go to the
    overlay only. The mapping protocol exposes stored values (defaults are not
    stored and therefore not iterated).

    Parameters
    ----------
    *sources:
        Sources ordered from highest to lowest precedence. Plain mappings are
        wrapped in an in-memory :class:`PropertySource`.

    Examples
    --------
    >>> user = PropertySource({"instance.name": "user"}, name="file", path="~/.accumulo/config")
    >>> system = PropertySource({"instance.name": "system", "instance.zookeeper.host": "zk:2181"}, name="file")
    >>> config = ClientConfiguration(user, system)
    >>> config.get(ClientProperty.INSTANCE_NAME)
    'user'
    >>> config.get(ClientProperty.INSTANCE_ZK_TIMEOUT)
    '30s'
    >>> config.with_instance("override").get(ClientProperty.INSTANCE_NAME)
    'override'
    >>> system["instance.name"]
    'system'
    """

    def __init__(self, *sources: Mapping[str, object]) -> None:
        self._overlay = PropertySource(name="overlay")
        self._sources: list[PropertySource] = [self._overlay, *(_as_source(source) for source in sources)]

    @classmethod
    def from_sources(cls, sources: Iterable[Mapping[str, object]]) -> ClientConfiguration:
        """Build a configuration from an ordered iterable of sources."""

        return cls(*sources)

    @classmethod
    def deserialize(cls, serialized: str) -> ClientConfiguration:
        """Rebuild a configuration from the text produced by :meth:`serialize`.

        Raises
        ------
        InvalidArgument
            When *serialized* is ``None`` or not valid properties text. The
            message embeds the offending content and chains the parse error.

        Examples
        --------
        >>> original = ClientConfiguration().with_instance("demo").with_zk_hosts("zk1,zk2")
        >>> ClientConfiguration.deserialize(original.serialize()).get(ClientProperty.INSTANCE_ZK_HOST)
        'zk1,zk2'
        """

        require(serialized, "serialized")
        try:
            entries = parse_properties(serialized)
        except InvalidFormat as exc:
            raise InvalidArgument(f"Error deserializing client configuration: {serialized}") from exc
        return cls(PropertySource(entries, name="serialized"))

    @property
    def overlay(self) -> PropertySource:
        """The mutable, highest-precedence source that receives every write."""

        return self._overlay

    @property
    def sources(self) -> tuple[PropertySource, ...]:
        """All sources in precedence order, overlay first."""

        return tuple(self._sources)

    def __getitem__(self, key: str) -> str:
        for source in self._sources:
            if key in source:
                return source[key]
        raise KeyError(key)

    def __iter__(self) -> Iterator[str]:
        seen: set[str] = set()
        for source in self._sources:
            for key in source:
                if key not in seen:
                    seen.add(key)
                    yield key

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __contains__(self, key: object) -> bool:
        return any(key in source for source in self._sources)

    def __repr__(self) -> str:
        return f"ClientConfiguration(sources={self._sources!r})"

    def contains_key(self, key: PropertyRef) -> bool:
        """Return ``True`` when any source stores *key* (defaults do not count)."""

        return _key_of(key) in self

    def get(self, key: PropertyRef, default: str | None = None) -> str | None:  # type: ignore[override]
        """Return the effective value for *key*.

        Why
        ----
        Session code asks for one property at a time and expects the registry
        default when nothing is configured.

        What
        ----
        Returns the first stored value; otherwise the descriptor default of a
        registered key; otherwise *default* (``None`` unless given).

        Examples
        --------
        >>> config = ClientConfiguration({"instance.rpc.ssl.enabled": "true"})
        >>> config.get(ClientProperty.INSTANCE_RPC_SSL_ENABLED)
        'true'
        >>> config.get(ClientProperty.RPC_SSL_KEYSTORE_TYPE)
        'jks'
        >>> config.get(ClientProperty.INSTANCE_NAME) is None
        True
        """

        name = _key_of(key)
        for source in self._sources:
            if name in source:
                return source[name]
        prop = key if isinstance(key, ClientProperty) else lookup_by_key(name)
        if prop is not None and prop.default_value is not None:
            return prop.default_value
        return default

    def set_property(self, key: PropertyRef, value: object) -> None:
        """Store *value* (as ``str``) for *key* in the overlay."""

        require(key, "key")
        require(value, "value")
        self._overlay[_key_of(key)] = str(value)

    def with_(self, key: PropertyRef, value: object) -> ClientConfiguration:
        """Set *key* and return ``self`` for chaining."""

        self.set_property(key, value)
        return self

    def origin(self, key: PropertyRef) -> SourceInfo | None:
        """Return provenance for the effective value of *key*, or ``None`` when unset.

        Examples
        --------
        >>> config = ClientConfiguration(PropertySource({"instance.name": "a"}, name="file", path="/tmp/a"))
        >>> config.origin("instance.name")
        {'source': 'file', 'path': '/tmp/a', 'key': 'instance.name'}
        >>> config.origin(ClientProperty.INSTANCE_ID) is None
        True
        """

        name = _key_of(key)
        for source in self._sources:
            if name in source:
                return {"source": source.name, "path": source.path, "key": name}
        return None

    def as_dict(self) -> dict[str, str]:
        """Return the effective stored values as a fresh ``dict``."""

        return {key: self[key] for key in self}

    def to_json(self, *, indent: int | None = None) -> str:
        """Serialise the effective stored values to JSON."""

        return json.dumps(self.as_dict(), indent=indent, separators=(",", ":"), ensure_ascii=False)

    def serialize(self) -> str:
        """Flatten the composed view into a single properties string.

        Defaults are not stored and therefore not written.
        """

        return format_properties(self.as_dict())

    def with_instance(self, instance: str | uuid.UUID) -> ClientConfiguration:
        """Select the instance by name (``str``) or identifier (:class:`uuid.UUID`)."""

        require(instance, "instance")
        if isinstance(instance, uuid.UUID):
            return self.with_(ClientProperty.INSTANCE_ID, str(instance))
        return self.with_(ClientProperty.INSTANCE_NAME, instance)

    def with_zk_hosts(self, zookeepers: str) -> ClientConfiguration:
        require(zookeepers, "zookeepers")
        return self.with_(ClientProperty.INSTANCE_ZK_HOST, zookeepers)

    def with_zk_timeout(self, timeout: int) -> ClientConfiguration:
        require(timeout, "timeout")
        if isinstance(timeout, bool) or not isinstance(timeout, int):
            raise InvalidArgument("timeout must be an integer")
        return self.with_(ClientProperty.INSTANCE_ZK_TIMEOUT, str(timeout))

    def with_ssl(self, ssl_enabled: bool, use_jsse_config: bool = False) -> ClientConfiguration:
        """Toggle TLS and choose between JSSE system properties and explicit stores."""

        require(ssl_enabled, "ssl_enabled")
        require(use_jsse_config, "use_jsse_config")
        return self.with_(ClientProperty.INSTANCE_RPC_SSL_ENABLED, _bool_text(ssl_enabled)).with_(
            ClientProperty.RPC_USE_JSSE, _bool_text(use_jsse_config)
        )

    def with_truststore(
        self, path: str, password: str | None = None, store_type: str | None = None
    ) -> ClientConfiguration:
        """Point at a trust store; omitted password and store type stay untouched."""

        require(path, "path")
        self.set_property(ClientProperty.RPC_SSL_TRUSTSTORE_PATH, path)
        if password is not None:
            self.set_property(ClientProperty.RPC_SSL_TRUSTSTORE_PASSWORD, password)
        if store_type is not None:
            self.set_property(ClientProperty.RPC_SSL_TRUSTSTORE_TYPE, store_type)
        return self

    def with_keystore(
        self, path: str, password: str | None = None, store_type: str | None = None
    ) -> ClientConfiguration:
        """Point at a key store and turn on client certificate authentication.

        Presenting a key store implies mutual TLS, so
        ``instance.rpc.ssl.clientAuth`` is forced to ``"true"``.
        """

        require(path, "path")
        self.set_property(ClientProperty.INSTANCE_RPC_SSL_CLIENT_AUTH, "true")
        self.set_property(ClientProperty.RPC_SSL_KEYSTORE_PATH, path)
        if password is not None:
            self.set_property(ClientProperty.RPC_SSL_KEYSTORE_PASSWORD, password)
        if store_type is not None:
            self.set_property(ClientProperty.RPC_SSL_KEYSTORE_TYPE, store_type)
        return self


def _as_source(source: Mapping[str, Any]) -> PropertySource:
    """Return *source* unchanged when it already is a :class:`PropertySource`."""

    if isinstance(source, PropertySource):
        return source
    return PropertySource(source)


def _key_of(key: PropertyRef) -> str:
    return key.key if isinstance(key, ClientProperty) else key


def _bool_text(flag: bool) -> str:
    return "true" if flag else "false"
