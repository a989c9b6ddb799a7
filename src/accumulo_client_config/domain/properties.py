"""Registry of property keys recognised by the client.

Purpose
-------
Describe every configuration key a client consults before opening a session:
its key string, default, declared type, and a human-readable description. Most
entries mirror a server-side definition verbatim so both sides agree on TLS and
ZooKeeper settings; a few (instance name and id) exist only on the client.

Contents
--------
* :class:`PropertyType` – type tags carried by descriptors.
* :class:`PropertyDescriptor` – immutable metadata record for one key.
* :class:`ServerProperty` – the server definitions the client mirrors.
* :class:`ClientProperty` – the fixed client catalogue.
* :func:`lookup_by_key` – pure lookup returning ``None`` for unknown keys.

System Role
-----------
Read by :class:`accumulo_client_config.domain.config.ClientConfiguration` to
resolve defaults and by the CLI to print the catalogue. The table is built once
at import time and never changes afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterator, Mapping


class PropertyType(Enum):
    """Type tag attached to every descriptor.

    Values are not validated against the tag; it documents the expected format
    for operators and tooling.
    """

    STRING = ("string", "An arbitrary string of characters whose format is unspecified")
    BOOLEAN = ("boolean", "Has a value of either 'true' or 'false'")
    COUNT = ("count", "A non-negative integer in the range of 0-2147483647")
    TIMEDURATION = (
        "duration",
        "A non-negative integer optionally followed by a unit of time (ms, s, m, h); seconds when omitted",
    )
    HOSTLIST = ("host list", "A comma-separated list of hostnames or IPs, each optionally followed by :port")
    PATH = ("path", "A string that represents a filesystem path; may contain environment variables")
    PORT = ("port", "An integer in the range 1024-65535, or 0 for an ephemeral port")
    MEMORY = ("memory", "A positive integer optionally followed by a unit of memory (B, K, M, G)")
    FRACTION = ("fraction/percentage", "A floating point number between 0 and 1, or a percentage")
    URI = ("uri", "A valid URI")

    def __init__(self, short_name: str, format_description: str) -> None:
        self.short_name = short_name
        self.format_description = format_description

    def __str__(self) -> str:
        return self.short_name


@dataclass(frozen=True, slots=True)
class PropertyDescriptor:
    """Static metadata for one recognised property.

    Attributes
    ----------
    key:
        Stable identifier used in properties files (``instance.name``).
    default_value:
        Value reported when no source stores the key; ``None`` when the key has
        no default.
    type:
        :class:`PropertyType` tag.
    description:
        Human-readable explanation shown by tooling.
    canonical_source:
        Server definition this descriptor was copied from, or ``None`` for
        client-only keys.
    """

    key: str
    default_value: str | None
    type: PropertyType
    description: str
    canonical_source: ServerProperty | None = None

    @classmethod
    def mirror(cls, server_property: ServerProperty) -> PropertyDescriptor:
        """Copy every field of *server_property* and remember where it came from."""

        return replace(server_property.descriptor, canonical_source=server_property)


class _DescribedProperty:
    """Accessors shared by enumerations whose values are descriptors."""

    value: PropertyDescriptor

    @property
    def descriptor(self) -> PropertyDescriptor:
        return self.value

    @property
    def key(self) -> str:
        return self.value.key

    @property
    def default_value(self) -> str | None:
        return self.value.default_value

    @property
    def type(self) -> PropertyType:
        return self.value.type

    @property
    def description(self) -> str:
        return self.value.description


class ServerProperty(_DescribedProperty, Enum):
    """Server-side definitions shared with the client.

    Only the entries the client mirrors are listed; the full server catalogue is
    owned elsewhere.
    """

    RPC_SSL_TRUSTSTORE_PATH = PropertyDescriptor(
        "rpc.javax.net.ssl.trustStore",
        "$ACCUMULO_CONF_DIR/ssl/truststore.jks",
        PropertyType.PATH,
        "Path of the truststore file for the root cert",
    )
    RPC_SSL_TRUSTSTORE_PASSWORD = PropertyDescriptor(
        "rpc.javax.net.ssl.trustStorePassword",
        "",
        PropertyType.STRING,
        "Password used to encrypt the SSL truststore. Leave blank to use no password",
    )
    RPC_SSL_TRUSTSTORE_TYPE = PropertyDescriptor(
        "rpc.javax.net.ssl.trustStoreType",
        "jks",
        PropertyType.STRING,
        "Type of SSL truststore",
    )
    RPC_SSL_KEYSTORE_PATH = PropertyDescriptor(
        "rpc.javax.net.ssl.keyStore",
        "$ACCUMULO_CONF_DIR/ssl/keystore.jks",
        PropertyType.PATH,
        "Path of the keystore file for the servers' private SSL key",
    )
    RPC_SSL_KEYSTORE_PASSWORD = PropertyDescriptor(
        "rpc.javax.net.ssl.keyStorePassword",
        "",
        PropertyType.STRING,
        "Password used to encrypt the SSL private keystore. Leave blank to use the Accumulo instance secret",
    )
    RPC_SSL_KEYSTORE_TYPE = PropertyDescriptor(
        "rpc.javax.net.ssl.keyStoreType",
        "jks",
        PropertyType.STRING,
        "Type of SSL keystore",
    )
    RPC_USE_JSSE = PropertyDescriptor(
        "rpc.useJsse",
        "false",
        PropertyType.BOOLEAN,
        "Use JSSE system properties to configure SSL rather than the rpc.javax.net.ssl.* Accumulo properties",
    )
    INSTANCE_RPC_SSL_CLIENT_AUTH = PropertyDescriptor(
        "instance.rpc.ssl.clientAuth",
        "false",
        PropertyType.BOOLEAN,
        "Require clients to present certs signed by a trusted root",
    )
    INSTANCE_RPC_SSL_ENABLED = PropertyDescriptor(
        "instance.rpc.ssl.enabled",
        "false",
        PropertyType.BOOLEAN,
        "Use SSL for socket connections from clients and among accumulo services",
    )
    INSTANCE_ZK_HOST = PropertyDescriptor(
        "instance.zookeeper.host",
        "localhost:2181",
        PropertyType.HOSTLIST,
        "Comma separated list of zookeeper servers",
    )
    INSTANCE_ZK_TIMEOUT = PropertyDescriptor(
        "instance.zookeeper.timeout",
        "30s",
        PropertyType.TIMEDURATION,
        "Zookeeper session timeout; max value when represented as milliseconds should be no larger than 2147483647",
    )


class ClientProperty(_DescribedProperty, Enum):
    """Every key recognised by the client, in catalogue order.

    Examples
    --------
    >>> ClientProperty.INSTANCE_ZK_HOST.key
    'instance.zookeeper.host'
    >>> ClientProperty.INSTANCE_ZK_HOST.canonical_source is ServerProperty.INSTANCE_ZK_HOST
    True
    >>> ClientProperty.INSTANCE_NAME.default_value is None
    True
    """

    RPC_SSL_TRUSTSTORE_PATH = PropertyDescriptor.mirror(ServerProperty.RPC_SSL_TRUSTSTORE_PATH)
    RPC_SSL_TRUSTSTORE_PASSWORD = PropertyDescriptor.mirror(ServerProperty.RPC_SSL_TRUSTSTORE_PASSWORD)
    RPC_SSL_TRUSTSTORE_TYPE = PropertyDescriptor.mirror(ServerProperty.RPC_SSL_TRUSTSTORE_TYPE)
    RPC_SSL_KEYSTORE_PATH = PropertyDescriptor.mirror(ServerProperty.RPC_SSL_KEYSTORE_PATH)
    RPC_SSL_KEYSTORE_PASSWORD = PropertyDescriptor.mirror(ServerProperty.RPC_SSL_KEYSTORE_PASSWORD)
    RPC_SSL_KEYSTORE_TYPE = PropertyDescriptor.mirror(ServerProperty.RPC_SSL_KEYSTORE_TYPE)
    RPC_USE_JSSE = PropertyDescriptor.mirror(ServerProperty.RPC_USE_JSSE)
    INSTANCE_RPC_SSL_CLIENT_AUTH = PropertyDescriptor.mirror(ServerProperty.INSTANCE_RPC_SSL_CLIENT_AUTH)
    INSTANCE_RPC_SSL_ENABLED = PropertyDescriptor.mirror(ServerProperty.INSTANCE_RPC_SSL_ENABLED)
    INSTANCE_ZK_HOST = PropertyDescriptor.mirror(ServerProperty.INSTANCE_ZK_HOST)
    INSTANCE_ZK_TIMEOUT = PropertyDescriptor.mirror(ServerProperty.INSTANCE_ZK_TIMEOUT)
    INSTANCE_NAME = PropertyDescriptor(
        "instance.name",
        None,
        PropertyType.STRING,
        "Name of Accumulo instance to connect to",
    )
    INSTANCE_ID = PropertyDescriptor(
        "instance.id",
        None,
        PropertyType.STRING,
        "UUID of Accumulo instance to connect to",
    )

    @property
    def canonical_source(self) -> ServerProperty | None:
        return self.value.canonical_source

    @classmethod
    def from_key(cls, key: str) -> ClientProperty | None:
        """Return the member registered under *key*, or ``None``."""

        return _BY_KEY.get(key)


_BY_KEY: Mapping[str, ClientProperty] = {member.key: member for member in ClientProperty}


def lookup_by_key(key: str) -> ClientProperty | None:
    """Return the :class:`ClientProperty` registered under *key*.

    Unknown keys yield ``None``; callers decide whether absence matters.

    Examples
    --------
    >>> lookup_by_key("instance.name") is ClientProperty.INSTANCE_NAME
    True
    >>> lookup_by_key("no.such.key") is None
    True
    """

    return _BY_KEY.get(key)


def iter_properties() -> Iterator[ClientProperty]:
    """Yield the catalogue in declaration order."""

    return iter(ClientProperty)
