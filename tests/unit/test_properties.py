"""Property registry tests.

The registry is pure data: these checks pin the catalogue contents, the mirror
relationship with the server definitions, and the lookup contract.
"""

from __future__ import annotations

import pytest

from accumulo_client_config.domain.properties import (
    ClientProperty,
    PropertyDescriptor,
    PropertyType,
    ServerProperty,
    iter_properties,
    lookup_by_key,
)

CLIENT_ONLY = {ClientProperty.INSTANCE_NAME, ClientProperty.INSTANCE_ID}


def test_every_key_is_unique() -> None:
    keys = [prop.key for prop in ClientProperty]
    assert len(keys) == len(set(keys)) == 13


@pytest.mark.parametrize("prop", [prop for prop in ClientProperty if prop not in CLIENT_ONLY])
def test_mirrored_properties_copy_server_definition(prop: ClientProperty) -> None:
    server = prop.canonical_source
    assert isinstance(server, ServerProperty)
    assert server.name == prop.name
    assert (prop.key, prop.default_value, prop.type, prop.description) == (
        server.key,
        server.default_value,
        server.type,
        server.description,
    )


def test_client_only_properties_have_no_mirror_or_default() -> None:
    for prop in CLIENT_ONLY:
        assert prop.canonical_source is None
        assert prop.default_value is None
        assert prop.type is PropertyType.STRING


def test_lookup_by_key_finds_registered_keys() -> None:
    for prop in ClientProperty:
        assert lookup_by_key(prop.key) is prop
        assert ClientProperty.from_key(prop.key) is prop


def test_lookup_by_key_returns_none_for_unknown() -> None:
    assert lookup_by_key("instance.zookeepers") is None
    assert lookup_by_key("") is None


def test_known_wire_keys_and_defaults() -> None:
    assert ClientProperty.INSTANCE_ZK_HOST.key == "instance.zookeeper.host"
    assert ClientProperty.INSTANCE_ZK_HOST.default_value == "localhost:2181"
    assert ClientProperty.INSTANCE_ZK_TIMEOUT.default_value == "30s"
    assert ClientProperty.INSTANCE_ZK_TIMEOUT.type is PropertyType.TIMEDURATION
    assert ClientProperty.INSTANCE_RPC_SSL_ENABLED.key == "instance.rpc.ssl.enabled"
    assert ClientProperty.INSTANCE_RPC_SSL_CLIENT_AUTH.key == "instance.rpc.ssl.clientAuth"
    assert ClientProperty.RPC_SSL_KEYSTORE_TYPE.default_value == "jks"
    assert ClientProperty.RPC_USE_JSSE.default_value == "false"


def test_descriptors_are_immutable() -> None:
    descriptor = ClientProperty.INSTANCE_NAME.descriptor
    assert isinstance(descriptor, PropertyDescriptor)
    with pytest.raises(AttributeError):
        descriptor.key = "other"  # type: ignore[misc]


def test_iter_properties_follows_declaration_order() -> None:
    ordered = list(iter_properties())
    assert ordered[0] is ClientProperty.RPC_SSL_TRUSTSTORE_PATH
    assert ordered[-2:] == [ClientProperty.INSTANCE_NAME, ClientProperty.INSTANCE_ID]


def test_property_type_renders_short_name() -> None:
    assert str(PropertyType.HOSTLIST) == "host list"
    assert PropertyType.BOOLEAN.format_description.startswith("Has a value")
