"""Client connection configuration for Accumulo style services.

The public surface re-exports the composite configuration, the property
registry, the constructors of the composition root, and the error taxonomy so
callers only ever need ``import accumulo_client_config``.
"""

from __future__ import annotations

from .core import SearchPathLoadError, default_search_path, deserialize, load_default, load_from_search_path
from .domain.config import ClientConfiguration, PropertySource, SourceInfo
from .domain.errors import ConfigError, InvalidArgument, InvalidFormat, NotFound
from .domain.properties import ClientProperty, PropertyDescriptor, PropertyType, ServerProperty, lookup_by_key
from .observability import bind_trace_id, get_logger

__all__ = [
    "ClientConfiguration",
    "ClientProperty",
    "ConfigError",
    "InvalidArgument",
    "InvalidFormat",
    "NotFound",
    "PropertyDescriptor",
    "PropertySource",
    "PropertyType",
    "SearchPathLoadError",
    "ServerProperty",
    "SourceInfo",
    "bind_trace_id",
    "default_search_path",
    "deserialize",
    "get_logger",
    "load_default",
    "load_from_search_path",
    "lookup_by_key",
]
