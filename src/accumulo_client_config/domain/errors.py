"""Domain-level exception hierarchy.

Purpose
-------
Expose the stable error taxonomy shared by adapters, the composition root, and
consuming applications. The hierarchy lives in the domain layer so outer
layers may depend on it without the domain importing anything back.

Contents
--------
* :class:`ConfigError` – umbrella base class for all client configuration
  issues.
* :class:`InvalidFormat` – malformed properties content in a file or blob.
* :class:`NotFound` – a named configuration file does not exist or cannot be
  read.
* :class:`InvalidArgument` – a caller supplied a missing or unusable argument.

System Role
-----------
Adapters raise :class:`NotFound` and :class:`InvalidFormat`; the composition
root decides whether absence is fatal (explicit override file) or skipped
(search path entry). Callers catch :class:`ConfigError` to handle all library
failures uniformly.
"""

from __future__ import annotations


class ConfigError(Exception):
    """Base type for all exceptions emitted by ``accumulo_client_config``.

    Why
    ----
    Provide a single catch-all type for consumers that do not need fine-grained
    handling.
    """


class InvalidFormat(ConfigError):
    """Raised when properties text cannot be parsed.

    Why
    ----
    Distinguish between missing files and malformed content. Messages carry the
    offending path or line number.
    """


class NotFound(ConfigError):
    """Represents a configuration file that does not exist or is unreadable.

    Why
    ----
    Explicit override files must exist; search path entries may be absent. The
    composition root treats this exception accordingly.
    """


class InvalidArgument(ConfigError, ValueError):
    """Raised when a required argument is ``None`` or a blob cannot be decoded.

    Why
    ----
    Builder methods validate their inputs before touching the overlay so a
    rejected call leaves the configuration unchanged. Subclassing
    :class:`ValueError` keeps ``except ValueError`` callers working.
    """


def require(value: object, name: str) -> None:
    """Raise :class:`InvalidArgument` when *value* is ``None``.

    Examples
    --------
    >>> require("zk1:2181", "hosts")
    >>> require(None, "hosts")
    Traceback (most recent call last):
    ...
    accumulo_client_config.domain.errors.InvalidArgument: hosts must not be None
    """

    if value is None:
        raise InvalidArgument(f"{name} must not be None")
