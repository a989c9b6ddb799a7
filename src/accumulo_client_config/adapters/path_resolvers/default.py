"""Search path resolution for client configuration files.

Purpose
-------
Implement :class:`accumulo_client_config.application.ports.SearchPathResolver`
by encoding where client configuration files live. The adapter is the only
component that knows the fixed file names and the environment variables that
relocate them.

Contents
--------
* :class:`DefaultSearchPathResolver` – computes the ordered candidate list.
* Constants naming the fixed directories and files.

System Role
-----------
Feeds :func:`accumulo_client_config.core.load_from_search_path`. Candidates are
returned whether or not they exist; the composition root decides which ones to
skip.
"""

from __future__ import annotations

import os
from typing import Final

from ...application.ports import HostEnvironment
from ...observability import log_debug
from ..env.default import SystemEnvironment

USER_ACCUMULO_DIR_NAME: Final[str] = ".accumulo"
USER_CONF_FILENAME: Final[str] = "config"
GLOBAL_CONF_FILENAME: Final[str] = "client.conf"
SYSTEM_CONF_DIR: Final[str] = "/etc/accumulo"

CLIENT_CONF_PATH_VAR: Final[str] = "ACCUMULO_CLIENT_CONF_PATH"
CONF_DIR_VAR: Final[str] = "ACCUMULO_CONF_DIR"
HOME_VAR: Final[str] = "ACCUMULO_HOME"


class DefaultSearchPathResolver:
    """Compute candidate configuration files, highest precedence first.

    Why
    ----
    Operators relocate client configuration with environment variables; the
    precedence between those variables must stay stable across releases.

    Examples
    --------
    >>> from accumulo_client_config.testing import InMemoryEnvironment
    >>> env = InMemoryEnvironment(environ={"ACCUMULO_HOME": "/opt/acc"}, home="/home/demo")
    >>> DefaultSearchPathResolver(env).candidates()
    ['/home/demo/.accumulo/config', '/opt/acc/conf/client.conf', '/etc/accumulo/client.conf']
    >>> env = InMemoryEnvironment(environ={"ACCUMULO_CLIENT_CONF_PATH": "/a.conf:/b.conf"}, path_separator=":")
    >>> DefaultSearchPathResolver(env).candidates()
    ['/a.conf', '/b.conf']
    """

    def __init__(self, environment: HostEnvironment | None = None) -> None:
        self.environment = environment or SystemEnvironment()

    def candidates(self) -> list[str]:
        """Return the candidate list.

        ``ACCUMULO_CLIENT_CONF_PATH`` replaces the whole list when set.
        Otherwise the order is the user file, then either
        ``$ACCUMULO_CONF_DIR/client.conf`` or ``$ACCUMULO_HOME/conf/client.conf``
        (the former wins when both are set), then the system-wide file.
        """

        explicit = self.environment.getenv(CLIENT_CONF_PATH_VAR)
        if explicit is not None:
            paths = explicit.split(self.environment.path_separator)
            log_debug("search_path_resolved", source="env", path=None, variable=CLIENT_CONF_PATH_VAR, count=len(paths))
            return paths

        paths = [os.path.join(self.environment.home_dir(), USER_ACCUMULO_DIR_NAME, USER_CONF_FILENAME)]
        conf_dir = self.environment.getenv(CONF_DIR_VAR)
        accumulo_home = self.environment.getenv(HOME_VAR)
        if conf_dir is not None:
            paths.append(os.path.join(conf_dir, GLOBAL_CONF_FILENAME))
        elif accumulo_home is not None:
            paths.append(os.path.join(accumulo_home, "conf", GLOBAL_CONF_FILENAME))
        paths.append(os.path.join(SYSTEM_CONF_DIR, GLOBAL_CONF_FILENAME))
        log_debug("search_path_resolved", source="default", path=None, count=len(paths))
        return paths

