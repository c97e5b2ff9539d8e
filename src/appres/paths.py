"""Base directory lookup.

Pure functions with no shared state. They read process information
(the running executable, the user's home/config location) but never
modify it.
"""

import sys
from pathlib import Path
from typing import Union

from platformdirs import user_config_path

from appres.exceptions import ConfigDirNotFoundError, ResourceIOError


def executable_dir() -> Path:
    """Return the directory containing the running executable.

    For a regular interpreter this is the directory of the (resolved)
    Python binary. For a frozen application it is the application's
    own directory.

    Raises:
        ResourceIOError: If the interpreter does not report its location.
    """
    executable = sys.executable
    if not executable:
        raise ResourceIOError("cannot determine the current executable path")

    try:
        return Path(executable).resolve().parent
    except OSError as err:
        raise ResourceIOError(str(err), path=executable, cause=err) from err


def config_dir() -> Path:
    """Return the platform's per-user configuration directory.

    ``~/.config`` (or ``$XDG_CONFIG_HOME``) on Linux,
    ``~/Library/Application Support`` on macOS and ``%APPDATA%`` on Windows.

    Raises:
        ConfigDirNotFoundError: If the platform provides no such directory.
    """
    try:
        path = user_config_path()
    except (RuntimeError, KeyError, OSError) as err:
        raise ConfigDirNotFoundError() from err

    if not str(path) or path == Path("."):
        raise ConfigDirNotFoundError()
    return path


def join(base: Union[str, Path], relative: Union[str, Path]) -> Path:
    """Concatenate *relative* onto *base*. No I/O, no existence check."""
    return Path(base) / relative
