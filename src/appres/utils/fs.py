"""Filesystem primitives shared by the store and the codecs.

Every helper opens, reads or writes, and closes within the call. ``OSError``
is re-raised as ``ResourceIOError`` with the original attached.
"""

import logging
from pathlib import Path
from typing import Union

from appres.exceptions import NoParentDirectoryError, ResourceIOError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def _io_error(err: BaseException, path: Path) -> ResourceIOError:
    return ResourceIOError(str(err), path=path, cause=err)


def read_bytes(path: PathLike) -> bytes:
    """Read the whole file at *path*.

    Raises:
        ResourceIOError: If the file cannot be read.
    """
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as err:
        raise _io_error(err, path) from err
    logger.debug(f"Read {len(data)} bytes from {path}")
    return data


def read_text(path: PathLike) -> str:
    """Read the whole file at *path* as UTF-8 text.

    Raises:
        ResourceIOError: If the file cannot be read or is not valid UTF-8.
    """
    path = Path(path)
    data = read_bytes(path)
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as err:
        raise _io_error(err, path) from err


def has_parent(path: PathLike) -> bool:
    """Return ``True`` unless *path* is a root or bare anchor."""
    path = Path(path)
    return path.parent != path


def ensure_parent_dir(path: PathLike) -> Path:
    """Create the parent directory of *path*, recursively.

    Returns:
        The parent directory.

    Raises:
        NoParentDirectoryError: If *path* has no parent segment.
        ResourceIOError: If the directory cannot be created.
    """
    path = Path(path)
    if not has_parent(path):
        raise NoParentDirectoryError(path)

    parent = path.parent
    if not is_directory(parent):
        logger.debug(f"Creating directory {parent}")
    try:
        parent.mkdir(parents=True, exist_ok=True)
    except OSError as err:
        raise _io_error(err, parent) from err
    return parent


def write_bytes(path: PathLike, data: Union[bytes, str]) -> None:
    """Write *data* to *path*, creating the parent directory first.

    An existing file is truncated. The write is not atomic.

    Raises:
        NoParentDirectoryError: If *path* has no parent segment. Nothing
            is written in that case.
        ResourceIOError: If the directory or the file cannot be written.
    """
    path = Path(path)
    if isinstance(data, str):
        data = data.encode("utf-8")

    ensure_parent_dir(path)
    try:
        path.write_bytes(data)
    except OSError as err:
        raise _io_error(err, path) from err
    logger.debug(f"Wrote {len(data)} bytes to {path}")


def path_exists(path: PathLike) -> bool:
    """Existence check that returns ``False`` on any error."""
    try:
        return Path(path).exists()
    except (OSError, ValueError):
        return False


def is_directory(path: PathLike) -> bool:
    """Directory check that returns ``False`` on any error."""
    try:
        return Path(path).is_dir()
    except (OSError, ValueError):
        return False
