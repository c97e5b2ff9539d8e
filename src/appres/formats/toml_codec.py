"""TOML codec: ``tomllib`` for reading, ``tomli_w`` for writing."""

from collections.abc import Mapping
from pathlib import Path
from typing import Any, Optional, Union

import tomli_w

try:
    import tomllib  # Python 3.11+
except ImportError:
    import tomli as tomllib

from appres.exceptions import InvalidFormatError
from appres.formats.base import Format, FormatCodec


def _loads(text: str) -> Any:
    try:
        return tomllib.loads(text)
    except tomllib.TOMLDecodeError as err:
        raise InvalidFormatError(
            str(err),
            Format.TOML,
            line=getattr(err, "lineno", None),
            column=getattr(err, "colno", None),
            position=getattr(err, "pos", None),
        ) from err


def _dumps(data: Any, pretty: bool) -> str:
    # TOML documents are always tables; there is no separate pretty layout.
    if not isinstance(data, Mapping):
        raise InvalidFormatError(
            f"top-level value must be a table, got {type(data).__name__}",
            Format.TOML,
        )
    try:
        return tomli_w.dumps(data)
    except (TypeError, ValueError) as err:
        raise InvalidFormatError(str(err), Format.TOML) from err


def toml_codec() -> FormatCodec:
    """Build a TOML codec.

    ``None`` fields of pydantic models and dataclasses are left out when
    encoding, since TOML has no null value.
    """
    return FormatCodec(
        format=Format.TOML,
        loads=_loads,
        dumps=_dumps,
        dump_options={"mode": "python", "exclude_none": True},
    )


TOML = toml_codec()


def load_toml_from_bytes(data: bytes, type_: Optional[Any] = None) -> Any:
    """Deserialize UTF-8 TOML bytes."""
    return TOML.decode_bytes(data, type_)


def load_toml_from_str(text: str, type_: Optional[Any] = None) -> Any:
    """Deserialize a TOML string.

    Example:
        >>> load_toml_from_str("stuff = 'Hello World'")
        {'stuff': 'Hello World'}
    """
    return TOML.decode_text(text, type_)


def load_toml_file(path: Union[str, Path], type_: Optional[Any] = None) -> Any:
    """Read and deserialize the TOML file at *path*."""
    return TOML.load_file(path, type_)


def save_toml_file(path: Union[str, Path], value: Any) -> None:
    """Serialize *value* as TOML and write it to *path*."""
    TOML.save_file(path, value)
