"""JSON codec built on the standard library ``json`` module."""

import json
from functools import partial
from pathlib import Path
from typing import Any, Optional, Union

from appres.exceptions import InvalidFormatError
from appres.formats.base import Format, FormatCodec


def _loads(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as err:
        raise InvalidFormatError(
            str(err),
            Format.JSON,
            line=err.lineno,
            column=err.colno,
            position=err.pos,
        ) from err


def _dumps(data: Any, pretty: bool, *, indent: int, ensure_ascii: bool) -> str:
    try:
        if pretty:
            return json.dumps(
                data, indent=indent, ensure_ascii=ensure_ascii, allow_nan=False
            )
        return json.dumps(
            data, separators=(",", ":"), ensure_ascii=ensure_ascii, allow_nan=False
        )
    except (TypeError, ValueError) as err:
        raise InvalidFormatError(str(err), Format.JSON) from err


def json_codec(indent: int = 2, ensure_ascii: bool = False) -> FormatCodec:
    """Build a JSON codec.

    Args:
        indent: Indentation used by the pretty form.
        ensure_ascii: Escape non-ASCII characters in the output.
    """
    return FormatCodec(
        format=Format.JSON,
        loads=_loads,
        dumps=partial(_dumps, indent=indent, ensure_ascii=ensure_ascii),
        dump_options={"mode": "json"},
        supports_pretty=True,
    )


JSON = json_codec()


def load_json_from_bytes(data: bytes, type_: Optional[Any] = None) -> Any:
    """Deserialize UTF-8 JSON bytes.

    Example:
        >>> load_json_from_bytes(b'{"stuff": "Hello World"}')
        {'stuff': 'Hello World'}
    """
    return JSON.decode_bytes(data, type_)


def load_json_from_str(text: str, type_: Optional[Any] = None) -> Any:
    """Deserialize a JSON string."""
    return JSON.decode_text(text, type_)


def load_json_file(path: Union[str, Path], type_: Optional[Any] = None) -> Any:
    """Read and deserialize the JSON file at *path*."""
    return JSON.load_file(path, type_)


def save_json_file(path: Union[str, Path], value: Any, pretty: bool = False) -> None:
    """Serialize *value* as JSON and write it to *path*.

    The parent directory is created when missing.
    """
    JSON.save_file(path, value, pretty=pretty)
