"""YAML codec built on PyYAML's safe loader and dumper."""

from functools import partial
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from appres.exceptions import InvalidFormatError
from appres.formats.base import Format, FormatCodec


def _loads(text: str) -> Any:
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as err:
        mark = getattr(err, "problem_mark", None)
        raise InvalidFormatError(
            str(err),
            Format.YAML,
            line=mark.line + 1 if mark is not None else None,
            column=mark.column + 1 if mark is not None else None,
            position=mark.index if mark is not None else None,
        ) from err


def _dumps(data: Any, pretty: bool, *, sort_keys: bool) -> str:
    try:
        return yaml.safe_dump(
            data,
            sort_keys=sort_keys,
            allow_unicode=True,
            default_flow_style=False,
        )
    except yaml.YAMLError as err:
        raise InvalidFormatError(str(err), Format.YAML) from err


def yaml_codec(sort_keys: bool = False) -> FormatCodec:
    """Build a YAML codec producing block-style output.

    Args:
        sort_keys: Emit mapping keys sorted instead of in insertion order.
    """
    return FormatCodec(
        format=Format.YAML,
        loads=_loads,
        dumps=partial(_dumps, sort_keys=sort_keys),
        dump_options={"mode": "json"},
    )


YAML = yaml_codec()


def load_yaml_from_bytes(data: bytes, type_: Optional[Any] = None) -> Any:
    """Deserialize UTF-8 YAML bytes."""
    return YAML.decode_bytes(data, type_)


def load_yaml_from_str(text: str, type_: Optional[Any] = None) -> Any:
    """Deserialize a YAML string."""
    return YAML.decode_text(text, type_)


def load_yaml_file(path: Union[str, Path], type_: Optional[Any] = None) -> Any:
    """Read and deserialize the YAML file at *path*."""
    return YAML.load_file(path, type_)


def save_yaml_file(path: Union[str, Path], value: Any) -> None:
    """Serialize *value* as YAML and write it to *path*."""
    YAML.save_file(path, value)
