"""Structured file formats.

Exposes the default ``JSON``, ``TOML`` and ``YAML`` codecs, factories for
configured variants, and a lookup helper.
"""

from typing import Iterable, Union

from appres.exceptions import CodecNotAvailableError
from appres.formats.base import Format, FormatCodec
from appres.formats.json_codec import JSON, json_codec
from appres.formats.toml_codec import TOML, toml_codec
from appres.formats.yaml_codec import YAML, yaml_codec

DEFAULT_CODECS: tuple[FormatCodec, ...] = (JSON, TOML, YAML)

__all__ = [
    "DEFAULT_CODECS",
    "Format",
    "FormatCodec",
    "JSON",
    "TOML",
    "YAML",
    "codec_table",
    "get_codec",
    "json_codec",
    "toml_codec",
    "yaml_codec",
]


def get_codec(fmt: Union[Format, str]) -> FormatCodec:
    """Return the default codec for *fmt* (``Format`` member or name).

    Raises:
        CodecNotAvailableError: If *fmt* names no known format.
    """
    table = codec_table(DEFAULT_CODECS)
    try:
        key = Format(fmt.lower() if isinstance(fmt, str) else fmt)
    except ValueError:
        raise CodecNotAvailableError(fmt, table) from None
    return table[key]


def codec_table(codecs: Iterable[FormatCodec]) -> dict[Format, FormatCodec]:
    """Index *codecs* by format. A later codec replaces an earlier one."""
    return {codec.format: codec for codec in codecs}
