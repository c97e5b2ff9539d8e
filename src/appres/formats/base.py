"""Generic format codec.

A ``FormatCodec`` pairs a ``Format`` tag with a ``loads``/``dumps`` function
pair. The JSON, TOML and YAML codecs are all instances of this one class;
only the function pair and the dump options differ.
"""

import dataclasses
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any, Callable, Optional, Union

from pydantic import (
    BaseModel,
    PydanticSchemaGenerationError,
    TypeAdapter,
    ValidationError,
)
from pydantic_core import PydanticSerializationError

from appres.exceptions import InvalidFormatError
from appres.utils.fs import read_text, write_bytes

_DUMP_ERRORS = (PydanticSerializationError, PydanticSchemaGenerationError)

if TYPE_CHECKING:
    from appres.store import ResourceStore


class Format(str, Enum):
    """Supported structured file formats."""

    JSON = "json"
    TOML = "toml"
    YAML = "yaml"

    @property
    def label(self) -> str:
        return self.name

    def __str__(self) -> str:
        return self.label


@dataclass(frozen=True)
class FormatCodec:
    """Encode/decode functions for one format.

    Attributes:
        format: Format tag reported in errors.
        loads: Parses text into plain Python data. Must raise
            ``InvalidFormatError`` on malformed input.
        dumps: ``dumps(data, pretty)`` serializes plain data to text. Must
            raise ``InvalidFormatError`` on unrepresentable values.
        dump_options: Keyword arguments for ``TypeAdapter.dump_python`` when
            a pydantic model or dataclass is encoded.
        supports_pretty: Whether ``pretty=True`` changes the output.
    """

    format: Format
    loads: Callable[[str], Any]
    dumps: Callable[[Any, bool], str]
    dump_options: dict[str, Any] = field(default_factory=dict)
    supports_pretty: bool = False

    # ------------------------------------------------------------------
    # In-memory
    # ------------------------------------------------------------------

    def decode_text(self, text: str, type_: Optional[Any] = None) -> Any:
        """Decode *text*, optionally converting the result into *type_*.

        Args:
            text: Serialized content.
            type_: Target type (pydantic model, dataclass, ``dict[str, int]``,
                ...). When omitted the plain decoded structure is returned.

        Raises:
            InvalidFormatError: On malformed input or if the decoded data
                does not fit *type_*.
        """
        try:
            data = self.loads(text)
        except RecursionError as err:
            raise InvalidFormatError(
                f"input nested too deeply: {err}", self.format
            ) from err
        if type_ is None:
            return data
        try:
            return TypeAdapter(type_).validate_python(data)
        except ValidationError as err:
            raise InvalidFormatError(str(err), self.format) from err

    def decode_bytes(self, data: bytes, type_: Optional[Any] = None) -> Any:
        """Decode UTF-8 *data*. See ``decode_text``."""
        try:
            text = bytes(data).decode("utf-8")
        except UnicodeDecodeError as err:
            raise InvalidFormatError(
                str(err), self.format, position=err.start
            ) from err
        return self.decode_text(text, type_)

    def encode(self, value: Any) -> bytes:
        """Serialize *value* to compact UTF-8 bytes.

        Raises:
            InvalidFormatError: If *value* is not representable in the format.
        """
        return self._encode(value, pretty=False)

    def encode_pretty(self, value: Any) -> bytes:
        """Serialize *value* in the format's human-oriented layout.

        Identical to ``encode`` for formats without a pretty form.
        """
        return self._encode(value, pretty=True)

    def _encode(self, value: Any, pretty: bool) -> bytes:
        data = self._to_plain(value)
        try:
            text = self.dumps(data, pretty)
        except RecursionError as err:
            raise InvalidFormatError(
                f"value nested too deeply: {err}", self.format
            ) from err
        try:
            return text.encode("utf-8")
        except UnicodeEncodeError as err:
            raise InvalidFormatError(
                str(err), self.format, position=err.start
            ) from err

    def _to_plain(self, value: Any) -> Any:
        is_model = isinstance(value, BaseModel)
        is_dataclass = dataclasses.is_dataclass(value) and not isinstance(value, type)
        if not (is_model or is_dataclass):
            return value
        try:
            return TypeAdapter(type(value)).dump_python(value, **self.dump_options)
        except _DUMP_ERRORS as err:
            raise InvalidFormatError(str(err), self.format) from err

    # ------------------------------------------------------------------
    # Store-backed
    # ------------------------------------------------------------------

    def load_from_store(
        self,
        store: "ResourceStore",
        relative_path: Union[str, Path],
        type_: Optional[Any] = None,
    ) -> Any:
        """Read *relative_path* from *store* and decode it."""
        return self.decode_text(store.load_text(relative_path), type_)

    def save_to_store(
        self,
        store: "ResourceStore",
        relative_path: Union[str, Path],
        value: Any,
        pretty: bool = False,
    ) -> None:
        """Encode *value* and write it to *relative_path* in *store*."""
        store.save_bytes(relative_path, self._encode(value, pretty))

    # ------------------------------------------------------------------
    # Direct file access
    # ------------------------------------------------------------------

    def load_file(self, path: Union[str, Path], type_: Optional[Any] = None) -> Any:
        """Read and decode the file at *path*, bypassing any store."""
        return self.decode_text(read_text(path), type_)

    def save_file(
        self, path: Union[str, Path], value: Any, pretty: bool = False
    ) -> None:
        """Encode *value* and write it to *path*.

        Follows the same policy as ``ResourceStore.save_bytes``: the parent
        directory is created, an existing file is overwritten, and a path
        without a parent raises ``NoParentDirectoryError``.
        """
        write_bytes(path, self._encode(value, pretty))
