"""ResourceStore: load and save files under an application's base directory.

A store holds nothing but its base path and its codec table. Each
operation opens, reads or writes, and closes within the call, so a store
can be shared freely between threads.

Example::

    from pydantic import BaseModel

    from appres import ResourceStore

    class Config(BaseModel):
        stuff: str

    resources = ResourceStore.relative_to_executable("assets")
    config = resources.load_json("config.json", Config)
    resources.save_json("config.json", config, pretty=True)
"""

from pathlib import Path
from typing import TYPE_CHECKING, Any, Iterable, Optional, Union

from appres import paths
from appres.exceptions import CodecNotAvailableError
from appres.formats import DEFAULT_CODECS, Format, FormatCodec, codec_table
from appres.utils import fs

if TYPE_CHECKING:
    from appres.config import StoreSettings

PathLike = Union[str, Path]


class ResourceStore:
    """Handle bound to a base directory.

    Args:
        path: Base directory; relative paths are kept relative.
        codecs: Codecs this store can load and save with. Defaults to
            JSON, TOML and YAML. Asking for any other format raises
            ``CodecNotAvailableError``.
    """

    def __init__(
        self,
        path: PathLike,
        codecs: Optional[Iterable[FormatCodec]] = None,
    ) -> None:
        self._base_path = Path(path)
        self._codecs = codec_table(DEFAULT_CODECS if codecs is None else codecs)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def at(
        cls, path: PathLike, codecs: Optional[Iterable[FormatCodec]] = None
    ) -> "ResourceStore":
        """Wrap *path*. Performs no I/O and never fails."""
        return cls(path, codecs)

    @classmethod
    def relative_to_executable(
        cls,
        subdir: Optional[PathLike] = None,
        codecs: Optional[Iterable[FormatCodec]] = None,
    ) -> "ResourceStore":
        """Store rooted at the executable's directory (or *subdir* of it).

        Raises:
            ResourceIOError: If the executable location is unavailable.
        """
        base = paths.executable_dir()
        if subdir is not None:
            base = paths.join(base, subdir)
        return cls(base, codecs)

    @classmethod
    def relative_to_config(
        cls,
        subdir: Optional[PathLike] = None,
        codecs: Optional[Iterable[FormatCodec]] = None,
    ) -> "ResourceStore":
        """Store rooted at the user config directory (or *subdir* of it).

        Raises:
            ConfigDirNotFoundError: If the platform has no config directory.
        """
        base = paths.config_dir()
        if subdir is not None:
            base = paths.join(base, subdir)
        return cls(base, codecs)

    @classmethod
    def for_app(
        cls, app_name: str, codecs: Optional[Iterable[FormatCodec]] = None
    ) -> "ResourceStore":
        """Shorthand for ``relative_to_config(app_name)``."""
        return cls.relative_to_config(app_name, codecs)

    @classmethod
    def from_settings(
        cls, settings: Optional["StoreSettings"] = None
    ) -> "ResourceStore":
        """Build a store from ``StoreSettings``.

        When *settings* is omitted they are loaded with
        ``appres.config.load_settings()`` (environment and pyproject.toml).
        """
        from appres.config import build_codecs, load_settings

        if settings is None:
            settings = load_settings()

        codecs = build_codecs(settings)
        if settings.location == "path":
            base = Path(settings.path or "")
            if settings.subdir is not None:
                base = paths.join(base, settings.subdir)
            return cls(base, codecs)
        if settings.location == "executable":
            return cls.relative_to_executable(settings.subdir, codecs)
        return cls.relative_to_config(settings.subdir, codecs)

    # ------------------------------------------------------------------
    # Paths and existence checks
    # ------------------------------------------------------------------

    @property
    def base_path(self) -> Path:
        return self._base_path

    @property
    def formats(self) -> tuple[Format, ...]:
        """Formats this store has codecs for."""
        return tuple(self._codecs)

    def resolved_path(self, relative_path: PathLike) -> Path:
        """Join *relative_path* onto the base path. No I/O."""
        return paths.join(self._base_path, relative_path)

    def exists(self, relative_path: PathLike) -> bool:
        """Return whether the path exists; ``False`` on any I/O error."""
        return fs.path_exists(self.resolved_path(relative_path))

    def is_dir(self, relative_path: PathLike) -> bool:
        """Return whether the path is a directory; ``False`` on any I/O error."""
        return fs.is_directory(self.resolved_path(relative_path))

    # ------------------------------------------------------------------
    # Raw content
    # ------------------------------------------------------------------

    def load_text(self, relative_path: PathLike) -> str:
        """Read the file as UTF-8 text.

        Raises:
            ResourceIOError: If the file is missing, unreadable or not UTF-8.
        """
        return fs.read_text(self.resolved_path(relative_path))

    def load_bytes(self, relative_path: PathLike) -> bytes:
        """Read the file's raw bytes.

        Raises:
            ResourceIOError: If the file is missing or unreadable.
        """
        return fs.read_bytes(self.resolved_path(relative_path))

    def save_bytes(self, relative_path: PathLike, content: Union[bytes, str]) -> None:
        """Write *content*, creating the parent directory first.

        An existing file is truncated. ``str`` content is encoded as UTF-8.
        The write is not atomic; an interrupted write can leave a partial
        file behind.

        Raises:
            NoParentDirectoryError: If the resolved path has no parent.
            ResourceIOError: If the directory or file cannot be written.
        """
        fs.write_bytes(self.resolved_path(relative_path), content)

    def save_text(self, relative_path: PathLike, text: str) -> None:
        """Write *text* as UTF-8. See ``save_bytes``."""
        self.save_bytes(relative_path, text.encode("utf-8"))

    # ------------------------------------------------------------------
    # Structured content
    # ------------------------------------------------------------------

    def codec(self, fmt: Union[Format, str]) -> FormatCodec:
        """Return this store's codec for *fmt*.

        Raises:
            CodecNotAvailableError: If the store was built without it.
        """
        try:
            key = Format(fmt.lower() if isinstance(fmt, str) else fmt)
        except ValueError:
            raise CodecNotAvailableError(fmt, self._codecs) from None
        if key not in self._codecs:
            raise CodecNotAvailableError(key, self._codecs)
        return self._codecs[key]

    def load(
        self,
        fmt: Union[Format, str],
        relative_path: PathLike,
        type_: Optional[Any] = None,
    ) -> Any:
        """Read *relative_path* and decode it with the *fmt* codec."""
        return self.codec(fmt).load_from_store(self, relative_path, type_)

    def save(
        self,
        fmt: Union[Format, str],
        relative_path: PathLike,
        value: Any,
        pretty: bool = False,
    ) -> None:
        """Encode *value* with the *fmt* codec and write it."""
        self.codec(fmt).save_to_store(self, relative_path, value, pretty=pretty)

    def load_json(self, relative_path: PathLike, type_: Optional[Any] = None) -> Any:
        return self.load(Format.JSON, relative_path, type_)

    def save_json(
        self, relative_path: PathLike, value: Any, pretty: bool = False
    ) -> None:
        self.save(Format.JSON, relative_path, value, pretty=pretty)

    def load_toml(self, relative_path: PathLike, type_: Optional[Any] = None) -> Any:
        return self.load(Format.TOML, relative_path, type_)

    def save_toml(self, relative_path: PathLike, value: Any) -> None:
        self.save(Format.TOML, relative_path, value)

    def load_yaml(self, relative_path: PathLike, type_: Optional[Any] = None) -> Any:
        return self.load(Format.YAML, relative_path, type_)

    def save_yaml(self, relative_path: PathLike, value: Any) -> None:
        self.save(Format.YAML, relative_path, value)

    def __repr__(self) -> str:
        names = ", ".join(fmt.value for fmt in self._codecs)
        return f"ResourceStore({str(self._base_path)!r}, formats=[{names}])"
