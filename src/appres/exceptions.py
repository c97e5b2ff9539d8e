"""Exception classes raised by appres.

Every fallible operation surfaces one of these to its immediate caller.
Nothing is retried or logged on the way out.
"""

from pathlib import Path
from typing import Iterable, Optional, Union


class AppResError(Exception):
    """Base class for all appres errors."""


class ConfigDirNotFoundError(AppResError):
    """Raised when the platform provides no per-user config directory."""

    def __init__(self, message: str = "cannot find config dir") -> None:
        super().__init__(message)


class NoParentDirectoryError(AppResError):
    """Raised when a save target resolves to a path without a parent.

    Attributes:
        path: The resolved target path.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)
        super().__init__(f"path has no parent directory: {self.path}")


class ResourceIOError(AppResError):
    """Wraps an underlying filesystem error verbatim.

    Attributes:
        path: Path the failing operation was working on, if known.
        cause: The original exception (usually an ``OSError``).
    """

    def __init__(
        self,
        message: str,
        path: Optional[Union[str, Path]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.path = Path(path) if path is not None else None
        self.cause = cause

    @property
    def errno(self) -> Optional[int]:
        """``errno`` of the wrapped ``OSError``, or ``None``."""
        return getattr(self.cause, "errno", None)

    @property
    def not_found(self) -> bool:
        """``True`` when the wrapped error is a ``FileNotFoundError``."""
        return isinstance(self.cause, FileNotFoundError)


class InvalidFormatError(AppResError):
    """Raised when a codec fails to decode or encode a value.

    Attributes:
        format: The format whose codec failed (a ``Format`` member).
        line: 1-based line reported by the parser, if any.
        column: 1-based column reported by the parser, if any.
        position: Character offset reported by the parser, if any.
    """

    def __init__(
        self,
        message: str,
        format: object,
        line: Optional[int] = None,
        column: Optional[int] = None,
        position: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.format = format
        self.line = line
        self.column = column
        self.position = position


class CodecNotAvailableError(AppResError):
    """Raised when no codec is registered for a requested format."""

    def __init__(self, format: object, available: Iterable[object] = ()) -> None:
        self.format = format
        self.available = tuple(available)
        names = ", ".join(str(f) for f in self.available) or "none"
        super().__init__(
            f"no codec registered for format '{format}' (available: {names})"
        )
