"""Configuration for building resource stores.

Settings are merged with the following priority order (highest to lowest):
1. Runtime Parameters (passed directly to ``load_settings``)
2. Environment Variables (prefixed with APPRES_)
3. Project Config ([tool.appres] in pyproject.toml)
4. Defaults (hardcoded fallbacks)

The core ``ResourceStore`` constructors never read any of this; only
``ResourceStore.from_settings`` does.
"""

import os
from typing import Any, Literal, Optional

from pydantic import BaseModel, Field, model_validator

from appres.formats import Format, FormatCodec, json_codec, toml_codec, yaml_codec

FormatName = Literal["json", "toml", "yaml"]


class StoreSettings(BaseModel):
    """Where a store is rooted and which codecs it carries."""

    location: Literal["config", "executable", "path"] = Field(
        default="config",
        description="Base directory kind: user config dir, executable dir, or path",
    )

    path: Optional[str] = Field(
        default=None,
        description="Base directory when location is 'path'",
    )

    subdir: Optional[str] = Field(
        default=None,
        description="Subdirectory joined onto the base directory",
    )

    formats: list[FormatName] = Field(
        default_factory=lambda: ["json", "toml", "yaml"],
        description="Formats the store can load and save",
    )

    json_indent: int = Field(
        default=2,
        ge=0,
        description="Indentation of pretty JSON output",
    )

    json_ensure_ascii: bool = Field(
        default=False,
        description="Escape non-ASCII characters in JSON output",
    )

    yaml_sort_keys: bool = Field(
        default=False,
        description="Sort mapping keys in YAML output",
    )

    model_config = {
        "extra": "forbid",
    }

    @model_validator(mode="after")
    def check_path_required(self) -> "StoreSettings":
        if self.location == "path" and not self.path:
            raise ValueError("'path' is required when location is 'path'")
        return self


def _load_from_pyproject_toml() -> dict[str, Any]:
    """Load configuration from [tool.appres] section in pyproject.toml.

    Returns:
        Dictionary with config values, or empty dict if not found.
    """
    try:
        import tomllib  # Python 3.11+
    except ImportError:
        import tomli as tomllib

    from pathlib import Path

    current_dir = Path.cwd()
    for path in [current_dir] + list(current_dir.parents):
        pyproject_path = path / "pyproject.toml"
        if pyproject_path.exists():
            try:
                with open(pyproject_path, "rb") as f:
                    data = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError):
                continue
            if "tool" in data and "appres" in data["tool"]:
                result: dict[str, Any] = dict(data["tool"]["appres"])
                return result

    return {}


def _parse_bool(value: str) -> bool:
    return value.lower() in ("true", "1", "yes", "on")


def _load_from_env() -> dict[str, Any]:
    """Load configuration from environment variables (prefixed with APPRES_).

    Returns:
        Dictionary with config values from environment.
    """
    config: dict[str, Any] = {}

    env_mapping = {
        "APPRES_LOCATION": "location",
        "APPRES_PATH": "path",
        "APPRES_SUBDIR": "subdir",
        "APPRES_FORMATS": "formats",
        "APPRES_JSON_INDENT": "json_indent",
        "APPRES_JSON_ENSURE_ASCII": "json_ensure_ascii",
        "APPRES_YAML_SORT_KEYS": "yaml_sort_keys",
    }

    for env_var, config_key in env_mapping.items():
        value = os.getenv(env_var)
        if value is None:
            continue
        if config_key == "formats":
            config[config_key] = [
                item.strip().lower() for item in value.split(",") if item.strip()
            ]
        elif config_key in ("json_ensure_ascii", "yaml_sort_keys"):
            config[config_key] = _parse_bool(value)
        else:
            # pydantic coerces json_indent
            config[config_key] = value

    return config


def load_settings(
    location: Optional[str] = None,
    path: Optional[str] = None,
    subdir: Optional[str] = None,
    formats: Optional[list[str]] = None,
    **kwargs: Any,
) -> StoreSettings:
    """Load store settings with hierarchical priority.

    Priority order (highest to lowest):
    1. Runtime Parameters (passed to this function)
    2. Environment Variables (APPRES_*)
    3. Project Config ([tool.appres] in pyproject.toml)
    4. Defaults (hardcoded in StoreSettings)

    Args:
        location: "config", "executable" or "path".
        path: Base directory for location "path".
        subdir: Subdirectory joined onto the base directory.
        formats: Format names the store should support.
        **kwargs: Additional settings (json_indent, json_ensure_ascii, ...).

    Returns:
        StoreSettings instance with merged configuration.

    Raises:
        pydantic.ValidationError: If the merged values are invalid.
    """
    default_config = StoreSettings()
    file_config = _load_from_pyproject_toml()
    env_config = _load_from_env()

    runtime_config: dict[str, Any] = {}
    if location is not None:
        runtime_config["location"] = location
    if path is not None:
        runtime_config["path"] = path
    if subdir is not None:
        runtime_config["subdir"] = subdir
    if formats is not None:
        runtime_config["formats"] = formats
    runtime_config.update(kwargs)

    merged_config = default_config.model_dump()
    merged_config.update(file_config)
    merged_config.update(env_config)
    merged_config.update(runtime_config)

    return StoreSettings(**merged_config)


def build_codecs(settings: StoreSettings) -> list[FormatCodec]:
    """Build the codecs selected by *settings*, in the order listed."""
    factories = {
        Format.JSON: lambda: json_codec(
            indent=settings.json_indent, ensure_ascii=settings.json_ensure_ascii
        ),
        Format.TOML: toml_codec,
        Format.YAML: lambda: yaml_codec(sort_keys=settings.yaml_sort_keys),
    }
    codecs: list[FormatCodec] = []
    for name in dict.fromkeys(settings.formats):
        codecs.append(factories[Format(name)]())
    return codecs
