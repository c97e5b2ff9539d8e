"""appres: locate an application's resource directory and load/save files in it.

Example::

    from appres import ResourceStore

    resources = ResourceStore.for_app("my-app")
    resources.save_json("config.json", {"stuff": "Hello World"})
    config = resources.load_json("config.json")
"""

from appres._version import __version__
from appres.config import StoreSettings, build_codecs, load_settings
from appres.exceptions import (
    AppResError,
    CodecNotAvailableError,
    ConfigDirNotFoundError,
    InvalidFormatError,
    NoParentDirectoryError,
    ResourceIOError,
)
from appres.formats import (
    JSON,
    TOML,
    YAML,
    Format,
    FormatCodec,
    get_codec,
    json_codec,
    toml_codec,
    yaml_codec,
)
from appres.formats.json_codec import (
    load_json_file,
    load_json_from_bytes,
    load_json_from_str,
    save_json_file,
)
from appres.formats.toml_codec import (
    load_toml_file,
    load_toml_from_bytes,
    load_toml_from_str,
    save_toml_file,
)
from appres.formats.yaml_codec import (
    load_yaml_file,
    load_yaml_from_bytes,
    load_yaml_from_str,
    save_yaml_file,
)
from appres.paths import config_dir, executable_dir, join
from appres.store import ResourceStore
from appres.utils.logging import setup_logging

__all__ = [
    "__version__",
    "AppResError",
    "CodecNotAvailableError",
    "ConfigDirNotFoundError",
    "Format",
    "FormatCodec",
    "InvalidFormatError",
    "JSON",
    "NoParentDirectoryError",
    "ResourceIOError",
    "ResourceStore",
    "StoreSettings",
    "TOML",
    "YAML",
    "build_codecs",
    "config_dir",
    "executable_dir",
    "get_codec",
    "join",
    "json_codec",
    "load_json_file",
    "load_json_from_bytes",
    "load_json_from_str",
    "load_settings",
    "load_toml_file",
    "load_toml_from_bytes",
    "load_toml_from_str",
    "load_yaml_file",
    "load_yaml_from_bytes",
    "load_yaml_from_str",
    "save_json_file",
    "save_toml_file",
    "save_yaml_file",
    "setup_logging",
    "toml_codec",
    "yaml_codec",
]
