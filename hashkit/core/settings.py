"""
Pydantic Settings for hashkit configuration.

Provides settings loading from TOML files, environment variables, and defaults.
Only the CLI consumes these settings; the hashing API itself takes none.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

try:
    import tomllib
except ImportError:
    import tomli as tomllib

from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from ..services.logging import get_logger
from .exceptions import ConfigFileError
from .models.config import HashConfig, LoggingConfig

CONFIG_FILE_NAME = ".hashkit.toml"


def _tool_table(data: dict[str, Any]) -> Any:
    """Return the [tool.hashkit] value of a parsed pyproject.toml, or None."""
    tool = data.get("tool")
    if not isinstance(tool, dict):
        return None
    return tool.get("hashkit")


def find_config_file(start_dir: str | None = None) -> Path | None:
    """
    Find .hashkit.toml by walking up from start_dir (or cwd).

    A pyproject.toml with a [tool.hashkit] table also counts.

    Returns:
        Path to config file, or None if not found.
    """
    start = Path(start_dir) if start_dir else Path.cwd()

    for parent in [start, *list(start.parents)]:
        config_path = parent / CONFIG_FILE_NAME
        if config_path.exists():
            return config_path

        pyproject = parent / "pyproject.toml"
        if pyproject.exists():
            try:
                with open(pyproject, "rb") as f:
                    data = tomllib.load(f)
                if isinstance(_tool_table(data), dict):
                    return pyproject
            except tomllib.TOMLDecodeError as e:
                get_logger().debug("Failed to parse pyproject.toml at %s: %s", pyproject, e)
            except OSError as e:
                get_logger().debug("Failed to read pyproject.toml at %s: %s", pyproject, e)

    return None


class TomlConfigSource(PydanticBaseSettingsSource):
    """Settings source that loads from a TOML config file.

    Parse and read errors do not abort loading; they are logged and kept
    in ``config_error`` so the CLI can report them.
    """

    def __init__(
        self,
        settings_cls: type[BaseSettings],
        config_path: Path | None = None,
        start_dir: str | None = None,
    ):
        super().__init__(settings_cls)
        self._config_path = config_path
        self._start_dir = start_dir
        self._data: dict[str, Any] | None = None
        self.config_file: str | None = None
        self.config_error: str | None = None

    def _load_toml(self) -> dict[str, Any]:
        """Load and cache TOML data."""
        if self._data is not None:
            return self._data

        self._data = {}

        path = self._config_path
        if path is None:
            path = find_config_file(self._start_dir)

        if path is None:
            return self._data

        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)

            if path.name == "pyproject.toml":
                data = _tool_table(data)
                if data is None:
                    data = {}
                elif not isinstance(data, dict):
                    get_logger().warning("Ignoring %s: [tool.hashkit] is not a table", path)
                    self.config_error = "[tool.hashkit] must be a table"
                    return self._data

            self._data = data
            self.config_file = str(path)

        except tomllib.TOMLDecodeError as e:
            get_logger().warning("Failed to parse config file %s: %s", path, e)
            self.config_error = f"Failed to parse config file: {e}"
        except OSError as e:
            get_logger().warning("Failed to read config file %s: %s", path, e)
            self.config_error = f"Failed to read config file: {e}"

        return self._data

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Get field value from TOML data."""
        data = self._load_toml()
        return data.get(field_name), field_name, False

    def __call__(self) -> dict[str, Any]:
        """Return all TOML data for settings initialization."""
        return self._load_toml()


class HashkitSettings(BaseSettings):
    """hashkit configuration settings with TOML and environment variable support.

    Priority (highest to lowest):
    1. Explicit init values
    2. Environment variables (HASHKIT_<section>__<field>)
    3. TOML config file (.hashkit.toml or pyproject.toml [tool.hashkit])
    4. Model defaults
    """

    model_config = SettingsConfigDict(
        env_prefix="HASHKIT_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    hash: HashConfig = HashConfig()
    logging: LoggingConfig = LoggingConfig()

    # Internal fields (not from config)
    _config_file: str | None = None
    _config_error: str | None = None

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert the TOML source below environment variables.

        The source is prepared by load_settings() through a module-level
        variable since this hook cannot receive arguments.
        """
        toml_source = _current_toml_source or TomlConfigSource(settings_cls)
        return (
            init_settings,
            env_settings,
            toml_source,
        )

    @property
    def config_file(self) -> str | None:
        """Path of the config file that was loaded, if any."""
        return self._config_file

    @property
    def config_error(self) -> str | None:
        """Error encountered while loading the config file, if any."""
        return self._config_error

    def to_dict(self) -> dict[str, Any]:
        """Convert settings to a plain dict."""
        result: dict[str, Any] = {
            "hash": self.hash.model_dump(),
            "logging": self.logging.model_dump(),
        }
        if self._config_file:
            result["_config_file"] = self._config_file
        if self._config_error:
            result["_config_error"] = self._config_error
        return result


# Module-level variable for passing to settings_customise_sources
_current_toml_source: TomlConfigSource | None = None


def load_settings(
    config_path: Path | None = None,
    start_dir: str | None = None,
    **overrides: Any,
) -> HashkitSettings:
    """Load hashkit settings from config file and environment.

    Args:
        config_path: Explicit path to config file
        start_dir: Directory to start searching from (if config_path not given)
        **overrides: Explicit values, highest priority

    Returns:
        HashkitSettings instance with all sources merged

    Raises:
        ConfigFileError: If config_path is given but does not exist
    """
    global _current_toml_source

    if config_path is not None and not Path(config_path).is_file():
        raise ConfigFileError("Config file not found", file_path=str(config_path))

    toml_source = TomlConfigSource(
        HashkitSettings,
        config_path=Path(config_path) if config_path is not None else None,
        start_dir=start_dir,
    )
    _current_toml_source = toml_source

    try:
        settings = HashkitSettings(**overrides)
        settings._config_file = toml_source.config_file
        settings._config_error = toml_source.config_error
        return settings
    finally:
        _current_toml_source = None
