"""Configuration loading with pydantic-settings.

Supports loading configuration from multiple sources with precedence:
1. Direct kwargs (highest priority)
2. Environment variables (TSDECL__SECTION__KEY)
3. Project config (./.tsdecl.yaml)
4. Global config (~/.config/tsdecl/config.yaml)
5. Built-in defaults (lowest priority)
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from tsdecl.config.models import (
    KindsConfig,
    LoggingConfig,
    OutputConfig,
    TsdeclConfig,
    WalkConfig,
)
from tsdecl.core.errors import ConfigError

GLOBAL_CONFIG_PATH = Path("~/.config/tsdecl/config.yaml").expanduser()
PROJECT_CONFIG_NAME = ".tsdecl.yaml"


def _load_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    try:
        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (UnicodeDecodeError, yaml.YAMLError) as e:
        raise ConfigError.parse_error(str(path), str(e)) from e
    if not isinstance(data, dict):
        raise ConfigError.parse_error(str(path), "top level must be a mapping")
    return data


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


class _YamlSource(PydanticBaseSettingsSource):
    """Settings source that reads from pre-loaded YAML config."""

    def __init__(self, settings_cls: type[BaseSettings], yaml_config: dict[str, Any]) -> None:
        super().__init__(settings_cls)
        self._yaml_config = yaml_config

    def get_field_value(
        self,
        field: Any,  # noqa: ARG002
        field_name: str,
    ) -> tuple[Any, str, bool]:
        val = self._yaml_config.get(field_name)
        return val, field_name, val is not None

    def __call__(self) -> dict[str, Any]:
        return self._yaml_config


def _make_settings_class(yaml_config: dict[str, Any]) -> type[BaseSettings]:
    """Create a Settings class with instance-based YAML source (thread-safe)."""

    class TsdeclSettings(BaseSettings):
        """Root config. Env vars: TSDECL__LOGGING__LEVEL, TSDECL__WALK__MAX_DEPTH, etc."""

        model_config = SettingsConfigDict(
            env_prefix="TSDECL__",
            env_nested_delimiter="__",
            case_sensitive=False,
        )

        logging: LoggingConfig = LoggingConfig()
        walk: WalkConfig = WalkConfig()
        kinds: KindsConfig = KindsConfig()
        output: OutputConfig = OutputConfig()

        @classmethod
        def settings_customise_sources(
            cls,
            settings_cls: type[BaseSettings],
            init_settings: PydanticBaseSettingsSource,
            env_settings: PydanticBaseSettingsSource,
            dotenv_settings: PydanticBaseSettingsSource,  # noqa: ARG003
            file_secret_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        ) -> tuple[PydanticBaseSettingsSource, ...]:
            # Precedence (first wins): init kwargs > env vars > yaml files
            return (init_settings, env_settings, _YamlSource(settings_cls, yaml_config))

    return TsdeclSettings


def config_layers(project_root: Path | None = None, config_path: Path | None = None) -> list[Path]:
    """YAML files to merge, lowest precedence first.

    An explicit ``config_path`` replaces the project file but still sits on
    top of the global file.
    """
    if config_path is not None:
        if not config_path.exists():
            raise ConfigError.file_not_found(str(config_path))
        top = config_path
    else:
        top = (project_root or Path.cwd()) / PROJECT_CONFIG_NAME
    return [GLOBAL_CONFIG_PATH, top]


def load_config(
    project_root: Path | None = None,
    config_path: Path | None = None,
    **kwargs: Any,
) -> TsdeclConfig:
    """Load config: defaults < global yaml < project yaml < env vars < kwargs.

    Args:
        project_root: Directory holding .tsdecl.yaml. Defaults to the
                      current working directory.
        config_path: Explicit config file, used instead of .tsdecl.yaml.
                     Must exist.
        **kwargs: Override values (highest precedence).

    Returns:
        Fully resolved configuration object.

    Raises:
        ConfigError: On a missing explicit file, invalid YAML syntax or
                     validation errors.
    """
    yaml_config: dict[str, Any] = {}
    for layer in config_layers(project_root, config_path):
        yaml_config = _deep_merge(yaml_config, _load_yaml(layer))

    settings_cls = _make_settings_class(yaml_config)
    try:
        settings = settings_cls(**kwargs)
    except ValidationError as e:
        err = e.errors()[0]
        field = ".".join(str(loc) for loc in err["loc"])
        raise ConfigError.invalid_value(field, err.get("input"), err["msg"]) from e
    return TsdeclConfig.model_validate(settings.model_dump())
