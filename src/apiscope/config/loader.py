"""Configuration loading with pydantic-settings.

Supports loading configuration from multiple sources with precedence:
1. Direct kwargs (highest priority)
2. Environment variables (APISCOPE__SECTION__KEY)
3. Working-root config (.apiscope/config.yaml), or an explicit config file
4. Global config (~/.config/apiscope/config.yaml)
5. Built-in defaults (lowest priority)
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from apiscope.config.models import (
    ApiScopeConfig,
    LoggingConfig,
    ReleasesConfig,
    RenderConfig,
    SearchConfig,
)
from apiscope.core.errors import ConfigError

GLOBAL_CONFIG_PATH = Path("~/.config/apiscope/config.yaml").expanduser()


def _load_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    try:
        with path.open() as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError.parse_error(str(path), str(e)) from e
    if not isinstance(data, dict):
        raise ConfigError.parse_error(str(path), "top-level value must be a mapping")
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

    class ApiScopeSettings(BaseSettings):
        """Root config. Env vars: APISCOPE__LOGGING__LEVEL, APISCOPE__SEARCH__LIMIT_DEFAULT, etc."""

        model_config = SettingsConfigDict(
            env_prefix="APISCOPE__",
            env_nested_delimiter="__",
            case_sensitive=False,
        )

        logging: LoggingConfig = LoggingConfig()
        releases: ReleasesConfig = ReleasesConfig()
        search: SearchConfig = SearchConfig()
        render: RenderConfig = RenderConfig()

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

    return ApiScopeSettings


def load_config(
    root: Path | None = None,
    *,
    config_path: Path | None = None,
    **kwargs: Any,
) -> ApiScopeConfig:
    """Load config: defaults < global yaml < root yaml < env vars < kwargs.

    Args:
        root: Working root holding .apiscope/config.yaml.
              Defaults to current working directory.
        config_path: Explicit config file used instead of the root config.
                     Must exist.
        **kwargs: Override values (highest precedence).

    Returns:
        Fully resolved configuration object.

    Raises:
        ConfigError: On missing explicit file, invalid YAML syntax or validation errors.
    """
    if config_path is not None:
        if not config_path.exists():
            raise ConfigError.file_not_found(str(config_path))
        local_config = _load_yaml(config_path)
    else:
        root = root or Path.cwd()
        local_config = _load_yaml(root / ".apiscope" / "config.yaml")

    yaml_config = _deep_merge(_load_yaml(GLOBAL_CONFIG_PATH), local_config)

    settings_cls = _make_settings_class(yaml_config)
    try:
        settings = settings_cls(**kwargs)
    except ValidationError as e:
        err = e.errors()[0]
        field = ".".join(str(loc) for loc in err["loc"])
        raise ConfigError.invalid_value(field, err.get("input"), err["msg"]) from e
    return ApiScopeConfig.model_validate(settings.model_dump())
