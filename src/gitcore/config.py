"""Settings for gitcore.

Values resolve from these sources, first match wins:

1. Arguments passed to ``GitcoreConfig(...)``
2. ``GITCORE_*`` environment variables (``GITCORE_EXTRA_ENV__NAME`` for
   entries of ``extra_env``)
3. The project file, ``./gitcore.yaml`` unless ``load_config`` is given one
4. The user file, ``~/.config/gitcore/config.yaml``
5. Field defaults
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, ClassVar

import yaml
from pydantic import Field, ValidationError, field_validator
from pydantic.fields import FieldInfo
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from gitcore.constants import (
    DEFAULT_LOCALE,
    DEFAULT_MAX_OUTPUT_BYTES,
    DEFAULT_NETWORK_TIMEOUT,
    DEFAULT_TIMEOUT,
)
from gitcore.exceptions import ConfigError
from gitcore.logging import get_logger

__all__ = [
    "GitcoreConfig",
    "load_config",
    "get_user_config_path",
    "PROJECT_CONFIG_NAME",
]

logger = get_logger(__name__)

PROJECT_CONFIG_NAME = "gitcore.yaml"


def _read_mapping(path: Path) -> dict[str, Any]:
    """Read a YAML mapping from *path*; a missing or empty file yields {}."""
    if not path.exists():
        return {}
    try:
        with path.open() as fh:
            data = yaml.safe_load(fh)
    except yaml.YAMLError as e:
        raise ConfigError(message=f"Invalid YAML in {path}: {e}") from e
    if data is None:
        logger.warning("config_file_empty", path=str(path))
        return {}
    if not isinstance(data, dict):
        raise ConfigError(
            message=f"Config file {path} must contain a mapping",
            value=data,
        )
    return data


class YamlFileSource(PydanticBaseSettingsSource):
    """Settings source backed by one YAML file."""

    def __init__(self, settings_cls: type[BaseSettings], path: Path) -> None:
        super().__init__(settings_cls)
        self.path = path
        self._data = _read_mapping(path)

    def get_field_value(
        self, field: FieldInfo, field_name: str
    ) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, False

    def __call__(self) -> dict[str, Any]:
        return dict(self._data)


class GitcoreConfig(BaseSettings):
    """Settings for the git execution layer.

    Attributes:
        git_executable: Name or path of the git binary.
        timeout_seconds: Timeout for local operations.
        network_timeout_seconds: Timeout for clone, fetch, pull and push.
        max_output_bytes: Per-stream output cap; exceeding it kills git.
        locale: Locale forced onto every invocation (LANG and LC_ALL).
        extra_env: Additional environment variables for every invocation.
    """

    model_config = SettingsConfigDict(
        env_prefix="GITCORE_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    #: Project YAML file; ``None`` means ``./gitcore.yaml`` at load time.
    project_config_path: ClassVar[Path | None] = None

    git_executable: str = "git"
    timeout_seconds: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    network_timeout_seconds: float = Field(default=DEFAULT_NETWORK_TIMEOUT, gt=0)
    max_output_bytes: int = Field(default=DEFAULT_MAX_OUTPUT_BYTES, ge=1024)
    locale: str = DEFAULT_LOCALE
    extra_env: dict[str, str] = Field(default_factory=dict)

    @field_validator("git_executable", "locale")
    @classmethod
    def check_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        project = cls.project_config_path or Path.cwd() / PROJECT_CONFIG_NAME
        return (
            init_settings,
            env_settings,
            YamlFileSource(settings_cls, project),
            YamlFileSource(settings_cls, get_user_config_path()),
        )


def get_user_config_path() -> Path:
    """Location of the per-user config file."""
    return Path.home() / ".config" / "gitcore" / "config.yaml"


def load_config(config_path: Path | None = None) -> GitcoreConfig:
    """Resolve settings from all sources.

    Args:
        config_path: Project config file to use instead of ``./gitcore.yaml``.

    Returns:
        The resolved GitcoreConfig.

    Raises:
        ConfigError: A file is not valid YAML or a value fails validation.
    """
    project = config_path or Path.cwd() / PROJECT_CONFIG_NAME
    if not project.exists():
        logger.debug("project_config_not_found", path=str(project))

    class _ProjectConfig(GitcoreConfig):
        project_config_path = project

    try:
        return _ProjectConfig()
    except ValidationError as e:
        error = e.errors()[0]
        raise ConfigError(
            message=f"Invalid configuration: {error['msg']}",
            field=".".join(str(part) for part in error["loc"]),
            value=error.get("input"),
        ) from e
