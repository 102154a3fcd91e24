import logging
import os
import sys
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, model_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource
from typing_extensions import Self


# =============================================================================
# Account Configuration
# =============================================================================


class AccountEntry(BaseModel):
    """A pre-registered account.

    The token is taken from `token` or, when `token_env` is set, from that
    environment variable at load time.
    """

    name: str  # Unique label, referenced by `defaults`
    server: str = "github.com"  # Parsed with ServerPath.from_string
    token: str = ""
    token_env: str | None = None

    def resolve_token(self) -> str:
        if self.token_env:
            return os.environ.get(self.token_env, "")
        return self.token


class AccountsConfig(BaseModel):
    """Accounts known at startup (nested in Config, uses env_nested_delimiter)."""

    accounts: list[AccountEntry] = []
    defaults: dict[str, str] = {}  # workspace id -> account name

    @model_validator(mode="after")
    def check_defaults_reference_accounts(self) -> Self:
        names = [entry.name for entry in self.accounts]
        duplicates = {name for name in names if names.count(name) > 1}
        if duplicates:
            raise ValueError(f"Duplicate account names: {sorted(duplicates)}")

        unknown = {name for name in self.defaults.values() if name not in names}
        if unknown:
            raise ValueError(f"Default accounts not configured: {sorted(unknown)}")
        return self


# =============================================================================
# Application Configuration
# =============================================================================


class YamlConfigSettingsSource(PydanticBaseSettingsSource):
    """Load settings from YAML file specified by VCSAUTH_CONFIG_FILE env var."""

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Get the value for a field from the YAML config."""
        yaml_data = self._load_yaml_config()
        field_value = yaml_data.get(field_name)
        return field_value, field_name, False

    def __call__(self) -> dict[str, Any]:
        """Return all settings from YAML file."""
        return self._load_yaml_config()

    def _load_yaml_config(self) -> dict[str, Any]:
        """Load config from YAML file if specified."""
        config_file = os.environ.get("VCSAUTH_CONFIG_FILE")
        if config_file:
            path = Path(config_file)
            if path.exists():
                return yaml.safe_load(path.read_text()) or {}
        return {}


class LoggingConfig(BaseModel):
    """Logging configuration (nested in Config, uses env_nested_delimiter)."""

    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"

    @property
    def file(self) -> str | None:
        """Get log file path from VCSAUTH_LOG_FILE env var."""
        return os.environ.get("VCSAUTH_LOG_FILE")


class GitHubConfig(BaseModel):
    """GitHub API client configuration."""

    connect_timeout: float = 5.0
    read_timeout: float = 10.0
    user_agent: str = "vcsauth"


class Config(BaseSettings):
    logging: LoggingConfig = LoggingConfig()
    github: GitHubConfig = GitHubConfig()
    accounts: AccountsConfig = AccountsConfig()

    model_config = {
        "env_prefix": "VCSAUTH_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_nested_delimiter": "__",  # Allows VCSAUTH_GITHUB__READ_TIMEOUT override
    }

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings sources to include YAML config.

        Priority (highest to lowest):
        1. init_settings - values passed to Config()
        2. env_settings - environment variables
        3. dotenv_settings - .env file
        4. yaml_settings - VCSAUTH_CONFIG_FILE yaml
        5. file_secret_settings - secrets from files
        """
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )


def configure_logging(config: LoggingConfig) -> None:
    """Configure Python logging based on config.

    Should be called early in application startup so all loggers pick up the
    configuration.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(config.level)

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    formatter = logging.Formatter(config.format, datefmt=config.date_format)

    if config.file:
        log_path = Path(config.file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_path)
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(config.level)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    # Reduce noise from third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)

    logging.debug("Logging configured: level=%s, file=%s", config.level, config.file)
