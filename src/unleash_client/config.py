"""
Client Configuration
====================
Configuration management for the Unleash client.

A :class:`Configuration` holds the parameters the poller, the metrics
reporter and the evaluation engine need, derives request URLs and headers
from them, and feeds custom strategies into the strategy registry.
"""

import logging
import os
import tempfile
import uuid
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from unleash_client.errors import InvalidArgumentError, MissingRequiredFieldError
from unleash_client.log import ContextTagAdapter, LoggerLike, default_logger, resolve_level
from unleash_client.strategies.base import Strategy, registry_key, supports_is_enabled
from unleash_client.strategies.registry import StrategyRegistry, get_strategy_registry

log = logging.getLogger(__name__)

INSTANCE_ID_HEADER = "UNLEASH-INSTANCEID"
APP_NAME_HEADER = "UNLEASH-APPNAME"

FEATURES_PATH = "/client/features"
METRICS_PATH = "/client/metrics"
REGISTER_PATH = "/client/register"


def _flatten(values: Iterable[Any]) -> list[Any]:
    """Flatten nested lists and tuples of strategy classes."""
    flat: list[Any] = []
    for value in values:
        if isinstance(value, (list, tuple)):
            flat.extend(_flatten(value))
        else:
            flat.append(value)
    return flat


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def _ensure_valid_options(options: dict[str, Any], known_fields: Iterable[str]) -> None:
    """Check the complex-typed options and reject unknown keys before any assignment."""
    headers = options.get("custom_http_headers")
    if headers is not None and not isinstance(headers, Mapping):
        raise InvalidArgumentError(
            "custom_http_headers must be a mapping.",
            fields=["custom_http_headers"],
        )

    strategies = options.get("custom_strategies")
    if strategies is not None and not (
        _is_sequence(strategies)
        and all(supports_is_enabled(s) for s in _flatten(strategies) if s is not None)
    ):
        raise InvalidArgumentError(
            "custom_strategies must be a list of classes that define is_enabled.",
            fields=["custom_strategies"],
        )

    unknown = sorted(set(options) - set(known_fields))
    if unknown:
        names = ", ".join(f"'{key}'" for key in unknown)
        raise InvalidArgumentError(f"unknown configuration parameter {names}", fields=unknown)


def _invalid_argument(exc: ValidationError) -> InvalidArgumentError:
    """Translate a pydantic ValidationError into the client's error type."""
    fields: list[str] = []
    problems: list[str] = []
    for error in exc.errors():
        field_name = str(error["loc"][0]) if error["loc"] else "configuration"
        if field_name not in fields:
            fields.append(field_name)
        problems.append(f"{field_name}: {error['msg']}")
    return InvalidArgumentError(f"invalid configuration ({'; '.join(problems)})", fields=fields)


class Configuration(BaseModel):
    """
    Configuration for the Unleash client.

    Attributes:
        url: Base URL of the Unleash API
        app_name: Application name reported to the server
        environment: Environment name
        instance_id: Identifier of this client instance (random UUID)
        custom_http_headers: Extra headers sent with every request
        disable_client: Skip required-field validation and all server traffic
        disable_metrics: Do not send usage metrics
        timeout: Request timeout in seconds
        retry_limit: Number of retries for failed fetches
        refresh_interval: Seconds between toggle fetches
        metrics_interval: Seconds between metrics reports
        backup_file: Path of the local toggle backup
        log_level: Level for the default logger
        logger: Logger to use (a console logger is created if omitted)
        custom_strategies: Strategy classes to register next to the built-ins
        strategy_registry: Registry the strategies are merged into
    """

    model_config = ConfigDict(
        extra="forbid",
        validate_assignment=True,
        arbitrary_types_allowed=True,
    )

    url: Optional[str] = None
    app_name: Optional[str] = None
    environment: str = "default"
    instance_id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    custom_http_headers: dict[str, str] = Field(default_factory=dict)
    disable_client: bool = False
    disable_metrics: bool = False
    timeout: int = 30
    retry_limit: int = 1
    refresh_interval: int = 15
    metrics_interval: int = 10
    backup_file: Optional[str] = None
    log_level: Union[int, str] = "warning"
    logger: Optional[LoggerLike] = None
    custom_strategies: list[Any] = Field(default_factory=list)
    strategy_registry: StrategyRegistry = Field(default_factory=get_strategy_registry)

    def __init__(self, **options: Any):
        """
        Build a configuration from keyword options.

        Raises:
            InvalidArgumentError: On unknown options or badly typed values
        """
        # None means "not supplied" for the container options
        for key in ("custom_http_headers", "custom_strategies"):
            if key in options and options[key] is None:
                del options[key]

        _ensure_valid_options(options, type(self).model_fields)
        try:
            super().__init__(**options)
        except ValidationError as exc:
            raise _invalid_argument(exc) from exc

    def __setattr__(self, name: str, value: Any) -> None:
        try:
            super().__setattr__(name, value)
        except ValidationError as exc:
            raise _invalid_argument(exc) from exc

    def model_post_init(self, __context: Any) -> None:
        if self.logger is None:
            self.logger = default_logger(self.log_level, self.instance_id)
        self.refresh_backup_file()

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: Union[int, str]) -> Union[int, str]:
        resolve_level(value)
        return value

    @field_validator("custom_strategies")
    @classmethod
    def _check_custom_strategies(cls, value: list[Any]) -> list[Any]:
        for strategy_class in _flatten(value):
            if strategy_class is not None and not supports_is_enabled(strategy_class):
                raise ValueError(f"{strategy_class!r} does not define is_enabled")
        return value

    @classmethod
    def from_env(cls, env_file: Optional[Union[str, Path]] = None, **overrides: Any) -> "Configuration":
        """
        Build a configuration from ``UNLEASH_*`` environment variables.

        Args:
            env_file: Optional dotenv file read in addition to the environment
            **overrides: Options that take precedence over the environment
        """
        settings = EnvironmentSettings(_env_file=env_file)
        options = settings.model_dump(exclude_unset=True)
        options.update(overrides)
        return cls(**options)

    @classmethod
    def from_yaml(cls, path: Union[str, Path], **overrides: Any) -> "Configuration":
        """
        Build a configuration from a YAML file holding a mapping of options.

        Raises:
            InvalidArgumentError: If the document is not a mapping or holds unknown options
        """
        with open(path) as f:
            data = yaml.safe_load(f)

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise InvalidArgumentError(f"configuration file {path} must contain a mapping")

        log.debug(f"Loaded configuration options from {path}")
        options = {str(key): value for key, value in data.items()}
        options.update(overrides)
        return cls(**options)

    def validate(self) -> None:  # type: ignore[override]
        """
        Check cross-field requirements before the client starts polling.

        Replaces pydantic's deprecated ``BaseModel.validate`` classmethod.

        Does nothing when the client is disabled.

        Raises:
            MissingRequiredFieldError: If url or app_name is missing
            InvalidArgumentError: If the header or strategy containers have the wrong type
        """
        if self.disable_client:
            return

        missing = [name for name in ("url", "app_name") if getattr(self, name) is None]
        if missing:
            raise MissingRequiredFieldError("URL and app_name are required parameters.", fields=missing)
        if not isinstance(self.custom_http_headers, Mapping):
            raise InvalidArgumentError(
                "custom_http_headers must be a mapping.",
                fields=["custom_http_headers"],
            )
        if not _is_sequence(self.custom_strategies):
            raise InvalidArgumentError(
                "custom_strategies must be a list.",
                fields=["custom_strategies"],
            )

    def refresh_backup_file(self) -> None:
        """Resolve the backup file path if it has not been set yet."""
        if self.backup_file is None:
            self.backup_file = os.path.join(
                tempfile.gettempdir(), f"unleash-{self.app_name or ''}-repo.json"
            )

    def metrics_interval_in_millis(self) -> int:
        return self.metrics_interval * 1_000

    def http_headers(self) -> dict[str, Optional[str]]:
        """Headers for every request; custom headers override the built-in ones."""
        headers: dict[str, Optional[str]] = {
            INSTANCE_ID_HEADER: self.instance_id,
            APP_NAME_HEADER: self.app_name,
        }
        headers.update(self.custom_http_headers)
        return headers

    def _endpoint(self, path: str) -> str:
        if self.url is None:
            raise MissingRequiredFieldError("URL is required to build request URLs.", fields=["url"])
        return self.url + path

    def fetch_toggles_url(self) -> str:
        return self._endpoint(FEATURES_PATH)

    def client_metrics_url(self) -> str:
        return self._endpoint(METRICS_PATH)

    def client_register_url(self) -> str:
        return self._endpoint(REGISTER_PATH)

    def strategies(self) -> Mapping[str, Strategy]:
        """
        Merge the custom strategies into the registry and return all strategies.

        Each custom class is instantiated on every call and registered under
        its class name with the first character lowercased, replacing any
        strategy of the same name.

        Returns:
            Read-only mapping of strategy name to strategy instance
        """
        custom = {
            registry_key(strategy_class): strategy_class()
            for strategy_class in _flatten(self.custom_strategies)
            if strategy_class is not None
        }
        return self.strategy_registry.merge(custom)

    def resolved_log_level(self) -> int:
        """Numeric stdlib logging level for ``log_level``."""
        return resolve_level(self.log_level)

    def tagged_logger(self, tag: str) -> ContextTagAdapter:
        """
        Logger that stamps ``tag`` on every record.

        Collaborators such as the poller pass their name here instead of
        relying on thread names.
        """
        return ContextTagAdapter(self.logger, {"context_tag": tag})


class EnvironmentSettings(BaseSettings):
    """Configuration options read from ``UNLEASH_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="UNLEASH_",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    url: Optional[str] = None
    app_name: Optional[str] = None
    environment: Optional[str] = None
    instance_id: Optional[str] = None
    custom_http_headers: Optional[dict[str, str]] = None
    disable_client: Optional[bool] = None
    disable_metrics: Optional[bool] = None
    timeout: Optional[int] = None
    retry_limit: Optional[int] = None
    refresh_interval: Optional[int] = None
    metrics_interval: Optional[int] = None
    backup_file: Optional[str] = None
    log_level: Optional[str] = None
