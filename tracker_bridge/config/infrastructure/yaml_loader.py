"""YAML config loader — parses, resolves connection env vars, validates, emits events."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from tracker_bridge.config.domain.config import TrackerConfig
from tracker_bridge.config.domain.observer import ConfigObserver
from tracker_bridge.config.infrastructure.connection_env import (
    find_unset_references,
    resolve_connection_env,
)
from tracker_bridge.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
    MissingEnvVarsError,
)


class YamlConfigLoader:
    """Loads and validates a TrackerConfig from a YAML file."""

    def __init__(self, observer: ConfigObserver) -> None:
        self._observer = observer

    def load(self, path: Path) -> TrackerConfig:
        """
        Load a TrackerConfig from a YAML file.

        An empty file yields the default configuration. Environment references
        are resolved in ``api_base_url`` and ``headers`` only.

        Raises:
            ConfigLoadError: if the file is missing or is not valid YAML.
            MissingEnvVarsError: listing every unset required reference at once.
            ConfigValidationError: if the schema is violated.
        """
        raw = _parse_yaml(path=path)
        _check_missing_env_vars(raw=raw)
        cfg = _build_config(resolved=resolve_connection_env(raw))
        _emit_warnings(cfg=cfg, observer=self._observer)
        self._observer.config_loaded(api_base_url=cfg.api_base_url)
        return cfg


def _parse_yaml(path: Path) -> dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
    except FileNotFoundError as exc:
        raise ConfigLoadError(path=path) from exc
    except yaml.YAMLError as exc:
        raise ConfigLoadError(path=path, reason=f"invalid YAML ({exc})") from exc
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigLoadError(path=path, reason="top-level value is not a mapping")
    return raw


def _check_missing_env_vars(raw: dict[str, Any]) -> None:
    unset = find_unset_references(raw)
    if unset:
        raise MissingEnvVarsError(unset)


def _build_config(resolved: dict[str, Any]) -> TrackerConfig:
    try:
        return TrackerConfig.model_validate(resolved)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc


def _emit_warnings(cfg: TrackerConfig, observer: ConfigObserver) -> None:
    if cfg.batch.max_concurrent_requests > cfg.batch.max_batch_size:
        observer.config_concurrency_warning(
            max_concurrent_requests=cfg.batch.max_concurrent_requests,
            max_batch_size=cfg.batch.max_batch_size,
        )
