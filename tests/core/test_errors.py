"""Tests verifying the TrackerBridgeError type hierarchy."""

from pathlib import Path

from tracker_bridge.config.infrastructure.connection_env import EnvReference
from tracker_bridge.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
    MissingEnvVarsError,
)
from tracker_bridge.core.errors import TrackerBridgeError
from tracker_bridge.core.log_config import LogConfigError
from tracker_bridge.http.domain.api_error import ApiError


class TestTrackerBridgeErrorHierarchy:
    """All tracker-bridge-specific exceptions inherit from TrackerBridgeError."""

    def test_missing_env_vars_error_is_tracker_bridge_error(self) -> None:
        error = MissingEnvVarsError(
            references=[EnvReference(config_path="api_base_url", var_name="MY_VAR")]
        )
        assert isinstance(error, TrackerBridgeError)

    def test_config_validation_error_is_tracker_bridge_error(self) -> None:
        error = ConfigValidationError(reason="bad value")
        assert isinstance(error, TrackerBridgeError)

    def test_config_load_error_is_tracker_bridge_error(self) -> None:
        error = ConfigLoadError(path=Path("/some/config.yaml"))
        assert isinstance(error, TrackerBridgeError)

    def test_log_config_error_is_tracker_bridge_error(self) -> None:
        assert isinstance(LogConfigError("bad level"), TrackerBridgeError)

    def test_api_error_is_tracker_bridge_error(self) -> None:
        assert isinstance(ApiError(status_code=500, message="boom"), TrackerBridgeError)

    def test_tracker_bridge_error_is_exception(self) -> None:
        error = TrackerBridgeError("test")
        assert isinstance(error, Exception)

    def test_retriable_defaults_to_false(self) -> None:
        assert TrackerBridgeError("test").retriable is False


class TestErrorMessages:
    """Infrastructure error messages describe the failed step."""

    def test_missing_env_vars_lists_sorted_names_with_config_paths(self) -> None:
        error = MissingEnvVarsError(
            references=[
                EnvReference(config_path="headers.X-Org-ID", var_name="B_VAR"),
                EnvReference(config_path="api_base_url", var_name="A_VAR"),
            ]
        )
        assert str(error) == (
            "Failed to load config: missing environment variables: "
            "A_VAR (api_base_url), B_VAR (headers.X-Org-ID)"
        )
        assert error.missing_vars == ["A_VAR", "B_VAR"]

    def test_config_load_error_includes_path(self) -> None:
        error = ConfigLoadError(path=Path("/etc/tracker.yaml"))
        assert "Failed to load config" in str(error)
        assert "/etc/tracker.yaml" in str(error)
