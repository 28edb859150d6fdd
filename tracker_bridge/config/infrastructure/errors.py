"""Error types raised by config infrastructure."""

from pathlib import Path

from tracker_bridge.config.infrastructure.connection_env import EnvReference
from tracker_bridge.core.errors import TrackerBridgeError


class MissingEnvVarsError(TrackerBridgeError):
    """Raised when connection settings reference unset environment variables."""

    def __init__(self, references: list[EnvReference]) -> None:
        self.references = references
        self.missing_vars = sorted({ref.var_name for ref in references})
        details = ", ".join(
            f"{ref.var_name} ({ref.config_path})"
            for ref in sorted(references, key=lambda ref: ref.var_name)
        )
        super().__init__(
            f"Failed to load config: missing environment variables: {details}"
        )


class ConfigValidationError(TrackerBridgeError):
    """Raised when the loaded config does not match the schema."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to validate config: {reason}")


class ConfigLoadError(TrackerBridgeError):
    """Raised when the config file cannot be opened or parsed."""

    def __init__(self, path: Path, reason: str = "file not found") -> None:
        self.path = path
        super().__init__(f"Failed to load config: {reason}: {path}")
