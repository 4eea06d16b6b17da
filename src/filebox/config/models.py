"""Core data models for filebox."""

from dataclasses import dataclass, field
from pathlib import Path

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@dataclass
class ServerConfig:
    """Configuration for the file server."""

    host: str = "0.0.0.0"  # Bind address, all interfaces
    port: int = 8383  # Port number
    trusted_root: Path = field(default_factory=lambda: Path("files").absolute())  # Served tree
    log_level: str = "INFO"  # Logging level
    log_file: Path | None = None  # Log sink, stdout when unset
    quiet: bool = False  # Discard log output
    idle_timeout: int = 60  # Keep-alive timeout in seconds

    def validate(self) -> None:
        """Validate configuration values.

        The trusted root is not required to exist; requests against a
        missing root fail individually.
        """
        if not (1 <= self.port <= 65535):
            raise ValueError("Port must be 1-65535")
        if not self.trusted_root.is_absolute():
            raise ValueError(f"Trusted root must be absolute: {self.trusted_root}")
        if self.log_level.upper() not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log level: {self.log_level}")
        if self.idle_timeout <= 0:
            raise ValueError("Idle timeout must be positive")

