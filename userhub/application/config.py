"""
Application Configuration - Central configuration management.

This module provides configuration management for the application,
including environment variables and runtime settings.
"""

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from userhub.application.interfaces.exceptions import ConfigurationError


class Environment(Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    STAGING = "staging"
    PRODUCTION = "production"


class PersistenceBackend(Enum):
    """Where users are stored."""

    POSTGRES = "postgres"
    MEMORY = "memory"


@dataclass
class DatabaseConfig:
    """Database configuration."""

    host: str = "localhost"
    port: int = 5432
    database: str = "userhub"
    user: str = "postgres"
    password: str = ""
    min_pool_size: int = 1
    max_pool_size: int = 10
    command_timeout: float = 30.0

    @classmethod
    def from_env(cls) -> "DatabaseConfig":
        """Create configuration from environment variables."""
        return cls(
            host=os.getenv("DB_HOST", "localhost"),
            port=int(os.getenv("DB_PORT", "5432")),
            database=os.getenv("DB_NAME", "userhub"),
            user=os.getenv("DB_USER", "postgres"),
            password=os.getenv("DB_PASSWORD", ""),
            min_pool_size=int(os.getenv("DB_MIN_POOL_SIZE", "1")),
            max_pool_size=int(os.getenv("DB_MAX_POOL_SIZE", "10")),
            command_timeout=float(os.getenv("DB_COMMAND_TIMEOUT", "30.0")),
        )

    def get_connection_string(self) -> str:
        """Get PostgreSQL connection string."""
        credentials = self.user if not self.password else f"{self.user}:{self.password}"
        return f"postgresql://{credentials}@{self.host}:{self.port}/{self.database}"


@dataclass
class PersistenceConfig:
    """Persistence backend selection."""

    backend: PersistenceBackend = PersistenceBackend.POSTGRES
    create_schema: bool = False

    @classmethod
    def from_env(cls) -> "PersistenceConfig":
        """Create configuration from environment variables."""
        backend = os.getenv("PERSISTENCE_BACKEND", "postgres")
        try:
            parsed = PersistenceBackend(backend)
        except ValueError as e:
            raise ConfigurationError(f"Invalid persistence backend: {backend}", e) from e
        return cls(
            backend=parsed,
            create_schema=os.getenv("PERSISTENCE_CREATE_SCHEMA", "false").lower() == "true",
        )


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    json: bool = False
    file: str | None = None
    max_bytes: int = 10485760  # 10MB
    backup_count: int = 5

    @classmethod
    def from_env(cls) -> "LoggingConfig":
        """Create configuration from environment variables."""
        file_path = os.getenv("LOG_FILE")
        return cls(
            level=os.getenv("LOG_LEVEL", "INFO"),
            format=os.getenv("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"),
            json=os.getenv("LOG_JSON", "false").lower() == "true",
            file=file_path if file_path else None,
            max_bytes=int(os.getenv("LOG_MAX_BYTES", "10485760")),
            backup_count=int(os.getenv("LOG_BACKUP_COUNT", "5")),
        )


@dataclass
class ApplicationConfig:
    """Main application configuration."""

    environment: Environment = Environment.DEVELOPMENT
    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    persistence: PersistenceConfig = field(default_factory=PersistenceConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "environment": self.environment.value,
            "database": {
                "host": self.database.host,
                "port": self.database.port,
                "database": self.database.database,
                "user": self.database.user,
                "password": self.database.password,
                "min_pool_size": self.database.min_pool_size,
                "max_pool_size": self.database.max_pool_size,
                "command_timeout": self.database.command_timeout,
            },
            "persistence": {
                "backend": self.persistence.backend.value,
                "create_schema": self.persistence.create_schema,
            },
            "logging": {
                "level": self.logging.level,
                "format": self.logging.format,
                "json": self.logging.json,
                "file": self.logging.file,
                "max_bytes": self.logging.max_bytes,
                "backup_count": self.logging.backup_count,
            },
        }

    def validate(self) -> bool:
        """
        Validate the configuration.

        Returns:
            True if valid, raises ConfigurationError otherwise
        """
        if self.environment == Environment.PRODUCTION:
            if self.persistence.backend == PersistenceBackend.MEMORY:
                raise ConfigurationError("In-memory persistence is not allowed in production")
            if not self.database.password:
                raise ConfigurationError("Database password required for production")

        if self.database.min_pool_size < 1:
            raise ConfigurationError("Database pool must hold at least one connection")
        if self.database.max_pool_size < self.database.min_pool_size:
            raise ConfigurationError("Max pool size cannot be below min pool size")

        if self.logging.level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ConfigurationError(f"Invalid log level: {self.logging.level}")

        return True


# Global configuration singleton
_config: ApplicationConfig | None = None


def get_config() -> ApplicationConfig:
    """
    Get the application configuration singleton.

    Returns:
        ApplicationConfig: The application configuration
    """
    global _config
    if _config is None:
        from userhub.application.config_loader import ConfigLoader

        _config = ConfigLoader.from_env()
    return _config


def set_config(config: ApplicationConfig) -> None:
    """
    Set the application configuration.

    Args:
        config: The new configuration
    """
    global _config
    _config = config


def reset_config() -> None:
    """Reset the configuration singleton."""
    global _config
    _config = None
