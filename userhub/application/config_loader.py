"""
Configuration Loader - Handles IO operations for configuration management.

This module is responsible for loading and saving configuration from/to
various sources (YAML files, environment variables, .env files) while keeping
the ApplicationConfig class focused on data representation and validation.
"""

import os

import yaml
from dotenv import load_dotenv

from userhub.application.config import (
    ApplicationConfig,
    DatabaseConfig,
    Environment,
    LoggingConfig,
    PersistenceBackend,
    PersistenceConfig,
)
from userhub.application.interfaces.exceptions import ConfigurationError


class ConfigLoader:
    """Handles loading and saving of configuration from various sources."""

    @classmethod
    def from_env(cls, dotenv_path: str | None = None) -> ApplicationConfig:
        """
        Create configuration from environment variables.

        Values from a ``.env`` file are loaded first without overriding
        variables already set in the process environment.

        Args:
            dotenv_path: Optional explicit path of the .env file

        Returns:
            ApplicationConfig: Configuration loaded from environment
        """
        load_dotenv(dotenv_path)

        env_str = os.getenv("ENVIRONMENT", "development")
        try:
            environment = Environment(env_str)
        except ValueError as e:
            raise ConfigurationError(f"Invalid environment: {env_str}", e) from e

        return ApplicationConfig(
            environment=environment,
            database=DatabaseConfig.from_env(),
            persistence=PersistenceConfig.from_env(),
            logging=LoggingConfig.from_env(),
        )

    @classmethod
    def from_yaml(cls, path: str) -> ApplicationConfig:
        """
        Load configuration from YAML file.

        Args:
            path: Path to YAML configuration file

        Returns:
            ApplicationConfig: Configuration loaded from YAML file
        """
        with open(path) as f:
            data = yaml.safe_load(f)

        config = ApplicationConfig()

        # Handle empty or null YAML files
        if not data:
            return config

        try:
            if "environment" in data:
                config.environment = Environment(data["environment"])

            if "database" in data:
                db_data = data["database"]
                config.database = DatabaseConfig(
                    host=db_data.get("host", config.database.host),
                    port=int(db_data.get("port", config.database.port)),
                    database=db_data.get("database", config.database.database),
                    user=db_data.get("user", config.database.user),
                    password=db_data.get("password", config.database.password),
                    min_pool_size=int(db_data.get("min_pool_size", config.database.min_pool_size)),
                    max_pool_size=int(db_data.get("max_pool_size", config.database.max_pool_size)),
                    command_timeout=float(
                        db_data.get("command_timeout", config.database.command_timeout)
                    ),
                )

            if "persistence" in data:
                persistence_data = data["persistence"]
                config.persistence = PersistenceConfig(
                    backend=PersistenceBackend(
                        persistence_data.get("backend", config.persistence.backend.value)
                    ),
                    create_schema=persistence_data.get(
                        "create_schema", config.persistence.create_schema
                    ),
                )

            if "logging" in data:
                log_data = data["logging"]
                config.logging = LoggingConfig(
                    level=log_data.get("level", config.logging.level),
                    format=log_data.get("format", config.logging.format),
                    json=log_data.get("json", config.logging.json),
                    file=log_data.get("file", config.logging.file),
                    max_bytes=log_data.get("max_bytes", config.logging.max_bytes),
                    backup_count=log_data.get("backup_count", config.logging.backup_count),
                )
        except ValueError as e:
            raise ConfigurationError(f"Invalid configuration in {path}: {e}", e) from e

        return config

    @classmethod
    def to_yaml(cls, config: ApplicationConfig) -> str:
        """
        Convert configuration to YAML string.

        Args:
            config: ApplicationConfig instance to convert

        Returns:
            str: YAML representation of the configuration
        """
        return yaml.dump(config.to_dict(), default_flow_style=False)

    @classmethod
    def save_to_yaml(cls, config: ApplicationConfig, path: str) -> None:
        """
        Save configuration to YAML file.

        Args:
            config: ApplicationConfig instance to save
            path: Path to save the YAML file to
        """
        yaml_content = cls.to_yaml(config)
        with open(path, "w") as f:
            f.write(yaml_content)
