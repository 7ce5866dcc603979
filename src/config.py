"""Configuration Management with Pydantic.

This module implements configuration models using Pydantic for parsing and
validation of YAML/JSON configuration files with environment variable overrides.
Every setting has a default, so the library runs without a configuration file.
"""

import os
import threading
from pathlib import Path

import structlog
import yaml
from pydantic import BaseModel, Field

# Initialize logger
logger = structlog.get_logger(__name__)

# Constants
LOW_RECURSION_HEADROOM = 200
DEFAULT_CONFIG_FILES = ("relgraph.yaml", "relgraph.yml", "relgraph.json")


class TraversalConfig(BaseModel):
    """Traversal algorithm settings.

    Attributes:
        recursion_headroom: Extra interpreter frames granted on top of the
            vertex count while a recursive traversal runs
    """

    recursion_headroom: int = Field(
        default=1000,
        ge=10,
        description="Extra recursion depth reserved for recursive traversals",
    )


class LoggingConfig(BaseModel):
    """Structured logging settings.

    Attributes:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: Render JSON lines instead of colored console output
    """

    level: str = Field(
        default="INFO",
        description="Logging level",
        pattern=r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
    )
    json_logs: bool = Field(
        default=True,
        description="Use the JSON renderer",
    )

    model_config = {"str_strip_whitespace": True}


class RelationGraphConfig(BaseModel):
    """Top-level configuration combining all settings.

    Attributes:
        traversal: Traversal algorithm configuration
        logging: Logging configuration
    """

    traversal: TraversalConfig = Field(default_factory=TraversalConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "RelationGraphConfig":
        """Load configuration from a YAML (or JSON) file.

        Args:
            path: Path to the configuration file

        Returns:
            Parsed and validated RelationGraphConfig instance

        Raises:
            FileNotFoundError: If configuration file doesn't exist
            ValueError: If configuration is invalid
        """
        config_path = Path(path)

        if not config_path.exists():
            msg = f"Configuration file not found: {config_path}"
            raise FileNotFoundError(msg)

        logger.info("loading_configuration", path=str(config_path))

        try:
            with config_path.open() as f:
                config_data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.exception("yaml_parse_error", error=str(e), path=str(config_path))
            msg = f"Invalid YAML in configuration file: {e}"
            raise ValueError(msg) from e

        if config_data is None:
            config_data = {}
        if not isinstance(config_data, dict):
            msg = "Configuration file must contain a mapping"
            raise ValueError(msg)

        config = cls(**cls._apply_env_overrides(config_data))

        logger.info(
            "configuration_loaded",
            recursion_headroom=config.traversal.recursion_headroom,
            logging_level=config.logging.level,
        )

        return config

    @classmethod
    def from_env(cls) -> "RelationGraphConfig":
        """Build a configuration from defaults and environment overrides only."""
        return cls(**cls._apply_env_overrides({}))

    @classmethod
    def _apply_env_overrides(cls, config_data: dict) -> dict:
        """Apply environment variable overrides to configuration.

        Environment variables follow the pattern: RELGRAPH_<SECTION>_<KEY>
        Example: RELGRAPH_LOGGING_LEVEL, RELGRAPH_TRAVERSAL_RECURSION_HEADROOM

        Args:
            config_data: Base configuration dictionary from file

        Returns:
            Configuration dictionary with environment overrides applied
        """
        env_overrides = {
            ("traversal", "recursion_headroom"): "RELGRAPH_TRAVERSAL_RECURSION_HEADROOM",
            ("logging", "level"): "RELGRAPH_LOGGING_LEVEL",
            ("logging", "json_logs"): "RELGRAPH_LOGGING_JSON",
        }

        for path, env_var in env_overrides.items():
            value = os.environ.get(env_var)
            if value is not None:
                # Navigate to nested config section
                current = config_data
                for key in path[:-1]:
                    if key not in current:
                        current[key] = {}
                    current = current[key]

                # Convert string values to appropriate types
                final_key = path[-1]
                if env_var.endswith("_HEADROOM"):
                    value = int(value)
                elif env_var.endswith("_JSON"):
                    value = value.lower() in ("true", "1", "yes")
                else:
                    value = value.upper()

                current[final_key] = value
                logger.debug(
                    "env_override_applied",
                    env_var=env_var,
                    config_path=".".join(path),
                )

        return config_data

    def validate_config(self) -> list[str]:
        """Validate configuration and return list of warnings.

        Returns:
            List of validation warning messages (empty if no warnings)
        """
        warnings = []

        if self.traversal.recursion_headroom < LOW_RECURSION_HEADROOM:
            warnings.append(
                f"Recursion headroom is low ({self.traversal.recursion_headroom}) - "
                "recursive traversals called from deep stacks may fail",
            )

        if self.logging.level == "DEBUG":
            warnings.append("Debug logging is enabled - traversals log every root")

        return warnings


class ConfigManager:
    """Configuration manager using singleton pattern."""

    _instance: RelationGraphConfig | None = None
    _init_lock: threading.Lock = threading.Lock()

    @classmethod
    def load_config(cls, config_path: str | Path | None = None) -> RelationGraphConfig:
        """Load configuration from file.

        Args:
            config_path: Path to configuration file. If None, looks for relgraph.yaml,
                        relgraph.yml or relgraph.json in the current directory and
                        falls back to defaults when none exists.

        Returns:
            Loaded RelationGraphConfig instance

        Raises:
            FileNotFoundError: If an explicit config path does not exist
            ValueError: If config file is invalid
        """
        if config_path is None:
            for default_name in DEFAULT_CONFIG_FILES:
                default_path = Path(default_name)
                if default_path.exists():
                    config_path = default_path
                    break
            else:
                logger.debug("no_configuration_file_found", using="defaults")
                return RelationGraphConfig.from_env()

        config_path = Path(config_path)
        if not config_path.exists():
            msg = f"Configuration file not found: {config_path}"
            raise FileNotFoundError(msg)

        return RelationGraphConfig.from_yaml(config_path)

    @classmethod
    def get_config(
        cls,
        config_path: str | Path | None = None,
        reload: bool = False,
    ) -> RelationGraphConfig:
        """Get configuration instance (singleton pattern).

        Args:
            config_path: Path to configuration file. Only used on first call or when reload=True.
            reload: If True, force reload configuration from file.

        Returns:
            RelationGraphConfig instance
        """
        if cls._instance is not None and not reload:
            return cls._instance

        with cls._init_lock:
            if cls._instance is None or reload:
                cls._instance = cls.load_config(config_path)

            return cls._instance

    @classmethod
    def reset_config(cls) -> None:
        """Reset the configuration instance."""
        cls._instance = None


def load_config(config_path: str | Path | None = None) -> RelationGraphConfig:
    """Load configuration from file."""
    return ConfigManager.load_config(config_path)


def get_config(config_path: str | Path | None = None, reload: bool = False) -> RelationGraphConfig:
    """Get configuration instance (singleton pattern)."""
    return ConfigManager.get_config(config_path, reload)


def reset_config() -> None:
    """Reset the configuration instance."""
    ConfigManager.reset_config()


__all__ = [
    "LoggingConfig",
    "RelationGraphConfig",
    "TraversalConfig",
    "get_config",
    "load_config",
    "reset_config",
]
