#!/usr/bin/env python3
"""
Configuration Management for A2B Cash Flow

Handles environment-based configuration with defaults and validation.
Supports multiple environments (development, test, production).
"""

import logging
import os
import tempfile
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from .dates import Granularity

# Load environment variables from .env file
load_dotenv()


class Environment(Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


@dataclass
class StoreConfig:
    """Record store input settings."""

    services_file: Path


@dataclass
class AnalysisConfig:
    """Analytics and chart configuration."""

    output_dir: Path
    default_scale: Granularity = Granularity.MONTH
    chart_width: int = 12
    chart_height: int = 6
    chart_dpi: int = 150


@dataclass
class Config:
    """
    Main configuration class for the application.

    Loads configuration from environment variables with defaults
    and validation for each environment type.
    """

    environment: Environment

    # Core directories
    data_dir: Path
    output_dir: Path

    # Component configurations
    store: StoreConfig
    analysis: AnalysisConfig

    # Application settings
    debug: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_environment(cls) -> "Config":
        """Create configuration from environment variables."""
        env = Environment(os.getenv("A2B_ENV", "development"))

        if env == Environment.TEST:
            default_test_dir = Path(tempfile.gettempdir()) / "test_a2b"
            data_dir = Path(os.getenv("A2B_DATA_DIR", str(default_test_dir)))
        else:
            data_dir = Path(os.getenv("A2B_DATA_DIR", "./data")).expanduser().resolve()

        output_dir = data_dir / "cash_flow"

        for directory in [data_dir, output_dir]:
            directory.mkdir(parents=True, exist_ok=True)

        services_file = os.getenv("A2B_SERVICES_FILE")
        store = StoreConfig(
            services_file=Path(services_file).expanduser() if services_file else data_dir / "services.json",
        )

        analysis = AnalysisConfig(
            output_dir=output_dir / "charts",
            default_scale=Granularity.from_title(os.getenv("A2B_DEFAULT_SCALE", "month")),
            chart_width=int(os.getenv("CHART_WIDTH", "12")),
            chart_height=int(os.getenv("CHART_HEIGHT", "6")),
            chart_dpi=int(os.getenv("CHART_DPI", "150")),
        )

        return cls(
            environment=env,
            data_dir=data_dir,
            output_dir=output_dir,
            store=store,
            analysis=analysis,
            debug=os.getenv("DEBUG", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def validate(self) -> list:
        """Validate configuration and return list of errors."""
        errors = []

        for name, path in [
            ("data_dir", self.data_dir),
            ("output_dir", self.output_dir),
        ]:
            if not path.exists():
                errors.append(f"{name} does not exist: {path}")

        if self.analysis.chart_width <= 0 or self.analysis.chart_height <= 0:
            errors.append("Chart dimensions must be positive")
        if self.analysis.chart_dpi <= 0:
            errors.append("Chart DPI must be positive")

        if not isinstance(getattr(logging, self.log_level, None), int):
            errors.append(f"Unknown log level: {self.log_level}")

        return errors

    def setup_logging(self) -> None:
        """Configure logging based on configuration."""
        level = logging.DEBUG if self.debug else getattr(logging, self.log_level, logging.INFO)

        if self.environment == Environment.DEVELOPMENT:
            format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_str = "%(asctime)s - %(levelname)s - %(message)s"

        logging.basicConfig(level=level, format=format_str, datefmt="%Y-%m-%d %H:%M:%S")

        # Reduce noise from plotting libraries outside development
        if self.environment != Environment.DEVELOPMENT:
            logging.getLogger("matplotlib").setLevel(logging.WARNING)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a JSON-friendly dictionary."""
        result: dict[str, Any] = {}

        for field_name, field_value in self.__dict__.items():
            if hasattr(field_value, "__dict__") and not isinstance(field_value, Enum):
                result[field_name] = {name: _plain(value) for name, value in field_value.__dict__.items()}
            else:
                result[field_name] = _plain(field_value)

        return result


def _plain(value: Any) -> Any:
    if isinstance(value, Path):
        return str(value)
    if isinstance(value, Enum):
        return value.value
    return value


# Global configuration instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config.from_environment()

        errors = _config.validate()
        if errors:
            raise ValueError(f"Configuration validation failed: {'; '.join(errors)}")

        _config.setup_logging()

    return _config


def reload_config() -> Config:
    """Reload configuration from environment (useful for testing)."""
    global _config
    _config = None
    return get_config()


def get_data_dir() -> Path:
    """Get the data directory path."""
    return get_config().data_dir


def get_services_file() -> Path:
    """Get the default services input file."""
    return get_config().store.services_file
