from dotenv import load_dotenv
from dataclasses import dataclass
from pathlib import Path
import json
import os

from seocheck import __version__

load_dotenv()  # Loads variables from .env file

DEFAULT_USER_AGENT = f"seocheck/{__version__}"


@dataclass
class Config:
    """Configuration for the site checker."""
    user_agent: str = DEFAULT_USER_AGENT
    timeout: int = 30
    max_link_workers: int = 10
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables.

        Returns:
            Config: Configuration instance with values from environment
        """
        return cls(
            user_agent=os.getenv("USER_AGENT", DEFAULT_USER_AGENT),
            timeout=int(os.getenv("TIMEOUT", "30")),
            max_link_workers=int(os.getenv("MAX_CONCURRENT_REQUESTS", "10")),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )


@dataclass
class LoadTimeThresholds:
    """Upper bounds (exclusive, milliseconds) for the load time bands."""

    good_ms: int = 2000  # Below this is Good / grade A
    moderate_ms: int = 4000  # Below this is Moderate / grade B, else Poor / C

    @classmethod
    def from_env(cls) -> "LoadTimeThresholds":
        """Load thresholds from environment variables.

        Environment variables should be prefixed with SEOCHECK_THRESHOLD_
        e.g., SEOCHECK_THRESHOLD_GOOD_MS=1500

        Returns:
            LoadTimeThresholds with values from environment
        """
        thresholds = cls()
        prefix = "SEOCHECK_THRESHOLD_"

        for field_name in thresholds.__dataclass_fields__:
            env_value = os.getenv(f"{prefix}{field_name.upper()}")

            if env_value is not None:
                try:
                    setattr(thresholds, field_name, int(env_value))
                except ValueError:
                    pass  # Keep default if conversion fails

        return thresholds

    @classmethod
    def from_file(cls, path: str) -> "LoadTimeThresholds":
        """Load thresholds from a JSON configuration file.

        Args:
            path: Path to JSON configuration file

        Returns:
            LoadTimeThresholds with values from file
        """
        thresholds = cls()
        file_path = Path(path)

        if not file_path.exists():
            return thresholds

        with open(file_path, 'r') as f:
            config = json.load(f)

        threshold_config = config.get('thresholds', config)

        for field_name in thresholds.__dataclass_fields__:
            if field_name in threshold_config:
                setattr(thresholds, field_name, int(threshold_config[field_name]))

        return thresholds

    def to_dict(self) -> dict:
        """Convert thresholds to dictionary."""
        return {
            field_name: getattr(self, field_name)
            for field_name in self.__dataclass_fields__
        }


# Global default thresholds instance
default_thresholds = LoadTimeThresholds()
