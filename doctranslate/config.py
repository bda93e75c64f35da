"""Configuration management for doctranslate."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .exceptions import ValidationError


DEFAULT_LANGUAGE_NAMES = {
    "en": "English",
    "ta": "Tamil",
    "si": "Sinhala",
}


@dataclass
class Config:
    """Application configuration with sensible defaults."""

    outputs_dir: Path = Path("outputs")
    max_chunk_size: int = 4500  # stays under the 5000 character request limit
    fallback_chunk_size: int = 2000
    request_delay: float = 0.5
    rate_limit_wait: float = 2.0
    max_text_length: int = 50000
    log_level: str = "INFO"
    language_names: dict[str, str] = field(
        default_factory=lambda: dict(DEFAULT_LANGUAGE_NAMES)
    )

    @classmethod
    def from_env(cls) -> 'Config':
        """Load configuration from environment variables."""
        return cls(
            outputs_dir=Path(os.getenv('DOCTRANSLATE_OUTPUTS_DIR', 'outputs')),
            max_chunk_size=int(os.getenv('DOCTRANSLATE_MAX_CHUNK_SIZE', '4500')),
            fallback_chunk_size=int(os.getenv('DOCTRANSLATE_FALLBACK_CHUNK_SIZE', '2000')),
            request_delay=float(os.getenv('DOCTRANSLATE_REQUEST_DELAY', '0.5')),
            rate_limit_wait=float(os.getenv('DOCTRANSLATE_RATE_LIMIT_WAIT', '2.0')),
            max_text_length=int(os.getenv('DOCTRANSLATE_MAX_TEXT_LENGTH', '50000')),
            log_level=os.getenv('DOCTRANSLATE_LOG_LEVEL', 'INFO'),
        )

    def validate(self) -> None:
        """Validate configuration values."""
        if self.max_chunk_size <= 0:
            raise ValidationError("max_chunk_size must be positive")

        if self.fallback_chunk_size <= 0:
            raise ValidationError("fallback_chunk_size must be positive")

        if self.fallback_chunk_size > self.max_chunk_size:
            raise ValidationError(
                f"fallback_chunk_size ({self.fallback_chunk_size}) cannot exceed "
                f"max_chunk_size ({self.max_chunk_size})"
            )

        if self.max_text_length <= 0:
            raise ValidationError("max_text_length must be positive")

        if self.request_delay < 0:
            raise ValidationError("request_delay cannot be negative")

        if self.rate_limit_wait < 0:
            raise ValidationError("rate_limit_wait cannot be negative")

        valid_log_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if self.log_level.upper() not in valid_log_levels:
            raise ValidationError(f"Invalid log_level: {self.log_level}. Must be one of: {valid_log_levels}")

    def ensure_directories(self) -> None:
        """Create necessary directories if they don't exist."""
        self.outputs_dir.mkdir(parents=True, exist_ok=True)
        (self.outputs_dir / "chunks").mkdir(parents=True, exist_ok=True)


# Global config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        config = Config.from_env()
        config.validate()
        config.ensure_directories()
        _config = config
    return _config


def set_config(config: Config) -> None:
    """Set the global configuration instance."""
    global _config
    config.validate()
    config.ensure_directories()
    _config = config


def reset_config() -> None:
    """Reset configuration to defaults (useful for testing)."""
    global _config
    _config = None
