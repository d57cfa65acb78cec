"""Configuration loading and validation for tubeblog."""

import os
import logging
from typing import Dict, List, Optional
from dotenv import load_dotenv
from rich.logging import RichHandler

# Load environment variables from a .env file in the working directory
load_dotenv()


def _int_env(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}")


def load_config() -> Dict:
    """Load configuration from environment variables."""
    config = {
        # Cache
        'cache_directory': os.getenv('CACHE_DIRECTORY', '.cache'),
        'cache_ttl_days': _int_env('CACHE_TTL_DAYS', 7),

        # Transcript handling
        'max_transcript_length': _int_env('MAX_TRANSCRIPT_LENGTH', 10000),
        'chunk_size': _int_env('CHUNK_SIZE', 1500),

        # Remote fetch retries
        'max_retries': _int_env('MAX_RETRIES', 3),
        'retry_delay_seconds': _int_env('RETRY_DELAY_SECONDS', 2),

        # External generation tool
        'generator_command': os.getenv('GENERATOR_COMMAND', 'copilot'),
        'generator_model': os.getenv('GENERATOR_MODEL') or None,
        'generator_timeout_seconds': _int_env('GENERATOR_TIMEOUT_SECONDS', 300),

        # Output
        'output_directory': os.getenv('OUTPUT_DIRECTORY', './output'),

        # Logging
        'log_level': os.getenv('LOG_LEVEL', 'INFO'),
        'log_file': os.getenv('LOG_FILE') or None,
    }

    return config


def validate_config(config: Dict) -> List[str]:
    """Validate configuration and return list of errors."""
    errors = []

    positive_settings = {
        'cache_ttl_days': 'CACHE_TTL_DAYS',
        'max_transcript_length': 'MAX_TRANSCRIPT_LENGTH',
        'chunk_size': 'CHUNK_SIZE',
        'generator_timeout_seconds': 'GENERATOR_TIMEOUT_SECONDS',
    }
    for key, env_name in positive_settings.items():
        value = config.get(key)
        if not isinstance(value, int) or value <= 0:
            errors.append(f"{env_name} must be a positive integer")

    for key, env_name in (('max_retries', 'MAX_RETRIES'), ('retry_delay_seconds', 'RETRY_DELAY_SECONDS')):
        value = config.get(key)
        if not isinstance(value, int) or value < 0:
            errors.append(f"{env_name} must be zero or a positive integer")

    if not str(config.get('generator_command') or '').strip():
        errors.append("GENERATOR_COMMAND must not be empty")

    if not config.get('cache_directory'):
        errors.append("CACHE_DIRECTORY must not be empty")

    if not config.get('output_directory'):
        errors.append("OUTPUT_DIRECTORY must not be empty")

    log_level = str(config.get('log_level', 'INFO')).upper()
    if not isinstance(logging.getLevelName(log_level), int):
        errors.append(f"LOG_LEVEL '{log_level}' is not a valid logging level")

    return errors


def setup_logging(log_level: str = "INFO", log_file: Optional[str] = None) -> None:
    """Set up logging configuration with Rich for terminal output."""
    # Clear any existing handlers
    logging.root.handlers.clear()

    handlers: List[logging.Handler] = [
        RichHandler(
            show_time=True,
            show_level=True,
            show_path=False,
            rich_tracebacks=True,
            markup=False  # Transcript text may contain square brackets
        )
    ]

    # Optional plain text log file
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        ))
        handlers.append(file_handler)

    logging.basicConfig(
        level=log_level.upper(),
        handlers=handlers,
        format="%(message)s"
    )

    # Suppress noisy third-party loggers
    noisy_loggers = [
        'yt_dlp',
        'asyncio',
        'urllib3.connectionpool',
    ]

    for logger_name in noisy_loggers:
        logging.getLogger(logger_name).setLevel(logging.WARNING)
