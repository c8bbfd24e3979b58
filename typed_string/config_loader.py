# Path: typed_string/config_loader.py
"""
Configuration Loader for typed_string

Loads configuration from a .env file and the process environment.
Singleton pattern ensures consistent configuration across all components.

The matcher core itself is configuration-free: compile and match take
everything they need as arguments. Configuration only steers the
surrounding layers (logging, pattern library, CLI defaults).
"""

import os
from typing import Optional, Any
from pathlib import Path
from dotenv import load_dotenv

from .constants import OutputMode


# ==============================================================================
# DEFAULT CONFIGURATION VALUES
# ==============================================================================

ENV_PREFIX: str = 'TYPED_STRING_'

DEFAULT_ENVIRONMENT: str = 'development'
DEFAULT_LOG_LEVEL: str = 'INFO'
DEFAULT_OUTPUT_FORMAT: str = 'text'
DEFAULT_OUTPUT_MODE: str = OutputMode.VALUES.value

# 0 disables the input length bound
DEFAULT_MAX_INPUT_LENGTH: int = 0


class ConfigLoader:
    """
    Singleton configuration loader for typed_string.

    Loads configuration from environment variables with type conversion
    and sensible defaults.

    Example:
        config = ConfigLoader()
        library = config.get('pattern_library_dir')  # Path or None
        limit = config.get('max_input_length')       # int
    """

    _instance: Optional['ConfigLoader'] = None
    _initialized: bool = False

    def __new__(cls) -> 'ConfigLoader':
        """Ensure only one instance exists (singleton pattern)."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """
        Initialize configuration loader.

        Only runs once due to singleton pattern. Loads the .env file
        next to the package (if present) on first instantiation.
        Values already in the environment take precedence.
        """
        if ConfigLoader._initialized:
            return

        env_path = Path(__file__).resolve().parent / '.env'
        if env_path.exists():
            load_dotenv(dotenv_path=env_path, interpolate=True)

        self._config = self._load_configuration()
        ConfigLoader._initialized = True

    def _load_configuration(self) -> dict[str, Any]:
        """
        Load all configuration from environment.

        Returns:
            Dictionary of configuration values with proper types
        """
        config = {
            # ================================================================
            # ENVIRONMENT & DEBUG
            # ================================================================
            'environment': self._get_env('ENVIRONMENT', DEFAULT_ENVIRONMENT),
            'debug': self._get_bool('DEBUG', False),

            # ================================================================
            # LOGGING CONFIGURATION
            # ================================================================
            'log_dir': self._get_path('LOG_DIR'),
            'log_level': self._get_env('LOG_LEVEL', DEFAULT_LOG_LEVEL),
            'log_console': self._get_bool('LOG_CONSOLE', False),

            # ================================================================
            # PATTERN LIBRARY
            # ================================================================
            'pattern_library_dir': self._get_path('PATTERN_LIBRARY_DIR'),

            # ================================================================
            # MATCHING DEFAULTS
            # ================================================================
            'default_output_mode': self._get_output_mode(
                'DEFAULT_OUTPUT_MODE', DEFAULT_OUTPUT_MODE
            ),
            'max_input_length': self._get_int(
                'MAX_INPUT_LENGTH', DEFAULT_MAX_INPUT_LENGTH
            ),

            # ================================================================
            # OUTPUT CONFIGURATION
            # ================================================================
            'output_format': self._get_env('OUTPUT_FORMAT', DEFAULT_OUTPUT_FORMAT),
        }

        if config['debug']:
            config['log_level'] = 'DEBUG'

        return config

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key.

        Args:
            key: Configuration key
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        return self._config.get(key, default)

    def _get_path(self, key: str, required: bool = False) -> Optional[Path]:
        """
        Get path from environment variable.

        Args:
            key: Environment variable name without prefix
            required: If True, raise error when missing

        Returns:
            Path object or None

        Raises:
            ValueError: If required and missing
        """
        value = os.getenv(ENV_PREFIX + key)

        if not value:
            if required:
                raise ValueError(f"Required path not configured: {ENV_PREFIX}{key}")
            return None

        if '$' in value:
            value = os.path.expandvars(value)

        return Path(value).expanduser()

    def _get_env(self, key: str, default: str = '') -> str:
        """Get string environment variable."""
        return os.getenv(ENV_PREFIX + key, default)

    def _get_int(self, key: str, default: int) -> int:
        """Get integer environment variable."""
        value = os.getenv(ENV_PREFIX + key)
        if value is None:
            return default
        try:
            return int(value)
        except ValueError:
            return default

    def _get_bool(self, key: str, default: bool) -> bool:
        """Get boolean environment variable."""
        value = os.getenv(ENV_PREFIX + key)
        if value is None:
            return default
        return value.lower() in ('true', '1', 'yes', 'on')

    def _get_output_mode(self, key: str, default: str) -> OutputMode:
        """Get output mode, falling back to default on unknown values."""
        value = os.getenv(ENV_PREFIX + key, default).lower()
        try:
            return OutputMode(value)
        except ValueError:
            return OutputMode(default)

    def __repr__(self) -> str:
        """String representation showing key settings."""
        return (
            f"ConfigLoader("
            f"environment={self._config.get('environment')}, "
            f"pattern_library_dir={self._config.get('pattern_library_dir')})"
        )


__all__ = ['ConfigLoader']
