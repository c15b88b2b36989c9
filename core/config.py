"""
Configuration Manager with Environment Variables Support

Usage:
    from core.config import get_config, load_policy

    level = get_config().get("LOG_LEVEL", "INFO")
    policy = load_policy()     # PASSWORD_POLICY text, or DEFAULT_POLICY
"""
import os
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from constants import ConfigKeys
from core.singleton import SingletonMeta
from exceptions import ConfigurationError, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "config/settings.json"


class Config(metaclass=SingletonMeta):
    """
    Unified configuration manager that supports:
    - Environment variables (.env)
    - JSON configuration file
    - Default values
    - Type conversion
    """

    def __init__(self, env_file: Optional[str] = None, config_file: Optional[str] = None):
        self._env_file = Path(env_file) if env_file else Path(".env")
        self._explicit_config_file = config_file
        self._env_loaded = False
        self._config_cache: Dict[str, Any] = {}

        self._load_env()
        self._load_json_config()

    @property
    def config_file_path(self) -> Path:
        if self._explicit_config_file:
            return Path(self._explicit_config_file)
        return Path(os.getenv(ConfigKeys.CONFIG_FILE, DEFAULT_CONFIG_FILE))

    def _load_env(self):
        """Load environment variables from .env file"""
        if self._env_file.exists():
            load_dotenv(self._env_file)
            self._env_loaded = True
            logger.info(f"Environment variables loaded from {self._env_file}")
        else:
            logger.debug(f"{self._env_file} not found, using system environment only")

    def _load_json_config(self):
        """Load configuration from JSON file"""
        path = self.config_file_path
        if not path.exists():
            logger.debug(f"Config file not found: {path}")
            self._config_cache = {}
            return
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise ConfigurationError(
                f"Failed to load config file {path}", detail=str(e)
            ) from e
        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file {path} must contain a JSON object")
        self._config_cache = data
        logger.info(f"Configuration loaded from {path}")

    def get(
            self,
            key: str,
            default: Any = None,
            required: bool = False,
            from_env: bool = True
    ) -> Any:
        """
        Get configuration value.

        Priority order:
        1. Environment variable (if from_env=True)
        2. JSON config file
        3. Default value

        Raises:
            ConfigurationError: If required=True and key not found
        """
        # 1. Try environment variable
        if from_env:
            env_value = os.getenv(key)
            if env_value is not None:
                return env_value

        # 2. Try JSON config
        if key in self._config_cache:
            return self._config_cache[key]

        # 3. Use default
        if default is not None:
            return default

        # 4. Error if required
        if required:
            raise ConfigurationError(
                f"Required configuration '{key}' not found. "
                f"Set it in {self._env_file} or {self.config_file_path}"
            )

        return None

    def get_bool(self, key: str, default: bool = False) -> bool:
        """Get boolean configuration value"""
        value = self.get(key, default)

        if isinstance(value, bool):
            return value

        if isinstance(value, str):
            return value.lower() in ('true', '1', 'yes', 'on')

        return bool(value)

    def get_int(self, key: str, default: int = 0) -> int:
        """Get integer configuration value"""
        value = self.get(key, default)

        try:
            return int(value)
        except (ValueError, TypeError):
            logger.warning(f"Invalid int value for '{key}': {value}, using default")
            return default

    def reload(self):
        """Reload configuration from files"""
        self._load_env()
        self._load_json_config()
        logger.info("Configuration reloaded")


def get_config() -> Config:
    """Shared Config instance"""
    return Config.get_instance()


def get_log_level() -> str:
    """Get logging level"""
    return str(get_config().get(ConfigKeys.LOG_LEVEL, default="INFO")).upper()


def load_policy():
    """
    Policy configured under PASSWORD_POLICY (policy text format), or
    DEFAULT_POLICY when the key is not set.

    Raises:
        ConfigurationError: the configured text is not a valid policy
    """
    # imported here: services.policy_parser imports core.policy
    from core.policy import DEFAULT_POLICY
    from services.policy_parser import parse_policy

    text = get_config().get(ConfigKeys.PASSWORD_POLICY)
    if text is None:
        logger.debug("No PASSWORD_POLICY configured, using default policy")
        return DEFAULT_POLICY

    try:
        return parse_policy(str(text))
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid {ConfigKeys.PASSWORD_POLICY}", code=e.code, detail=str(e)
        ) from e
