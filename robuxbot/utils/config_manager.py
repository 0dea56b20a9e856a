"""Configuration manager for RobuxBot."""
import logging
import os
from typing import Any, Dict, Optional
import yaml
from dotenv import load_dotenv


class ConfigurationError(ValueError):
    """Raised when a required startup setting is missing or invalid."""


class ConfigManager:
    """
    Configuration manager for RobuxBot.

    Reads an optional YAML config file and overlays environment variables
    (a ``.env`` file is loaded first). Environment values win.
    """

    # Environment variable -> dotted config key
    ENV_OVERRIDES = {
        'DISCORD_TOKEN': 'discord.token',
        'GUILD_ID': 'discord.guild_id',
        'LOG_LEVEL': 'logging.level',
        'LOG_FILE': 'logging.file',
    }

    def __init__(self, config_path: str = "config/config.yaml", load_env_file: bool = True):
        """
        Initialize the ConfigManager.

        Args:
            config_path: Path to the configuration file (optional on disk)
            load_env_file: Whether to load a ``.env`` file into the environment

        Raises:
            yaml.YAMLError: If the configuration file is not valid YAML
        """
        self.logger = logging.getLogger("robuxbot.config")
        self.config_path = config_path
        self.config: Dict[str, Any] = {}

        if load_env_file:
            load_dotenv()

        self._load_config()
        self._apply_env_overrides()

    def _load_config(self) -> None:
        """
        Load the configuration from the config file, if present.

        Raises:
            yaml.YAMLError: If the configuration file is not valid YAML
        """
        if not os.path.exists(self.config_path):
            self.logger.debug(
                f"Configuration file {self.config_path} not found, using environment only"
            )
            return

        try:
            with open(self.config_path, 'r', encoding='utf-8') as config_file:
                self.config = yaml.safe_load(config_file) or {}
                self.logger.debug(f"Loaded configuration from {self.config_path}")
        except yaml.YAMLError as e:
            self.logger.error(f"Error parsing configuration file: {e}")
            raise

    def _apply_env_overrides(self) -> None:
        """Copy set environment variables over the file values."""
        for env_name, key in self.ENV_OVERRIDES.items():
            value = os.environ.get(env_name)
            if value:
                self.set(key, value)
                self.logger.debug(f"Configuration key '{key}' taken from ${env_name}")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value.

        Args:
            key: The configuration key (dot notation for nested keys)
            default: Default value to return if the key is not found

        Returns:
            The configuration value or the default value if not found
        """
        keys = key.split('.')
        value = self.config

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                self.logger.debug(f"Configuration key '{key}' not found, using default: {default}")
                return default

        return value

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value in memory.

        Args:
            key: The configuration key (dot notation for nested keys)
            value: The value to store
        """
        keys = key.split('.')
        node = self.config
        for k in keys[:-1]:
            if not isinstance(node.get(k), dict):
                node[k] = {}
            node = node[k]
        node[keys[-1]] = value

    def get_discord_token(self) -> str:
        """
        Get the Discord bot token.

        Returns:
            The Discord bot token

        Raises:
            ConfigurationError: If the Discord bot token is not set
        """
        token = self.get('discord.token')
        if not token or token == "YOUR_DISCORD_BOT_TOKEN_HERE":
            self.logger.error("Discord bot token not set in configuration")
            raise ConfigurationError("Discord bot token not set (DISCORD_TOKEN)")
        return str(token).strip()

    def get_guild_id(self) -> int:
        """
        Get the guild that slash commands are registered to.

        Returns:
            The guild ID

        Raises:
            ConfigurationError: If the guild ID is missing or not an integer
        """
        raw = self.get('discord.guild_id')
        if raw is None or raw == "":
            self.logger.error("Guild ID not set in configuration")
            raise ConfigurationError("Guild ID not set (GUILD_ID)")

        try:
            guild_id = int(str(raw).strip())
        except ValueError:
            self.logger.error(f"Guild ID is not a valid integer: {raw!r}")
            raise ConfigurationError(f"Guild ID is not a valid integer: {raw!r}") from None

        if guild_id <= 0:
            raise ConfigurationError(f"Guild ID must be positive: {guild_id}")
        return guild_id

    def get_log_level(self) -> str:
        """
        Get the logging level.

        Returns:
            The logging level
        """
        return self.get('logging.level', 'INFO')

    def get_log_file(self) -> Optional[str]:
        """
        Get the log file path.

        Returns:
            The log file path or None if not set
        """
        return self.get('logging.file', None)

    def get_log_max_size(self) -> int:
        """
        Get the maximum log file size.

        Returns:
            The maximum log file size in bytes
        """
        return self.get('logging.max_size', 10485760)  # 10 MB

    def get_log_backup_count(self) -> int:
        """
        Get the number of backup log files to keep.

        Returns:
            The number of backup log files
        """
        return self.get('logging.backup_count', 5)
