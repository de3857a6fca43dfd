"""
Configuration management for Uniswap Adapter

Loads settings from environment variables and .env file.
Includes logging configuration with rotating file output.
"""

import os
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, List

from dotenv import load_dotenv


def _load_env_file():
    """Load .env file from project root"""
    current = Path(__file__).parent.parent  # uniswap_adapter package parent
    env_file = current / ".env"

    if env_file.exists():
        load_dotenv(env_file)


# Load .env on module import
_load_env_file()


def _get_env(key: str, default: Optional[str] = "") -> Optional[str]:
    """Get environment variable with default"""
    value = os.getenv(key)
    if value is None:
        return default
    return value


def _get_env_float(key: str, default: float) -> float:
    """Get environment variable as float"""
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        logging.getLogger(__name__).warning(
            f"Invalid float value for {key}='{value}', using default={default}"
        )
        return default


def _get_env_int(key: str, default: int) -> int:
    """Get environment variable as int"""
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        logging.getLogger(__name__).warning(
            f"Invalid int value for {key}='{value}', using default={default}"
        )
        return default


def _get_env_bool(key: str, default: bool) -> bool:
    """Get environment variable as bool"""
    value = os.getenv(key)
    if value is None:
        return default
    return value.lower() in ("true", "1", "yes", "on")


@dataclass
class UniswapConfig:
    """Uniswap V3 configuration (RPC endpoints and contract overrides)"""
    # Request timeout for every JSON-RPC call
    timeout: float = field(default_factory=lambda: _get_env_float("UNISWAP_TIMEOUT", 30.0))

    # Chain RPC URLs
    eth_rpc_url: str = field(default_factory=lambda: _get_env("ETH_RPC_URL", "https://eth.llamarpc.com"))
    base_rpc_url: str = field(default_factory=lambda: _get_env("BASE_RPC_URL", "https://mainnet.base.org"))

    # Optional overrides for the Ethereum mainnet deployment (e.g. forks, testnets)
    factory_address: Optional[str] = field(default_factory=lambda: _get_env("UNISWAP_V3_FACTORY_ADDRESS", None))
    quoter_address: Optional[str] = field(default_factory=lambda: _get_env("UNISWAP_V3_QUOTER_ADDRESS", None))
    router_address: Optional[str] = field(default_factory=lambda: _get_env("UNISWAP_V3_ROUTER_ADDRESS", None))

    # Chain IDs (constants)
    eth_chain_id: int = 1
    base_chain_id: int = 8453


@dataclass
class EVMConfig:
    """EVM transaction settings"""
    # Transaction deadline in seconds (default: 20 minutes)
    tx_deadline_seconds: int = field(default_factory=lambda: _get_env_int("EVM_TX_DEADLINE_SECONDS", 1200))


def _get_default_log_path() -> str:
    """Get default log file path under uniswap_adapter/log/ with UTC timestamp"""
    from datetime import datetime, timezone
    timestamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
    log_dir = Path(__file__).parent / "log"
    return str(log_dir / f"uniswap_adapter_{timestamp}.log")


@dataclass
class LoggingConfig:
    """
    Logging configuration with optional file output.

    Environment variables:
        LOG_FILE: Path to log file (empty disables file logging, the default)
        LOG_LEVEL: DEBUG, INFO, WARNING, ERROR, CRITICAL (default: INFO)
        LOG_FORMAT: Custom log format string
        LOG_CONSOLE: Enable console output (default: true)
        LOG_MAX_BYTES: Max log file size before rotation (default: 10MB)
        LOG_BACKUP_COUNT: Number of backup files to keep (default: 5)
    """
    log_file: str = field(default_factory=lambda: _get_env("LOG_FILE", ""))

    log_level: str = field(default_factory=lambda: _get_env("LOG_LEVEL", "INFO"))

    log_format: str = field(default_factory=lambda: _get_env(
        "LOG_FORMAT",
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    ))

    console_output: bool = field(default_factory=lambda: _get_env_bool("LOG_CONSOLE", True))

    max_bytes: int = field(default_factory=lambda: _get_env_int("LOG_MAX_BYTES", 10 * 1024 * 1024))  # 10MB
    backup_count: int = field(default_factory=lambda: _get_env_int("LOG_BACKUP_COUNT", 5))

    @property
    def level(self) -> int:
        """Get numeric log level"""
        return getattr(logging, self.log_level.upper(), logging.INFO)


@dataclass
class Config:
    """
    Main configuration container

    Usage:
        from uniswap_adapter.config import config

        print(config.uniswap.eth_rpc_url)
    """
    uniswap: UniswapConfig = field(default_factory=UniswapConfig)
    evm: EVMConfig = field(default_factory=EVMConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def reload(cls) -> "Config":
        """Reload configuration from environment"""
        _load_env_file()
        return cls()


# Global config instance
config = Config()


def get_config() -> Config:
    """Get global configuration instance"""
    return config


def reload_config() -> Config:
    """Reload and return new configuration"""
    global config
    config = Config.reload()
    return config


def setup_logging(
    log_config: Optional[LoggingConfig] = None,
    logger_name: str = "uniswap_adapter",
) -> logging.Logger:
    """
    Set up logging based on configuration.

    Creates handlers for file and/or console output with rotation.
    The log file directory is created automatically if it doesn't exist.

    Args:
        log_config: Logging configuration (uses global config if None)
        logger_name: Name of the logger to configure (default: uniswap_adapter)

    Returns:
        Configured logger instance

    Example:
        from uniswap_adapter.config import LoggingConfig, setup_logging
        logger = setup_logging(LoggingConfig(log_file="swaps.log", log_level="DEBUG"))
    """
    if log_config is None:
        log_config = config.logging

    logger = logging.getLogger(logger_name)
    logger.setLevel(log_config.level)

    # Close before removing to release file handles on reload
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)

    formatter = logging.Formatter(log_config.log_format)

    handlers: List[logging.Handler] = []

    if log_config.log_file:
        from logging.handlers import RotatingFileHandler

        log_path = Path(log_config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_config.log_file,
            maxBytes=log_config.max_bytes,
            backupCount=log_config.backup_count,
            encoding='utf-8',
        )
        file_handler.setLevel(log_config.level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    if log_config.console_output:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(log_config.level)
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    for handler in handlers:
        logger.addHandler(handler)

    # Child loggers inherit handlers from parent
    for name in [
        f"{logger_name}.infra",
        f"{logger_name}.modules",
        f"{logger_name}.protocols",
    ]:
        logging.getLogger(name).setLevel(log_config.level)

    if log_config.log_file:
        logger.info(f"Logging initialized: file={log_config.log_file}, level={log_config.log_level}")

    return logger


def enable_file_logging(
    log_file: Optional[str] = None,
    level: str = "INFO",
    console: bool = True,
) -> logging.Logger:
    """
    Quick setup for file logging.

    Args:
        log_file: Path to log file (defaults to uniswap_adapter/log/uniswap_adapter_<utc>.log)
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        console: Also output to console

    Returns:
        Configured logger
    """
    if log_file is None:
        log_file = config.logging.log_file or _get_default_log_path()

    log_config = LoggingConfig(
        log_file=log_file,
        log_level=level,
        console_output=console,
    )
    return setup_logging(log_config)
