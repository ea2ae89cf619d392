"""Centralized logging configuration for studio-commons and services.

Provides consistent, configurable logging across all services with
environment-based control over verbosity and format.
"""

import logging
import logging.config
import os
from enum import Enum


class LogLevel(str, Enum):
    """Supported log levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogVerbosity(str, Enum):
    """Log verbosity modes."""
    QUIET = "QUIET"      # Only errors and critical
    NORMAL = "NORMAL"    # Standard logging (warnings and above)
    VERBOSE = "VERBOSE"  # Info level logging
    DEBUG = "DEBUG"      # Full debug logging


class LogFormat(str, Enum):
    """Log format options."""
    SIMPLE = "simple"
    DETAILED = "detailed"
    JSON = "json"


FORMAT_STRINGS = {
    LogFormat.SIMPLE: "%(asctime)s - %(levelname)s - %(message)s",
    LogFormat.DETAILED: "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s",
    LogFormat.JSON: '{"time":"%(asctime)s","level":"%(levelname)s","module":"%(name)s","message":"%(message)s"}',
}


def get_log_level_from_verbosity(verbosity: str) -> str:
    """Map verbosity mode to log level; unknown modes fall back to WARNING."""
    verbosity_map = {
        LogVerbosity.QUIET: LogLevel.ERROR.value,
        LogVerbosity.NORMAL: LogLevel.WARNING.value,
        LogVerbosity.VERBOSE: LogLevel.INFO.value,
        LogVerbosity.DEBUG: LogLevel.DEBUG.value,
    }
    try:
        return verbosity_map[LogVerbosity(verbosity.upper())]
    except ValueError:
        return LogLevel.WARNING.value


class LoggingConfig:
    """Centralized logging configuration manager."""
    
    # Modules that only need to report problems
    QUIET_MODULES = [
        "studio_commons.features.permissions.repositories",
    ]
    
    # Third-party modules that should only log errors
    ERROR_ONLY_MODULES = [
        "httpx",
        "httpcore",
        "asyncio",
    ]
    
    @classmethod
    def build_config(cls) -> dict:
        """Build a dictConfig from environment variables."""
        log_verbosity = os.getenv("LOG_VERBOSITY", "NORMAL").upper()
        log_format = os.getenv("LOG_FORMAT", "simple").lower()
        
        # An explicit LOG_LEVEL wins over the verbosity mode
        explicit_level = os.getenv("LOG_LEVEL")
        if explicit_level and explicit_level.upper() in LogLevel.__members__:
            effective_log_level = explicit_level.upper()
        else:
            effective_log_level = get_log_level_from_verbosity(log_verbosity)
        
        try:
            format_string = FORMAT_STRINGS[LogFormat(log_format)]
        except ValueError:
            format_string = FORMAT_STRINGS[LogFormat.SIMPLE]
        
        logging_config = {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": format_string,
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "level": effective_log_level,
                    "formatter": "default",
                    "stream": "ext://sys.stdout",
                },
            },
            "loggers": {
                "studio_commons": {
                    "level": effective_log_level,
                    "handlers": ["console"],
                    "propagate": False,
                },
            },
        }
        
        for module in cls.QUIET_MODULES:
            logging_config["loggers"][module] = {
                "level": "WARNING" if effective_log_level != "DEBUG" else "DEBUG",
                "handlers": ["console"],
                "propagate": False,
            }
        
        for module in cls.ERROR_ONLY_MODULES:
            logging_config["loggers"][module] = {
                "level": "ERROR",
                "handlers": ["console"],
                "propagate": False,
            }
        
        return logging_config
    
    @classmethod
    def configure(cls) -> None:
        """Configure logging based on environment variables."""
        logging_config = cls.build_config()
        logging.config.dictConfig(logging_config)
        
        logger = logging.getLogger(__name__)
        logger.debug(
            f"Logging configured: level={logging_config['handlers']['console']['level']}"
        )
    
    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """Get a configured logger for the given module name.
        
        Args:
            name: Module name (usually __name__)
            
        Returns:
            Configured logger instance
        """
        return logging.getLogger(name)
    
    @classmethod
    def set_module_level(cls, module_name: str, level: str) -> None:
        """Set log level for a specific module."""
        logging.getLogger(module_name).setLevel(getattr(logging, level.upper()))


def setup_logging() -> None:
    """Setup logging configuration from environment variables.
    
    Called once when the package is imported.
    """
    LoggingConfig.configure()


def get_logger(name: str) -> logging.Logger:
    """Get a configured logger."""
    return LoggingConfig.get_logger(name)
