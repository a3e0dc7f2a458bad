import logging
import logging.config

# Centralized logging configuration for the entire project
LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "rich": {
            "format": "%(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        }
    },
    "handlers": {
        "console": {
            "class": "rich.logging.RichHandler",
            "level": "INFO",
            "formatter": "rich",
            "show_time": True,
            "show_level": True,
            "show_path": False,
            "markup": False,
        }
    },
    "loggers": {
        # Coordinate resolution
        "common_geocoding": {"level": "DEBUG"},
        "geocode_client": {"level": "DEBUG"},
        "coordinate_resolver": {"level": "DEBUG"},
        # Fees and checkout
        "delivery_fee": {"level": "INFO"},
        "delivery_pipeline": {"level": "DEBUG"},
        "checkout": {"level": "DEBUG"},
        # External libraries
        "httpx": {"level": "WARNING"},
        "httpcore": {"level": "WARNING"},
    },
    "root": {"level": "INFO", "handlers": ["console"]},
}

# Track if logging has been configured to avoid duplicate configuration
_logging_configured = False


def get_logger(logger_name: str) -> logging.Logger:
    """
    Get a logger instance with the centralized configuration.

    Args:
        logger_name: Name of the logger (e.g., 'coordinate_resolver')

    Returns:
        Configured logger instance
    """
    global _logging_configured
    if not _logging_configured:
        logging.config.dictConfig(LOGGING_CONFIG)
        _logging_configured = True
    return logging.getLogger(logger_name)
