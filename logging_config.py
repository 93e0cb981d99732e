# logging_config.py
import logging
import logging.config


def setup_logging(log_level=logging.INFO):
    """
    Configures console logging for the shop modules.
    """
    logging_config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "level": log_level,
            },
        },
        "root": {
            "handlers": ["console"],
            "level": log_level,
        },
        "loggers": {
            "matplotlib": {
                "level": "WARNING",
            },
        },
    }

    logging.config.dictConfig(logging_config)
    logging.getLogger(__name__).debug("Logging configured.")
