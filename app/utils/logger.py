import logging
import os

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s %(module)s:%(lineno)d - %(message)s"


def setup_logger(name="finance_tracker"):
    """Create the application logger with a single stream handler"""
    app_logger = logging.getLogger(name)

    if not app_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        app_logger.addHandler(handler)

    app_logger.setLevel(os.getenv("LOG_LEVEL", "INFO").upper())
    return app_logger


logger = setup_logger()
