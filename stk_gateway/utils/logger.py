"""
Logging Configuration
Centralized logging setup for the STK gateway
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
MAX_LOG_BYTES = 10485760  # 10MB


def _ensure_log_dir(log_dir: Optional[str]) -> bool:
    if not log_dir:
        return False
    try:
        os.makedirs(log_dir, exist_ok=True)
    except OSError:
        return False
    return True


def get_logger(name: str) -> logging.Logger:
    """
    Get a configured logger instance

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)

    # Only configure if not already configured
    if not logger.handlers:
        logger.setLevel(logging.INFO)

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.INFO)
        console_handler.setFormatter(logging.Formatter('%(levelname)s - %(name)s - %(message)s'))
        logger.addHandler(console_handler)

        # File handler (LOG_DIR empty disables it)
        log_dir = os.getenv('LOG_DIR', 'logs')
        if _ensure_log_dir(log_dir):
            file_handler = RotatingFileHandler(
                os.path.join(log_dir, 'stk-gateway.log'),
                maxBytes=MAX_LOG_BYTES,
                backupCount=10
            )
            file_handler.setLevel(logging.INFO)
            file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
            logger.addHandler(file_handler)

    return logger


def configure_app_logging(app):
    """
    Configure logging for the Flask application

    Args:
        app: Flask application instance
    """
    app.logger.setLevel(logging.DEBUG if app.debug else logging.INFO)

    log_dir = app.config.get('LOG_DIR')
    if not _ensure_log_dir(log_dir):
        return

    error_handler = RotatingFileHandler(
        os.path.join(log_dir, 'error.log'),
        maxBytes=MAX_LOG_BYTES,
        backupCount=10
    )
    error_handler.setLevel(logging.ERROR)
    error_handler.setFormatter(logging.Formatter(
        LOG_FORMAT + '\n%(pathname)s:%(lineno)d',
        datefmt=DATE_FORMAT
    ))
    app.logger.addHandler(error_handler)


class RequestLogger:
    """Middleware to log all requests"""

    def __init__(self, app=None):
        self.app = app
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        """Initialize request logging"""

        @app.before_request
        def log_request():
            from flask import request
            logger = get_logger('request')
            logger.info(
                '%s %s - IP: %s - User-Agent: %s',
                request.method,
                request.path,
                request.remote_addr,
                request.headers.get('User-Agent', 'Unknown')
            )

        @app.after_request
        def log_response(response):
            from flask import request
            logger = get_logger('response')
            logger.info(
                '%s %s - Status: %s - IP: %s',
                request.method,
                request.path,
                response.status_code,
                request.remote_addr
            )
            return response
