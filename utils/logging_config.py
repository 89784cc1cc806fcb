"""
Logging Module - Application logging setup and request logging
"""

import os
import time
import logging
from logging.handlers import TimedRotatingFileHandler
from flask import g, request
from flask.logging import default_handler
from .security import get_client_ip

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
CONSOLE_FORMAT = '%(asctime)s %(levelname)s: %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def _resolve_level(app):
    if app.config.get('LOG_LEVEL'):
        return logging.getLevelName(app.config['LOG_LEVEL'].upper())
    return logging.DEBUG if app.debug or app.testing else logging.INFO


def configure_logging(app):
    """
    Configure root logging for the application

    Installs a daily rotating log file, an error-only log file and,
    outside production, a console handler. Handlers from an earlier
    call are replaced so the factory can run more than once.

    Args:
        app (Flask): Application whose config drives the setup
    """
    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, '_portfolio_handler', False):
            root.removeHandler(handler)
            handler.close()

    level = _resolve_level(app)
    handlers = []

    if app.config.get('LOG_TO_FILE'):
        log_dir = app.config['LOG_DIR']
        os.makedirs(log_dir, exist_ok=True)

        file_handler = TimedRotatingFileHandler(
            os.path.join(log_dir, 'portfolio.log'),
            when='midnight',
            backupCount=app.config.get('LOG_RETENTION_DAYS', 30),
            encoding='utf-8'
        )
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        handlers.append(file_handler)

        error_handler = logging.FileHandler(os.path.join(log_dir, 'error.log'), encoding='utf-8')
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        handlers.append(error_handler)

    if app.config.get('LOG_TO_CONSOLE'):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, '%H:%M:%S'))
        handlers.append(console_handler)

    for handler in handlers:
        handler._portfolio_handler = True
        root.addHandler(handler)

    root.setLevel(level)
    app.logger.removeHandler(default_handler)
    app.logger.setLevel(level)


def register_request_logging(app):
    """Log every response as 'METHOD path status - Nms'"""

    @app.before_request
    def start_timer():
        g.request_started = time.perf_counter()

    @app.after_request
    def log_request(response):
        started = g.pop('request_started', None)
        duration = int((time.perf_counter() - started) * 1000) if started else 0
        message = f"{request.method} {request.path} {response.status_code} - {duration}ms"
        level = logging.WARNING if response.status_code >= 400 else logging.INFO
        app.logger.log(level, message, extra={
            'ip': get_client_ip(),
            'user_agent': request.headers.get('User-Agent', 'Unknown')
        })
        return response
