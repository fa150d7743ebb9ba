# File: plantsite/log.py
"""Logging setup and per-request access logging."""

import logging
import time

from flask import Flask, g, request

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

access_logger = logging.getLogger('plantsite.access')


class _ConsoleHandler(logging.StreamHandler):
    """Console handler installed on the root logger by configure_logging."""


def configure_logging(app: Flask) -> None:
    """Configure the root logger at the app's LOG_LEVEL.

    Safe to call for every app instance; the handler is only added once.
    """
    root = logging.getLogger()
    root.setLevel(app.config.get('LOG_LEVEL', 'INFO'))
    # Avoid adding duplicate handlers when several apps are created
    if not any(isinstance(h, _ConsoleHandler) for h in root.handlers):
        handler = _ConsoleHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)


def init_request_logging(app: Flask) -> None:
    @app.before_request
    def _start_timer():
        g.request_started = time.perf_counter()

    @app.after_request
    def _log_request(response):
        started = g.pop('request_started', None)
        elapsed_ms = (time.perf_counter() - started) * 1000 if started else 0.0
        access_logger.info(
            '%s %s %s %.1fms', request.method, request.path, response.status_code, elapsed_ms
        )
        return response
