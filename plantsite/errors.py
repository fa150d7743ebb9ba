# File: plantsite/errors.py
"""
JSON error envelope and app-wide error handlers.

Every failure the client sees has the shape
``{"status": "error", "error": {"message": ..., "code": ...}}``.
"""

import logging

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)

DEFAULT_MESSAGE = 'unable to process request'


def error_response(message: str, code: int):
    """Build a (response, status) pair carrying the error envelope."""
    body = {
        'status': 'error',
        'error': {
            'message': message,
            'code': code,
        },
    }
    return jsonify(body), code


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(404)
    def not_found(e):
        return error_response('not found', 404)

    @app.errorhandler(HTTPException)
    def http_error(e: HTTPException):
        code = e.code or 500
        if code > 499:
            logger.error('Error processing request: %s', e)
        return error_response(e.description or DEFAULT_MESSAGE, code)

    @app.errorhandler(Exception)
    def unhandled_error(e: Exception):
        # Errors may carry their own HTTP status; anything else is a 500
        code = getattr(e, 'status', None)
        if not isinstance(code, int) or code < 400:
            code = 500
        if code > 499:
            logger.exception('Error processing request')
        return error_response(str(e) or DEFAULT_MESSAGE, code)
