# File: plantsite/middleware.py
"""
Request middleware.

Provides:
- CORS on every route
- gzip/deflate response compression
- security response headers
- navigation context (active route, viewing category) for templates
"""

from functools import partial

from flask import Flask, g, request
from flask_compress import Compress
from flask_cors import CORS

from .utils.navigation import active_route_for, nav_link

SECURITY_HEADERS = {
    'Content-Security-Policy': (
        "default-src 'self'; img-src 'self' https: data:; "
        "style-src 'self' https: 'unsafe-inline'; font-src 'self' https: data:; "
        "object-src 'none'; base-uri 'self'; frame-ancestors 'self'"
    ),
    'Cross-Origin-Opener-Policy': 'same-origin',
    'Referrer-Policy': 'no-referrer',
    'X-Content-Type-Options': 'nosniff',
    'X-DNS-Prefetch-Control': 'off',
    'X-Frame-Options': 'SAMEORIGIN',
}


def init_middleware(app: Flask) -> None:
    CORS(app, send_wildcard=True)
    Compress(app)

    @app.before_request
    def _navigation_context():
        g.active_route = active_route_for(request.path)
        g.viewing_category = request.args.get('category')

    @app.after_request
    def _security_headers(response):
        for name, value in SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)
        return response

    @app.context_processor
    def _navigation_helpers():
        active_route = g.get('active_route')
        return {
            'active_route': active_route,
            'viewing_category': g.get('viewing_category'),
            'nav_link': partial(nav_link, active_route=active_route),
        }
