# File: plantsite/extensions.py
"""
Application extensions initializer.

Owns the plant store service. The Redis client behind it is created at app
startup but does not connect until first use, so building the app never
touches the network; ``PlantService.initialize`` is the startup check.
"""

import redis
from flask import Flask, current_app

from .plants import PlantService

_EXT_KEY = 'plants'  # Key for app.extensions registry


def _build_plant_service(config) -> PlantService:
    client = redis.Redis.from_url(config['REDIS_URL'], decode_responses=True)
    return PlantService(client, prefix=config['PLANT_KEY_PREFIX'])


def init_extensions(app: Flask) -> None:
    """Register the plant store service into app.extensions."""
    if not hasattr(app, 'extensions') or app.extensions is None:
        app.extensions = {}

    if app.extensions.get(_EXT_KEY) is None:
        app.extensions[_EXT_KEY] = _build_plant_service(app.config)


def get_plant_service() -> PlantService:
    """Return the plant service from the current app context.

    Always use this accessor instead of building services directly. Falls
    back to a lazy init from the current config if nothing is registered.
    """
    exts = getattr(current_app, 'extensions', {}) or {}
    service = exts.get(_EXT_KEY)

    if service is None:
        service = _build_plant_service(current_app.config)
        current_app.extensions[_EXT_KEY] = service

    return service
