from flask import Flask

from .about import __author__, __version__
from .config import get_config
from .errors import register_error_handlers
from .extensions import init_extensions
from .log import configure_logging, init_request_logging
from .middleware import init_middleware
from .routes.core import bp as core_bp
from .routes.plants import bp as plants_bp

__all__ = ["create_app", "__author__", "__version__"]


def create_app(config_name: str | None = None) -> Flask:
    app = Flask(__name__, template_folder="templates", static_folder="static")
    app.config.from_object(get_config(config_name))

    configure_logging(app)
    init_request_logging(app)
    init_middleware(app)
    init_extensions(app)

    app.register_blueprint(core_bp)
    app.register_blueprint(plants_bp)

    register_error_handlers(app)

    return app
