import logging
import os
import sys

from plantsite import create_app
from plantsite.extensions import get_plant_service
from plantsite.plants import PlantStoreError

logger = logging.getLogger("plantsite")


def main() -> None:
    host = os.getenv("HOST", "0.0.0.0")
    env = os.getenv("ENV")
    app = create_app(env)
    port = app.config["PORT"]

    with app.app_context():
        try:
            get_plant_service().initialize(app.config.get("PLANTS_SEED_FILE"))
        except PlantStoreError:
            logger.exception("Error initializing DB")
            sys.exit(1)

    logger.info("Server started on port %d", port)
    app.run(host=host, port=port, debug=app.config.get("DEBUG", False))


if __name__ == "__main__":
    main()
