import os

from dotenv import load_dotenv

load_dotenv()

DEFAULT_PORT = 8080


def port_from_env(environ=None) -> int:
    environ = os.environ if environ is None else environ
    return int(environ.get("PORT") or DEFAULT_PORT)


class BaseConfig:
    REDIS_URL = os.getenv("REDIS_URL", "redis://localhost:6379/0")
    PLANT_KEY_PREFIX = "plant:"
    PLANTS_SEED_FILE = os.getenv("PLANTS_SEED_FILE") or None
    GITHUB_URL = os.getenv("GITHUB_URL", "https://github.com/code-Gambler/fragments")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
    PORT = port_from_env()


class DevConfig(BaseConfig):
    DEBUG = True
    LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG").upper()


class ProdConfig(BaseConfig):
    DEBUG = False


class TestConfig(BaseConfig):
    TESTING = True
    PLANTS_SEED_FILE = None


def get_config(name: str | None):
    env = name or os.getenv("FLASK_ENV") or os.getenv("ENV") or "dev"
    env = env.lower()
    if env.startswith("prod"):
        return ProdConfig
    if env.startswith("test"):
        return TestConfig
    return DevConfig
