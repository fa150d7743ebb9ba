from plantsite import create_app
from plantsite.config import DevConfig, ProdConfig, TestConfig, get_config
from plantsite.extensions import get_plant_service
from plantsite.plants import PlantService


def test_get_config_by_name():
    assert get_config("production") is ProdConfig
    assert get_config("test") is TestConfig
    assert get_config("dev") is DevConfig


def test_get_config_from_env(monkeypatch):
    monkeypatch.delenv("FLASK_ENV", raising=False)
    monkeypatch.setenv("ENV", "prod")
    assert get_config(None) is ProdConfig

    monkeypatch.delenv("ENV")
    assert get_config(None) is DevConfig



def test_app_registers_redis_plant_service():
    app = create_app("test")

    with app.app_context():
        service = get_plant_service()

    assert isinstance(service, PlantService)
    assert service.prefix == app.config["PLANT_KEY_PREFIX"]
