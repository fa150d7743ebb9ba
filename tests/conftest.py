import pytest

from plantsite import create_app
from plantsite.plants import Plant, PlantStoreError


class FakePlantService:
    """In-memory stand-in for the Redis-backed plant service."""

    def __init__(self, plants=None, fail=False):
        self.plants = list(plants or [])
        self.fail = fail

    def initialize(self, seed_file=None):
        if self.fail:
            raise PlantStoreError("store unavailable")

    def get_plants(self):
        if self.fail:
            raise PlantStoreError("store unavailable")
        return list(self.plants)

    def get_plant_by_id(self, plant_id):
        if self.fail:
            raise PlantStoreError("store unavailable")
        return next((p for p in self.plants if p.id == str(plant_id)), None)


SAMPLE_PLANTS = [
    Plant(id="1", name="Snake Plant", scientific_name="Dracaena trifasciata", category="succulent"),
    Plant(id="2", name="Monstera", scientific_name="Monstera deliciosa", category="tropical"),
    Plant(id="3", name="Pothos", category="vine", sunlight="Low light", watering="Weekly"),
]


@pytest.fixture
def plant_service():
    return FakePlantService(SAMPLE_PLANTS)


@pytest.fixture
def app(plant_service):
    app = create_app("test")
    app.extensions["plants"] = plant_service
    return app


@pytest.fixture
def client(app):
    with app.test_client() as client:
        with app.app_context():
            yield client
