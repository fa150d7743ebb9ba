# File: plantsite/plants.py
"""
Plant records and the Redis-backed plant store.

Each plant lives in a hash at ``<prefix><id>``; the set ``<prefix>ids``
indexes every stored id. The store is read-only from the web layer; writes
only happen while seeding an empty store at startup.
"""

import json
import logging
from dataclasses import asdict, dataclass, fields

import redis

logger = logging.getLogger(__name__)


class PlantStoreError(Exception):
    """Raised when the backing store cannot be reached or read."""


@dataclass
class Plant:
    id: str
    name: str
    scientific_name: str = ""
    category: str = ""
    description: str = ""
    sunlight: str = ""
    watering: str = ""
    image_url: str = ""

    @classmethod
    def from_mapping(cls, data: dict) -> "Plant":
        if not isinstance(data, dict):
            raise ValueError(f"plant record must be an object, got {type(data).__name__}")
        known = {f.name for f in fields(cls)}
        values = {k: ("" if v is None else str(v)) for k, v in data.items() if k in known}
        if not values.get("id"):
            raise ValueError("plant record is missing an id")
        values.setdefault("name", "")
        return cls(**values)

    def to_mapping(self) -> dict:
        return asdict(self)


def _id_sort_key(plant_id: str):
    # Numeric ids first in numeric order, then everything else lexically
    if plant_id.isascii() and plant_id.isdigit():
        return (0, int(plant_id), "")
    return (1, 0, plant_id)


class PlantService:
    """Read access to plant records stored in Redis."""

    def __init__(self, client: redis.Redis, prefix: str = "plant:"):
        self.client = client
        self.prefix = prefix

    @property
    def index_key(self) -> str:
        return f"{self.prefix}ids"

    def _key(self, plant_id) -> str:
        return f"{self.prefix}{plant_id}"

    def initialize(self, seed_file: str | None = None) -> None:
        """Check the store is reachable and seed it if it is empty.

        Raises:
            PlantStoreError: the store is unreachable or the seed file
                cannot be loaded.
        """
        try:
            self.client.ping()
        except redis.RedisError as e:
            raise PlantStoreError(f"unable to reach plant store: {e}") from e

        if not seed_file:
            return

        try:
            if self.client.scard(self.index_key):
                logger.info("Plant store already populated, skipping seed")
                return
            with open(seed_file, encoding="utf-8") as fh:
                records = json.load(fh)
            if not isinstance(records, list):
                raise ValueError("seed file must contain a JSON array")
            plants = [Plant.from_mapping(record) for record in records]
            # Every record is validated before one transactional write
            pipe = self.client.pipeline(transaction=True)
            for plant in plants:
                self._queue_plant(pipe, plant)
            pipe.execute()
        except (OSError, ValueError, redis.RedisError) as e:
            raise PlantStoreError(f"unable to seed plant store from {seed_file}: {e}") from e

        logger.info("Seeded %d plants from %s", len(plants), seed_file)

    def add_plant(self, plant: Plant) -> None:
        pipe = self.client.pipeline()
        self._queue_plant(pipe, plant)
        pipe.execute()

    def _queue_plant(self, pipe, plant: Plant) -> None:
        pipe.hset(self._key(plant.id), mapping=plant.to_mapping())
        pipe.sadd(self.index_key, plant.id)

    def get_plants(self) -> list[Plant]:
        """Return every stored plant ordered by id."""
        try:
            ids = sorted(self.client.smembers(self.index_key), key=_id_sort_key)
            if not ids:
                return []
            pipe = self.client.pipeline()
            for plant_id in ids:
                pipe.hgetall(self._key(plant_id))
            rows = pipe.execute()
        except redis.RedisError as e:
            raise PlantStoreError(f"unable to list plants: {e}") from e

        # Index entries whose hash has gone missing are skipped
        return [Plant.from_mapping(row) for row in rows if row]

    def get_plant_by_id(self, plant_id) -> Plant | None:
        try:
            row = self.client.hgetall(self._key(plant_id))
        except redis.RedisError as e:
            raise PlantStoreError(f"unable to fetch plant {plant_id}: {e}") from e
        if not row:
            return None
        return Plant.from_mapping(row)
