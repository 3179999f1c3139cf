import os
import sys
from datetime import UTC, datetime
from decimal import Decimal

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

# Add src to pythonpath
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "../src")))

from delivery_fee.database import DatabaseHandler  # noqa: E402
from delivery_fee.models import City, WeatherMeasurement  # noqa: E402
from delivery_fee.repositories import InMemoryRepository  # noqa: E402
from delivery_fee.seed import load_reference_data, seed_reference_data  # noqa: E402
from delivery_fee.weather_codes import WeatherCode  # noqa: E402

TALLINN, TARTU, PARNU = 1, 2, 3
CAR, SCOOTER, BIKE = 1, 2, 3
HARKU = 26038


def make_measurement(
    air_temperature: float | None = None,
    wind_speed: float | None = None,
    phenomenon: str | None = None,
    wmo_code: int = HARKU,
    timestamp: datetime | None = None,
) -> WeatherMeasurement:
    return WeatherMeasurement(
        timestamp=timestamp or datetime(2024, 1, 15, 12, 0, tzinfo=UTC),
        station_name="Tallinn-Harku",
        wmo_code=wmo_code,
        air_temperature=air_temperature,
        wind_speed=wind_speed,
        phenomenon=phenomenon,
    )


@pytest.fixture
def repo() -> InMemoryRepository:
    """In-memory lookups populated with the default reference data."""
    data = load_reference_data()
    r = InMemoryRepository()
    for v in data["vehicles"]:
        r.add_vehicle(v["id"])
    for c in data["cities"]:
        r.add_city(City(**c))
    r.add_code_items(*(c["code"] for c in data["code_items"]))
    for f in data["base_fees"]:
        r.set_base_fee(f["city_id"], f["vehicle_id"], Decimal(f["amount"]))
    for f in data["extra_fees"]:
        r.set_extra_fee(f["vehicle_id"], f["code"], Decimal(f["amount"]))
    for p in data["prohibitions"]:
        r.add_prohibition(p["vehicle_id"], p["code"])
    assert set(r.code_items) == {c.name for c in WeatherCode}
    return r


@pytest.fixture
def test_db() -> DatabaseHandler:
    """DatabaseHandler on an in-memory SQLite database, seeded with defaults."""
    # StaticPool keeps the in-memory DB alive across connections
    handler = DatabaseHandler(db_url="sqlite://")
    handler.engine = create_engine(
        handler.db_url, connect_args={"check_same_thread": False}, poolclass=StaticPool
    )
    SQLModel.metadata.create_all(handler.engine)

    with Session(handler.engine) as session:
        seed_reference_data(session, load_reference_data())

    return handler


@pytest.fixture
def measurement():
    """Factory for weather measurements, Tallinn-Harku by default."""
    return make_measurement
