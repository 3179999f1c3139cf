"""
Lookup interfaces consumed by the fee calculator, and an in-memory implementation.

The database-backed implementation lives in delivery_fee.database.
"""

from decimal import Decimal
from typing import Protocol

from delivery_fee.models import City, WeatherMeasurement
from delivery_fee.weather_codes import WeatherCode


class VehicleRepository(Protocol):
    def vehicle_exists(self, vehicle_id: int) -> bool: ...


class CityRepository(Protocol):
    def get_city(self, city_id: int) -> City | None: ...


class WeatherRepository(Protocol):
    def get_latest_measurement(self, wmo_code: int) -> WeatherMeasurement | None: ...


class BaseFeeRepository(Protocol):
    def get_base_fee(self, city_id: int, vehicle_id: int) -> Decimal | None: ...


class ExtraFeeRepository(Protocol):
    def get_extra_fee(self, vehicle_id: int, code: str) -> Decimal | None: ...


class ProhibitionRepository(Protocol):
    def get_prohibition(self, vehicle_id: int, code: str) -> bool: ...


class CodeItemRepository(Protocol):
    def resolve_code_item(self, weather_code: WeatherCode) -> str | None: ...


class FeeDataSource(
    VehicleRepository,
    CityRepository,
    WeatherRepository,
    BaseFeeRepository,
    ExtraFeeRepository,
    ProhibitionRepository,
    CodeItemRepository,
    Protocol,
):
    """All lookups in one object. Both bundled implementations satisfy it."""


class InMemoryRepository:
    """Dict-backed lookups for tests and embedding without a database."""

    def __init__(self) -> None:
        self.vehicles: set[int] = set()
        self.cities: dict[int, City] = {}
        self.measurements: dict[int, list[WeatherMeasurement]] = {}
        self.base_fees: dict[tuple[int, int], Decimal] = {}
        self.extra_fees: dict[tuple[int, str], Decimal] = {}
        self.prohibitions: set[tuple[int, str]] = set()
        self.code_items: set[str] = set()

    # --- Population ---

    def add_vehicle(self, vehicle_id: int) -> None:
        self.vehicles.add(vehicle_id)

    def add_city(self, city: City) -> None:
        assert city.id is not None
        self.cities[city.id] = city

    def add_measurement(self, measurement: WeatherMeasurement) -> None:
        self.measurements.setdefault(measurement.wmo_code, []).append(measurement)

    def add_code_items(self, *codes: str) -> None:
        self.code_items.update(codes)

    def set_base_fee(self, city_id: int, vehicle_id: int, amount: Decimal) -> None:
        self.base_fees[(city_id, vehicle_id)] = amount

    def set_extra_fee(self, vehicle_id: int, code: str, amount: Decimal) -> None:
        self.extra_fees[(vehicle_id, code)] = amount

    def add_prohibition(self, vehicle_id: int, code: str) -> None:
        self.prohibitions.add((vehicle_id, code))

    # --- Lookups ---

    def vehicle_exists(self, vehicle_id: int) -> bool:
        return vehicle_id in self.vehicles

    def get_city(self, city_id: int) -> City | None:
        return self.cities.get(city_id)

    def get_latest_measurement(self, wmo_code: int) -> WeatherMeasurement | None:
        rows = self.measurements.get(wmo_code)
        if not rows:
            return None
        return max(rows, key=lambda m: m.timestamp)

    def get_base_fee(self, city_id: int, vehicle_id: int) -> Decimal | None:
        return self.base_fees.get((city_id, vehicle_id))

    def get_extra_fee(self, vehicle_id: int, code: str) -> Decimal | None:
        return self.extra_fees.get((vehicle_id, code))

    def get_prohibition(self, vehicle_id: int, code: str) -> bool:
        return (vehicle_id, code) in self.prohibitions

    def resolve_code_item(self, weather_code: WeatherCode) -> str | None:
        code = weather_code.name
        return code if code in self.code_items else None
