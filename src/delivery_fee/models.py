from datetime import UTC, datetime
from decimal import Decimal

from pydantic import BaseModel, Field as PydanticField, model_validator
from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel


class Vehicle(SQLModel, table=True):
    __tablename__ = "vehicle"

    id: int | None = Field(default=None, primary_key=True)
    type: str = Field(max_length=50, unique=True)  # car / scooter / bike


class WeatherStation(SQLModel, table=True):
    __tablename__ = "weather_station"

    wmo_code: int = Field(primary_key=True)
    name: str = Field(max_length=255)


class City(SQLModel, table=True):
    __tablename__ = "city"

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(max_length=255, unique=True)
    wmo_code: int = Field(foreign_key="weather_station.wmo_code")


class WeatherMeasurement(SQLModel, table=True):
    """
    A single observation from a weather station.
    Only the most recent row per station is consulted for fee calculation.
    """

    __tablename__ = "weather_measurement"

    id: int | None = Field(default=None, primary_key=True)
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC), index=True)
    station_name: str | None = Field(default=None, max_length=255)
    wmo_code: int = Field(index=True)

    air_temperature: float | None = Field(default=None)  # °C
    wind_speed: float | None = Field(default=None, ge=0)  # m/s
    phenomenon: str | None = Field(default=None, max_length=255)


class CodeItem(SQLModel, table=True):
    """Internal identifier that fee and prohibition rows refer to."""

    __tablename__ = "code_item"

    code: str = Field(primary_key=True, max_length=50)
    description: str | None = Field(default=None, max_length=255)


class RegionalBaseFee(SQLModel, table=True):
    __tablename__ = "regional_base_fee"
    __table_args__ = (UniqueConstraint("city_id", "vehicle_id"),)

    id: int | None = Field(default=None, primary_key=True)
    city_id: int = Field(foreign_key="city.id")
    vehicle_id: int = Field(foreign_key="vehicle.id")
    fee_amount: Decimal = Field(max_digits=10, decimal_places=2, ge=0)


class ExtraFee(SQLModel, table=True):
    __tablename__ = "extra_fee"
    __table_args__ = (UniqueConstraint("vehicle_id", "code"),)

    id: int | None = Field(default=None, primary_key=True)
    vehicle_id: int = Field(foreign_key="vehicle.id")
    code: str = Field(foreign_key="code_item.code", max_length=50)
    fee_amount: Decimal = Field(max_digits=10, decimal_places=2, ge=0)


class WorkProhibition(SQLModel, table=True):
    """Presence of a row forbids the vehicle under the referenced weather code."""

    __tablename__ = "work_prohibition"
    __table_args__ = (UniqueConstraint("vehicle_id", "code"),)

    id: int | None = Field(default=None, primary_key=True)
    vehicle_id: int = Field(foreign_key="vehicle.id")
    code: str = Field(foreign_key="code_item.code", max_length=50)


class DeliveryFee(BaseModel):
    """Result of a fee calculation."""

    city_id: int
    vehicle_id: int
    base_fee: Decimal = PydanticField(ge=0)
    extra_fee: Decimal = PydanticField(default=Decimal("0"), ge=0)
    total_fee: Decimal = PydanticField(ge=0)
    warnings: list[str] = PydanticField(default_factory=list)

    @model_validator(mode="after")
    def check_total(self) -> "DeliveryFee":
        """Ensure the total is the sum of its parts."""
        if self.total_fee != self.base_fee + self.extra_fee:
            raise ValueError("total_fee must equal base_fee + extra_fee")
        return self
