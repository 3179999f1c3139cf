import logging
import time
from decimal import Decimal

from sqlalchemy.engine import Engine
from sqlalchemy.exc import OperationalError
from sqlmodel import Session, SQLModel, create_engine, select

from delivery_fee.config import settings
from delivery_fee.models import (
    City,
    CodeItem,
    ExtraFee,
    RegionalBaseFee,
    Vehicle,
    WeatherMeasurement,
    WorkProhibition,
)
from delivery_fee.weather_codes import WeatherCode

logger = logging.getLogger("Database")


class DatabaseHandler:
    """SQLModel-backed implementation of the fee lookups."""

    def __init__(self, db_url: str | None = None) -> None:
        self.db_url = db_url or settings.database_url
        self.engine: Engine | None = None

    def connect(self, retries: int = 10, delay: float = 5.0) -> bool:
        """Establish database connection and ensure tables exist."""
        while retries > 0:
            try:
                logger.info("Connecting to database...")
                self.engine = create_engine(self.db_url, pool_pre_ping=True)

                with self.engine.connect():
                    pass

                SQLModel.metadata.create_all(self.engine)
                logger.info("Database connected and initialized.")
                return True

            except OperationalError as e:
                retries -= 1
                logger.warning(f"Database not ready ({e}). Retrying in {delay}s... ({retries} left)")
                time.sleep(delay)
            except Exception as e:
                logger.error(f"Critical DB connection error: {e}")
                return False

        self.engine = None
        return False

    def session(self) -> Session:
        if self.engine is None:
            raise ConnectionError("Database not connected")
        return Session(self.engine)

    # --- Lookups ---

    def vehicle_exists(self, vehicle_id: int) -> bool:
        with self.session() as session:
            return session.get(Vehicle, vehicle_id) is not None

    def get_city(self, city_id: int) -> City | None:
        with self.session() as session:
            return session.get(City, city_id)

    def get_latest_measurement(self, wmo_code: int) -> WeatherMeasurement | None:
        with self.session() as session:
            stmt = (
                select(WeatherMeasurement)
                .where(WeatherMeasurement.wmo_code == wmo_code)
                .order_by(WeatherMeasurement.timestamp.desc())  # type: ignore[attr-defined]
                .limit(1)
            )
            return session.exec(stmt).first()

    def get_base_fee(self, city_id: int, vehicle_id: int) -> Decimal | None:
        with self.session() as session:
            stmt = select(RegionalBaseFee.fee_amount).where(
                RegionalBaseFee.city_id == city_id, RegionalBaseFee.vehicle_id == vehicle_id
            )
            amount = session.exec(stmt).first()
            return Decimal(amount) if amount is not None else None

    def get_extra_fee(self, vehicle_id: int, code: str) -> Decimal | None:
        with self.session() as session:
            stmt = select(ExtraFee.fee_amount).where(
                ExtraFee.vehicle_id == vehicle_id, ExtraFee.code == code
            )
            amount = session.exec(stmt).first()
            return Decimal(amount) if amount is not None else None

    def get_prohibition(self, vehicle_id: int, code: str) -> bool:
        with self.session() as session:
            stmt = select(WorkProhibition.id).where(
                WorkProhibition.vehicle_id == vehicle_id, WorkProhibition.code == code
            )
            return session.exec(stmt).first() is not None

    def resolve_code_item(self, weather_code: WeatherCode) -> str | None:
        with self.session() as session:
            item = session.get(CodeItem, weather_code.name)
            return item.code if item else None

    # --- Writes ---

    def save_measurement(self, measurement: WeatherMeasurement) -> None:
        """Store an observation produced by an external ingestion job."""
        with self.session() as session:
            try:
                session.add(measurement)
                session.commit()
                session.refresh(measurement)
            except Exception as e:
                logger.error(f"Failed to save measurement: {e}")
                session.rollback()
                raise


# Singleton
db = DatabaseHandler()
