"""
Reference data seeding.

Loads stations, cities, vehicles, code items and fee tables from a YAML file
(or the built-in defaults) and inserts whatever is missing.
"""

import copy
import logging
import typing
from decimal import Decimal
from pathlib import Path

import yaml
from sqlmodel import Session, SQLModel, select

from delivery_fee.core.constants import DEFAULT_REFERENCE_DATA
from delivery_fee.models import (
    City,
    CodeItem,
    ExtraFee,
    RegionalBaseFee,
    Vehicle,
    WeatherStation,
    WorkProhibition,
)

logger = logging.getLogger("Seed")

SECTIONS = (
    "stations",
    "cities",
    "vehicles",
    "code_items",
    "base_fees",
    "extra_fees",
    "prohibitions",
)


def load_reference_data(path: Path | None = None) -> dict[str, list[dict[str, typing.Any]]]:
    """
    Read reference data from a YAML file.
    Sections missing from the file fall back to the built-in defaults.
    """
    data = copy.deepcopy(DEFAULT_REFERENCE_DATA)
    if path is None:
        return data

    with open(path, encoding="utf-8") as f:
        file_data = yaml.safe_load(f) or {}

    if not isinstance(file_data, dict):
        raise ValueError(f"Reference data in {path} must be a mapping")

    for section in SECTIONS:
        if section in file_data:
            data[section] = file_data[section] or []

    logger.info(f"Loaded reference data from {path}")
    return data


def _exists(session: Session, model: type[SQLModel], **filters: typing.Any) -> bool:
    stmt = select(model)
    for column, value in filters.items():
        stmt = stmt.where(getattr(model, column) == value)
    return session.exec(stmt).first() is not None


def seed_reference_data(session: Session, data: dict[str, list[dict[str, typing.Any]]]) -> int:
    """Insert rows not yet present. Returns the number of inserted rows."""
    inserted = 0

    def add(model: type[SQLModel], row: SQLModel, **keys: typing.Any) -> None:
        nonlocal inserted
        if not _exists(session, model, **keys):
            session.add(row)
            inserted += 1

    for s in data.get("stations", []):
        add(WeatherStation, WeatherStation(**s), wmo_code=s["wmo_code"])
    for c in data.get("code_items", []):
        add(CodeItem, CodeItem(**c), code=c["code"])
    session.flush()

    for v in data.get("vehicles", []):
        add(Vehicle, Vehicle(**v), type=v["type"])
    for c in data.get("cities", []):
        add(City, City(**c), name=c["name"])
    session.flush()

    for f in data.get("base_fees", []):
        add(
            RegionalBaseFee,
            RegionalBaseFee(
                city_id=f["city_id"], vehicle_id=f["vehicle_id"], fee_amount=Decimal(str(f["amount"]))
            ),
            city_id=f["city_id"],
            vehicle_id=f["vehicle_id"],
        )
    for f in data.get("extra_fees", []):
        add(
            ExtraFee,
            ExtraFee(vehicle_id=f["vehicle_id"], code=f["code"], fee_amount=Decimal(str(f["amount"]))),
            vehicle_id=f["vehicle_id"],
            code=f["code"],
        )
    for p in data.get("prohibitions", []):
        add(
            WorkProhibition,
            WorkProhibition(vehicle_id=p["vehicle_id"], code=p["code"]),
            vehicle_id=p["vehicle_id"],
            code=p["code"],
        )

    session.commit()
    logger.info(f"Seeded {inserted} reference rows")
    return inserted
