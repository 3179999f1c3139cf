import json
import sys

import structlog
from sqlalchemy.exc import SQLAlchemyError

from delivery_fee.config import settings
from delivery_fee.core.logging import setup_logging
from delivery_fee.database import db
from delivery_fee.exceptions import DeliveryFeeError
from delivery_fee.seed import load_reference_data, seed_reference_data
from delivery_fee.service import DeliveryFeeService

logger = structlog.get_logger("Main")

USAGE = "usage: delivery-fee <city_id> <vehicle_id>"
DATABASE_ERROR = "DATABASE_ERROR"


def parse_args(argv: list[str]) -> tuple[int, int] | None:
    if len(argv) != 2:
        return None
    try:
        return int(argv[0]), int(argv[1])
    except ValueError:
        return None


def print_error(reason: str, message: str) -> None:
    print(json.dumps({"reason": reason, "message": message}))


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    if args is None:
        print(USAGE, file=sys.stderr)
        return 2
    city_id, vehicle_id = args

    # stdout carries the result only
    setup_logging(stream=sys.stderr)

    if not db.connect(retries=settings.db_connect_retries, delay=settings.db_connect_delay):
        logger.error("Failed to connect to DB. Exiting.")
        print_error(DATABASE_ERROR, "Failed to connect to database")
        return 1

    try:
        if settings.seed_on_startup:
            with db.session() as session:
                seed_reference_data(session, load_reference_data(settings.reference_data_file))

        fee = DeliveryFeeService(db).get_delivery_fee(city_id, vehicle_id)
    except DeliveryFeeError as e:
        logger.info("Delivery fee rejected", reason=e.reason.name, city_id=city_id, vehicle_id=vehicle_id)
        print_error(e.reason.name, e.message)
        return 1
    except SQLAlchemyError as e:
        logger.error("Database error", error=str(e), city_id=city_id, vehicle_id=vehicle_id)
        print_error(DATABASE_ERROR, str(e))
        return 1

    print(fee.model_dump_json())
    return 0


if __name__ == "__main__":
    sys.exit(main())
