from decimal import Decimal

import structlog

from delivery_fee.exceptions import (
    CodeItemResolution,
    DeliveryFeeError,
    MissingCodeItem,
    ResolvedCodeItem,
)
from delivery_fee.models import City, DeliveryFee, WeatherMeasurement
from delivery_fee.repositories import FeeDataSource
from delivery_fee.weather_codes import WeatherCode, classify

logger = structlog.get_logger("DeliveryFee")


class DeliveryFeeService:
    """Calculates delivery fees from regional base fees and current weather."""

    def __init__(self, repository: FeeDataSource) -> None:
        self.repository = repository

    def get_delivery_fee(self, city_id: int, vehicle_id: int) -> DeliveryFee:
        """
        Calculate the fee for a city and vehicle using the latest measurement
        of the city's weather station.

        Raises:
            DeliveryFeeError: vehicle or city unknown, vehicle forbidden under
                current weather, or no base fee for the combination.
        """
        if not self.repository.vehicle_exists(vehicle_id):
            raise DeliveryFeeError(DeliveryFeeError.Reason.INVALID_VEHICLE_ID)

        city = self.repository.get_city(city_id)
        if city is None:
            raise DeliveryFeeError(DeliveryFeeError.Reason.INVALID_CITY_ID)

        measurement = self.repository.get_latest_measurement(city.wmo_code)
        return self.calculate(city, vehicle_id, measurement)

    def calculate(
        self, city: City, vehicle_id: int, measurement: WeatherMeasurement | None
    ) -> DeliveryFee:
        """Calculate the fee for already loaded inputs."""
        if city.id is None:
            raise DeliveryFeeError(DeliveryFeeError.Reason.INVALID_CITY_ID, "City has no id")
        warnings: list[str] = []

        if measurement is None:
            logger.warning("No weather measurement for station", wmo_code=city.wmo_code)
            warnings.append(f"No weather measurement for station {city.wmo_code}")

        weather_codes = classify(measurement)
        resolutions = self._resolve_code_items(weather_codes, warnings)

        if self._unfit_weather_conditions(vehicle_id, resolutions):
            raise DeliveryFeeError(DeliveryFeeError.Reason.UNFIT_WEATHER_CONDITIONS)

        base_fee = self.repository.get_base_fee(city.id, vehicle_id)
        if base_fee is None:
            raise DeliveryFeeError(DeliveryFeeError.Reason.BASE_FEE_DOES_NOT_EXIST)

        extra_fee = self._extra_fees(vehicle_id, resolutions)

        logger.debug(
            "Delivery fee calculated",
            city_id=city.id,
            vehicle_id=vehicle_id,
            codes=[str(c) for c in weather_codes],
            base_fee=str(base_fee),
            extra_fee=str(extra_fee),
        )
        return DeliveryFee(
            city_id=city.id,
            vehicle_id=vehicle_id,
            base_fee=base_fee,
            extra_fee=extra_fee,
            total_fee=base_fee + extra_fee,
            warnings=warnings,
        )

    def _resolve_code_items(
        self, weather_codes: list[WeatherCode], warnings: list[str]
    ) -> list[CodeItemResolution]:
        resolutions: list[CodeItemResolution] = []
        for weather_code in weather_codes:
            code = self.repository.resolve_code_item(weather_code)
            if code is None:
                missing = MissingCodeItem(weather_code)
                logger.warning("Code item does not exist", code=str(weather_code))
                warnings.append(missing.message)
                resolutions.append(missing)
            else:
                resolutions.append(ResolvedCodeItem(weather_code, code))
        return resolutions

    def _unfit_weather_conditions(
        self, vehicle_id: int, resolutions: list[CodeItemResolution]
    ) -> bool:
        for item in resolutions:
            if isinstance(item, MissingCodeItem):
                continue
            if self.repository.get_prohibition(vehicle_id, item.code):
                logger.info(
                    "Vehicle forbidden by weather", vehicle_id=vehicle_id, code=item.code
                )
                return True
        return False

    def _extra_fees(self, vehicle_id: int, resolutions: list[CodeItemResolution]) -> Decimal:
        total = Decimal("0")
        for item in resolutions:
            if isinstance(item, MissingCodeItem):
                continue
            amount = self.repository.get_extra_fee(vehicle_id, item.code)
            if amount is not None:
                total += amount
        return total
