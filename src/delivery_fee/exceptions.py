from dataclasses import dataclass
from enum import Enum

from delivery_fee.weather_codes import WeatherCode


class DeliveryFeeError(Exception):
    """Raised when a delivery fee cannot be calculated."""

    class Reason(Enum):
        INVALID_VEHICLE_ID = "Invalid vehicle ID"
        INVALID_CITY_ID = "Invalid city ID"
        UNFIT_WEATHER_CONDITIONS = "Usage of selected vehicle type is forbidden"
        BASE_FEE_DOES_NOT_EXIST = "Invalid city and vehicle combination"

    def __init__(self, reason: "DeliveryFeeError.Reason", message: str | None = None) -> None:
        self.reason = reason
        self.message = message or reason.value
        super().__init__(self.message)


@dataclass(frozen=True)
class ResolvedCodeItem:
    weather_code: WeatherCode
    code: str


@dataclass(frozen=True)
class MissingCodeItem:
    """A weather code with no configured code item. Skipped, never fatal."""

    weather_code: WeatherCode

    @property
    def message(self) -> str:
        return f"Code item does not exist. Code: {self.weather_code}"


CodeItemResolution = ResolvedCodeItem | MissingCodeItem
