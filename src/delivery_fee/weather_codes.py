"""
Weather classification.

Maps a measurement to at most one code per axis (air temperature, wind speed,
phenomenon). Each axis is evaluated independently; a missing value yields no code.
"""

from enum import StrEnum

from delivery_fee.core.constants import (
    AIR_TEMP_LOWER,
    AIR_TEMP_UPPER,
    GLAZE_HAIL_THUNDER_KEYWORDS,
    RAIN_KEYWORDS,
    SNOW_SLEET_KEYWORDS,
    WIND_SPEED_LOWER,
    WIND_SPEED_UPPER,
)
from delivery_fee.models import WeatherMeasurement


class WeatherCode(StrEnum):
    AT_UNDER_MINUS_TEN = "AT_UNDER_MINUS_TEN"
    AT_MINUS_TEN_TO_ZERO = "AT_MINUS_TEN_TO_ZERO"
    WS_TEN_TO_TWENTY = "WS_TEN_TO_TWENTY"
    WS_ABOVE_TWENTY = "WS_ABOVE_TWENTY"
    WP_RAIN = "WP_RAIN"
    WP_SNOW_SLEET = "WP_SNOW_SLEET"
    WP_GLAZE_HAIL_THUNDER = "WP_GLAZE_HAIL_THUNDER"


def air_temperature_code(air_temperature: float | None) -> WeatherCode | None:
    if air_temperature is None:
        return None
    if air_temperature < AIR_TEMP_LOWER:
        return WeatherCode.AT_UNDER_MINUS_TEN
    if AIR_TEMP_LOWER <= air_temperature <= AIR_TEMP_UPPER:
        return WeatherCode.AT_MINUS_TEN_TO_ZERO
    return None


def wind_speed_code(wind_speed: float | None) -> WeatherCode | None:
    if wind_speed is None:
        return None
    if WIND_SPEED_LOWER <= wind_speed <= WIND_SPEED_UPPER:
        return WeatherCode.WS_TEN_TO_TWENTY
    if wind_speed > WIND_SPEED_UPPER:
        return WeatherCode.WS_ABOVE_TWENTY
    return None


def phenomenon_code(phenomenon: str | None) -> WeatherCode | None:
    """First matching rule wins: rain, then snow/sleet, then glaze/hail/thunder."""
    if phenomenon is None:
        return None

    text = phenomenon.lower()
    if any(word in text for word in RAIN_KEYWORDS):
        return WeatherCode.WP_RAIN
    if any(word in text for word in SNOW_SLEET_KEYWORDS):
        return WeatherCode.WP_SNOW_SLEET
    if any(word in text for word in GLAZE_HAIL_THUNDER_KEYWORDS):
        return WeatherCode.WP_GLAZE_HAIL_THUNDER
    return None


def classify(measurement: WeatherMeasurement | None) -> list[WeatherCode]:
    """Return the weather codes of a measurement in axis order (temperature, wind, phenomenon)."""
    if measurement is None:
        return []

    codes = [
        air_temperature_code(measurement.air_temperature),
        wind_speed_code(measurement.wind_speed),
        phenomenon_code(measurement.phenomenon),
    ]
    return [code for code in codes if code is not None]
