from delivery_fee.core.logging import setup_logging
from delivery_fee.exceptions import DeliveryFeeError
from delivery_fee.models import DeliveryFee
from delivery_fee.service import DeliveryFeeService
from delivery_fee.weather_codes import WeatherCode

__all__ = ["DeliveryFee", "DeliveryFeeError", "DeliveryFeeService", "WeatherCode", "setup_logging"]
