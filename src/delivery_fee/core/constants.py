# Air temperature thresholds (°C, inclusive bounds)
AIR_TEMP_LOWER = -10
AIR_TEMP_UPPER = 0

# Wind speed thresholds (m/s, inclusive bounds)
WIND_SPEED_LOWER = 10
WIND_SPEED_UPPER = 20

# Phenomenon keywords, checked in this order
RAIN_KEYWORDS = ("rain",)
SNOW_SLEET_KEYWORDS = ("snow", "sleet")
GLAZE_HAIL_THUNDER_KEYWORDS = ("glaze", "hail", "thunder")

# Default reference data, used when no reference_data_file is configured.
# Amounts are strings so they load into Decimal without float rounding.
DEFAULT_REFERENCE_DATA: dict = {
    "stations": [
        {"wmo_code": 26038, "name": "Tallinn-Harku"},
        {"wmo_code": 26242, "name": "Tartu-Tõravere"},
        {"wmo_code": 41803, "name": "Pärnu"},
    ],
    "cities": [
        {"id": 1, "name": "Tallinn", "wmo_code": 26038},
        {"id": 2, "name": "Tartu", "wmo_code": 26242},
        {"id": 3, "name": "Pärnu", "wmo_code": 41803},
    ],
    "vehicles": [
        {"id": 1, "type": "car"},
        {"id": 2, "type": "scooter"},
        {"id": 3, "type": "bike"},
    ],
    "code_items": [
        {"code": "AT_UNDER_MINUS_TEN", "description": "Air temperature below -10 °C"},
        {"code": "AT_MINUS_TEN_TO_ZERO", "description": "Air temperature between -10 °C and 0 °C"},
        {"code": "WS_TEN_TO_TWENTY", "description": "Wind speed between 10 m/s and 20 m/s"},
        {"code": "WS_ABOVE_TWENTY", "description": "Wind speed above 20 m/s"},
        {"code": "WP_RAIN", "description": "Rain"},
        {"code": "WP_SNOW_SLEET", "description": "Snow or sleet"},
        {"code": "WP_GLAZE_HAIL_THUNDER", "description": "Glaze, hail or thunder"},
    ],
    "base_fees": [
        {"city_id": 1, "vehicle_id": 1, "amount": "4.00"},
        {"city_id": 1, "vehicle_id": 2, "amount": "3.50"},
        {"city_id": 1, "vehicle_id": 3, "amount": "3.00"},
        {"city_id": 2, "vehicle_id": 1, "amount": "3.50"},
        {"city_id": 2, "vehicle_id": 2, "amount": "3.00"},
        {"city_id": 2, "vehicle_id": 3, "amount": "2.50"},
        {"city_id": 3, "vehicle_id": 1, "amount": "3.00"},
        {"city_id": 3, "vehicle_id": 2, "amount": "2.50"},
        {"city_id": 3, "vehicle_id": 3, "amount": "2.00"},
    ],
    "extra_fees": [
        {"vehicle_id": 2, "code": "AT_UNDER_MINUS_TEN", "amount": "1.00"},
        {"vehicle_id": 3, "code": "AT_UNDER_MINUS_TEN", "amount": "1.00"},
        {"vehicle_id": 2, "code": "AT_MINUS_TEN_TO_ZERO", "amount": "0.50"},
        {"vehicle_id": 3, "code": "AT_MINUS_TEN_TO_ZERO", "amount": "0.50"},
        {"vehicle_id": 3, "code": "WS_TEN_TO_TWENTY", "amount": "0.50"},
        {"vehicle_id": 2, "code": "WP_RAIN", "amount": "0.50"},
        {"vehicle_id": 3, "code": "WP_RAIN", "amount": "0.50"},
        {"vehicle_id": 2, "code": "WP_SNOW_SLEET", "amount": "1.00"},
        {"vehicle_id": 3, "code": "WP_SNOW_SLEET", "amount": "1.00"},
    ],
    "prohibitions": [
        {"vehicle_id": 3, "code": "WS_ABOVE_TWENTY"},
        {"vehicle_id": 2, "code": "WP_GLAZE_HAIL_THUNDER"},
        {"vehicle_id": 3, "code": "WP_GLAZE_HAIL_THUNDER"},
    ],
}
