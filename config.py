"""Configuration constants for the Field Risk Screening helper."""

# Default field site (lat, lon)
DEFAULT_LOCATION = {"name": "Stavanger", "lat": 58.97, "lon": 5.73}

# Open-Meteo API configuration
OPEN_METEO_BASE_URL = "https://api.open-meteo.com/v1/forecast"
OPEN_METEO_GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"
HOURLY_PARAMS = [
    "precipitation",
    "snowfall",
]
REQUEST_TIMEOUT_S = 10
FETCH_MAX_RETRIES = 1  # refreshes are user-initiated, no automatic retry

# Geocoding
GEOCODING_COUNTRY = "NO"
GEOCODING_RESULT_COUNT = 5

# Forecast horizon for rain/snow aggregation
HORIZON_HOURS = 6

# Hazard rule thresholds
WIND_HIGH_KPH = 40          # km/h, strictly above
RAIN_MODERATE_MM = 2        # mm, at or above
FREEZE_THAW_TEMP_C = 1      # °C, at or below (with any precipitation)
FREEZING_TEMP_C = 0         # °C, at or below
SNOW_ACCUMULATION_CM = 1    # cm, strictly above
SNOW_HEAVY_CM = 5           # cm, strictly above

# Points added per triggered rule
POINTS_WIND = 2
POINTS_RAIN = 2
POINTS_FREEZE_THAW = 3
POINTS_FREEZING = 2
POINTS_SNOW_ACCUMULATION = 2
POINTS_SNOW_HEAVY = 3
POINTS_GROUND_WET = 2
POINTS_GROUND_UNSTABLE = 3
POINTS_TERRAIN_HILLY = 2
SEVERITY_SURCHARGE = {
    "low": 0,
    "medium": 1,
    "high": 2,
}

# Risk level thresholds (applied to the summed score)
LEVEL_NOT_RECOMMENDED_MIN = 4
LEVEL_CAUTION_MIN = 2

# Simplified basin classification by latitude (upper bound, name)
BASIN_BANDS = [
    (60, "North Sea Basin"),
    (70, "Norwegian Sea Basin"),
]
BASIN_NORTHERNMOST = "Barents Sea Basin"

# User-facing messages
MSG_WEATHER_FAILED = "Weather fetch failed. Click Refresh to try again."
MSG_CITY_NOT_FOUND = "City not found."
MSG_EMPTY_CITY = "Please type a city name."
MSG_NO_HAZARDS = "No major hazards detected from the inputs."
REPORT_GEOLOGY_NOTE = (
    "Interpret map panel for structural and deposit-related field considerations."
)
