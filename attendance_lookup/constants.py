# --- Environment Constants ---
ENV_DEVELOPMENT = "development"
ENV_STAGING = "staging"
ENV_PRODUCTION = "production"
ENV_TESTING = "testing"
# --- End Environment Constants ---

# --- Display Constants ---
PLACEHOLDER = "—"  # Shown wherever a field is missing or could not be parsed
LOCATION_PREVIEW_LENGTH = 15  # Card view truncates the work location to this many characters

# --- Attendance Row Layout ---
ROW_LENGTH = 11

# --- Upstream Constants ---
DEFAULT_SCRIPT_BASE_URL = "https://script.google.com/macros/s"
DEFAULT_SCRIPT_ACTION = "getAttendanceDataByMobile"
UPSTREAM_ERROR_MESSAGE = "Failed to fetch data from external service"

# --- Translation Constants ---
SOURCE_LANGUAGE = "en"
AUTO_DETECT = "auto"
UNKNOWN_LANGUAGE = "unknown"
DEFAULT_TRANSLATION_ENDPOINTS = [
    "https://libretranslate.de/translate",
    "https://translate.argosopentech.com/translate",
    "https://translate.fortytwo-it.com/translate",
]

# --- Lookup Constants ---
MOBILE_NUMBER_LENGTH = 10
MOBILE_NUMBER_PREFIX = "0"
MONTH_OPTIONS_COUNT = 3  # Current month plus the two before it
