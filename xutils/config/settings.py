from pathlib import Path
from dotenv import load_dotenv
import os
import pytz

load_dotenv(Path.cwd() / '.env', override=False)

def env_bool(name: str, default: bool = False) -> bool:
    return str(os.getenv(name, str(default))).strip().lower() in {"1", "true", "yes", "on", "y", "t"}

# Ordered most specific first; the parser tries them in exactly this order
FALLBACK_PATTERNS = (
    "yyyy-MM-dd'T'HH:mm:ss.SSS'Z'",
    "yyyy-MM-dd'T'HH:mm:ss'Z'",
    "yyyy-MM-dd HH:mm:ss.SSS",
    "yyyy-MM-dd HH:mm:ss",
    "yyyy/MM/dd HH:mm:ss.SSS",
    "yyyy/MM/dd HH:mm:ss",
    "dd/MM/yyyy HH:mm:ss",
    "MM/dd/yyyy HH:mm:ss",
    "dd-MM-yyyy HH:mm:ss",
    "MM-dd-yyyy HH:mm:ss",
    "dd/MM/yyyy",
    "MM/dd/yyyy",
    "yyyy-MM-dd",
    "yyyy/MM/dd",
    "MM-dd-yyyy",
    "dd-MM-yyyy",
)

SUPPORTED_LOCALES = (
    "id_ID",
    "en_US",
    "en_GB",
    "fr_FR",
    "de_DE",
    "es_ES",
    "it_IT",
    "pt_BR",
)

class Settings:
    # Timezone used as "local" for parsing and rendering; None means system local
    LOCAL_TZ = pytz.timezone(os.getenv('XUTILS_LOCAL_TZ')) if os.getenv('XUTILS_LOCAL_TZ') else None

    # Default render pattern for date helpers
    DATE_FORMAT = os.getenv('XUTILS_DATE_FORMAT', 'dd MM yyyy')

    # Logs
    LOG_LEVEL = os.getenv('XUTILS_LOG_LEVEL', 'WARNING').upper()
    LOG_FILE = Path(os.getenv('XUTILS_LOG_FILE')) if os.getenv('XUTILS_LOG_FILE') else None

    # Log every failed pattern/locale attempt at DEBUG
    DEBUG_PARSE = env_bool("XUTILS_DEBUG_PARSE", True)

    # Parser search space
    FALLBACK_PATTERNS = FALLBACK_PATTERNS
    SUPPORTED_LOCALES = SUPPORTED_LOCALES
