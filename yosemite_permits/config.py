import os
from datetime import datetime
from zoneinfo import ZoneInfo

from dotenv import load_dotenv

load_dotenv()

# Backend Configuration
API_URL = "https://yosemite.org/wp-content/plugins/wildtrails/query.php"

COMMON_HEADERS = {
    "Accept": "*/*",
    "Accept-Language": "en-US,en;q=0.9",
    "Cache-Control": "no-cache",
    "Content-Type": "application/json",
    "Authority": "yosemite.org",
    "Sec-Ch-Ua": '"Chromium";v="88", "Google Chrome";v="88", ";Not A Brand";v="99"',
    "Sec-Ch-Ua-Mobile": "?0",
    "Sec-Fetch-Dest": "empty",
    "Sec-Fetch-Mode": "cors",
    "Sec-Fetch-Site": "same-origin",
    "X-Requested-With": "XMLHttpRequest",
    "Pragma": "no-cache",
    "Referer": "https://yosemite.org/planning-your-wilderness-permit/",
    "User-Agent": "Mozilla/5.0 (Macintosh; Intel Mac OS X 11_1_0) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/88.0.4324.50 Safari/537.36",
}

# Status type the backend reports on a successful query
OK_STATUS_TYPE = "message"

COOKIE_ENV_VAR = "COOKIE"

# Network parameters
REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "20"))
MAX_RETRIES = int(os.getenv("MAX_RETRIES", "3"))
MAX_WORKERS = int(os.getenv("MAX_WORKERS", "4"))

# Window Configuration
WINDOW_LENGTH_DAYS = 15  # walk-up window reported by default, today included
WALKUP_DAYS = 15         # dates this many days out or closer use walk-up capacity
ADVANCE_HORIZON_DAYS = 168  # 24 weeks of advance reservations

TIMEZONE = "US/Pacific"


def today():
    """Current calendar date at the park."""
    return datetime.now(ZoneInfo(TIMEZONE)).date()
