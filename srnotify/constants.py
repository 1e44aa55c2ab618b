"""Constants used across srnotify.

Endpoint, cookie name and request fingerprint are fixed by the site and are
not user-configurable.
"""

# Site endpoints
WEB_ORIGIN = "https://www.speedrun.com"
BASE_URL = f"{WEB_ORIGIN}/api/v2"
NOTIFICATIONS_ENDPOINT = "/GetNotifications"

# Session cookie issued by the site after login
SESSION_COOKIE_NAME = "PHPSESSID"

REQUEST_TIMEOUT_S = 10.0

# Required by the API; meaning of the fields is undocumented
REQUEST_BODY: dict[str, int] = {"u": 1, "i": 1}

# Browser fingerprint expected by the server-side request filter
BROWSER_HEADERS: dict[str, str] = {
    "Accept": "application/json",
    "Content-Type": "application/json",
    "Origin": WEB_ORIGIN,
    "Referer": f"{WEB_ORIGIN}/notifications",
    "Accept-Language": "en-US,en;q=0.9",
    "User-Agent": (
        "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    ),
}

# Interactive viewer chrome (borders, header, status bar)
VIEWPORT_CHROME_WIDTH = 4
VIEWPORT_CHROME_HEIGHT = 8

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
