# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Use:
- .env (local, gitignored)
- config_local.py (local safe overrides, gitignored)

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "DAYLIST_APP_NAME": "App display name (default: daylist).",
    "DAYLIST_LOG_LEVEL": "Console logging level (default: INFO).",
    # Auth backend
    "DAYLIST_API_BASE_URL": (
        "Auth API base URL; /login and /register are appended "
        "(default: https://backendtodolist-production-e715.up.railway.app)."
    ),
    "DAYLIST_HTTP_TIMEOUT_SECONDS": "Timeout for auth requests (default: 15).",
    "DAYLIST_MIN_PASSWORD_LENGTH": "Minimum password length on registration (default: 6).",
    # Clock
    "DAYLIST_CLOCK_ENABLED": "Run the live clock (true/false, default: true).",
    "DAYLIST_CLOCK_INTERVAL_SECONDS": "Clock refresh interval (default: 1.0).",
    # Paths (gitignored)
    "DAYLIST_DATA_DIR": "Local data directory for logs and the session (default: .local/daylist).",
    "DAYLIST_SESSION_PATH": "Session token file (default: <data_dir>/session.json).",
}
