"""Configuration for the ARIA Access tool server.

Loads settings from environment variables (via a .env file or the system
environment). Every setting has a default so the package can be imported
without any configuration at all; missing credentials only surface when a
tool actually needs to talk to ARIA.

Credentials read here are only the *startup* values. The ``authenticate``
tool replaces them at runtime on the shared client session.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env file from the project root if it exists
_env_path = Path(__file__).resolve().parent.parent.parent / ".env"
load_dotenv(_env_path)


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() not in ("0", "false", "no", "off")


# --- ARIA connection ---
ARIA_BASE_URL: str = os.getenv("ARIA_BASE_URL", "https://api.ariaaccess.com")

# OAuth2 client credentials and the ARIA user used for the password grant
ARIA_CLIENT_ID: str = os.getenv("ARIA_CLIENT_ID", "")
ARIA_CLIENT_SECRET: str = os.getenv("ARIA_CLIENT_SECRET", "")
ARIA_USERNAME: str = os.getenv("ARIA_USERNAME", "")
ARIA_PASSWORD: str = os.getenv("ARIA_PASSWORD", "")

# ARIA does not report a usable token lifetime, so cached tokens are trusted
# for this many seconds after they are issued.
ARIA_TOKEN_TTL_SECONDS: float = float(os.getenv("ARIA_TOKEN_TTL_SECONDS", "3600"))

# --- HTTP transport ---
ARIA_HTTP_TIMEOUT: float = float(os.getenv("ARIA_HTTP_TIMEOUT", "30"))
ARIA_SSL_VERIFY: bool = _env_bool("ARIA_SSL_VERIFY", "true")

# --- Gateway request defaults ---
# Values ARIA expects on write requests when the caller does not supply one.
ARIA_HOSPITAL_NAME: str = os.getenv("ARIA_HOSPITAL_NAME", "AA_Hospital_1")
ARIA_DEPARTMENT: str = os.getenv("ARIA_DEPARTMENT", "Oncology11")
ARIA_AREA_NAME: str = os.getenv("ARIA_AREA_NAME", "Caller Application Name")

# --- Logging ---
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
