# =============================================================================
# core/config.py  -  Runtime Configuration
# =============================================================================
#
# The server has exactly one setting: the base URL of the Clawsfund API.
# It is read ONCE, at import time, and never changes afterwards.
#
#   CLAWSFUND_API_URL   Base URL prefixed to every upstream path.
#                       Default: https://clawsfund.com/api
#                       Local backend: http://localhost:3000
#
# main.py calls load_dotenv() before importing anything from core/, so the
# value may also come from a .env file in the working directory.
# =============================================================================

import os

DEFAULT_API_BASE = "https://clawsfund.com/api"


def resolve_api_base(environ=None) -> str:
    """Return the configured API base URL without a trailing slash."""
    environ = os.environ if environ is None else environ
    base = environ.get("CLAWSFUND_API_URL") or DEFAULT_API_BASE
    return base.rstrip("/")


API_BASE = resolve_api_base()
