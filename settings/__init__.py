"""Application settings."""

import os
from pathlib import Path

# Logging
LOG_DIR = Path(os.getenv("LOG_DIR", "logs"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Upstream APIs
CONGRESS_API_KEY = os.getenv("CONGRESS_KEY", "")
CONGRESS_API_BASE_URL = os.getenv("CONGRESS_API_BASE_URL", "https://api.congress.gov/v3")
REP_LOOKUP_URL = os.getenv("REP_LOOKUP_URL", "https://whoismyrepresentative.com/getall_mems.php")
UPSTREAM_TIMEOUT = float(os.getenv("UPSTREAM_TIMEOUT", "30"))

# Vote list defaults
DEFAULT_CONGRESS = int(os.getenv("DEFAULT_CONGRESS", "119"))
DEFAULT_SESSION = int(os.getenv("DEFAULT_SESSION", "2"))
DEFAULT_LIMIT = int(os.getenv("DEFAULT_LIMIT", "100"))

# Throttling
MAX_CONCURRENT = int(os.getenv("MAX_CONCURRENT", "20"))
REQUEST_DELAY = float(os.getenv("REQUEST_DELAY", "0.05"))

# Cache
CACHE_SWEEP_INTERVAL = int(os.getenv("CACHE_SWEEP_INTERVAL", str(24 * 60 * 60)))
CACHE_SINGLE_FLIGHT = os.getenv("CACHE_SINGLE_FLIGHT", "false").lower() in ("1", "true", "yes")
