"""
SkinLogic runtime configuration.

Only service-level knobs live here. Scoring weights, thresholds and the
trend window are part of the engine contract and stay fixed in code.
"""

import os
from typing import List

ENGINE_VERSION = "1.0.0"

API_PREFIX = os.getenv("SKINLOGIC_API_PREFIX", "/api/v1")

LOG_LEVEL = os.getenv("SKINLOGIC_LOG_LEVEL", "INFO").upper()


def get_cors_origins() -> List[str]:
    """Comma-separated SKINLOGIC_CORS_ORIGINS, defaulting to local dev hosts."""
    raw = os.getenv(
        "SKINLOGIC_CORS_ORIGINS",
        "http://localhost:3000,http://127.0.0.1:3000",
    )
    return [origin.strip() for origin in raw.split(",") if origin.strip()]
