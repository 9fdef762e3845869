"""
API configuration.

All settings come from environment variables, read once at import.
"""

import os

from causepilot import __version__

CP_LOG_LEVEL = os.getenv("CP_LOG_LEVEL", "INFO")
CP_RUBRIC_PACK = os.getenv("CP_RUBRIC_PACK", "")
CP_DOCS_ENABLED = os.getenv("CP_DOCS_ENABLED", "true").lower() == "true"
CP_ENGINE_VERSION = os.getenv("CP_ENGINE_VERSION", __version__)
CP_CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CP_CORS_ORIGINS", "http://localhost:3000").split(",")
    if origin.strip()
]
