"""
Recipe Units Backend Configuration
"""

import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

APP_NAME = "Recipe Units API"
APP_VERSION = "1.0.0"

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Display defaults, used when a request leaves a selector out
DEFAULT_UNIT_SYSTEM = os.getenv("DEFAULT_UNIT_SYSTEM", "us").lower()
DEFAULT_TEMP_UNIT = os.getenv("DEFAULT_TEMP_UNIT", "f").lower()

# CORS - Frontend URLs
CORS_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "http://localhost:5173",
    os.getenv("FRONTEND_URL", ""),  # Production frontend URL
]
# Filter empty strings
CORS_ORIGINS = [origin for origin in CORS_ORIGINS if origin]
