"""API configuration constants.

Single source of truth for settings used across the API layer. Values come
from the environment (a ``.env`` file is picked up from the project root).
"""

import os

from dotenv import find_dotenv, load_dotenv

# Load .env from project root (find_dotenv searches parent directories)
load_dotenv(find_dotenv())

APP_ENV = os.getenv("APP_ENV", "development")
IS_PRODUCTION = APP_ENV == "production"

# Admin access - one shared secret, no user accounts
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "admin")  # Default for development only

# Sessions
SESSION_SECRET = os.getenv("SESSION_SECRET", "dev-session-secret-change-in-production")
SESSION_COOKIE_NAME = os.getenv("SESSION_COOKIE_NAME", "contos_session")
SESSION_MAX_AGE_SECONDS = 24 * 60 * 60
COOKIE_SECURE = IS_PRODUCTION

# Document store: "memory" or "firestore"
STORE_BACKEND = os.getenv("STORE_BACKEND", "memory").lower()

# Firebase service account. Either the whole JSON document, or the three
# fields the Firebase console hands out.
FIREBASE_CREDENTIALS = os.getenv("FIREBASE_CREDENTIALS", "")
FIREBASE_PROJECT_ID = os.getenv("FIREBASE_PROJECT_ID", "")
FIREBASE_CLIENT_EMAIL = os.getenv("FIREBASE_CLIENT_EMAIL", "")
FIREBASE_PRIVATE_KEY = os.getenv("FIREBASE_PRIVATE_KEY", "")

# Comma-separated list of allowed browser origins
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "").split(",") if o.strip()]

# Logging
LOG_FORMAT = os.getenv("LOG_FORMAT", "json").lower()
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Server
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "5000"))
