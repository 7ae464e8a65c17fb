import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))


class Config:
    # Flask Configuration
    SECRET_KEY = os.getenv("SECRET_KEY", "dev")

    # Process surface
    HOST = "0.0.0.0"
    PORT = int(os.getenv("PORT", 5000))
    APP_ENV = os.getenv("APP_ENV") or os.getenv("NODE_ENV", "production")

    # Upstream API (everything under /api is forwarded here)
    UPSTREAM_HOST = os.getenv("UPSTREAM_HOST", "localhost")
    UPSTREAM_PORT = int(os.getenv("UPSTREAM_PORT", 4000))

    # Frontend assets
    FRONTEND_DIST = os.getenv("FRONTEND_DIST", os.path.join(BASE_DIR, "dist", "public"))
    FRONTEND_DEV_DIR = os.getenv("FRONTEND_DEV_DIR", os.path.join(BASE_DIR, "client"))

    # Database Configuration
    DATABASE_URL = os.getenv("DATABASE_URL")

    # Client base URL
    API_URL = os.getenv("API_URL", "http://localhost:4000/api")

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
