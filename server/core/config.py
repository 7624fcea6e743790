# server/core/config.py

import os
import logging
from dotenv import load_dotenv


load_dotenv()

logger = logging.getLogger(__name__)


def _flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./app.db")

SECRET_KEY = os.getenv("JWT_SECRET_KEY")
if not SECRET_KEY:
    logger.warning("JWT_SECRET_KEY is not set. Falling back to an insecure development key.")
    SECRET_KEY = "insecure-development-key-change-me"

ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")

# 0 keeps tokens free of an "exp" claim
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "0"))

BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "10"))

PROTECT_PRODUCT_ROUTES = _flag("PROTECT_PRODUCT_ROUTES")

CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

PORT = int(os.getenv("PORT", "5000"))
