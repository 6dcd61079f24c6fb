# config.py
import os
from pathlib import Path
from dotenv import load_dotenv
load_dotenv()

DEFAULT_JWT_SECRET = "dev_secret_change_me"

ENVIRONMENT = os.getenv("ENVIRONMENT", "development")
JWT_SECRET = os.getenv("JWT_SECRET", DEFAULT_JWT_SECRET)   # override outside dev
JWT_ALGORITHM = "HS256"
TOKEN_EXPIRE_DAYS = 7
OWNER_ROLE = "owner"

PEPPER = os.getenv("PEPPER", "")

DATA_DIR = Path(os.getenv("DATA_DIR", "server_data"))
DATABASE_URL = os.getenv("DATABASE_URL")   # unset -> JSON files in DATA_DIR

PORT = int(os.getenv("PORT", 5175))
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# client
API_URL = os.getenv("SEHYAATRI_API_URL", f"http://localhost:{PORT}")
TOKEN_FILE = Path(os.getenv("SEHYAATRI_TOKEN_FILE", Path.home() / ".sehyaatri" / "owner_token"))
REQUEST_TIMEOUT = float(os.getenv("SEHYAATRI_TIMEOUT", 30))
