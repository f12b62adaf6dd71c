import os
from dotenv import load_dotenv

# Load environment variables from the project root (one level up from the package)
load_dotenv(dotenv_path=os.path.join(os.path.dirname(__file__), "..", ".env"))

APP_ENV = os.getenv("APP_ENV", "prod").lower()
IS_DEV_MODE = APP_ENV in {"dev", "development"}

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG" if IS_DEV_MODE else "INFO").upper()
