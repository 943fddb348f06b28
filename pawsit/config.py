from pydantic import BaseModel
import os
from dotenv import load_dotenv
load_dotenv()  # carga el archivo .env de la raíz


def _flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


class Settings(BaseModel):
    app_name: str = os.getenv("APP_NAME", "PawSit")
    env: str = os.getenv("APP_ENV", "dev")
    mongodb_uri: str = os.getenv("MONGODB_URI", "mongodb://localhost:27017")
    db_name: str = os.getenv("DB_NAME", "pawsit")
    frontend_base_url: str = os.getenv("FRONTEND_BASE_URL", "http://localhost:5173")
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # Grafo de estados de reservas: permisivo salvo que se active
    enforce_status_transitions: bool = _flag("ENFORCE_STATUS_TRANSITIONS")

    rate_limit_bookings: str = os.getenv("RATE_LIMIT_BOOKINGS", "15/minute")
    rate_limit_messages: str = os.getenv("RATE_LIMIT_MESSAGES", "60/minute")
    rate_limit_reviews: str = os.getenv("RATE_LIMIT_REVIEWS", "10/minute")


_settings: Settings | None = None
def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
