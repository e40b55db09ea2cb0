import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


@dataclass
class Settings:
    # Veri dosyası
    data_file: str = os.getenv("LIBRARY_DATA_FILE", "library.csv")

    # Günlükleme
    log_level: str = os.getenv("LOG_LEVEL", "WARNING").upper()

    # Uygulama Ayarları
    app_name: str = os.getenv("APP_NAME", "Library System")
    confirm_deletions: bool = _env_flag("CONFIRM_DELETIONS", "True")


settings = Settings()
