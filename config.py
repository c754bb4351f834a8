import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()

@dataclass
class Settings:
    # Application
    app_name: str = os.getenv("APP_NAME", "Library Catalogue")
    app_version: str = os.getenv("APP_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "False").lower() in ("true", "1", "yes")

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "WARNING").upper()

    # CLI output: plain | json | rich
    output_mode: str = os.getenv("LIB_CLI_OUTPUT", "plain").lower()

    # Catalogue
    seed_demo_data: bool = os.getenv("SEED_DEMO_DATA", "True").lower() in ("true", "1", "yes")
    long_audio_book_minutes: int = int(os.getenv("LONG_AUDIO_BOOK_MINUTES", "480"))  # 8 hours


settings = Settings()
