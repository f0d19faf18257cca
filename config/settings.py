import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv(Path(__file__).parent.parent / ".env")

class Settings:
    APP_ENV: str = os.getenv("APP_ENV", "development")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FILE: str = os.getenv("LOG_FILE", "logs/advisor.log")
    REPORT_OUTPUT_DIR: Path = Path(os.getenv("REPORT_OUTPUT_DIR", "./reports"))
    ORGANIZATION_NAME: str = os.getenv("ORGANIZATION_NAME", "")
    VERSION: str = "1.0.0"
    APP_NAME: str = "NIS2 Exposure Advisor"

    @classmethod
    def validate(cls) -> list:
        warnings = []
        if not cls.ORGANIZATION_NAME:
            warnings.append("ORGANIZATION_NAME not set — reports will be unnamed.")
        return warnings

    @classmethod
    def organization_label(cls) -> str:
        return cls.ORGANIZATION_NAME or "Unnamed Organization"

settings = Settings()
