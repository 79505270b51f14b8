from pathlib import Path
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings

DEFAULT_DATA_ROOT = Path(__file__).resolve().parents[2] / "data"


class Settings(BaseSettings):
    data_root: Path = Field(default=DEFAULT_DATA_ROOT, validation_alias="DATA_ROOT")
    data_folder: str = Field(default="example", validation_alias="DATA_FOLDER")
    csv_separator: str = Field(default=";", validation_alias="CSV_SEPARATOR")
    log_dev_mode: bool = Field(default=True, validation_alias="LOG_DEV_MODE")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    cors_origins: List[str] = Field(
        default=["http://localhost:3000"], validation_alias="CORS_ORIGINS"
    )

    class Config:
        env_file = ".env"
        extra = "allow"

    @property
    def data_dir(self) -> Path:
        return self.data_root / self.data_folder


settings = Settings()
