from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env")

    log_file: str | None = Field(default=None)
    log_level: str = Field(default="info")
    minio_url: str = "localhost:9000"
    minio_access_key: str = "minioadmin"
    minio_secret_key: str = "minioadmin"
    minio_bucket: str = "arclead"
    minio_secure: bool = False
    public_base_url: str = "https://your-r2-domain.com"
    export_title_suffix: str = "아크리드 아티스트"


config = Settings()
