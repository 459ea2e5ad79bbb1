from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="ADMISSIONS_", env_file=".env", extra="ignore")

    environment: str = "dev"
    # one sub-directory per organization holding entry_requirements.json and symbol_points.json
    data_dir: str = "data"
    default_organization: str = "demo"
    log_level: str | None = None  # overrides the environment-based default
    host: str = "0.0.0.0"
    port: int = 8000


settings = Settings()  # type: ignore
