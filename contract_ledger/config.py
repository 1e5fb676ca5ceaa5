"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "contract-ledger"
    log_level: str = "INFO"

    # Simulation
    initial_simulation_year: int = 0  # some UI variants started the clock at 1
    reinvest_matured_principal: bool = False  # credit principal back to available funds on completion


settings = Settings()
