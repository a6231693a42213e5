from pydantic_settings import BaseSettings, SettingsConfigDict

from ghrest.config_loader import apply_repo_config, load_repo_config


class Settings(BaseSettings):
    # --- GitHub ---
    github_token: str = ""  # In Actions, GitHub passes this as GITHUB_TOKEN
    github_api_url: str = "https://api.github.com"  # GHES: https://host/api/v3
    github_api_version: str = "2022-11-28"
    user_agent: str = "ghrest"

    # --- Transport ---
    request_timeout: float = 30.0

    # --- Marketplace ---
    # Use the stubbed (test data) marketplace listings instead of the live ones
    marketplace_stubbed: bool = False

    # --- Logging ---
    log_level: str = "INFO"

    # --- Pydantic settings ---
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")


# Env first, then the repo config file on top
settings = Settings()
apply_repo_config(settings, load_repo_config())
