from pydantic_settings import BaseSettings, SettingsConfigDict

from aggregate_paginator.core.constants import DEFAULT_LIMIT, DEFAULT_PAGE


class Settings(BaseSettings):
    PROJECT_NAME: str = "Aggregate Paginator"

    # Pagination defaults
    PAGINATION_DEFAULT_PAGE: int = DEFAULT_PAGE
    PAGINATION_DEFAULT_LIMIT: int = DEFAULT_LIMIT

    model_config = SettingsConfigDict(case_sensitive=True, env_file=".env")


settings = Settings()
