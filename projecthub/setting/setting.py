"""Runtime settings for ProjectHub, read from environment variables."""

from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings

from ..core.constants import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE


class Settings(BaseSettings):
    app_name: str = "ProjectHub"
    database_url: str = "sqlite:///projecthub.db"
    db_echo: bool = False

    # Bounds applied to project search results
    project_page_size_default: int = DEFAULT_PAGE_SIZE
    project_page_size_max: int = MAX_PAGE_SIZE

    event_bus_workers: int = 2

    @model_validator(mode="after")
    def _check_page_sizes(self):
        if self.project_page_size_default < 1:
            raise ValueError("project_page_size_default must be at least 1")
        if self.project_page_size_default > self.project_page_size_max:
            raise ValueError("project_page_size_default cannot exceed project_page_size_max")
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()
