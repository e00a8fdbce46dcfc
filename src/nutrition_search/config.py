"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    usda_api_key: str = "DEMO_KEY"
    usda_base_url: str = "https://api.nal.usda.gov/fdc/v1"
    open_food_facts_search_url: str = "https://world.openfoodfacts.org/cgi/search.pl"
    open_food_facts_product_url: str = "https://world.openfoodfacts.org/api/v0/product"
    open_food_facts_user_agent: str = "NutritionSearch/1.0"
    fatsecret_client_id: str | None = None
    fatsecret_client_secret: str | None = None
    nutritionix_app_id: str | None = None
    nutritionix_app_key: str | None = None
    supabase_url: str | None = None
    supabase_service_key: str | None = None
    search_state_table: str = "search_state"
    search_page_size: int = 25
    search_timeout_ms: int = 4000
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    def uses_supabase(self) -> bool:
        """Return True when search state should persist to Supabase."""
        return bool(self.supabase_url and self.supabase_service_key)
