"""Storefront Configuration"""

from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Klarna Checkout Demo"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 3001
    frontend_url: str = "http://localhost:3000"

    # Klarna API credentials (playground by default)
    klarna_api_url: str = "https://api.playground.klarna.com"
    klarna_username: Optional[str] = None
    klarna_password: Optional[str] = None

    # Seconds before a provider call is abandoned
    provider_timeout: float = 10.0

    # Purchase defaults sent with every order request
    purchase_country: str = "SE"
    locale: str = "en-SE"
    default_country: str = "SE"
    product_url: str = "https://example.com/product"

    # Optional JSON catalog replacing the built-in products
    catalog_path: Optional[str] = None

    @property
    def klarna_configured(self) -> bool:
        """Check if Klarna credentials are configured"""
        return bool(self.klarna_username and self.klarna_password)


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
