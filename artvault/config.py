"""Configuration settings for the storefront."""
from pydantic_settings import BaseSettings
from pydantic import Field
from dotenv import load_dotenv

# Load .env before the settings object is built so overrides apply at import-time.
load_dotenv()


class Settings(BaseSettings):
    """Storefront settings loaded from environment variables."""
    
    project_name: str = "ArtVault Storefront"
    api_version: str = "v1"
    # Path to a JSON catalog manifest (empty = bundled manifest)
    catalog_path: str = Field(default="", alias="CATALOG_PATH")
    # Fixed delay (seconds) of the simulated network acknowledgment
    simulated_delay: float = Field(default=1.5, ge=0.0, alias="SIMULATED_DELAY")
    # How long the newsletter thank-you message stays visible
    newsletter_message_seconds: float = Field(default=4.0, ge=0.0, alias="NEWSLETTER_MESSAGE_SECONDS")
    # Number shown by the call picker
    shop_phone_number: str = Field(default="+234 801 234 5678", alias="SHOP_PHONE_NUMBER")
    # Verbose console tracing
    debug: bool = Field(default=False, alias="SHOP_DEBUG")
    # Address served by `python -m artvault`
    host: str = Field(default="127.0.0.1", alias="SHOP_HOST")
    port: int = Field(default=8000, alias="SHOP_PORT")
    
    class Config:
        env_file = ".env"
        case_sensitive = False
        populate_by_name = True
        extra = "ignore"


settings = Settings()
