import os
from typing import Annotated, List, Optional
from dotenv import load_dotenv
from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode

DEFAULT_CONTACT_FORM_ENDPOINT = "https://formspree.io/f/mdageygv"

# Load environment variables from the correct .env file
env_file = ".env.production" if os.getenv("APP_ENV") == "production" else ".env"
load_dotenv(env_file)

class Settings(BaseSettings):
    APP_ENV: str = "development"
    DEBUG: bool = True
    ALLOWED_ORIGINS: Annotated[List[str], NoDecode] = ["*"]
    LOG_LEVEL: str = "info"

    # Site identity
    SITE_NAME: str = "NFZI Talent"
    CONTACT_EMAIL: str = "contact@nfzitalent.fr"

    # Contact form intake
    CONTACT_FORM_ENDPOINT: str = DEFAULT_CONTACT_FORM_ENDPOINT
    CONTACT_FORM_SOURCE: str = "nfzi-talent-one-page"
    CONTACT_FORM_TIMEOUT_SECONDS: Optional[float] = None  # None waits forever

    @field_validator("ALLOWED_ORIGINS", mode="before")
    def split_origins(cls, value):
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    @field_validator("CONTACT_FORM_ENDPOINT", mode="before")
    def default_endpoint(cls, value):
        # An empty override behaves like an unset one
        if value is None or (isinstance(value, str) and not value.strip()):
            return DEFAULT_CONTACT_FORM_ENDPOINT
        return value.strip() if isinstance(value, str) else value

    @field_validator("CONTACT_FORM_TIMEOUT_SECONDS", mode="before")
    def blank_timeout(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @model_validator(mode="after")
    def validate_production_settings(self):
        """Ensure the intake endpoint is served over TLS in production."""
        if self.APP_ENV == "production" and not self.CONTACT_FORM_ENDPOINT.startswith("https://"):
            raise ValueError(
                f"CONTACT_FORM_ENDPOINT must be an https URL in production, got {self.CONTACT_FORM_ENDPOINT!r}"
            )
        return self

settings = Settings()
