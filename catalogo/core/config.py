from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

# Load environment variables from the .env file.
# This ensures that settings can be managed outside the codebase.
load_dotenv()


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    Shared by the categoria service, the producto service and the gateway;
    each process only reads the values it needs.
    """

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    # Project Info
    PROJECT_NAME: str = "Catalogo Microservices"
    VERSION: str = "1.0.0"
    LOG_LEVEL: str = Field("INFO", description="Root log level for every app.")

    # Database Configuration (one database per service)
    CATEGORIA_DATABASE_URL: str = Field(
        "sqlite:///./categorias.db", description="URL for the categoria database."
    )
    PRODUCTO_DATABASE_URL: str = Field(
        "sqlite:///./productos.db", description="URL for the producto database."
    )
    DB_ECHO: bool = False

    # Service locations
    CATEGORIA_SERVICE_URL: str = Field(
        "http://localhost:8081", description="Base URL of the categoria service."
    )
    PRODUCTO_SERVICE_URL: str = Field(
        "http://localhost:8082", description="Base URL of the producto service."
    )
    GATEWAY_URL: str = Field(
        "http://localhost:8080", description="Base URL the web client talks to."
    )

    # Timeouts (seconds)
    CATEGORIA_CLIENT_TIMEOUT_SEC: float = 5.0
    GATEWAY_TIMEOUT_SEC: float = 10.0
    # Subtracted from the budget forwarded in X-Request-Timeout.
    GATEWAY_FORWARD_MARGIN_SEC: float = 0.5
    WEB_CLIENT_TIMEOUT_SEC: float = 10.0

    # Gateway CORS policy
    CORS_ALLOWED_METHODS: List[str] = ["GET", "POST", "PUT", "DELETE", "OPTIONS", "HEAD"]
    CORS_MAX_AGE: int = 3600


# Instantiate the settings object to be used throughout the application.
settings = Settings()
