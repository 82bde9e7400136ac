from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
        populate_by_name=True,
    )

    # App settings
    PROJECT_NAME: str = "Trackify"
    API_PREFIX: str = "/api"
    DEBUG: bool = Field(default=False)
    LOG_LEVEL: str = Field(default="INFO")
    CORS_ORIGINS: List[str] = Field(
        default=[
            "http://localhost:3000",
            "http://localhost:8080",
        ]
    )

    # DynamoDB
    DYNAMO_REGION: str = Field(default="eu-west-1")
    DYNAMO_ENDPOINT_URL: Optional[str] = Field(default=None)  # DynamoDB Local, e.g. http://localhost:8000
    DYNAMO_USERS_TABLE: str = Field(default="trackify-users", alias="DYNAMO_TABLE_USERS")
    DYNAMO_CATEGORIES_TABLE: str = Field(default="trackify-categories", alias="DYNAMO_TABLE_CATEGORIES")
    DYNAMO_EXPENSES_TABLE: str = Field(default="trackify-expenses", alias="DYNAMO_TABLE_EXPENSES")
    DYNAMO_COUNTERS_TABLE: str = Field(default="trackify-counters", alias="DYNAMO_TABLE_COUNTERS")
    DYNAMO_CREATE_TABLES: bool = Field(default=False)

    # JWT Authentication
    JWT_SECRET_KEY: str = Field(default="change-me-in-production", alias="JWT_SECRET")
    JWT_ALGORITHM: str = "HS256"
    JWT_ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24 * 7  # 7 days

    # Password hashing
    BCRYPT_ROUNDS: int = Field(default=12)

    # Reports
    # Historical clients saw every category at 100%; keep that formula on demand.
    SUMMARY_LEGACY_PERCENTAGE: bool = Field(default=False)


settings = Settings()
