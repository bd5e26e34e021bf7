import os
from dataclasses import dataclass
from functools import lru_cache

import boto3
import redis
from dotenv import load_dotenv

load_dotenv()

SUPPORTED_BACKENDS = ("dynamodb", "redis")


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Store
    region: str = os.getenv("REGION", "us-east-1")
    cast_table_name: str = os.getenv("CAST_TABLE_NAME", "MovieCast")
    movie_table_name: str = os.getenv("MOVIE_TABLE_NAME", "Movies")
    cast_role_index_name: str = os.getenv("CAST_ROLE_INDEX_NAME", "roleIx")
    store_backend: str = os.getenv("STORE_BACKEND", "dynamodb")

    # DynamoDB (local endpoint, e.g. http://localhost:8000 for dynamodb-local)
    dynamodb_endpoint_url: str | None = os.getenv("DYNAMODB_ENDPOINT_URL")

    # Redis
    redis_url: str = os.getenv("REDIS_URL", "redis://localhost:6379")
    redis_password: str | None = os.getenv("REDIS_PASSWORD")

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))
    api_reload: bool = os.getenv("API_RELOAD", "true").lower() == "true"

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_json: bool = os.getenv("LOG_JSON", "true").lower() == "true"

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.store_backend not in SUPPORTED_BACKENDS:
            raise ValueError(
                f"STORE_BACKEND must be one of {list(SUPPORTED_BACKENDS)}, "
                f"got {self.store_backend!r}"
            )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()


@lru_cache
def get_dynamodb_resource():
    """Create the DynamoDB resource once per process and reuse it.

    The resource holds no per-request state, so every repository and
    every invocation in this process can share it.
    """
    return boto3.resource(
        "dynamodb",
        region_name=settings.region,
        endpoint_url=settings.dynamodb_endpoint_url,
    )


def get_redis_client() -> redis.Redis:
    """Create a Redis client instance."""
    return redis.from_url(
        settings.redis_url,
        password=settings.redis_password,
        decode_responses=False,
    )
