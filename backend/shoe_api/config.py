# Copyright © Amazon.com and Affiliates: This deliverable is considered Developed Content as defined in the AWS Service
# Terms and the SOW between the parties dated 2025.

"""Application configuration."""

from functools import lru_cache

from botocore.config import Config
from pydantic import BaseModel, Field  # type: ignore
from pydantic_settings import BaseSettings, SettingsConfigDict

from shoe_api.version import get_version


class AppConfig(BaseModel):
    """Application configuration."""

    title: str = Field(default='Shoe Catalog API')
    description: str = Field(
        default='CRUD API for shoe records stored in a DynamoDB table'
    )
    version: str = Field(default_factory=get_version)


class APIConfig(BaseModel):
    """API configuration."""

    host: str = Field(default='localhost')
    port: int = Field(default=8000)
    log_level: str = Field(default='INFO')
    not_found_strict: bool = Field(default=False)


class DynamoDBConfig(BaseModel):
    """DynamoDB configuration."""

    endpoint_url: str | None = Field(default=None)
    region: str
    table_name: str


class AWSConfig(BaseModel):
    """AWS configuration."""

    region: str
    endpoint_url: str | None = Field(default=None)
    dynamodb: DynamoDBConfig

    def get_boto_config(self) -> Config:
        """Get botocore config for the AWS clients."""
        return Config(
            region_name=self.region,
            signature_version='v4',
            retries={'max_attempts': 3, 'mode': 'standard'},
        )


class Settings(BaseSettings):
    """Application settings using Pydantic's BaseSettings for automatic env var loading.

    ``REGION`` and ``DYNAMO_DB`` are required; construction fails at startup
    when either is missing.
    """

    # Application Environment
    environment: str = Field(
        default='dev', description='Application environment (e.g., dev, prod)'
    )

    # Store settings
    region: str = Field(description='AWS region of the shoes table')
    dynamo_db: str = Field(description='Name of the shoes table')
    dynamodb_endpoint_url: str | None = Field(default=None)

    # API settings
    api_host: str = Field(default='localhost')
    api_port: int = Field(default=8000)
    log_level: str = Field(default='INFO')

    # Answer 404 instead of an empty 200 when a shoe does not exist
    shoe_not_found_strict: bool = Field(default=False)

    # Configure environment variable loading
    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore',
    )

    def get_app_config(self) -> AppConfig:
        """Get application configuration."""
        return AppConfig()

    def get_api_config(self) -> APIConfig:
        """Get API configuration."""
        return APIConfig(
            host=self.api_host,
            port=self.api_port,
            log_level=self.log_level,
            not_found_strict=self.shoe_not_found_strict,
        )

    def get_dynamodb_config(self) -> DynamoDBConfig:
        """Get DynamoDB configuration."""
        return DynamoDBConfig(
            endpoint_url=self.dynamodb_endpoint_url,
            region=self.region,
            table_name=self.dynamo_db,
        )

    def get_aws_config(self) -> AWSConfig:
        """Get AWS configuration."""
        return AWSConfig(
            region=self.region,
            endpoint_url=self.dynamodb_endpoint_url,
            dynamodb=self.get_dynamodb_config(),
        )

    @property
    def app(self) -> AppConfig:
        """Get application configuration."""
        return self.get_app_config()

    @property
    def api(self) -> APIConfig:
        """Get API configuration."""
        return self.get_api_config()

    @property
    def aws(self) -> AWSConfig:
        """Get AWS configuration."""
        return self.get_aws_config()

    @property
    def dynamodb(self) -> DynamoDBConfig:
        """Get DynamoDB configuration."""
        return self.get_dynamodb_config()


@lru_cache
def get_settings() -> Settings:
    """Get application settings with caching."""
    return Settings()
