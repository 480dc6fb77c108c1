"""
Settings File Schemas.

One model per file in config/settings/, checked when AppConfig loads:

    application.yaml   -> ApplicationSchema
    database.yaml      -> DatabaseSchema
    logging.yaml       -> LoggingSchema
    features.yaml      -> FeaturesSchema
    observability.yaml -> ObservabilitySchema

Unknown keys are rejected, so a typo in a YAML file fails at startup.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LogFormat = Literal["json", "console"]


class _StrictBase(BaseModel):
    model_config = ConfigDict(extra="forbid")


class ServerSchema(_StrictBase):
    host: str
    port: int = Field(gt=0, le=65535)


class CorsSchema(_StrictBase):
    origins: list[str]


class TimeoutsSchema(_StrictBase):
    """Timeouts in seconds."""

    api_client: int = Field(gt=0)


class ApplicationSchema(_StrictBase):
    """Identity and HTTP surface of the service."""

    name: str
    version: str
    description: str
    environment: str
    debug: bool
    api_prefix: str
    docs_enabled: bool
    server: ServerSchema
    cors: CorsSchema
    timeouts: TimeoutsSchema


class DatabaseSchema(_StrictBase):
    """PostgreSQL connection and pool settings. The password is a secret."""

    host: str
    port: int = Field(gt=0, le=65535)
    name: str
    user: str
    pool_size: int = Field(ge=1)
    max_overflow: int = Field(ge=0)
    pool_timeout: int = Field(gt=0)
    pool_recycle: int
    echo: bool


class ConsoleHandlerSchema(_StrictBase):
    enabled: bool


class FileHandlerSchema(_StrictBase):
    enabled: bool
    path: str
    max_bytes: int = Field(gt=0)
    backup_count: int = Field(ge=0)


class HandlersSchema(_StrictBase):
    console: ConsoleHandlerSchema
    file: FileHandlerSchema


class LoggingSchema(_StrictBase):
    level: LogLevel
    format: LogFormat
    handlers: HandlersSchema


class FeaturesSchema(_StrictBase):
    """Feature flags."""

    api_detailed_errors: bool
    api_request_logging: bool
    security_startup_checks_enabled: bool


class HealthChecksSchema(_StrictBase):
    ready_timeout_seconds: int = Field(gt=0)


class ObservabilitySchema(_StrictBase):
    health_checks: HealthChecksSchema
