"""Application configuration loaded from environment variables."""

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Typed settings object shared by the pipeline and worker processes."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    sanitize_timeout_seconds: float = Field(
        default=25.0, gt=0, alias="SANITIZE_TIMEOUT_SECONDS"
    )
    single_row_threshold: int = Field(default=900, ge=0, alias="SINGLE_ROW_THRESHOLD")
    max_matrix_cells: int = Field(default=100_000_000, gt=0, alias="MAX_MATRIX_CELLS")
    matrix_max_workers: int | None = Field(default=None, gt=0, alias="MATRIX_MAX_WORKERS")

    rabbitmq_user: str = Field(default="digits", alias="RABBITMQ_USER")
    rabbitmq_password: str = Field(default="digits", alias="RABBITMQ_PASSWORD")
    rabbitmq_host: str = Field(default="rabbitmq", alias="RABBITMQ_HOST")
    rabbitmq_port: int = Field(default=5672, alias="RABBITMQ_PORT")
    rabbitmq_vhost: str = Field(default="/", alias="RABBITMQ_VHOST")

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_format: str = Field(default="console", alias="LOG_FORMAT")
    service_name: str = Field(default="digit-matrix", alias="SERVICE_NAME")
    environment: str = Field(default="local", alias="ENVIRONMENT")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def celery_broker_url(self) -> str:
        """Build Celery AMQP broker URL from RabbitMQ settings."""
        vhost = self.rabbitmq_vhost.lstrip("/")
        if vhost:
            path = vhost
            suffix = f"/{path}"
        else:
            suffix = "//"
        return (
            f"amqp://{self.rabbitmq_user}:{self.rabbitmq_password}"
            f"@{self.rabbitmq_host}:{self.rabbitmq_port}{suffix}"
        )


settings = Settings()
