from pathlib import Path
from typing import List

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'tm-order'
    VERSION: str = '0.1.0'
    DEBUG: bool = True  # Set to False in production
    API_PREFIX: str = '/tm-order'

    # Application
    APPLICATION_BASE_URL: str = 'http://localhost:8000/tm-order'
    APPLICATION_TIMEZONE: str = 'Asia/Jakarta'
    APPLICATION_TIMEOUT_SECONDS: float = 30.0  # Budget for a single workflow invocation

    # Order
    ORDER_EXPIRE_DURATION_SECONDS: int = 86400
    ORDER_EXPIRE_QUEUE: str = 'expire-order'
    SERVICE_CHARGE_PERCENTAGE: float = 5.0
    TAX_PERCENTAGE: float = 10.0
    ORDER_PAID_TOPIC: str = 'order-paid'

    # Database
    POSTGRES_SERVER: str = 'localhost'
    POSTGRES_USER: str = 'postgres'
    POSTGRES_PASSWORD: SecretStr = SecretStr('postgres')
    POSTGRES_DB: str = 'tm_order'
    POSTGRES_PORT: int = 5432

    @property
    def DATABASE_URL_ASYNC(self) -> str:
        password = self.POSTGRES_PASSWORD.get_secret_value()
        return f'postgresql+asyncpg://{self.POSTGRES_USER}:{password}@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}'

    @property
    def DATABASE_URL_SYNC(self) -> str:
        password = self.POSTGRES_PASSWORD.get_secret_value()
        return f'postgresql://{self.POSTGRES_USER}:{password}@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}'

    # Database connection pool
    DB_POOL_SIZE: int = 10
    DB_POOL_MAX_OVERFLOW: int = 5
    DB_POOL_TIMEOUT: int = 30
    DB_POOL_RECYCLE: int = 3600
    DB_POOL_PRE_PING: bool = True

    # Security
    SECRET_KEY: SecretStr = SecretStr('test_secret_key_change_in_production')
    ALGORITHM: str = 'HS256'

    # CORS
    BACKEND_CORS_ORIGINS: List[str] = []  # add your frontend URL here

    @field_validator('BACKEND_CORS_ORIGINS', mode='before')
    @classmethod
    def assemble_cors_origins(cls, v: str | List[str]) -> List[str]:
        if isinstance(v, str) and not v.startswith('['):
            return [i.strip() for i in v.split(',')]
        elif isinstance(v, list):
            return v
        return []

    # Midtrans payment gateway
    MIDTRANS_BASE_URL: str = 'https://api.sandbox.midtrans.com'
    MIDTRANS_SERVER_KEY: SecretStr = SecretStr('')  # base64 of "<server_key>:"
    MIDTRANS_TIMEOUT_SECONDS: float = 15.0

    # Google Cloud Tasks
    CLOUD_TASKS_BASE_URL: str = 'https://cloudtasks.googleapis.com'
    CLOUD_TASKS_PROJECT_ID: str = 'tm-order'
    CLOUD_TASKS_LOCATION_ID: str = 'asia-southeast2'
    CLOUD_TASKS_ACCESS_TOKEN: SecretStr = SecretStr('')
    CLOUD_TASKS_TIMEOUT_SECONDS: float = 10.0

    # Kafka Configuration
    KAFKA_BOOTSTRAP_SERVERS: str = 'localhost:9092'
    KAFKA_ACKS: str = 'all'
    KAFKA_RETRIES: int = 3
    KAFKA_LINGER_MS: int = 50
    KAFKA_COMPRESSION_TYPE: str = 'snappy'

    # Observability
    OTEL_EXPORTER_OTLP_ENDPOINT: str | None = None
    OTEL_CONSOLE_EXPORT: bool = False


settings = Settings()  # type: ignore
