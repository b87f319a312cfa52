from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    db_host: str = "host.docker.internal"
    db_port: int = 5432
    db_database: str = "content_fetch"
    db_username: str = "content_fetch"
    db_password: str = "secret"
    db_pool_max_size: int = 10

    max_request_attempts: int = 3
    request_poll_interval_seconds: int = 5
    request_lock_timeout_seconds: int = 600

    fetch_engine: str = "http"
    fetch_timeout_seconds: int = 30
    fetch_user_agent: str = "Mozilla/5.0 (compatible; content-fetch/1.0)"
    renderer_url: str = ""
    renderer_timeout_seconds: int = 90

    content_store_engine: str = "local"
    content_store_root: str = "/app/files"
    content_store_prefix: str = "originalContent"
    content_hash_algorithm: str = "sha256"

    event_sink_engine: str = "log"

    default_source: str = "puppeteer-parse"
