from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str = "postgresql+asyncpg://postgres:postgres@db:5432/geodata"
    db_pool_size: int = 20
    db_max_overflow: int = 30
    db_pool_timeout: int = 60
    db_command_timeout: float = 30.0  # seconds, enforced by asyncpg

    default_page_limit: int = 20
    max_page_limit: int = 100

    cors_origins: list[str] = ["http://localhost:3000"]
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"

    class Config:
        env_file = ".env"


settings = Settings()
