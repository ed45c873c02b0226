from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

load_dotenv()


class Settings(BaseSettings):
    # Application settings
    app_name: str = "Blog GraphQL API"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: str = "development"

    # Database settings
    database_url: str = "sqlite+aiosqlite:///./blog.db"

    # GraphQL settings
    graphql_path: str = "/graphql"
    graphql_ide: bool = True
    graphql_introspection: bool = True

    # Logging settings
    log_level: str = "INFO"
    log_json: bool = False

    # Server settings
    host: str = "0.0.0.0"
    port: int = 4000

    # CORS settings
    allowed_origins: list[str] = ["http://localhost:3000", "http://localhost:4000"]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


settings = Settings()
