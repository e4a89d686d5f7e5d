from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Application
    app_env: str = "development"
    app_debug: bool = True
    app_port: int = 5000
    log_level: str = "INFO"
    api_prefix: str = "/api"
    cors_origins: list[str] = []

    # PostgreSQL (required)
    database_url: str
    create_tables: bool = True

    # Sessions
    session_secret: str = "fullsco-secret-key"
    session_cookie: str = "fullsco_session"
    session_max_age: int = 60 * 60 * 24 * 7

    # Uploads
    upload_dir: str = "./uploads"
    upload_url_prefix: str = "/uploads"
    max_upload_size: int = 10 * 1024 * 1024  # 10 MB

    # Admin seed (created on startup when no user has this username)
    admin_username: str = "admin"
    admin_password: str = ""
    admin_email: str = "admin@fullsco.com"
    admin_full_name: str = "Administrator"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
