from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str = "sqlite:///./degreeplanner.db"
    environment: str = "development"
    log_level: str = "INFO"
    log_dir: str | None = None
    cors_origins: list[str] = ["*"]

    # Constraints applied when an extracted catalog is mapped to a plan request
    default_min_credits: float = 12
    default_max_credits: float = 17
    default_target_grad_term: str = "Spring 2027"
    default_include_summers: bool = False
    default_total_credits: float = 120

    class Config:
        env_file = ".env"
        env_prefix = "DEGREEPLANNER_"
        extra = "ignore"


settings = Settings()
