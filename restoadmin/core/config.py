from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: int = 5432
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = "postgres"
    DB_NAME: str = "restoadmin"

    # tam URL verilirse POSTGRES_* alanları yok sayılır (testlerde sqlite)
    DATABASE_URL: Optional[str] = None

    SECRET_KEY: str = "CHANGE_ME"
    ALGORITHM: str = "HS256"

    BCRYPT_ROUNDS: int = 12
    PASSWORD_MIN_LENGTH: int = 6

    SESSION_KEY: str = "user"
    SESSION_COOKIE_SECURE: bool = False  # prod'da True
    LOGIN_PATH: str = "/login"

    LOG_LEVEL: str = "INFO"
    SEED_DEFAULT_DATA: bool = True
    ENV: str = "local"

    class Config:
        env_file = ".env"

    @property
    def DB_URL(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"postgresql+psycopg2://"
            f"{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
            f"@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}"
            f"/{self.DB_NAME}"
        )


settings = Settings()
