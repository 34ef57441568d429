from os import getenv
from dotenv import load_dotenv

load_dotenv()

class Config:

    ALLOWED_ORIGINS: list = getenv("ALLOWED_ORIGINS", "http://localhost:3000").split(",")


    POSTGRES_USER: str = getenv("POSTGRES_USER")
    POSTGRES_PASSWORD: str = getenv("POSTGRES_PASSWORD")
    POSTGRES_DB: str = getenv("POSTGRES_DB")
    POSTGRES_HOST: str = getenv("POSTGRES_HOST", "db")
    POSTGRES_PORT: str = getenv("POSTGRES_PORT", "5432")

    @property
    def DATABASE_URL(self) -> str:
        return getenv(
            "DATABASE_URL",
            f"postgresql+asyncpg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
        )

    # Схема, в которой лежат таблицы анонсов ("" = без схемы)
    DB_SCHEMA: str = getenv("DB_SCHEMA", "diario_republica")

    # Листинг
    DEFAULT_PAGE_SIZE: int = int(getenv("DEFAULT_PAGE_SIZE", "21"))

    # Функция БД, пересчитывающая expired; пусто = пересчёт в приложении
    EXPIRED_REFRESH_FUNCTION: str = getenv("EXPIRED_REFRESH_FUNCTION", "")

    # Логи
    LOG_FILE: str = getenv("LOG_FILE", "app.log")
    LOG_LEVEL: str = getenv("LOG_LEVEL", "INFO")

    # Порт приложения
    APP_PORT: int = int(getenv("APP_PORT", "8000"))

    def validate(self) -> None:
        """Проверяет наличие обязательных переменных окружения."""
        if getenv("DATABASE_URL"):
            return
        required_vars = {
            "POSTGRES_USER": self.POSTGRES_USER,
            "POSTGRES_PASSWORD": self.POSTGRES_PASSWORD,
            "POSTGRES_DB": self.POSTGRES_DB,
        }
        missing_vars = [key for key, value in required_vars.items() if not value]
        if missing_vars:
            raise ValueError(
                f"Missing required environment variables: DATABASE_URL or {', '.join(missing_vars)}"
            )

settings = Config()
settings.validate()
