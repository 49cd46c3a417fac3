from functools import lru_cache

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict


class MySQLConfig(BaseModel):
    host: str = "localhost"
    user: str = "newsroom"
    passwd: str = ""
    port: int = 3306
    db: str = "newsroom"


class Settings(BaseSettings):
    """
    기본 Configuration
    """

    mysql: MySQLConfig = MySQLConfig()
    # 지정하면 mysql 설정 대신 이 DSN으로 접속 (테스트에서는 sqlite+aiosqlite 사용)
    database_url: str | None = None
    sql_echo: bool = False
    host: str = "0.0.0.0"
    port: int = 8000

    model_config = SettingsConfigDict(
        env_file="newsroom/config/.env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    @property
    def dsn(self) -> str:
        if self.database_url:
            return self.database_url
        return "mysql+asyncmy://{user}:{passwd}@{host}:{port}/{db}?charset=utf8mb4".format(
            user=self.mysql.user,
            passwd=self.mysql.passwd,
            host=self.mysql.host,
            port=self.mysql.port,
            db=self.mysql.db,
        )


@lru_cache
def get_settings():
    return Settings()


settings: Settings = get_settings()
