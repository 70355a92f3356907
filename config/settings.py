"""应用设置模块

从环境变量和 .env 文件加载配置
"""
from functools import lru_cache
from typing import List, Optional

from dotenv import load_dotenv
from pydantic_settings import BaseSettings

load_dotenv()


class Settings(BaseSettings):
    # 应用配置
    APP_NAME: str = "LabMan 科研项目管理系统"
    APP_DESCRIPTION: str = "科研项目统计分析服务"
    VERSION: str = "1.0.0"
    ENVIRONMENT: str = "development"
    DEBUG: bool = False

    # 服务器配置
    HOST: str = "127.0.0.1"
    PORT: int = 3000

    # 数据库配置
    DATABASE_URL: str = "sqlite:///./labman.db"
    DATABASE_ECHO: bool = False  # 是否显示SQLAlchemy的SQL日志
    INIT_DB_ON_STARTUP: bool = True

    # 日志配置
    LOG_LEVEL: str = "INFO"
    LOG_ENABLE_COLORS: bool = True
    LOG_FILE: Optional[str] = None
    LOG_MAX_SIZE: int = 10 * 1024 * 1024  # 10 MB
    LOG_BACKUP_COUNT: int = 5
    LOG_JSON: bool = False  # 文件日志输出为JSON行

    # CORS配置
    CORS_ORIGINS: List[str] = ["*"]

    # 默认管理员
    ADMIN_USERNAME: str = "admin"
    ADMIN_PASSWORD: str = "password"

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """获取全局设置实例"""
    return Settings()
