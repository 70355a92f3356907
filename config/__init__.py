"""配置模块

包含应用设置、日志、中间件和异常处理配置
"""

from .settings import Settings, get_settings
from .app_config import create_app
from .middleware import configure_middleware
from .exception_handlers import configure_exception_handlers

__all__ = [
    "Settings",
    "get_settings",
    "create_app",
    "configure_middleware",
    "configure_exception_handlers"
]
