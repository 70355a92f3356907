"""服务层模块初始化文件

提供服务层的统一导入接口
"""

from .statistics_repository import StatisticsRepository
from .statistics_service import StatisticsService

__all__ = [
    "StatisticsRepository",
    "StatisticsService"
]
