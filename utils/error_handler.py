"""错误处理工具模块

提供统计报表查询的异常捕获与日志记录
"""
import logging
from functools import wraps

from utils.exceptions import StatisticsError

logger = logging.getLogger(__name__)


def statistics_report(report: str):
    """统计报表错误处理装饰器

    查询或数据转换过程中的任何异常都转换为 StatisticsError，
    保证报表要么完整返回要么整体失败。
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except StatisticsError:
                raise
            except Exception as e:
                logger.error(f"统计报表查询失败 [{report}]: {e}", exc_info=True)
                raise StatisticsError(report, e) from e
        return wrapper
    return decorator
