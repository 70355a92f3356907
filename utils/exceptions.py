"""统一异常处理模块

定义系统中使用的自定义异常类
"""
from typing import Any

from utils.status_codes import DATA_GENERATION_ERROR, STATISTICS_ERROR, VALIDATION_ERROR


class BusinessException(Exception):
    """业务异常基类"""

    def __init__(self, code: str, message: str, data: Any = None, status_code: int = 400):
        self.code = code
        self.message = message
        self.data = data
        self.status_code = status_code
        super().__init__(message)


class ValidationException(BusinessException):
    """数据验证异常"""

    def __init__(self, message: str, data: Any = None):
        super().__init__(
            code=VALIDATION_ERROR,
            message=message,
            data=data,
            status_code=400
        )


class StatisticsError(BusinessException):
    """统计报表查询失败

    每个报表要么完整返回，要么抛出该异常，不返回部分结果
    """

    def __init__(self, report: str, cause: Exception):
        self.report = report
        super().__init__(
            code=STATISTICS_ERROR,
            message=f"Error getting {report}: {cause}",
            status_code=500
        )


class DataGenerationException(BusinessException):
    """测试数据生成异常"""

    def __init__(self, message: str, data: Any = None):
        super().__init__(
            code=DATA_GENERATION_ERROR,
            message=message,
            data=data,
            status_code=500
        )
