"""标准响应信封

除统计接口外，其余接口和异常处理器统一返回 {code, message, data, timestamp}
"""
from datetime import datetime
from typing import Any, Optional

from .status_codes import SUCCESS, get_message


def format_timestamp(dt: Optional[datetime] = None) -> str:
    """格式化为 YYYY-MM-DD HH:MM:SS，默认取当前本地时间"""
    return (dt or datetime.now()).strftime("%Y-%m-%d %H:%M:%S")


def standard_response(data: Any = None, code: str = SUCCESS, message: Optional[str] = None) -> dict:
    """生成响应信封，message 为空时取状态码对应的默认消息"""
    return {
        "code": code,
        "message": message if message is not None else get_message(code),
        "data": data,
        "timestamp": format_timestamp()
    }
