"""模型基类模块

包含模型的混入类
"""
from sqlalchemy import Column, DateTime
from sqlalchemy.sql import func


class CreatedAtMixin:
    """创建时间混入类"""

    created_at = Column(DateTime, default=func.now(), comment='创建时间')


class TimestampMixin(CreatedAtMixin):
    """时间戳混入类"""

    updated_at = Column(DateTime, default=func.now(), onupdate=func.now(), comment='更新时间')
