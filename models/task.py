"""
任务模型模块
包含任务相关的数据模型定义
"""
from sqlalchemy import Column, Date, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from .base import TimestampMixin
from .database import Base
from .enums import WorkStatus


class Task(Base, TimestampMixin):
    """任务表模型"""
    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, autoincrement=True, comment='任务ID')
    milestone_id = Column(Integer, ForeignKey("milestones.id", ondelete="CASCADE"), index=True, comment='所属里程碑ID')
    name = Column(String(200), nullable=False, comment='任务名称')
    type = Column(String(20), comment='成果类型，如 论文/专利')
    start_date = Column(Date, comment='开始日期')
    end_date = Column(Date, comment='计划结束日期')
    assignee = Column(String(100), comment='负责人姓名')
    status = Column(String(20), default=WorkStatus.NOT_STARTED.value, comment='任务状态')
    notes = Column(Text, comment='备注')
    document = Column(String(255), comment='关联文档路径')

    # 关系
    milestone = relationship("Milestone", back_populates="tasks")
