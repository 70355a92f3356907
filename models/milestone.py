"""
里程碑模型模块
"""
from sqlalchemy import Column, Date, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from .base import TimestampMixin
from .database import Base
from .enums import MilestoneType, WorkStatus


class Milestone(Base, TimestampMixin):
    """里程碑表模型"""
    __tablename__ = "milestones"

    id = Column(Integer, primary_key=True, autoincrement=True, comment='里程碑ID')
    project_id = Column(Integer, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, index=True, comment='所属项目ID')
    title = Column(String(200), nullable=False, comment='里程碑标题')
    description = Column(Text, comment='里程碑描述')
    type = Column(String(20), default=MilestoneType.NORMAL.value, comment='里程碑类型')
    due_date = Column(Date, nullable=False, comment='计划完成日期')
    status = Column(String(20), default=WorkStatus.NOT_STARTED.value, comment='里程碑状态')
    completion = Column(Float, default=0, comment='完成百分比，0-100')
    weight = Column(Float, default=1, comment='权重')
    notes = Column(Text, comment='备注')

    # 关系
    project = relationship("Project", back_populates="milestones")
    tasks = relationship(
        "Task", back_populates="milestone",
        cascade="all, delete-orphan", passive_deletes=True
    )
